"""
Session Manager for NeoCalc
One calculator engine (and history tape) per browser session
"""
import threading
import uuid
from collections import OrderedDict

import config
from calculator import Calculator
from history_manager import HistoryManager
from logging_config import get_logger

logger = get_logger("session_manager")


class SessionManager:
    def __init__(self, max_sessions=config.MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions = OrderedDict()
        # The web server is threaded; engines themselves are not
        self._lock = threading.RLock()

    @staticmethod
    def new_session_id():
        return uuid.uuid4().hex

    def get_calculator(self, session_id):
        """Get the session's engine, creating it on first use"""
        with self._lock:
            calculator = self._sessions.get(session_id)
            if calculator is None:
                calculator = Calculator(history=HistoryManager())
                self._sessions[session_id] = calculator
                logger.info("Created calculator session %s", session_id)
                self._evict()
            else:
                self._sessions.move_to_end(session_id)
            return calculator

    def _evict(self):
        while len(self._sessions) > self.max_sessions:
            old_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted calculator session %s", old_id)

    def process_token(self, session_id, token):
        """Run one token through the session's engine.

        Returns the display string and the state snapshot.
        """
        with self._lock:
            calculator = self.get_calculator(session_id)
            display = calculator.process_token(token)
            return display, calculator.get_state()

    def get_state(self, session_id):
        with self._lock:
            return self.get_calculator(session_id).get_state()

    def get_calculations(self, session_id, limit=50):
        with self._lock:
            return self.get_calculator(session_id).history.get_calculation_history(limit)

    def clear_calculations(self, session_id):
        with self._lock:
            self.get_calculator(session_id).history.clear_calculation_history()

    def drop_session(self, session_id):
        """Forget a session; returns True if it existed"""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __contains__(self, session_id):
        with self._lock:
            return session_id in self._sessions

    def __len__(self):
        with self._lock:
            return len(self._sessions)

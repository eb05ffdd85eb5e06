import pytest

from calculator import Calculator
from history_manager import HistoryManager


@pytest.fixture
def calculator():
    return Calculator(history=HistoryManager())


@pytest.fixture
def press(calculator):
    """Type a key sequence; single characters unless given as a list"""
    def _press(keys):
        tokens = list(keys) if isinstance(keys, str) else keys
        return calculator.press(*tokens)
    return _press


@pytest.fixture
def client():
    import api
    api.app.config['TESTING'] = True
    api.session_manager = api.SessionManager()
    with api.app.test_client() as test_client:
        yield test_client

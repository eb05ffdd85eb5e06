"""
Calculator Engine for NeoCalc
Turns key tokens into display updates, one token at a time
"""
import math
from enum import Enum

import config
import keymap
from keymap import TokenClass
from logging_config import get_logger
from operands import Operand, coerce_number, parse_float
from result_formatter import format_result

logger = get_logger("calculator")


class State(Enum):
    IDLE = "idle"
    ENTERING_FIRST_OPERAND = "entering_first_operand"
    OPERATOR_ARMED = "operator_armed"
    AWAITING_SECOND_OPERAND = "awaiting_second_operand"
    ENTERING_SECOND_OPERAND = "entering_second_operand"
    RESULT_DISPLAYED = "result_displayed"
    ERRORED = "errored"


ENTERING_STATES = frozenset({State.ENTERING_FIRST_OPERAND, State.ENTERING_SECOND_OPERAND})
ARMED_STATES = frozenset({State.OPERATOR_ARMED, State.RESULT_DISPLAYED, State.ERRORED})


def _add(left, right):
    # Lenient parse on purpose: "+" must never concatenate operand text
    return parse_float(left) + parse_float(right)


def _subtract(left, right):
    return coerce_number(left) - coerce_number(right)


def _multiply(left, right):
    return coerce_number(left) * coerce_number(right)


def _divide(left, right):
    try:
        return coerce_number(left) / coerce_number(right)
    except ZeroDivisionError:
        return math.nan


OPERATIONS = {
    "+": _add,
    "-": _subtract,
    "*": _multiply,
    "/": _divide,
}


class Calculator:
    def __init__(self, history=None):
        self.history = history
        self.reset()

    def reset(self):
        """Return to the freshly constructed state"""
        self.operand_a = None
        self.operand_b = None
        self.result = None
        self.pending_operator = ""
        self.state = State.IDLE
        self.display = "0"

    # ── Flags (derived from the state) ────────────────────────────────────
    @property
    def entering_operand(self):
        return self.state in ENTERING_STATES

    @property
    def operator_armed(self):
        return self.state in ARMED_STATES

    @property
    def result_ready(self):
        return self.state is State.RESULT_DISPLAYED

    @property
    def errored(self):
        return self.state is State.ERRORED

    # ── Entry point ───────────────────────────────────────────────────────
    def process_token(self, token):
        """Apply one key token and return the string to display.

        Tokens the classifier does not admit leave everything unchanged.
        """
        token_class = keymap.classify_token(token)
        if token_class is None:
            logger.debug("Ignored token %r", token)
            return self.display

        token = keymap.normalize_token(token)
        if token_class is TokenClass.OPERATOR:
            self._handle_operator(token)
        else:
            self._handle_operand(token)
        return self.display

    def press(self, *tokens):
        """Feed several tokens in order, returning the final display"""
        for token in tokens:
            self.process_token(token)
        return self.display

    # ── Operator class: + - * / = Delete ──────────────────────────────────
    def _handle_operator(self, token):
        if token == keymap.DELETE:
            self.reset()
            return

        if self.operator_armed:
            if token == keymap.EQUALS:
                return
            self.pending_operator = token
            if self.state is State.RESULT_DISPLAYED:
                self.state = State.OPERATOR_ARMED
            return

        if not self.entering_operand:
            return

        if token == keymap.EQUALS:
            if self.operand_a is None:
                return
            self.operand_b = Operand.from_text(self.display)
            ok = self._evaluate()
            self.state = State.RESULT_DISPLAYED if ok else State.ERRORED
        elif self.operand_a is None:
            self.operand_a = Operand.from_text(self.display)
            self.pending_operator = token
            self.display = "0"
            self.state = State.OPERATOR_ARMED
        else:
            # Chained operator: fold the pending pair, keep going with the new one
            self.operand_b = Operand.from_text(self.display)
            ok = self._evaluate()
            self.pending_operator = token
            self.state = State.OPERATOR_ARMED if ok else State.ERRORED

    def _evaluate(self):
        """Apply the pending operator to both operands.

        The formatted result (or the error marker) becomes operand A and is
        shown on the display. Returns False on an arithmetic fault.
        """
        left, right = self.operand_a, self.operand_b
        expression = f"{left} {self.pending_operator} {right}"
        operation = OPERATIONS.get(self.pending_operator)
        value = operation(left, right) if operation else math.nan

        if math.isfinite(value):
            self.result = format_result(value)
            ok = True
        else:
            logger.info("Arithmetic fault evaluating %s", expression)
            self.result = config.ERROR_MARKER
            ok = False

        self.operand_a = Operand.from_text(self.result)
        self.display = self.result
        if self.history is not None:
            self.history.add_calculation(expression, self.result)
        logger.debug("%s = %s", expression, self.result)

        self.operand_b = None
        self.result = None
        return ok

    # ── Operand class: digits . Backspace ─────────────────────────────────
    def _handle_operand(self, token):
        if self.state in (State.RESULT_DISPLAYED, State.ERRORED):
            # Type-over: a new number after a result starts a new calculation
            self.reset()

        if not self.entering_operand:
            self.display = "0"
            if token == keymap.DECIMAL_POINT:
                self.display = "0."
                self._settle(entering=True)
            elif token == keymap.BACKSPACE:
                self._settle(entering=False)
            else:
                self.display = token
                self._settle(entering=True)
            return

        if token == keymap.DECIMAL_POINT:
            if keymap.DECIMAL_POINT in self.display:
                return
            if len(self.display) >= config.DECIMAL_MAX_LENGTH:
                return
            self.display += token
        elif token == keymap.BACKSPACE:
            self.display = self.display[:-1]
            if not self.display:
                self.display = "0"
                self._settle(entering=False)
        else:
            if len(self.display) >= config.DISPLAY_MAX_LENGTH:
                return
            self.display += token

    def _settle(self, entering):
        # Operand-class input always disarms a pending operator
        if self.operand_a is None:
            self.state = State.ENTERING_FIRST_OPERAND if entering else State.IDLE
        else:
            self.state = State.ENTERING_SECOND_OPERAND if entering else State.AWAITING_SECOND_OPERAND

    # ── Introspection ─────────────────────────────────────────────────────
    def get_state(self):
        """JSON-ready snapshot of everything the engine holds"""
        return {
            'state': self.state.value,
            'display': self.display,
            'operand_a': None if self.operand_a is None else self.operand_a.text,
            'operand_b': None if self.operand_b is None else self.operand_b.text,
            'result': self.result,
            'pending_operator': self.pending_operator,
            'entering_operand': self.entering_operand,
            'operator_armed': self.operator_armed,
            'result_ready': self.result_ready,
            'errored': self.errored,
        }

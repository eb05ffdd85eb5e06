"""
Key Token Classifier for NeoCalc
Decides which raw key identifiers reach the calculator engine
"""
from enum import Enum


class TokenClass(Enum):
    OPERATOR = "operator"
    OPERAND = "operand"


DIGITS = "0123456789"
DECIMAL_POINT = "."
BACKSPACE = "Backspace"
DELETE = "Delete"
EQUALS = "="
ARITHMETIC_OPERATORS = ("+", "-", "*", "/")

OPERATOR_TOKENS = ARITHMETIC_OPERATORS + (EQUALS, DELETE)
OPERAND_TOKENS = tuple(DIGITS) + (DECIMAL_POINT, BACKSPACE)

# Aliases accepted from keyboards before classification
ALIASES = {
    "Enter": EQUALS,
}

# tkinter keysyms that don't carry the token in event.char
TK_KEYSYMS = {
    "Return": EQUALS,
    "KP_Enter": EQUALS,
    "BackSpace": BACKSPACE,
    "Delete": DELETE,
    "Escape": DELETE,
    "KP_Add": "+",
    "KP_Subtract": "-",
    "KP_Multiply": "*",
    "KP_Divide": "/",
    "KP_Decimal": DECIMAL_POINT,
}


def normalize_token(token):
    """Map aliases (Enter) onto their canonical token"""
    return ALIASES.get(token, token)


def classify_token(token):
    """Classify a raw key token, or return None if it is not admitted"""
    if not isinstance(token, str):
        return None
    token = normalize_token(token)
    if token in OPERATOR_TOKENS:
        return TokenClass.OPERATOR
    if token in OPERAND_TOKENS:
        return TokenClass.OPERAND
    return None


def validate_input(token):
    """True when the token is one the engine understands"""
    return classify_token(token) is not None


def is_digit(token):
    return isinstance(token, str) and len(token) == 1 and token in DIGITS


def token_from_tk_event(char, keysym):
    """Translate a tkinter key event into an engine token (or None)"""
    if keysym in TK_KEYSYMS:
        return TK_KEYSYMS[keysym]
    if keysym.startswith("KP_") and keysym[3:] in tuple(DIGITS):
        return keysym[3:]
    if char in ("\r", "\n"):
        return EQUALS
    if char and validate_input(char):
        return normalize_token(char)
    return None

import pytest

import keymap
from keymap import TokenClass, classify_token, normalize_token, token_from_tk_event, validate_input


@pytest.mark.parametrize("token", ["+", "-", "*", "/", "=", "Delete", "Enter"])
def test_operator_class(token):
    assert classify_token(token) is TokenClass.OPERATOR


@pytest.mark.parametrize("token", list("0123456789") + [".", "Backspace"])
def test_operand_class(token):
    assert classify_token(token) is TokenClass.OPERAND


@pytest.mark.parametrize("token", ["", "a", "x", "%", "10", "Escape", "enter", " ", "Shift", None, 7])
def test_unrecognized_tokens_are_rejected(token):
    assert classify_token(token) is None
    assert not validate_input(token)


def test_enter_normalizes_to_equals():
    assert normalize_token("Enter") == "="
    assert normalize_token("7") == "7"


def test_is_digit():
    assert keymap.is_digit("0")
    assert not keymap.is_digit("12")
    assert not keymap.is_digit(".")


@pytest.mark.parametrize("char, keysym, expected", [
    ("7", "7", "7"),
    ("", "KP_7", "7"),
    ("\r", "Return", "="),
    ("", "KP_Enter", "="),
    ("\x08", "BackSpace", "Backspace"),
    ("\x7f", "Delete", "Delete"),
    ("\x1b", "Escape", "Delete"),
    ("*", "asterisk", "*"),
    ("", "KP_Divide", "/"),
    ("=", "equal", "="),
    ("a", "a", None),
    ("", "Shift_L", None),
])
def test_token_from_tk_event(char, keysym, expected):
    assert token_from_tk_event(char, keysym) == expected

"""
Operand values for the NeoCalc engine

Operands are kept as the text that was on screen when they were captured,
tagged with what that text is. Numeric conversion is always explicit:

    parse_float    lenient, reads the longest numeric prefix ("12abc" -> 12,
                   "" -> nan). Used by addition.
    coerce_number  strict, the whole text must be numeric ("" -> 0,
                   "12abc" -> nan). Used by subtraction, multiplication and
                   division.
"""
import math
import re
from dataclasses import dataclass
from enum import Enum

import config

_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_STRICT_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


class OperandKind(Enum):
    NUMBER = "number"
    ERROR = "error"
    EMPTY = "empty"


@dataclass(frozen=True)
class Operand:
    kind: OperandKind
    text: str = ""

    @classmethod
    def from_text(cls, text):
        """Tag display text as an operand"""
        if text == config.ERROR_MARKER:
            return cls.error()
        if text == "":
            return cls.empty()
        return cls(OperandKind.NUMBER, text)

    @classmethod
    def error(cls):
        return cls(OperandKind.ERROR, config.ERROR_MARKER)

    @classmethod
    def empty(cls):
        return cls(OperandKind.EMPTY, "")

    @property
    def is_error(self):
        return self.kind is OperandKind.ERROR

    def __str__(self):
        return self.text


def parse_float(operand):
    """Lenient numeric parse, reading the longest numeric prefix"""
    if operand.kind is not OperandKind.NUMBER:
        return math.nan
    text = operand.text.strip()
    if text.lstrip("+-").startswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return math.nan
    return float(match.group(0))


def coerce_number(operand):
    """Strict numeric coercion of the whole operand text"""
    if operand.kind is OperandKind.EMPTY:
        return 0.0
    if operand.kind is OperandKind.ERROR:
        return math.nan
    text = operand.text.strip()
    if text == "":
        return 0.0
    if text in ("Infinity", "+Infinity", "-Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    if not _STRICT_NUMBER.match(text):
        return math.nan
    return float(text)

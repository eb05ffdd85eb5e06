"""
Result Formatter for NeoCalc
Fits numeric results into the 8 character display
"""
from decimal import Decimal, ROUND_HALF_UP, localcontext

import config


def _significant(value, digits):
    """Round abs(value) to `digits` significant digits, ties away from zero.

    Returns the digit string and the decimal exponent of its first digit.
    """
    with localcontext() as ctx:
        ctx.prec = 1200
        exact = abs(Decimal(value))
        if exact == 0:
            return "0" * digits, 0
        exponent = exact.adjusted()
        scaled = exact.scaleb(digits - 1 - exponent).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        if scaled >= 10 ** digits:
            exponent += 1
            scaled = exact.scaleb(digits - 1 - exponent).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return str(int(scaled)), exponent


def _sign(value):
    return "-" if value < 0 else ""


def _exponential(sign, digits, exponent):
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{exponent:+d}"


def to_exponential(value, fraction_digits):
    """Exponential notation with a fixed number of fractional digits (1.23e+9)"""
    digits, exponent = _significant(value, fraction_digits + 1)
    return _exponential(_sign(value), digits, exponent)


def to_precision(value, precision):
    """Round to `precision` significant digits.

    Switches to exponential notation when the exponent is below -6 or not
    smaller than the precision, the way browsers render Number.toPrecision.
    """
    digits, exponent = _significant(value, precision)
    sign = _sign(value)
    if exponent < -6 or exponent >= precision:
        return _exponential(sign, digits, exponent)
    if exponent >= 0:
        integer, fraction = digits[:exponent + 1], digits[exponent + 1:]
        return sign + integer + ("." + fraction if fraction else "")
    return sign + "0." + "0" * (-exponent - 1) + digits


def number_to_string(value):
    """Shortest plain rendering of a float; integral values lose their '.0'"""
    if value == 0:
        return "0"
    exact = Decimal(repr(abs(float(value)))).normalize()
    exponent = exact.adjusted()
    if -7 < exponent < 21:
        body = format(exact, "f")
    else:
        body = f"{exact.scaleb(-exponent)}e{exponent:+d}"
    return _sign(value) + body


def is_exponential(text):
    return "e" in text


def _fit_fixed_point(value):
    # Highest precision that still renders as a plain number within the screen
    for precision in range(config.GENERAL_PRECISION, 0, -1):
        rendered = to_precision(value, precision)
        if not is_exponential(rendered) and len(rendered) <= config.DISPLAY_MAX_LENGTH:
            return rendered
    return to_exponential(value, config.SCIENTIFIC_DIGITS)


def tidy(rendered):
    """Shorten the mantissa of exponential renderings, else strip trailing zeros"""
    if is_exponential(rendered):
        mantissa, exponent = rendered.split("e")
        mantissa = to_precision(float(mantissa), config.MANTISSA_PRECISION)
        return f"{mantissa}e{exponent}"
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def format_result(value):
    """Render a finite numeric result for the display"""
    magnitude = abs(value)

    if magnitude > config.SCIENTIFIC_UPPER:
        rendered = to_exponential(value, config.SCIENTIFIC_DIGITS)
    elif 0 < magnitude < config.SCIENTIFIC_LOWER:
        rendered = to_exponential(value, config.SCIENTIFIC_DIGITS)
    elif config.SCIENTIFIC_LOWER <= magnitude < config.FIXED_POINT_UPPER:
        rendered = _fit_fixed_point(value)
    else:
        rendered = number_to_string(value)
        if len(rendered) > config.DISPLAY_MAX_LENGTH:
            rendered = to_precision(value, config.GENERAL_PRECISION)

    return tidy(rendered)

"""Padding and sign pieces shared by the conversions."""

from __future__ import annotations

from .spec import Spec

_NUMERIC = frozenset("xXdiu")


def width_padding(spec: Spec, length: int) -> str:
    """Spaces that bring a field of ``length`` characters up to the width.

    Numeric conversions padded with zeros get no spaces here.
    """
    if spec.conversion in _NUMERIC and spec.zero:
        return ""
    if spec.width == 0 or spec.width < length:
        return ""
    return " " * (spec.width - length)


def zero_padding(spec: Spec, length: int) -> str:
    """Zeros that bring a field up to the width when the '0' flag applies."""
    if not spec.zero or spec.precision is not None or spec.minus or spec.width == 0:
        return ""
    if spec.width < length:
        return ""
    return "0" * (spec.width - length)


def precision_padding(spec: Spec, length: int) -> str:
    """Leading zeros that bring ``length`` digits up to the precision."""
    if spec.precision is None or spec.precision < length:
        return ""
    return "0" * (spec.precision - length)


def sign_flag(spec: Spec, negative: bool, flag: str) -> str:
    """The '+' or ' ' shown before a non-negative number, if its flag is set.

    ``flag`` chooses which of the two is asked for; any other value gives
    the empty string.
    """
    if negative:
        return ""
    if flag == "+":
        return "+" if spec.plus else ""
    if flag == " ":
        return " " if spec.space and not spec.plus else ""
    return ""


def visible_digits(spec: Spec, digits: str) -> str:
    """The digits to print: a lone "0" vanishes under precision zero."""
    if digits == "0" and spec.precision == 0:
        return ""
    return digits


def digits_length(spec: Spec, digits: str) -> int:
    """Number of digit characters that will actually be printed."""
    return len(visible_digits(spec, digits))
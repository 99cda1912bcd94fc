"""Rendering of single conversions.

Each ``format_*`` function takes a parsed :class:`~ftprintf.spec.Spec` and
one argument value and returns ``(text, count)``: the characters produced
and the number of characters the conversion reports.  The two agree for
every conversion except a non-null pointer given a precision.  There the
precision zeros are written but not counted.
"""

from __future__ import annotations

import operator
from typing import Optional, Tuple, Union

from .padding import (
    digits_length,
    precision_padding,
    sign_flag,
    visible_digits,
    width_padding,
    zero_padding,
)
from .spec import Spec

Rendered = Tuple[str, int]

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_ULONG_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _precision_or_unset(spec: Spec) -> int:
    """The precision, with -1 standing for "not given"."""
    return -1 if spec.precision is None else spec.precision


def _to_int32(value: int) -> int:
    value = operator.index(value) & _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _to_uint32(value: int) -> int:
    return operator.index(value) & _UINT_MASK


def hex_digits(value: int, precision: Optional[int]) -> int:
    """Number of hexadecimal digits printed for ``value``.

    Zero prints one digit, or none at all when the precision is zero.
    """
    value = _to_uint32(value)
    if value == 0:
        return 0 if precision == 0 else 1
    return len(format(value, "x"))


def format_char(spec: Spec, value: Union[str, int]) -> Rendered:
    """Render a ``%c`` conversion; ``value`` is a one-character string or a code."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a %c conversion takes exactly one character")
        char = value
    else:
        char = chr(operator.index(value) & 0xFF)
    pad = width_padding(spec, 1)
    text = char + pad if spec.minus else pad + char
    return text, len(text)


def _string_body(spec: Spec, value: Optional[str]) -> str:
    if value is None:
        if spec.precision is not None and 0 <= spec.precision <= 5:
            return ""
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError("a %s conversion takes a string or None")
    value = value.split("\0", 1)[0]
    if spec.precision is None:
        return value
    return value[: spec.precision]


def format_string(spec: Spec, value: Optional[str]) -> Rendered:
    """Render a ``%s`` conversion; ``None`` stands for a null string."""
    body = _string_body(spec, value)
    pad = width_padding(spec, len(body))
    text = body + pad if spec.minus else pad + body
    return text, len(text)


def _pointer_length(address: int) -> int:
    if address == 0:
        return len(_NULL_POINTER)
    return len(format(address, "x")) + 2


def format_pointer(spec: Spec, value: Optional[int]) -> Rendered:
    """Render a ``%p`` conversion; ``None`` or 0 is the null pointer."""
    address = 0 if value is None else operator.index(value) & _ULONG_MASK
    length = _pointer_length(address)
    if address == 0:
        body, body_count = _NULL_POINTER, len(_NULL_POINTER)
    else:
        body = "0x" + precision_padding(spec, length) + format(address, "x")
        body_count = length
    pad = width_padding(spec, max(_precision_or_unset(spec), length))
    text = body + pad if spec.minus else pad + body
    return text, len(pad) + body_count


def format_decimal(spec: Spec, value: int) -> Rendered:
    """Render a ``%d`` or ``%i`` conversion of a 32-bit signed integer."""
    number = _to_int32(value)
    negative = number < 0
    digits = str(abs(number))
    shown = visible_digits(spec, digits)
    shown_len = digits_length(spec, digits)

    space = sign_flag(spec, negative, " ")
    plus = sign_flag(spec, negative, "+")
    minus_sign = "-" if negative else ""
    field = len(plus) + len(space) + len(minus_sign) + max(_precision_or_unset(spec), shown_len)
    zeros = precision_padding(spec, shown_len)

    if spec.minus:
        text = space + plus + minus_sign + zeros + shown + width_padding(spec, field)
    else:
        text = (
            space
            + width_padding(spec, field)
            + plus
            + minus_sign
            + zero_padding(spec, field)
            + zeros
            + shown
        )
    return text, len(text)


def format_unsigned(spec: Spec, value: int) -> Rendered:
    """Render a ``%u`` conversion of a 32-bit unsigned integer."""
    digits = str(_to_uint32(value))
    shown = visible_digits(spec, digits)
    shown_len = digits_length(spec, digits)
    field = max(_precision_or_unset(spec), shown_len)
    zeros = precision_padding(spec, shown_len)

    if spec.minus:
        text = zeros + shown + width_padding(spec, field)
    else:
        text = width_padding(spec, field) + zero_padding(spec, field) + zeros + shown
    return text, len(text)


def format_hex(spec: Spec, value: int, upper: bool) -> Rendered:
    """Render a ``%x`` (or ``%X`` when ``upper``) conversion of a 32-bit value."""
    number = _to_uint32(value)
    count = hex_digits(number, spec.precision)
    digits = "" if count == 0 else format(number, "X" if upper else "x")
    prefix = ("0X" if upper else "0x") if number and spec.sharp else ""
    field = len(prefix) + max(_precision_or_unset(spec), count)
    zeros = precision_padding(spec, count)

    if spec.minus:
        text = prefix + zeros + digits + width_padding(spec, field)
    else:
        text = width_padding(spec, field) + prefix + zero_padding(spec, field) + zeros + digits
    return text, len(text)


def format_percent(spec: Spec) -> Rendered:
    """Render ``%%``: a single percent sign, whatever the flags."""
    return "%", 1
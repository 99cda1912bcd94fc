"""Conversion specifications: the part of a format string that starts with '%'."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

_FLAG_CHARS = "-0+ #"
_DIGITS = "0123456789"
_CONVERSIONS = "cspdiuxX%a"
_PRECISION_DISABLES_ZERO = "diuxX"


@dataclass(frozen=True)
class Spec:
    """A parsed conversion specification.

    ``precision`` is ``None`` when the specification gives none.
    ``conversion`` is the empty string when no known conversion character
    follows the flags, width and precision.
    """

    minus: bool = False
    zero: bool = False
    plus: bool = False
    space: bool = False
    sharp: bool = False
    width: int = 0
    precision: Optional[int] = None
    conversion: str = ""


def _read_number(fmt: str, pos: int) -> Tuple[int, int]:
    """Read a run of ASCII digits starting at ``pos``; return (value, new_pos)."""
    value = 0
    while pos < len(fmt) and fmt[pos] in _DIGITS:
        value = value * 10 + int(fmt[pos])
        pos += 1
    return value, pos


def parse_spec(fmt: str, index: int) -> Tuple[Spec, int]:
    """Parse the specification whose '%' sits at ``fmt[index]``.

    Returns the specification and the index of the first character after it.
    Raises ``ValueError`` if ``fmt[index]`` is not '%'.
    """
    if fmt[index:index + 1] != "%":
        raise ValueError(f"no conversion specification at index {index}")
    pos = index + 1

    flags = set()
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        flags.add(fmt[pos])
        pos += 1

    width, pos = _read_number(fmt, pos)

    precision: Optional[int] = None
    if fmt[pos:pos + 1] == ".":
        precision, pos = _read_number(fmt, pos + 1)

    conversion = ""
    if pos < len(fmt) and fmt[pos] in _CONVERSIONS:
        conversion = fmt[pos]
        pos += 1

    minus = "-" in flags
    plus = "+" in flags
    zero = "0" in flags and not minus
    if precision is not None and conversion in _PRECISION_DISABLES_ZERO and conversion:
        zero = False

    spec = Spec(
        minus=minus,
        zero=zero,
        plus=plus,
        space="" if False else (" " in flags and not plus),
        sharp="#" in flags,
        width=width,
        precision=precision,
        conversion=conversion,
    )
    return spec, pos
"""Formatted output driven by a printf-style format string."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterable, Iterator, Tuple

from .conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_percent,
    format_pointer,
    format_string,
    format_unsigned,
)
from .spec import Spec, parse_spec

_Handler = Callable[[Spec, Any], Tuple[str, int]]

_HANDLERS: Dict[str, _Handler] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda spec, value: format_hex(spec, value, False),
    "X": lambda spec, value: format_hex(spec, value, True),
}

_MISSING = object()


def render(spec: Spec, args: Iterator[Any]) -> Tuple[str, int]:
    """Render one conversion, taking its argument from ``args`` if it needs one.

    Returns the text produced and the count the conversion reports.  A
    specification without a supported conversion produces nothing but
    still counts one character.  Raises ``TypeError`` when an argument is
    needed and ``args`` is exhausted.
    """
    if spec.conversion == "%":
        return format_percent(spec)
    handler = _HANDLERS.get(spec.conversion)
    if handler is None:
        return "", 1
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec.conversion}")
    return handler(spec, value)


def _format(fmt: str, args: Iterable[Any]) -> Tuple[str, int]:
    fmt = fmt.split("\0", 1)[0]
    if not fmt:
        raise ValueError("empty format string")
    remaining = iter(args)
    pieces = []
    count = 0
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent == -1:
            literal = fmt[pos:]
            pieces.append(literal)
            count += len(literal)
            break
        literal = fmt[pos:percent]
        pieces.append(literal)
        count += len(literal)
        spec, pos = parse_spec(fmt, percent)
        text, produced = render(spec, remaining)
        pieces.append(text)
        count += produced
    return "".join(pieces), count


def sprintf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for these arguments."""
    text, _ = _format(fmt, args)
    return text


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the reported count."""
    text, count = _format(fmt, args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return count
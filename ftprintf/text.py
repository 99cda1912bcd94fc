"""String helpers in the manner of the classic C string routines.

Search functions return an index into the text, or ``None`` when nothing
is found.
"""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, List, Optional

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _single_char(char: str, name: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"{name} must be a single character")
    return char


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def atoi(text: str) -> int:
    """Read an optionally signed decimal integer after leading whitespace.

    Parsing stops at the first non-digit; no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = result * 10 + int(text[pos])
        pos += 1
    return sign * result


def itoa(number: int) -> str:
    """Decimal representation of an integer."""
    return str(operator.index(number))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    if text is None or chars is None:
        raise TypeError("strtrim takes two strings")
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``."""
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    length = _non_negative(length, "length")
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found == -1 else found


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters; the sign tells the order."""
    length = _non_negative(length, "length")
    first = first.split("\0", 1)[0][:length]
    second = second.split("\0", 1)[0][:length]
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; '\\0' finds the end."""
    _single_char(char, "char")
    if char == "\0":
        return len(text)
    found = text.find(char)
    return None if found == -1 else found


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; '\\0' finds the end."""
    _single_char(char, "char")
    if char == "\0":
        return len(text)
    found = text.rfind(char)
    return None if found == -1 else found


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin takes two strings")
    return first + second
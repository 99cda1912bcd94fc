import pytest

from ftprintf.padding import (
    digits_length,
    precision_padding,
    sign_flag,
    visible_digits,
    width_padding,
    zero_padding,
)
from ftprintf.spec import Spec, parse_spec


def spec_of(fmt):
    return parse_spec(fmt, 0)[0]


@pytest.mark.parametrize("length", [0, 1, 4, 9])
def test_width_padding_fills_to_width(length):
    spec = spec_of("%10s")
    pad = width_padding(spec, length)
    assert len(pad) + length == spec.width
    assert set(pad) <= {" "}


def test_width_padding_empty_when_content_wider():
    assert width_padding(spec_of("%3s"), 7) == ""


def test_width_padding_empty_without_width():
    assert width_padding(spec_of("%s"), 0) == ""


@pytest.mark.parametrize("conversion", list("diuxX"))
def test_width_padding_yields_to_zero_flag_for_numbers(conversion):
    assert width_padding(spec_of(f"%08{conversion}"), 2) == ""


def test_width_padding_ignores_zero_flag_for_strings():
    spec = spec_of("%08s")
    pad = width_padding(spec, 2)
    assert len(pad) == spec.width - 2
    assert set(pad) == {" "}


def test_zero_padding_fills_with_zeros():
    spec = spec_of("%08d")
    pad = zero_padding(spec, 3)
    assert len(pad) + 3 == spec.width
    assert set(pad) == {"0"}


@pytest.mark.parametrize("fmt", ["%8d", "%-08d", "%08.2d", "%0d"])
def test_zero_padding_not_applied(fmt):
    assert zero_padding(spec_of(fmt), 1) == ""


def test_zero_padding_empty_when_content_wider():
    assert zero_padding(spec_of("%02d"), 5) == ""


def test_precision_padding_fills_to_precision():
    spec = spec_of("%.6d")
    pad = precision_padding(spec, 2)
    assert len(pad) + 2 == spec.precision
    assert set(pad) == {"0"}


def test_precision_padding_without_precision():
    assert precision_padding(Spec(conversion="d"), 0) == ""


def test_precision_padding_when_digits_longer():
    assert precision_padding(spec_of("%.2d"), 5) == ""


def test_sign_flag_plus():
    spec = spec_of("%+d")
    assert sign_flag(spec, False, "+") == "+"
    assert sign_flag(spec, True, "+") == ""
    assert sign_flag(spec, False, " ") == ""


def test_sign_flag_space():
    spec = spec_of("% d")
    assert sign_flag(spec, False, " ") == " "
    assert sign_flag(spec, True, " ") == ""
    assert sign_flag(spec, False, "+") == ""


def test_sign_flag_space_suppressed_by_plus_even_if_set():
    spec = Spec(plus=True, space=True, conversion="d")
    assert sign_flag(spec, False, " ") == ""


def test_sign_flag_unknown_flag():
    assert sign_flag(spec_of("%+ d"), False, "#") == ""


def test_lone_zero_hidden_by_precision_zero():
    spec = spec_of("%.0d")
    assert visible_digits(spec, "0") == ""
    assert digits_length(spec, "0") == 0


def test_zero_shown_without_precision():
    spec = spec_of("%d")
    assert visible_digits(spec, "0") == "0"
    assert digits_length(spec, "0") == 1


@pytest.mark.parametrize("digits", ["00", "10", "123"])
def test_other_digits_kept_under_precision_zero(digits):
    spec = spec_of("%.0d")
    assert visible_digits(spec, digits) == digits
    assert digits_length(spec, digits) == len(digits)
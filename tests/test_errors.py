import pytest

from xnakit.errors import (
    ArgumentError,
    InvalidOperationError,
    OutOfRangeError,
    XnaError,
    require,
)


def test_str_includes_default_h_result():
    err = XnaError("boom")
    assert str(err) == f"{0x80131500}: boom"
    assert err.message == "boom"


def test_out_of_range_code():
    err = OutOfRangeError("too long")
    assert err.h_result == 0x80004003
    assert isinstance(err, XnaError)


@pytest.mark.parametrize("cls", [InvalidOperationError, ArgumentError])
def test_zero_code_errors(cls):
    err = cls("bad")
    assert err.h_result == 0
    assert str(err) == "0: bad"


def test_explicit_h_result_overrides_default():
    err = XnaError("x", h_result=42)
    assert err.h_result == 42


def test_inner_is_kept_and_chained():
    inner = XnaError("inner")
    outer = InvalidOperationError("outer", inner)
    assert outer.inner is inner
    assert outer.__cause__ is inner


def test_require_returns_value():
    assert require(5, "missing") == 5
    assert require(0, "missing") == 0


def test_require_raises_with_message():
    with pytest.raises(XnaError) as info:
        require(None, "missing")
    assert info.value.message == "missing"


def test_require_default_message():
    with pytest.raises(XnaError) as info:
        require(None)
    assert info.value.message == "Invalid unwrap() operation."
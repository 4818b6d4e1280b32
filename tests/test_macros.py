import pytest

from anyerr.error import Error
from anyerr.macros import anyhow, bail, ensure, format_err, ok


class _Censored(Exception):
    def __str__(self):
        return "censored"


def test_anyhow_literal_downcasts_to_str():
    err = anyhow("oh no!")
    assert str(err) == "oh no!"
    assert err.downcast_ref(str) == "oh no!"


def test_anyhow_literal_is_not_formatted():
    err = anyhow("braces {} stay")
    assert str(err) == "braces {} stay"


def test_anyhow_with_positional_arguments():
    err = anyhow("key length must be {}, got {!r}", 16, "abc")
    assert str(err) == "key length must be 16, got 'abc'"
    assert err.downcast(str) == str(err)


def test_anyhow_with_keyword_arguments():
    err = anyhow("Missing attribute: {name}", name="width")
    assert str(err) == "Missing attribute: width"


def test_anyhow_format_arguments_need_string():
    with pytest.raises(TypeError):
        anyhow(42, 1)


def test_anyhow_exception_keeps_type_and_causes():
    try:
        try:
            raise KeyError("inner")
        except KeyError as inner:
            raise ValueError("outer") from inner
    except ValueError as caught:
        err = anyhow(caught)
    assert err.is_(ValueError)
    causes = list(err.chain())
    assert len(causes) == 2
    assert isinstance(err.root_cause(), KeyError)


def test_anyhow_error_passes_through():
    original = Error.msg("first")
    assert anyhow(original) is original


def test_anyhow_any_value_downcasts_back():
    err = anyhow(42)
    assert err.downcast(int) == 42
    assert str(err) == "42"


def test_format_err_matches_anyhow():
    assert str(format_err("x = {}", 3)) == str(anyhow("x = {}", 3))
    assert format_err("plain").downcast_ref(str) == "plain"


def test_bail_raises_error_with_message():
    with pytest.raises(Error) as info:
        bail("permission denied for accessing {}", "resource")
    assert str(info.value) == "permission denied for accessing resource"


def test_bail_with_exception_downcasts():
    with pytest.raises(Error) as info:
        bail(_Censored())
    assert info.value.is_(_Censored)
    assert str(info.value) == "censored"


def test_ensure_true_returns_none():
    assert ensure(1 == 1, "never shown") is None


def test_ensure_false_default_message():
    with pytest.raises(Error) as info:
        ensure(False)
    assert str(info.value).startswith("Condition failed")


def test_ensure_false_with_message():
    with pytest.raises(Error) as info:
        ensure(0, "only user {} is allowed", 0)
    assert str(info.value) == "only user 0 is allowed"


def test_ensure_false_with_exception():
    with pytest.raises(Error) as info:
        ensure([], _Censored())
    assert info.value.downcast_ref(_Censored) is not None
    assert info.value.is_(_Censored)


def test_ensure_context_round_trip():
    with pytest.raises(Error) as info:
        ensure(False, "low level")
    wrapped = info.value.context("high level")
    assert format(wrapped, "#") == "high level: low level"


def test_ok_returns_value():
    value = [1, 2, 3]
    assert ok(value) is value
    assert ok(None) is None
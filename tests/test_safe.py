from __future__ import annotations

import logging

import pytest

from results import Err, Ok, alter, is_err, safe


def reciprocal(x: float) -> float:
    if x == 0:
        msg = "Divide by zero"
        raise ValueError(msg)
    return 1 / x


def test_safe() -> None:
    assert safe(reciprocal)(2) == Ok(0.5)
    assert is_err(safe(reciprocal)(0))
    assert alter(safe(reciprocal)(0), lambda e: e.args[0]) == Err("Divide by zero")
    assert alter(safe(reciprocal)(0), str) == Err("Divide by zero")


def test_safe_keeps_the_exception_object() -> None:
    r = safe(reciprocal)(0)
    assert isinstance(r, Err)
    assert isinstance(r.err, ValueError)


def test_safe_as_decorator() -> None:
    @safe
    def divide(a: int, b: int = 1) -> float:
        """Divide a by b."""
        return a / b

    assert divide(1, b=2) == Ok(0.5)
    assert divide(1) == Ok(1.0)
    assert divide.__name__ == "divide"
    assert divide.__doc__ == "Divide a by b."

    r = divide(1, 0)
    assert isinstance(r, Err)
    assert isinstance(r.err, ZeroDivisionError)


@pytest.mark.parametrize(
    "exc",
    [ValueError("foo"), KeyError("bar"), RuntimeError("baz"), StopIteration(), Exception("qux")],
)
def test_safe_catches_runtime_errors(exc: Exception) -> None:
    def raiser() -> None:
        raise exc

    assert safe(raiser)() == Err(exc)


@pytest.mark.parametrize("exc", [KeyboardInterrupt, SystemExit])
def test_safe_does_not_catch_control_signals(exc: type[BaseException]) -> None:
    def raiser() -> None:
        raise exc

    with pytest.raises(exc):
        safe(raiser)()


def test_safe_logs_caught_exceptions(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("results")
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.DEBUG, logger="results"):
            safe(reciprocal)(0)
    finally:
        logger.removeHandler(caplog.handler)

    assert any("reciprocal raised ValueError('Divide by zero')" in m for m in caplog.messages)

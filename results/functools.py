from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from results.logging import logger
from results.models.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from results.models.result import Result


def safe[**P, T](fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Wrap a function that might raise so that it returns a result instead.

    The wrapper returns `Ok(...)` on a normal return and the raised exception
    inside `Err(...)` otherwise. Interpreter control signals such as
    `KeyboardInterrupt` and `SystemExit` are not caught.

    Usable as a decorator:

        @safe
        def reciprocal(x: float) -> float:
            return 1 / x

        reciprocal(0)  # Err(ZeroDivisionError('division by zero'))
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as e:  # noqa: BLE001
            logger.debug("%s raised %r, returning Err", getattr(fn, "__qualname__", fn), e)
            return Err(e)

    return wrapper

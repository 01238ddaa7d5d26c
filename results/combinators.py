from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typing_extensions import TypeIs

from results.models.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from results.models.result import Result

# Function forms of the methods on `Ok` and `Err`. The result always comes
# first, followed by the function(s) or default(s).


def is_ok[T, E](r: Result[T, E]) -> TypeIs[Ok[T]]:
    return isinstance(r, Ok)


def is_err[T, E](r: Result[T, E]) -> TypeIs[Err[E]]:
    return not is_ok(r)


def map[T, E, U](r: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    return r.map(fn)


def fmap(r: Result[Any, Any], fn: Callable[[Any], Any]) -> Result[Any, Any]:
    return r.fmap(fn)


def bimap[T, E, U, F](r: Result[T, E], ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
    return r.bimap(ok_fn, err_fn)


def alter[T, E, F](r: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    return r.alter(fn)


def bind[U, F](r: Result[Any, Any], fn: Callable[[Any], Result[U, F]]) -> Result[U, F]:
    return r.bind(fn)


def join(nested: Result[Any, Any]) -> Result[Any, Any]:
    return nested.join()


def and_[T, E, U](r: Result[T, E], other: Result[U, E]) -> Result[U, E]:
    return r.and_(other)


def or_[T, E, F](r: Result[T, E], other: Result[T, F]) -> Result[T, F]:
    return r.or_(other)


def unwrap[T](r: Result[T, Any]) -> T:
    return r.unwrap()


def unwrap_err[E](r: Result[Any, E]) -> E:
    return r.unwrap_err()


def unwrap_or[T, U](r: Result[T, Any], default: U) -> T | U:
    return r.unwrap_or(default)


def unwrap_or_do[T, E, U](r: Result[T, E], fn: Callable[[E], U]) -> T | U:
    return r.unwrap_or_do(fn)


def expect[T](r: Result[T, Any], message: str) -> T:
    return r.expect(message)


def map_or[T, U](r: Result[T, Any], default: U, fn: Callable[[T], U]) -> U:
    return r.map_or(default, fn)


def map_or_do[T, E, U](r: Result[T, E], ok_fn: Callable[[T], U], err_fn: Callable[[E], U]) -> U:
    return r.map_or_do(ok_fn, err_fn)

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Literal, NoReturn, final

from results.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable


type Result[T, E] = Ok[T] | Err[E]

# `unit` (`return` in Haskell) is just the constructor of either variant.


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A value that indicates success and stores the return value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    # Like rust's map, an Err is left untouched.
    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    # True functor map, applied to whichever payload is present.
    def fmap[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def bimap[U](self, ok_fn: Callable[[T], U], err_fn: Callable[[Any], Any]) -> Ok[U]:
        return Ok(ok_fn(self.value))

    # Called `map_err` in rust.
    def alter(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def bind[U, F](self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return fn(self.value)

    def __rshift__[U, F](self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return self.bind(fn)

    # Called `flatten` in rust.
    def join(self) -> Result[Any, Any]:
        return self.bind(_identity)

    def and_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    def or_(self, other: Result[Any, Any]) -> Ok[T]:
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, f"Unwrapping an Ok while expecting Err: {self.value!r}")

    def unwrap_or(self, default: object) -> T:
        return self.value

    def unwrap_or_do(self, fn: Callable[[Any], Any]) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    # Called `map_or_else` in rust.
    def map_or_do[U](self, ok_fn: Callable[[T], U], err_fn: Callable[[Any], Any]) -> U:
        return ok_fn(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """A value that signifies failure and stores the error payload."""

    err: E

    def __repr__(self) -> str:
        return f"Err({self.err!r})"

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def fmap[F](self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.err))

    def bimap[F](self, ok_fn: Callable[[Any], Any], err_fn: Callable[[E], F]) -> Err[F]:
        return Err(err_fn(self.err))

    def alter[F](self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.err))

    # Unlike rust's and_then, bind also runs on the error payload, so the
    # function may recover by returning an Ok.
    def bind[U, F](self, fn: Callable[[E], Result[U, F]]) -> Result[U, F]:
        return fn(self.err)

    def __rshift__[U, F](self, fn: Callable[[E], Result[U, F]]) -> Result[U, F]:
        return self.bind(fn)

    def join(self) -> Result[Any, Any]:
        return self.bind(_identity)

    def and_(self, other: Result[Any, Any]) -> Err[E]:
        return self

    # On double failure the second error is reported.
    def or_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f"Unwrapping an Err while expecting Ok: {self.err!r}")
        if isinstance(self.err, BaseException):
            raise exc from self.err
        raise exc

    def unwrap_err(self) -> E:
        return self.err

    def unwrap_or[U](self, default: U) -> U:
        return default

    def unwrap_or_do[U](self, fn: Callable[[E], U]) -> U:
        return fn(self.err)

    # The message is only used on failure, it is never a function of the error.
    def expect(self, message: str) -> NoReturn:
        exc = UnwrapError(self, message)
        if isinstance(self.err, BaseException):
            raise exc from self.err
        raise exc

    def map_or[U](self, default: U, fn: Callable[[Any], Any]) -> U:
        return default

    def map_or_do[U](self, ok_fn: Callable[[Any], Any], err_fn: Callable[[E], U]) -> U:
        return err_fn(self.err)


def _identity[T](x: T) -> T:
    return x


OkErr: Final = (Ok, Err)

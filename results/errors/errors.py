from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from results.models.result import Result


class UnwrapError(Exception):
    """Raised when a result is not the variant the caller asserted.

    `unwrap` and `expect` on an `Err`, and `unwrap_err` on an `Ok`, raise this
    error. The offending result is available on `.result`.
    """

    def __init__(self, result: Result[Any, Any], mesg: str) -> None:
        super().__init__(mesg)
        self.mesg = mesg
        self._result = result

    @property
    def result(self) -> Result[Any, Any]:
        return self._result

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self._result, self.mesg))

from __future__ import annotations

from .combinators import (
    alter,
    and_,
    bimap,
    bind,
    expect,
    fmap,
    is_err,
    is_ok,
    join,
    map,
    map_or,
    map_or_do,
    or_,
    unwrap,
    unwrap_err,
    unwrap_or,
    unwrap_or_do,
)
from .errors import UnwrapError
from .functools import safe
from .models.result import Err, Ok, OkErr, Result

__all__ = [
    "Err",
    "Ok",
    "OkErr",
    "Result",
    "UnwrapError",
    "alter",
    "and_",
    "bimap",
    "bind",
    "expect",
    "fmap",
    "is_err",
    "is_ok",
    "join",
    "map",
    "map_or",
    "map_or_do",
    "or_",
    "safe",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
    "unwrap_or_do",
]

from __future__ import annotations

from .errors import UnwrapError

__all__ = ["UnwrapError"]

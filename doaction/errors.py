from __future__ import annotations

from typing import Any


class UnwrapError(RuntimeError):
    """Raised when a ``Result`` is unwrapped as the wrong variant.

    The offending payload is kept on ``payload`` so callers can inspect a
    non-exception failure value after catching the error.
    """

    def __init__(self, message: str, payload: Any = None) -> None:
        self.payload = payload
        super().__init__(message)


class MissingStateKeyError(KeyError):
    """Raised when a keyed state helper cannot find the requested key."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"State key not found: {key!r}\n"
            f"Hint: Seed the key with `Put({key!r}, value)` or start from "
            f"`FrozenDict({{{key!r}: value}})`"
        )


__all__ = ["MissingStateKeyError", "UnwrapError"]

"""
Vendored minimal outcome types shared by every ResultAction.

``Result`` is a two-variant sum type: ``Ok`` carries a success payload and
``Err`` carries a failure payload. Unlike exception-centric result types, the
failure payload may be any value (a string, an enum member, an exception).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, cast

from frozendict import frozendict

from doaction.errors import UnwrapError

# =========================================================
# Type Vars
# =========================================================
T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
E = TypeVar("E")
E_co = TypeVar("E_co", covariant=True)
U = TypeVar("U")
F = TypeVar("F")


class Result(Generic[T_co, E_co]):
    """Sum type representing either a successful value or a failure payload."""

    __slots__ = ()

    def is_ok(self) -> bool:
        """Return ``True`` when the result is successful."""

        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` when the result represents a failure."""

        return isinstance(self, Err)

    def ok(self) -> T_co | None:
        """Return the contained value, or ``None`` if this is an error."""

        if isinstance(self, Ok):
            return self.value
        return None

    def err(self) -> E_co | None:
        """Return the contained failure payload, or ``None`` on success."""

        if isinstance(self, Err):
            return self.error
        return None

    def expect(self, message: str) -> T_co:
        """Return the value or raise with a custom message."""

        if isinstance(self, Ok):
            return self.value

        error = cast(Err, self).error
        if isinstance(error, BaseException):
            if message:
                raise UnwrapError(f"{message}: {error}", error) from error
            raise error
        raise UnwrapError(f"{message}: {error!r}" if message else repr(error), error)

    def unwrap(self) -> T_co:
        """Return the value or raise the stored failure.

        Exception payloads are raised as-is; any other payload is wrapped in
        :class:`~doaction.errors.UnwrapError`.
        """

        if isinstance(self, Ok):
            return self.value
        error = cast(Err, self).error
        if isinstance(error, BaseException):
            raise error
        raise UnwrapError(f"Called unwrap on Err value: {error!r}", error)

    def unwrap_err(self) -> E_co:
        """Return the failure payload or raise ``UnwrapError`` on success."""

        if isinstance(self, Err):
            return self.error
        raise UnwrapError("Called unwrap_err on Ok value", cast(Ok, self).value)

    def map(self, f: Callable[[T_co], U]) -> Result[U, E_co]:
        """Apply ``f`` to the contained value if this is a success."""

        if isinstance(self, Ok):
            return Ok(f(self.value))
        return cast(Result[U, E_co], self)

    def map_err(self, f: Callable[[E_co], F]) -> Result[T_co, F]:
        """Apply ``f`` to the failure payload if this is a failure."""

        if isinstance(self, Err):
            return Err(f(self.error))
        return cast(Result[T_co, F], self)

    def unwrap_or(self, default: U) -> T_co | U:
        """Return the contained value, or ``default`` if this is an error."""

        if isinstance(self, Ok):
            return self.value
        return default

    def unwrap_or_else(self, default_fn: Callable[[E_co], U]) -> T_co | U:
        """Return the contained value, or compute a default from the error."""

        if isinstance(self, Ok):
            return self.value
        return default_fn(cast(Err, self).error)

    def and_then(self, f: Callable[[T_co], Result[U, E_co]]) -> Result[U, E_co]:
        """Chain computations that return ``Result``."""

        if isinstance(self, Ok):
            result = f(self.value)
            if not isinstance(result, Result):
                raise TypeError("and_then must return a Result instance")
            return result
        return cast(Result[U, E_co], self)

    def __or__(self, other: Result[U, F]) -> Result[T_co, E_co] | Result[U, F]:
        """Return this result if it is ``Ok``, otherwise return ``other``.

        Example::

            Ok(1) | Ok(2)         # Ok(1)
            Err("a") | Ok(2)      # Ok(2)
            Err("a") | Err("b")   # Err("b")
        """

        if isinstance(self, Ok):
            return self
        return other

    def __bool__(self) -> bool:
        """Truthiness matches :meth:`is_ok`."""

        return self.is_ok()


@dataclass(frozen=True)
class Ok(Result[T, NoReturn], Generic[T]):
    """Success result."""
    value: T


@dataclass(frozen=True)
class Err(Result[NoReturn, E], Generic[E]):
    """Failure result."""
    error: E


# =========================================================
# Frozen Dict
# =========================================================
FrozenDict = frozendict

__all__ = [
    "Err",
    "FrozenDict",
    "Ok",
    "Result",
]

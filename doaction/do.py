"""
The do decorator for the doaction system.

This module provides the @do and @try_do decorators that convert generator
functions into Action factories, enabling do-notation for state threading.
"""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Callable, Generator
from typing import Any, Generic, ParamSpec, TypeVar

from doaction._vendor import Err, Ok, Result
from doaction.action import Action, _ensure_result

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

ActionGenerator = Generator[Action[Any, Any], Any, T]


class DoFunction(Generic[P, T]):
    """Callable returning an Action that drives a generator function.

    Each ``yield action`` runs ``action`` on the current state and sends its
    result back into the generator; the generator's return value becomes the
    Action's result. A fresh generator is started on every run, so the
    returned Action can be run any number of times.
    """

    def __init__(self, func: Callable[P, ActionGenerator[T]]) -> None:
        if not callable(func):
            raise TypeError("do expects a callable")
        self.original_func = func
        self.__wrapped__ = func
        self._label = getattr(func, "__qualname__", repr(func))

        for attr in ("__doc__", "__module__", "__name__", "__qualname__", "__annotations__"):
            value = getattr(func, attr, None)
            if value is not None:
                setattr(self, attr, value)

        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            signature = None
        if signature is not None:
            setattr(self, "__signature__", signature)

    @property
    def original_generator(self) -> Callable[P, ActionGenerator[T]]:
        """Expose the user-defined generator for downstream tooling."""

        return self.original_func

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> Action[Any, Any]:
        func = self.original_func

        def step(state: Any) -> tuple[Any, Any]:
            gen_or_value = func(*args, **kwargs)
            if not inspect.isgenerator(gen_or_value):
                return state, self._finish(gen_or_value)
            return self._drive(gen_or_value, state)

        return Action(step)

    def _finish(self, value: Any) -> Any:
        return value

    def _on_result(self, value: Any) -> tuple[bool, Any]:
        """Return ``(stop, payload)`` for a yielded action's result."""

        return False, value

    def _drive(self, gen: Generator[Any, Any, Any], state: Any) -> tuple[Any, Any]:
        try:
            current = next(gen)
        except StopIteration as stop_exc:
            return state, self._finish(stop_exc.value)

        while True:
            if not isinstance(current, Action):
                gen.close()
                raise TypeError(
                    f"@do function {self._label} yielded "
                    f"{type(current).__name__}; expected an Action"
                )
            try:
                state, value = current.run(state)
            except Exception as exc:
                try:
                    current = gen.throw(exc)
                except StopIteration as stop_exc:
                    return state, self._finish(stop_exc.value)
                continue

            try:
                stop, payload = self._on_result(value)
            except TypeError:
                gen.close()
                raise
            if stop:
                gen.close()
                return state, payload
            try:
                current = gen.send(payload)
            except StopIteration as stop_exc:
                return state, self._finish(stop_exc.value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._label}>"


class TryDoFunction(DoFunction[P, T]):
    """DoFunction whose yielded actions produce ``Result`` values.

    ``Ok`` payloads are unwrapped and sent back into the generator. The first
    ``Err`` stops the generator and becomes the Action's result, together with
    the state reached at that point. A plain return value is wrapped in ``Ok``.
    """

    def _finish(self, value: Any) -> Result[Any, Any]:
        if isinstance(value, Result):
            return value
        return Ok(value)

    def _on_result(self, value: Any) -> tuple[bool, Any]:
        _ensure_result(value, f"@try_do function {self._label}")
        if isinstance(value, Err):
            logger.debug(
                "@try_do %s short-circuited on Err(%r)", self._label, value.error
            )
            return True, value
        return False, value.value


def do(func: Callable[P, ActionGenerator[T]]) -> DoFunction[P, T]:
    """
    Decorator that converts a generator function into an Action factory.

    Example::

        @do
        def increment(n: int) -> ActionGenerator[int]:
            yield update_state(lambda s: s + n)
            current = yield get_state()
            return current

        run(increment(2), 4)  # (6, 6)
    """

    return DoFunction(func)


def try_do(func: Callable[P, ActionGenerator[T]]) -> TryDoFunction[P, T]:
    """Decorator like :func:`do` that short-circuits on the first ``Err``."""

    return TryDoFunction(func)


__all__ = ["ActionGenerator", "DoFunction", "TryDoFunction", "do", "try_do"]

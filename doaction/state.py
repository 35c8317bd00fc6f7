"""
State helpers layered on the Action primitives.

Two calling conventions are provided:

* continuation-style ``get`` / ``put`` / ``modify`` re-express
  ``get_state`` / ``set_state`` / ``update_state`` composed with ``bind``;
* keyed ``Get`` / ``Put`` / ``Modify`` treat the state as a ``FrozenDict``
  and update one key at a time, copy-on-write.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeVar

from doaction._vendor import FrozenDict
from doaction.action import Action, bind, get_state, set_state, update_state
from doaction.errors import MissingStateKeyError

S = TypeVar("S")
T = TypeVar("T")


def get(k: Callable[[S], Action[T, S]] | None = None) -> Action[Any, S]:
    """Read the state and pass it to ``k``; without ``k`` return the state."""

    if k is None:
        return get_state()
    return bind(get_state(), k)


def put(value: S, k: Callable[[], Action[T, S]] | None = None) -> Action[Any, S]:
    """Replace the state with ``value`` and continue with ``k()``."""

    if k is None:
        return set_state(value)
    return bind(set_state(value), lambda _: k())


def modify(f: Callable[[S], S], k: Callable[[], Action[T, S]] | None = None) -> Action[Any, S]:
    """Replace the state with ``f(state)`` and continue with ``k()``."""

    if k is None:
        return update_state(f)
    return bind(update_state(f), lambda _: k())


def _as_frozen(current: Any) -> FrozenDict:
    if isinstance(current, FrozenDict):
        return current
    if isinstance(current, Mapping):
        return FrozenDict(current)
    raise TypeError(
        f"Keyed state helpers expect a mapping state; got {type(current).__name__}"
    )


class state:
    """Keyed state helpers over a ``FrozenDict`` state."""

    @staticmethod
    def get_key(key: Hashable) -> Action[Any, FrozenDict]:
        """Get value from state."""

        def step(current: Any) -> tuple[FrozenDict, Any]:
            frozen = _as_frozen(current)
            if key not in frozen:
                raise MissingStateKeyError(key)
            return frozen, frozen[key]

        return Action(step)

    @staticmethod
    def put_key(key: Hashable, value: Any) -> Action[None, FrozenDict]:
        """Update state value."""

        return Action(lambda current: (_as_frozen(current).set(key, value), None))

    @staticmethod
    def modify_key(key: Hashable, f: Callable[[Any], Any]) -> Action[Any, FrozenDict]:
        """Modify state value with function; the result is the new value."""

        if not callable(f):
            raise TypeError("modify_key expects a callable")

        def step(current: Any) -> tuple[FrozenDict, Any]:
            frozen = _as_frozen(current)
            if key not in frozen:
                raise MissingStateKeyError(key)
            new_value = f(frozen[key])
            return frozen.set(key, new_value), new_value

        return Action(step)


# Uppercase aliases
def Get(key: Hashable) -> Action[Any, FrozenDict]:
    """State: Get value from state."""
    return state.get_key(key)


def Put(key: Hashable, value: Any) -> Action[None, FrozenDict]:
    """State: Update state value."""
    return state.put_key(key, value)


def Modify(key: Hashable, f: Callable[[Any], Any]) -> Action[Any, FrozenDict]:
    """State: Modify state value with function."""
    return state.modify_key(key, f)


__all__ = [
    "Get",
    "Modify",
    "Put",
    "get",
    "modify",
    "put",
    "state",
]

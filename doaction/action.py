"""
Action class for the doaction system.

An Action is a computation that threads state explicitly: a value wrapping a
pure function ``state -> (new_state, result)``. Everything else in the package
is a constructor or a combinator over this one type.

Actions hold no mutable state of their own, so one Action value may be run any
number of times. Running the *same* Action from several threads is safe exactly
when the functions it closes over are free of side effects; that is the
caller's obligation, the library cannot check it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from doaction._vendor import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Action(Generic[T, S]):
    """A state-threading computation ``S -> (S, T)``."""

    step: Callable[[S], tuple[S, T]]

    def __post_init__(self) -> None:
        if not callable(self.step):
            raise TypeError(
                f"Action step must be callable; got {type(self.step).__name__}"
            )

    def run(self, state: S) -> tuple[S, T]:
        """Invoke the action with ``state`` and return ``(new_state, result)``."""

        outcome = self.step(state)
        if not isinstance(outcome, tuple) or len(outcome) != 2:
            raise TypeError(
                "Action step must return a (state, result) pair; got "
                f"{type(outcome).__name__}"
            )
        return outcome

    def __call__(self, state: S) -> tuple[S, T]:
        return self.run(state)

    def eval(self, state: S) -> T:
        """Run the action and keep only its result."""

        return self.run(state)[1]

    def exec(self, state: S) -> S:
        """Run the action and keep only its final state."""

        return self.run(state)[0]

    def map(self, f: Callable[[T], U]) -> "Action[U, S]":
        """Map a function over this action's result."""

        return fmap(self, f)

    def map_ok(self, f: Callable[[Any], U]) -> "Action[Result[U, Any], S]":
        return map_ok(self, f)

    def map_err(self, f: Callable[[Any], F]) -> "Action[Result[Any, F], S]":
        return map_err(self, f)

    map_error = map_err

    def flat_map(self, f: Callable[[T], "Action[U, S]"]) -> "Action[U, S]":
        """Monadic bind operation."""

        return bind(self, f)

    def and_then_k(self, binder: Callable[[T], "Action[U, S]"]) -> "Action[U, S]":
        """Alias for flat_map for Kleisli-style composition."""

        return bind(self, binder)

    def __rshift__(self, binder: Callable[[T], "Action[U, S]"]) -> "Action[U, S]":
        return bind(self, binder)

    def then(self, other: "Action[U, S]") -> "Action[U, S]":
        """Run ``other`` after this action, discarding this action's result."""

        _ensure_action_arg(other, "then")
        return bind(self, lambda _: other)

    def try_flat_map(
        self, f: Callable[[Any], "Action[Result[U, Any], S]"]
    ) -> "Action[Result[U, Any], S]":
        """Short-circuiting bind for actions that produce a ``Result``."""

        return try_bind(self, f)

    @staticmethod
    def pure(value: U) -> "Action[U, Any]":
        return pure(value)

    @staticmethod
    def of(value: U) -> "Action[U, Any]":
        return pure(value)

    @staticmethod
    def sequence(actions: Iterable["Action[U, S]"]) -> "Action[list[U], S]":
        from doaction._collection_combinators import all_of

        return all_of(actions)


ResultAction = Action[Result[T, E], S]


def _ensure_action(candidate: Any, role: str) -> None:
    if not isinstance(candidate, Action):
        raise TypeError(
            f"{role} must return an Action; got {type(candidate).__name__}"
        )


def _ensure_action_arg(candidate: Any, role: str) -> None:
    if not isinstance(candidate, Action):
        raise TypeError(f"{role} expects an Action; got {type(candidate).__name__}")


def _ensure_result(outcome: Any, role: str) -> None:
    if not isinstance(outcome, Result):
        raise TypeError(
            f"{role} expects an action producing a Result; got "
            f"{type(outcome).__name__}"
        )


def _ensure_callable(f: Any, role: str) -> None:
    if not callable(f):
        raise TypeError(f"{role} must be callable")


# =========================================================
# Invocation primitives
# =========================================================
def run(action: Action[T, S], state: S) -> tuple[S, T]:
    """Run ``action`` on ``state`` and return ``(new_state, result)``."""

    _ensure_action_arg(action, "run")
    return action.run(state)


def eval_action(action: Action[T, S], state: S) -> T:
    return run(action, state)[1]


def exec_action(action: Action[T, S], state: S) -> S:
    return run(action, state)[0]


# =========================================================
# Constructors
# =========================================================
def pure(value: T) -> Action[T, Any]:
    """Action producing ``value`` and leaving the state untouched."""

    return Action(lambda state: (state, value))


def ok(value: T) -> Action[Result[T, Any], Any]:
    return Action(lambda state: (state, Ok(value)))


def err(error: E) -> Action[Result[Any, E], Any]:
    return Action(lambda state: (state, Err(error)))


def get_state() -> Action[S, S]:
    """Action exposing the current state as its result."""

    return Action(lambda state: (state, state))


def set_state(new_state: S) -> Action[None, S]:
    """Action replacing the state with ``new_state``."""

    return Action(lambda _state: (new_state, None))


def update_state(updater: Callable[[S], S]) -> Action[None, S]:
    """Action replacing the state with ``updater(state)``."""

    _ensure_callable(updater, "updater")
    return Action(lambda state: (updater(state), None))


# =========================================================
# Transformers
# =========================================================
def fmap(action: Action[T, S], f: Callable[[T], U]) -> Action[U, S]:
    _ensure_callable(f, "mapper")
    _ensure_action_arg(action, "fmap")

    def step(state: S) -> tuple[S, U]:
        new_state, value = action.run(state)
        return new_state, f(value)

    return Action(step)


def map_ok(
    action: Action[Result[T, E], S], f: Callable[[T], U]
) -> Action[Result[U, E], S]:
    """Transform the success payload; failures pass through untouched."""

    _ensure_callable(f, "mapper")
    _ensure_action_arg(action, "map_ok")

    def step(state: S) -> tuple[S, Result[U, E]]:
        new_state, outcome = action.run(state)
        _ensure_result(outcome, "map_ok")
        return new_state, outcome.map(f)

    return Action(step)


def map_err(
    action: Action[Result[T, E], S], f: Callable[[E], F]
) -> Action[Result[T, F], S]:
    """Transform the failure payload; successes pass through untouched."""

    _ensure_callable(f, "mapper")
    _ensure_action_arg(action, "map_err")

    def step(state: S) -> tuple[S, Result[T, F]]:
        new_state, outcome = action.run(state)
        _ensure_result(outcome, "map_err")
        return new_state, outcome.map_err(f)

    return Action(step)


map_error = map_err


# =========================================================
# Sequencing
# =========================================================
def bind(first: Action[T, S], and_then: Callable[[T], Action[U, S]]) -> Action[U, S]:
    """Run ``first``, feed its result to ``and_then`` and run that on the new state."""

    _ensure_callable(and_then, "binder")
    _ensure_action_arg(first, "bind")

    def step(state: S) -> tuple[S, U]:
        next_state, value = first.run(state)
        next_action = and_then(value)
        _ensure_action(next_action, "binder")
        return next_action.run(next_state)

    return Action(step)


def try_bind(
    first: Action[Result[T, E], S],
    and_then: Callable[[T], Action[Result[U, E], S]],
) -> Action[Result[U, E], S]:
    """Like :func:`bind`, but stop at an ``Err`` without calling ``and_then``.

    The state produced by ``first`` is kept on both paths.
    """

    _ensure_callable(and_then, "binder")
    _ensure_action_arg(first, "try_bind")

    def step(state: S) -> tuple[S, Result[U, E]]:
        next_state, outcome = first.run(state)
        _ensure_result(outcome, "try_bind")
        if isinstance(outcome, Err):
            logger.debug("try_bind short-circuited on Err(%r)", outcome.error)
            return next_state, outcome
        next_action = and_then(outcome.value)
        _ensure_action(next_action, "binder")
        return next_action.run(next_state)

    return Action(step)


__all__ = [
    "Action",
    "ResultAction",
    "bind",
    "err",
    "eval_action",
    "exec_action",
    "fmap",
    "get_state",
    "map_err",
    "map_error",
    "map_ok",
    "ok",
    "pure",
    "run",
    "set_state",
    "try_bind",
    "update_state",
]

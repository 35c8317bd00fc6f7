"""
Sequential folds over ordered collections of Actions.

Every combinator runs its actions strictly left to right, one at a time, with
the state as the fold accumulator. The input is captured as a tuple when the
combinator is built, so the returned Action can be run any number of times.
The loops are flat; sequence length is not bounded by the recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from doaction._vendor import Err, Ok, Result
from doaction.action import Action, _ensure_result

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")
E = TypeVar("E")


def _collect(actions: Iterable[Action[Any, Any]], role: str) -> tuple[Action[Any, Any], ...]:
    collected = tuple(actions)
    for index, action in enumerate(collected):
        if not isinstance(action, Action):
            raise TypeError(
                f"{role} expects Actions; item {index} is {type(action).__name__}"
            )
    return collected


def all_of(actions: Iterable[Action[T, S]]) -> Action[list[T], S]:
    """Run every action in order and collect the results in input order."""

    collected = _collect(actions, "all_of")

    def step(state: S) -> tuple[S, list[T]]:
        results: list[T] = []
        for action in collected:
            state, value = action.run(state)
            results.append(value)
        return state, results

    return Action(step)


def each(actions: Iterable[Action[Any, S]]) -> Action[None, S]:
    """Run every action in order, discarding the results."""

    collected = _collect(actions, "each")

    def step(state: S) -> tuple[S, None]:
        for action in collected:
            state, _ = action.run(state)
        return state, None

    return Action(step)


def try_all(actions: Iterable[Action[Result[T, E], S]]) -> Action[Result[list[T], E], S]:
    """Run actions in order until the first ``Err``.

    On success the result is ``Ok`` of the ordered payloads. On failure the
    state produced by the failing action is kept and its ``Err`` is returned
    as-is; later actions do not run.
    """

    collected = _collect(actions, "try_all")

    def step(state: S) -> tuple[S, Result[list[T], E]]:
        results: list[T] = []
        for index, action in enumerate(collected):
            state, outcome = action.run(state)
            _ensure_result(outcome, "try_all")
            if isinstance(outcome, Err):
                logger.debug(
                    "try_all short-circuited at index %d on Err(%r)", index, outcome.error
                )
                return state, outcome
            results.append(outcome.value)
        return state, Ok(results)

    return Action(step)


def try_each(actions: Iterable[Action[Result[Any, E], S]]) -> Action[Result[None, E], S]:
    """Like :func:`try_all` but keeps no results; ``Ok(None)`` on success."""

    collected = _collect(actions, "try_each")

    def step(state: S) -> tuple[S, Result[None, E]]:
        for index, action in enumerate(collected):
            state, outcome = action.run(state)
            _ensure_result(outcome, "try_each")
            if isinstance(outcome, Err):
                logger.debug(
                    "try_each short-circuited at index %d on Err(%r)", index, outcome.error
                )
                return state, outcome
        return state, Ok(None)

    return Action(step)


__all__ = ["all_of", "each", "try_all", "try_each"]

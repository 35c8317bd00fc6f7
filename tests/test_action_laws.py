"""
Monad laws and invocation consistency for Action.
"""

from typing import Any

import pytest

from doaction import (
    Action,
    bind,
    eval_action,
    exec_action,
    get_state,
    pure,
    run,
    update_state,
)


def add_to_state(n: int) -> Action[int, int]:
    return Action(lambda s: (s + n, s * 10))


def f(x: int) -> Action[int, int]:
    return Action(lambda s: (s + x, x + 1))


def g(x: int) -> Action[str, int]:
    return Action(lambda s: (s * 2, f"g{x}"))


INT_STATES = [0, 1, 4, -3, 100]


class TestMonadLaws:
    @pytest.mark.parametrize("state", INT_STATES)
    def test_left_identity(self, state: int) -> None:
        """bind(pure(x), f) behaves like f(x)."""
        assert run(bind(pure(7), f), state) == run(f(7), state)

    @pytest.mark.parametrize("state", INT_STATES)
    def test_right_identity(self, state: int) -> None:
        """bind(action, pure) behaves like action."""
        action = add_to_state(3)
        assert run(bind(action, pure), state) == run(action, state)

    @pytest.mark.parametrize("state", INT_STATES)
    def test_associativity(self, state: int) -> None:
        action = add_to_state(2)
        left = bind(bind(action, f), g)
        right = bind(action, lambda a: bind(f(a), g))
        assert run(left, state) == run(right, state)

    def test_method_forms_match_bind(self) -> None:
        action = add_to_state(5)
        expected = run(bind(action, f), 1)

        assert action.flat_map(f).run(1) == expected
        assert action.and_then_k(f).run(1) == expected
        assert (action >> f).run(1) == expected


class TestInvocation:
    def test_run_returns_state_and_result(self) -> None:
        assert run(add_to_state(2), 3) == (5, 30)

    def test_eval_and_exec_project_run(self, sample_states: list[Any]) -> None:
        action = Action(lambda s: ((s, "seen"), repr(s)))
        for state in sample_states:
            new_state, result = run(action, state)
            assert eval_action(action, state) == result
            assert exec_action(action, state) == new_state
            assert action.eval(state) == result
            assert action.exec(state) == new_state

    def test_call_is_run(self) -> None:
        action = add_to_state(1)
        assert action(9) == action.run(9) == (10, 90)

    def test_run_is_repeatable(self) -> None:
        action = bind(update_state(lambda s: s + 1), lambda _: get_state())
        assert run(action, 0) == run(action, 0) == (1, 1)

    def test_run_rejects_non_action(self) -> None:
        with pytest.raises(TypeError, match="run expects an Action"):
            run(lambda s: (s, s), 0)  # type: ignore[arg-type]

    def test_step_must_return_pair(self) -> None:
        with pytest.raises(TypeError, match=r"\(state, result\) pair"):
            Action(lambda s: s).run(1)

    def test_step_must_be_callable(self) -> None:
        with pytest.raises(TypeError, match="must be callable"):
            Action(42)  # type: ignore[arg-type]

    def test_state_is_not_mutated(self) -> None:
        original = (1, 2)
        action = update_state(lambda s: s + (3,))
        new_state, _ = run(action, original)
        assert original == (1, 2)
        assert new_state == (1, 2, 3)

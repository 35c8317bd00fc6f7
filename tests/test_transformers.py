"""
Tests for fmap / map_ok / map_err and their method forms.
"""

import pytest

from doaction import (
    Action,
    Err,
    Ok,
    err,
    fmap,
    map_err,
    map_error,
    map_ok,
    ok,
    pure,
    run,
    update_state,
)


def double(x: int) -> int:
    return x * 2


class TestFmap:
    @pytest.mark.parametrize("state", [0, 5, "s"])
    def test_map_of_pure_is_pure_of_applied(self, state) -> None:
        assert run(fmap(pure(21), double), state) == run(pure(42), state)

    def test_map_keeps_new_state(self) -> None:
        action = Action(lambda s: (s + 1, s))
        assert run(fmap(action, str), 4) == (5, "4")

    def test_map_chain(self) -> None:
        prog = pure(5).map(lambda x: x + 3).map(double)
        assert prog.run(None) == (None, 16)

    def test_mapper_must_be_callable(self) -> None:
        with pytest.raises(TypeError, match="mapper must be callable"):
            fmap(pure(1), "nope")  # type: ignore[arg-type]


class TestMapOk:
    def test_map_ok_of_ok(self) -> None:
        assert run(map_ok(ok(4), double), 0) == run(ok(8), 0)

    def test_map_ok_leaves_err_and_state(self) -> None:
        called = []

        def mapper(x: int) -> int:
            called.append(x)
            return x

        action = update_state(lambda s: s + 1).then(err("boom"))
        assert run(map_ok(action, mapper), 1) == (2, Err("boom"))
        assert called == []  # mapper was NOT called

    def test_map_ok_method(self) -> None:
        assert ok(1).map_ok(lambda x: x + 1).run("s") == ("s", Ok(2))

    def test_map_ok_requires_result(self) -> None:
        with pytest.raises(TypeError, match="producing a Result"):
            run(map_ok(pure(1), double), 0)


class TestMapErr:
    def test_map_err_of_err(self) -> None:
        assert run(map_err(err("boom"), str.upper), 3) == run(err("BOOM"), 3)

    def test_map_err_leaves_ok_and_state(self) -> None:
        action = Action(lambda s: (s * 2, Ok("fine")))
        assert run(map_err(action, lambda e: pytest.fail("must not run")), 5) == (
            10,
            Ok("fine"),
        )

    def test_map_error_alias(self) -> None:
        assert map_error is map_err
        assert err(1).map_error(lambda e: e + 1).run(0) == (0, Err(2))
        assert err(1).map_err(lambda e: e + 1).run(0) == (0, Err(2))


@pytest.mark.parametrize(
    ("combinator", "name"),
    [(fmap, "fmap"), (map_ok, "map_ok"), (map_err, "map_err")],
)
def test_transformers_reject_non_action_source(combinator, name) -> None:
    with pytest.raises(TypeError, match=f"{name} expects an Action; got function"):
        combinator(lambda s: (s, Ok(1)), double)

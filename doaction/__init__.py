"""
doaction - explicit state threading for Python.

An ``Action`` wraps a pure function ``state -> (new_state, result)``. Actions
compose with ``bind`` / ``try_bind``, fold over sequences with ``all_of`` /
``each`` / ``try_all`` / ``try_each``, and read naturally with generator
do-notation.

Example:
    >>> from doaction import do, get_state, run, update_state
    >>>
    >>> @do
    ... def increment(n):
    ...     yield update_state(lambda s: s + n)
    ...     current = yield get_state()
    ...     return current
    >>>
    >>> run(increment(2), 4)
    (6, 6)
"""

# Vendored types
from doaction._vendor import Err, FrozenDict, Ok, Result

from doaction.action import (
    Action,
    ResultAction,
    # Invocation
    run,
    eval_action,
    exec_action,
    # Constructors
    pure,
    ok,
    err,
    get_state,
    set_state,
    update_state,
    # Transformers
    fmap,
    map_ok,
    map_err,
    map_error,
    # Sequencing
    bind,
    try_bind,
)

from doaction._collection_combinators import all_of, each, try_all, try_each

from doaction.do import ActionGenerator, DoFunction, TryDoFunction, do, try_do

from doaction.state import Get, Modify, Put

from doaction.errors import MissingStateKeyError, UnwrapError

from doaction.trace import traced

__version__ = "0.1.0"

__all__ = [
    # Core
    "Action",
    "ResultAction",
    "ActionGenerator",
    "DoFunction",
    "TryDoFunction",
    "do",
    "try_do",
    # Invocation
    "run",
    "eval_action",
    "exec_action",
    # Constructors
    "pure",
    "ok",
    "err",
    "get_state",
    "set_state",
    "update_state",
    # Transformers
    "fmap",
    "map_ok",
    "map_err",
    "map_error",
    # Sequencing
    "bind",
    "try_bind",
    # Collections
    "all_of",
    "each",
    "try_all",
    "try_each",
    # Keyed state
    "Get",
    "Put",
    "Modify",
    # Vendored types
    "Ok",
    "Err",
    "Result",
    "FrozenDict",
    # Errors
    "MissingStateKeyError",
    "UnwrapError",
    # Tracing
    "traced",
]

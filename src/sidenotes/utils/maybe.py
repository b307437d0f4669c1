#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/utils/maybe.py
"""Short-circuiting composition of lookups that may come back empty.

A chain of dependent lookups is written as a generator: each ``yield`` hands a
lookup result to the driver, which sends it straight back in if it is present
and abandons the chain the moment one is ``None``.

Examples
--------
    >>> @maybe_do
    ... def first_word_length(text):
    ...     words = yield (text.split() or None)
    ...     first = yield words[0]
    ...     return len(first)
    >>> first_word_length("hello world")
    5
    >>> first_word_length("   ") is None
    True

"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Generator, Optional, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


def maybe_do(gen_fn: Callable[P, Generator[Any, Any, R]]) -> Callable[P, Optional[R]]:
    """Run a generator function as an all-or-nothing chain of optional steps.

    Parameters
    ----------
    gen_fn : callable
        Generator function. Every value it yields is checked: ``None`` stops
        the chain, anything else (including falsy values such as ``0`` or
        ``""``) is sent back into the generator as the result of the yield.

    Returns
    -------
    callable
        Function with the same signature returning the generator's return
        value, or ``None`` if any yielded value was ``None``.

    """

    @wraps(gen_fn)
    def run(*args: P.args, **kwargs: P.kwargs) -> Optional[R]:
        steps = gen_fn(*args, **kwargs)
        try:
            value = next(steps)
            while value is not None:
                value = steps.send(value)
        except StopIteration as finished:
            return finished.value
        steps.close()
        return None

    return run

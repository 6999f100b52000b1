# -*- coding: utf-8 -*-
"""Factorial, three ways.

The direct recursive version runs out of Python stack somewhere below
n = 1000 (with the default recursion limit). The other two force one thunk
per multiplication instead, and run at constant stack depth for any n.
"""

__all__ = ["factorial", "factorial_acc", "factorial_rec"]

from .cps import identity, deliver, chain
from .tco import make_thunk, make_trampoline

def _validate(n):
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"factorial expects an int, got {type(n)} with value {repr(n)}")
    if n < 0:
        raise ValueError(f"factorial is not defined for negative numbers, got {n}")

def factorial_rec(n):
    """n!, by direct recursion. For reference; crashes for large n."""
    _validate(n)
    if n <= 1:
        return 1
    return n * factorial_rec(n - 1)

@make_trampoline
def _factorial_acc(n, acc):
    if n <= 1:
        return acc
    return make_thunk(_factorial_acc, n - 1, n * acc)

def factorial_acc(n):
    """n!, tail recursive with an accumulator for the running product."""
    _validate(n)
    return _factorial_acc(n, 1)

def _factorial_cps(n, continuation=identity):
    if n <= 1:
        return deliver(continuation, 1)
    return make_thunk(_factorial_cps, n - 1, chain(continuation, lambda result: n * result))

_factorial = make_trampoline(_factorial_cps)

def factorial(n):
    """n!, in continuation-passing style.

    The multiplications happen on the way back up, inside the chain of
    continuations; each continuation application is a thunk too, so the
    ascent does not grow the stack either.

    Forces ``2 * n - 1`` thunks for ``n >= 1``.
    """
    _validate(n)
    return _factorial(n)

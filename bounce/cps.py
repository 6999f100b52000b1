# -*- coding: utf-8 -*-
"""Continuation-passing style (CPS), for use with the trampoline.

A thunk only saves stack when the call it defers is the *last* thing the
caller does. Most recursive algorithms do something after the recursive call
returns (``n * fact(n - 1)``), so they must first be rewritten so that every
call is a tail call. The rewrite passes an explicit *continuation*: a
one-argument function that receives the result of the current call and does
whatever the caller would have done with it.

**The rewrite, step by step**:

A CPS function takes its usual arguments plus ``continuation``, defaulting to
``identity`` so that top-level callers get the result back unwrapped::

    def f(x, continuation=identity):
        ...

 - **Base case**: hand the result to the continuation, as a thunk::

       return deliver(continuation, base_value)

   Calling ``continuation(base_value)`` directly also gives the right answer,
   but then the continuations call each other on the way back up, and the
   stack growth has just moved from the descent to the ascent.

 - **One recursive call**: wrap the continuation with whatever the caller
   did to the result, and tail call on the smaller problem::

       return make_thunk(f, smaller, chain(continuation, lambda r: combine(x, r)))

 - **Two recursive calls** (e.g. left and right subtrees): make one of them
   the tail call, and do the other inside its continuation::

       def after_left(left_result):
           return make_thunk(f, node.right,
                             chain(continuation, lambda right_result: left_result + right_result + 1))
       return make_thunk(f, node.left, after_left)

   Every call is now a thunk, so the native stack stays flat; the pending
   work lives in the chain of continuation closures on the heap.

   A cheaper variant calls the *plain* (trampolined) function for one of the
   subtrees directly inside the continuation. That call starts a nested
   trampoline, so stack depth then grows with the nesting depth along that
   branch. See ``bounce.tree`` for both variants.

 - **Accumulators**: when the pending work is just one value (a running
   product, a list of kept items), pass the value instead of a continuation.
   This is plain tail recursion and needs no closures at all.

 - Finally, wrap the CPS function with ``make_trampoline`` to get a plain
   function for the outside world.

Continuations must capture the values they need at creation time. Inside a
recursive function this is automatic, as each call has its own parameters;
in a ``for`` loop it is not (late binding of the loop variable), so pass such
values as arguments, e.g. via ``chain``.

**Example**::

    def _fact(n, continuation=identity):
        if n <= 1:
            return deliver(continuation, 1)
        return make_thunk(_fact, n - 1, chain(continuation, lambda r: n * r))
    fact = make_trampoline(_fact)
    assert fact(5) == 120
"""

__all__ = ["identity", "deliver", "chain"]

from .fun import identity
from .tco import make_thunk

def deliver(continuation, *values):
    """Pass `values` to `continuation`, deferred.

    Returns a thunk; the trampoline performs the actual call. Use this at
    base cases, and wherever a continuation is invoked with a result.
    """
    return make_thunk(continuation, *values)

def chain(continuation, combine):
    """Make a new continuation that folds in more work before `continuation`.

    The new continuation, given a result `r`, delivers ``combine(r)`` to
    `continuation`. Both are bound now, so the new continuation is safe to
    create in a loop.
    """
    def chained(result):
        return deliver(continuation, combine(result))
    return chained

# -*- coding: utf-8 -*-
"""Thunks and trampolines: deep recursion at constant call stack depth.

Where speed matters, prefer the usual ``for`` and ``while`` constructs. The
machinery here is for algorithms that are naturally expressed as recursion,
but would blow Python's call stack when the input gets large.

**API reference**:

 - ``make_thunk(f, a, ..., kw=v, ...)`` creates a *thunk*: a deferred call
   of ``f`` with the given, already evaluated, arguments. Calling the thunk
   with no arguments (*forcing* it) performs that one call.

 - ``trampoline(v)`` forces ``v``, then forces the result, and so on, until
   the current value is not a thunk. That value is returned.

   - Anything that is not a ``Thunk`` instance is a final value. This is
     decided by type, not by callability, so an algorithm may well return a
     plain function as its result.

 - ``make_trampoline(f)`` wraps a function that returns thunks, so that the
   outside world sees a plain function. Also usable as a decorator.

 - Inside such a function:

   - ``g(a, ...)`` is just a normal call, no stack savings.

   - ``return make_thunk(g, a, ...)`` is a tail call to ``g``. The call
     happens after the current function has returned to the trampoline,
     so the stack does not grow.

   - When done, just return the final result normally.

 - **"thunk" is a noun, not a verb.** ``make_thunk(g, ...)`` by itself does
   nothing. If you get a thunk object back from one of your own helpers
   instead of the result, or ``None``, check for a missing ``return`` or a
   missing trampoline. Most often you'll get "unforced thunk" warnings
   printed to stderr if you run into this.

**Instrumentation**:

The trampoline consults two dynamic variables (see ``bounce.dynassign``) at
the start of each run. Use the context managers to set them:

 - ``with stepcounter() as steps:`` counts the thunks forced in the block
   by the current thread.
 - ``with steplimit(n):`` aborts any single run that forces more than ``n``
   thunks, by raising ``StepLimitExceeded``. There is no limit by default;
   a rewrite that fails to shrink its input every step will then simply
   loop forever, so use this in tests of such rewrites.

**Examples**::

    # tail recursion, accumulator style
    @make_trampoline
    def fact(n, acc=1):
        if n == 0:
            return acc
        return make_thunk(fact, n - 1, n * acc)
    assert fact(4) == 24
    fact(5000)  # no crash

    # mutual recursion
    @make_trampoline
    def even(n):
        if n == 0:
            return True
        return make_thunk(odd, n - 1)
    @make_trampoline
    def odd(n):
        if n == 0:
            return False
        return make_thunk(even, n - 1)
    assert even(10000) is True

A thunk whose target is a ``make_trampoline`` wrapper targets the wrapped
function instead, so this remains a one-trampoline party even when tail
calling another trampolined function.

See ``bounce.cps`` for how to get non-tail-recursive algorithms into a shape
where every call is a tail call.
"""

__all__ = ["Thunk", "make_thunk", "isthunk",
           "trampoline", "make_trampoline",
           "stepcounter", "steplimit", "StepLimitExceeded"]

from contextlib import contextmanager
from functools import wraps
import sys
import threading

from .collections import box
from .dynassign import dyn, make_dynvar

make_dynvar(trampoline_maxsteps=None,
            trampoline_stepcounter=None)

class StepLimitExceeded(RuntimeError):
    """Raised by a trampoline run that forced more thunks than allowed by `steplimit`."""

class Thunk:
    """A deferred call: one step of a computation driven by a trampoline.

    If you have already packed args and kwargs, you can instantiate this
    directly; ``make_thunk`` just performs the packing.
    """
    def __init__(self, target, args, kwargs):
        if not callable(target):
            raise TypeError(f"Thunk target must be callable, got {type(target)} with value {repr(target)}")
        # Don't let target bring along its trampoline if it has one.
        self.target = target._entrypoint if hasattr(target, "_entrypoint") else target
        self.args = tuple(args)
        self.kwargs = dict(kwargs)
        self._claimed = False  # set when forced, or when taken over by a trampoline

    def __call__(self):
        """Force the thunk: perform the deferred call and return its result."""
        self._claimed = True
        return self.target(*self.args, **self.kwargs)

    def __repr__(self):
        return "<Thunk at 0x{:x}: target={}, args={}, kwargs={}>".format(id(self),
                                                                         self.target,
                                                                         self.args,
                                                                         self.kwargs)

    def __del__(self):
        """Warn about bugs in client code.

        Since it's ``__del__``, we can't raise any exceptions, so we print a
        warning. Not 100% foolproof: Python's GC does not guarantee that
        ``__del__`` runs for objects still alive at interpreter exit.

        **Typical causes**:

        *Missing "return"*::

            def foo(n):
                if n == 0:
                    return "done"
                make_thunk(foo, n - 1)

        The thunk was created and discarded; the trampoline got the ``None``
        from the implicit ``return None``.

        *No trampoline*::

            def foo(n):
                return make_thunk(bar, n)
            foo(42)

        Here nothing drives the thunk. Either call ``trampoline(foo(42))``
        or decorate ``foo`` with ``make_trampoline``.
        """
        if not getattr(self, "_claimed", True):  # a failed __init__ leaves nothing to warn about
            print("WARNING: unforced {}".format(repr(self)), file=sys.stderr)

def make_thunk(target, *args, **kwargs):
    """Create a thunk that, when forced, calls ``target(*args, **kwargs)``.

    The arguments are evaluated now, by the caller, like in any Python call;
    the thunk just stores the resulting objects. Likewise, ``target`` is
    fixed at construction time.

    Parameters:
        target:
            The function to be called.
        *args:
            Positional arguments to be passed to `target`.
        **kwargs:
            Named arguments to be passed to `target`.
    """
    return Thunk(target, args, kwargs)

def isthunk(x):
    """Return whether `x` is a thunk (as opposed to a final value)."""
    return isinstance(x, Thunk)

def trampoline(value):
    """Force thunks until a final value appears, and return that value.

    `value` may be a thunk, or already a final value (returned as-is).

    Exceptions raised by a forced thunk propagate unchanged.
    """
    maxsteps = dyn.trampoline_maxsteps
    counter = dyn.trampoline_stepcounter
    if counter is not None:
        owner, counter = counter
        if owner is not threading.current_thread():  # counts only the opening thread
            counter = None
    steps = 0
    try:
        while isinstance(value, Thunk):
            value._claimed = True
            if maxsteps is not None and steps >= maxsteps:
                raise StepLimitExceeded(f"trampoline forced more than {maxsteps} thunks; next would have been {repr(value)}")
            steps += 1
            value = value()
        return value
    finally:
        if counter is not None:
            counter << counter.get() + steps

# We want @wraps to preserve docstrings, so the decorator must be a function, not a class.
def make_trampoline(function):
    """Wrap a thunk-returning function into a plain function.

    Calling the result calls `function` once, with the given arguments, and
    then drives whatever it returned through `trampoline`.
    """
    @wraps(function)
    def trampolined(*args, **kwargs):
        return trampoline(function(*args, **kwargs))
    # fortunately functions in Python are just objects; stash for the Thunk constructor
    trampolined._entrypoint = function
    return trampolined

@contextmanager
def stepcounter():
    """Count the thunks forced by trampoline runs in the block.

    Nested runs (a trampolined function called normally from inside another
    trampoline) are counted too. Runs in other threads are not, even
    in threads started inside the block. The count is available after each run::

        with stepcounter() as steps:
            fact(10)
        print(unbox(steps))
    """
    b = box(0)
    with dyn.let(trampoline_stepcounter=(threading.current_thread(), b)):
        yield b

@contextmanager
def steplimit(n):
    """Limit each trampoline run in the block to forcing at most `n` thunks.

    A run that would need more raises `StepLimitExceeded`. For catching
    rewrites that never terminate.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        raise ValueError(f"steplimit expects a non-negative int, got {type(n)} with value {repr(n)}")
    with dyn.let(trampoline_maxsteps=n):
        yield

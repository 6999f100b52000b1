# -*- coding: utf-8 -*-
"""Small function utilities."""

__all__ = ["identity", "withself"]

from functools import wraps

def identity(*args, **kwargs):
    """Identity function.

    This is the default continuation of the CPS functions in ``bounce``.

    One positional arg is returned unchanged. With no args, returns ``None``.
    Several args are returned as a tuple. Named args are not supported.

    Example::

        assert identity(42) == 42
        assert identity(1, 2, 3) == (1, 2, 3)
        assert identity() is None
    """
    if kwargs:
        raise TypeError(f"identity() takes positional arguments only, got {kwargs}")
    if not args:
        return None
    return args if len(args) > 1 else args[0]

def withself(f):
    """Decorator. Allow a lambda to refer to itself.

    The reference to the lambda itself is passed as the first positional
    argument. Declared explicitly, passed implicitly, like the ``self`` of a
    method.

    Example::

        fact = withself(lambda self, n: n * self(n - 1) if n > 1 else 1)
        assert fact(5) == 120

    With thunking::

        fact = make_trampoline(withself(lambda self, n, acc=1:
                                          acc if n == 0 else make_thunk(self, n - 1, n * acc)))
        assert fact(5) == 120
        fact(5000)  # no crash
    """
    @wraps(f)
    def fwithself(*args, **kwargs):
        return f(fwithself, *args, **kwargs)
    return fwithself

# -*- coding: utf-8 -*-
"""Miscellaneous constructs."""

__all__ = ["timer", "stackdepth"]

import inspect
from time import monotonic

class timer:
    """Simplistic context manager for performance-testing sections of code.

    Example::

        with timer() as tictoc:
            for _ in range(int(1e7)):
                pass
        print(tictoc.dt)  # elapsed time in seconds (float)

    If only interested in printing the result::

        with timer(p=True):
            for _ in range(int(1e7)):
                pass
    """
    def __init__(self, p=False):
        """p: if True, print the delta-t when done.

        Regardless of ``p``, the result is always accessible as the ``dt``.
        """
        self.p = p
    def __enter__(self):
        self.t0 = monotonic()
        return self
    def __exit__(self, exctype, excvalue, traceback):
        self.dt = monotonic() - self.t0
        if self.p:
            print(self.dt)

def stackdepth():
    """Return the number of frames on the call stack of the caller.

    The caller's own frame counts. Useful for checking that a trampolined
    computation really runs at constant native stack depth::

        depths = set()
        def step(n):
            depths.add(stackdepth())
            ...
    """
    frame = inspect.currentframe().f_back
    depth = 0
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth

# -*- coding: utf-8 -*-
"""Mutable single-item cell."""

__all__ = ["box", "unbox"]

class box:
    """Minimalistic, mutable single-item container à la Racket.

    Useful when a counter must be updated from inside a closure or a
    continuation, without resorting to ``nonlocal`` rebinding::

        b = box(0)
        def bump(b):
            b << unbox(b) + 1
        bump(b)
        assert unbox(b) == 1

    A box compares equal to the item it contains. A box is **not** hashable,
    because it is a mutable container.
    """
    def __init__(self, x=None):
        self.x = x
    def __repr__(self):  # pragma: no cover
        return f"box({repr(self.x)})"
    def __contains__(self, x):
        return self.x == x
    def __iter__(self):
        return (x for x in (self.x,))
    def __len__(self):
        return 1
    def __eq__(self, other):
        return other == self.x
    __hash__ = None
    def set(self, x):
        """Store a new value in the box, replacing the old one. Return the new value."""
        self.x = x
        return x
    def __lshift__(self, x):
        """`b << 42` is the same as `b.set(42)`."""
        return self.set(x)
    def get(self):
        """Return the value currently in the box."""
        return self.x

def unbox(b):
    """Return the value from inside the box b.

    If `b` is not a `box`, raises `TypeError`.
    """
    if not isinstance(b, box):
        raise TypeError(f"Expected box, got {type(b)} with value {repr(b)}")
    return b.get()

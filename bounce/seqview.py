# -*- coding: utf-8 -*-
"""Uniform first/rest access to sequences.

The recursive algorithms in ``bounce`` see their input through three
operations: ``is_empty``, ``first`` and ``rest``. These work on:

 - Linked lists (``cons``/``nil``): all three are O(1).

 - ``IndexedView``: a Python sequence plus a start index. All three are O(1);
   ``rest`` just makes a new view with the index bumped by one.

 - Any other Python sequence (``list``, ``tuple``, ``str``, ...): ``rest`` is
   a slice, which copies, so a full recursive walk costs O(n**2). Fine for
   small inputs, and for comparing against the other two.

Example::

    v = view([1, 2, 3])
    assert first(rest(v)) == 2
    l = next_list([1, 2, 3])
    assert first(rest(l)) == 2
"""

__all__ = ["IndexedView", "view", "next_list",
           "is_empty", "first", "rest"]

from collections.abc import Sequence

from .llist import cons, nil, llist

class IndexedView(Sequence):
    """Read-only view of `data` from position `index` onward.

    The underlying sequence is not copied. It is the caller's responsibility
    not to mutate it while views are alive.
    """
    def __init__(self, data, index=0):
        if not isinstance(data, Sequence):
            raise TypeError(f"Expected a sequence, got {type(data)} with value {repr(data)}")
        if not isinstance(index, int) or index < 0:
            raise ValueError(f"Expected a non-negative int index, got {repr(index)}")
        self.data = data
        self.index = index
    def __len__(self):
        return max(0, len(self.data) - self.index)
    def __getitem__(self, k):
        if isinstance(k, slice):
            return [self[j] for j in range(*k.indices(len(self)))]
        if not isinstance(k, int):
            raise TypeError(f"Expected an int or a slice, got {type(k)} with value {repr(k)}")
        n = len(self)
        if k < 0:
            k += n
        if not 0 <= k < n:
            raise IndexError(f"IndexedView index out of range, got {repr(k)} for length {n}")
        return self.data[self.index + k]
    def __iter__(self):
        for k in range(self.index, len(self.data)):
            yield self.data[k]
    def __eq__(self, other):
        if isinstance(other, IndexedView):
            return list(self) == list(other)
        return NotImplemented
    __hash__ = None
    def __repr__(self):
        return f"IndexedView({repr(self.data)}, {self.index})"

def view(seq):
    """Return an `IndexedView` of `seq` starting at its beginning."""
    if isinstance(seq, IndexedView):
        return seq
    return IndexedView(seq)

next_list = llist

def _unsupported(seq):
    return TypeError(f"Expected a linked list, IndexedView or sequence, got {type(seq)} with value {repr(seq)}")

def is_empty(seq):
    """Return whether `seq` has no elements."""
    if seq is nil:
        return True
    if isinstance(seq, cons):
        return False
    if isinstance(seq, IndexedView):
        return seq.index >= len(seq.data)
    if isinstance(seq, Sequence):
        return len(seq) == 0
    raise _unsupported(seq)

def first(seq):
    """Return the first element of `seq`. Raise `IndexError` if empty."""
    if is_empty(seq):
        raise IndexError("first of an empty sequence")
    if isinstance(seq, cons):
        return seq.car
    if isinstance(seq, IndexedView):
        return seq.data[seq.index]
    return seq[0]

def rest(seq):
    """Return `seq` without its first element. Raise `IndexError` if empty.

    The result has the same kind as the input: a linked list, a view, or a
    slice of the sequence.
    """
    if is_empty(seq):
        raise IndexError("rest of an empty sequence")
    if isinstance(seq, cons):
        return seq.cdr
    if isinstance(seq, IndexedView):
        return IndexedView(seq.data, seq.index + 1)
    return seq[1:]

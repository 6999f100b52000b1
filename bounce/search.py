# -*- coding: utf-8 -*-
"""Linear and binary search, as tail recursion driven by a trampoline.

Both searches have a single recursive call in tail position, so they need no
continuations; each step simply returns a thunk for the next step. These are
the simplest cases of the machinery, and loops would do just as well. They
are useful as a baseline: the trampolined versions must agree with the
straightforward ones on every input.
"""

__all__ = ["lin_search", "lin_search_loop",
           "binary_search", "binary_search_rec"]

from collections.abc import Sequence

from .seqview import is_empty, first, rest
from .tco import make_thunk, make_trampoline

@make_trampoline
def lin_search(element, seq):
    """Return whether `element` occurs in `seq`.

    `seq` may be anything ``bounce.seqview`` understands. With a linked list
    or an ``IndexedView`` this is O(n); with a plain list every step slices,
    so O(n**2).
    """
    if is_empty(seq):
        return False
    if first(seq) == element:
        return True
    return make_thunk(lin_search, element, rest(seq))

def lin_search_loop(element, seq):
    """Return whether `element` occurs in `seq`. Iterative, for reference."""
    while not is_empty(seq):
        if first(seq) == element:
            return True
        seq = rest(seq)
    return False

def _check_sorted_sequence(seq):
    if not isinstance(seq, Sequence):
        raise TypeError(f"binary search needs a random-access sequence, got {type(seq)} with value {repr(seq)}")

def binary_search(element, seq):
    """Return whether `element` occurs in the sorted sequence `seq`.

    Searches the inclusive index window ``[first, last]``, initially the
    whole sequence. The middle element is excluded from the next window in
    both directions, so the window shrinks every step and the search forces
    at most ``floor(log2(n)) + 1`` thunks.

    `seq` must be sorted ascending; if it is not, the result is meaningless
    (but the search still terminates).
    Any random-access sequence works, ``IndexedView`` included.
    """
    _check_sorted_sequence(seq)
    return _binary_search(element, seq, 0, len(seq) - 1)

@make_trampoline
def _binary_search(element, seq, lo, hi):
    if hi < lo:
        return False
    middle = (lo + hi) // 2
    x = seq[middle]
    if x == element:
        return True
    if x < element:
        return make_thunk(_binary_search, element, seq, middle + 1, hi)
    return make_thunk(_binary_search, element, seq, lo, middle - 1)

def binary_search_rec(element, seq, lo=0, hi=None):
    """Same as `binary_search`, but plain recursion. For reference."""
    _check_sorted_sequence(seq)
    if hi is None:
        hi = len(seq) - 1
    if hi < lo:
        return False
    middle = (lo + hi) // 2
    x = seq[middle]
    if x == element:
        return True
    if x < element:
        return binary_search_rec(element, seq, middle + 1, hi)
    return binary_search_rec(element, seq, lo, middle - 1)

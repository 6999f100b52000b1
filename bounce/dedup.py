# -*- coding: utf-8 -*-
"""Remove adjacent duplicates from a sequence, accumulator style."""

__all__ = ["remove_adjacent_duplicates", "remove_adjacent_duplicates_rec"]

from .llist import cons, nil, lreverse
from .seqview import is_empty, first, rest
from .tco import make_thunk, make_trampoline

def _output_as(seq, linked):
    """Convert the linked list `linked` to the same kind of container as `seq`."""
    if isinstance(seq, cons) or seq is nil:
        return linked
    return list(linked)

@make_trampoline
def _rmdup(seq, acc):
    # acc: kept elements so far, most recent first.
    if is_empty(seq):
        return lreverse(acc)
    x = first(seq)
    if acc is not nil and acc.car == x:
        return make_thunk(_rmdup, rest(seq), acc)
    return make_thunk(_rmdup, rest(seq), cons(x, acc))

def remove_adjacent_duplicates(seq):
    """Collapse each run of equal adjacent elements of `seq` into one.

    Example::

        assert remove_adjacent_duplicates([1, 1, 2, 2, 3, 1]) == [1, 2, 3, 1]

    The result is a linked list if `seq` is one, otherwise a ``list``.
    Runs at constant stack depth; the accumulator is a linked list, so each
    step is O(1) (for linked lists and ``IndexedView`` inputs).
    """
    return _output_as(seq, _rmdup(seq, nil))

def remove_adjacent_duplicates_rec(seq):
    """Same as `remove_adjacent_duplicates`, but plain recursion. For reference."""
    def rmdup(seq):
        if is_empty(seq):
            return nil
        x, tail = first(seq), rest(seq)
        out = rmdup(tail)
        if out is not nil and out.car == x:
            return out
        return cons(x, out)
    return _output_as(seq, rmdup(seq))

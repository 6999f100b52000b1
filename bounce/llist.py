# -*- coding: utf-8 -*-
"""Cons cells and linked lists ("next-lists").

A linked list gives O(1) access to the rest of the list, where slicing a
Python list costs O(n). This is what keeps the recursive sequence algorithms
in ``bounce`` linear.

Hashable, iterable, and all operations are iterative, so even very long
lists are safe to compare, hash and print.
"""

__all__ = ["cons", "nil", "car", "cdr",
           "LinkedListIterator",
           "ll", "llist", "lreverse"]

from itertools import zip_longest

class Nil:
    """The empty linked list. Singleton."""
    _instance = None
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    # support the iterator protocol so we can say tuple(nil) --> ()
    def __iter__(self):
        return self
    def __next__(self):
        raise StopIteration()
    def __bool__(self):
        return False
    def __len__(self):
        return 0
    def __repr__(self):
        return "nil"
    def __reduce__(self):
        return (Nil, ())
nil = Nil()

class LinkedListIterator:
    """Iterator for linked lists built from cons cells."""
    def __init__(self, head, _fullerror=True):
        if not isinstance(head, cons) and head is not nil:
            raise TypeError("Expected a cons or nil, got {} with value {}".format(type(head), head))
        def walker(head):
            cell = head
            while cell is not nil:
                yield cell.car
                if isinstance(cell.cdr, cons) or cell.cdr is nil:
                    cell = cell.cdr
                else:
                    if _fullerror:
                        raise TypeError("Not a linked list: {}".format(head))
                    else:  # avoid infinite loop in cons.__repr__
                        raise TypeError("Not a linked list")
        self.walker = walker(head)
    def __iter__(self):
        return self
    def __next__(self):
        return next(self.walker)

class cons:
    """Cons cell a.k.a. pair. Immutable, like in Racket.

    Iterable as a linked list. A single cell whose ``cdr`` is not a list
    iterates as the pair ``(car, cdr)``.
    """
    def __init__(self, v1, v2):
        self.car = v1
        self.cdr = v2
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'cons' object does not support item assignment")
        super().__setattr__(k, v)
    def __iter__(self):
        if isinstance(self.cdr, cons) or self.cdr is nil:
            return LinkedListIterator(self)
        return iter((self.car, self.cdr))
    def __repr__(self):
        """Representation in pythonic notation.

        Suitable for ``eval`` if all elements are."""
        try:  # duck test linked list (true list only, no single-cell pair)
            # listcomp, not genexpr, since we want to trigger any exceptions **now**.
            result = [repr(x) for x in LinkedListIterator(self, _fullerror=False)]
            return "ll({})".format(", ".join(result))
        except TypeError:
            result = (repr(self.car), repr(self.cdr))
            return "cons({})".format(", ".join(result))
    def __eq__(self, other):
        if other is self:
            return True
        if isinstance(other, cons):
            try:  # duck test linked lists
                ia, ib = (list(LinkedListIterator(x)) for x in (self, other))
            except TypeError:
                return self.car == other.car and self.cdr == other.cdr
            fill = object()
            for a, b in zip_longest(ia, ib, fillvalue=fill):
                if a != b:
                    return False
            return True
        return False
    def __hash__(self):
        try:  # duck test linked list
            tpl = tuple(LinkedListIterator(self))
        except TypeError:
            tpl = (self.car, self.cdr)
        return hash(tpl)

def _typecheck(x):
    if not isinstance(x, cons):
        raise TypeError("Expected a cons, got {} with value {}".format(type(x), x))
    return x

def car(x):
    """Return the first half of a cons cell."""
    return _typecheck(x).car
def cdr(x):
    """Return the second half of a cons cell."""
    return _typecheck(x).cdr

def ll(*elts):
    """Make a linked list with the given elements.

    ``ll(...)`` plays the same role as ``[...]`` or ``(...)`` for lists or tuples,
    respectively, but for linked lists. See also ``llist``.

    **NOTE**: The returned data type is ``cons`` (or ``nil``), there is no ``ll`` type.
    """
    return llist(elts)

def llist(iterable):
    """Make a linked list from iterable.

    Sequences are walked backwards, so this costs one linear walk. Other
    iterables are first loaded into a list.
    """
    if not hasattr(iterable, "__reversed__") and not hasattr(iterable, "__getitem__"):
        iterable = list(iterable)
    out = nil
    for x in reversed(iterable):
        out = cons(x, out)
    return out

def lreverse(iterable):
    """Reverse an iterable, loading the result into a linked list.

    This is O(n), and consumes the input in forward order, so it works for
    linked lists too.
    """
    out = nil
    for x in iterable:
        out = cons(x, out)
    return out

# -*- coding: utf-8 -*-

from pickle import dumps, loads

import pytest

from bounce.llist import cons, nil, car, cdr, ll, llist, lreverse

def test_cons_car_cdr():
    c = cons(1, 2)
    assert car(c) == 1
    assert cdr(c) == 2
    with pytest.raises(TypeError):  # cons cells are immutable
        c.car = 3
    with pytest.raises(TypeError):
        car(42)
    assert cons(1, 2) == cons(1, 2)
    assert cons(1, 2) != cons(2, 3)

def test_ll():
    assert ll(1, 2, 3) == cons(1, cons(2, cons(3, nil)))
    assert ll() is nil
    assert ll(1, 2) != ll(1, 2, 3)
    assert tuple(ll(1, 2, 3)) == (1, 2, 3)
    assert tuple(nil) == ()

    # new instances based on existing ones are ok
    l1 = ll(3, 2, 1)
    l2 = cons(4, l1)
    assert l1 == ll(3, 2, 1)
    assert l2 == ll(4, 3, 2, 1)
    assert cons(6, cdr(l1)) == ll(6, 2, 1)

def test_llist_and_lreverse():
    assert llist([1, 2, 3]) == ll(1, 2, 3)
    assert llist(x for x in range(3)) == ll(0, 1, 2)
    assert llist(ll(1, 2)) == ll(1, 2)
    assert lreverse([1, 2, 3]) == ll(3, 2, 1)
    assert lreverse(ll(1, 2, 3)) == ll(3, 2, 1)
    assert lreverse([]) is nil

def test_repr():
    assert repr(cons(1, 2)) == "cons(1, 2)"
    assert repr(ll(1, 2, 3)) == "ll(1, 2, 3)"
    assert repr(nil) == "nil"

def test_long_lists():
    n = 100000
    a = llist(range(n))
    b = llist(range(n))
    assert a == b  # no crash
    assert hash(a) == hash(b)
    assert sum(a) == n * (n - 1) // 2

def test_hash_and_pickle():
    assert hash(ll(1, 2)) == hash(ll(1, 2))
    assert {ll(1, 2): "x"}[ll(1, 2)] == "x"
    assert loads(dumps(ll(1, 2, 3))) == ll(1, 2, 3)
    assert loads(dumps(nil)) is nil

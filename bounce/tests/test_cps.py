# -*- coding: utf-8 -*-

from bounce.cps import identity, deliver, chain
from bounce.tco import isthunk, make_thunk, make_trampoline, trampoline, stepcounter
from bounce.collections import unbox

def test_deliver():
    t = deliver(identity, 42)
    assert isthunk(t)
    assert trampoline(t) == 42
    assert trampoline(deliver(lambda a, b: a - b, 5, 3)) == 2

def test_chain():
    k = chain(identity, lambda r: r + 1)
    t = k(41)
    assert isthunk(t)  # delivering to the outer continuation is deferred
    assert trampoline(t) == 42

    # chains compose; innermost combine runs first
    k2 = chain(chain(identity, lambda r: r * 10), lambda r: r + 1)
    assert trampoline(k2(1)) == 20

def test_chain_binds_at_creation():
    # late binding of a loop variable would make all of these add 2
    ks = [chain(identity, lambda r, k=k: r + k) for k in range(3)]
    assert [trampoline(k(0)) for k in ks] == [0, 1, 2]

    # chain's own parameters are bound per call
    ks = []
    for combine in (abs, str, bool):
        ks.append(chain(identity, combine))
    assert [trampoline(k(-1)) for k in ks] == [1, "-1", True]

def test_single_self_call_rewrite():
    def _sum_to(n, continuation=identity):
        if n == 0:
            return deliver(continuation, 0)
        return make_thunk(_sum_to, n - 1, chain(continuation, lambda r: r + n))
    sum_to = make_trampoline(_sum_to)
    assert sum_to(10) == 55
    assert sum_to(100000) == 100000 * 100001 // 2  # no crash

def test_two_self_calls_rewrite():
    # Fibonacci, the non-tail-recursive way, in CPS
    def _fib(n, continuation=identity):
        if n < 2:
            return deliver(continuation, n)
        def after_first(a):
            return make_thunk(_fib, n - 2, chain(continuation, lambda b: a + b))
        return make_thunk(_fib, n - 1, after_first)
    fib = make_trampoline(_fib)
    assert [fib(n) for n in range(10)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    with stepcounter() as steps:
        fib(15)
    assert unbox(steps) > 0

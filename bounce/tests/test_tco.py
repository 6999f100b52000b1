# -*- coding: utf-8 -*-

import gc
import threading

import pytest

from bounce.tco import (Thunk, make_thunk, isthunk, trampoline, make_trampoline,
                        stepcounter, steplimit, StepLimitExceeded)
from bounce.collections import unbox
from bounce.fun import withself
from bounce.misc import stackdepth, timer

def test_thunk_basics():
    def add(a, b, c=0):
        return a + b + c
    t = make_thunk(add, 1, 2, c=3)
    assert isthunk(t)
    assert isinstance(t, Thunk)
    assert t.target is add
    assert t.args == (1, 2)
    assert t.kwargs == {"c": 3}
    assert t() == 6
    assert "Thunk" in repr(t)

    assert not isthunk(42)
    assert not isthunk(lambda: 42)  # callable, but not a thunk

def test_thunk_captures_arguments_at_construction():
    xs = []
    t = make_thunk(len, xs)
    assert t.args[0] is xs  # the object is captured, not the name
    assert t() == 0
    thunks = [make_thunk(lambda k: k * 10, k) for k in range(3)]
    assert [trampoline(th) for th in thunks] == [0, 10, 20]

def test_thunk_target_must_be_callable():
    with pytest.raises(TypeError):
        make_thunk(42)

def test_trampoline_final_values_pass_through():
    assert trampoline(42) == 42
    assert trampoline(None) is None
    f = lambda: 42  # noqa: E731
    assert trampoline(f) is f  # not a Thunk, so not forced

def test_trampoline_forces_until_final():
    t = make_thunk(make_thunk, make_thunk, lambda: "done")
    assert trampoline(t) == "done"

def test_tail_recursion():
    @make_trampoline
    def fact(n, acc=1):
        if n == 0:
            return acc
        return make_thunk(fact, n - 1, n * acc)
    assert fact(4) == 24
    assert fact.__name__ == "fact"
    assert fact(5000) > 0  # no crash

    # tail recursion in a lambda
    t = make_trampoline(withself(lambda self, n, acc=1:
                                 acc if n == 0 else make_thunk(self, n - 1, n * acc)))
    assert t(4) == 24
    assert t(5000) == fact(5000)

def test_mutual_tail_recursion():
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
    assert even(42) is True
    assert odd(4) is False
    assert even(10000) is True  # no crash

def test_thunk_strips_trampoline_of_target():
    @make_trampoline
    def f(n):
        return n if n == 0 else make_thunk(f, n - 1)
    t = make_thunk(f, 3)
    assert t.target is f._entrypoint
    assert trampoline(t) == 0

def test_error_propagation():
    class Boom(Exception):
        pass
    err = Boom("from deep inside")
    def explode():
        raise err
    @make_trampoline
    def countdown(n):
        if n == 0:
            return make_thunk(explode)
        return make_thunk(countdown, n - 1)
    with pytest.raises(Boom) as excinfo:
        countdown(100)
    assert excinfo.value is err

def test_idempotent_driving():
    @make_trampoline
    def fib(n, a=0, b=1):
        if n == 0:
            return a
        return make_thunk(fib, n - 1, b, a + b)
    first = trampoline(make_thunk(fib, 300))
    second = trampoline(make_thunk(fib, 300))
    assert first == second

def test_constant_stack_depth():
    def run(n):
        depths = set()
        def countdown(n, continuation):
            depths.add(stackdepth())
            if n == 0:
                return make_thunk(continuation, 0)
            def after(r):
                depths.add(stackdepth())
                return make_thunk(continuation, r + 1)
            return make_thunk(countdown, n - 1, after)
        def done(r):
            depths.add(stackdepth())
            return r
        assert trampoline(make_thunk(countdown, n, done)) == n
        return depths
    reference = run(10)
    for n in (100, 1000, 10000):
        assert run(n) == reference

def test_stepcounter():
    @make_trampoline
    def countdown(n):
        return n if n == 0 else make_thunk(countdown, n - 1)
    with stepcounter() as steps:
        countdown(10)
    assert unbox(steps) == 10
    with stepcounter() as steps:
        countdown(10)
        countdown(5)
    assert unbox(steps) == 15

    # thunk count grows linearly
    def count(n):
        with stepcounter() as steps:
            countdown(n)
        return unbox(steps)
    assert count(2000) - count(1000) == count(1000) - count(0)

def test_stepcounter_is_per_thread():
    @make_trampoline
    def countdown(n):
        return n if n == 0 else make_thunk(countdown, n - 1)
    counts = {}
    def worker():
        countdown(10)  # not counted by the main thread's counter
        with stepcounter() as own:
            countdown(10)
        counts["worker"] = unbox(own)
    with stepcounter() as steps:
        t = threading.Thread(target=worker)
        t.start()
        t.join()
        countdown(3)
    assert unbox(steps) == 3
    assert counts["worker"] == 10

    # many threads each counting their own runs lose nothing
    def busy(k):
        with stepcounter() as own:
            for _ in range(50):
                countdown(100)
        counts[k] = unbox(own)
    threads = [threading.Thread(target=busy, args=(k,)) for k in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(counts[k] == 5000 for k in range(8))

def test_steplimit():
    @make_trampoline
    def forever(n):
        return make_thunk(forever, n)
    with steplimit(100):
        with pytest.raises(StepLimitExceeded):
            forever(0)
    with pytest.raises(ValueError):
        with steplimit(-1):
            pass  # pragma: no cover
    with pytest.raises(ValueError):
        with steplimit(True):
            pass  # pragma: no cover

    @make_trampoline
    def countdown(n):
        return n if n == 0 else make_thunk(countdown, n - 1)
    with steplimit(10):
        assert countdown(10) == 0
        with pytest.raises(StepLimitExceeded):
            countdown(11)
    assert countdown(11) == 0  # limit gone outside the block

def test_unforced_thunk_warning(capsys):
    def bar():
        pass  # pragma: no cover
    def foo():
        make_thunk(bar)  # missing "return"
    foo()
    gc.collect()  # PyPy gives no guarantee when __del__ runs otherwise
    assert "WARNING: unforced" in capsys.readouterr().err

    @make_trampoline
    def fine(n):
        return n if n == 0 else make_thunk(fine, n - 1)
    fine(10)
    gc.collect()
    assert "WARNING" not in capsys.readouterr().err

def test_performance_benchmark():
    n = 100000

    with timer() as ip:
        for _ in range(n):
            pass

    with timer() as fp1:
        @make_trampoline
        def dowork(i=0):
            if i < n:
                return make_thunk(dowork, i + 1)
        dowork()

    print("do-nothing loop, {:d} iterations:".format(n))
    print("  builtin for {:g}s ({:g}s/iter)".format(ip.dt, ip.dt / n))
    print("  trampolined {:g}s ({:g}s/iter)".format(fp1.dt, fp1.dt / n))

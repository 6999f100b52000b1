# -*- coding: utf-8 -*-
"""Dynamic assignment.

This is how ``bounce`` is configured. The trampoline reads its settings from
dynamic variables, so a setting applies during the dynamic extent of a
``with dyn.let(...)`` block, also to code defined elsewhere::

    from bounce.dynassign import dyn

    with dyn.let(trampoline_maxsteps=1000):
        run_something()  # any trampoline inside is limited to 1000 steps
"""

__all__ = ["dyn", "make_dynvar"]

import threading
from collections import ChainMap

# Global defaults, shared between threads; see make_dynvar.
_global_dynvars = {}

_L = threading.local()

_mainthread_stack = []
_mainthread_lock = threading.RLock()
def _getstack():
    if threading.current_thread() is threading.main_thread():
        return _mainthread_stack
    if not hasattr(_L, "_stack"):
        # A new thread starts from a snapshot of the main thread's bindings.
        with _mainthread_lock:
            _L._stack = _mainthread_stack.copy()
    return _L._stack

def _asmapping():
    return ChainMap(*reversed(_getstack()), _global_dynvars)

class _EnvBlock:
    def __init__(self, bindings):
        self.bindings = bindings
    def __enter__(self):
        if self.bindings:  # skip pushing an empty scope
            _getstack().append(self.bindings)
    def __exit__(self, t, v, tb):
        if self.bindings:
            _getstack().pop()

class _Dyn:
    """Dynamic variables, like Racket's ``parameterize``.

      - Dynamic variables are introduced by ``with dyn.let(name=value, ...)``.
        They exist during the dynamic extent of the with block.

      - Blocks nest. Inner definitions shadow outer ones.

      - Each thread has its own dynamic scope stack.

      - Global defaults, visible when no ``let`` binds the name, are set with
        ``make_dynvar``.

    Reading an unbound name raises ``AttributeError``. Dynamic variables are
    read-only; to change a value, open a new ``let``.
    """
    def let(self, **bindings):
        """Introduce dynamic bindings for the duration of a with block."""
        return _EnvBlock(bindings)

    def __getattr__(self, name):
        m = _asmapping()
        if name not in m:
            raise AttributeError(f"dynamic variable {repr(name)} is not defined")
        return m[name]

    def __setattr__(self, name, value):
        raise AttributeError("dynamic variables are rebound with 'with dyn.let(...)', not by assignment")

    def __contains__(self, name):
        return name in _asmapping()

    def __iter__(self):
        return iter(_asmapping())

    def items(self):
        """Return the current bindings, innermost scope winning, as (name, value) pairs."""
        return _asmapping().items()

    def __repr__(self):  # pragma: no cover
        bindings = [f"{k}={repr(v)}" for k, v in self.items()]
        return f"<dyn object at 0x{id(self):x}: {{{', '.join(bindings)}}}>"

dyn = _Dyn()

def make_dynvar(**bindings):
    """Set global defaults for dynamic variables.

    The default is used when no ``dyn.let`` in the current thread binds the
    name. Calling this again for an existing name overwrites the default.

    Example::

        make_dynvar(verbose=False)
        assert dyn.verbose is False
        with dyn.let(verbose=True):
            assert dyn.verbose is True
    """
    _global_dynvars.update(bindings)

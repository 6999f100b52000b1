# -*- coding: utf-8 -*
"""Deep recursion without a deep stack: thunks, trampolines and continuations.

See ``dir(bounce)`` and submodule docstrings for more. Start from
``bounce.tco`` (the driver) and ``bounce.cps`` (how to rewrite an algorithm
so that it can be driven).
"""

__version__ = '0.1.0'

from .collections import *  # noqa: F401, F403
from .cps import *  # noqa: F401, F403
from .dedup import *  # noqa: F401, F403
from .dynassign import *  # noqa: F401, F403
from .fun import *  # noqa: F401, F403
from .llist import *  # noqa: F401, F403
from .misc import *  # noqa: F401, F403
from .numeric import *  # noqa: F401, F403
from .search import *  # noqa: F401, F403
from .seqview import *  # noqa: F401, F403
from .tco import *  # noqa: F401, F403
from .tree import *  # noqa: F401, F403

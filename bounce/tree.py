# -*- coding: utf-8 -*-
"""Binary trees, and recursive algorithms on them in continuation-passing style.

A tree is built from immutable ``Node`` instances. A node is either a leaf
(no children) or internal (exactly two children). Annotating a tree, e.g.
with depth-first numbers, builds a new tree; the input is never modified.

Tree size comes in several flavors, which all agree on every tree:

 - ``size_of_tree_rec``: plain double recursion. Stack depth = tree depth.

 - ``size_of_tree``: CPS, left subtree tail-called, right subtree counted
   inside the continuation by a *nested* trampoline run. No stack growth
   along left branches, but each right turn on the way down nests one more
   trampoline. Fine for left-leaning or shallow trees; a long right spine
   still runs out of stack.

 - ``size_of_tree_cps``: CPS, both subtrees thunked. Constant stack depth
   for any shape; the pending work lives on the heap as continuation
   closures.

 - ``count_nodes``: explicit work-list, no recursion at all.
"""

__all__ = ["Node", "make_node", "balanced_tree", "left_spine", "right_spine",
           "iter_nodes",
           "size_of_tree_rec", "size_of_tree", "size_of_tree_cps", "count_nodes",
           "node_depth", "has_node",
           "DFNumbering", "depth_first_numbers", "in_df_range", "dfn_node_depth"]

from collections import namedtuple

from .cps import identity, deliver, chain
from .llist import cons, nil, lreverse
from .tco import make_thunk, make_trampoline

class Node:
    """Binary tree node. Immutable.

    `left` and `right` are both ``None`` (a leaf) or both ``Node`` instances.
    `dfrange` is an optional annotation, see `depth_first_numbers`.

    Equality is structural, and like hashing, runs without recursion, so
    arbitrarily deep trees can be compared.
    """
    def __init__(self, name, left=None, right=None, dfrange=None):
        if (left is None) != (right is None):
            raise ValueError(f"A node must have either no children or two, got left={repr(left)}, right={repr(right)}")
        for child in (left, right):
            if child is not None and not isinstance(child, Node):
                raise TypeError(f"Expected a Node as child, got {type(child)} with value {repr(child)}")
        self.name = name
        self.left = left
        self.right = right
        self.dfrange = dfrange
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'Node' object is immutable; use replace() to make an updated copy")
        super().__setattr__(k, v)

    @property
    def isleaf(self):
        return self.left is None

    def replace(self, **changes):
        """Return a new node with the given fields replaced. Children are shared."""
        fields = {"name": self.name, "left": self.left, "right": self.right, "dfrange": self.dfrange}
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown Node fields: {sorted(unknown)}")
        fields.update(changes)
        return Node(**fields)

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if a is None or b is None:
                return False
            if a.name != b.name or a.dfrange != b.dfrange:
                return False
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
        return True
    def __hash__(self):
        return hash(tuple((node.name, node.dfrange, node.isleaf) for node in iter_nodes(self)))
    def __repr__(self):
        extra = "" if self.dfrange is None else f", dfrange={self.dfrange}"
        if self.isleaf:
            return f"Node({repr(self.name)}{extra})"
        return f"Node({repr(self.name)}, <{repr(self.left.name)}>, <{repr(self.right.name)}>{extra})"

def make_node(name, left=None, right=None):
    """Make a tree node. A leaf if no children are given."""
    return Node(name, left, right)

def balanced_tree(levels):
    """Build a full binary tree with `levels` levels, i.e. ``2**levels - 1`` nodes.

    Nodes are named by their position in heap order: the root is ``"1"``,
    the children of ``"k"`` are ``"2k"`` and ``"2k+1"``.
    """
    if not isinstance(levels, int) or levels < 1:
        raise ValueError(f"Expected a positive number of levels, got {repr(levels)}")
    n = 2**levels - 1
    nodes = {}
    for k in range(n, 0, -1):
        if 2 * k > n:
            nodes[k] = Node(str(k))
        else:
            nodes[k] = Node(str(k), nodes.pop(2 * k), nodes.pop(2 * k + 1))
    return nodes[1]

def _spine(depth, leftward):
    if not isinstance(depth, int) or depth < 0:
        raise ValueError(f"Expected a non-negative depth, got {repr(depth)}")
    node = Node("bottom")
    for k in range(1, depth + 1):
        leaf = Node(f"leaf{k}")
        node = Node(f"spine{k}", node, leaf) if leftward else Node(f"spine{k}", leaf, node)
    return node

def left_spine(depth):
    """Build a tree of the given depth whose internal nodes all hang on the left.

    Every right child is a leaf. ``2 * depth + 1`` nodes.
    """
    return _spine(depth, leftward=True)

def right_spine(depth):
    """Mirror image of `left_spine`."""
    return _spine(depth, leftward=False)

def _checktree(tree):
    if not isinstance(tree, Node):
        raise TypeError(f"Expected a Node, got {type(tree)} with value {repr(tree)}")

def iter_nodes(tree):
    """Iterate over the nodes of `tree` in pre-order (node, left, right).

    Keeps its own stack of pending nodes, so tree depth is not limited by
    Python's call stack.
    """
    _checktree(tree)
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        if not node.isleaf:
            stack.append(node.right)
            stack.append(node.left)  # LIFO

def size_of_tree_rec(tree):
    """Number of nodes in `tree`, by plain recursion. For reference."""
    _checktree(tree)
    if tree.isleaf:
        return 1
    return size_of_tree_rec(tree.left) + size_of_tree_rec(tree.right) + 1

@make_trampoline
def size_of_tree(tree, continuation=identity):
    """Number of nodes in `tree`; left subtrees thunked, right ones nested.

    The left subtree is the tail call. The right subtree is counted by a
    normal call to this (trampolined) function from inside the continuation,
    which starts a nested trampoline. So the stack grows with the number of
    right turns on the deepest path, and not at all with left turns.
    """
    _checktree(tree)
    if tree.isleaf:
        return deliver(continuation, 1)
    def after_left(left_size):
        return deliver(continuation, left_size + size_of_tree(tree.right) + 1)
    return make_thunk(size_of_tree, tree.left, after_left)

@make_trampoline
def size_of_tree_cps(tree, continuation=identity):
    """Number of nodes in `tree`, at constant stack depth for any tree shape.

    Both subtrees are thunked: the left one is the tail call, and the right
    one is the tail call of the left one's continuation.
    """
    _checktree(tree)
    if tree.isleaf:
        return deliver(continuation, 1)
    def after_left(left_size):
        return make_thunk(size_of_tree_cps, tree.right,
                          chain(continuation, lambda right_size: left_size + right_size + 1))
    return make_thunk(size_of_tree_cps, tree.left, after_left)

def count_nodes(tree):
    """Number of nodes in `tree`, by walking an explicit work-list."""
    return sum(1 for _ in iter_nodes(tree))

@make_trampoline
def node_depth(tree, name, depth=0, continuation=identity):
    """Return the depth of the first node named `name`, or ``None`` if none.

    The root is at depth 0. Searches the left subtree first, and the right
    one only if the left one came up empty. Constant stack depth.
    """
    if tree is None:
        return deliver(continuation, None)
    _checktree(tree)
    if tree.name == name:
        return deliver(continuation, depth)
    def after_left(found):
        if found is not None:
            return deliver(continuation, found)
        return make_thunk(node_depth, tree.right, name, depth + 1, continuation)
    return make_thunk(node_depth, tree.left, name, depth + 1, after_left)

def has_node(tree, name):
    """Return whether `tree` has a node named `name`."""
    return node_depth(tree, name) is not None

DFNumbering = namedtuple("DFNumbering", ["tree", "table"])
DFNumbering.__doc__ = """Result of `depth_first_numbers`.

    `tree`: the annotated copy of the input tree.
    `table`: dict mapping node names to their depth-first numbers.
    """

@make_trampoline
def _number(node, counter, table, continuation):
    # Continuations take (numbered subtree, next free number, table so far).
    # The table is a linked list of (name, number) pairs, newest first.
    if node.isleaf:
        return deliver(continuation,
                       node.replace(dfrange=(counter, counter)),
                       counter + 1,
                       cons((node.name, counter), table))
    def after_left(left, counter, table):
        def after_right(right, counter, table):
            numbered = Node(node.name, left, right, dfrange=(left.dfrange[0], counter))
            return deliver(continuation, numbered, counter + 1, cons((node.name, counter), table))
        return make_thunk(_number, node.right, counter, table, after_right)
    return make_thunk(_number, node.left, counter, table, after_left)

def depth_first_numbers(tree):
    """Number the nodes of `tree` in depth-first post-order, starting from 0.

    Returns a `DFNumbering`: a new tree, in which each node has
    ``dfrange = (lo, hi)``, where `hi` is the node's own number and `lo` is
    the smallest number in its subtree; and a table mapping each node name
    to its number. If names repeat, the table has the last one numbered.

    Since a subtree gets a contiguous block of numbers, node `x` is in the
    subtree of node `y` exactly when ``in_df_range(number_of_x, y.dfrange)``.

    Runs at constant stack depth. The input tree is not modified.
    """
    _checktree(tree)
    def finish(numbered, counter, table):
        return DFNumbering(numbered, dict(lreverse(table)))
    return _number(tree, 0, nil, finish)

def in_df_range(i, dfrange):
    """Return whether the depth-first number `i` lies in the range `dfrange`."""
    lo, hi = dfrange
    return lo <= i <= hi

@make_trampoline
def _descend(node, target, depth):
    if node.dfrange is None:
        raise ValueError(f"Tree has no depth-first numbers at {repr(node)}; see depth_first_numbers")
    if node.dfrange[1] == target:
        return depth
    if node.isleaf:
        raise ValueError(f"Inconsistent depth-first numbering: {target} not found under {repr(node)}")
    if in_df_range(target, node.left.dfrange):
        return make_thunk(_descend, node.left, target, depth + 1)
    return make_thunk(_descend, node.right, target, depth + 1)

def dfn_node_depth(numbering, name):
    """Return the depth of the node named `name`, using a `DFNumbering`.

    Instead of searching the whole tree, walks down from the root, at each
    node stepping into the child whose range contains the target number.
    Cost O(depth). Returns ``None`` if there is no such node.
    """
    if name not in numbering.table:
        return None
    target = numbering.table[name]
    if not in_df_range(target, numbering.tree.dfrange):
        raise ValueError(f"Number {target} of {repr(name)} is outside the tree's range {numbering.tree.dfrange}")
    return _descend(numbering.tree, target, 0)

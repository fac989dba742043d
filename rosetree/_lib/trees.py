"""
Structural algorithms over Tree: folds, pruning, flattening and paths.

None stands for "no label" throughout. Labels themselves are never None.
"""

import logging
from itertools import islice

from . import fn
from .tree import Tree, flatten_left, fold_up, leaf, node

log = logging.getLogger(__name__)


# Tree a -> (a -> (b) -> b) -> Tree b
def bottom_up(tree, f):
    """
    Recomputes every label from the leaves toward the root.

    f receives a node's original label and the tuple of its children's new
    labels. The shape of the tree is unchanged.

    >>> bottom_up(node(1, [leaf(2), leaf(3)]), lambda a, bs: a + sum(bs))
    Tree(label=6, children=(Tree(label=2, children=()), Tree(label=3, children=())))

    """

    def combine(t, children):
        label = f(t.label, tuple(c.label for c in children))
        return Tree(label, children)

    return fold_up(tree, combine)


# Tree a -> (a -> Maybe b) -> Maybe (Tree b)
def prune(tree, f):
    """
    Removes every node for which f returns None, together with everything
    below it. A removed node's descendants are dropped, never promoted into
    the grandparent.

    Returns None when the root itself is removed.
    """

    def combine(t, children):
        label = f(t.label)
        if label is None:
            return None
        return Tree(label, tuple(c for c in children if c is not None))

    return fold_up(tree, combine)


# Tree (Maybe a) -> a -> Tree a
def clean(tree, initial):
    """
    Drops the None nodes of a tree of optional labels. If the root is None
    the result is a single leaf holding initial.
    """

    pruned = prune(tree, fn.identity)
    if pruned is None:
        log.debug('clean removed the root, defaulting to %r', initial)
        return leaf(initial)
    return pruned


# Tree a -> (Tree a -> Maybe a) -> a -> Tree a
def prune_in_context(tree, f, initial):
    """
    Like prune, but f is given the whole subtree rooted at each node rather
    than just the label, so it can decide based on the node's descendants.

    Each node is first relabelled with f(subtree), giving a tree of
    optional labels with the original shape; that tree is then cleaned.
    f always sees the original, unpruned subtree.
    """

    annotated = fold_up(tree, lambda t, children: Tree(f(t), children))
    if annotated.label is None:
        log.debug('prune_in_context removed the root of %r', tree.label)
    return clean(annotated, initial)


# Tree a -> Tree a
def flatten_sub_forests(tree):
    """
    Keeps the root and turns everything below it into a single level of
    leaves, in pre-order.
    """

    return node(tree.label, map(leaf, islice(flatten_left(tree), 1, None)))


# Tree a -> [[a]]
def all_paths(tree):
    """
    Every root-to-leaf path as a list of labels, leaves taken left to
    right.

    >>> all_paths(node('a', [node('b', [leaf('c')]), leaf('d')]))
    [['a', 'b', 'c'], ['a', 'd']]

    """

    paths = []
    # each entry carries its path as a (label, parent entry) chain so that
    # siblings share their prefix
    stack = [(tree, None)]
    while stack:
        t, up = stack.pop()
        here = (t.label, up)
        if t.children:
            stack.extend((c, here) for c in reversed(t.children))
        else:
            paths.append(_unwind(here))
    return paths


def _unwind(chain):
    path = []
    while chain is not None:
        label, chain = chain
        path.append(label)
    path.reverse()
    return path

from collections import namedtuple
from operator import attrgetter

from . import fn

_Tree = namedtuple('Tree', ['label', 'children'])


def leaf(label):
    return Tree(label)


def node(label, children=()):
    return Tree(label, children)


class Tree(_Tree):
    """
    An ordered multi-way tree: a label plus a tuple of child trees.

    Trees are never modified. Everything that looks like an edit hands back
    a new tree; untouched subtrees are shared with the old one.
    """

    __slots__ = ()

    def __new__(cls, label, children=()):
        return super(Tree, cls).__new__(cls, label, tuple(children))

    def is_leaf(self):
        return not self.children

    def size(self):
        return size(self)

    def flatten(self):
        return flatten_left(self)

    def map(self, f):
        return map_tree(self, f)

    def loc(self):
        from .zipper import zipper
        return zipper(self)


del _Tree


# Tree a -> iter a
def flatten_left(tree):
    """
    Yields every label in pre-order: the root, then each child's labels in
    order.

    The work stack holds the subtrees still to visit with the next one on
    top, so depth never touches the interpreter's call stack.
    """

    stack = [tree]
    while stack:
        t = stack.pop()
        yield t.label
        stack.extend(reversed(t.children))


# Tree a -> Int
def size(tree):
    return sum(1 for _ in flatten_left(tree))


# Tree a -> (Tree a -> (b) -> b) -> b
def fold_up(tree, combine):
    """
    Post-order reduction. combine is called once per node with the node
    itself and the tuple of results already computed for its children, in
    order. Returns whatever combine returned for the root.

    For example given the following tree:

            a
          /   \\
         b     e
         ^
        c d

    combine sees c, d, b, e and finally a.
    """

    stack = [(tree, False)]
    results = []
    while stack:
        t, expanded = stack.pop()
        if expanded:
            n = len(t.children)
            if n:
                done = tuple(results[-n:])
                del results[-n:]
            else:
                done = ()
            results.append(combine(t, done))
        else:
            stack.append((t, True))
            stack.extend((c, False) for c in reversed(t.children))
    return results[0]


# Tree a -> (a -> b) -> Tree b
def map_tree(tree, f):
    return fold_up(tree, lambda t, children: Tree(f(t.label), children))


# Tree a -> [[a]]
def levels(tree):
    """Labels grouped by depth, root level first, left to right."""

    results = []
    level = [tree]
    while level:
        results.append([t.label for t in level])
        level = list(fn.flat_map(attrgetter('children'), level))
    return results


# Tree a -> String
def draw(tree, show=str):
    """
    Renders the tree one label per line.

    >>> print(draw(node('a', [node('b', [leaf('c')]), leaf('d')])))
    a
    ├─── b
    |    └─── c
    └─── d

    """

    lines = [show(tree.label)]
    stack = _branches(tree, '')
    while stack:
        t, prefix, last = stack.pop()
        lines.append(prefix + ('└─── ' if last else '├─── ') + show(t.label))
        stack.extend(_branches(t, prefix + ('     ' if last else '|    ')))
    return '\n'.join(lines)


def _branches(tree, prefix):
    """Children of tree as stack entries, first child on top."""
    last = len(tree.children) - 1
    return [
        (c, prefix, i == last)
        for i, c in reversed(list(enumerate(tree.children)))
    ]

"""
A cursor ("zipper") over Tree.

see http://en.wikipedia.org/wiki/Zipper_(data_structure)

A TreeLoc is the focused subtree plus a Path describing how to put it back:
its left and right siblings, the parent tree it was taken from and the
parent's own Path. Moving and editing build new locs; nothing is mutated.
"""

from collections import namedtuple

from .tree import Tree, leaf, size

# l: left siblings in tree order, r: right siblings in tree order,
# pnode: the parent tree as it was when we moved down,
# ppath: the parent's path, changed: whether pnode must be rebuilt on the
# way up
Path = namedtuple('Path', 'l, r, pnode, ppath, changed')


def zipper(tree):
    return TreeLoc(tree, None)


_TreeLoc = namedtuple('TreeLoc', ['tree', 'path'])


class TreeLoc(_TreeLoc):

    __slots__ = ()

    def __repr__(self):
        return '<TreeLoc({!r})>'.format(self.tree.label)

    ## Context
    def get_label(self):
        return self.tree.label

    def lefts(self):
        return self.path.l if self.path else ()

    def rights(self):
        return self.path.r if self.path else ()

    def is_root(self):
        return self.path is None

    def is_first(self):
        return not self.lefts()

    def is_last(self):
        return not self.rights()

    def is_leaf(self):
        return not self.tree.children

    def has_children(self):
        return bool(self.tree.children)

    def root(self):
        loc = self
        while loc.path:
            loc = loc.parent()
        return loc

    def to_tree(self):
        return self.root().tree

    def size(self):
        return size(self.to_tree())

    ## Navigation
    def parent(self):
        if self.path:
            l, r, pnode, ppath, changed = self.path
            if changed:
                return TreeLoc(
                    Tree(pnode.label, l + (self.tree,) + r),
                    ppath and ppath._replace(changed=True),
                )
            else:
                return TreeLoc(pnode, ppath)

    def get_parent(self):
        return self.parent() or self

    def parent_locs(self):
        """Every ancestor of this loc, the root first and the parent last."""

        results = []
        loc = self.parent()
        while loc:
            results.append(loc)
            loc = loc.parent()
        results.reverse()
        return results

    def get_child(self, n):
        children = self.tree.children
        if 0 <= n < len(children):
            path = Path(
                l=children[:n],
                r=children[n + 1:],
                pnode=self.tree,
                ppath=self.path,
                changed=False,
            )
            return TreeLoc(children[n], path)

    def first_child(self):
        return self.get_child(0)

    def last_child(self):
        return self.get_child(len(self.tree.children) - 1)

    def find_child(self, pred):
        """The first child whose subtree satisfies pred, or None."""

        for n, child in enumerate(self.tree.children):
            if pred(child):
                return self.get_child(n)

    def left(self):
        if self.path and self.path.l:
            ls, r = self.path[:2]
            l, current = ls[:-1], ls[-1]
            return TreeLoc(current, self.path._replace(
                l=l,
                r=(self.tree,) + r,
            ))

    def right(self):
        if self.path and self.path.r:
            l, rs = self.path[:2]
            current, rnext = rs[0], rs[1:]
            return TreeLoc(current, self.path._replace(
                l=l + (self.tree,),
                r=rnext,
            ))

    def leftmost_descendant(self):
        loc = self
        while loc.has_children():
            loc = loc.first_child()
        return loc

    def postorder_next(self):
        """
        Visit's nodes in depth-first post-order.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        postorder next will visit the nodes in the following order
        c, d, b, f, g, e a

        Note this method ends when it reaches the root node. To
        start traversal from the root call leftmost_descendant()
        first.
        """

        r = self.right()
        if r:
            return r.leftmost_descendant()
        else:
            return self.parent()

    def find(self, pred):
        """
        Returns the first loc of the whole tree, in post-order, for which
        pred(loc) is true, or None.
        """

        loc = self.root().leftmost_descendant()
        while loc:
            if pred(loc):
                return loc
            loc = loc.postorder_next()

    ## Editing
    def replace(self, tree):
        if self.path:
            return TreeLoc(tree, self.path._replace(changed=True))
        else:
            return TreeLoc(tree, None)

    def set_label(self, label):
        return self.replace(self.tree._replace(label=label))

    def update_label(self, f):
        return self.set_label(f(self.get_label()))

    def insert_down_first(self, tree):
        """Inserts tree as the leftmost child and moves to it."""

        path = Path(
            l=(),
            r=self.tree.children,
            pnode=self.tree,
            ppath=self.path,
            changed=True,
        )
        return TreeLoc(tree, path)

    def insert_down_last(self, tree):
        """Inserts tree as the rightmost child and moves to it."""

        path = Path(
            l=self.tree.children,
            r=(),
            pnode=self.tree,
            ppath=self.path,
            changed=True,
        )
        return TreeLoc(tree, path)

    def add_child(self, label):
        """
        Appends a leaf holding label to this node's children, staying on
        this node.
        """
        return self.insert_down_last(leaf(label)).get_parent()

    def add_first_child(self, label):
        """
        Prepends a leaf holding label to this node's children, staying on
        this node.
        """
        return self.insert_down_first(leaf(label)).get_parent()

    def insert_left(self, tree):
        """Insert tree as left sibling of this node and move to it"""
        path = self.path
        if not path:
            raise IndexError("Can't insert at top")

        return TreeLoc(tree, path._replace(
            r=(self.tree,) + path.r,
            changed=True,
        ))

    def insert_right(self, tree):
        """Insert tree as right sibling of this node and move to it"""
        path = self.path
        if not path:
            raise IndexError("Can't insert at top")

        return TreeLoc(tree, path._replace(
            l=path.l + (self.tree,),
            changed=True,
        ))

    def delete(self):
        """
        Removes the subtree at this loc. The returned loc is the right
        sibling, or failing that the left sibling, or failing that the
        parent. Returns None at the root, which has none of them.
        """
        path = self.path
        if not path:
            return None

        l, r, pnode, ppath, changed = path

        if r:
            return TreeLoc(r[0], path._replace(r=r[1:], changed=True))
        elif l:
            return TreeLoc(l[-1], path._replace(l=l[:-1], changed=True))
        else:
            return TreeLoc(
                Tree(pnode.label, ()),
                ppath and ppath._replace(changed=True),
            )


del _TreeLoc

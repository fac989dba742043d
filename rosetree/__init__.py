"""
Immutable ordered trees and a zipper to move around and edit them.

    >>> from rosetree import node, leaf, all_paths
    >>> t = node('a', [node('b', [leaf('c')]), leaf('d')])
    >>> all_paths(t)
    [['a', 'b', 'c'], ['a', 'd']]
    >>> t.loc().first_child().add_child('x').to_tree().size()
    5

"""

import logging

from ._lib.sized import Sized, size_of
from ._lib.tree import (
    Tree, draw, flatten_left, fold_up, leaf, levels, map_tree, node, size,
)
from ._lib.trees import (
    all_paths, bottom_up, clean, flatten_sub_forests, prune, prune_in_context,
)
from ._lib.zipper import Path, TreeLoc, zipper

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Path',
    'Sized',
    'Tree',
    'TreeLoc',
    'all_paths',
    'bottom_up',
    'clean',
    'draw',
    'flatten_left',
    'flatten_sub_forests',
    'fold_up',
    'leaf',
    'levels',
    'map_tree',
    'node',
    'prune',
    'prune_in_context',
    'size',
    'size_of',
    'zipper',
]

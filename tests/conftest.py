import pytest

from rosetree import leaf, node


def deep_tree(depth):
    """A single chain of depth + 1 nodes labelled 0 at the root to depth."""
    t = leaf(depth)
    for label in range(depth - 1, -1, -1):
        t = node(label, [t])
    return t


@pytest.fixture
def sample():
    #  a
    #  ├─── b
    #  |    ├─── c
    #  |    |    └─── d
    #  |    └─── e
    #  └─── f
    #       └─── g
    return node('a', [
        node('b', [node('c', [leaf('d')]), leaf('e')]),
        node('f', [leaf('g')]),
    ])


@pytest.fixture(scope='session')
def depth():
    return 100000


@pytest.fixture(scope='session')
def deep(depth):
    return deep_tree(depth)

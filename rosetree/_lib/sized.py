"""
Anything that can report how many nodes it holds.

Tree and TreeLoc both qualify without inheriting from anything here: a
class counts as Sized as soon as it defines a size() method.
"""

from abc import ABCMeta, abstractmethod


class Sized(metaclass=ABCMeta):

    __slots__ = ()

    @abstractmethod
    def size(self):
        return 0

    @classmethod
    def __subclasshook__(cls, C):
        if cls is Sized:
            if any(callable(B.__dict__.get('size')) for B in C.__mro__):
                return True
        return NotImplemented


# Sized -> Int
def size_of(obj):
    if not isinstance(obj, Sized):
        raise TypeError(
            '{} has no size'.format(type(obj).__name__),
        )
    return obj.size()

# Collection of our favorite functional idioms
# Note in many cases you'll see normal python functions
# with the arguments reversed. Have a look at
# http://functionaltalks.org/2013/05/27/brian-lonsdorf-hey-underscore-youre-doing-it-wrong/
# to understand why

from itertools import chain


def identity(v):
    return v


# (a -> [b]) -> [a] -> iter b
def flat_map(f, items):
    """
    >>> list(flat_map(lambda x: [x, x], [1, 2]))
    [1, 1, 2, 2]

    """
    return chain.from_iterable(map(f, items))

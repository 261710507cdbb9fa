import numpy as np


def pairs(iterable):
    """Yield adjacent pairs of an iterable"""
    it = iter(iterable)
    try:
        x = next(it)
    except StopIteration:
        return
    for y in it:
        yield x, y
        x = y


def trapezoid(n):
    """Trapezoid rule weights over n + 1 equispaced points

    Parameters
    ----------
    n : int
        number of intervals

    Returns
    -------
    ndarray, [n + 1], float
        unit weight on the interior points, half weight on both end points
    """
    w = np.ones(n + 1)
    w[[0, -1]] = 0.5
    return w


def read_only(arr):
    """Mark an array as immutable, so that it can be shared between fields"""
    arr.flags.writeable = False
    return arr

import numpy as np


class BoundaryVector(object):
    """Vector quantity, such as a force, on a set of immersed boundary points

    Stored as an array of shape [2, num_points], indexed as b[X, k] and b[Y, k]
    """

    def __init__(self, num_points: int):
        if num_points < 0:
            raise ValueError('Number of boundary points cannot be negative')
        self.data = np.zeros((2, num_points))

    @classmethod
    def from_array(cls, data):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != 2:
            raise ValueError('array has invalid shape {}; expected [2, num_points]'.format(data.shape))
        b = cls(data.shape[1])
        b.data[...] = data
        return b

    @property
    def num_points(self):
        return self.data.shape[1]

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, value):
        self.data[index] = value

    def copy(self):
        return type(self).from_array(self.data)

import numpy as np

from pystaggered.field import Field, ShapeMismatch


class Scalar(Field):
    """Node-centered scalar field, such as vorticity or a streamfunction

    Values are stored in a single array of shape [nx + 1, ny + 1],
    indexed as f[i, j] with i in [0, nx] and j in [0, ny].
    """

    @staticmethod
    def component_shapes(grid):
        return [(grid.nx + 1, grid.ny + 1)]

    @classmethod
    def from_array(cls, grid, data):
        """Copy an array of node values into a new field"""
        f = cls(grid, init='empty')
        data = np.asarray(data, dtype=np.float64)
        if data.shape != f.data.shape:
            raise ShapeMismatch('Array of shape {} does not match node shape {}'.format(data.shape, f.data.shape))
        f.data[...] = data
        return f

    @property
    def data(self):
        return self.components[0]

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, value):
        self.data[index] = value

    def zero_boundary(self):
        """Set all nodes on the domain boundary to zero, in place"""
        self.data[self.grid.boundary_mask] = 0
        return self

    @property
    def interior(self):
        """Writable view of the interior nodes, [nx - 1, ny - 1]"""
        return self.data[self.grid.interior]

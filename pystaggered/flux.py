import numpy as np

from pystaggered.field import Field, ShapeMismatch

# component selectors
X = 0
Y = 1


class Flux(Field):
    """Edge-centered vector field, storing the normal flux through each cell edge

    The x-component lives on vertical edges, shape [nx + 1, ny];
    the y-component lives on horizontal edges, shape [nx, ny + 1].
    Indexed as q[X, i, j] and q[Y, i, j]; q[X] gives the whole component.

    Notes
    -----
    A flux is a velocity integrated over an edge; velocity = flux / dx
    """

    @staticmethod
    def component_shapes(grid):
        return [(grid.nx + 1, grid.ny), (grid.nx, grid.ny + 1)]

    @classmethod
    def from_arrays(cls, grid, x, y):
        """Copy arrays of x- and y-fluxes into a new field"""
        q = cls(grid, init='empty')
        for c, a in zip(q.components, (x, y)):
            a = np.asarray(a, dtype=np.float64)
            if a.shape != c.shape:
                raise ShapeMismatch('Array of shape {} does not match flux component of shape {}'.format(
                    a.shape, c.shape))
            c[...] = a
        return q

    @classmethod
    def uniform_flow(cls, grid, magnitude, angle=0.):
        """Flux of a uniform velocity field

        Parameters
        ----------
        grid : Grid
        magnitude : float
            speed of the flow
        angle : float
            direction of the flow in radians, counter-clockwise from the x-axis
        """
        q = cls(grid)
        q.x.fill(magnitude * np.cos(angle) * grid.dx)
        q.y.fill(magnitude * np.sin(angle) * grid.dx)
        return q

    @property
    def x(self):
        return self.components[X]

    @property
    def y(self):
        return self.components[Y]

    def __getitem__(self, index):
        if not isinstance(index, tuple):
            return self.components[index]
        return self.components[index[0]][index[1:]]

    def __setitem__(self, index, value):
        if not isinstance(index, tuple):
            self.components[index][...] = value
        else:
            self.components[index[0]][index[1:]] = value

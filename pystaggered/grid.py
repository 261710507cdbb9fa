import numpy as np
from cached_property import cached_property

from pystaggered.util import trapezoid, read_only


class Grid(object):
    """Uniform staggered 2d grid

    Nodes are indexed (i, j) with i in [0, nx] and j in [0, ny];
    x-fluxes live on the vertical edges between node (i, j) and (i, j+1),
    y-fluxes on the horizontal edges between node (i, j) and (i+1, j).

    Grids are immutable, and compare equal by value.
    Fields keep a reference to the grid they are built on, and may only be combined with fields on an equal grid.
    """

    def __init__(self, nx: int, ny: int, dx: float, x0: float = 0., y0: float = 0.):
        if int(nx) != nx or int(ny) != ny or nx < 1 or ny < 1:
            raise ValueError('Grid requires a positive integer number of cells in each direction')
        if not dx > 0:
            raise ValueError('Grid spacing must be positive')
        self._key = (int(nx), int(ny), float(dx), float(x0), float(y0))

    @classmethod
    def from_length(cls, nx, ny, length, x0=0., y0=0.):
        """Construct a grid spanning `length` in the x-direction"""
        return cls(nx=nx, ny=ny, dx=length / nx, x0=x0, y0=y0)

    @property
    def nx(self):
        return self._key[0]

    @property
    def ny(self):
        return self._key[1]

    @property
    def dx(self):
        return self._key[2]

    @property
    def x0(self):
        return self._key[3]

    @property
    def y0(self):
        return self._key[4]

    @property
    def shape(self):
        """Number of cells in each direction"""
        return self.nx, self.ny

    @property
    def extent(self):
        """Bounding box of the domain as [xmin, xmax, ymin, ymax]"""
        return [self.x0, self.x0 + self.nx * self.dx, self.y0, self.y0 + self.ny * self.dx]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return 'Grid(nx={}, ny={}, dx={}, x0={}, y0={})'.format(*self._key)

    @cached_property
    def x(self):
        """x-coordinate of each node column, [nx + 1]"""
        return read_only(self.x0 + np.arange(self.nx + 1) * self.dx)

    @cached_property
    def y(self):
        """y-coordinate of each node row, [ny + 1]"""
        return read_only(self.y0 + np.arange(self.ny + 1) * self.dx)

    @cached_property
    def node_position(self):
        """Position of all nodes

        Returns
        -------
        ndarray, [nx + 1, ny + 1, 2], float
        """
        p = np.stack(np.meshgrid(self.x, self.y, indexing='ij'), axis=-1)
        return read_only(p)

    @cached_property
    def edge_position(self):
        """Midpoint of all edges carrying a flux component

        Returns
        -------
        tuple of ndarray
            [nx + 1, ny, 2] midpoints of vertical edges, carrying x-fluxes
            [nx, ny + 1, 2] midpoints of horizontal edges, carrying y-fluxes
        """
        xm = (self.x[1:] + self.x[:-1]) / 2
        ym = (self.y[1:] + self.y[:-1]) / 2
        px = np.stack(np.meshgrid(self.x, ym, indexing='ij'), axis=-1)
        py = np.stack(np.meshgrid(xm, self.y, indexing='ij'), axis=-1)
        return read_only(px), read_only(py)

    @cached_property
    def node_weights(self):
        """Trapezoid quadrature weights of the nodes, not including the cell area

        Returns
        -------
        ndarray, [nx + 1, ny + 1], float
            1 in the interior, 1/2 on the boundary edges, 1/4 in the corners
        """
        return read_only(np.outer(trapezoid(self.nx), trapezoid(self.ny)))

    @cached_property
    def edge_weights(self):
        """Quadrature weights of the edges; halved for edges on the boundary normal to their flux

        Returns
        -------
        tuple of ndarray
            [nx + 1, ny] weights of x-fluxes
            [nx, ny + 1] weights of y-fluxes
        """
        wx = np.outer(trapezoid(self.nx), np.ones(self.ny))
        wy = np.outer(np.ones(self.nx), trapezoid(self.ny))
        return read_only(wx), read_only(wy)

    @cached_property
    def boundary_mask(self):
        """Boolean mask of nodes on the domain boundary, [nx + 1, ny + 1]"""
        mask = np.ones((self.nx + 1, self.ny + 1), dtype=bool)
        mask[1:-1, 1:-1] = False
        return read_only(mask)

    @cached_property
    def interior(self):
        """Index expression selecting the interior nodes"""
        return slice(1, self.nx), slice(1, self.ny)

"""Fast poisson solves by means of the type-I discrete sine transform

The sine transform diagonalizes the five-point laplacian with homogeneous dirichlet boundary conditions;
the eigenvector of mode (k, l) is sin(pi k i / nx) sin(pi l j / ny) over the interior nodes (i, j),
with eigenvalue (2 cos(pi k / nx) - 2 + 2 cos(pi l / ny) - 2) / dx ** 2.
Inverting the laplacian thus amounts to a forward transform, a pointwise division, and an inverse transform.
"""

import logging

import numpy as np
import scipy.fft
from cached_property import cached_property

from pystaggered.scalar import Scalar

logger = logging.getLogger(__name__)


class SineTransform(object):
    """Discrete sine transform over the interior nodes of a grid

    Each instance owns the configuration of its transform, and the spectrum of the laplacian on its grid;
    there is no state shared between instances, so separate instances may be used from separate threads.

    Parameters
    ----------
    grid : Grid
        must have at least one interior node
    workers : int, optional
        number of threads used by each transform; see scipy.fft.dstn
    """

    def __init__(self, grid, workers=None):
        if grid.nx <= 1 or grid.ny <= 1:
            raise ValueError('Sine transform requires interior nodes; got a {} x {} grid'.format(grid.nx, grid.ny))
        self.grid = grid
        self.workers = workers
        self.shape = (grid.nx - 1, grid.ny - 1)
        logger.debug('sine transform of %d x %d interior nodes', *self.shape)

    @cached_property
    def normalization(self):
        """Scale factor which makes two successive transforms an identity"""
        return 1. / (2 * self.grid.nx * 2 * self.grid.ny)

    @cached_property
    def eigenvalues(self):
        """Eigenvalues of the five-point laplacian in each sine mode

        Returns
        -------
        ndarray, [nx - 1, ny - 1], float
            strictly negative
        """
        nx, ny = self.grid.shape
        k = np.arange(1, nx)
        l = np.arange(1, ny)
        lx = 2 * np.cos(np.pi * k / nx) - 2
        ly = 2 * np.cos(np.pi * l / ny) - 2
        e = (lx[:, None] + ly[None, :]) / self.grid.dx ** 2
        e.flags.writeable = False
        return e

    def _transform(self, interior):
        """Unnormalized DST-I of a scratch array, overwriting it"""
        return scipy.fft.dstn(interior, type=1, axes=(0, 1), overwrite_x=True, workers=self.workers)

    def forward(self, f, normalize=False):
        """Sine transform of the interior nodes of f

        Parameters
        ----------
        f : Scalar
            boundary values are ignored
        normalize : bool
            if True, the result is scaled by 1 / (2 nx 2 ny);
            transforming twice, once normalized, recovers the interior of f

        Returns
        -------
        Scalar
            sine coefficients on the interior nodes; boundary nodes are zero
        """
        self._check(f)
        coefficients = self._transform(np.array(f.interior))
        if normalize:
            coefficients *= self.normalization
        return self._wrap(coefficients)

    def __call__(self, f, normalize=False):
        return self.forward(f, normalize)

    def inverse(self, f):
        """Inverse sine transform; the normalized forward transform"""
        return self.forward(f, normalize=True)

    def laplacian_inverse(self, f):
        """Solve laplacian(g) = f for g vanishing on the boundary

        Parameters
        ----------
        f : Scalar
            right hand side; boundary values are ignored

        Returns
        -------
        Scalar
        """
        self._check(f)
        coefficients = self._transform(np.array(f.interior))
        coefficients /= self.eigenvalues
        g = self._transform(coefficients)
        g *= self.normalization
        return self._wrap(g)

    def _check(self, f):
        if not isinstance(f, Scalar):
            raise TypeError('Sine transform acts on a Scalar, not {}'.format(type(f).__name__))
        if f.grid is not self.grid:
            f.check_compatible(Scalar(self.grid, init='empty'))

    def _wrap(self, interior):
        g = Scalar(self.grid)
        g.interior[...] = interior
        return g


def sin_transform(f, normalize=False):
    """Sine transform of the interior nodes of f

    See Also
    --------
    SineTransform.forward
    """
    return SineTransform(f.grid).forward(f, normalize)


def laplacian_inverse(f):
    """Inverse of the five-point laplacian with homogeneous dirichlet boundary conditions

    See Also
    --------
    SineTransform.laplacian_inverse
    """
    return SineTransform(f.grid).laplacian_inverse(f)

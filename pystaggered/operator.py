import numpy as np

from pystaggered.util import pairs
from pystaggered.scalar import Scalar
from pystaggered.flux import Flux
from pystaggered import operators


class FieldOperator(object):
    """Transposable linear operator mapping one type of field to another

    Notes
    -----
    The transpose is taken with respect to the weighted inner products on fields,
    not the plain euclidian one; so op.to_dense().T need not equal op.T.to_dense()

    Parameters
    ----------
    left : callable
        action of the transpose
    right : callable
        action of the operator
    shape : tuple of type
        (output field type, input field type)
    grid : Grid
    """
    def __init__(self, left: callable, right: callable, shape, grid):
        self.left = left
        self.right = right
        self.shape = shape
        self.grid = grid

    def transpose(self):
        return type(self)(
            right=self.left,
            left=self.right,
            shape=(self.shape[1], self.shape[0]),
            grid=self.grid,
        )

    @property
    def T(self):
        return self.transpose()

    def __call__(self, field):
        assert isinstance(field, self.shape[1])
        ret = self.right(field)
        assert isinstance(ret, self.shape[0])
        return ret

    def __mul__(self, other):
        if isinstance(other, FieldOperator):
            return ComposedOperator([self, other])
        else:
            return self(other)

    def to_dense(self):
        """Transform a matrix-free operator into a dense matrix by brute force evaluation

        Returns
        -------
        ndarray, [n_output, n_input], float
            acting on raveled fields
        """
        cls = self.shape[1]
        n = cls(self.grid, init='empty').size
        columns = [self(cls.from_vector(self.grid, e)).ravel() for e in np.eye(n)]
        return np.array(columns).T


class ComposedOperator(FieldOperator):
    """Chains the action of a sequence of operators"""
    def __init__(self, args):
        for op in args:
            assert isinstance(op, FieldOperator)
        self.operators = args
        for l, r in pairs(self.operators):
            assert l.shape[1] == r.shape[0]
        self.shape = self.operators[0].shape[0], self.operators[-1].shape[-1]
        self.grid = self.operators[0].grid

    def right(self, x):
        for op in self.operators[::-1]:
            x = op(x)
        return x

    def left(self, x):
        for op in self.operators:
            x = op.transpose()(x)
        return x

    def transpose(self):
        return ComposedOperator([o.transpose() for o in self.operators[::-1]])


def curl_operator(grid):
    """Curl mapping fluxes to scalars, with the scalar-to-flux curl as its transpose

    The transpose first zeroes the boundary of its argument,
    since boundary nodes of the curl of a flux are defined to be zero
    """
    def transposed(f):
        return operators.curl_scalar(f.copy().zero_boundary())
    return FieldOperator(
        right=operators.curl_flux,
        left=transposed,
        shape=(Scalar, Flux),
        grid=grid,
    )


def laplacian_operator(grid):
    """Five-point laplacian of scalars vanishing on the boundary

    Equals -(C * C.T) for C the curl operator, and is therefore symmetric under the weighted inner product
    """
    def dirichlet(f):
        return operators.laplacian(f.copy().zero_boundary())
    return FieldOperator(
        right=dirichlet,
        left=dirichlet,
        shape=(Scalar, Scalar),
        grid=grid,
    )

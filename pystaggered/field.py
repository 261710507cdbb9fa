import numbers
import operator

import numpy as np


class ShapeMismatch(ValueError):
    """Operands of a binary operation do not share the same shape"""


class GridMismatch(ShapeMismatch):
    """Operands of a binary operation share a shape, but are built on different grids"""


class Field(object):
    """Base class of arrays bound to a grid

    A field consists of one or more components, each a dense float array,
    whose shapes encode where on the grid the field lives.

    Notes
    -----
    Arithmetic is exposed through named methods only;
    combining two fields and combining a field with a constant are distinct operations.
    Each comes in a copying and an in-place variant, the latter returning self.
    """

    def __init__(self, grid, init='zeros'):
        self.grid = grid
        self.components = [self._allocate(shape, init) for shape in self.component_shapes(grid)]

    @staticmethod
    def component_shapes(grid):
        """Shape of each component on the given grid"""
        raise NotImplementedError

    @staticmethod
    def _allocate(shape, init):
        if init == 'zeros':
            return np.zeros(shape)
        if init == 'empty':
            return np.empty(shape)
        if init == 'ones':
            return np.ones(shape)
        raise ValueError('Unknown init mode {}'.format(init))

    @property
    def nx(self):
        return self.grid.nx

    @property
    def ny(self):
        return self.grid.ny

    @property
    def dx(self):
        return self.grid.dx

    @property
    def shape(self):
        return tuple(c.shape for c in self.components)

    @property
    def size(self):
        return sum(c.size for c in self.components)

    def check_compatible(self, other):
        """Raise if other cannot be combined with self"""
        if not isinstance(other, type(self)):
            raise TypeError('Cannot combine {} with {}'.format(type(self).__name__, type(other).__name__))
        if self.grid is other.grid:
            return
        if self.shape != other.shape:
            raise ShapeMismatch('{} of shape {} does not match shape {}'.format(
                type(self).__name__, other.shape, self.shape))
        if self.grid != other.grid:
            raise GridMismatch('{} is built on {}, not on {}'.format(type(self).__name__, other.grid, self.grid))

    def copy(self):
        """Deep copy, bound to the same grid"""
        field = type(self)(self.grid, init='empty')
        for d, s in zip(field.components, self.components):
            d[...] = s
        return field

    def assign(self, other):
        """Copy the values of other into self"""
        self.check_compatible(other)
        for d, s in zip(self.components, other.components):
            d[...] = s
        return self

    def fill(self, value):
        """Set all values to a constant"""
        for c in self.components:
            c.fill(self._constant(value))
        return self

    def ravel(self):
        """Concatenation of all components as a single vector"""
        return np.concatenate([c.ravel() for c in self.components])

    @classmethod
    def from_vector(cls, grid, vector):
        """Inverse of ravel"""
        field = cls(grid, init='empty')
        vector = np.asarray(vector, dtype=np.float64)
        if vector.shape != (field.size,):
            raise ShapeMismatch('Vector of shape {} does not match {} of size {}'.format(
                vector.shape, cls.__name__, field.size))
        offset = 0
        for c in field.components:
            c[...] = vector[offset:offset + c.size].reshape(c.shape)
            offset += c.size
        return field

    @staticmethod
    def _constant(value):
        if not isinstance(value, numbers.Real):
            raise TypeError('Expected a constant, got {}'.format(type(value).__name__))
        return value

    def _combine(self, other, op, in_place):
        """Elementwise op between two compatible fields"""
        self.check_compatible(other)
        target = self if in_place else self.copy()
        for t, o in zip(target.components, other.components):
            t[...] = op(t, o)
        return target

    def _broadcast(self, value, op, in_place):
        """Elementwise op between field and constant"""
        value = self._constant(value)
        target = self if in_place else self.copy()
        for t in target.components:
            t[...] = op(t, value)
        return target

    def add(self, other):
        return self._combine(other, operator.add, in_place=False)

    def add_in_place(self, other):
        return self._combine(other, operator.add, in_place=True)

    def subtract(self, other):
        return self._combine(other, operator.sub, in_place=False)

    def subtract_in_place(self, other):
        return self._combine(other, operator.sub, in_place=True)

    def multiply(self, other):
        """Elementwise product"""
        return self._combine(other, operator.mul, in_place=False)

    def multiply_in_place(self, other):
        return self._combine(other, operator.mul, in_place=True)

    def divide(self, other):
        """Elementwise quotient; division by zero follows ieee semantics"""
        return self._combine(other, operator.truediv, in_place=False)

    def divide_in_place(self, other):
        return self._combine(other, operator.truediv, in_place=True)

    def add_constant(self, value):
        return self._broadcast(value, operator.add, in_place=False)

    def add_constant_in_place(self, value):
        return self._broadcast(value, operator.add, in_place=True)

    def subtract_constant(self, value):
        return self._broadcast(value, operator.sub, in_place=False)

    def subtract_constant_in_place(self, value):
        return self._broadcast(value, operator.sub, in_place=True)

    def scale(self, value):
        return self._broadcast(value, operator.mul, in_place=False)

    def scale_in_place(self, value):
        return self._broadcast(value, operator.mul, in_place=True)

    def divide_constant(self, value):
        return self._broadcast(value, operator.truediv, in_place=False)

    def divide_constant_in_place(self, value):
        return self._broadcast(value, operator.truediv, in_place=True)

    def subtract_from_constant(self, value):
        """value - self"""
        return self._broadcast(value, _reversed(operator.sub), in_place=False)

    def subtract_from_constant_in_place(self, value):
        return self._broadcast(value, _reversed(operator.sub), in_place=True)

    def divide_into_constant(self, value):
        """value / self; division by zero follows ieee semantics"""
        return self._broadcast(value, _reversed(operator.truediv), in_place=False)

    def divide_into_constant_in_place(self, value):
        return self._broadcast(value, _reversed(operator.truediv), in_place=True)

    def negate(self):
        return self.scale(-1)

    def dot(self, other):
        """Weighted inner product of self and other"""
        from pystaggered.operators import inner_product
        return inner_product(self, other)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self.grid)


def _reversed(op):
    """Swap the operands of a binary op"""
    return lambda a, b: op(b, a)

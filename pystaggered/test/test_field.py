import numpy as np
import numpy.testing as npt
import pytest

from pystaggered.grid import Grid
from pystaggered.field import ShapeMismatch, GridMismatch
from pystaggered.scalar import Scalar
from pystaggered.flux import Flux, X, Y
from pystaggered.boundary import BoundaryVector


def random_scalar(grid):
    return Scalar.from_array(grid, np.random.normal(size=(grid.nx + 1, grid.ny + 1)))


def random_flux(grid):
    return Flux.from_arrays(
        grid,
        np.random.normal(size=(grid.nx + 1, grid.ny)),
        np.random.normal(size=(grid.nx, grid.ny + 1)),
    )


def test_shapes():
    grid = Grid(4, 3, 1.)
    assert Scalar(grid).shape == ((5, 4),)
    assert Flux(grid).shape == ((5, 3), (4, 4))
    assert Flux(grid)[X].shape == (5, 3)
    assert Flux(grid)[Y].shape == (4, 4)
    assert Flux(grid).size == 5 * 3 + 4 * 4


@pytest.mark.parametrize('init, value', [('zeros', 0), ('ones', 1)])
def test_init(init, value):
    grid = Grid(3, 3, 1.)
    npt.assert_array_equal(Scalar(grid, init=init).data, value)
    npt.assert_array_equal(Flux(grid, init=init).ravel(), value)


def test_invalid_init():
    with pytest.raises(ValueError):
        Scalar(Grid(3, 3, 1.), init='random')


def test_indexing():
    grid = Grid(3, 2, 1.)
    f = Scalar(grid)
    f[1, 2] = 3
    assert f[1, 2] == 3
    assert f.data[1, 2] == 3

    q = Flux(grid)
    q[X, 3, 1] = 1
    q[Y, 2, 2] = 2
    assert q.x[3, 1] == 1
    assert q[Y, 2, 2] == 2
    assert q.y.sum() == 2
    q[X] = 5
    npt.assert_array_equal(q.x, 5)


def test_copy_is_deep():
    grid = Grid(3, 3, 1.)
    q = random_flux(grid)
    p = q.copy()
    npt.assert_array_equal(p.ravel(), q.ravel())
    p[X, 0, 0] += 1
    p[Y, 0, 0] += 1
    assert p[X, 0, 0] != q[X, 0, 0]
    assert p[Y, 0, 0] != q[Y, 0, 0]
    assert p.grid is q.grid


def test_arithmetic():
    grid = Grid(4, 5, 0.5)
    f = random_scalar(grid)
    g = random_scalar(grid)
    npt.assert_allclose(f.add(g).data, f.data + g.data)
    npt.assert_allclose(f.subtract(g).data, f.data - g.data)
    npt.assert_allclose(f.multiply(g).data, f.data * g.data)
    npt.assert_allclose(f.divide(g).data, f.data / g.data)
    npt.assert_allclose(f.add_constant(2).data, f.data + 2)
    npt.assert_allclose(f.subtract_constant(2).data, f.data - 2)
    npt.assert_allclose(f.scale(2).data, f.data * 2)
    npt.assert_allclose(f.divide_constant(2).data, f.data / 2)
    npt.assert_allclose(f.negate().data, -f.data)


def test_arithmetic_flux():
    grid = Grid(4, 5, 0.5)
    p = random_flux(grid)
    q = random_flux(grid)
    r = p.add(q)
    npt.assert_allclose(r.x, p.x + q.x)
    npt.assert_allclose(r.y, p.y + q.y)
    r = p.multiply(q).scale(3)
    npt.assert_allclose(r.ravel(), p.ravel() * q.ravel() * 3)


def test_in_place():
    grid = Grid(3, 3, 1.)
    f = random_scalar(grid)
    g = random_scalar(grid)
    expected = (f.data + g.data) * g.data - 1
    h = f.add_in_place(g).multiply_in_place(g).subtract_constant_in_place(1)
    assert h is f
    npt.assert_allclose(f.data, expected)

    q = Flux(grid, init='ones')
    q.scale_in_place(4).divide_constant_in_place(2).add_constant_in_place(1)
    npt.assert_allclose(q.ravel(), 3)
    q.subtract_in_place(Flux(grid, init='ones')).divide_in_place(Flux(grid, init='ones').scale(2))
    npt.assert_allclose(q.ravel(), 1)


def test_copy_operations_leave_operands():
    grid = Grid(3, 3, 1.)
    f = random_scalar(grid)
    g = random_scalar(grid)
    f0, g0 = f.data.copy(), g.data.copy()
    f.add(g)
    f.scale(3)
    npt.assert_array_equal(f.data, f0)
    npt.assert_array_equal(g.data, g0)


def test_shape_mismatch():
    f = Scalar(Grid(3, 3, 1.))
    g = Scalar(Grid(3, 4, 1.))
    for op in [f.add, f.subtract, f.multiply, f.divide, f.add_in_place, f.assign]:
        with pytest.raises(ShapeMismatch):
            op(g)
    # operands are untouched
    assert f.shape == ((4, 4),)
    assert g.shape == ((4, 5),)


def test_grid_mismatch():
    f = Flux(Grid(3, 3, 1.))
    g = Flux(Grid(3, 3, 0.5))
    with pytest.raises(GridMismatch):
        f.add(g)
    # equal grids combine freely
    f.add(Flux(Grid(3, 3, 1.)))


def test_type_mismatch():
    grid = Grid(3, 3, 1.)
    f = Scalar(grid)
    q = Flux(grid)
    with pytest.raises(TypeError):
        f.add(q)
    with pytest.raises(TypeError):
        f.add(2.)
    with pytest.raises(TypeError):
        f.add_constant(f)
    with pytest.raises(TypeError):
        f.scale(np.ones(3))


def test_assign_and_fill():
    grid = Grid(3, 3, 1.)
    f = Scalar(grid)
    g = random_scalar(grid)
    f.assign(g)
    npt.assert_array_equal(f.data, g.data)
    g.fill(2)
    npt.assert_array_equal(g.data, 2)
    assert not np.any(f.data == 2)


def test_from_array_mismatch():
    grid = Grid(3, 3, 1.)
    with pytest.raises(ShapeMismatch):
        Scalar.from_array(grid, np.zeros((3, 3)))
    with pytest.raises(ShapeMismatch):
        Flux.from_arrays(grid, np.zeros((4, 3)), np.zeros((4, 3)))


def test_vector_roundtrip():
    grid = Grid(3, 2, 1.)
    q = random_flux(grid)
    p = Flux.from_vector(grid, q.ravel())
    npt.assert_array_equal(p.x, q.x)
    npt.assert_array_equal(p.y, q.y)
    with pytest.raises(ShapeMismatch):
        Flux.from_vector(grid, np.zeros(3))


def test_zero_boundary():
    grid = Grid(4, 3, 1.)
    f = Scalar(grid, init='ones').zero_boundary()
    assert f.data.sum() == 3 * 2
    npt.assert_array_equal(f.interior, 1)


def test_uniform_flow():
    grid = Grid(4, 4, 0.5)
    q = Flux.uniform_flow(grid, magnitude=2., angle=np.pi / 2)
    npt.assert_allclose(q.x, 0, atol=1e-12)
    npt.assert_allclose(q.y, 1)


def test_boundary_vector():
    b = BoundaryVector(3)
    assert b.num_points == 3
    b[X, 1] = 2
    b[Y, 2] = -1
    c = b.copy()
    c[X, 1] = 0
    assert b[X, 1] == 2
    with pytest.raises(ValueError):
        BoundaryVector.from_array(np.zeros((3, 2)))


def test_constant_on_the_left():
    grid = Grid(3, 4, 1.)
    f = random_scalar(grid)
    npt.assert_allclose(f.subtract_from_constant(2).data, 2 - f.data)
    npt.assert_allclose(f.divide_into_constant(2).data, 2 / f.data)

    q = Flux(grid, init='ones').scale(4)
    assert q.subtract_from_constant_in_place(1) is q
    npt.assert_allclose(q.ravel(), -3)
    q.divide_into_constant_in_place(6)
    npt.assert_allclose(q.ravel(), -2)


@pytest.mark.parametrize('value', ['abc', 1j, None, [1.]])
def test_invalid_constant(value):
    f = Scalar(Grid(3, 3, 1.))
    for op in [f.add_constant, f.scale, f.subtract_from_constant, f.divide_into_constant, f.fill]:
        with pytest.raises(TypeError):
            op(value)
    # numpy scalars are accepted
    f.scale(np.float64(2)).add_constant(np.int64(1))


def test_dot():
    grid = Grid(4, 3, 0.5)
    f = random_scalar(grid)
    g = random_scalar(grid)
    npt.assert_allclose(f.dot(g), np.sum(f.data * g.data * grid.node_weights) * 0.25)
    q = Flux(grid, init='ones')
    npt.assert_allclose(q.dot(q), grid.edge_weights[0].sum() + grid.edge_weights[1].sum())
    with pytest.raises(TypeError):
        f.dot(q)

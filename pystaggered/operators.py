"""Mimetic operators on the staggered grid

All operators act on whole fields at once; each output entry reads only a fixed neighborhood of its inputs.
Where an `out` argument is accepted, the result is written into it and returned;
otherwise a fresh field is allocated on the grid of the first operand.

The two curls are each others adjoint under the weighted inner products,
for scalars that vanish on the boundary:

    inner_product(curl(q), f) == inner_product(q, curl(f))

and curl(curl(f)) equals minus the five-point laplacian of f at all interior nodes.
"""

import numpy as np

from pystaggered.scalar import Scalar
from pystaggered.flux import Flux


def _output(cls, grid, out):
    if out is None:
        return cls(grid, init='empty')
    if not isinstance(out, cls):
        raise TypeError('Output must be a {}'.format(cls.__name__))
    if out.grid != grid:
        # raises the appropriate mismatch
        out.check_compatible(cls(grid, init='empty'))
    return out


def _check(a, b):
    """Raise unless a and b are built on compatible grids"""
    if a.grid is b.grid:
        return
    # compare against a field of the type of a, built on the grid of b
    a.check_compatible(type(a)(b.grid, init='empty'))


def curl_flux(q, out=None):
    """Curl of a flux, as a node-centered scalar

    Parameters
    ----------
    q : Flux
    out : Scalar, optional

    Returns
    -------
    Scalar
        (Y[i,j] - Y[i-1,j] - X[i,j] + X[i,j-1]) / dx ** 2 on interior nodes, exactly zero on the boundary
    """
    f = _output(Scalar, q.grid, out)
    f.interior[...] = (q.y[1:, 1:-1] - q.y[:-1, 1:-1] - q.x[1:-1, 1:] + q.x[1:-1, :-1]) / q.dx ** 2
    f.zero_boundary()
    return f


def curl_scalar(f, out=None):
    """Curl of a node-centered scalar, as a flux

    Parameters
    ----------
    f : Scalar
    out : Flux, optional

    Returns
    -------
    Flux
        X[i,j] = f[i,j+1] - f[i,j], Y[i,j] = f[i,j] - f[i+1,j]
    """
    q = _output(Flux, f.grid, out)
    q.x[...] = f.data[:, 1:] - f.data[:, :-1]
    q.y[...] = f.data[:-1, :] - f.data[1:, :]
    return q


def curl(field, out=None):
    """Curl of either a flux or a scalar"""
    if isinstance(field, Flux):
        return curl_flux(field, out)
    if isinstance(field, Scalar):
        return curl_scalar(field, out)
    raise TypeError('Cannot take the curl of {}'.format(type(field).__name__))


def inner_product_scalar(f, g):
    """Trapezoid rule inner product of two scalars

    Interior nodes carry unit weight, boundary nodes half weight and corner nodes a quarter;
    the weighted sum is multiplied by the cell area dx ** 2
    """
    f.check_compatible(g)
    return float(np.sum(f.data * g.data * f.grid.node_weights) * f.dx ** 2)


def inner_product_flux(p, q):
    """Inner product of two fluxes

    Edges on the domain boundary normal to their flux carry half weight.
    The result is not multiplied by dx ** 2, since each flux already carries a factor dx;
    this makes it the inner product of the underlying velocities.
    """
    p.check_compatible(q)
    wx, wy = p.grid.edge_weights
    return float(np.sum(p.x * q.x * wx) + np.sum(p.y * q.y * wy))


def inner_product(a, b):
    """Weighted inner product of two scalars or two fluxes"""
    if isinstance(a, Flux):
        return inner_product_flux(a, b)
    if isinstance(a, Scalar):
        return inner_product_scalar(a, b)
    raise TypeError('No inner product defined on {}'.format(type(a).__name__))


def flux_to_x_velocity(q, out=None):
    """Average x-fluxes onto the nodes, as x-velocities

    Nodes on the bottom and top boundary only have a single adjacent x-flux,
    which is divided by dx rather than averaged, to compensate for the missing neighbor.

    Parameters
    ----------
    q : Flux
    out : Scalar, optional

    Returns
    -------
    Scalar
    """
    u = _output(Scalar, q.grid, out)
    u.data[:, 1:-1] = (q.x[:, 1:] + q.x[:, :-1]) / (2 * q.dx)
    u.data[:, 0] = q.x[:, 0] / q.dx
    u.data[:, -1] = q.x[:, -1] / q.dx
    return u


def flux_to_y_velocity(q, out=None):
    """Average y-fluxes onto the nodes, as y-velocities

    Nodes on the left and right boundary take their single adjacent y-flux divided by dx.
    """
    v = _output(Scalar, q.grid, out)
    v.data[1:-1, :] = (q.y[1:, :] + q.y[:-1, :]) / (2 * q.dx)
    v.data[0, :] = q.y[0, :] / q.dx
    v.data[-1, :] = q.y[-1, :] / q.dx
    return v


def flux_to_velocity(q):
    """Node velocities of a flux

    Returns
    -------
    u, v : Scalar
    """
    return flux_to_x_velocity(q), flux_to_y_velocity(q)


def x_velocity_to_flux(u, out=None):
    """Convert x-velocities at the nodes to x-fluxes through the vertical edges

    Only the x-component of `out` is written; its y-component is left untouched
    """
    q = Flux(u.grid) if out is None else _output(Flux, u.grid, out)
    q.x[...] = (u.data[:, :-1] + u.data[:, 1:]) * (u.dx / 2)
    return q


def y_velocity_to_flux(v, out=None):
    """Convert y-velocities at the nodes to y-fluxes through the horizontal edges

    Only the y-component of `out` is written; its x-component is left untouched
    """
    q = Flux(v.grid) if out is None else _output(Flux, v.grid, out)
    q.y[...] = (v.data[:-1, :] + v.data[1:, :]) * (v.dx / 2)
    return q


def velocity_to_flux(u, v, out=None):
    """Convert node velocities (u, v) to fluxes through the edges"""
    u.check_compatible(v)
    q = x_velocity_to_flux(u, out)
    return y_velocity_to_flux(v, q)


def cross_product_flux_scalar(q, f):
    """Cross product of a flux with a scalar

    q x f = (f v, -f u), with (u, v) the node velocities of q

    Returns
    -------
    Flux
    """
    _check(f, q)
    u = flux_to_x_velocity(q)
    u.multiply_in_place(f)
    u.scale_in_place(-1)

    v = flux_to_y_velocity(q)
    v.multiply_in_place(f)

    # x-flux from f v, y-flux from -f u
    return velocity_to_flux(v, u)


def cross_product_flux_flux(q1, q2):
    """Cross product of two fluxes, as a scalar

    q1 x q2 = u1 v2 - u2 v1, with velocities evaluated at the nodes

    Returns
    -------
    Scalar
    """
    q1.check_compatible(q2)
    u, v = flux_to_velocity(q1)
    f = u.multiply(flux_to_y_velocity(q2))
    f.subtract_in_place(flux_to_x_velocity(q2).multiply(v))
    return f


def cross_product(a, b):
    """Cross product of a flux with either a scalar or another flux"""
    if not isinstance(a, Flux):
        raise TypeError('First operand of a cross product must be a Flux')
    if isinstance(b, Scalar):
        return cross_product_flux_scalar(a, b)
    if isinstance(b, Flux):
        return cross_product_flux_flux(a, b)
    raise TypeError('Cannot take the cross product of a Flux and {}'.format(type(b).__name__))


def x_sum(q):
    """Sum of all x-fluxes"""
    return float(np.sum(q.x))


def y_sum(q):
    """Sum of all y-fluxes"""
    return float(np.sum(q.y))


def compute_net_force(f):
    """Net force on an immersed body

    Parameters
    ----------
    f : BoundaryVector
        force on each boundary point

    Returns
    -------
    xforce, yforce : float
    """
    xforce, yforce = np.sum(f.data, axis=1)
    return float(xforce), float(yforce)


def laplacian(f, out=None):
    """Five-point laplacian of a scalar

    Evaluated on the interior nodes; boundary nodes of the result are zero.
    `out` may be `f` itself.
    """
    d = f.data
    interior = (d[2:, 1:-1] + d[:-2, 1:-1] + d[1:-1, 2:] + d[1:-1, :-2] - 4 * d[1:-1, 1:-1]) / f.dx ** 2
    g = _output(Scalar, f.grid, out)
    g.interior[...] = interior
    g.zero_boundary()
    return g


def divergence(q):
    """Net outflow of each cell

    Returns
    -------
    ndarray, [nx, ny], float
        cell-centered; not a node field, hence not a Scalar
    """
    return (q.x[1:, :] - q.x[:-1, :]) + (q.y[:, 1:] - q.y[:, :-1])

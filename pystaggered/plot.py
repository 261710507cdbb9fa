"""Visualisation of fields with matplotlib"""

from pystaggered.scalar import Scalar
from pystaggered.flux import Flux
from pystaggered.operators import flux_to_velocity


def plot_scalar(f, ax=None, **kwargs):
    """Plot a scalar as an image over the domain"""
    import matplotlib.pyplot as plt
    assert isinstance(f, Scalar), "Not a scalar"
    if ax is None:
        fig, ax = plt.subplots()
    im = ax.imshow(f.data.T, origin='lower', interpolation='bilinear', extent=f.grid.extent, **kwargs)
    ax.figure.colorbar(im, ax=ax)
    return ax


def plot_flux(q, ax=None, **kwargs):
    """Visualize a flux as a streamplot of its node velocities"""
    import matplotlib.pyplot as plt
    assert isinstance(q, Flux), "Not a flux"
    if ax is None:
        fig, ax = plt.subplots()
    u, v = flux_to_velocity(q)
    ax.streamplot(q.grid.x, q.grid.y, u.data.T, v.data.T, **kwargs)
    ax.set_aspect('equal')
    return ax

"""Reconstruct the flow induced by a pair of gaussian vortices in a closed box

vorticity -> streamfunction -> flux, and back; then evaluate the nonlinear term of the vorticity equation
"""

import numpy as np
import matplotlib.pyplot as plt

from pystaggered import Grid, Scalar, SineTransform, curl, cross_product, x_sum, y_sum
from pystaggered.plot import plot_scalar, plot_flux


def gaussian(grid, center, radius):
    p = grid.node_position
    r2 = ((p - center) ** 2).sum(axis=-1)
    return np.exp(-r2 / radius ** 2)


if __name__ == '__main__':
    grid = Grid.from_length(128, 96, length=4., x0=-2, y0=-1.5)
    transform = SineTransform(grid)

    omega = Scalar.from_array(grid, gaussian(grid, [-0.5, 0], 0.3) - gaussian(grid, [0.5, 0], 0.3))
    omega.zero_boundary()

    # laplacian(psi) = -omega, with psi = 0 on the walls
    psi = transform.laplacian_inverse(omega.negate())
    q = curl(psi)

    print('vorticity recovery error', np.abs(curl(q).data - omega.data).max())
    print('net flux', x_sum(q), y_sum(q))

    nonlinear = cross_product(q, omega)

    plot_scalar(omega)
    plot_flux(q, density=2)
    plot_scalar(curl(nonlinear))
    plt.show()

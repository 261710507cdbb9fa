"""
Discrete vector calculus on a staggered grid

Node-centered scalar fields and edge-centered flux fields on a uniform 2d grid,
together with the mimetic operators an immersed boundary projection method is composed of;
curls in both directions, cross products, velocity/flux conversion, quadrature-weighted inner products,
and a fast poisson solve by means of a type-I discrete sine transform.

All operators are vectorized over the grid; discrete identities such as the vanishing divergence of a curl,
and the adjointness of the two curls under the weighted inner products, hold up to round-off.

"""

from pystaggered.grid import Grid
from pystaggered.field import ShapeMismatch, GridMismatch
from pystaggered.scalar import Scalar
from pystaggered.flux import Flux, X, Y
from pystaggered.boundary import BoundaryVector
from pystaggered.operators import (
    curl, curl_flux, curl_scalar,
    inner_product, inner_product_scalar, inner_product_flux,
    flux_to_x_velocity, flux_to_y_velocity, flux_to_velocity,
    x_velocity_to_flux, y_velocity_to_flux, velocity_to_flux,
    cross_product, cross_product_flux_scalar, cross_product_flux_flux,
    x_sum, y_sum, compute_net_force,
    laplacian, divergence,
)
from pystaggered.spectral import SineTransform, sin_transform, laplacian_inverse

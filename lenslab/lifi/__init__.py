"""lenslab/lifi/__init__.py

This package contains code specific to working with
light field data.

Raw captures are lenslet images: a 2D (height, width, channels) image
tiled into nV x nU blocks, one per micro-lens, so that the ray
(x, y, u, v) sits at row y*nV + v and column x*nU + u.
`LightField` wraps such an image and addresses it functionally as
lf(x, y, u, v, c) without copying it.

Arrays of views use the matrix style row-major form
lf[v, u, y, x(, c)]
where u is the horizontal view index and x is the horizontal image index (v,y similarly).
Note this is functional form (lf[x,y,u,v]) transposed, and so switching between the two
can be easily done without changing the memory layout.

this package uses gantry-style axis directions:
X increases to the right
Y increases down
U increases as the perspective shifts right
V increases as the perspective shifts down
"""
# flake8: noqa
from ..utils import in_notebook as _in_notebook
from .lightfield import LightField, lenslet_coords, lenslet_index
from .point import mark_point
from .refocus import alpha_samples, focal_stack, refocus
from .warp import identity_coordinates, warp

### Reshaping


def draw_subaperture_matrix(lf):
    v, u, y, x = 0, 1, 2, 3
    Nv, Nu, Ny, Nx = lf.shape[:4]
    if lf.ndim == 5:
        return lf.transpose([v, y, u, x, 4]).reshape(Nv * Ny, Nu * Nx, lf.shape[4])
    return lf.transpose([v, y, u, x]).reshape(Nv * Ny, Nu * Nx)


def draw_lenselet_image(lf):
    v, u, y, x = 0, 1, 2, 3
    Nv, Nu, Ny, Nx = lf.shape[:4]
    if lf.ndim == 5:
        return lf.transpose([y, v, x, u, 4]).reshape(Nv * Ny, Nu * Nx, lf.shape[4])
    return lf.transpose([y, v, x, u]).reshape(Nv * Ny, Nu * Nx)


def lenselet_to_lf(img, nU, nV):
    """Inverse of draw_lenselet_image"""
    rows, cols = img.shape[:2]
    Ny, Nx = rows // nV, cols // nU
    lf = img.reshape(Ny, nV, Nx, nU, *img.shape[2:])
    return lf.transpose([1, 3, 0, 2, *range(4, lf.ndim)])


def focal_plane_image(lf):
    return lf.sum(axis=(0, 1))


from . import io, sim

if _in_notebook():
    # convenience access in notebooks
    from .plot import *

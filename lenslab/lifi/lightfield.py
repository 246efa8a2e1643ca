"""lenslab/lifi/lightfield.py

A 4D light field view over a 2D lenslet image.

The lenslet image stores the ray (x, y, u, v) at column x*nU + u and
row y*nV + v, i.e. every nV x nU block of pixels is the angular sample
behind one micro-lens. `lenslet_index` is the only place that mapping
is written down; everything else goes through it or through strided
slices that follow from it.
"""

import itertools

import numpy as np

from ..interp import as_stack
from ..utils import positive_int


def lenslet_index(x, y, u, v, nU, nV):
    """(x, y, u, v) ray to the (row, column) of the lenslet image"""
    return y * nV + v, x * nU + u


def lenslet_coords(row, col, nU, nV):
    """(row, column) of the lenslet image to the (x, y, u, v) ray"""
    y, v = np.divmod(row, nV)
    x, u = np.divmod(col, nU)
    return x, y, u, v


class LightField(object):
    """A light field view of a (frames, height, width, channels) image.

    The image is referenced, not copied, so writes through the view
    change the caller's array.

    Parameters
    ----------
    image: lenslet image, 2D (gray), 3D (color) or 4D (with frames)
    nU: lenslet width, the number of horizontal views
    nV: lenslet height, the number of vertical views
    """

    def __init__(self, image, nU, nV):
        self.image = as_stack(image)
        self.nU = positive_int(nU, "nU")
        self.nV = positive_int(nV, "nV")
        frames, height, width, self.nC = self.image.shape
        if width % self.nU != 0:
            raise ValueError(
                f"Image width {width} is not a multiple of the lenslet width {self.nU}"
            )
        if height % self.nV != 0:
            raise ValueError(
                f"Image height {height} is not a multiple of the lenslet height {self.nV}"
            )
        self.nX = width // self.nU
        self.nY = height // self.nV

    @property
    def frames(self):
        return self.image.shape[0]

    @property
    def shape(self):
        """functional (x, y, u, v, c) extents"""
        return (self.nX, self.nY, self.nU, self.nV, self.nC)

    def __repr__(self):
        return (
            f"LightField(nX={self.nX}, nY={self.nY}, nU={self.nU}, nV={self.nV}, "
            f"nC={self.nC}, frames={self.frames})"
        )

    def at(self, x, y, u, v, c=slice(None), t=0):
        """The stored value(s) of ray (x, y, u, v). No bounds checking
        is done beyond numpy's own, callers are expected to clamp."""
        row, col = lenslet_index(x, y, u, v, self.nU, self.nV)
        return self.image[t, row, col, c]

    def set(self, x, y, u, v, value, c=slice(None), t=0):
        row, col = lenslet_index(x, y, u, v, self.nU, self.nV)
        self.image[t, row, col, c] = value

    def __getitem__(self, key):
        return self.at(*key)

    def __setitem__(self, key, value):
        x, y, u, v, *c = key
        self.set(x, y, u, v, value, *c)

    def view(self, u, v, t=0):
        """The (nY, nX, nC) subaperture view at angular index (u, v).
        This is a strided view into the lenslet image, not a copy."""
        row, col = lenslet_index(0, 0, u, v, self.nU, self.nV)
        return self.image[t, row :: self.nV, col :: self.nU, :]

    def views(self, t=0):
        """All subaperture views as a (nV, nU, nY, nX, nC) array"""
        return (
            self.image[t]
            .reshape(self.nY, self.nV, self.nX, self.nU, self.nC)
            .transpose(1, 3, 0, 2, 4)
        )

    def sample(self, x, y, u, v, t=0):
        """Quadrilinear interpolation at continuous (x, y, u, v).

        The 16 surrounding lattice corners are weighted by the product
        of their per-axis linear weights. Corners outside the light
        field are clamped to the nearest valid index, so any real
        coordinates are accepted. Coordinates may be scalars or arrays
        of a common shape; the result has one more trailing axis, the
        channels.
        """
        coords = np.broadcast_arrays(
            *(np.asarray(a, dtype=float) for a in (x, y, u, v))
        )
        extents = (self.nX, self.nY, self.nU, self.nV)
        lo = [np.floor(a).astype(int) for a in coords]
        frac = [a - f for a, f in zip(coords, lo)]

        dtype = np.result_type(self.image.dtype, float)
        out = np.zeros(coords[0].shape + (self.nC,), dtype=dtype)
        for corner in itertools.product((0, 1), repeat=4):
            weight = np.ones(coords[0].shape)
            idx = []
            for axis, bit in enumerate(corner):
                weight = weight * (frac[axis] if bit else 1 - frac[axis])
                idx.append(np.clip(lo[axis] + bit, 0, extents[axis] - 1))
            out += weight[..., np.newaxis] * self.at(*idx, t=t)
        return out

    sample4D = sample

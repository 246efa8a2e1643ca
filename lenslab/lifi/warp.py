"""lenslab/lifi/warp.py

Resample a light field through a map of normalized (s, t, u, v)
coordinates.
"""

import numpy as np

from ..interp import as_stack
from ..utils import round_half_up
from .lightfield import lenslet_coords


def warp(lf, coords, quick=False):
    """Sample `lf` at the coordinates stored in a 4 channel image.

    Parameters
    ----------
    lf: LightField
    coords: image whose 4 channels are the s, t, u and v coordinates,
        each within [0, 1], addressing the x, y, u and v extents of `lf`
    quick: use nearest neighbor lookups instead of quadrilinear
        interpolation

    Returns
    -------
    (frames, height, width, nC) array with the frames, height and width
    of `coords`. Output frame t reads light field frame t when `lf` has
    as many frames as `coords`, and frame 0 otherwise.
    """
    coords = as_stack(coords)
    if coords.shape[-1] != 4:
        raise ValueError(
            f"Coordinate map must have 4 channels (s, t, u, v), got {coords.shape[-1]}"
        )
    frames = coords.shape[0]
    if lf.frames != 1 and lf.frames != frames:
        raise ValueError(
            f"Light field has {lf.frames} frames but the coordinate map has {frames}"
        )

    extents = np.array([lf.nX, lf.nY, lf.nU, lf.nV])
    dtype = np.result_type(lf.image.dtype, np.float32)
    out = np.zeros((*coords.shape[:3], lf.nC), dtype=dtype)
    for t in range(frames):
        lx, ly, lu, lv = np.moveaxis(coords[t] * (extents - 1), -1, 0)
        src = t if lf.frames == frames else 0
        if not quick:
            out[t] = lf.sample(lx, ly, lu, lv, t=src)
        else:
            idx = [
                np.clip(round_half_up(a), 0, n - 1)
                for a, n in zip((lx, ly, lu, lv), extents)
            ]
            out[t] = lf.at(*idx, t=src)
    return out


def identity_coordinates(nX, nY, nU, nV, u=None, v=None):
    """Normalized coordinates of light field lattice points.

    With `u` and `v` the map addresses that single (nY, nX) view.
    Otherwise it addresses every ray laid out like a lenslet image, so
    warping through it reproduces the lenslet image itself.
    """

    def norm(i, n):
        return i / (n - 1) if n > 1 else np.zeros_like(i, dtype=float)

    if u is not None and v is not None:
        y, x = np.mgrid[0:nY, 0:nX]
        uu = np.full(x.shape, u)
        vv = np.full(x.shape, v)
    else:
        row, col = np.mgrid[0 : nY * nV, 0 : nX * nU]
        x, y, uu, vv = lenslet_coords(row, col, nU, nV)
    return np.stack(
        [norm(x, nX), norm(y, nY), norm(uu, nU), norm(vv, nV)], axis=-1
    ).astype(float)

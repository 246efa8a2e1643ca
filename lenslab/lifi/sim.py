"""lenslab/lifi/sim.py

Simulate light-fields of planar objects at known depths, as view
arrays lf[v, u, y, x] or as lenslet images.
"""

import numpy as np

from . import draw_lenselet_image
from .. import interp
from .. import sim as _sim


def generate_continuous_lightfield(obj_list, f, F):
    """Continuous light field of a list of (depth, cy, cx, obj) planes.

    Nearer objects occlude farther ones. `f` is the focal length and
    `F` the distance at which the camera is focused.
    """
    F = abs(F)
    obj_list = sorted(obj_list, key=lambda obj: obj[0])

    def contLF(v, u, y, x):
        return 0.0

    def window(v, u, y, x):
        return 1.0

    for cz, cy, cx, obj in obj_list:
        T1 = cz / F
        T2 = 1 - cz / f + cz / F

        def objLF(v, u, y, x, T1=T1, T2=T2, cy=cy, cx=cx, obj=obj):
            return obj(T1 * y + T2 * v - cy, T1 * x + T2 * u - cx)

        def occ_objLF(v, u, y, x, objLF=objLF, window=window):
            return objLF(v, u, y, x) * window(v, u, y, x)

        def window(v, u, y, x, window=window, occ_objLF=occ_objLF):
            return window(v, u, y, x) * (occ_objLF(v, u, y, x) == 0)

        def contLF(v, u, y, x, contLF=contLF, occ_objLF=occ_objLF):
            return contLF(v, u, y, x) + occ_objLF(v, u, y, x)

    return contLF


def _centered(n, d):
    return d * (np.r_[0:n] - (n - 1) / 2)


def discretize(clf, nV, nU, nY, nX, dV, dU, dY, dX, oversample=1):
    if oversample < 1:
        raise ValueError("oversample must be greater than or equal to 1")
    if oversample != 1:
        nY, nX = nY * oversample, nX * oversample
        dY, dX = dY / oversample, dX / oversample
    v = _centered(nV, dV)
    u = _centered(nU, dU)
    y = _centered(nY, dY)
    x = _centered(nX, dX)
    V, U, Y, X = np.meshgrid(v, u, y, x, indexing="ij")
    lf = clf(V, U, Y, X) * np.ones(V.shape)
    if oversample != 1:
        lf = interp.downsample(lf, (oversample, oversample))
    return np.ascontiguousarray(lf)


def two_disks(nU=5, nY=51, oversample=1):
    """Two textured disks at different depths, normalized to a peak of 1.
    Returned as lf[v, u, y, x]."""
    disk = _sim.continuous_disk(R=20)
    obj_list = [(1000, -5, -5, disk), (2000, 18, 18, disk)]
    contLF = generate_continuous_lightfield(obj_list, f=50, F=1 / (1 / 50 - 1 / 400))
    scale = 151 / nY
    lf = discretize(
        contLF, nU, nU, nY, nY, 0.3, 0.3, 0.02 * scale, 0.02 * scale, oversample
    )
    lf /= lf.max()
    return lf


def lenslet_lf(lf):
    """lf[v, u, y, x(, c)] to a (height, width, channels) lenslet image"""
    img = draw_lenselet_image(lf)
    if img.ndim == 2:
        img = img[..., np.newaxis]
    return np.ascontiguousarray(img)


def view_constant_lf(values, nY, nX):
    """Lenslet image whose (v, u) view is constant at values[v][u].
    `values` is (nV, nU) or (nV, nU, nC)."""
    values = np.asarray(values, dtype=float)
    if values.ndim == 2:
        values = values[..., np.newaxis]
    nV, nU, nC = values.shape
    lf = np.broadcast_to(values[:, :, None, None, :], (nV, nU, nY, nX, nC))
    return lenslet_lf(lf)

"""lenslab/lifi/refocus.py

Synthetic aperture refocusing: shift every subaperture view in
proportion to its angular offset and a depth slope alpha, low-pass
it when the shift outruns the angular sampling, and average.
"""

import functools
import logging
import math

import numpy as np

from ..interp import lanczos_blur, translate


def alpha_samples(min_alpha, max_alpha, delta_alpha):
    """Depth slopes min_alpha, min_alpha + delta_alpha, ... <= max_alpha

    The count is floor((max_alpha - min_alpha) / delta_alpha) + 1, with
    a small relative tolerance so that a step dividing the range evenly
    always reaches max_alpha.
    """
    if not delta_alpha > 0:
        raise ValueError(f"delta_alpha must be positive, got {delta_alpha}")
    if min_alpha > max_alpha:
        raise ValueError(
            f"min_alpha ({min_alpha}) must not exceed max_alpha ({max_alpha})"
        )
    steps = (max_alpha - min_alpha) / delta_alpha
    n = math.floor(steps + 1e-9 * max(1.0, abs(steps))) + 1
    return min_alpha + delta_alpha * np.r_[0:n]


def refocus(lf, alpha, t=0):
    """Average of all views of `lf` refocused at depth slope `alpha`.

    Returns a (nY, nX, nC) image.
    """
    dtype = np.result_type(lf.image.dtype, np.float32)
    img = np.zeros((lf.nY, lf.nX, lf.nC), dtype=dtype)
    for v in range(lf.nV):
        for u in range(lf.nU):
            view = lf.view(u, v, t)
            du = u - (lf.nU - 1) / 2
            dv = v - (lf.nV - 1) / 2
            if alpha * du != 0 or alpha * dv != 0:
                view = translate(view, du * alpha, dv * alpha)
            if abs(alpha) > 1:
                # prefilter against aliasing once views move more than a pixel apart
                view = lanczos_blur(view, abs(alpha), abs(alpha))
            img += view
    img /= lf.nU * lf.nV
    return img


def _refocus_frame(indexed_alpha, lf):
    t, alpha = indexed_alpha
    logging.info("computing frame %d (alpha=%g)", t + 1, alpha)
    return refocus(lf, alpha)


def focal_stack(lf, min_alpha, max_alpha, delta_alpha, *, map_func=map):
    """Turn a single 4D light field into a 3D focal stack

    Parameters
    ----------
    lf: LightField with exactly one frame
    min_alpha, max_alpha: inclusive range of depth slopes
    delta_alpha: positive step between adjacent depths
    map_func: map-like callable used to compute the frames, e.g. the
        map method of a process pool. Every frame is computed into its
        own buffer, so frames can be made in any order.

    Returns
    -------
    (n_alpha, nY, nX, nC) array, one frame per depth slope
    """
    if lf.frames != 1:
        raise ValueError(
            f"Can only turn a single light field into a focal stack, got {lf.frames} frames"
        )
    alphas = alpha_samples(min_alpha, max_alpha, delta_alpha)
    frames = list(
        map_func(functools.partial(_refocus_frame, lf=lf), list(enumerate(alphas)))
    )
    return np.stack(frames)

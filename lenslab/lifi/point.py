"""lenslab/lifi/point.py"""

import logging

from ..utils import round_half_up


def mark_point(lf, px, py, pz, value=1.0):
    """Color a single 3D point in every view of `lf`, in place.

    px, py are the spatial position within [0, 1] and pz the disparity
    in image widths per view, so pz = 0 lies on the focal plane. Views
    that see the point outside their borders are left untouched.

    Returns the number of views that were marked.
    """
    marked = 0
    for v in range(lf.nV):
        for u in range(lf.nU):
            pu = u + 0.5 - lf.nU * 0.5
            pv = v + 0.5 - lf.nV * 0.5
            x = int(round_half_up((px + pz * pu) * lf.nX))
            y = int(round_half_up((py + pz * pv) * lf.nY))
            if x < 0 or x >= lf.nX or y < 0 or y >= lf.nY:
                continue
            for t in range(lf.frames):
                lf.set(x, y, u, v, value, t=t)
            marked += 1
    logging.debug("marked %d of %d views", marked, lf.nU * lf.nV)
    return marked

from glob import glob
import logging
import os

import numpy as np

from . import draw_lenselet_image
from .. import config
from ..io import load as imread


def get_lf_directories():
    dirs = glob(
        os.path.join(config.DATABANK, "lightfield/**/config.toml"), recursive=True
    )
    res = {}
    for d in dirs:
        dlist = d.split(os.sep)
        res[dlist[-2]] = os.sep.join(dlist[:-1])
    return res


def load(lf_directory, ext, v=None, u=None, prefix=""):
    """Load a directory of subaperture images, sorted by name in
    row-major (v, u) order, as lf[v, u, y, x(, c)]."""
    fnames = glob(os.path.join(lf_directory, f"{prefix}*{ext}"))
    if len(fnames) == 0:
        raise ValueError(f"No images found matching {prefix}*{ext} at {lf_directory}")
    fnames.sort()

    lf = []
    for filename in fnames:
        logging.debug("loading view %s", filename)
        lf.append(imread(filename))
    lf = np.array(lf)

    # determine proper v,u reshape
    num = lf.shape[0]
    if v is None and u is None:
        u = int(np.sqrt(num))
        v = u
    elif v is not None:
        u = num // v
    else:
        v = num // u
    if u * v != num:
        raise ValueError(f"Cannot arrange {num} views as {v} x {u}")
    lf = lf.reshape([v, u, *lf.shape[1:]])
    return lf


def load_lenslet(lf_directory, ext, v=None, u=None, prefix=""):
    """Like `load`, returned as a (height, width, channels) lenslet image
    together with its lenslet width and height."""
    lf = load(lf_directory, ext, v=v, u=u, prefix=prefix)
    img = draw_lenselet_image(lf)
    if img.ndim == 2:
        img = img[..., np.newaxis]
    return img, lf.shape[1], lf.shape[0]

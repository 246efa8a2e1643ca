"""lenslab/io.py

basic image loading and saving
"""

import logging
import os

from PIL import Image, ImageSequence
import matplotlib.image as mpimg
import numpy as np
import scipy.io as sio

from . import config
from .interp import as_stack
from .utils import export


def _resolve(img_path):
    img_path = os.path.expanduser(img_path)
    if not os.path.isabs(img_path) and not os.path.exists(img_path):
        banked = os.path.join(config.DATABANK, img_path)
        if os.path.exists(banked):
            logging.debug("Resolved %s from the databank at %s", img_path, banked)
            return banked
    return img_path


@export
def load(img_path, *args, **kwargs):
    img_path = _resolve(img_path)
    if ".tif" in img_path.lower():
        return load_tiff(img_path)
    elif ".mat" in img_path.lower():
        return load_mat(img_path)
    elif img_path.lower().endswith(".npy"):
        return np.load(img_path)
    # This is using Pillow under the hood
    return mpimg.imread(img_path, *args, **kwargs)


def load_tiff(img_path):
    """
    img_path - Path to the multipage-tiff file
    """
    img = Image.open(img_path)
    images = []
    for im in ImageSequence.Iterator(img):
        images.append(np.array(im))

    img_arr = np.array(images)
    img.close()
    try:
        return img_arr.squeeze(axis=0)
    except ValueError:
        return img_arr


def load_mat(mat_path):
    data = sio.loadmat(mat_path)
    data.pop("__header__", None)
    data.pop("__version__", None)
    data.pop("__globals__", None)
    keys = list(data.keys())
    if len(keys) == 1:
        return data[keys[0]]
    else:
        return data


def _to_pil(frame):
    """One (height, width, channels) frame to a Pillow image.
    Floating point data is taken to lie in [0, 1]."""
    if np.issubdtype(frame.dtype, np.floating):
        frame = np.clip(np.round(frame * 255), 0, 255).astype(np.uint8)
    else:
        frame = frame.astype(np.uint8)
    if frame.shape[-1] == 1:
        return Image.fromarray(np.ascontiguousarray(frame[..., 0]))
    elif frame.shape[-1] in (3, 4):
        return Image.fromarray(np.ascontiguousarray(frame))
    raise ValueError(f"Cannot encode an image with {frame.shape[-1]} channels")


@export
def save(img, img_path):
    """Save an image or stack of frames.

    `.npy` keeps the array exactly. `.tif` writes one page per frame,
    float32 for single channel data. Other extensions go through Pillow
    and accept a single 8-bit frame.
    """
    ext = os.path.splitext(img_path)[1].lower()
    if ext == ".npy":
        np.save(img_path, np.asarray(img))
        return img_path
    stack = as_stack(img)
    if ext in [".tif", ".tiff"]:
        if stack.shape[-1] == 1:
            pages = [
                Image.fromarray(np.ascontiguousarray(f[..., 0], dtype=np.float32))
                for f in stack
            ]
        else:
            pages = [_to_pil(f) for f in stack]
        pages[0].save(img_path, save_all=True, append_images=pages[1:])
        return img_path
    if stack.shape[0] != 1:
        raise ValueError(
            f"{ext} holds a single frame, use .npy or .tif for {stack.shape[0]} frames"
        )
    _to_pil(stack[0]).save(img_path)
    return img_path

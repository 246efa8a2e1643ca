"""lenslab/interp.py

Resampling primitives shared by the light-field operators:
image buffer normalization, sub-pixel translation, Lanczos low-pass
filtering and block downsampling.
"""

import numpy as np
from scipy import ndimage

from . import config


def as_stack(img):
    """View `img` as a (frames, height, width, channels) stack.

    2D arrays are treated as a single gray frame and 3D arrays as a
    single (height, width, channels) frame. The result shares memory
    with `img`, so writes through it land in the caller's array.
    """
    img = np.asanyarray(img)
    if img.ndim == 2:
        return img[np.newaxis, :, :, np.newaxis]
    elif img.ndim == 3:
        return img[np.newaxis]
    elif img.ndim == 4:
        return img
    raise ValueError(
        f"Images must have 2, 3 or 4 dimensions, got shape {img.shape}"
    )


def translate(image, dx, dy):
    """Translate an image by a sub-pixel offset using linear interpolation

    Parameters
    ----------
    image: image with 2 (gray) or 3 (color) dimensions
    dx: shift of the content to the right, in pixels
    dy: shift of the content downwards, in pixels

    Pixels shifted in from outside the image are zero.
    """
    if dx == 0 and dy == 0:
        return image
    if image.ndim == 3:
        no_color = False
    else:
        image = image[:, :, None]
        no_color = True
    n, m, c = image.shape

    # out[i, j] = image[i - dy, j - dx]
    s0, s1 = -dy, -dx
    a0 = s0 - np.floor(s0)
    a1 = s1 - np.floor(s1)

    s0d = int(np.floor(s0))
    s0u = s0d + 1
    s1d = int(np.floor(s1))
    s1u = s1d + 1

    # zero padding by max shift
    ms0 = max(abs(s0u), abs(s0d))
    ms1 = max(abs(s1u), abs(s1d))

    dtype = np.result_type(image.dtype, np.float32)
    pI = np.zeros((n + ms0 * 2, m + ms1 * 2, c), dtype=dtype)
    pI[ms0:-ms0, ms1:-ms1, :] = image

    I1d2d = pI[ms0 + s0d : ms0 + s0d + n, ms1 + s1d : ms1 + s1d + m, :]
    I1u2d = pI[ms0 + s0u : ms0 + s0u + n, ms1 + s1d : ms1 + s1d + m, :]
    I1d2u = pI[ms0 + s0d : ms0 + s0d + n, ms1 + s1u : ms1 + s1u + m, :]
    I1u2u = pI[ms0 + s0u : ms0 + s0u + n, ms1 + s1u : ms1 + s1u + m, :]

    nI = (
        I1d2d * (1 - a0) * (1 - a1)
        + I1d2u * (1 - a0) * (a1)
        + I1u2d * (a0) * (1 - a1)
        + I1u2u * (a0) * (a1)
    )
    if no_color:
        nI = nI[..., 0]
    return nI


def lanczos_kernel(radius, lobes=3):
    """Normalized 1D Lanczos window stretched by `radius`.

    The support covers `lobes * radius` samples on each side of the
    center tap, and the taps sum to one.
    """
    if radius <= 0:
        raise ValueError(f"Lanczos radius must be positive, got {radius}")
    size = int(2 * lobes * radius + 1) | 1
    x = (np.r_[0:size] - size // 2) / radius
    kernel = np.sinc(x) * np.sinc(x / lobes)
    kernel[np.abs(x) >= lobes] = 0
    return kernel / kernel.sum()


def lanczos_blur(image, rx, ry=None, lobes=None):
    """Separable Lanczos low-pass filter of a (height, width[, channels])
    image with radius `rx` along x and `ry` along y. Borders replicate
    the edge pixels, so constant images are left unchanged.
    """
    if ry is None:
        ry = rx
    if lobes is None:
        lobes = config.LANCZOS_LOBES
    image = np.asarray(image)
    out = image.astype(np.result_type(image.dtype, np.float32))
    for radius, axis in [(ry, 0), (rx, 1)]:
        if radius == 0:
            continue
        out = ndimage.correlate1d(
            out, lanczos_kernel(abs(radius), lobes), axis=axis, mode="nearest"
        )
    return out


def downsample(x, scale, *, axis=None, reduce="mean"):
    if scale == 1:
        return x
    if axis is None:
        axis = list(range(len(x.shape)))  # all axes

    if not hasattr(scale, "__iter__"):
        scale = [scale] * len(axis)
    elif len(scale) < len(axis):
        # only apply to last axes
        axis = axis[-len(scale) :]
    elif len(scale) > len(axis):
        raise ValueError("More scales given than axes")

    if reduce in ["mean", "avg", "average"]:
        pool = np.mean
    elif reduce in ["max"]:
        pool = np.max
    elif reduce in ["min"]:
        pool = np.min
    elif reduce in ["sum"]:
        pool = np.sum
    elif callable(reduce):
        pool = reduce
    else:
        raise ValueError(f"Unrecognized Reduction method, reduce={reduce}")

    for sc, ax in zip(scale, axis):
        if sc % 1 != 0:
            raise ValueError("Only integer scales supported")
        sc = int(sc)
        if sc == 1:
            continue
        dim = x.shape[ax]
        m1 = sc * (dim // sc)
        if m1 < dim:
            # we need to crop to a multiple of scale
            x = ccrop1(x, m1, ax)

        new_shape = list(x.shape[:ax]) + [m1 // sc, sc] + list(x.shape[ax + 1 :])
        x = pool(x.reshape(new_shape), axis=ax + 1)
    return x


def ccrop1(x, clen, axis):
    slc = [slice(None)] * len(x.shape)
    dim = x.shape[axis]
    clip = int(dim - clen)
    if clip != 0:
        slc[axis] = slice(clip // 2, clip // 2 + clen)
        x = x[tuple(slc)]
    assert clen == x.shape[axis], f"{clen} != {x.shape[axis]}"
    return x

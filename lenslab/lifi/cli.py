"""lenslab/lifi/cli.py

Command line access to the light field operators

    python -m lenslab.lifi focalstack lf.png stack.tif 16 16 -1 1 0.1
    python -m lenslab.lifi warp lf.png lfmap.npy out.png 8 8 quick
    python -m lenslab.lifi point lf.png newlf.png 16 16 0.5 0.5 0.1
"""

import argparse
import logging

import numpy as np

from .lightfield import LightField
from .point import mark_point
from .refocus import focal_stack
from .warp import warp
from .. import io


def _load(path):
    """Load an image as floats, integer pixels scaled to [0, 1]."""
    img = io.load(path)
    if np.issubdtype(img.dtype, np.integer):
        return img / np.iinfo(img.dtype).max
    return np.array(img, dtype=float)


def _focalstack(args):
    lf = LightField(_load(args.lf), args.nU, args.nV)
    return focal_stack(lf, args.min_alpha, args.max_alpha, args.delta_alpha)


def _warp(args):
    coords = _load(args.map)
    unknown = [opt for opt in args.options if opt != "quick"]
    if unknown:
        raise ValueError(f"Unrecognized warp options: {' '.join(unknown)}")
    lf = LightField(_load(args.lf), args.nU, args.nV)
    return warp(lf, coords, quick="quick" in args.options)


def _point(args):
    img = _load(args.lf)
    lf = LightField(img, args.nU, args.nV)
    mark_point(lf, args.x, args.y, args.z)
    return img


def _add_lenslet(parser):
    parser.add_argument("nU", type=int, help="lenslet width")
    parser.add_argument("nV", type=int, help="lenslet height")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="lenslab.lifi", description="Resample 4D light fields stored as lenslet images."
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="log progress (twice for debug)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    fs = sub.add_parser(
        "focalstack",
        help="turn a 4d light field into a 3d focal stack",
        description="Turn a 4d light field into a 3d focal stack, one frame per "
        "depth alpha from min_alpha to max_alpha in steps of delta_alpha "
        "(alpha is slope in line space).",
    )
    fs.add_argument("lf", help="lenslet image")
    fs.add_argument("out", help="output focal stack (.tif or .npy)")
    _add_lenslet(fs)
    fs.add_argument("min_alpha", type=float)
    fs.add_argument("max_alpha", type=float)
    fs.add_argument("delta_alpha", type=float)
    fs.set_defaults(run=_focalstack)

    wp = sub.add_parser(
        "warp",
        help="sample a light field through a 4 channel coordinate map",
        description="Treat MAP as s, t, u, v indices within [0, 1] into the light "
        "field and sample quadrilinearly into it. An extra argument of 'quick' "
        "switches to nearest neighbor resampling; any other extra "
        "argument is rejected.",
    )
    wp.add_argument("lf", help="lenslet image")
    wp.add_argument("map", help="4 channel coordinate image")
    wp.add_argument("out", help="output image")
    _add_lenslet(wp)
    wp.add_argument("options", nargs="*", metavar="quick")
    wp.set_defaults(run=_warp)

    pt = sub.add_parser(
        "point",
        help="color a single 3d point white in a light field",
        description="Color a single 3d point white. x and y should be in the range "
        "[0, 1], while z is disparity; z = 0 will be at the focal plane.",
    )
    pt.add_argument("lf", help="lenslet image")
    pt.add_argument("out", help="output lenslet image")
    _add_lenslet(pt)
    pt.add_argument("x", type=float)
    pt.add_argument("y", type=float)
    pt.add_argument("z", type=float)
    pt.set_defaults(run=_point)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    try:
        result = args.run(args)
    except ValueError as err:
        parser.error(str(err))
    io.save(result, args.out)
    logging.info("wrote %s", args.out)
    return 0

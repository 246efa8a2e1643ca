"""lenslab/sim.py

Continuous 2D test objects for building synthetic light fields.
Each returns a function of (y, x) that broadcasts over numpy arrays.
"""

import numpy as np


def continuous_disk(R=20, f1=0.5, f2=1 / 3):
    return lambda y, x: (
        1
        + (np.cos(f1 * np.pi * np.sqrt(x ** 2 + y ** 2)) > 0) * (x > -y)
        + (np.cos(f2 * np.pi * np.sqrt(x ** 2 + y ** 2)) > 0) * (x <= -y)
    ) * (x ** 2 + y ** 2 < R ** 2)


def continuous_rectangle(w=10, h=10):
    return lambda y, x: (np.abs(x) < w / 2) * (np.abs(y) < h / 2) * 1


def continuous_constant(value=1.0):
    return lambda y, x: value * np.ones(np.broadcast(y, x).shape)

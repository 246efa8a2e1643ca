import sys

import numpy as np


def export(fn):
    # https://stackoverflow.com/a/35710527
    mod = sys.modules[fn.__module__]
    if hasattr(mod, "__all__"):
        if fn.__name__ not in mod.__all__:
            mod.__all__.append(fn.__name__)
    else:
        mod.__all__ = [fn.__name__]
    return fn


def get_frontend():
    try:
        from __main__ import get_ipython

        shell = get_ipython().__class__.__name__
        if shell == "ZMQInteractiveShell":
            return "jupyter"
        elif shell == "TerminalInteractiveShell":
            return "ipython"
        elif shell == "Shell":
            return "google.colab"
        else:  # Fall back on module in case names changed
            mod = get_ipython().__class__.__module__
            if mod == "google.colab._shell":
                return "google.colab"
            elif mod == "ipykernel.zmqshell":
                return "jupyter"
            elif mod == "IPython.terminal.interactiveshell":
                return "ipython"
            else:
                raise AssertionError(
                    "Unknown ipython shell: shell: {}, module: {}".format(shell, mod)
                )
    except ImportError:
        return "terminal"


def in_notebook():
    return get_frontend() in ["jupyter", "google.colab"]


def positive_int(value, name):
    """Coerce `value` to an int, raising ValueError unless it is a
    positive integral number."""
    try:
        ivalue = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    if ivalue != value and not isinstance(value, str):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    if ivalue < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return ivalue


def round_half_up(x):
    """Round to the nearest integer, halves going up, as an int array."""
    return np.floor(np.asarray(x, dtype=float) + 0.5).astype(int)


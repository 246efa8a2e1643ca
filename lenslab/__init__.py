# flake8: noqa
import os as _os

import pooch as _pooch
import toml as _toml

try:
    _cfg = _toml.load(_os.path.expanduser("~/.lenslab.toml"))
except (OSError, _toml.TomlDecodeError):
    _cfg = {}

from .__version__ import __version__


class config:
    DATABANK = (
        _os.environ.pop("LL_DATABANK", None)
        or _os.path.expanduser(_cfg.pop("DATABANK", ""))
        or _pooch.os_cache("lenslab")
    )
    LANCZOS_LOBES = int(
        _os.environ.pop("LL_LANCZOS_LOBES", None) or _cfg.pop("LANCZOS_LOBES", 3)
    )


from . import interp, io, sim, utils

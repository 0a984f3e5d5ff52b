# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("mathcanvas")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

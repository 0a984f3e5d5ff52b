## view configuration loading for mathcanvas
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2026 mathcanvas contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""View configuration with YAML file and environment override support.

A view's defaults (surface size, scale, sampling steps, frame rate and
the default boundary policy) can be kept in a YAML file:

.. code-block:: yaml

    width: 800
    height: 600
    scale: 40
    origin: [400, 300]
    boundary: [bounce, wrap]

Search order, first match wins:
    1. An explicit path passed to ``load_config()``
    2. Paths in the ``MATHCANVAS_CONFIG`` environment variable
       (colon-separated, or semicolon on Windows); each may name a file
       or a directory holding ``config.yaml``
    3. The user config file (``~/.config/mathcanvas/config.yaml``)
    4. Built-in defaults

Example:
    export MATHCANVAS_CONFIG="$HOME/projects/demo/view.yaml"
"""

from __future__ import annotations

import logging
import math
import os
import sys
from dataclasses import dataclass, fields, asdict
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from mathcanvas.errors import ConfigError, InvalidParameterError
from mathcanvas.geom import ScreenPoint, isgoodnum, isfinitenum, pi2

__all__ = [
    "MATHCANVAS_CONFIG",
    "ViewConfig",
    "load_config",
    "config_paths",
    "clear_cache",
]

logger = logging.getLogger(__name__)

# Environment variable name for config file paths
MATHCANVAS_CONFIG = "MATHCANVAS_CONFIG"

_CONFIG_NAME = "config.yaml"


@dataclass(frozen=True)
class ViewConfig:
    """Defaults for a view.  ``origin`` of ``None`` means the centre."""
    width: float = 640
    height: float = 480
    origin: Optional[Tuple[float, float]] = None
    scale: float = 20.0
    tick_distance: Optional[float] = None
    pixel_step: float = 1.0
    polar_step: float = pi2 / 360.0
    parametric_step: float = 0.1
    fps: float = 60.0
    boundary: Any = "none"

    @classmethod
    def from_mapping(cls, data: Dict[str, Any], source: str = "<mapping>") -> "ViewConfig":
        """Build a config from a dict, validating every value."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config format in {source}: expected mapping at root")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys in {source}: {unknown}")

        values = dict(data)
        for key in ("width", "height", "scale", "pixel_step",
                    "polar_step", "parametric_step", "fps"):
            if key in values:
                values[key] = _positive(key, values[key], source)
        if values.get("tick_distance") is not None:
            values["tick_distance"] = _positive("tick_distance", values["tick_distance"], source)
        if values.get("origin") is not None:
            values["origin"] = _origin(values["origin"], source)

        config = cls(**values)
        # fail early on a bad boundary shorthand
        try:
            config.boundary_policy()
        except InvalidParameterError as e:
            raise ConfigError(f"Bad boundary in {source}: {e}") from e
        return config

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def boundary_policy(self):
        from mathcanvas.boundary import BoundaryPolicy
        return BoundaryPolicy.of(self.boundary)

    def make_frame(self):
        """Build a ``CoordinateFrame`` from these settings."""
        from mathcanvas.frame import CoordinateFrame
        origin = None if self.origin is None else ScreenPoint(*self.origin)
        return CoordinateFrame(self.width, self.height, origin=origin,
                               scale=self.scale, tick_distance=self.tick_distance)


def _positive(key: str, value: Any, source: str) -> float:
    if not isfinitenum(value) or value <= 0:
        raise ConfigError(f"'{key}' in {source} must be a positive number, got {value!r}")
    return value


def _origin(value: Any, source: str) -> Tuple[float, float]:
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(isgoodnum(v) and math.isfinite(v) for v in value)):
        raise ConfigError(f"'origin' in {source} must be a pair of numbers, got {value!r}")
    return (value[0], value[1])


def clear_cache() -> None:
    """Clear cached config data.

    Call this after editing a config file or changing the environment.
    """
    config_paths.cache_clear()
    _load_config_cached.cache_clear()


@lru_cache(maxsize=None)
def config_paths() -> Tuple[Path, ...]:
    """Return candidate config files, in priority order.

    Search order:
        1. Paths from the MATHCANVAS_CONFIG environment variable
        2. User config file (~/.config/mathcanvas/config.yaml)
    """
    paths: List[Path] = []

    env_path = os.environ.get(MATHCANVAS_CONFIG)
    if env_path:
        sep = ";" if sys.platform == "win32" else ":"
        for p in env_path.split(sep):
            p = p.strip()
            if p:
                path = Path(p).expanduser().resolve()
                if path.is_dir():
                    path = path / _CONFIG_NAME
                paths.append(path)

    if sys.platform == "win32":
        config_base = Path(os.environ.get("APPDATA", "~")).expanduser()
    else:
        config_base = Path.home() / ".config"
    paths.append(config_base / "mathcanvas" / _CONFIG_NAME)

    return tuple(paths)


def load_config(path: Optional[str | Path] = None) -> ViewConfig:
    """Load view configuration.

    Args:
        path: Explicit config file.  If given it must exist.

    Returns:
        A validated ``ViewConfig``; the built-in defaults if no config
        file is found.

    Raises:
        ConfigError: The file is missing (explicit path only), is not
            valid YAML, or holds unknown keys or bad values.
    """
    path_str = str(Path(path).expanduser().resolve()) if path else None
    return _load_config_cached(path_str)


@lru_cache(maxsize=32)
def _load_config_cached(path_str: Optional[str]) -> ViewConfig:
    """Cached config loading (string path for hashability)."""
    if path_str:
        path = Path(path_str)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        return _load_yaml(path)

    for path in config_paths():
        if path.is_file():
            return _load_yaml(path)

    logger.debug("no config file found, using defaults")
    return ViewConfig()


def _load_yaml(path: Path) -> ViewConfig:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    logger.debug("loaded view config from %s", path)
    return ViewConfig.from_mapping(data, str(path))

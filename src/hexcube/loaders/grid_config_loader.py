"""Grid configuration — loads tunable defaults from config/grid.yaml.

Provides a single ``GridConfig`` dataclass that is loaded once at startup
and then passed to :meth:`HexGrid.from_config`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from hexcube.util.constants import DEFAULT_MAX_SEARCH_DEPTH

log = logging.getLogger(__name__)

DEFAULT_GRID_CONFIG_PATH = "config/grid.yaml"


@dataclass
class GridConfig:
    """Grid defaults.

    Every field has a default so callers can work without the file.
    """

    # -- Bounds ------------------------------------------------------
    default_radius: Optional[int] = None

    # -- Search ------------------------------------------------------
    max_search_depth: Optional[int] = DEFAULT_MAX_SEARCH_DEPTH


def load_grid_config(path: str | Path = DEFAULT_GRID_CONFIG_PATH) -> GridConfig:
    """Load grid configuration from a YAML file.

    Missing keys fall back to dataclass defaults, unknown keys are
    ignored. If the file does not exist, a warning is logged and pure
    defaults are returned.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Grid config not found at %s, using defaults", p)
        return GridConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    log.info("Loaded grid config from %s (%d keys)", p, len(raw))

    return GridConfig(**{
        k: v for k, v in raw.items()
        if k in GridConfig.__dataclass_fields__
    })

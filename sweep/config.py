"""
sweep.config
============

Tiny helper that loads / saves *radar_sweep.json* and injects sensible
defaults for any missing keys.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path

from sweep.constants import (CFG_PATH, DEFAULT_PALETTE, MARKER_COUNT,
                             PAGE_BG, PALETTES)

log = logging.getLogger(__name__)

_DEFAULT = {
    # backdrop
    "palette": DEFAULT_PALETTE,       # "purple"  or  "red"
    "markers": MARKER_COUNT,
    "seed": None,                     # int → reproducible marker field
    "reduced_motion": False,

    # window / display
    "window": [1100, 750],
    "fullscreen": False,
    "pixel_ratio": 1.0,               # clamped to 1 … 2
    "fps": 60,
    "background": list(PAGE_BG),
    "overlay": "page.svg",            # page content drawn over the radar

    # diagnostics
    "log_level": "INFO",
}


def load(path: Path = CFG_PATH) -> dict:
    try:
        with open(path) as fh:
            cfg = {**_DEFAULT, **json.load(fh)}
    except FileNotFoundError:
        save(_DEFAULT, path)
        cfg = dict(_DEFAULT)
    return sanitize(cfg)


def save(cfg: dict, path: Path = CFG_PATH) -> None:
    Path(path).write_text(json.dumps(cfg, indent=2))


def sanitize(cfg: dict) -> dict:
    """Coerce values the renderer relies on; bad entries fall back to defaults."""
    if cfg["palette"] not in PALETTES:
        log.warning("unknown palette %r, using %r", cfg["palette"], DEFAULT_PALETTE)
        cfg["palette"] = DEFAULT_PALETTE
    cfg["markers"] = max(0, int(cfg["markers"]))
    cfg["fps"] = max(1, int(cfg["fps"]))
    cfg["pixel_ratio"] = float(cfg["pixel_ratio"] or 1.0)
    return cfg

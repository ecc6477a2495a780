"""
sweep.motion
============

Reduced-motion gate.  The preference is read once at start-up; changing it
mid-session has no effect until the next launch.

Sources, first match wins:

*   ``SWEEP_REDUCED_MOTION`` environment variable (``1``, ``true``, ``yes``,
    ``on`` or ``reduce`` → reduced; anything else → motion allowed)
*   ``reduced_motion`` key in *radar_sweep.json*
"""
from __future__ import annotations

import os
from typing import Mapping

ENV_VAR = "SWEEP_REDUCED_MOTION"
_TRUTHY = {"1", "true", "yes", "on", "reduce"}


def prefers_reduced_motion(cfg: Mapping, environ: Mapping = os.environ) -> bool:
    raw = environ.get(ENV_VAR)
    if raw is not None and raw.strip():
        return raw.strip().lower() in _TRUTHY
    return bool(cfg.get("reduced_motion", False))


def should_animate(reduced: bool, clock) -> bool:
    """Animate only with motion allowed *and* a frame clock to drive it."""
    return not reduced and clock is not None

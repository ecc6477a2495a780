"""
sweep.viewport
==============

Logical window size → `ViewportState` (origin, radius, backing size).

`measure()` is the pure part; `ViewportAdapter` reads the live window size
and pushes each new state into the drawing surface, which re-allocates its
backing buffer (and therefore loses its previous content).
"""
from __future__ import annotations

import logging
import math
from typing import Callable, NamedTuple, Optional, Tuple

from sweep.constants import ORIGIN_FRAC, PIXEL_RATIO_RANGE, RADIUS_FRAC

log = logging.getLogger(__name__)


class ViewportState(NamedTuple):
    width: int
    height: int
    pixel_ratio: float
    origin: Tuple[float, float]

    @property
    def backing_size(self) -> Tuple[int, int]:
        return (math.ceil(self.width * self.pixel_ratio),
                math.ceil(self.height * self.pixel_ratio))

    @property
    def radius(self) -> float:
        return min(self.width, self.height) * RADIUS_FRAC

    @property
    def center(self) -> Tuple[float, float]:
        return self.width * 0.5, self.height * 0.5


def clamp_pixel_ratio(ratio: Optional[float]) -> float:
    lo, hi = PIXEL_RATIO_RANGE
    return max(lo, min(hi, ratio or 1.0))


def measure(width: int, height: int, pixel_ratio: Optional[float] = 1.0) -> ViewportState:
    w, h = max(0, int(width)), max(0, int(height))
    return ViewportState(w, h, clamp_pixel_ratio(pixel_ratio),
                         (w * ORIGIN_FRAC[0], h * ORIGIN_FRAC[1]))


class ViewportAdapter:
    """
    Keeps the drawing surface in step with the window.

    `read_size` returns the current logical (width, height); `surface`
    is anything with a `resize(state)` method (normally a `CairoCanvas`).
    """

    def __init__(self, read_size: Callable[[], Tuple[int, int]],
                 pixel_ratio: Optional[float] = 1.0, surface=None) -> None:
        self.read_size = read_size
        self.pixel_ratio = pixel_ratio
        self.surface = surface
        self.state: Optional[ViewportState] = None

    def resize(self) -> ViewportState:
        state = measure(*self.read_size(), self.pixel_ratio)
        if self.surface is not None:
            self.surface.resize(state)
        if state != self.state:
            log.debug("viewport %dx%d @%.2f → backing %dx%d",
                      state.width, state.height, state.pixel_ratio,
                      *state.backing_size)
        self.state = state
        return state

"""Frame pacing: one monotonic timestamp (seconds) per display frame."""
from __future__ import annotations

import pygame


class FrameClock:
    """
    Wraps `pygame.time.Clock`.  Timestamps count from `pygame.init()`, so the
    sweep picks up wherever wall time has got to, never from zero.

    A slow frame is not compensated: `tick()` simply returns later.
    """

    def __init__(self, fps: int = 60, clock=None, ticks=None) -> None:
        self.fps = fps
        self._clock = clock or pygame.time.Clock()
        self._ticks = ticks or pygame.time.get_ticks

    def now(self) -> float:
        return self._ticks() / 1000

    def next_frame(self) -> float:
        self._clock.tick(self.fps)
        return self.now()

    def get_fps(self) -> float:
        return self._clock.get_fps()

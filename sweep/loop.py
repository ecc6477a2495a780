"""
sweep.loop
==========

The animation loop, spelled out:

    while not cancelled:
        t = clock.next_frame()
        pump()          # window events – resize, quit …
        draw(t)

`cancel()` may be called from inside `pump` or `draw`; the flag is checked
before every draw, so no frame is drawn after cancellation.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

log = logging.getLogger(__name__)


class Animator:
    def __init__(self, clock, draw: Callable[[float], None],
                 pump: Optional[Callable[[], None]] = None) -> None:
        self.clock = clock
        self.draw = draw
        self.pump = pump
        self.cancelled = False
        self.frames = 0

    def cancel(self) -> None:
        self.cancelled = True

    def run(self, max_frames: Optional[int] = None) -> int:
        """Loop until cancelled (or `max_frames` drawn); return frames drawn."""
        started = time.monotonic()
        while not self.cancelled:
            t = self.clock.next_frame()
            if self.pump is not None:
                self.pump()
            if self.cancelled:
                break
            self.draw(t)
            self.frames += 1
            if max_frames is not None and self.frames >= max_frames:
                break

        elapsed = time.monotonic() - started
        log.info("animation stopped after %d frames (%.1f fps)",
                 self.frames, self.frames / elapsed if elapsed > 0 else 0.0)
        return self.frames

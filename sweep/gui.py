"""
sweep.gui
=========

Radar-sweep backdrop window.

Key features
------------
• Cairo-rendered sweep, rings, glow & vignette behind optional page content
• Pulsing markers that flare as the beam passes over them
• Resizable window, FULL-SCREEN toggle (``f``), quit with ``q`` / ``Esc``
• Reduced-motion preference → one static frame, no animation loop
• Drawing surface failure → backdrop disabled, page content still shown
"""

from __future__ import annotations
import logging, random, pygame
from typing import Optional
import xml.etree.ElementTree as ET

from sweep.canvas import CairoCanvas, SurfaceUnavailable
from sweep.clock import FrameClock
from sweep.frame import RendererState, compute_frame
from sweep.loop import Animator
from sweep.markers import generate
from sweep.motion import prefers_reduced_motion, should_animate
from sweep.svg_utils import fit_svg
from sweep.viewport import ViewportAdapter

log = logging.getLogger(__name__)


class SweepGUI:
    # ────────────────────────────────────────────────── INIT
    def __init__(self, cfg: dict, clock: Optional[FrameClock] = None) -> None:
        self.cfg = cfg

        # ―― Pygame window
        self.full_screen = bool(cfg["fullscreen"])
        flags = pygame.FULLSCREEN if self.full_screen else pygame.RESIZABLE
        self.screen = pygame.display.set_mode(tuple(cfg["window"]), flags)
        pygame.display.set_caption("Radar Sweep")
        self.background = tuple(cfg["background"])

        # ―― Motion policy (read once)
        self.clock = clock or FrameClock(cfg["fps"])
        self.reduced_motion = prefers_reduced_motion(cfg)

        # ―― Marker field – fixed for the session
        seed = cfg["seed"]
        self.markers = generate(cfg["markers"], random.Random(seed))
        self.palette = cfg["palette"]

        # ―― Viewport & drawing surface
        self.viewport = ViewportAdapter(self._window_size, cfg["pixel_ratio"])
        state = self.viewport.resize()
        self.canvas: Optional[CairoCanvas] = None
        try:
            self.canvas = CairoCanvas(state)
            self.viewport.surface = self.canvas
        except SurfaceUnavailable as exc:
            log.warning("radar backdrop disabled: %s", exc)

        # ―― Page content
        self.overlay: Optional[pygame.Surface] = None
        self.overlay_pos = (0, 0)
        self.overlay_path = cfg.get("overlay")
        self.refresh_overlay()

        self.animator: Optional[Animator] = None
        self.backdrop: Optional[pygame.Surface] = None
        self.running = True
        self.renders = 0

        log.info("palette=%s markers=%d seed=%s reduced_motion=%s",
                 self.palette, len(self.markers), seed, self.reduced_motion)

    def _window_size(self):
        return self.screen.get_size()

    # ───────────────────────────────────────── page overlay
    def refresh_overlay(self):
        path = self.overlay_path
        if not path:
            self.overlay = None
            return
        try:
            self.overlay, _ = fit_svg(path, self.screen.get_size())
        except (OSError, ET.ParseError, ValueError) as exc:
            log.warning("page overlay %r not shown: %s", path, exc)
            self.overlay = None
            self.overlay_path = None          # don't retry on every resize
            return
        self.overlay_pos = ((self.screen.get_width()  - self.overlay.get_width())  // 2,
                            (self.screen.get_height() - self.overlay.get_height()) // 2)

    # ───────────────────────────────────────── resize
    def resize(self):
        state = self.viewport.resize()
        self.refresh_overlay()
        return state

    # ───────────────────────────────────────── rendering
    def render(self, t: float) -> None:
        """Draw one radar frame at timestamp `t` into the backing surface."""
        state = RendererState(self.viewport.state, self.markers, self.palette)
        self.canvas.paint(compute_frame(state, t))
        self.renders += 1
        if self.canvas.empty:
            self.backdrop = None
            return
        surf = self.canvas.to_pygame()
        vp = self.viewport.state
        if surf.get_size() != (vp.width, vp.height):
            surf = pygame.transform.smoothscale(surf, (vp.width, vp.height))
        else:
            surf = surf.copy()            # detach from the cairo buffer
        self.backdrop = surf

    def present(self) -> None:
        self.screen.fill(self.background)
        if self.backdrop is not None:
            self.screen.blit(self.backdrop, (0, 0),
                             special_flags=pygame.BLEND_PREMULTIPLIED)
        if self.overlay is not None:
            self.screen.blit(self.overlay, self.overlay_pos)
        pygame.display.flip()

    def draw(self, t: float) -> None:
        self.render(t)
        self.present()

    # ───────────────────────────────────────── events
    def handle(self, e) -> None:
        if e.type == pygame.QUIT:
            self.stop()
        elif e.type == pygame.VIDEORESIZE and not self.full_screen:
            self.screen = pygame.display.set_mode(e.size, pygame.RESIZABLE)
            self.resize()
        elif e.type == pygame.KEYDOWN:
            if e.key in (pygame.K_q, pygame.K_ESCAPE):
                self.stop()
            elif e.key == pygame.K_f:
                pygame.display.toggle_fullscreen()
                self.full_screen = not self.full_screen
                self.resize()

    def pump(self) -> None:
        for e in pygame.event.get():
            self.handle(e)

    def stop(self) -> None:
        self.running = False
        if self.animator is not None:
            self.animator.cancel()

    # ───────────────────────────────────────── MAIN LOOP
    def run(self) -> None:
        if self.canvas is not None and should_animate(self.reduced_motion, self.clock):
            log.info("animating at up to %d fps", self.clock.fps)
            self.animator = Animator(self.clock, self.draw, self.pump)
            self.animator.run()
        else:
            self._run_static()
        self._sync_cfg()
        pygame.quit()

    def _run_static(self) -> None:
        """One frame frozen at the current timestamp, then only window events."""
        if self.canvas is not None:
            log.info("reduced motion – single static frame")
            self.render(self.clock.now())
        self.present()
        while self.running:
            e = pygame.event.wait()
            self.handle(e)
            if self.running:
                self.present()

    def _sync_cfg(self):
        self.cfg["fullscreen"] = self.full_screen
        if not self.full_screen:
            self.cfg["window"] = list(self.screen.get_size())

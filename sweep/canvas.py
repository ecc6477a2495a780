"""
sweep.canvas
============

Cairo drawing surface for the backdrop.

*   The backing `ImageSurface` is `ceil(w·ratio) × ceil(h·ratio)` pixels and
    the context is scaled by `ratio`, so every command is in logical px.
*   Pixels stay **premultiplied** ARGB; blit the result with
    `pygame.BLEND_PREMULTIPLIED`.
"""
from __future__ import annotations

import math
import sys
from typing import Iterable, Optional

import cairocffi as cairo
import pygame

from sweep.frame import (Clear, DrawCommand, FillCircle, FillRect, FillWedge,
                         RadialGradient, StrokeCircle, StrokeLines)
from sweep.viewport import ViewportState

TAU = 2 * math.pi
# cairo stores ARGB32 as native-endian 32-bit words
PIXEL_FORMAT = "BGRA" if sys.byteorder == "little" else "ARGB"


class SurfaceUnavailable(RuntimeError):
    """The 2D drawing surface could not be created."""


def _rgba(color) -> tuple:
    r, g, b, a = color
    return r / 255, g / 255, b / 255, a


def gradient_pattern(g: RadialGradient) -> cairo.RadialGradient:
    pat = cairo.RadialGradient(g.x0, g.y0, g.r0, g.x1, g.y1, g.r1)
    for offset, color in g.stops:
        pat.add_color_stop_rgba(offset, *_rgba(color))
    return pat


class CairoCanvas:
    def __init__(self, state: ViewportState) -> None:
        self.surface: Optional[cairo.ImageSurface] = None
        self.ctx: Optional[cairo.Context] = None
        self.state = state
        self.resize(state)

    # ───────────────────────── backing buffer
    def resize(self, state: ViewportState) -> None:
        """Re-allocate the backing buffer; previous content is gone."""
        bw, bh = state.backing_size
        try:
            surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, bw, bh)
            ctx = cairo.Context(surface)
        except cairo.CairoError as exc:
            raise SurfaceUnavailable(f"cannot allocate {bw}x{bh} surface: {exc}") from exc
        ctx.scale(state.pixel_ratio, state.pixel_ratio)
        self.surface, self.ctx, self.state = surface, ctx, state

    @property
    def empty(self) -> bool:
        bw, bh = self.state.backing_size
        return bw == 0 or bh == 0

    # ───────────────────────── command execution
    def paint(self, commands: Iterable[DrawCommand]) -> None:
        for cmd in commands:
            self.execute(cmd)

    def execute(self, cmd: DrawCommand) -> None:
        ctx = self.ctx
        ctx.new_path()
        if isinstance(cmd, Clear):
            ctx.save()
            ctx.set_operator(cairo.OPERATOR_CLEAR)
            ctx.rectangle(0, 0, cmd.width, cmd.height)
            ctx.fill()
            ctx.restore()
        elif isinstance(cmd, FillRect):
            ctx.set_source(gradient_pattern(cmd.paint))
            ctx.rectangle(cmd.x, cmd.y, cmd.width, cmd.height)
            ctx.fill()
        elif isinstance(cmd, StrokeCircle):
            ctx.set_source_rgba(*_rgba(cmd.color))
            ctx.set_line_width(cmd.line_width)
            ctx.arc(cmd.cx, cmd.cy, cmd.radius, 0, TAU)
            ctx.stroke()
        elif isinstance(cmd, StrokeLines):
            ctx.set_source_rgba(*_rgba(cmd.color))
            ctx.set_line_width(cmd.line_width)
            for (x0, y0), (x1, y1) in cmd.segments:
                ctx.move_to(x0, y0)
                ctx.line_to(x1, y1)
            ctx.stroke()
        elif isinstance(cmd, FillWedge):
            ctx.set_source(gradient_pattern(cmd.paint))
            ctx.move_to(cmd.cx, cmd.cy)
            ctx.arc(cmd.cx, cmd.cy, cmd.radius, cmd.start, cmd.end)
            ctx.close_path()
            ctx.fill()
        elif isinstance(cmd, FillCircle):
            ctx.set_source_rgba(*_rgba(cmd.color))
            ctx.arc(cmd.cx, cmd.cy, cmd.radius, 0, TAU)
            ctx.fill()
        else:
            raise TypeError(f"unknown draw command {cmd!r}")

    # ───────────────────────── hand-off to pygame
    def to_pygame(self) -> pygame.Surface:
        """
        Wrap the backing buffer in a pygame surface (no copy).

        The returned surface shares memory with the cairo surface, so it is
        only valid until the next `paint()` / `resize()`.
        """
        self.surface.flush()
        return pygame.image.frombuffer(self.surface.get_data(),
                                       self.state.backing_size, PIXEL_FORMAT)

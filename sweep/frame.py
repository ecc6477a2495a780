"""
sweep.frame
===========

Pure per-frame geometry for the radar backdrop.

`compute_frame(state, t)` turns a `RendererState` and a timestamp (seconds)
into an ordered list of draw commands, back-to-front:

    clear → glow → rings → cross → sweep wedge → markers → vignette

Nothing here touches a drawing API; `sweep.canvas` executes the commands.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple, Union

from sweep import constants as C
from sweep.markers import Marker
from sweep.viewport import ViewportState

RGBA  = Tuple[int, int, int, float]
Stops = Tuple[Tuple[float, RGBA], ...]


# ────────── draw commands ──────────
class RadialGradient(NamedTuple):
    x0: float
    y0: float
    r0: float
    x1: float
    y1: float
    r1: float
    stops: Stops


class Clear(NamedTuple):
    width: float
    height: float


class FillRect(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    paint: RadialGradient


class StrokeCircle(NamedTuple):
    cx: float
    cy: float
    radius: float
    color: RGBA
    line_width: float = 1.0


class StrokeLines(NamedTuple):
    segments: Tuple[Tuple[Tuple[float, float], Tuple[float, float]], ...]
    color: RGBA
    line_width: float = 1.0


class FillWedge(NamedTuple):
    cx: float
    cy: float
    radius: float
    start: float
    end: float
    paint: RadialGradient


class FillCircle(NamedTuple):
    cx: float
    cy: float
    radius: float
    color: RGBA


DrawCommand = Union[Clear, FillRect, StrokeCircle, StrokeLines, FillWedge, FillCircle]


@dataclass(frozen=True)
class RendererState:
    viewport: ViewportState
    markers: Sequence[Marker] = ()
    palette: str = C.DEFAULT_PALETTE


# ────────── math helpers ──────────
def sweep_angle(t: float) -> float:
    """Beam angle at `t` seconds; unbounded, only used through sin/cos."""
    return t * C.SWEEP_SPEED


def angular_distance(a: float, b: float) -> float:
    """Signed shortest difference a − b, wrapped into [−π, π]."""
    return math.atan2(math.sin(a - b), math.cos(a - b))


def hit_strength(angle: float, sweep: float) -> float:
    """1 with the beam on the marker, falling linearly to 0 at HIT_WIDTH."""
    return max(0.0, 1.0 - abs(angular_distance(angle, sweep)) / C.HIT_WIDTH)


def pulse(t: float, phase: float) -> float:
    return C.PULSE_FLOOR + (1 - C.PULSE_FLOOR) * max(0.0, math.sin(t * C.PULSE_RATE + phase))


def marker_alpha(hit: float, pulse_level: float) -> float:
    return C.ALPHA_FLOOR + hit * C.ALPHA_GAIN * pulse_level


def marker_radius(size: float, hit: float) -> float:
    return size + hit * C.HIT_GROWTH


# ────────── frame ──────────
def compute_frame(state: RendererState, t: float) -> List[DrawCommand]:
    vp  = state.viewport
    pal = C.PALETTES[state.palette]
    w, h = vp.width, vp.height
    ox, oy = vp.origin
    R = vp.radius

    cmds: List[DrawCommand] = [Clear(w, h)]
    if R <= 0:                                   # nothing sensible to draw
        return cmds

    # ambient glow – the gradient, not a circle, defines the falloff
    glow = RadialGradient(ox, oy, 0, ox, oy, R * C.GLOW_SCALE, pal["glow"])
    cmds.append(FillRect(0, 0, w, h, glow))

    # range rings & cross
    for i in range(1, C.RING_COUNT + 1):
        cmds.append(StrokeCircle(ox, oy, R * i / C.RING_COUNT, pal["ring"]))
    cmds.append(StrokeLines((((ox - R, oy), (ox + R, oy)),
                             ((ox, oy - R), (ox, oy + R))), pal["cross"]))

    # sweep wedge trailing the beam
    sweep = sweep_angle(t)
    beam = RadialGradient(ox, oy, 0, ox, oy, R, pal["sweep"])
    cmds.append(FillWedge(ox, oy, R, sweep - C.WEDGE, sweep, beam))

    # markers
    r, g, b = pal["marker"]
    for m in state.markers:
        hit = hit_strength(m.angle, sweep)
        alpha = marker_alpha(hit, pulse(t, m.phase))
        cmds.append(FillCircle(ox + math.cos(m.angle) * R * m.radial_fraction,
                               oy + math.sin(m.angle) * R * m.radial_fraction,
                               marker_radius(m.size, hit),
                               (r, g, b, alpha)))

    # vignette around the window centre, not the sweep origin
    cx, cy = vp.center
    vig = RadialGradient(cx, cy, min(w, h) * 0.2, cx, cy, max(w, h) * 0.75, C.VIGNETTE)
    cmds.append(FillRect(0, 0, w, h, vig))
    return cmds

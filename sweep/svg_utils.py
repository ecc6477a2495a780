"""
sweep.svg_utils
===============

Raster-to-Pygame helpers for the page content drawn over the backdrop.

*   Always scales an SVG in **contain** mode (never crops).
*   Sizes declared in mm / cm are honoured; anything else is taken as
    user units, so the returned scale is "pixels per declared unit".
"""

from __future__ import annotations

from io import BytesIO
import xml.etree.ElementTree as ET
import pygame, cairosvg

_UNITS = {"mm": 1.0, "cm": 10.0, "px": 1.0}


# ────────── internal helpers ──────────
def svg_size(path: str) -> tuple[float, float]:
    """Return (width, height) declared in the `<svg>` element."""
    root = ET.parse(path).getroot()

    def unit(v: str) -> float:
        for suffix, factor in _UNITS.items():
            if v.endswith(suffix):
                return float(v[:-len(suffix)]) * factor
        return float(v)

    w, h = root.get("width"), root.get("height")
    if w and h:                          # explicit width/height attributes
        return unit(w), unit(h)
    view_box = root.get("viewBox")
    if not view_box:
        raise ValueError(f"{path}: <svg> has neither width/height nor viewBox")
    _, _, w, h = map(float, view_box.replace(",", " ").split())
    return w, h


def contain_scale(size: tuple[float, float], box: tuple[int, int]) -> float:
    """Largest scale at which `size` still fits inside `box`."""
    (w, h), (bw, bh) = size, box
    if w <= 0 or h <= 0:
        raise ValueError(f"degenerate SVG size {w}x{h}")
    return max(0.0, min(bw / w, bh / h))


def _raster_svg(path: str, scale: float, size: tuple[float, float]) -> pygame.Surface:
    """Render SVG at `scale` pixels per unit and return a Pygame RGBA surface."""
    w_px, h_px = max(1, int(size[0] * scale)), max(1, int(size[1] * scale))
    png = cairosvg.svg2png(url=path, output_width=w_px, output_height=h_px)
    return pygame.image.load(BytesIO(png)).convert_alpha()


# ────────── public API ──────────
def fit_svg(path: str, box_size: tuple[int, int]) -> tuple[pygame.Surface, float]:
    """
    Rasterise *path* so the result is fully contained in `box_size`
    (width_px, height_px).  Returns `(surface, scale)`.

    CairoSVG rounds the output size, so a second `smoothscale` (<= 1) pulls
    the raster back inside the box when it overflows by a pixel; the final
    scale is the product of both.
    """
    sw, sh = box_size
    size = svg_size(path)
    scale0 = contain_scale(size, box_size)

    raw = _raster_svg(path, scale0, size)
    rw, rh = raw.get_width(), raw.get_height()

    fix = min(1.0, sw / rw, sh / rh)
    if fix < 1.0:
        raw = pygame.transform.smoothscale(
            raw, (max(1, int(rw * fix)), max(1, int(rh * fix)))
        )
    return raw, scale0 * fix

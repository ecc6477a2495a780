"""
Hard-coded colours, geometry & paths so every module can import them
without circular dependencies.
"""
from pathlib import Path

# -------- colours --------
WHITE, BLACK = (255, 255, 255), (0, 0, 0)
PAGE_BG = (7, 7, 12)                     # window fill behind the backdrop

# Each palette: gradient stops are (offset, (r, g, b, alpha)).
PALETTES = {
    "purple": {
        "glow":   ((0.0, (139, 92, 246, 0.14)),
                   (0.5, (139, 92, 246, 0.05)),
                   (1.0, (0, 0, 0, 0.0))),
        "sweep":  ((0.0,  (167, 139, 250, 0.22)),
                   (0.35, (139, 92, 246, 0.10)),
                   (1.0,  (0, 0, 0, 0.0))),
        "ring":   (255, 255, 255, 0.06),
        "cross":  (255, 255, 255, 0.05),
        "marker": (255, 43, 43),
    },
    "red": {
        "glow":   ((0.0, (239, 68, 68, 0.14)),
                   (0.5, (239, 68, 68, 0.05)),
                   (1.0, (0, 0, 0, 0.0))),
        "sweep":  ((0.0,  (248, 113, 113, 0.22)),
                   (0.35, (239, 68, 68, 0.10)),
                   (1.0,  (0, 0, 0, 0.0))),
        "ring":   (255, 255, 255, 0.06),
        "cross":  (255, 255, 255, 0.05),
        "marker": (255, 43, 43),
    },
}
DEFAULT_PALETTE = "purple"

VIGNETTE = ((0.0, (0, 0, 0, 0.0)),
            (1.0, (0, 0, 0, 0.45)))

# -------- geometry --------
MARKER_COUNT  = 18
ORIGIN_FRAC   = (0.62, 0.36)             # sweep centre, fraction of w / h
RADIUS_FRAC   = 0.48                     # R = 0.48 * min(w, h)
GLOW_SCALE    = 1.1
RING_COUNT    = 4
SWEEP_SPEED   = 0.55                     # rad/s
WEDGE         = 0.45                     # rad
HIT_WIDTH     = 0.35                     # rad
PULSE_RATE    = 2.2                      # rad/s
HIT_GROWTH    = 2.4                      # px added at full hit
ALPHA_FLOOR   = 0.05
ALPHA_GAIN    = 0.55
PULSE_FLOOR   = 0.35
PIXEL_RATIO_RANGE = (1.0, 2.0)

# -------- dirs --------
ROOT      = Path(__file__).resolve().parent.parent
LOG_DIR   = ROOT / "log"
CFG_PATH  = ROOT / "radar_sweep.json"

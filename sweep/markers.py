"""
sweep.markers
=============

The fixed field of radar "contacts".  Generated once per session and
only ever read afterwards.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Tuple

TAU = 2 * math.pi


@dataclass(frozen=True)
class Marker:
    radial_fraction: float     # 0.08 … 0.54 of R
    angle: float               # rad, 0 … 2π
    phase: float               # rad, pulse offset
    size: float                # px, 1.2 … 3.4


def generate(count: int, rng=None) -> Tuple[Marker, ...]:
    """
    Return `count` markers with independently uniform attributes.

    `rng` only needs a `random()` method; pass `random.Random(seed)` for a
    reproducible field.
    """
    rng = rng or random.Random()
    return tuple(
        Marker(radial_fraction=rng.random() * 0.46 + 0.08,
               angle=rng.random() * TAU,
               phase=rng.random() * TAU,
               size=rng.random() * 2.2 + 1.2)
        for _ in range(max(0, count))
    )

from __future__ import annotations

import math
import random

from sweep.markers import Marker, generate


def test_generate_default_count_and_ranges():
    field = generate(18, random.Random(7))
    assert len(field) == 18
    for m in field:
        assert 0.08 <= m.radial_fraction < 0.54
        assert 0 <= m.angle < 2 * math.pi
        assert 0 <= m.phase < 2 * math.pi
        assert 1.2 <= m.size < 3.4


def test_same_seed_same_field():
    assert generate(18, random.Random(42)) == generate(18, random.Random(42))
    assert generate(18, random.Random(42)) != generate(18, random.Random(43))


def test_zero_and_negative_counts_give_empty_field():
    assert generate(0) == ()
    assert generate(-3) == ()


def test_field_is_immutable():
    field = generate(2, random.Random(1))
    assert isinstance(field, tuple)
    try:
        field[0].angle = 0.0
    except AttributeError:
        pass
    else:
        raise AssertionError("Marker should be frozen")


def test_extreme_rng_values_map_to_range_edges():
    class Const:
        def __init__(self, v):
            self.v = v

        def random(self):
            return self.v

    lo = generate(1, Const(0.0))[0]
    assert lo == Marker(0.08, 0.0, 0.0, 1.2)

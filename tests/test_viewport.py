from __future__ import annotations

import pytest

from sweep.viewport import ViewportAdapter, clamp_pixel_ratio, measure


def test_measure_reference_viewport():
    vp = measure(1000, 800, 1)
    assert vp.radius == pytest.approx(384)
    assert vp.origin == pytest.approx((620, 288))
    assert vp.backing_size == (1000, 800)
    assert vp.center == (500, 400)


@pytest.mark.parametrize("raw, expected", [
    (None, 1.0), (0, 1.0), (0.5, 1.0), (1.25, 1.25), (2.0, 2.0), (3.0, 2.0),
])
def test_pixel_ratio_is_clamped(raw, expected):
    assert clamp_pixel_ratio(raw) == expected


def test_backing_size_rounds_up():
    vp = measure(1001, 801, 1.5)
    assert vp.backing_size == (1502, 1202)


def test_negative_size_treated_as_empty():
    vp = measure(-5, 300)
    assert vp.width == 0
    assert vp.radius == 0


class _Surface:
    def __init__(self):
        self.states = []

    def resize(self, state):
        self.states.append(state)


def test_adapter_pushes_every_resize_to_surface():
    size = [800, 600]
    surface = _Surface()
    adapter = ViewportAdapter(lambda: tuple(size), 2.0, surface)

    first = adapter.resize()
    size[:] = [400, 300]
    second = adapter.resize()

    assert surface.states == [first, second]
    assert second.origin == pytest.approx((248, 108))
    assert second.backing_size == (800, 600)
    assert adapter.state is second


def test_resize_with_identical_dimensions_is_idempotent():
    adapter = ViewportAdapter(lambda: (1280, 720), 1.0)
    assert adapter.resize() == adapter.resize()

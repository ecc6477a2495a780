from __future__ import annotations

import pytest

try:
    import cairocffi  # noqa: F401
except (ImportError, OSError):      # no native libcairo on this host
    pytest.skip("cairo library not available", allow_module_level=True)

import pygame

from sweep.svg_utils import contain_scale, fit_svg, svg_size

SVG = ('<svg xmlns="http://www.w3.org/2000/svg" {attrs}>'
       '<rect width="100%" height="100%" fill="#fff"/></svg>')


def _write(tmp_path, attrs):
    p = tmp_path / "page.svg"
    p.write_text(SVG.format(attrs=attrs))
    return str(p)


def test_size_from_attributes_and_viewbox(tmp_path):
    assert svg_size(_write(tmp_path, 'width="20cm" height="10cm"')) == (200, 100)
    assert svg_size(_write(tmp_path, 'width="640px" height="480"')) == (640, 480)
    assert svg_size(_write(tmp_path, 'viewBox="0 0 300 150"')) == (300, 150)


def test_size_without_dimensions_rejected(tmp_path):
    with pytest.raises(ValueError):
        svg_size(_write(tmp_path, ""))


def test_contain_scale_picks_tighter_axis():
    assert contain_scale((200, 100), (100, 100)) == 0.5
    assert contain_scale((100, 200), (400, 100)) == 0.5


def test_fit_svg_stays_inside_box(tmp_path):
    pygame.init()
    pygame.display.set_mode((10, 10))
    try:
        surf, scale = fit_svg(_write(tmp_path, 'width="200" height="100"'), (100, 100))
        assert surf.get_width() <= 100 and surf.get_height() <= 100
        assert scale == pytest.approx(0.5)
    finally:
        pygame.quit()

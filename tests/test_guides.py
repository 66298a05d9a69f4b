import math

import pytest

from sacredgrid import circle_center_guides, compute_radius, diamond_guides, guides, hex_guides, snap


def _midpoint(line):
    return ((line.x1 + line.x2) * 0.5, (line.y1 + line.y2) * 0.5)


def test_hex_guides_are_eight_lines_through_point():
    lines = hex_guides((10.0, 20.0))
    assert len(lines) == 8
    horizontal, vertical = lines[:2]
    assert (horizontal.x1, horizontal.y1, horizontal.x2, horizontal.y2) == (-990.0, 20.0, 1010.0, 20.0)
    assert (vertical.x1, vertical.y1, vertical.x2, vertical.y2) == (10.0, -980.0, 10.0, 1020.0)
    for line in lines:
        assert line.kind == "radial"
        assert line.length == pytest.approx(2000.0)
        mx, my = _midpoint(line)
        assert mx == pytest.approx(10.0)
        assert my == pytest.approx(20.0)


def test_hex_spokes_step_by_sixty_degrees():
    spokes = hex_guides((0.0, 0.0))[2:]
    angles = [math.degrees(math.atan2(s.y2 - s.y1, s.x2 - s.x1)) % 360 for s in spokes]
    for expected, angle in zip(range(0, 360, 60), angles):
        assert angle == pytest.approx(expected, abs=1e-9)


def test_hex_guides_do_not_depend_on_snapping():
    snapped = snap((38.0, 0.5), "hex", "cm", 1.0)
    unsnapped = snap((1000.0, 1000.0), "hex", "cm", 1.0)
    assert snapped.snapped and not unsnapped.snapped
    assert len(guides(snapped.point, "hex", "cm", 1.0)) == len(guides(unsnapped.point, "hex", "cm", 1.0))


def test_guides_dispatch():
    assert guides((1.0, 2.0), "hex", "inch", 2.0) == hex_guides((1.0, 2.0))
    assert guides((43.0, 4.0), "diamond", "cm", 1.0) == diamond_guides((43.0, 4.0), 1.0)
    with pytest.raises(ValueError):
        guides((0.0, 0.0), "triangle", "cm", 1.0)


def test_diamond_guides_link_nearby_centers_only():
    lines = diamond_guides((43.0, 4.0), 1.0, 40.0)
    assert len(lines) == 1
    line = lines[0]
    assert line.kind == "to_center"
    assert (line.x1, line.y1, line.x2, line.y2) == (43.0, 4.0, 40.0, 0.0)


def test_diamond_guides_depend_on_features():
    assert diamond_guides((20.0, 20.0), 1.0, 40.0) == []
    zoomed_out = diamond_guides((20.0, 20.0), 0.5, 40.0)
    assert sorted((g.x2, g.y2) for g in zoomed_out) == [(0.0, 0.0), (0.0, 40.0), (40.0, 0.0), (40.0, 40.0)]


def test_circle_center_guides_point_at_circles_through_point():
    radius = compute_radius("cm", 1.0)
    lines = circle_center_guides((0.0, radius), radius, 1.0)
    assert lines
    assert all(line.kind == "to_center" for line in lines)
    assert any(line.x2 == pytest.approx(0.0) and line.y2 == pytest.approx(0.0) for line in lines)
    for line in lines:
        center_distance = math.hypot(line.x2 - line.x1, line.y2 - line.y1)
        assert abs(center_distance - radius) < 5.0

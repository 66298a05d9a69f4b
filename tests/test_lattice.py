import math
from collections import defaultdict
from collections.abc import Iterator

import pytest

from sacredgrid import ViewportBounds, compute_radius, motif_centers, nearest_motif_center
from sacredgrid.lattice import SQRT3, lattice_window
from sacredgrid.types import Point

RADIUS = compute_radius("cm", 1.0)


def _rows(centers):
    rows = defaultdict(list)
    for center in centers:
        rows[center.y].append(center.x)
    return rows


def test_motif_centers_are_deterministic():
    viewport = ViewportBounds(-120.0, -80.0, 640.0, 480.0)
    first = list(motif_centers(RADIUS, viewport, 300))
    second = list(motif_centers(RADIUS, viewport, 300))
    assert first == second
    assert len(first) > 0


def test_motif_centers_is_lazy_and_restartable():
    viewport = ViewportBounds(0.0, 0.0, 200.0, 200.0)
    centers = motif_centers(RADIUS, viewport, 50)
    assert isinstance(centers, Iterator)
    consumed = list(centers)
    assert list(centers) == []
    assert list(motif_centers(RADIUS, viewport, 50)) == consumed


def test_same_row_spacing_is_two_radii():
    viewport = ViewportBounds(0.0, 0.0, 800.0, 600.0)
    rows = _rows(motif_centers(RADIUS, viewport, 800))
    assert len(rows) > 2
    for xs in rows.values():
        for left, right in zip(xs, xs[1:]):
            assert right - left == pytest.approx(2 * RADIUS)


def test_adjacent_rows_are_radius_sqrt3_apart_and_alternate_offset():
    viewport = ViewportBounds(0.0, 0.0, 800.0, 600.0)
    rows = _rows(motif_centers(RADIUS, viewport, 800))
    ys = sorted(rows)
    for upper, lower in zip(ys, ys[1:]):
        assert lower - upper == pytest.approx(RADIUS * math.sqrt(3))
    for upper, lower in zip(ys, ys[1:]):
        shift = (rows[lower][0] - rows[upper][0]) % (2 * RADIUS)
        assert shift == pytest.approx(RADIUS)


def test_first_center_comes_from_padded_window():
    viewport = ViewportBounds(0.0, 0.0, 100.0, 100.0)
    first = next(motif_centers(RADIUS, viewport, 10))
    assert first.x == pytest.approx(-2 * RADIUS)
    assert first.y == pytest.approx(-2 * RADIUS * SQRT3)


def test_budget_is_a_hard_cap():
    viewport = ViewportBounds(-2000.0, -2000.0, 2000.0, 2000.0)
    unclamped = list(motif_centers(RADIUS, viewport, 10_000))
    assert len(unclamped) > 25
    capped = list(motif_centers(RADIUS, viewport, 25))
    assert len(capped) == 25
    assert capped == unclamped[:25]


def test_zero_budget_yields_nothing():
    assert list(motif_centers(RADIUS, ViewportBounds(0.0, 0.0, 100.0, 100.0), 0)) == []


def test_smaller_padding_never_adds_centers():
    viewport = ViewportBounds(0.0, 0.0, 300.0, 300.0)
    wide = list(motif_centers(RADIUS, viewport, 10_000, padding_factor=2.0))
    narrow = list(motif_centers(RADIUS, viewport, 10_000, padding_factor=1.5))
    assert len(narrow) <= len(wide)
    assert set(narrow) <= set(wide)


def test_lattice_window_snaps_outward():
    window = lattice_window(10.0, ViewportBounds(0.0, 0.0, 100.0, 100.0), padding_factor=0.0)
    assert window.first_col == 0
    assert window.last_col == 5
    assert window.first_row == 0
    assert window.rows == window.last_row + 1


def test_nearest_motif_center():
    assert nearest_motif_center((1.0, 1.0), RADIUS) == Point(0.0, 0.0)
    near_odd_row = nearest_motif_center((RADIUS + 1.0, RADIUS * SQRT3 - 1.0), RADIUS)
    assert near_odd_row.x == pytest.approx(RADIUS)
    assert near_odd_row.y == pytest.approx(RADIUS * SQRT3)

import math

import numpy as np
import pytest

from causal_loop.errors import DegenerateGeometryError
from causal_loop.geometry import (
    boundary_point,
    control_point,
    curved_arrow,
    edge_arrow,
    line_offsets,
    node_radii,
    quadratic_bezier,
    straight_arrow,
    wrap_label,
)

TARGETS = [(400, 200), (100, 20), (-50, 260), (100, 500), (30, 170)]


def test_node_radii_floor_and_growth():
    assert node_radii('Public Concern') == (55, 35)
    rx, ry = node_radii('Affordable Housing Program')
    assert rx == pytest.approx(26 * 3.5)
    assert ry == 35


@pytest.mark.parametrize('target', TARGETS)
def test_boundary_point_lies_on_ellipse(target):
    cx, cy, rx, ry = 100, 200, 80, 35
    px, py = boundary_point((cx, cy), (rx, ry), target)

    assert ((px - cx) / rx) ** 2 + ((py - cy) / ry) ** 2 == pytest.approx(1.0)
    # parametric angle of the point equals the angle towards the target
    assert math.atan2((py - cy) / ry, (px - cx) / rx) == pytest.approx(
        math.atan2(target[1] - cy, target[0] - cx))


@pytest.mark.parametrize('target', TARGETS)
def test_boundary_point_on_circle_faces_target(target):
    px, py = boundary_point((100, 200), (40, 40), target)

    assert math.hypot(px - 100, py - 200) == pytest.approx(40)
    assert math.atan2(py - 200, px - 100) == pytest.approx(math.atan2(target[1] - 200, target[0] - 100))


def test_boundary_point_rejects_target_on_centre():
    with pytest.raises(DegenerateGeometryError):
        boundary_point((10, 10), (5, 5), (10, 10))


def test_straight_arrow_head_at_thirty_degrees():
    arrow = straight_arrow((0, 0), (100, 0))

    assert arrow.heading == pytest.approx(0)
    assert not arrow.is_curved
    left, right = arrow.head
    assert left == pytest.approx((100 - 12 * math.cos(math.pi / 6), 6))
    assert right == pytest.approx((100 - 12 * math.cos(math.pi / 6), -6))


def test_zero_length_chord_is_rejected():
    with pytest.raises(DegenerateGeometryError):
        straight_arrow((5, 5), (5, 5))
    with pytest.raises(DegenerateGeometryError):
        control_point((5, 5), (5, 5), 1)


def test_zero_curvature_matches_straight_arrow():
    start, end = (120, 40), (300, 210)
    straight = straight_arrow(start, end)

    assert edge_arrow(start, end, 0) == straight
    assert edge_arrow(start, end) == straight

    flat = curved_arrow(start, end, 0)
    assert flat.start == straight.start
    assert flat.end == straight.end
    assert flat.control == pytest.approx(((120 + 300) / 2, (40 + 210) / 2))
    assert flat.heading == pytest.approx(straight.heading)
    # every point of the degenerate curve lies on the chord
    points = quadratic_bezier(start, flat.control, end, np.linspace(0, 1, 21))
    cross = (points[:, 0] - start[0]) * (end[1] - start[1]) - (points[:, 1] - start[1]) * (end[0] - start[0])
    assert np.allclose(cross, 0)


def test_control_point_offset_perpendicular_to_chord():
    assert control_point((0, 0), (100, 0), 1) == pytest.approx((50, 30))
    assert control_point((0, 0), (100, 0), -1) == pytest.approx((50, -30))
    assert control_point((0, 0), (0, 100), 1) == pytest.approx((-30, 50))


def _side(start, end, point):
    return np.sign((end[0] - start[0]) * (point[1] - start[1]) - (end[1] - start[1]) * (point[0] - start[0]))


def test_curve_direction_flips_side_and_mirrors_curve():
    start, end = (650, 115), (205, 250)
    up = curved_arrow(start, end, 1)
    down = curved_arrow(start, end, -1)

    assert _side(start, end, up.control) == -_side(start, end, down.control)
    mid = np.add(start, end) / 2
    assert np.allclose(np.add(up.control, down.control) / 2, mid)

    # reflect the +1 curve across the chord line and compare with the -1 curve
    t = np.linspace(0, 1, 51)
    a = quadratic_bezier(start, up.control, end, t)
    b = quadratic_bezier(start, down.control, end, t)
    p0 = np.asarray(start, dtype=float)
    u = np.subtract(end, start) / np.linalg.norm(np.subtract(end, start))
    rel = a - p0
    reflected = p0 + 2 * np.outer(rel @ u, u) - rel
    assert np.allclose(reflected, b)


def test_quadratic_bezier_endpoints():
    start, control, end = (0, 0), (50, 30), (100, 0)
    assert quadratic_bezier(start, control, end, 0) == pytest.approx(start)
    assert quadratic_bezier(start, control, end, 1) == pytest.approx(end)
    assert quadratic_bezier(start, control, end, 0.5) == pytest.approx((50, 15))
    assert quadratic_bezier(start, control, end, [0, 0.5, 1]).shape == (3, 2)


def test_curved_heading_follows_incoming_tangent():
    start, end = (0, 0), (100, 0)
    arrow = curved_arrow(start, end, 1)

    # exact tangent at t=1 is 2 * (end - control)
    exact = math.atan2(end[1] - arrow.control[1], end[0] - arrow.control[0])
    assert arrow.heading == pytest.approx(exact, abs=0.01)

    # wings trail back along the curve, behind the tip
    direction = np.array([math.cos(arrow.heading), math.sin(arrow.heading)])
    for wing in arrow.head:
        assert np.dot(np.subtract(wing, end), direction) < 0
        assert math.dist(wing, end) == pytest.approx(12)


def test_wrap_label_greedy():
    assert wrap_label('Affordable Housing Program', 18) == ['Affordable Housing', 'Program']
    assert wrap_label('Public Concern', 18) == ['Public Concern']
    assert wrap_label('Homelessness Presence', 18) == ['Homelessness', 'Presence']


def test_wrap_label_long_word_gets_own_line():
    lines = wrap_label('a Supercalifragilistic word', 18)
    assert lines == ['a', 'Supercalifragilistic', 'word']
    assert all(len(line) <= 18 for line in lines if ' ' in line)


def test_line_offsets_centre_block():
    assert line_offsets(250, 1, 12) == [250]
    assert line_offsets(250, 2, 12) == [244, 256]
    assert line_offsets(100, 3, 12) == [88, 100, 112]


def test_wrap_label_keeps_line_at_exact_width():
    assert wrap_label('Temporary Shelters', 18) == ['Temporary Shelters']
    assert wrap_label('Government Capital', 18) == ['Government Capital']
    assert wrap_label('Temporary Shelters', 17) == ['Temporary', 'Shelters']

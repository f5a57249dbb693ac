"""
Arrow and label placement for causal loop diagrams.

Everything here is closed-form geometry in canvas coordinates (origin at the
top-left, y growing downwards):

 - node radii from the label length
 - the point on a node's outline that faces another point
 - straight and curved (quadratic Bezier) arrows with a V-shaped head
 - greedy word wrapping of node labels
"""

from dataclasses import dataclass
import math
from typing import List, Optional, Tuple

import numpy as np

from .config import RenderConfig
from .errors import DegenerateGeometryError

Point = Tuple[float, float]

DEFAULT_CONFIG = RenderConfig()


def node_radii(label: str, config: RenderConfig = DEFAULT_CONFIG) -> Tuple[float, float]:
    """Horizontal radius grows with the label length, with a floor."""
    rx = max(config.node_min_radius_x, len(label) * config.node_px_per_char)
    return rx, config.node_radius_y


def boundary_point(center: Point, radii: Tuple[float, float], target: Point) -> Point:
    """Point on the ellipse around `center` in the direction of `target`.

    The point is parametrised by the angle towards the target, which is close
    to (but not exactly) where the centre-to-target line crosses the ellipse.
    Circles are the rx == ry case.
    """
    cx, cy = center
    tx, ty = target
    if tx == cx and ty == cy:
        raise DegenerateGeometryError(f'Target {target} coincides with node centre {center}')
    rx, ry = radii
    theta = math.atan2(ty - cy, tx - cx)
    return cx + rx * math.cos(theta), cy + ry * math.sin(theta)


def arrowhead(tip: Point, heading: float, config: RenderConfig = DEFAULT_CONFIG) -> Tuple[Point, Point]:
    """Two wing endpoints of a V head at `tip` for a line travelling along `heading`."""
    x, y = tip
    length = config.head_length
    spread = config.head_spread
    left = (x - length * math.cos(heading - spread), y - length * math.sin(heading - spread))
    right = (x - length * math.cos(heading + spread), y - length * math.sin(heading + spread))
    return left, right


@dataclass(frozen=True)
class ArrowPath:
    """Geometry of one stroked arrow.

    `control` is None for a straight arrow. `heading` is the direction of
    travel at `end`, in radians.
    """

    start: Point
    end: Point
    heading: float
    head: Tuple[Point, Point]
    control: Optional[Point] = None

    @property
    def is_curved(self) -> bool:
        return self.control is not None


def _chord(start: Point, end: Point):
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length == 0:
        raise DegenerateGeometryError(f'Zero-length chord at {start}')
    return dx, dy, length


def straight_arrow(start: Point, end: Point, config: RenderConfig = DEFAULT_CONFIG) -> ArrowPath:
    dx, dy, _ = _chord(start, end)
    heading = math.atan2(dy, dx)
    return ArrowPath(start=start, end=end, heading=heading, head=arrowhead(end, heading, config))


def curve_direction(curve: float) -> int:
    if curve > 0:
        return 1
    if curve < 0:
        return -1
    return 0


def control_point(start: Point, end: Point, direction: int,
                  config: RenderConfig = DEFAULT_CONFIG) -> Point:
    """Chord midpoint pushed sideways by a fraction of the chord length.

    The perpendicular is (-dy, dx) / L, so `direction` picks the side of the
    chord the curve bows towards.
    """
    dx, dy, length = _chord(start, end)
    mid_x = (start[0] + end[0]) / 2
    mid_y = (start[1] + end[1]) / 2
    offset = length * config.curve_offset_ratio * direction
    return mid_x + (-dy / length) * offset, mid_y + (dx / length) * offset


def quadratic_bezier(start: Point, control: Point, end: Point, t):
    """B(t) for a scalar or an array of parameters.

    Returns an (x, y) tuple for scalar `t` and an (n, 2) array otherwise.
    """
    t_arr = np.asarray(t, dtype=float)
    p0 = np.asarray(start, dtype=float)
    p1 = np.asarray(control, dtype=float)
    p2 = np.asarray(end, dtype=float)
    u = 1.0 - t_arr
    points = (np.multiply.outer(u * u, p0)
              + np.multiply.outer(2 * u * t_arr, p1)
              + np.multiply.outer(t_arr * t_arr, p2))
    if t_arr.ndim == 0:
        return float(points[0]), float(points[1])
    return points


def end_heading(start: Point, control: Point, end: Point,
                config: RenderConfig = DEFAULT_CONFIG) -> float:
    """Direction of travel arriving at `end`, from the chord end - B(t) with t just below 1."""
    near_x, near_y = quadratic_bezier(start, control, end, config.tangent_t)
    return math.atan2(end[1] - near_y, end[0] - near_x)


def curved_arrow(start: Point, end: Point, direction: int,
                 config: RenderConfig = DEFAULT_CONFIG) -> ArrowPath:
    control = control_point(start, end, direction, config)
    heading = end_heading(start, control, end, config)
    return ArrowPath(start=start, end=end, heading=heading,
                     head=arrowhead(end, heading, config), control=control)


def edge_arrow(start: Point, end: Point, curve: float = 0.0,
               config: RenderConfig = DEFAULT_CONFIG) -> ArrowPath:
    """Straight arrow for zero curvature, curved arrow bowing to the curvature's side otherwise."""
    direction = curve_direction(curve)
    if direction == 0:
        return straight_arrow(start, end, config)
    return curved_arrow(start, end, direction, config)


def wrap_label(text: str, width: int = DEFAULT_CONFIG.wrap_width) -> List[str]:
    # greedy: a word longer than `width` still gets a line of its own
    lines = []
    current = ''
    for word in text.split(' '):
        candidate = f'{current} {word}' if current else word
        if len(candidate) > width:
            if current:
                lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def line_offsets(center_y: float, count: int, line_height: float = DEFAULT_CONFIG.line_height) -> List[float]:
    """Baselines of `count` lines vertically centred on `center_y`."""
    first = center_y - (count - 1) * line_height / 2
    return [first + i * line_height for i in range(count)]

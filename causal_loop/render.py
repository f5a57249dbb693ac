import logging
from dataclasses import dataclass
from typing import Tuple

from . import styles
from .geometry import ArrowPath, edge_arrow, line_offsets, wrap_label
from .model import CausalLoopDiagram, Edge
from .surface import MatplotlibSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawnEdge:
    edge: Edge
    arrow: ArrowPath


@dataclass(frozen=True)
class RenderResult:
    nodes: Tuple[str, ...]
    edges: Tuple[DrawnEdge, ...]


def draw_node(surface, node, config):
    rx, ry = node.radii(config)
    surface.ellipse(node.center, rx, ry, styles.node_style(node.color))

    lines = wrap_label(node.name, config.wrap_width)
    for line, y in zip(lines, line_offsets(node.y, len(lines), config.line_height)):
        surface.text(node.x, y, line, styles.NODE_LABEL_FONT)


def draw_arrow(surface, arrow: ArrowPath, style=styles.EDGE_STYLE):
    if arrow.is_curved:
        surface.quadratic_curve(arrow.start, arrow.control, arrow.end, style)
    else:
        surface.segments([(arrow.start, arrow.end)], style)
    left, right = arrow.head
    surface.segments([(arrow.end, left), (arrow.end, right)], style)


def draw_edge(surface, diagram: CausalLoopDiagram, edge: Edge) -> DrawnEdge:
    config = diagram.config
    start, end = diagram.endpoints(edge)
    arrow = edge_arrow(start, end, edge.curve, config)
    draw_arrow(surface, arrow)

    # sign sits at the midpoint of the two centres, not on the stroke
    source = diagram.node(edge.source)
    target = diagram.node(edge.target)
    mid_x = (source.x + target.x) / 2
    mid_y = (source.y + target.y) / 2
    sign_y = mid_y - config.sign_lift
    surface.circle((mid_x, sign_y), config.sign_radius, styles.SIGN_DISC_STYLE)
    surface.text(mid_x, sign_y, edge.sign.value, styles.SIGN_FONT.with_(color=edge.sign.color))

    if edge.label:
        surface.text(mid_x, mid_y + config.edge_label_offset, edge.label, styles.EDGE_LABEL_FONT)
    return DrawnEdge(edge, arrow)


def draw_annotation(surface, annotation):
    box = annotation.box
    if box is not None:
        surface.rect(box.x, box.y, box.width, box.height, box.style)
    for line in annotation.lines:
        surface.text(line.x, line.y, line.text, line.font)


def render(diagram: CausalLoopDiagram, surface) -> RenderResult:
    """Draw nodes, then edges over them, then annotations on top of everything."""
    config = diagram.config

    for node in diagram.nodes.values():
        draw_node(surface, node, config)
    logger.debug('Drew %d nodes', len(diagram.nodes))

    drawn = tuple(draw_edge(surface, diagram, edge) for edge in diagram.edges)
    logger.debug('Drew %d edges', len(drawn))

    for annotation in diagram.annotations:
        draw_annotation(surface, annotation)
    logger.debug('Drew %d annotations', len(diagram.annotations))

    return RenderResult(nodes=tuple(diagram.nodes), edges=drawn)


def render_to_file(diagram: CausalLoopDiagram, path, surface_factory=None, show=False):
    """Render onto a fresh surface, save it as an image and release the figure.

    With `show` the figure is also displayed before it is released.
    """
    factory = surface_factory or MatplotlibSurface.from_config
    with factory(diagram.config) as surface:
        result = render(diagram, surface)
        surface.save(path)
        if show:
            surface.show()
    return result

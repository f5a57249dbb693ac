"""
Node/edge tables for a causal loop diagram, validated when the diagram is built.

A diagram is a fixed description: an ordered mapping of node names to
positions and colours, an ordered list of signed edges, and text blocks drawn
on top. `CausalLoopDiagram` checks the tables once at construction, so any
bad reference or degenerate placement fails before a single call is made on
the drawing surface.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
import math
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

import networkx as nx

from .config import RenderConfig
from .errors import DanglingReferenceError, DegenerateGeometryError, DiagramError
from .geometry import DEFAULT_CONFIG, Point, boundary_point, node_radii
from .styles import FontStyle, ShapeStyle

logger = logging.getLogger(__name__)


class Sign(Enum):
    POSITIVE = '+'
    NEGATIVE = '–'

    @property
    def color(self) -> str:
        return 'green' if self is Sign.POSITIVE else 'red'

    @classmethod
    def parse(cls, value):
        if isinstance(value, Sign):
            return value
        if value == '+':
            return cls.POSITIVE
        if value in ('-', '–', '−'):
            return cls.NEGATIVE
        raise DiagramError(f'Unknown edge sign {value!r}')


def _finite(value, what):
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise DiagramError(f'{what} must be a number, got {value!r}') from None
    if not math.isfinite(number):
        raise DiagramError(f'{what} must be finite, got {value!r}')
    return number


@dataclass(frozen=True)
class Node:
    name: str
    x: float
    y: float
    color: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'x', _finite(self.x, f'Node {self.name!r} x'))
        object.__setattr__(self, 'y', _finite(self.y, f'Node {self.name!r} y'))

    @property
    def center(self) -> Point:
        return self.x, self.y

    def radii(self, config: RenderConfig = DEFAULT_CONFIG) -> Tuple[float, float]:
        return node_radii(self.name, config)


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    sign: Sign
    curve: float = 0.0
    label: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'sign', Sign.parse(self.sign))
        object.__setattr__(self, 'curve', _finite(
            self.curve, f'Edge {self.source!r} -> {self.target!r} curve'))

    @property
    def key(self) -> Tuple[str, str]:
        return self.source, self.target


@dataclass(frozen=True)
class TextLine:
    text: str
    x: float
    y: float
    font: FontStyle = FontStyle()


@dataclass(frozen=True)
class Box:
    """Rectangle (x, y, width, height) in canvas pixels."""

    x: float
    y: float
    width: float
    height: float
    style: ShapeStyle


@dataclass(frozen=True)
class Annotation:
    """A block of text drawn over the diagram: a loop label, a key box, the legend.

    When `box` is set the rectangle is painted first and the lines over it.
    """

    name: str
    lines: Tuple[TextLine, ...]
    box: Optional[Box] = None


@dataclass(frozen=True)
class CausalLoopDiagram:
    nodes: Mapping[str, Node]
    edges: Tuple[Edge, ...]
    annotations: Tuple[Annotation, ...] = ()
    title: str = ''
    config: RenderConfig = field(default=DEFAULT_CONFIG, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'nodes', MappingProxyType(dict(self.nodes)))
        object.__setattr__(self, 'edges', tuple(self.edges))
        validate(self.nodes, self.edges, self.config)
        logger.debug('Validated diagram %r: %d nodes, %d edges',
                     self.title, len(self.nodes), len(self.edges))

    def node(self, name: str) -> Node:
        return self.nodes[name]

    def endpoints(self, edge: Edge) -> Tuple[Point, Point]:
        """Boundary points where the edge leaves its source and reaches its target."""
        source = self.nodes[edge.source]
        target = self.nodes[edge.target]
        start = boundary_point(source.center, source.radii(self.config), target.center)
        end = boundary_point(target.center, target.radii(self.config), source.center)
        return start, end

    def graph(self) -> nx.DiGraph:
        """The diagram as a networkx DiGraph; attributes mirror the tables."""
        g = nx.DiGraph(title=self.title)
        for name, node in self.nodes.items():
            rx, ry = node.radii(self.config)
            g.add_node(name, pos=node.center, color=node.color, rx=rx, ry=ry)
        for order, edge in enumerate(self.edges):
            g.add_edge(edge.source, edge.target, sign=edge.sign, curve=edge.curve,
                       label=edge.label, order=order)
        return g


def validate(nodes: Mapping[str, Node], edges: Iterable[Edge], config: RenderConfig = DEFAULT_CONFIG):
    for name, node in nodes.items():
        if name != node.name:
            raise DiagramError(f'Node table key {name!r} does not match node name {node.name!r}')
        rx, ry = node.radii(config)
        if rx <= 0 or ry <= 0:
            raise DiagramError(f'Node {name!r} has non-positive radii ({rx}, {ry})')

    seen = set()
    for edge in edges:
        for ref in (edge.source, edge.target):
            if ref not in nodes:
                raise DanglingReferenceError(edge.source, edge.target, ref)
        if edge.key in seen:
            raise DiagramError(f'Duplicate edge {edge.source!r} -> {edge.target!r}')
        seen.add(edge.key)
        if edge.source == edge.target:
            raise DegenerateGeometryError(f'Self-loop on {edge.source!r} cannot be drawn')

        source = nodes[edge.source]
        target = nodes[edge.target]
        if source.center == target.center:
            raise DegenerateGeometryError(
                f'Nodes {edge.source!r} and {edge.target!r} share the centre {source.center}')
        start = boundary_point(source.center, source.radii(config), target.center)
        end = boundary_point(target.center, target.radii(config), source.center)
        if start == end:
            raise DegenerateGeometryError(
                f'Edge {edge.source!r} -> {edge.target!r} has a zero-length chord')


def build_diagram(node_rows, edge_rows, annotations=(), title='',
                  config: RenderConfig = DEFAULT_CONFIG) -> CausalLoopDiagram:
    """Build a diagram from plain rows.

    node_rows: iterable of (name, x, y, color)
    edge_rows: iterable of dicts with keys from, to, sign and optionally curve, label
    """
    nodes: Dict[str, Node] = {}
    for name, x, y, color in node_rows:
        if name in nodes:
            raise DiagramError(f'Duplicate node {name!r}')
        nodes[name] = Node(name, x, y, color)

    edges = tuple(
        Edge(row['from'], row['to'], Sign.parse(row['sign']),
             curve=0.0 if row.get('curve') is None else row['curve'], label=row.get('label'))
        for row in edge_rows
    )
    return CausalLoopDiagram(nodes=nodes, edges=edges, annotations=tuple(annotations),
                             title=title, config=config)

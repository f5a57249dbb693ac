from .config import RenderConfig
from .errors import DanglingReferenceError, DegenerateGeometryError, DiagramError
from .model import Annotation, Box, CausalLoopDiagram, Edge, Node, Sign, TextLine, build_diagram
from .render import RenderResult, render, render_to_file
from .surface import MatplotlibSurface

__all__ = [
    'Annotation',
    'Box',
    'CausalLoopDiagram',
    'DanglingReferenceError',
    'DegenerateGeometryError',
    'DiagramError',
    'Edge',
    'MatplotlibSurface',
    'Node',
    'RenderConfig',
    'RenderResult',
    'Sign',
    'TextLine',
    'build_diagram',
    'render',
    'render_to_file',
]

from dataclasses import dataclass, fields
import math

from .errors import DiagramError


@dataclass(frozen=True)
class RenderConfig:
    """Sizes and constants used when placing and drawing a diagram.

    All lengths are in canvas pixels; the canvas origin is the top-left
    corner and y grows downwards.
    """

    width: int = 800
    height: int = 660
    dpi: int = 100
    background: str = 'white'

    # nodes
    node_radius_y: float = 35.0
    node_min_radius_x: float = 55.0
    node_px_per_char: float = 3.5
    wrap_width: int = 18
    line_height: float = 12.0

    # arrows
    head_length: float = 12.0
    head_spread: float = math.pi / 6
    curve_offset_ratio: float = 0.3
    tangent_t: float = 0.99

    # edge decorations
    sign_radius: float = 10.0
    sign_lift: float = 5.0
    edge_label_offset: float = 12.0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (int, float)) and value <= 0:
                raise DiagramError(f'RenderConfig.{f.name} must be positive, got {value!r}')
        if not 0.0 < self.tangent_t < 1.0:
            raise DiagramError(f'RenderConfig.tangent_t must lie in (0, 1), got {self.tangent_t!r}')

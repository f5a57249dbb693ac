from dataclasses import dataclass, replace
from typing import Optional

# canvas text baselines -> matplotlib vertical alignment
BASELINES = {'middle': 'center', 'top': 'top', 'bottom': 'bottom', 'alphabetic': 'baseline'}
ALIGNMENTS = ('left', 'center', 'right')


@dataclass(frozen=True)
class ShapeStyle:
    """Fill and outline for one shape. None means "do not fill" / "do not stroke"."""

    fill: Optional[str] = None
    stroke: Optional[str] = None
    line_width: float = 1.0


@dataclass(frozen=True)
class FontStyle:
    size: float = 10.0  # pixels
    color: str = 'black'
    weight: str = 'normal'
    style: str = 'normal'
    align: str = 'center'
    baseline: str = 'middle'
    family: str = 'sans-serif'

    def __post_init__(self):
        if self.align not in ALIGNMENTS:
            raise ValueError(f'Unknown text alignment {self.align!r}')
        if self.baseline not in BASELINES:
            raise ValueError(f'Unknown text baseline {self.baseline!r}')

    def with_(self, **changes):
        return replace(self, **changes)


# ----- diagram palette -----
NODE_OUTLINE = '#333'
NODE_FALLBACK_FILL = 'lightblue'
EDGE_STROKE = '#555'
SIGN_BACKGROUND = 'white'
MUTED_TEXT = '#666'
DARK_TEXT = '#333'

NODE_LABEL_FONT = FontStyle(size=10, weight='bold')
SIGN_FONT = FontStyle(size=16, weight='bold')
EDGE_LABEL_FONT = FontStyle(size=9, style='italic', color=MUTED_TEXT)


def node_style(fill: Optional[str]) -> ShapeStyle:
    return ShapeStyle(fill=fill or NODE_FALLBACK_FILL, stroke=NODE_OUTLINE, line_width=2)


EDGE_STYLE = ShapeStyle(stroke=EDGE_STROKE, line_width=2)
SIGN_DISC_STYLE = ShapeStyle(fill=SIGN_BACKGROUND)

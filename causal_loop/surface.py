"""
Immediate-mode drawing surface backed by a matplotlib figure.

Coordinates are canvas pixels: origin top-left, y pointing down. Sizes given
in pixels (line widths, font sizes) are converted to points for matplotlib.
Each call gets a higher z-order than the previous one, so later calls paint
over earlier ones exactly as on a canvas.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.patches import Circle, Ellipse, PathPatch, Rectangle
from matplotlib.path import Path as MplPath
import numpy as np

from .styles import BASELINES, FontStyle, ShapeStyle

logger = logging.getLogger(__name__)


# canvas pixels per figure inch; the output dpi only changes resolution
PX_PER_INCH = 100


def _color(value):
    return value if value is not None else 'none'


class MatplotlibSurface:

    def __init__(self, width: int, height: int, dpi: int = 100, background: str = 'white'):
        self.width = width
        self.height = height
        self.dpi = dpi
        self.background = background
        self.fig = plt.figure(figsize=(width / PX_PER_INCH, height / PX_PER_INCH), dpi=dpi, facecolor=background)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()
        self.operations = []
        self._z = 0

    @classmethod
    def from_config(cls, config):
        return cls(config.width, config.height, config.dpi, config.background)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def _pt(self, px):
        return px * 72.0 / PX_PER_INCH

    def _next(self, op):
        self.operations.append(op)
        self._z += 1
        return self._z

    def _patch_kwargs(self, style: ShapeStyle):
        return dict(
            facecolor=_color(style.fill),
            edgecolor=_color(style.stroke),
            linewidth=self._pt(style.line_width) if style.stroke else 0,
        )

    # ----- shapes -----

    def ellipse(self, center, rx, ry, style: ShapeStyle):
        patch = Ellipse(center, 2 * rx, 2 * ry, zorder=self._next('ellipse'), **self._patch_kwargs(style))
        self.ax.add_patch(patch)
        return patch

    def circle(self, center, radius, style: ShapeStyle):
        patch = Circle(center, radius, zorder=self._next('circle'), **self._patch_kwargs(style))
        self.ax.add_patch(patch)
        return patch

    def rect(self, x, y, width, height, style: ShapeStyle):
        patch = Rectangle((x, y), width, height, zorder=self._next('rect'), **self._patch_kwargs(style))
        self.ax.add_patch(patch)
        return patch

    # ----- strokes -----

    def segments(self, segments, style: ShapeStyle):
        """Stroke independent line segments, each a (start, end) pair."""
        lines = LineCollection(
            [list(seg) for seg in segments],
            colors=_color(style.stroke),
            linewidths=self._pt(style.line_width),
            capstyle='butt',
            zorder=self._next('segments'),
        )
        self.ax.add_collection(lines)
        return lines

    def quadratic_curve(self, start, control, end, style: ShapeStyle):
        path = MplPath([start, control, end], [MplPath.MOVETO, MplPath.CURVE3, MplPath.CURVE3])
        patch = PathPatch(
            path,
            facecolor='none',
            edgecolor=_color(style.stroke),
            linewidth=self._pt(style.line_width),
            capstyle='butt',
            zorder=self._next('curve'),
        )
        self.ax.add_patch(patch)
        return patch

    # ----- text -----

    def text(self, x, y, value: str, font: FontStyle):
        return self.ax.text(
            x, y, value,
            fontsize=self._pt(font.size),
            color=font.color,
            fontweight=font.weight,
            fontstyle=font.style,
            family=font.family,
            ha=font.align,
            va=BASELINES[font.baseline],
            zorder=self._next('text'),
        )

    # ----- output -----

    def to_rgba(self):
        self.fig.canvas.draw()
        return np.asarray(self.fig.canvas.buffer_rgba()).copy()

    def save(self, path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(path, dpi=self.dpi, facecolor=self.background)
        logger.info('Saved diagram image to %s', path)
        return path

    def show(self):
        """Open the figure in the active matplotlib backend; blocks until it is closed."""
        plt.show()

    def close(self):
        plt.close(self.fig)

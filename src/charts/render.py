"""Draw a :class:`~charts.scene.Scene` onto a matplotlib figure.

The figure is sized so that one scene unit is one pixel and the axes limits
are offset by the margins, which keeps plot-area coordinates from the scene
usable as data coordinates for hit testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
from matplotlib import patches
from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from charts.scene import Circle, Gradient, Line, Mark, Rect, Scene, Text
from config.config import CHART_DPI, CHART_WIDTH_PX
from utils.logging import get_logger

logger = get_logger(__name__)

_ANCHOR = {"start": "left", "middle": "center", "end": "right"}
_BASELINE = {"auto": "baseline", "middle": "center", "hanging": "top"}
_TOOLTIP_ZORDER = 10


class ChartContainer:
    """Rendering surface: a figure plus the width it is measured at."""

    def __init__(self, width_px: float = CHART_WIDTH_PX, dpi: int = CHART_DPI) -> None:
        self.dpi = dpi
        self._width = float(width_px)
        self.figure = Figure(figsize=(max(self._width, 1.0) / dpi, 1.0), dpi=dpi)

    @property
    def measured_width(self) -> float:
        return self._width

    def resize(self, width_px: float) -> None:
        self._width = float(width_px)

    def px_to_pt(self, px: float) -> float:
        return px * 72.0 / self.dpi


@dataclass
class RenderedScene:
    scene: Scene
    axes: Axes
    artists: Dict[str, Artist]
    container: ChartContainer


def _draw_mark(ax: Axes, mark: Mark, container: ChartContainer) -> Artist:
    pt = container.px_to_pt
    if isinstance(mark, Rect):
        common = dict(
            facecolor=mark.fill,
            edgecolor=mark.stroke or "none",
            linewidth=pt(mark.stroke_width),
            alpha=mark.opacity,
        )
        if mark.rx > 0 and min(mark.width, mark.height) >= 2 * mark.rx:
            artist = patches.FancyBboxPatch(
                (mark.x, mark.y), mark.width, mark.height,
                boxstyle=f"round,pad=0,rounding_size={mark.rx}", **common,
            )
        else:
            artist = patches.Rectangle((mark.x, mark.y), mark.width, mark.height, **common)
        ax.add_patch(artist)
    elif isinstance(mark, Circle):
        artist = patches.Circle(
            (mark.cx, mark.cy), mark.r,
            facecolor=mark.fill,
            edgecolor=mark.stroke or "none",
            linewidth=pt(mark.stroke_width),
            alpha=mark.opacity,
        )
        ax.add_patch(artist)
    elif isinstance(mark, Text):
        artist = ax.text(
            mark.x, mark.y, mark.text,
            color=mark.fill,
            fontsize=pt(mark.font_size),
            ha=_ANCHOR[mark.anchor],
            va=_BASELINE[mark.baseline],
            fontweight=mark.weight,
            rotation=mark.rotation,
            rotation_mode="anchor",
        )
    elif isinstance(mark, Line):
        artist = Line2D(
            [mark.x1, mark.x2], [mark.y1, mark.y2],
            color=mark.stroke, linewidth=pt(mark.stroke_width), alpha=mark.opacity,
        )
        ax.add_line(artist)
    elif isinstance(mark, Gradient):
        cmap = LinearSegmentedColormap.from_list(mark.key, list(mark.stops))
        ramp = np.linspace(1.0, 0.0, 256).reshape(-1, 1)  # row 0 is the top of the legend
        artist = ax.imshow(
            ramp, cmap=cmap, vmin=0.0, vmax=1.0, aspect="auto", interpolation="bilinear",
            extent=(mark.x, mark.x + mark.width, mark.y + mark.height, mark.y),
        )
        if mark.stroke:
            ax.add_patch(
                patches.Rectangle(
                    (mark.x, mark.y), mark.width, mark.height, facecolor="none",
                    edgecolor=mark.stroke, linewidth=pt(mark.stroke_width),
                )
            )
    else:
        raise TypeError(f"unsupported mark type: {type(mark).__name__}")
    artist.set_gid(mark.key)
    return artist


def draw_scene(container: ChartContainer, scene: Scene) -> RenderedScene:
    """Clear ``container`` and draw every mark of ``scene`` into it."""
    fig = container.figure
    fig.clear()

    vp = scene.viewport
    fig.set_size_inches(vp.width / container.dpi, vp.height / container.dpi)
    if scene.background:
        fig.patch.set_facecolor(scene.background)

    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_axis_off()
    artists = {mark.key: _draw_mark(ax, mark, container) for mark in scene.marks}

    m = vp.margin
    ax.set_xlim(-m.left, vp.width - m.left)
    ax.set_ylim(vp.height - m.top, -m.top)  # y grows downwards
    return RenderedScene(scene=scene, axes=ax, artists=artists, container=container)


class HoverController:
    """Highlight the mark under the pointer and show its tooltip."""

    def __init__(self, rendered: RenderedScene) -> None:
        self.rendered = rendered
        self.active: Optional[Rect | Circle] = None
        self.tooltip: Optional[Artist] = None
        self._cid: Optional[int] = None

    def connect(self) -> None:
        canvas = self.rendered.axes.figure.canvas
        self._cid = canvas.mpl_connect("motion_notify_event", self.on_motion)

    def disconnect(self) -> None:
        if self._cid is not None:
            self.rendered.axes.figure.canvas.mpl_disconnect(self._cid)
            self._cid = None

    def on_motion(self, event) -> None:
        if event.inaxes is not self.rendered.axes or event.xdata is None:
            mark = None
        else:
            mark = self.rendered.scene.mark_at(event.xdata, event.ydata)
        current = self.active.key if self.active is not None else None
        target = mark.key if mark is not None else None
        if current == target:
            return
        self.leave()
        if mark is not None:
            self.enter(mark)
        self.rendered.axes.figure.canvas.draw_idle()

    def enter(self, mark: Rect | Circle) -> None:
        artist = self.rendered.artists[mark.key]
        style = mark.hover
        pt = self.rendered.container.px_to_pt
        if style.fill is not None:
            artist.set_facecolor(style.fill)
        if style.stroke is not None:
            artist.set_edgecolor(style.stroke)
        if style.stroke_width is not None:
            artist.set_linewidth(pt(style.stroke_width))
        if style.radius is not None and isinstance(artist, patches.Circle):
            artist.set_radius(style.radius)
        if style.opacity is not None:
            artist.set_alpha(style.opacity)

        tip = mark.tooltip
        if tip is not None:
            bbox = None
            if tip.background:
                bbox = dict(boxstyle="round,pad=0.4", facecolor=tip.background,
                            edgecolor=tip.border or "none", linewidth=pt(1))
            self.tooltip = self.rendered.axes.text(
                tip.x, tip.y, "\n".join(tip.lines),
                color=tip.color, fontsize=pt(tip.font_size), fontweight="bold",
                ha="center", va="bottom", bbox=bbox, zorder=_TOOLTIP_ZORDER,
            )
            self.tooltip.set_gid("tooltip")
        self.active = mark

    def leave(self) -> None:
        mark = self.active
        if mark is None:
            return
        artist = self.rendered.artists[mark.key]
        pt = self.rendered.container.px_to_pt
        artist.set_facecolor(mark.fill)
        artist.set_edgecolor(mark.stroke or "none")
        artist.set_linewidth(pt(mark.stroke_width))
        artist.set_alpha(mark.opacity)
        if isinstance(mark, Circle):
            artist.set_radius(mark.r)
        if self.tooltip is not None:
            self.tooltip.remove()
            self.tooltip = None
        self.active = None

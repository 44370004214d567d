"""Declarative scene description produced by the chart builders.

A :class:`Scene` is plain data: marks in plot-area coordinates (origin at the
top-left corner inside the margins, y growing downwards) plus the viewport
they were laid out for. Nothing here touches a rendering surface, so geometry
can be asserted on directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple, Union

from charts.scales import BandScale, LinearScale


@dataclass(frozen=True)
class Margin:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class Viewport:
    """Total pixel size of the drawing and the margins around the plot area."""

    width: float
    height: float
    margin: Margin

    @property
    def inner_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def inner_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom


@dataclass(frozen=True)
class HoverStyle:
    """Overrides applied to a mark while the pointer is over it."""

    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[float] = None
    radius: Optional[float] = None
    opacity: Optional[float] = None


@dataclass(frozen=True)
class Tooltip:
    x: float
    y: float
    lines: Tuple[str, ...]
    color: str
    font_size: float = 12
    background: Optional[str] = None
    border: Optional[str] = None


@dataclass(frozen=True)
class Rect:
    key: str
    x: float
    y: float
    width: float
    height: float
    fill: str
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    rx: float = 0.0
    kind: str = "rect"
    hover: Optional[HoverStyle] = None
    tooltip: Optional[Tooltip] = None
    datum: Any = None

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


@dataclass(frozen=True)
class Circle:
    key: str
    cx: float
    cy: float
    r: float
    fill: str
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    kind: str = "point"
    hover: Optional[HoverStyle] = None
    tooltip: Optional[Tooltip] = None
    datum: Any = None

    def contains(self, px: float, py: float) -> bool:
        return (px - self.cx) ** 2 + (py - self.cy) ** 2 <= self.r ** 2


@dataclass(frozen=True)
class Text:
    key: str
    x: float
    y: float
    text: str
    fill: str
    font_size: float = 12
    anchor: str = "middle"       # start | middle | end
    baseline: str = "auto"       # auto | middle | hanging
    weight: str = "normal"
    rotation: float = 0.0        # degrees, counter-clockwise
    kind: str = "label"


@dataclass(frozen=True)
class Line:
    key: str
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1.0
    opacity: float = 1.0
    kind: str = "tick"


@dataclass(frozen=True)
class Gradient:
    """Vertical colour ramp; ``stops`` run bottom (offset 0) to top (offset 1)."""

    key: str
    x: float
    y: float
    width: float
    height: float
    stops: Tuple[Tuple[float, str], ...]
    stroke: Optional[str] = None
    stroke_width: float = 0.5
    kind: str = "legend"


Mark = Union[Rect, Circle, Text, Line, Gradient]


@dataclass(frozen=True)
class Scene:
    viewport: Viewport
    marks: Tuple[Mark, ...]
    background: Optional[str] = None

    def marks_of(self, kind: str) -> Tuple[Mark, ...]:
        return tuple(m for m in self.marks if m.kind == kind)

    def interactive_marks(self) -> Tuple[Union[Rect, Circle], ...]:
        return tuple(m for m in self.marks if getattr(m, "hover", None) is not None)

    def mark_at(self, px: float, py: float) -> Optional[Union[Rect, Circle]]:
        """Topmost interactive mark under ``(px, py)``."""
        for mark in reversed(self.interactive_marks()):
            if mark.contains(px, py):
                return mark
        return None


@dataclass
class SceneBuilder:
    """Accumulates marks with sequential keys for one scene."""

    viewport: Viewport
    marks: list = field(default_factory=list)

    def add(self, mark: Mark) -> Mark:
        self.marks.append(mark)
        return mark

    def extend(self, marks: Sequence[Mark]) -> None:
        self.marks.extend(marks)

    def build(self, **kwargs) -> Scene:
        return Scene(viewport=self.viewport, marks=tuple(self.marks), **kwargs)


# ---- Axes ----

def _ticks_for(scale: Union[BandScale, LinearScale], count: int) -> Iterator[Tuple[float, Any]]:
    if isinstance(scale, BandScale):
        for value in scale.domain:
            yield scale.center(value), value
    else:
        for value in scale.ticks(count):
            yield scale(value), value


def axis_bottom(
    scale: Union[BandScale, LinearScale],
    y: float,
    color: str,
    *,
    prefix: str = "x-axis",
    count: int = 10,
    fmt: Callable[[Any], str] = str,
    font_size: float = 12,
    tick_size: float = 6,
) -> list:
    """Domain line, tick lines and tick labels under the plot area at ``y``."""
    r0, r1 = scale.range
    marks: list = [Line(f"{prefix}-domain", r0, y, r1, y, color, kind="axis")]
    for i, (x, value) in enumerate(_ticks_for(scale, count)):
        marks.append(Line(f"{prefix}-tick-{i}", x, y, x, y + tick_size, color))
        marks.append(
            Text(
                f"{prefix}-label-{i}", x, y + tick_size + 3, fmt(value), color,
                font_size=font_size, anchor="middle", baseline="hanging", kind="tick-label",
            )
        )
    return marks


def axis_left(
    scale: Union[BandScale, LinearScale],
    x: float,
    color: str,
    *,
    prefix: str = "y-axis",
    count: int = 10,
    fmt: Callable[[Any], str] = str,
    font_size: float = 12,
    tick_size: float = 6,
) -> list:
    """Domain line, tick lines and tick labels left of the plot area at ``x``."""
    r0, r1 = scale.range
    marks: list = [Line(f"{prefix}-domain", x, r0, x, r1, color, kind="axis")]
    for i, (y, value) in enumerate(_ticks_for(scale, count)):
        marks.append(Line(f"{prefix}-tick-{i}", x - tick_size, y, x, y, color))
        marks.append(
            Text(
                f"{prefix}-label-{i}", x - tick_size - 3, y, fmt(value), color,
                font_size=font_size, anchor="end", baseline="middle", kind="tick-label",
            )
        )
    return marks


def grid_lines(
    scale: LinearScale,
    length: float,
    color: str,
    *,
    vertical: bool,
    count: int = 10,
    opacity: float = 0.1,
    prefix: str = "grid",
) -> list:
    """Faint lines across the plot area at each tick of ``scale``."""
    marks = []
    for i, value in enumerate(scale.ticks(count)):
        p = scale(value)
        if vertical:
            marks.append(Line(f"{prefix}-x-{i}", p, 0, p, length, color, opacity=opacity, kind="grid"))
        else:
            marks.append(Line(f"{prefix}-y-{i}", 0, p, length, p, color, opacity=opacity, kind="grid"))
    return marks

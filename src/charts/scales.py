"""Scales mapping data domains onto pixel ranges.

Band scales follow the d3-scale conventions the chart layout was designed
against: band padding applies to both inner and outer gaps with centred
alignment. Linear ticks come from matplotlib's ``MaxNLocator`` restricted to
1/2/5/10 steps and clipped to the domain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from matplotlib import colormaps
from matplotlib.colors import to_hex
from matplotlib.ticker import MaxNLocator


@dataclass(frozen=True)
class BandScale:
    """Map discrete categories onto evenly spaced bands of ``range``."""

    domain: Tuple[str, ...]
    range: Tuple[float, float]
    padding: float = 0.0
    _positions: Dict[str, float] = field(init=False, repr=False, compare=False)
    _step: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        domain = tuple(dict.fromkeys(self.domain))  # drop duplicates, keep order
        object.__setattr__(self, "domain", domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        n = len(domain)
        inner = min(1.0, self.padding)
        outer = self.padding
        step = (stop - start) / max(1.0, n - inner + outer * 2)
        start += (stop - start - step * (n - inner)) * 0.5
        values = [start + step * i for i in range(n)]
        if reverse:
            values.reverse()
        object.__setattr__(self, "_step", step)
        object.__setattr__(self, "_positions", dict(zip(domain, values)))

    def __call__(self, value: str) -> float:
        return self._positions[value]

    @property
    def step(self) -> float:
        return self._step

    @property
    def bandwidth(self) -> float:
        return self._step * (1 - min(1.0, self.padding))

    def center(self, value: str) -> float:
        return self(value) + self.bandwidth / 2

    def ticks(self) -> List[str]:
        return list(self.domain)


def nice_ticks(start: float, stop: float, count: int = 10) -> List[float]:
    """Ticks on 1/2/5/10 multiples of a power of ten inside ``[start, stop]``."""
    if count <= 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    locator = MaxNLocator(nbins=count, steps=[1, 2, 5, 10])
    eps = (hi - lo) * 1e-9  # locator output carries float noise at the ends
    ticks = [
        round(float(t), 12) + 0.0  # no "-0.0" labels
        for t in locator.tick_values(lo, hi)
        if lo - eps <= t <= hi + eps
    ]
    return ticks[::-1] if reverse else ticks


@dataclass(frozen=True)
class LinearScale:
    """Affine map from a numeric ``domain`` onto a pixel ``range``."""

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 10) -> List[float]:
        return nice_ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class SequentialColorScale:
    """Map a numeric domain onto a matplotlib colormap; values outside are clamped."""

    domain: Tuple[float, float]
    cmap: str = "Reds"

    def __call__(self, value: float) -> str:
        d0, d1 = self.domain
        t = 0.5 if d1 == d0 else (value - d0) / (d1 - d0)
        t = min(1.0, max(0.0, t))
        return to_hex(colormaps[self.cmap](t))


def index_colors(n: int, cmap: str = "rainbow") -> List[str]:
    """One colour per index ``i`` sampled at ``i / n`` along ``cmap``."""
    if n <= 0:
        return []
    ramp = colormaps[cmap]
    return [to_hex(ramp(i / n)) for i in range(n)]


def padded_extent(
    values: Iterable[float],
    fraction: float = 0.1,
    fallback: float = 10.0,
) -> Tuple[float, float]:
    """``[min, max]`` of ``values`` widened by ``fraction`` of the range on each side.

    A zero range is widened by ``fallback`` instead.
    """
    values = [float(v) for v in values]
    if not values:
        raise ValueError("padded_extent() of an empty sequence")
    lo, hi = min(values), max(values)
    pad = (hi - lo) * fraction or fallback
    return lo - pad, hi + pad


def gradient_stops(domain: Sequence[float], scale: SequentialColorScale, n: int) -> List[Tuple[float, str]]:
    """``n + 1`` evenly spaced ``(offset, colour)`` stops across ``domain``."""
    d0, d1 = domain
    return [(i / n, scale(d0 + (d1 - d0) * i / n)) for i in range(n + 1)]

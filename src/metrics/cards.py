"""Summary cards composed from derived statistics."""

from dataclasses import dataclass
from typing import List, Optional

from metrics.statistics import EnergyMetrics, StatisticsSummary
from utils.datetime import format_hour


@dataclass(frozen=True)
class MetricCard:
    title: str
    main_value: str
    complement_value: Optional[str] = None
    color: str = "#3b82f6"


# Card accents (blue, green, yellow, red)
MEAN_COLOR = "#3b82f6"
MAX_COLOR = "#4ade80"
MIN_COLOR = "#facc15"
POWER_COLOR = "#f87171"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_power(value: float) -> str:
    return f"{value:.1f} kW"


def efficiency_cards(summary: StatisticsSummary) -> List[MetricCard]:
    """Cards for the average-per-hour view: mean, peak and lowest efficiency."""
    return [
        MetricCard("Rendimento médio", format_percent(summary.mean), None, MEAN_COLOR),
        MetricCard(
            "Rendimento máximo",
            format_percent(summary.max_value),
            format_hour(summary.max_record["hora"]),
            MAX_COLOR,
        ),
        MetricCard(
            "Rendimento mínimo",
            format_percent(summary.min_value),
            format_hour(summary.min_record["hora"]),
            MIN_COLOR,
        ),
    ]


def energy_cards(metrics: EnergyMetrics) -> List[MetricCard]:
    """The four cards of the "Outras Métricas" section."""
    efficiency = metrics.efficiency
    peak = metrics.max_power_record
    return [
        MetricCard("Rendimento médio total", format_percent(efficiency.mean), None, MEAN_COLOR),
        MetricCard(
            "Rendimento máximo",
            format_percent(efficiency.max_value),
            format_hour(efficiency.max_record["hora"]),
            MAX_COLOR,
        ),
        MetricCard(
            "Rendimento mínimo",
            format_percent(efficiency.min_value),
            format_hour(efficiency.min_record["hora"]),
            MIN_COLOR,
        ),
        MetricCard(
            "Potência Máxima",
            format_power(float(peak["potencia_kw"])),
            format_hour(peak["hora"]),
            POWER_COLOR,
        ),
    ]

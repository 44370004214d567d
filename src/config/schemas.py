"""Schema definitions for the JSON documents consumed from the statistics API."""

from typing import Any, Dict, List, TypedDict


class EfficiencyRecord(TypedDict):
    hora: str  # hour of day, e.g. "07"
    percentual_rendimento: float


class EnergyRecord(TypedDict):
    hora: str
    percentual_rendimento: float
    potencia_kw: float


class EfficiencyPayload(TypedDict, total=False):
    dados_brutos: List[EfficiencyRecord]
    estatisticas: Dict[str, Any]  # server-side summary, not consumed


class EnergyDatasetPayload(TypedDict):
    dados_completos: List[EnergyRecord]


CorrelationMatrix = Dict[str, Dict[str, float]]


class CorrelationPayload(TypedDict):
    matriz_correlacao: CorrelationMatrix


class ScatterRecord(TypedDict):
    colesterol: float
    pressao: float


ScatterPayload = List[ScatterRecord]


class HeatCell(TypedDict):
    row: str
    col: str
    value: float

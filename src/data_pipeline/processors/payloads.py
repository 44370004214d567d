"""Extract and validate the records each endpoint contributes.

Each extractor returns an immutable view of the consumed part of a payload.
Missing keys or fields raise ``KeyError``; wrong container types raise
``TypeError``; non-numeric readings raise ``ValueError``. The fetch layer
maps all three onto a failed state.
"""

from typing import Any, Dict, Mapping, Sequence, Tuple

from config.schemas import (
    CorrelationMatrix,
    CorrelationPayload,
    EfficiencyPayload,
    EfficiencyRecord,
    EnergyDatasetPayload,
    EnergyRecord,
    ScatterPayload,
    ScatterRecord,
)


def _records(items: Any, fields: Sequence[str], numeric: Sequence[str]) -> Tuple[Dict[str, Any], ...]:
    if not isinstance(items, (list, tuple)):
        raise TypeError(f"expected a list of records, got {type(items).__name__}")
    records = []
    for item in items:
        if not isinstance(item, Mapping):
            raise TypeError(f"expected a record object, got {type(item).__name__}")
        record = {name: item[name] for name in fields}
        for name in numeric:
            record[name] = float(record[name])
        records.append(record)
    return tuple(records)


def efficiency_records(payload: EfficiencyPayload) -> Tuple[EfficiencyRecord, ...]:
    """``dados_brutos`` of the efficiency-detail endpoint."""
    return _records(payload["dados_brutos"], ("hora", "percentual_rendimento"), ("percentual_rendimento",))


def energy_records(payload: EnergyDatasetPayload) -> Tuple[EnergyRecord, ...]:
    """``dados_completos`` of the full energy dataset endpoint."""
    fields = ("hora", "percentual_rendimento", "potencia_kw")
    return _records(payload["dados_completos"], fields, fields[1:])


def scatter_points(payload: ScatterPayload) -> Tuple[ScatterRecord, ...]:
    """Cholesterol/pressure pairs; the endpoint returns a bare list."""
    fields = ("colesterol", "pressao")
    return _records(payload, fields, fields)


def correlation_matrix(payload: CorrelationPayload) -> CorrelationMatrix:
    """``matriz_correlacao`` with coefficients coerced to float.

    Every strict-lower-triangle entry must be present; the rest is passed through.
    """
    matrix = payload["matriz_correlacao"]
    if not isinstance(matrix, Mapping):
        raise TypeError(f"expected a matrix object, got {type(matrix).__name__}")
    variables = list(matrix)
    result: CorrelationMatrix = {}
    for row_index, row in enumerate(variables):
        values = matrix[row]
        if not isinstance(values, Mapping):
            raise TypeError(f"row '{row}' is not an object")
        result[row] = {col: float(value) for col, value in values.items()}
        for col in variables[:row_index]:
            if col not in result[row]:
                raise KeyError(f"missing correlation {row} × {col}")
    return result

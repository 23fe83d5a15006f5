"""Tablas (DataFrames) para mostrar o exportar los resultados de un pozo."""

import pandas as pd

from bst_lugeon.analysis.permeability import permeability_status
from bst_lugeon.analysis.recalculation import stage_span
from bst_lugeon.core.models import TestStage, Well

STAGE_COLUMNS = [
    "stage",
    "start_depth",
    "end_depth",
    "length_m",
    "center_depth_m",
    "pressure_type",
    "max_pressure",
    "reversible",
    "n_steps",
    "representative_lugeon",
    "flow_type",
    "permeability_status",
]
MEASUREMENT_COLUMNS = [
    "step",
    "applied_pressure",
    "first_5min",
    "second_5min",
    "total_loss",
    "effective_pressure",
    "lugeon",
]
LITHOLOGY_COLUMNS = [
    "start_depth",
    "end_depth",
    "formation",
    "description",
    "rqd",
    "weathering",
    "lugeon",
    "permeability_status",
]


def stages_frame(well: Well) -> pd.DataFrame:
    """Resumen por etapa: intervalo, configuración, Lugeon representativo y régimen.

    Example:
        >>> stages_frame(Well(id="w")).empty
        True
    """
    rows = []
    for stage in well.stages:
        length, center = stage_span(stage)
        rows.append(
            {
                "stage": stage.id,
                "start_depth": stage.start_depth,
                "end_depth": stage.end_depth,
                "length_m": length,
                "center_depth_m": center,
                "pressure_type": stage.pressure_type,
                "max_pressure": stage.max_pressure,
                "reversible": bool(stage.reversible),
                "n_steps": len(stage.measurements),
                "representative_lugeon": stage.representative_lugeon,
                "flow_type": stage.flow_type,
                "permeability_status": permeability_status(stage.representative_lugeon),
            }
        )
    return pd.DataFrame(rows, columns=STAGE_COLUMNS)


def measurements_frame(stage: TestStage) -> pd.DataFrame:
    """Escalones de una etapa en orden de aplicación."""
    rows = [
        {
            "step": m.step_number,
            "applied_pressure": m.applied_pressure,
            "first_5min": m.first_5min,
            "second_5min": m.second_5min,
            "total_loss": m.total_loss,
            "effective_pressure": m.effective_pressure,
            "lugeon": m.lugeon,
        }
        for m in stage.measurements
    ]
    return pd.DataFrame(rows, columns=MEASUREMENT_COLUMNS)


def lithology_frame(well: Well) -> pd.DataFrame:
    """Log litológico con Lugeon y clase de permeabilidad."""
    rows = [
        {
            "start_depth": s.start_depth,
            "end_depth": s.end_depth,
            "formation": s.formation,
            "description": s.description,
            "rqd": s.rqd,
            "weathering": s.weathering,
            "lugeon": s.lugeon,
            "permeability_status": s.permeability_status or "-",
        }
        for s in well.lithology
    ]
    return pd.DataFrame(rows, columns=LITHOLOGY_COLUMNS)

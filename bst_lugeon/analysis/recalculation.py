"""Recalculo completo de las etapas BST de un pozo."""

import logging
from dataclasses import replace
from typing import List, Tuple

from bst_lugeon.analysis.flow import classify_flow_type, middle_index
from bst_lugeon.analysis.lugeon import calculate_lugeon
from bst_lugeon.core.constants import (
    DEFAULT_DIAMETER_MM,
    DEFAULT_GROUNDWATER_M,
    DEFAULT_MANOMETER_HEIGHT_M,
)
from bst_lugeon.core.models import Measurement, TestStage, Well, WellGeometry
from bst_lugeon.data.preprocessing import parse_number, round_decimals

logger = logging.getLogger(__name__)


def well_geometry(well: Well) -> WellGeometry:
    """Parsea la geometría cruda del pozo (vacío usa el valor por defecto)."""
    return WellGeometry(
        diameter_mm=parse_number(well.diameter, missing=DEFAULT_DIAMETER_MM),
        manometer_height_m=parse_number(well.manometer_height, missing=DEFAULT_MANOMETER_HEIGHT_M),
        groundwater_m=parse_number(well.groundwater_depth, missing=DEFAULT_GROUNDWATER_M),
    )


def stage_span(stage: TestStage) -> Tuple[float, float]:
    """Devuelve (longitud, profundidad central) de una etapa.

    Example:
        >>> stage_span(TestStage(id="s", start_depth="10", end_depth="15"))
        (5.0, 12.5)
    """
    start = parse_number(stage.start_depth)
    end = parse_number(stage.end_depth)
    length = abs(end - start)
    return length, start + length / 2


def recompute_stage(stage: TestStage, geometry: WellGeometry) -> TestStage:
    """Reconstruye los campos derivados de una etapa desde sus datos crudos.

    Recalcula Pe y Lugeon de cada escalón, el Lugeon representativo (escalón
    central) y el régimen de flujo, salvo que éste haya sido fijado a mano.
    La lista de escalones se reemplaza completa al final, nunca a medias.

    Args:
        stage: Etapa a recalcular (se modifica en el lugar)
        geometry: Geometría del pozo dueño de la etapa

    Returns:
        La misma etapa, ya recalculada
    """
    length, center_depth = stage_span(stage)

    measurements: List[Measurement] = []
    for m in stage.measurements:
        result = calculate_lugeon(
            total_loss=parse_number(m.total_loss),
            applied_pressure=parse_number(m.applied_pressure),
            stage_length=length,
            groundwater_depth=geometry.groundwater_m,
            manometer_height=geometry.manometer_height_m,
            center_depth=center_depth,
            diameter_mm=geometry.diameter_mm,
        )
        measurements.append(
            replace(
                m,
                lugeon=round_decimals(result.lugeon),
                effective_pressure=round_decimals(result.effective_pressure),
            )
        )

    stage.measurements = measurements
    stage.representative_lugeon = measurements[middle_index(len(measurements))].lugeon if measurements else 0.0
    if not stage.flow_type_manual:
        stage.flow_type = classify_flow_type(measurements)
    return stage


def recompute_well(well: Well) -> Well:
    """Recalcula todas las etapas del pozo con la geometría actual.

    Es un recalculo total e idempotente; debe invocarse después de cualquier
    cambio en la geometría, en las profundidades de una etapa o en una lectura.

    Example:
        >>> w = Well(id="w1")
        >>> recompute_well(w) is w
        True
    """
    geometry = well_geometry(well)
    for stage in well.stages:
        recompute_stage(stage, geometry)
    logger.debug(
        "Pozo %s recalculado: %d etapas (phi=%.1f mm, Hm=%.2f m, YASS=%.2f m)",
        well.id,
        len(well.stages),
        geometry.diameter_mm,
        geometry.manometer_height_m,
        geometry.groundwater_m,
    )
    return well

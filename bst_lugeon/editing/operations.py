"""Ediciones sobre un pozo; cada una termina con el recalculo completo del pozo."""

import logging
from typing import Any, Optional

import pandas as pd

from bst_lugeon.analysis.lithology import set_segment_lugeon
from bst_lugeon.analysis.pressure import build_measurements
from bst_lugeon.analysis.recalculation import recompute_well
from bst_lugeon.core.config import Settings
from bst_lugeon.core.constants import FLOW_TYPES, PACKER_DOUBLE, PACKER_SINGLE
from bst_lugeon.core.errors import MeasurementNotFoundError, SegmentNotFoundError, StageNotFoundError
from bst_lugeon.core.ids import DEFAULT_ID_PROVIDER, IdProvider
from bst_lugeon.core.models import LithologySegment, Measurement, TestStage, Well
from bst_lugeon.data.preprocessing import parse_bool, parse_number, round_decimals

logger = logging.getLogger(__name__)

GEOMETRY_FIELDS = ("diameter", "manometer_height", "groundwater_depth")
PRESSURE_CONFIG_FIELDS = ("pressure_type", "max_pressure", "reversible")
STAGE_FIELDS = PRESSURE_CONFIG_FIELDS + (
    "start_depth",
    "end_depth",
    "packer_type",
    "packer_depth",
    "flow_type",
    "flow_type_manual",
)
READING_FIELDS = ("first_5min", "second_5min", "total_loss")


def get_stage(well: Well, stage_id: str) -> TestStage:
    for stage in well.stages:
        if stage.id == stage_id:
            return stage
    raise StageNotFoundError(stage_id)


def get_measurement(stage: TestStage, measurement_id: str) -> Measurement:
    for m in stage.measurements:
        if m.id == measurement_id:
            return m
    raise MeasurementNotFoundError(measurement_id)


def get_segment(well: Well, segment_id: str) -> LithologySegment:
    for segment in well.lithology:
        if segment.id == segment_id:
            return segment
    raise SegmentNotFoundError(segment_id)


def update_well_geometry(well: Well, **changes: Any) -> Well:
    """Modifica diámetro, altura de manómetro y/o nivel freático del pozo.

    Como la geometría es común a todas las etapas, se recalculan todas.

    Raises:
        ValueError: Si se indica un campo que no es de geometría
    """
    unknown = set(changes) - set(GEOMETRY_FIELDS)
    if unknown:
        raise ValueError(f"Campos de geometría desconocidos: {sorted(unknown)}")
    for name, value in changes.items():
        setattr(well, name, value)
    logger.debug("Geometría del pozo %s actualizada: %s", well.id, changes)
    return recompute_well(well)


def add_stage(
    well: Well,
    interval: Optional[float] = None,
    settings: Optional[Settings] = None,
    id_provider: Optional[IdProvider] = None,
) -> TestStage:
    """Agrega una etapa a continuación de la más profunda existente.

    La etapa nueva se inserta al inicio de la lista, con la configuración de
    presión por defecto y su secuencia de escalones ya generada.

    Args:
        well: Pozo dueño de la etapa
        interval: Longitud de la etapa (m); por defecto la de `settings`
        settings: Configuración con los valores por defecto
        id_provider: Generador de identificadores

    Returns:
        La etapa creada (ya recalculada)
    """
    cfg = settings or Settings()
    ids = id_provider or DEFAULT_ID_PROVIDER
    deepest = max((parse_number(s.end_depth) for s in well.stages), default=0.0)
    length = parse_number(interval, missing=cfg.stage_interval_m) or cfg.stage_interval_m

    stage = TestStage(
        id=ids.new_id(),
        start_depth=deepest,
        end_depth=round_decimals(deepest + length),
        pressure_type=cfg.default_pattern,
        max_pressure=cfg.default_max_pressure,
        reversible=cfg.default_reversible,
        measurements=build_measurements(
            cfg.default_max_pressure, cfg.default_pattern, cfg.default_reversible, id_provider=ids
        ),
    )
    well.stages.insert(0, stage)
    logger.debug("Etapa %s agregada al pozo %s (%.2f-%.2f m)", stage.id, well.id, deepest, deepest + length)
    recompute_well(well)
    return stage


def delete_stage(well: Well, stage_id: str) -> Well:
    """Elimina una etapa del pozo."""
    stage = get_stage(well, stage_id)
    well.stages.remove(stage)
    logger.debug("Etapa %s eliminada del pozo %s", stage_id, well.id)
    return recompute_well(well)


def update_stage_config(
    well: Well,
    stage_id: str,
    id_provider: Optional[IdProvider] = None,
    **changes: Any,
) -> TestStage:
    """Modifica la configuración de una etapa.

    Cambiar el patrón, la presión máxima o la reversibilidad regenera todos
    los escalones: las lecturas anteriores se pierden.
    Fijar `flow_type` lo marca como manual (salvo que se indique
    `flow_type_manual` explícitamente) para que el recalculo no lo pise.

    Raises:
        StageNotFoundError: Si la etapa no existe
        ValueError: Campo desconocido, régimen o tipo de packer inválido
    """
    unknown = set(changes) - set(STAGE_FIELDS)
    if unknown:
        raise ValueError(f"Campos de etapa desconocidos: {sorted(unknown)}")
    if "flow_type" in changes and changes["flow_type"] not in FLOW_TYPES:
        raise ValueError(f"Régimen de flujo inválido: {changes['flow_type']!r}")
    if changes.get("packer_type") not in (None, PACKER_SINGLE, PACKER_DOUBLE):
        raise ValueError(f"Tipo de packer inválido: {changes['packer_type']!r}")
    if "flow_type" in changes:
        changes.setdefault("flow_type_manual", True)
    for flag in ("reversible", "flow_type_manual"):
        if flag in changes:
            changes[flag] = parse_bool(changes[flag])

    stage = get_stage(well, stage_id)
    for name, value in changes.items():
        setattr(stage, name, value)

    if any(name in changes for name in PRESSURE_CONFIG_FIELDS):
        stage.measurements = build_measurements(
            stage.max_pressure, stage.pressure_type, stage.reversible, id_provider=id_provider
        )
        logger.debug("Etapa %s: %d escalones regenerados", stage.id, len(stage.measurements))

    recompute_well(well)
    return stage


def update_measurement(well: Well, stage_id: str, measurement_id: str, **changes: Any) -> Measurement:
    """Actualiza las lecturas de pérdida de agua de un escalón.

    Raises:
        StageNotFoundError: Si la etapa no existe
        MeasurementNotFoundError: Si el escalón no existe
        ValueError: Si se intenta modificar un campo que no es una lectura
    """
    readonly = set(changes) - set(READING_FIELDS)
    if readonly:
        raise ValueError(f"Campos no editables: {sorted(readonly)}")

    stage = get_stage(well, stage_id)
    m = get_measurement(stage, measurement_id)
    for name, value in changes.items():
        setattr(m, name, value)

    recompute_well(well)
    return get_measurement(stage, measurement_id)


def update_segment_lugeon(well: Well, segment_id: str, lugeon: Any) -> LithologySegment:
    """Edición manual del Lugeon de un tramo; re-deriva su permeabilidad."""
    return set_segment_lugeon(get_segment(well, segment_id), lugeon)


def apply_readings(well: Well, readings: pd.DataFrame) -> Well:
    """Vuelca un lote de lecturas (ver `load_readings_csv`) sobre el pozo.

    Las filas cuya etapa o escalón no existe se ignoran con una advertencia.
    Se recalcula el pozo una sola vez al final.
    """
    stages = {stage.id: stage for stage in well.stages}
    applied = 0
    for row in readings.to_dict(orient="records"):
        stage = stages.get(str(row["stage"]))
        by_step = {m.step_number: m for m in stage.measurements} if stage else {}
        m = by_step.get(int(row["step"]))
        if m is None:
            logger.warning("Lectura sin destino: etapa=%s escalón=%s", row["stage"], row["step"])
            continue
        for name in READING_FIELDS:
            if name in row and row[name] != "":
                setattr(m, name, row[name])
        applied += 1
    logger.info("Pozo %s: %d lecturas aplicadas de %d", well.id, applied, len(readings))
    return recompute_well(well)

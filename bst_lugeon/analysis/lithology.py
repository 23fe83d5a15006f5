"""Sincronización de valores Lugeon de las etapas hacia el log litológico."""

import logging
from typing import Any, List, Optional

from bst_lugeon.analysis.permeability import permeability_status
from bst_lugeon.core.models import LithologySegment, TestStage, Well
from bst_lugeon.data.preprocessing import parse_number, round_decimals, try_parse_number

logger = logging.getLogger(__name__)


def stage_overlaps(segment: LithologySegment, stage: TestStage) -> bool:
    """Indica si un tramo se solapa con el intervalo de una etapa.

    El tramo coincide si su inicio cae en [inicio, fin) de la etapa o su fin
    cae en (inicio, fin].
    """
    seg_start = parse_number(segment.start_depth)
    seg_end = parse_number(segment.end_depth)
    stage_start = parse_number(stage.start_depth)
    stage_end = parse_number(stage.end_depth)
    return (stage_start <= seg_start < stage_end) or (stage_start < seg_end <= stage_end)


def find_matching_stage(segment: LithologySegment, stages: List[TestStage]) -> Optional[TestStage]:
    """Primera etapa (en orden de lista) que se solapa con el tramo."""
    for stage in stages:
        if stage_overlaps(segment, stage):
            return stage
    return None


def set_segment_lugeon(segment: LithologySegment, lugeon: Any) -> LithologySegment:
    """Asigna un Lugeon al tramo y deriva su clase de permeabilidad."""
    lu = try_parse_number(lugeon)
    segment.lugeon = None if lu is None else round_decimals(lu)
    segment.permeability_status = permeability_status(lu)
    return segment


def sync_lithology(well: Well) -> Well:
    """Proyecta el Lugeon representativo de cada etapa sobre el log litológico.

    Los tramos sin etapa coincidente quedan sin cambios.

    Args:
        well: Pozo ya recalculado

    Returns:
        El mismo pozo con los tramos actualizados
    """
    matched = 0
    for segment in well.lithology:
        stage = find_matching_stage(segment, well.stages)
        if stage is None:
            continue
        set_segment_lugeon(segment, stage.representative_lugeon)
        matched += 1
    logger.info("Sincronización litológica pozo %s: %d/%d tramos actualizados", well.id, matched, len(well.lithology))
    return well

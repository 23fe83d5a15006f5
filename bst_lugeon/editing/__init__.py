"""Módulo editing: Ediciones de pozos, etapas y lecturas con recalculo."""

from bst_lugeon.editing.operations import (
    add_stage,
    apply_readings,
    delete_stage,
    update_measurement,
    update_segment_lugeon,
    update_stage_config,
    update_well_geometry,
)

__all__ = [
    "add_stage",
    "apply_readings",
    "delete_stage",
    "update_measurement",
    "update_segment_lugeon",
    "update_stage_config",
    "update_well_geometry",
]

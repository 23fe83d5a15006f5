"""Módulo analysis: Presiones, Lugeon, régimen de flujo, permeabilidad y litología."""

from bst_lugeon.analysis.flow import classify_flow_type, classify_lugeon_curve
from bst_lugeon.analysis.lithology import set_segment_lugeon, sync_lithology
from bst_lugeon.analysis.lugeon import LugeonResult, calculate_lugeon, friction_coefficient
from bst_lugeon.analysis.permeability import permeability_status
from bst_lugeon.analysis.pressure import build_measurements, generate_pressure_steps
from bst_lugeon.analysis.recalculation import recompute_stage, recompute_well, well_geometry
from bst_lugeon.analysis.spt import spt_total_n, update_spt

__all__ = [
    "LugeonResult",
    "build_measurements",
    "calculate_lugeon",
    "classify_flow_type",
    "classify_lugeon_curve",
    "friction_coefficient",
    "generate_pressure_steps",
    "permeability_status",
    "recompute_stage",
    "recompute_well",
    "set_segment_lugeon",
    "spt_total_n",
    "sync_lithology",
    "update_spt",
    "well_geometry",
]

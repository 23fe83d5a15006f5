import logging
from typing import Any, Dict, Optional, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from bst_lugeon.analysis import (
    calculate_lugeon,
    generate_pressure_steps,
    permeability_status,
    recompute_well,
    sync_lithology,
    well_geometry,
)
from bst_lugeon.analysis.recalculation import stage_span
from bst_lugeon.core.constants import DEFAULT_PATTERN
from bst_lugeon.core.models import TestStage, Well
from bst_lugeon.data import parse_number, round_decimals, well_from_dict, well_to_dict

# Basic logging configuration for the API module
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="BST Lugeon - API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

RawField = Union[str, float, None]


class PressureStepsRequest(BaseModel):
    max_pressure: RawField = Field(6, description="Presión máxima [bar]")
    pressure_type: str = Field(DEFAULT_PATTERN, description="TYPE_A, TYPE_B, TYPE_C o TYPE_D")
    reversible: bool = Field(True, description="Incluir rama de descarga")


class LugeonRequest(BaseModel):
    total_loss: RawField = Field(0, description="Pérdida total [L/10 min]")
    applied_pressure: RawField = Field(..., description="Presión de manómetro [bar]")
    start_depth: RawField = Field(..., description="Inicio de la etapa [m]")
    end_depth: RawField = Field(..., description="Fin de la etapa [m]")
    groundwater_depth: RawField = Field(0, description="Nivel freático YASS [m]")
    manometer_height: RawField = Field(1.0, description="Altura del manómetro [m]")
    diameter: RawField = Field(76, description="Diámetro del pozo [mm]")


def _load_well(payload: Dict[str, Any]):
    try:
        return well_from_dict(payload)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=422, detail=f"Registro de pozo inválido: {e}")


@app.get("/")
def index():
    return {"ok": True, "message": "API BST Lugeon"}


@app.post("/api/pressure-steps")
def pressure_steps(req: PressureStepsRequest):
    """Secuencia de presiones de una etapa."""
    steps = generate_pressure_steps(req.max_pressure, req.pressure_type, req.reversible)
    return {"steps": steps, "n_steps": len(steps)}


@app.post("/api/lugeon")
def lugeon(req: LugeonRequest):
    """Calcula Pe y Lugeon de una lectura aislada."""
    length, center = stage_span(TestStage(id="-", start_depth=req.start_depth, end_depth=req.end_depth))
    geometry = well_geometry(
        Well(
            id="-",
            diameter=req.diameter,
            manometer_height=req.manometer_height,
            groundwater_depth=req.groundwater_depth,
        )
    )
    result = calculate_lugeon(
        total_loss=parse_number(req.total_loss),
        applied_pressure=parse_number(req.applied_pressure),
        stage_length=length,
        groundwater_depth=geometry.groundwater_m,
        manometer_height=geometry.manometer_height_m,
        center_depth=center,
        diameter_mm=geometry.diameter_mm,
    )
    lu = round_decimals(result.lugeon)
    return {
        "lugeon": lu,
        "effective_pressure": round_decimals(result.effective_pressure),
        "permeability_status": permeability_status(lu),
    }


@app.get("/api/permeability")
def permeability(lugeon: Optional[str] = Query(None)):
    """Clase de permeabilidad de un valor Lugeon."""
    return {"lugeon": lugeon, "status": permeability_status(lugeon)}


@app.post("/api/wells/recompute")
def recompute(payload: Dict[str, Any]):
    """Recalcula todas las etapas de un pozo."""
    well = recompute_well(_load_well(payload))
    logger.info("Pozo %s recalculado vía API (%d etapas)", well.id, len(well.stages))
    return well_to_dict(well)


@app.post("/api/wells/sync-lithology")
def sync(payload: Dict[str, Any]):
    """Recalcula el pozo y proyecta los Lugeon sobre su log litológico."""
    well = sync_lithology(recompute_well(_load_well(payload)))
    return well_to_dict(well)

"""Modelos de datos para el ensayo de presión de agua (BST)."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from bst_lugeon.core.constants import (
    DEFAULT_DIAMETER_MM,
    DEFAULT_GROUNDWATER_M,
    DEFAULT_MANOMETER_HEIGHT_M,
    DEFAULT_MAX_PRESSURE,
    DEFAULT_PATTERN,
    FLOW_LAMINAR,
)

# Valor crudo tal como llega desde la captura en terreno (texto o número)
RawValue = Union[str, float, int, None]


@dataclass
class Measurement:
    """Un escalón de presión dentro de una etapa.

    Attributes:
        id: Identificador del escalón
        step_number: Número de escalón (1-based, orden de la secuencia)
        applied_pressure: Presión de manómetro aplicada (bar), de solo lectura
        first_5min: Pérdida en los primeros 5 minutos (L)
        second_5min: Pérdida en los segundos 5 minutos (L)
        total_loss: Pérdida total de agua (L/10 min)
        effective_pressure: Presión efectiva derivada (bar)
        lugeon: Valor Lugeon derivado (Lu)
    """

    id: str
    step_number: int
    applied_pressure: float  # bar
    first_5min: RawValue = "0"
    second_5min: RawValue = "0"
    total_loss: RawValue = "0"  # L/10 min
    effective_pressure: float = 0.0  # bar (derivado)
    lugeon: float = 0.0  # Lu (derivado)


@dataclass
class TestStage:
    """Intervalo de ensayo aislado por packer.

    Attributes:
        id: Identificador de la etapa
        start_depth: Profundidad inicial (m)
        end_depth: Profundidad final (m)
        pressure_type: Patrón de presión (TYPE_A..TYPE_D)
        max_pressure: Presión máxima (bar)
        reversible: Si la secuencia incluye descarga
        measurements: Escalones en orden de aplicación
        packer_type: SINGLE o DOUBLE (opcional)
        packer_depth: Profundidad del packer (m, opcional)
        representative_lugeon: Lugeon del escalón central (derivado)
        flow_type: Régimen de flujo (derivado salvo flow_type_manual)
        flow_type_manual: Si el régimen fue fijado a mano
    """

    __test__ = False

    id: str
    start_depth: RawValue
    end_depth: RawValue
    pressure_type: str = DEFAULT_PATTERN
    max_pressure: RawValue = DEFAULT_MAX_PRESSURE
    reversible: bool = True
    measurements: List[Measurement] = field(default_factory=list)
    packer_type: Optional[str] = None
    packer_depth: RawValue = None
    representative_lugeon: float = 0.0
    flow_type: str = FLOW_LAMINAR
    flow_type_manual: bool = False


@dataclass
class LithologySegment:
    """Tramo del log litológico."""

    id: str
    start_depth: RawValue
    end_depth: RawValue
    formation: str = ""
    description: str = ""
    rqd: RawValue = ""
    weathering: str = ""
    lugeon: Optional[float] = None
    permeability_status: Optional[str] = None
    ud_marker: bool = False


@dataclass
class SPTMeasurement:
    """Ensayo de penetración estándar (golpes por tramo de 15 cm)."""

    id: str
    depth: RawValue
    n1: RawValue = "0"  # 0-15 cm
    n2: RawValue = "0"  # 15-30 cm
    n3: RawValue = "0"  # 30-45 cm
    total_n: int = 0
    description: str = ""


@dataclass
class Well:
    """Sondaje con sus etapas BST y su log litológico.

    La geometría (diámetro, altura de manómetro, nivel freático) es común a
    todas las etapas del pozo.
    """

    id: str
    well_no: str = ""
    diameter: RawValue = DEFAULT_DIAMETER_MM  # mm
    manometer_height: RawValue = DEFAULT_MANOMETER_HEIGHT_M  # m
    groundwater_depth: RawValue = DEFAULT_GROUNDWATER_M  # m (YASS)
    stages: List[TestStage] = field(default_factory=list)
    lithology: List[LithologySegment] = field(default_factory=list)
    spt: List[SPTMeasurement] = field(default_factory=list)


@dataclass
class WellGeometry:
    """Geometría numérica del pozo ya parseada.

    Attributes:
        diameter_mm: Diámetro del pozo (mm)
        manometer_height_m: Altura del manómetro sobre la superficie (m)
        groundwater_m: Profundidad del nivel freático (m)
    """

    diameter_mm: float
    manometer_height_m: float
    groundwater_m: float

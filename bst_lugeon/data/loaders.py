"""Carga y guardado de pozos (JSON) y de lecturas de campo (CSV)."""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar, Union

import pandas as pd

from bst_lugeon.core.constants import (
    FLOW_DILATION,
    FLOW_TURBULENT,
    FLOW_VOID_FILLING,
    FLOW_WASHOUT,
    PATTERN_TYPE_A,
    PATTERN_TYPE_B,
    PATTERN_TYPE_C,
    PATTERN_TYPE_D,
    PERMEABILITY_HIGH,
    PERMEABILITY_LOW,
    PERMEABILITY_MEDIUM,
    PERMEABILITY_VERY_HIGH,
    PERMEABILITY_VERY_LOW,
)
from bst_lugeon.core.models import LithologySegment, Measurement, SPTMeasurement, TestStage, Well
from bst_lugeon.data.preprocessing import parse_bool

T = TypeVar("T")

# Claves del formato de registro de la aplicación de terreno (camelCase)
KEY_ALIASES: Dict[str, str] = {
    "wellNo": "well_no",
    "wellDiameter": "diameter",
    "manometerHeight": "manometer_height",
    "groundwaterStatus": "groundwater_depth",
    "bstStages": "stages",
    "lithologySegments": "lithology",
    "sptMeasurements": "spt",
    "startDepth": "start_depth",
    "endDepth": "end_depth",
    "pressureType": "pressure_type",
    "maxPressure": "max_pressure",
    "isReversible": "reversible",
    "packerType": "packer_type",
    "packerDepth": "packer_depth",
    "representativeLugeon": "representative_lugeon",
    "flowType": "flow_type",
    "isFlowTypeManual": "flow_type_manual",
    "stepNumber": "step_number",
    "appliedPressure": "applied_pressure",
    "first5Min": "first_5min",
    "second5Min": "second_5min",
    "totalLoss": "total_loss",
    "calculatedLugeon": "lugeon",
    "effectivePressure": "effective_pressure",
    "permeabilityStatus": "permeability_status",
    "udMarker": "ud_marker",
    "totalN": "total_n",
}

# Valores enumerados de la aplicación de terreno (turco) por campo
VALUE_ALIASES: Dict[str, Dict[str, str]] = {
    "pressure_type": {
        "TIP_A": PATTERN_TYPE_A,
        "TIP_B": PATTERN_TYPE_B,
        "TIP_C": PATTERN_TYPE_C,
        "TIP_D": PATTERN_TYPE_D,
    },
    "flow_type": {
        "Türbülan": FLOW_TURBULENT,
        "Dilatasyon": FLOW_DILATION,
        "Yıkanma": FLOW_WASHOUT,
        "Boşluk Dolumu": FLOW_VOID_FILLING,
    },
    "permeability_status": {
        "Çok Az Geçirimli / Sızdırmaz": PERMEABILITY_VERY_LOW,
        "Az Geçirimli": PERMEABILITY_LOW,
        "Orta Geçirimli": PERMEABILITY_MEDIUM,
        "Çok Geçirimli": PERMEABILITY_HIGH,
        "Aşırı Geçirimli / Boşluklu": PERMEABILITY_VERY_HIGH,
    },
}

READINGS_REQUIRED_COLUMNS = ("stage", "step", "total_loss")


def _normalize_value(key: str, value: Any) -> Any:
    aliases = VALUE_ALIASES.get(key)
    if aliases and isinstance(value, str):
        return aliases.get(value.strip(), value)
    return value


def _normalize_keys(raw: Dict[str, Any]) -> Dict[str, Any]:
    normalized = {}
    for k, v in raw.items():
        key = KEY_ALIASES.get(k, k)
        normalized[key] = _normalize_value(key, v)
    return normalized


def _build(cls: Type[T], raw: Dict[str, Any]) -> T:
    names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    data = {k: v for k, v in _normalize_keys(raw).items() if k in names}
    if "id" not in data:
        raise ValueError(f"{cls.__name__} sin 'id': {raw!r}")
    return cls(**data)


def _float_or_zero(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _stage_from_dict(raw: Dict[str, Any]) -> TestStage:
    raw = _normalize_keys(raw)
    measurements = [_build(Measurement, m) for m in raw.get("measurements") or []]
    for m in measurements:
        m.applied_pressure = _float_or_zero(m.applied_pressure)
        m.lugeon = _float_or_zero(m.lugeon)
        m.effective_pressure = _float_or_zero(m.effective_pressure)
    stage = _build(TestStage, {k: v for k, v in raw.items() if k != "measurements"})
    stage.measurements = measurements
    stage.representative_lugeon = _float_or_zero(stage.representative_lugeon)
    stage.reversible = parse_bool(stage.reversible, default=True)
    stage.flow_type_manual = parse_bool(stage.flow_type_manual)
    return stage


def well_from_dict(raw: Dict[str, Any]) -> Well:
    """Construye un pozo desde su registro anidado (pozo → etapas → escalones).

    Acepta claves en snake_case o en el camelCase de la aplicación de terreno.

    Args:
        raw: Diccionario con el registro del pozo

    Returns:
        Well con etapas, tramos litológicos y ensayos SPT

    Raises:
        ValueError: Si el registro no es un objeto o falta algún 'id'

    Example:
        >>> w = well_from_dict({"id": "w1", "wellDiameter": "101", "bstStages": []})
        >>> w.diameter
        '101'
    """
    if not isinstance(raw, dict):
        raise ValueError("El registro del pozo debe ser un objeto JSON")
    raw = _normalize_keys(raw)
    well = _build(Well, {k: v for k, v in raw.items() if k not in ("stages", "lithology", "spt")})
    well.stages = [_stage_from_dict(s) for s in raw.get("stages") or []]
    well.lithology = [_build(LithologySegment, s) for s in raw.get("lithology") or []]
    for seg in well.lithology:
        if seg.lugeon is not None:
            seg.lugeon = _float_or_zero(seg.lugeon)
    well.spt = [_build(SPTMeasurement, s) for s in raw.get("spt") or []]
    return well


def well_to_dict(well: Well) -> Dict[str, Any]:
    """Serializa el pozo a su registro anidado en snake_case."""
    return asdict(well)


def load_well_json(path: Union[str, Path]) -> Well:
    """Carga un pozo desde un archivo JSON.

    Raises:
        ValueError: Si el archivo no contiene JSON válido
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido en {path}: {e}") from e
    return well_from_dict(raw)


def save_well_json(well: Well, path: Union[str, Path]) -> None:
    """Guarda el pozo en JSON (UTF-8, indentado)."""
    Path(path).write_text(json.dumps(well_to_dict(well), ensure_ascii=False, indent=2), encoding="utf-8")


def load_readings_csv(csv_path: Union[str, Path]) -> pd.DataFrame:
    """Carga lecturas de pérdida de agua desde un CSV (",", ";"; con o sin BOM).

    Columnas requeridas: stage (id de etapa), step (número de escalón) y
    total_loss; opcionales first_5min y second_5min. Los valores se conservan
    como texto crudo; el motor los parsea al recalcular.

    Args:
        csv_path: Ruta al archivo CSV

    Returns:
        DataFrame con una fila por lectura, ordenado por etapa y escalón

    Raises:
        ValueError: Si falta alguna columna requerida

    Example:
        >>> df = load_readings_csv("lecturas.csv")  # doctest: +SKIP
        >>> list(df.columns)[:3]  # doctest: +SKIP
        ['stage', 'step', 'total_loss']
    """
    with open(csv_path, encoding="utf-8-sig") as fh:
        header = fh.readline()
    sep = ";" if ";" in header else ","
    df = pd.read_csv(csv_path, sep=sep, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    df = df.rename(columns={c: str(c).strip().lower() for c in df.columns})
    missing: List[str] = [c for c in READINGS_REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Faltan columnas en {csv_path}: {missing}")
    df["stage"] = df["stage"].str.strip()
    df["step"] = pd.to_numeric(df["step"], errors="coerce")
    df = df.dropna(subset=["step"])
    df = df[df["stage"] != ""].copy()
    df["step"] = df["step"].astype(int)
    return df.sort_values(["stage", "step"]).reset_index(drop=True)

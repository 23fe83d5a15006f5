"""Cálculo de presión efectiva y valor Lugeon de un escalón."""

from dataclasses import dataclass

import numpy as np

from bst_lugeon.core.constants import (
    FRICTION_COEF_LARGE,
    FRICTION_COEF_MEDIUM,
    FRICTION_COEF_SMALL,
    FRICTION_LARGE_DIAMETER_MM,
    FRICTION_MEDIUM_DIAMETER_MM,
    FRICTION_REFERENCE_DEPTH_M,
    METERS_WATER_PER_BAR,
    READING_MINUTES,
)


@dataclass
class LugeonResult:
    """Resultado de un escalón.

    Attributes:
        lugeon: Valor Lugeon (Lu)
        effective_pressure: Presión efectiva en la sección ensayada (bar)
    """

    lugeon: float
    effective_pressure: float


def friction_coefficient(diameter_mm: float) -> float:
    """Coeficiente de pérdida por fricción según el diámetro del pozo.

    Example:
        >>> friction_coefficient(101)
        0.0001
        >>> friction_coefficient(76)
        0.0004
        >>> friction_coefficient(56)
        0.0012
    """
    if diameter_mm >= FRICTION_LARGE_DIAMETER_MM:
        return FRICTION_COEF_LARGE
    if diameter_mm >= FRICTION_MEDIUM_DIAMETER_MM:
        return FRICTION_COEF_MEDIUM
    return FRICTION_COEF_SMALL


def calculate_lugeon(
    total_loss: float,
    applied_pressure: float,
    stage_length: float,
    groundwater_depth: float,
    manometer_height: float,
    center_depth: float,
    diameter_mm: float,
) -> LugeonResult:
    """Calcula la presión efectiva y el Lugeon de un escalón de presión.

    Pe = P_man + P_estática - P_fricción, con la carga estática medida desde
    el manómetro hasta el nivel freático y la fricción proporcional a q².

    Args:
        total_loss: Pérdida total de agua (L/10 min)
        applied_pressure: Presión de manómetro (bar)
        stage_length: Longitud de la etapa (m)
        groundwater_depth: Profundidad del nivel freático (m)
        manometer_height: Altura del manómetro sobre la superficie (m)
        center_depth: Profundidad del centro de la etapa (m)
        diameter_mm: Diámetro del pozo (mm)

    Returns:
        LugeonResult sin redondear

    Example:
        >>> r = calculate_lugeon(0, 6, 5, 0, 1, 2.5, 76)
        >>> r.lugeon
        0.0
        >>> calculate_lugeon(20, 6, 0, 0, 1, 2.5, 76)
        LugeonResult(lugeon=0.0, effective_pressure=0.0)
    """
    if not np.isfinite(stage_length) or stage_length <= 0:
        return LugeonResult(lugeon=0.0, effective_pressure=0.0)

    q_min = total_loss / READING_MINUTES
    h_static = max(0.0, center_depth + manometer_height - groundwater_depth)
    p_static = h_static / METERS_WATER_PER_BAR
    p_friction = (q_min * q_min) * friction_coefficient(diameter_mm) * (center_depth / FRICTION_REFERENCE_DEPTH_M)
    p_eff = applied_pressure + p_static - p_friction

    if not np.isfinite(p_eff) or p_eff <= 0:
        return LugeonResult(lugeon=0.0, effective_pressure=float(p_eff) if p_eff > 0 else 0.0)

    lugeon = (10.0 * q_min) / (p_eff * stage_length)
    if not np.isfinite(lugeon):
        lugeon = 0.0
    return LugeonResult(lugeon=float(lugeon), effective_pressure=float(p_eff))

"""Generación de la secuencia de presiones de una etapa BST."""

import logging
from typing import Any, List, Optional

from bst_lugeon.core.constants import (
    PATTERN_TYPE_A,
    PATTERN_TYPE_B,
    PATTERN_TYPE_C,
    TYPE_C_SEQUENCE,
)
from bst_lugeon.core.ids import DEFAULT_ID_PROVIDER, IdProvider
from bst_lugeon.core.models import Measurement
from bst_lugeon.data.preprocessing import parse_number, round_decimals, round_half_up

logger = logging.getLogger(__name__)


def _base_steps(max_p: float, pattern: str) -> List[float]:
    steps: List[float] = []
    if pattern == PATTERN_TYPE_A:
        i = 1
        while i <= max_p:
            steps.append(float(i))
            i += 1
    elif pattern == PATTERN_TYPE_B:
        i = 2
        while i <= max_p:
            steps.append(float(i))
            i += 2
        if not steps or steps[-1] != max_p:
            steps.append(max_p)
    elif pattern == PATTERN_TYPE_C:
        steps = [float(s) for s in TYPE_C_SEQUENCE if s <= max_p]
        if not steps or steps[-1] != max_p:
            steps.append(max_p)
    else:
        steps = [
            float(max(1, round_half_up(max_p / 3))),
            float(max(1, round_half_up(2 * max_p / 3))),
            max_p,
        ]
    return steps


def generate_pressure_steps(max_pressure: Any, pattern: str, reversible: bool) -> List[float]:
    """Genera la secuencia ordenada de presiones aplicadas (bar).

    TYPE_A sube de 1 en 1 hasta la máxima; TYPE_B de 2 en 2 cerrando en la
    máxima; TYPE_C filtra la serie de referencia 3, 6, 10, 15... y cierra en la
    máxima; cualquier otro patrón usa tres escalones (1/3, 2/3 y la máxima).
    Con `reversible` la rama ascendente se repite en descenso sin repetir el pico.

    Args:
        max_pressure: Presión máxima (bar); no numérica o <= 0 se toma como 1
        pattern: Tipo de patrón (TYPE_A, TYPE_B, TYPE_C, otro)
        reversible: Si se agrega la rama de descarga

    Returns:
        Lista de presiones en orden de aplicación

    Example:
        >>> generate_pressure_steps(6, "TYPE_B", True)
        [2.0, 4.0, 6.0, 4.0, 2.0]
        >>> generate_pressure_steps(10, "TYPE_C", False)
        [3.0, 6.0, 10.0]
    """
    max_p = parse_number(max_pressure)
    if max_p <= 0:
        max_p = 1.0

    ascending = sorted(set(_base_steps(max_p, pattern)))
    if reversible:
        return ascending + list(reversed(ascending))[1:]
    return ascending


def build_measurements(
    max_pressure: Any,
    pattern: str,
    reversible: bool,
    id_provider: Optional[IdProvider] = None,
) -> List[Measurement]:
    """Crea escalones nuevos (lecturas en cero) para una configuración de etapa.

    Es un reinicio, no una actualización: las lecturas anteriores se descartan.

    Example:
        >>> ms = build_measurements(6, "TYPE_B", False)
        >>> [(m.step_number, m.applied_pressure) for m in ms]
        [(1, 2.0), (2, 4.0), (3, 6.0)]
    """
    ids = id_provider or DEFAULT_ID_PROVIDER
    steps = generate_pressure_steps(max_pressure, pattern, reversible)
    logger.debug("Secuencia %s (max=%s, reversible=%s): %s", pattern, max_pressure, reversible, steps)
    return [
        Measurement(
            id=ids.new_id(),
            step_number=idx + 1,
            applied_pressure=round_decimals(p),
            first_5min="0",
            second_5min="0",
            total_loss="0",
            effective_pressure=0.0,
            lugeon=0.0,
        )
        for idx, p in enumerate(steps)
    ]

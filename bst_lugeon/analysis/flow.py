"""Clasificación del régimen de flujo a partir de la curva Lugeon."""

from typing import Iterable, List

from bst_lugeon.core.constants import (
    DILATION_RATIO,
    FLOW_DILATION,
    FLOW_LAMINAR,
    FLOW_TURBULENT,
    FLOW_WASHOUT,
    MIN_POSITIVE_READINGS,
    TURBULENT_RATIO,
    WASHOUT_RATIO,
)
from bst_lugeon.core.models import Measurement
from bst_lugeon.data.preprocessing import try_parse_number


def middle_index(n: int) -> int:
    """Índice del escalón central (piso de n/2)."""
    return n // 2


def classify_lugeon_curve(lugeons: Iterable[float]) -> str:
    """Clasifica el régimen de flujo de una serie de valores Lugeon.

    Solo se consideran los valores positivos, en orden de escalón. Reglas
    (la primera que se cumple gana):

    - menos de 3 valores positivos: Laminar
    - último > 1.5 x primero: Washout
    - máximo > 1.2 x primero y último < máximo: Dilation
    - central < 0.8 x primero: Turbulent
    - en otro caso: Laminar

    Example:
        >>> classify_lugeon_curve([2.0, 3.0, 4.0])
        'Washout'
        >>> classify_lugeon_curve([2.0, 3.0, 2.5])
        'Dilation'
        >>> classify_lugeon_curve([2.0, 1.0, 2.0])
        'Turbulent'
        >>> classify_lugeon_curve([0.0, 5.0, 0.0])
        'Laminar'
    """
    lus: List[float] = []
    for value in lugeons:
        lu = try_parse_number(value)
        if lu is not None and lu > 0:
            lus.append(lu)

    if len(lus) < MIN_POSITIVE_READINGS:
        return FLOW_LAMINAR

    first = lus[0]
    peak = max(lus)
    last = lus[-1]
    if last > first * WASHOUT_RATIO:
        return FLOW_WASHOUT
    if peak > first * DILATION_RATIO and last < peak:
        return FLOW_DILATION
    if lus[middle_index(len(lus))] < first * TURBULENT_RATIO:
        return FLOW_TURBULENT
    return FLOW_LAMINAR


def classify_flow_type(measurements: List[Measurement]) -> str:
    """Clasifica el régimen de flujo de una etapa según sus escalones."""
    return classify_lugeon_curve(m.lugeon for m in measurements)

"""Clase cualitativa de permeabilidad según el valor Lugeon."""

from typing import Any

from bst_lugeon.core.constants import (
    PERMEABILITY_HIGH,
    PERMEABILITY_LOW,
    PERMEABILITY_MEDIUM,
    PERMEABILITY_UNKNOWN,
    PERMEABILITY_VERY_HIGH,
    PERMEABILITY_VERY_LOW,
)
from bst_lugeon.data.preprocessing import try_parse_number


def permeability_status(lugeon: Any) -> str:
    """Mapea un valor Lugeon a su clase de permeabilidad.

    Args:
        lugeon: Valor Lugeon (número o texto)

    Returns:
        Etiqueta de la clase, o "-" si el valor no es numérico

    Example:
        >>> permeability_status(0.5)
        'Very low permeability / watertight'
        >>> permeability_status("50")
        'High permeability'
        >>> permeability_status("abc")
        '-'
    """
    lu = try_parse_number(lugeon)
    if lu is None:
        return PERMEABILITY_UNKNOWN
    if lu < 1:
        return PERMEABILITY_VERY_LOW
    if lu < 5:
        return PERMEABILITY_LOW
    if lu < 25:
        return PERMEABILITY_MEDIUM
    if lu < 100:
        return PERMEABILITY_HIGH
    return PERMEABILITY_VERY_HIGH

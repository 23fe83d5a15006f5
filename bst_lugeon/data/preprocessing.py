"""Preprocesamiento de valores crudos capturados en terreno."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

import numpy as np

from bst_lugeon.core.constants import DECIMALS, TRUE_WORDS


def parse_number(value: Any, missing: float = 0.0) -> float:
    """Convierte un valor crudo (texto o número) a float.

    Los valores ausentes (None o texto vacío) devuelven `missing`; los valores
    no numéricos o no finitos devuelven 0.0.

    Args:
        value: Valor crudo
        missing: Valor a usar cuando el campo está vacío

    Returns:
        Valor numérico finito

    Example:
        >>> parse_number("12.5")
        12.5
        >>> parse_number("abc")
        0.0
        >>> parse_number("", missing=76.0)
        76.0
    """
    if value is None or isinstance(value, bool):
        return missing if value is None else 0.0
    if isinstance(value, str):
        text = value.strip().replace(",", ".")
        if text == "":
            return missing
        value = text
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not np.isfinite(number):
        return 0.0
    return number


def try_parse_number(value: Any) -> Optional[float]:
    """Como `parse_number`, pero devuelve None si el valor no es numérico.

    Example:
        >>> try_parse_number("3,2")
        3.2
        >>> try_parse_number("-") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Redondeo al entero más cercano con 0.5 hacia arriba (round() es bancario).

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(4 / 3)
        1
    """
    return int(math.floor(value + 0.5))


def round_decimals(value: float, decimals: int = DECIMALS) -> float:
    """Redondeo a `decimals` decimales con los empates hacia arriba.

    Trabaja sobre el valor binario exacto del float: sólo los
    empates exactos (p. ej. 4.125) se resuelven distinto que con round().

    Example:
        >>> round_decimals(4.125)
        4.13
        >>> round(4.125, 2)
        4.12
        >>> round_decimals(2.675)  # binario 2.67499...
        2.67
    """
    if not np.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_bool(value: Any, default: bool = False) -> bool:
    """Interpreta una bandera cruda (bool, número o texto).

    Example:
        >>> parse_bool("false")
        False
        >>> parse_bool("Sí")
        True
        >>> parse_bool(None, default=True)
        True
    """
    if value is None:
        return default
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        return default if text == "" else text in TRUE_WORDS
    return bool(value)

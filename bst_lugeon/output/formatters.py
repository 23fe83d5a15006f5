"""Funciones auxiliares de formateo para salida."""

from typing import Any


def format_number(value: Any, decimals: int = 2) -> str:
    """Formatea un número con N decimales, retorna '-' si no es válido.

    Args:
        value: Valor a formatear
        decimals: Número de decimales

    Returns:
        String formateado o '-'

    Example:
        >>> format_number(1.2345, 2)
        '1.23'
        >>> format_number(None, 2)
        '-'
    """
    try:
        return f"{float(value):.{decimals}f}"
    except (ValueError, TypeError):
        return "-"


def format_depth_range(start: Any, end: Any) -> str:
    """Formatea un intervalo de profundidad en metros.

    Example:
        >>> format_depth_range("10", 15)
        '10.00 - 15.00 m'
    """
    return f"{format_number(start)} - {format_number(end)} m"

"""Módulo output: Tablas, formateo y salida por consola."""

from bst_lugeon.output.console import build_summary, print_well_console
from bst_lugeon.output.formatters import format_depth_range, format_number
from bst_lugeon.output.tables import lithology_frame, measurements_frame, stages_frame

__all__ = [
    "build_summary",
    "format_depth_range",
    "format_number",
    "lithology_frame",
    "measurements_frame",
    "print_well_console",
    "stages_frame",
]

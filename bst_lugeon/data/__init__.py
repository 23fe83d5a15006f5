"""Módulo data: Parseo de valores crudos y carga/guardado de registros."""

from bst_lugeon.data.loaders import (
    load_readings_csv,
    load_well_json,
    save_well_json,
    well_from_dict,
    well_to_dict,
)
from bst_lugeon.data.preprocessing import (
    parse_bool,
    parse_number,
    round_decimals,
    round_half_up,
    try_parse_number,
)

__all__ = [
    "load_readings_csv",
    "load_well_json",
    "parse_bool",
    "parse_number",
    "round_decimals",
    "round_half_up",
    "save_well_json",
    "try_parse_number",
    "well_from_dict",
    "well_to_dict",
]

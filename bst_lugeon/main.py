"""Punto de entrada principal para el paquete bst_lugeon."""

import logging
from typing import List, Optional

from bst_lugeon.analysis import recompute_well, sync_lithology
from bst_lugeon.cli import parse_args
from bst_lugeon.core.config import load_settings
from bst_lugeon.data import load_readings_csv, load_well_json, save_well_json
from bst_lugeon.editing import apply_readings, update_well_geometry
from bst_lugeon.output import print_well_console

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    """Carga un pozo, aplica lecturas y geometría, recalcula y muestra el resultado."""
    args = parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s: %(message)s",
    )

    well = load_well_json(args.well)
    logger.info("Pozo %s cargado: %d etapas", well.well_no or well.id, len(well.stages))

    geometry = {
        name: value
        for name, value in (
            ("diameter", args.diameter),
            ("manometer_height", args.manometer_height),
            ("groundwater_depth", args.groundwater),
        )
        if value is not None
    }
    if geometry:
        update_well_geometry(well, **geometry)

    if args.readings:
        apply_readings(well, load_readings_csv(args.readings))
    else:
        recompute_well(well)

    if args.sync_lithology:
        sync_lithology(well)

    print_well_console(well, args.console_format or settings.console_format)

    if args.output:
        save_well_json(well, args.output)
        logger.info("Pozo guardado en %s", args.output)


if __name__ == "__main__":
    main()

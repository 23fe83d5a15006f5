"""Parser de argumentos de línea de comandos."""

import argparse
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parsea argumentos de línea de comandos para el cálculo BST.

    Returns:
        Namespace con todos los argumentos parseados

    Example:
        >>> args = parse_args(["--well", "SK-1.json", "--sync-lithology"])
        >>> args.well
        'SK-1.json'
        >>> args.sync_lithology
        True
    """
    p = argparse.ArgumentParser(description="Cálculo Lugeon de ensayos de presión de agua (BST).")

    # Archivos de datos
    p.add_argument("--well", required=True, help="Ruta al JSON del pozo")
    p.add_argument("--readings", default=None, help="CSV con lecturas (stage;step;total_loss)")
    p.add_argument("--output", default=None, help="Ruta donde guardar el pozo recalculado (JSON)")

    # Geometría (sobrescribe la del registro)
    p.add_argument("--diameter", type=float, default=None, help="Diámetro del pozo (mm)")
    p.add_argument("--manometer-height", type=float, default=None, help="Altura del manómetro (m)")
    p.add_argument("--groundwater", type=float, default=None, help="Profundidad del nivel freático YASS (m)")

    # Procesamiento
    p.add_argument("--sync-lithology", action="store_true", help="Proyectar Lugeon sobre el log litológico")

    # Salida
    p.add_argument(
        "--format",
        dest="console_format",
        choices=["rich", "plain", "json"],
        default=None,
        help="Formato de consola (por defecto CONSOLE_FORMAT o rich)",
    )
    p.add_argument("--log-level", default=None, help="Nivel de logging (DEBUG, INFO, ...)")

    return p.parse_args(argv)

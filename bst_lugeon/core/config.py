"""Configuración leída desde variables de entorno (.env)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from bst_lugeon.core.constants import (
    DEFAULT_MAX_PRESSURE,
    DEFAULT_PATTERN,
    DEFAULT_REVERSIBLE,
    DEFAULT_STAGE_INTERVAL_M,
    TRUE_WORDS,
)


@dataclass
class Settings:
    """Valores por defecto del motor y de la salida.

    Attributes:
        stage_interval_m: Longitud de una etapa nueva
        default_pattern: Patrón de presión de una etapa nueva
        default_max_pressure: Presión máxima de una etapa nueva (bar)
        default_reversible: Si una etapa nueva incluye descarga
        console_format: Formato de consola ("rich", "plain", "json")
        log_level: Nivel de logging
    """

    stage_interval_m: float = DEFAULT_STAGE_INTERVAL_M
    default_pattern: str = DEFAULT_PATTERN
    default_max_pressure: float = DEFAULT_MAX_PRESSURE
    default_reversible: bool = DEFAULT_REVERSIBLE
    console_format: str = "rich"
    log_level: str = "INFO"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUE_WORDS


def load_settings() -> Settings:
    """Carga la configuración desde el entorno (y un .env si existe).

    Returns:
        Settings con los valores del entorno o los defaults

    Example:
        >>> settings = load_settings()
        >>> settings.stage_interval_m > 0
        True
    """
    load_dotenv()
    return Settings(
        stage_interval_m=float(os.getenv("BST_STAGE_INTERVAL_M", str(DEFAULT_STAGE_INTERVAL_M))),
        default_pattern=os.getenv("BST_DEFAULT_PATTERN", DEFAULT_PATTERN),
        default_max_pressure=float(os.getenv("BST_DEFAULT_MAX_PRESSURE", str(DEFAULT_MAX_PRESSURE))),
        default_reversible=_env_bool("BST_DEFAULT_REVERSIBLE", DEFAULT_REVERSIBLE),
        console_format=os.getenv("CONSOLE_FORMAT", "rich"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )

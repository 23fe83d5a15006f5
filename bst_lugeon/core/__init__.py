"""Módulo core: Modelos de datos, constantes y configuración."""

from bst_lugeon.core.config import Settings, load_settings
from bst_lugeon.core.ids import CounterIdProvider, IdProvider, UuidIdProvider
from bst_lugeon.core.models import LithologySegment, Measurement, SPTMeasurement, TestStage, Well

__all__ = [
    "CounterIdProvider",
    "IdProvider",
    "LithologySegment",
    "Measurement",
    "SPTMeasurement",
    "Settings",
    "TestStage",
    "UuidIdProvider",
    "Well",
    "load_settings",
]

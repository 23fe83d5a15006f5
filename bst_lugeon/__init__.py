"""
BST Lugeon - Motor de cálculo para ensayos de presión de agua (Packer/Lugeon).

Este paquete genera secuencias de presión por etapa, calcula valores Lugeon,
clasifica el régimen de flujo y proyecta los resultados sobre el log litológico.
"""

__version__ = "1.0.0"
__author__ = "BST Lugeon Team"

from bst_lugeon.core.models import LithologySegment, Measurement, TestStage, Well

__all__ = ["LithologySegment", "Measurement", "TestStage", "Well", "__version__"]

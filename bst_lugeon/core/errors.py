"""Excepciones del motor BST."""


class StageNotFoundError(KeyError):
    """No existe una etapa con el id indicado en el pozo."""


class MeasurementNotFoundError(KeyError):
    """No existe un escalón con el id indicado en la etapa."""


class SegmentNotFoundError(KeyError):
    """No existe un tramo litológico con el id indicado en el pozo."""

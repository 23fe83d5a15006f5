"""Ensayo SPT: número de golpes N."""

from bst_lugeon.core.models import SPTMeasurement
from bst_lugeon.data.preprocessing import parse_number


def spt_total_n(n1, n2, n3) -> int:
    """N_SPT = N2 + N3; el primer tramo de 15 cm es de asentamiento.

    Example:
        >>> spt_total_n("5", "8", "11")
        19
        >>> spt_total_n("R", "", "7")
        7
    """
    return int(parse_number(n2)) + int(parse_number(n3))


def update_spt(measurement: SPTMeasurement) -> SPTMeasurement:
    """Recalcula el N total de un ensayo SPT."""
    measurement.total_n = spt_total_n(measurement.n1, measurement.n2, measurement.n3)
    return measurement

from bst_lugeon.analysis import classify_flow_type, classify_lugeon_curve
from bst_lugeon.core.models import Measurement


def test_insufficient_positive_readings_is_laminar():
    assert classify_lugeon_curve([]) == "Laminar"
    assert classify_lugeon_curve([1.0, 9.0]) == "Laminar"
    assert classify_lugeon_curve([0.0, 0.0, 5.0, 9.0, 0.0]) == "Laminar"
    assert classify_lugeon_curve(["abc", "-", 3.0, 9.0]) == "Laminar"


def test_washout():
    assert classify_lugeon_curve([1.0, 1.2, 1.4, 1.6, 2.0]) == "Washout"


def test_dilation():
    assert classify_lugeon_curve([1.0, 1.1, 1.5, 1.3, 1.2]) == "Dilation"


def test_turbulent():
    assert classify_lugeon_curve([2.0, 1.8, 1.2, 1.6, 2.0]) == "Turbulent"


def test_laminar_fallback():
    assert classify_lugeon_curve([1.0, 1.0, 1.0, 1.0, 1.0]) == "Laminar"


def test_washout_takes_precedence_over_dilation():
    # last > 1.5 first and also max > 1.2 first
    assert classify_lugeon_curve([1.0, 3.0, 2.0]) == "Washout"


def test_zero_readings_are_filtered_before_indexing():
    # positives are [2.0, 1.0, 2.0]; the middle of the filtered list is 1.0
    assert classify_lugeon_curve([0.0, 2.0, 0.0, 1.0, 2.0]) == "Turbulent"


def test_classify_flow_type_uses_measurement_lugeon():
    ms = [Measurement(id=str(i), step_number=i + 1, applied_pressure=2.0, lugeon=lu) for i, lu in enumerate([1, 2, 4])]
    assert classify_flow_type(ms) == "Washout"

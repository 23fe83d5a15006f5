import json

import pytest

from bst_lugeon.analysis import recompute_well
from bst_lugeon.data import load_readings_csv, load_well_json, save_well_json, well_from_dict, well_to_dict


def test_well_from_field_app_record():
    raw = {
        "id": "w9",
        "wellNo": "SK-9",
        "wellDiameter": "101",
        "manometerHeight": "0.5",
        "groundwaterStatus": "3.0",
        "bstStages": [
            {
                "id": "st",
                "startDepth": "5",
                "endDepth": "10",
                "pressureType": "TYPE_A",
                "maxPressure": "3",
                "isReversible": False,
                "measurements": [
                    {"id": "a", "stepNumber": 1, "appliedPressure": 1, "first5Min": "2", "second5Min": "3",
                     "totalLoss": "5", "calculatedLugeon": "0.00", "effectivePressure": "0.00"},
                ],
                "representativeLugeon": "0.00",
            }
        ],
        "lithologySegments": [{"id": "l", "startDepth": "5", "endDepth": "7", "description": "Kumtaşı",
                               "rqd": "40", "weathering": "W2"}],
        "sptMeasurements": [{"id": "p", "depth": "1.5", "n1": "3", "n2": "4", "n3": "5", "totalN": 9}],
        "coordinateX": "ignored",
    }
    w = well_from_dict(raw)
    assert w.well_no == "SK-9"
    assert w.diameter == "101"
    assert w.groundwater_depth == "3.0"
    stage = w.stages[0]
    assert stage.reversible is False
    assert stage.measurements[0].total_loss == "5"
    assert stage.measurements[0].applied_pressure == 1.0
    assert w.lithology[0].weathering == "W2"
    assert w.spt[0].total_n == 9

    recompute_well(w)
    assert stage.measurements[0].lugeon > 0


def test_field_app_enum_values_are_mapped():
    raw = {
        "id": "w",
        "bstStages": [
            {"id": "a", "startDepth": "0", "endDepth": "5", "pressureType": "TIP_B", "flowType": "Türbülan",
             "isFlowTypeManual": "true", "isReversible": "false"},
            {"id": "b", "startDepth": "5", "endDepth": "10", "pressureType": "TIP_C",
             "flowType": "Boşluk Dolumu"},
        ],
        "lithologySegments": [
            {"id": "l", "startDepth": "0", "endDepth": "2", "permeabilityStatus": "Orta Geçirimli"},
        ],
    }
    w = well_from_dict(raw)
    a, b = w.stages
    assert a.pressure_type == "TYPE_B"
    assert a.flow_type == "Turbulent"
    assert a.flow_type_manual is True
    assert a.reversible is False
    assert b.pressure_type == "TYPE_C"
    assert b.flow_type == "Void Filling"
    assert b.reversible is True
    assert w.lithology[0].permeability_status == "Medium permeability"


def test_well_from_dict_rejects_bad_records():
    with pytest.raises(ValueError):
        well_from_dict(["not", "a", "dict"])
    with pytest.raises(ValueError):
        well_from_dict({"wellNo": "no id"})


def test_json_roundtrip(tmp_path, well):
    recompute_well(well)
    path = tmp_path / "well.json"
    save_well_json(well, path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["stages"][0]["representative_lugeon"] == 0.82
    loaded = load_well_json(path)
    assert well_to_dict(loaded) == well_to_dict(well)


def test_load_well_json_invalid(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_well_json(path)


def test_load_readings_csv_semicolon(tmp_path):
    csv = tmp_path / "readings.csv"
    content = (
        "Stage;Step;First_5min;Second_5min;Total_Loss\n"
        "s2;2;4;5;9\n"
        "s1;1;1;1;2\n"
        "s1;x;1;1;2\n"
    )
    csv.write_text(content, encoding="utf-8")
    df = load_readings_csv(csv)
    assert list(df["stage"]) == ["s1", "s2"]
    assert list(df["step"]) == [1, 2]
    assert df.loc[1, "total_loss"] == "9"


def test_load_readings_csv_missing_columns(tmp_path):
    csv = tmp_path / "readings.csv"
    csv.write_text("stage,loss\ns1,3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_readings_csv(csv)


def test_load_readings_csv_with_bom(tmp_path):
    csv = tmp_path / "readings.csv"
    csv.write_text("stage,step,total_loss\ns1,1,4\n", encoding="utf-8-sig")
    df = load_readings_csv(csv)
    assert list(df.columns)[0] == "stage"
    assert df.loc[0, "total_loss"] == "4"

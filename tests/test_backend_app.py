from fastapi.testclient import TestClient

import backend_app
from bst_lugeon.data import well_to_dict

client = TestClient(backend_app.app)


def test_index():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_pressure_steps():
    r = client.post("/api/pressure-steps", json={"max_pressure": 6, "pressure_type": "TYPE_B", "reversible": True})
    assert r.status_code == 200
    data = r.json()
    assert data["steps"] == [2, 4, 6, 4, 2]
    assert data["n_steps"] == 5


def test_pressure_steps_unparsable_max():
    r = client.post("/api/pressure-steps", json={"max_pressure": "abc", "pressure_type": "TYPE_A", "reversible": False})
    assert r.json()["steps"] == [1]


def test_lugeon_single_reading():
    payload = {
        "total_loss": "20",
        "applied_pressure": 2,
        "start_depth": "10",
        "end_depth": "15",
        "groundwater_depth": "0",
        "manometer_height": "1",
        "diameter": "76",
    }
    r = client.post("/api/lugeon", json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data["lugeon"] == 1.19
    assert data["effective_pressure"] == 3.35
    assert data["permeability_status"] == "Low permeability"


def test_lugeon_zero_length():
    r = client.post("/api/lugeon", json={"total_loss": 50, "applied_pressure": 6, "start_depth": 5, "end_depth": 5})
    assert r.json()["lugeon"] == 0.0
    assert r.json()["effective_pressure"] == 0.0


def test_lugeon_effective_pressure_tie_rounds_up():
    payload = {"total_loss": 0, "applied_pressure": 2, "start_depth": 18, "end_depth": 22.5}
    assert client.post("/api/lugeon", json=payload).json()["effective_pressure"] == 4.13


def test_permeability():
    assert client.get("/api/permeability", params={"lugeon": "0.5"}).json()["status"] == (
        "Very low permeability / watertight"
    )
    assert client.get("/api/permeability", params={"lugeon": "abc"}).json()["status"] == "-"


def test_recompute_and_sync(well):
    payload = well_to_dict(well)
    r = client.post("/api/wells/recompute", json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data["stages"][0]["representative_lugeon"] == 0.82
    assert data["stages"][1]["flow_type"] == "Washout"
    assert data["lithology"][0]["lugeon"] is None

    r = client.post("/api/wells/sync-lithology", json=payload)
    data = r.json()
    assert data["lithology"][0]["lugeon"] == 0.82
    assert data["lithology"][1]["permeability_status"] == "Medium permeability"


def test_recompute_invalid_record():
    r = client.post("/api/wells/recompute", json={"wellNo": "missing id"})
    assert r.status_code == 422

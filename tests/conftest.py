import pytest

from bst_lugeon.analysis import build_measurements
from bst_lugeon.core.ids import CounterIdProvider
from bst_lugeon.core.models import LithologySegment, TestStage, Well


def make_stage(stage_id, start, end, losses, max_pressure=6, pattern="TYPE_B", reversible=True):
    ids = CounterIdProvider(prefix=f"{stage_id}-m")
    measurements = build_measurements(max_pressure, pattern, reversible, id_provider=ids)
    for m, loss in zip(measurements, losses):
        m.total_loss = str(loss)
    return TestStage(
        id=stage_id,
        start_depth=str(start),
        end_depth=str(end),
        pressure_type=pattern,
        max_pressure=str(max_pressure),
        reversible=reversible,
        measurements=measurements,
    )


@pytest.fixture
def well():
    # two stages, TYPE_B 6 bar reversible: 2-4-6-4-2 bar
    return Well(
        id="w1",
        well_no="SK-1",
        diameter="76",
        manometer_height="1.0",
        groundwater_depth="0.0",
        stages=[
            make_stage("s1", 10, 15, [10, 20, 30, 20, 10]),
            make_stage("s2", 15, 20, [10, 20, 30, 40, 50]),
        ],
        lithology=[
            LithologySegment(id="l1", start_depth="10", end_depth="12", formation="Kireçtaşı"),
            LithologySegment(id="l2", start_depth="30", end_depth="35", formation="Kil", lugeon=7.0,
                             permeability_status="Medium permeability"),
        ],
    )

import math

import numpy as np
import pytest

from model import (Model, ProjectileProfile, ProjectileTrace, SpringProfile, SpringTrace,
                   overshoot, settle_time, traces_to_dataframe)
from projectile import Point, TERMINAL_GRAVITY, Vector
from run import projectile_predictor, spring_predictor
from spring import Damping
from utils import Timing

DT = Timing.fps(60)


def test_spring_trace_records_every_frame():
    trace = spring_predictor(SpringProfile(6.0, 0.5, 10.0), DT, 120)
    assert isinstance(trace, SpringTrace)
    assert trace.regime == Damping.UNDER
    assert trace.times.shape == trace.positions.shape == trace.velocities.shape == (121,)
    assert trace.times[-1] == pytest.approx(120 * DT)
    assert trace.positions[0] == 0.0
    assert trace.overshoot > 0.0
    assert 0.0 < trace.settle_time < trace.times[-1]


def test_critically_damped_trace_does_not_overshoot():
    trace = spring_predictor(SpringProfile(6.0, 1.0, -4.0, 4.0), DT, 300)
    assert trace.regime == Damping.CRITICAL
    assert trace.overshoot == pytest.approx(0.0, abs=1e-9)
    assert trace.positions[-1] == pytest.approx(-4.0, abs=1e-3)


def test_projectile_trace_matches_model():
    profile = ProjectileProfile(Point(0, 0, 0), Vector(5, 5, 0), TERMINAL_GRAVITY)
    trace = projectile_predictor(profile, DT, 60)
    assert isinstance(trace, ProjectileTrace)
    assert trace.positions.shape == (61, 3)
    assert trace.positions[-1] == pytest.approx([5.0, 9.82, 0.0], abs=1e-2)
    assert trace.velocities[-1][1] == pytest.approx(5 + 9.81 * 60 * DT)
    # The profile keeps its initial values
    assert profile.initial_position == Point(0, 0, 0)


def test_model_runs_mixed_profiles_with_progress(capsys):
    result = []
    profiles = [SpringProfile(7.0, 0.15, 1.0), ProjectileProfile(Point(), Vector(1, 0, 0), Vector())]
    Model(DT, profiles, result).simulate(10, logging=True)
    assert [type(trace) for trace in result] == [SpringTrace, ProjectileTrace]
    assert "Complete in" in capsys.readouterr().out


def test_model_rejects_bad_input():
    with pytest.raises(TypeError):
        Model(DT, ["spring"], []).simulate(10)
    with pytest.raises(ValueError):
        Model(DT, [], []).simulate(-1)


def test_zero_frames():
    trace = spring_predictor(SpringProfile(6.0, 0.5, 10.0, 2.0), DT, 0)
    assert trace.positions.tolist() == [2.0]
    assert math.isnan(trace.settle_time)


def test_overshoot_and_settle_time_helpers():
    times = np.arange(6, dtype=float)
    positions = np.array([0.0, 8.0, 11.0, 9.9, 10.1, 10.0])
    assert overshoot(positions, 0.0, 10.0) == pytest.approx(1.0)
    assert overshoot(positions, 10.0, 10.0) == 0.0
    assert settle_time(times, positions, 0.0, 10.0, band=0.02) == 3.0
    assert math.isnan(settle_time(times[:3], positions[:3], 0.0, 10.0))


def test_traces_to_dataframe():
    traces = []
    Model(DT, [SpringProfile(6.0, 2.0, 1.0), ProjectileProfile(Point(), Vector(3, 4, 0), Vector())], traces).simulate(60)
    df = traces_to_dataframe(traces)
    assert df.index.name == "Profile ID"
    assert list(df["Kind"]) == ["spring", "projectile"]
    assert df.loc[0, "Regime"] == "over-damped"
    assert df.loc[1, "Final Speed"] == pytest.approx(5.0)
    assert traces_to_dataframe([]).empty

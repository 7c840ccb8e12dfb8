import random
import threading
from datetime import timedelta

import pytest

from conftest import NOW
from vitalwatch.vitals.generator import (
    BASELINE_BANDS,
    HISTORY_NOISE,
    NOISE,
    RESTING,
    VitalsGenerator,
)
from vitalwatch.vitals.reading import VITAL_KINDS, Reading, SpikedReading


def test_baseline_is_lazy(make_gen):
    gen = make_gen()
    assert gen.baseline is None

    r = gen.read()

    assert gen.baseline == {k: float(v) for k, v in RESTING.items()}
    assert type(r) is Reading
    assert r.heart_rate == 72
    assert r.blood_pressure_systolic == 120
    assert r.blood_pressure_diastolic == 80
    assert r.blood_oxygen == 98.0
    assert r.glucose_level == 95.0
    assert r.temperature == 98.6
    assert r.timestamp == NOW


def test_spike_runs_three_readings_with_fading_intensity(make_gen):
    gen = make_gen(randoms=[0.0], pick="glucose_level")

    readings = [gen.read() for _ in range(4)]

    assert [r.glucose_level for r in readings] == [185.0, 155.0, 125.0, 95.0]
    assert isinstance(readings[0], SpikedReading)
    assert readings[0].has_spike
    assert readings[0].spike_type == "glucose_level"
    assert [r.has_spike for r in readings[1:]] == [False, False, False]
    assert not gen.spike_active


def test_spike_only_moves_the_chosen_vital(make_gen):
    gen = make_gen(randoms=[0.0], pick="heart_rate")
    r = gen.read()

    assert r.heart_rate > 72
    assert r.blood_pressure_systolic == 120
    assert r.blood_oxygen == 98.0
    assert r.temperature == 98.6


@pytest.mark.parametrize("kind", VITAL_KINDS)
def test_spiked_value_is_worse_than_resting(make_gen, kind):
    plain = make_gen().read()

    gen = make_gen(randoms=[0.0], pick=kind)
    readings = [gen.read() for _ in range(3)]

    for r in readings:
        if kind == "blood_oxygen":
            assert r.value(kind) < plain.value(kind)
        else:
            assert r.value(kind) > plain.value(kind)
    assert readings[0].spike_type == kind


def test_trigger_ignored_while_spike_active(make_gen):
    # trigger fires on every call; only calls 1 and 4 may start a spike
    gen = make_gen(randoms=[0.0] * 4, pick="temperature")

    readings = [gen.read() for _ in range(4)]

    assert [r.has_spike for r in readings] == [True, False, False, True]
    assert gen.rng.choices == 2
    assert gen.spike_vital == "temperature"


def test_spikes_never_move_the_baseline(make_gen):
    gen = make_gen(randoms=[0.0], pick="blood_pressure_systolic")
    for _ in range(3):
        gen.read()
    assert gen.baseline == {k: float(v) for k, v in RESTING.items()}


def test_baseline_clamped_at_upper_band(make_gen):
    gen = make_gen(frac=1.0)
    for _ in range(200):
        gen.read()
    assert gen.baseline == {k: hi for k, (lo, hi) in BASELINE_BANDS.items()}


def test_baseline_clamped_at_lower_band(make_gen):
    gen = make_gen(frac=0.0)
    for _ in range(200):
        gen.read()
    assert gen.baseline == {k: lo for k, (lo, hi) in BASELINE_BANDS.items()}


def test_baseline_stays_in_band_with_real_randomness(clock):
    gen = VitalsGenerator(rng=random.Random(1234), clock=clock, spike_probability=0.2)
    for _ in range(2000):
        gen.read()
        for k, v in gen.baseline.items():
            lo, hi = BASELINE_BANDS[k]
            assert lo <= v <= hi, k


def test_readings_rounded(clock):
    gen = VitalsGenerator(rng=random.Random(7), clock=clock, spike_probability=0.1)
    for _ in range(300):
        r = gen.read()
        for k in ("heart_rate", "blood_pressure_systolic", "blood_pressure_diastolic"):
            assert isinstance(r.value(k), int)
        for k in ("blood_oxygen", "glucose_level", "temperature"):
            v = r.value(k)
            assert round(v, 1) == v


def test_noise_stays_within_amplitude_without_spikes(clock):
    gen = VitalsGenerator(rng=random.Random(99), clock=clock, spike_probability=0.0)
    for _ in range(500):
        r = gen.read()
        assert not r.has_spike
        for k in VITAL_KINDS:
            lo, hi = BASELINE_BANDS[k]
            # the baseline used for this reading was inside its band; allow rounding slack
            assert lo - NOISE[k] - 0.5 <= r.value(k) <= hi + NOISE[k] + 0.5


def test_at_most_one_spike_under_concurrent_reads(clock):
    gen = VitalsGenerator(rng=random.Random(3), clock=clock, spike_probability=1.0)
    results = []
    lock = threading.Lock()

    def worker():
        local = [gen.read() for _ in range(250)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    # with p=1 a spike starts on every 3rd call exactly: 1, 4, 7, ...
    assert len(results) == 1000
    assert sum(r.has_spike for r in results) == 334


def test_reset_drops_state(make_gen):
    gen = make_gen(randoms=[0.0], pick="heart_rate")
    gen.read()
    assert gen.spike_active

    gen.reset()

    assert gen.baseline is None
    assert not gen.spike_active
    assert gen.spike_vital is None


@pytest.mark.parametrize("p", [-0.1, 1.5])
def test_rejects_bad_spike_probability(p):
    with pytest.raises(ValueError):
        VitalsGenerator(spike_probability=p)


# -----------------------
# Historical window
# -----------------------

def test_historical_shape_and_timestamps(make_gen):
    window = make_gen().historical(24)

    assert len(window) == 25
    assert window[-1].timestamp == NOW
    assert window[0].timestamp == NOW - timedelta(hours=24)
    for a, b in zip(window, window[1:]):
        assert b.timestamp - a.timestamp == timedelta(hours=1)


def test_historical_default_is_24_hours(make_gen):
    assert len(make_gen().historical()) == 25


def test_historical_uses_wider_noise_around_resting(clock):
    gen = VitalsGenerator(rng=random.Random(11), clock=clock)
    for r in gen.historical(48):
        assert not r.has_spike
        for k in VITAL_KINDS:
            assert abs(r.value(k) - RESTING[k]) <= HISTORY_NOISE[k] + 0.5


def test_historical_leaves_live_state_alone(make_gen):
    gen = make_gen(randoms=[0.0], pick="heart_rate")
    gen.read()
    before = gen.baseline

    gen.historical(12)

    assert gen.baseline == before
    assert gen.spike_active
    assert gen.rng.choices == 1


def test_historical_before_any_read_does_not_create_baseline(make_gen):
    gen = make_gen()
    gen.historical(3)
    assert gen.baseline is None


@pytest.mark.parametrize("hours", [0, -1, 1.5, "24", True])
def test_historical_rejects_bad_hours(make_gen, hours):
    with pytest.raises(ValueError):
        make_gen().historical(hours)

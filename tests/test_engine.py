"""Engine-level tests: determinism, unit accounting and sentinels."""

import uuid

import pytest

from twister_random import FloatCurve, SeededEngine
from twister_random.prng import MT19937


def _script(engine):
    return [
        engine.rand_int(1, 6),
        engine.rand_float(-2.0, 2.0),
        engine.rand_bool(0.3),
        engine.rand_float_biased(0.0, 10.0, 7.0, 4),
        engine.rand_bool_biased(0.4, False, 3),
        engine.rand_gaussian(5.0, 2.0),
        engine.rand_gaussian_clamped(0.0, 1.0, 0.5, 1.0),
        engine.rand_gaussian_truncated(0.0, 1.0, 0.5, 1.0),
        engine.rand_weighted([1.0, 0.0, 3.0]),
        engine.roll_dice(3, 6),
        engine.roll_dice_array([4, 0, 20]),
    ]


def test_same_seed_same_results_and_state():
    first = SeededEngine(42)
    second = SeededEngine(42)

    assert _script(first) == _script(second)
    assert first.get_current_state() == second.get_current_state()


def test_different_seeds_diverge():
    a = [SeededEngine(1).rand_int(0, 10**6) for _ in range(3)]
    b = [SeededEngine(2).rand_int(0, 10**6) for _ in range(3)]
    assert a != b


def test_seed_matches_reference_stream():
    engine = SeededEngine(5489)
    assert engine.rand_int(0, 0xFFFFFFFF) == 3499211612


def test_seed_42_three_d6_reproducible():
    first, second = SeededEngine(42), SeededEngine(42)
    rolls = [first.rand_int(1, 6) for _ in range(3)]

    assert rolls == [second.rand_int(1, 6) for _ in range(3)]
    assert all(1 <= roll <= 6 for roll in rolls)
    assert first.get_current_state() == 3


def test_seed_is_wrapped_to_int32():
    assert SeededEngine(2**32 + 7).get_root_seed() == 7
    assert SeededEngine(0xFFFFFFFF).seed == -1
    assert SeededEngine(-1).rand_int(0, 999) == SeededEngine(0xFFFFFFFF).rand_int(0, 999)


def test_unseeded_engine_gets_int32_seed():
    seed = SeededEngine().get_root_seed()
    assert -(2**31) <= seed < 2**31


def test_primitive_draws_cost_one_unit_each():
    engine = SeededEngine(11)
    engine.rand_int()
    engine.rand_float()
    engine.rand_bool()
    engine.rand_gaussian()
    engine.rand_percentage()
    engine.rand_percentage01()
    assert engine.generated_count == 6


def test_units_track_generator_words():
    engine = SeededEngine(11)
    _script(engine)
    reference = MT19937(11)
    reference.discard(engine.get_current_state())

    assert engine.rand_int(0, 0xFFFFFFFF) == reference.next_u32()


def test_biased_draws_cost_force_units():
    engine = SeededEngine(3)
    engine.rand_float_biased(0.0, 1.0, 0.5, 5)
    assert engine.generated_count == 5
    engine.rand_float_biased(0.0, 1.0, 0.5, 0)
    assert engine.generated_count == 6
    engine.rand_bool_biased(0.5, True, 4)
    assert engine.generated_count == 10
    engine.rand_bool_biased(0.5, True, 1)
    assert engine.generated_count == 11


def test_reset_then_advance_matches_fresh_replay():
    original = SeededEngine(1234)
    for _ in range(50):
        original.rand_int(0, 100)
    expected = [original.rand_float() for _ in range(10)]

    original.reset()
    assert original.get_current_state() == 0
    original.advance(50)
    assert [original.rand_float() for _ in range(10)] == expected

    replay = SeededEngine(1234)
    replay.discard(50)
    assert [replay.rand_float() for _ in range(10)] == expected


@pytest.mark.parametrize("target", [0, 5, 40, 700, 1400])
def test_jump_to_state_forward_and_back(target):
    engine = SeededEngine(77)
    for _ in range(600):
        engine.rand_int(0, 9)

    engine.jump_to_state(target)
    assert engine.get_current_state() == target

    fresh = SeededEngine(77)
    fresh.advance(target)
    assert [engine.rand_int(0, 10**6) for _ in range(5)] == [fresh.rand_int(0, 10**6) for _ in range(5)]


def test_jump_to_current_state_is_noop():
    engine = SeededEngine(5)
    engine.rand_int()
    engine.jump_to_state(1)
    twin = SeededEngine(5)
    twin.rand_int()
    assert engine.rand_int() == twin.rand_int()


def test_negative_counts_are_ignored():
    engine = SeededEngine(5)
    engine.advance(-3)
    assert engine.get_current_state() == 0
    engine.rand_int()
    engine.jump_to_state(-10)
    assert engine.get_current_state() == 0


def test_range_containment():
    engine = SeededEngine(8)
    for _ in range(10_000):
        assert -5 <= engine.rand_int(-5, 5) <= 5
        assert -2.5 <= engine.rand_float(-2.5, 3.5) <= 3.5


def test_degenerate_range_returns_bound():
    engine = SeededEngine(8)
    assert all(engine.rand_int(4, 4) == 4 for _ in range(100))
    assert all(engine.rand_float(1.5, 1.5) == 1.5 for _ in range(100))


def test_reversed_int_bounds_are_swapped():
    engine = SeededEngine(8)
    assert all(1 <= engine.rand_int(6, 1) <= 6 for _ in range(500))


def test_rand_int_covers_every_face():
    engine = SeededEngine(21)
    faces = {engine.rand_int(1, 6) for _ in range(1000)}
    assert faces == {1, 2, 3, 4, 5, 6}


def test_rand_bool_boundaries():
    engine = SeededEngine(9)
    assert not any(engine.rand_bool(0.0) for _ in range(10_000))
    assert all(engine.rand_bool(1.0) for _ in range(10_000))
    assert all(engine.rand_bool(3.0) for _ in range(100))
    assert not any(engine.rand_bool(-1.0) for _ in range(100))


def test_float_biased_picks_closest_first_seen():
    engine = SeededEngine(31)
    result = engine.rand_float_biased(0.0, 10.0, 3.0, 4)

    manual = SeededEngine(31)
    samples = [manual.rand_float(0.0, 10.0) for _ in range(4)]
    best = samples[0]
    for sample in samples[1:]:
        if abs(sample - 3.0) < abs(best - 3.0):
            best = sample
    assert result == best


def test_float_biased_force_one_is_plain_float():
    assert SeededEngine(4).rand_float_biased(0.0, 1.0, 0.9, 1) == SeededEngine(4).rand_float(0.0, 1.0)


def test_float_biased_target_is_clamped():
    engine = SeededEngine(4)
    values = [engine.rand_float_biased(0.0, 1.0, 50.0, 20) for _ in range(200)]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert sum(values) / len(values) > 0.9


def test_bias_force_tightens_clustering():
    target = 0.25
    distances = []
    for force in (1, 5, 50):
        engine = SeededEngine(2020)
        samples = [engine.rand_float_biased(0.0, 1.0, target, force) for _ in range(2000)]
        distances.append(sum(abs(s - target) for s in samples) / len(samples))

    assert distances[0] >= distances[1] >= distances[2]


def test_bool_biased_uses_midpoint_targets():
    for toward_true, target in ((True, 0.3 * 0.5), (False, 0.3 + (1.0 - 0.3) * 0.5)):
        engine = SeededEngine(64)
        manual = SeededEngine(64)
        for _ in range(50):
            expected = manual.rand_float_biased(0.0, 1.0, target, 3) < 0.3
            assert engine.rand_bool_biased(0.3, toward_true, 3) == expected


def test_bool_biased_skews_toward_chosen_side():
    engine = SeededEngine(15)
    toward_true = sum(engine.rand_bool_biased(0.5, True, 5) for _ in range(2000)) / 2000
    toward_false = sum(engine.rand_bool_biased(0.5, False, 5) for _ in range(2000)) / 2000

    assert toward_true > 0.7
    assert toward_false < 0.3


def test_bool_biased_force_one_defers_to_rand_bool():
    a, b = SeededEngine(17), SeededEngine(17)
    assert [a.rand_bool_biased(0.4, True, 1) for _ in range(20)] == [b.rand_bool(0.4) for _ in range(20)]


def test_gaussian_moments():
    engine = SeededEngine(1)
    samples = [engine.rand_gaussian(10.0, 2.0) for _ in range(5000)]
    mean = sum(samples) / len(samples)
    variance = sum((s - mean) ** 2 for s in samples) / len(samples)

    assert mean == pytest.approx(10.0, abs=0.2)
    assert variance ** 0.5 == pytest.approx(2.0, abs=0.2)


def test_gaussian_zero_stddev_returns_mean_and_counts():
    engine = SeededEngine(1)
    assert engine.rand_gaussian(3.5, 0.0) == 3.5
    assert engine.generated_count == 1


def test_gaussian_clamped_stays_in_range():
    engine = SeededEngine(12)
    for _ in range(1000):
        assert 10.0 <= engine.rand_gaussian_clamped(10.0, 20.0, 12.0, 2.0) <= 20.0


def test_gaussian_clamped_attempt_budget():
    engine = SeededEngine(12)
    engine.rand_gaussian_clamped(0.0, 1.0, 0.5, 1000.0, attempts=1)
    assert engine.generated_count == 1
    engine.rand_gaussian_clamped(0.0, 1.0, 0.5, 1000.0, attempts=0)
    assert engine.generated_count == 2


def test_clamped_and_truncated_fallbacks_differ():
    clamped_engine = SeededEngine(99)
    truncated_engine = SeededEngine(99)

    clamped = [clamped_engine.rand_gaussian_clamped(0.0, 1.0, 0.5, 1000.0) for _ in range(200)]
    truncated = [truncated_engine.rand_gaussian_truncated(0.0, 1.0, 0.5, 1000.0) for _ in range(200)]

    assert sum(1 for v in clamped if v in (0.0, 1.0)) > 150
    assert all(0.0 <= v <= 1.0 for v in truncated)
    assert sum(1 for v in truncated if v in (0.0, 1.0)) < 5
    # five misses plus the uniform redraw
    assert truncated_engine.generated_count > clamped_engine.generated_count


def test_gaussian_degenerate_range():
    engine = SeededEngine(12)
    assert engine.rand_gaussian_clamped(2.0, 2.0, 9.0) == 2.0
    assert engine.rand_gaussian_truncated(2.0, 2.0, -9.0) == 2.0


def test_weighted_sentinels():
    engine = SeededEngine(5)
    assert engine.rand_weighted([]) == -1
    assert engine.rand_weighted([0.0, 0.0]) == -1
    assert engine.rand_weighted([-1.0, -4.0, 0.0]) == -1
    assert engine.generated_count == 0


def test_weighted_single_positive_always_selected():
    engine = SeededEngine(5)
    assert all(engine.rand_weighted([0.0, -2.0, 3.0, 0.0]) == 2 for _ in range(500))


def test_weighted_never_selects_non_positive():
    engine = SeededEngine(6)
    picks = [engine.rand_weighted([1.0, 0.0, -1.0, 1.0]) for _ in range(2000)]
    assert set(picks) == {0, 3}


def test_weighted_follows_proportions():
    engine = SeededEngine(6)
    picks = [engine.rand_weighted([1.0, 3.0]) for _ in range(4000)]
    share = picks.count(1) / len(picks)
    assert share == pytest.approx(0.75, abs=0.04)


def test_roll_dice_bounds_and_sentinels():
    engine = SeededEngine(14)
    for _ in range(500):
        assert 3 <= engine.roll_dice(3, 6) <= 18
    before = engine.generated_count
    assert engine.roll_dice(0, 6) == 0
    assert engine.roll_dice(2, 0) == 0
    assert engine.roll_dice(-1, -1) == 0
    assert engine.generated_count == before


def test_roll_dice_array_skips_invalid_entries():
    engine = SeededEngine(14)
    assert engine.roll_dice_array([]) == 0
    total = engine.roll_dice_array([6, 0, -3, 20])
    assert 2 <= total <= 26
    assert engine.generated_count == 2


def test_curve_draws():
    curve = FloatCurve.from_points([(0.0, 0.0), (1.0, 10.0)])
    engine = SeededEngine(19)
    for _ in range(200):
        assert 0.0 <= engine.rand_curve_value(curve) <= 10.0
    assert engine.rand_curve_range(curve, 2.0, 2.0) == 10.0


def test_empty_curve_draws_nothing():
    engine = SeededEngine(19)
    assert engine.rand_curve_value(FloatCurve()) == 0.0
    assert engine.rand_curve_range(FloatCurve(), 0.0, 1.0) == 0.0
    assert engine.generated_count == 0


def test_static_helpers():
    seed = SeededEngine.static_new_seed()
    assert -(2**31) <= seed < 2**31
    assert 1 <= SeededEngine.static_rand_int(1, 6) <= 6
    assert 0.5 <= SeededEngine.static_rand_float(0.5, 0.75) <= 0.75

    first, second = SeededEngine.static_new_guid(), SeededEngine.static_new_guid()
    assert isinstance(first, uuid.UUID)
    assert first != second


def test_builtin_helpers_stay_in_range():
    for _ in range(200):
        assert -3 <= SeededEngine.static_rand_int_builtin(-3, 3) <= 3
        assert 0.0 <= SeededEngine.static_rand_float_builtin(0.0, 2.0) <= 2.0
    assert SeededEngine.static_rand_bool_builtin(1.0) is True
    assert SeededEngine.static_rand_bool_builtin(0.0) is False

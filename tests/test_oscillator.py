import numpy as np
import pytest

from bezierblob.model.geometry import build_geometry
from bezierblob.model.oscillator import CLOCKWISE, COUNTER_CLOCKWISE, oscillate, pair_control_points
from bezierblob.model.shape import BlobShape


def test_pairing_matches_adjacent_curves(square_shape) -> None:
    curves = square_shape.curves
    n = square_shape.point_count
    for i, anchor in enumerate(square_shape.anchors):
        expected = {curves[(i - 1) % n].second, curves[i].first}
        assert set(anchor.paired) == expected
        assert anchor.incoming == curves[(i - 1) % n].second
        assert anchor.outgoing == curves[i].first


def test_pairing_initial_direction_and_speed(square_shape) -> None:
    for anchor in square_shape.anchors:
        assert anchor.direction == CLOCKWISE
        assert 0.0 <= anchor.speed < 1.0


def test_paired_points_are_owned_by_their_anchor(square_shape) -> None:
    for i in range(square_shape.point_count):
        for cp in square_shape.paired_control_points(i):
            assert cp.owner == i


def test_pairing_twice_is_rejected(rng) -> None:
    g = build_geometry(4, 10.0)
    pair_control_points(g.anchors, g.curves, rng)
    with pytest.raises(ValueError):
        pair_control_points(g.anchors, g.curves, rng)


def test_pairing_stable_across_ticks(square_shape, rng) -> None:
    before = [a.paired for a in square_shape.anchors]
    for _ in range(500):
        square_shape.oscillate(max_sweep=0.3, step=0.02, rng=rng)
    assert [a.paired for a in square_shape.anchors] == before


def test_paired_points_move_in_lockstep(square_shape, rng) -> None:
    for _ in range(250):
        square_shape.oscillate(max_sweep=np.pi / 6, step=0.02, rng=rng)
        for i in range(square_shape.point_count):
            a, b = square_shape.paired_control_points(i)
            assert a.offset == pytest.approx(b.offset, abs=1e-12)


def test_oscillation_keeps_derivation_invariant(square_shape, rng) -> None:
    for _ in range(300):
        square_shape.oscillate(max_sweep=np.pi / 6, step=0.02, rng=rng)
        assert square_shape.is_consistent(atol=1e-9)


def test_oscillation_is_bounded(rng) -> None:
    shape = BlobShape(build_geometry(5, 250.0), rng)
    sweep = 0.1
    seen_max = 0.0
    for _ in range(3000):
        shape.oscillate(max_sweep=sweep, step=0.02, rng=rng)
        for cp in shape.control_points:
            assert -sweep - 1e-12 <= cp.offset <= sweep + 1e-12
            seen_max = max(seen_max, abs(cp.offset))
    # It actually reaches the bounds rather than sitting still
    assert seen_max == pytest.approx(sweep)


def test_direction_flips_at_upper_bound(square_shape, rng) -> None:
    anchor = square_shape.anchor(0)
    anchor.speed = 1.0
    sweep = 0.1
    for _ in range(10):
        square_shape.oscillate(max_sweep=sweep, step=0.02, rng=rng)
        if anchor.direction == COUNTER_CLOCKWISE:
            break
    assert anchor.direction == COUNTER_CLOCKWISE
    for cp in square_shape.paired_control_points(0):
        assert cp.offset == pytest.approx(sweep)


def test_direction_flips_back_at_lower_bound(square_shape, rng) -> None:
    anchor = square_shape.anchor(1)
    anchor.direction = COUNTER_CLOCKWISE
    anchor.speed = 1.0
    sweep = 0.1
    for _ in range(10):
        square_shape.oscillate(max_sweep=sweep, step=0.02, rng=rng)
        if anchor.direction == CLOCKWISE:
            break
    assert anchor.direction == CLOCKWISE
    for cp in square_shape.paired_control_points(1):
        assert cp.offset == pytest.approx(-sweep)


def test_flip_draws_a_new_speed(square_shape) -> None:
    class FixedRng:
        def random(self) -> float:
            return 0.25

    anchor = square_shape.anchor(0)
    anchor.speed = 1.0
    flips = 0
    for _ in range(10):
        flips += square_shape.oscillate(max_sweep=0.05, step=0.02, rng=FixedRng())
        if flips:
            break
    assert anchor.speed == 0.25


def test_non_positive_sweep_means_no_motion(square_shape, rng) -> None:
    before = square_shape.control_positions()
    for sweep in (0.0, -0.5):
        for _ in range(20):
            assert square_shape.oscillate(max_sweep=sweep, step=0.02, rng=rng) == 0
    np.testing.assert_array_equal(square_shape.control_positions(), before)


def test_same_seed_same_motion() -> None:
    runs = []
    for _ in range(2):
        rng = np.random.default_rng(99)
        shape = BlobShape(build_geometry(6, 120.0), rng)
        for _ in range(200):
            shape.oscillate(max_sweep=np.pi / 6, step=0.02, rng=rng)
        runs.append(shape.control_positions())
    np.testing.assert_array_equal(runs[0], runs[1])


def test_oscillate_function_reports_flips(rng) -> None:
    g = build_geometry(3, 10.0)
    pair_control_points(g.anchors, g.curves, rng)
    for a in g.anchors:
        a.speed = 1.0
    total = sum(
        oscillate(g.anchors, g.control_points, g.handle_length, max_sweep=0.02, step=0.02, rng=rng)
        for _ in range(2)
    )
    assert total >= 3

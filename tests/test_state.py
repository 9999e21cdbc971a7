import math

import numpy as np
import pytest

from bezierblob.config import BlobConfig, InvalidConfigurationError
from bezierblob.model.state import Action, BlobSession


def test_create_uses_defaults() -> None:
    s = BlobSession.create()
    assert s.shape.point_count == BlobConfig().point_count
    assert s.toggles() == {
        "animating": False,
        "rotating": False,
        "fill": False,
        "draw_markers": True,
        "draw_connections": True,
    }
    assert s.captured is None


def test_create_rejects_invalid_config() -> None:
    with pytest.raises(InvalidConfigurationError):
        BlobSession.create(BlobConfig(point_count=2))


@pytest.mark.parametrize(
    "kwargs",
    [{"point_count": 4.0}, {"pick_radius": float("nan")}, {"marker_radius": float("nan")}],
)
def test_create_rejects_non_integer_count_and_nan_radii(kwargs) -> None:
    with pytest.raises(InvalidConfigurationError):
        BlobSession.create(BlobConfig(**kwargs))


@pytest.mark.parametrize("action", list(Action))
def test_toggle_twice_is_identity(session, action) -> None:
    before = session.toggles()
    session.apply(action)
    assert session.toggles() != before
    session.apply(action)
    assert session.toggles() == before


def test_overlay_toggle_flips_markers_and_connections_together(session) -> None:
    session.apply(Action.TOGGLE_OVERLAYS)
    assert not session.draw_markers
    assert not session.draw_connections


def test_tick_without_animation_leaves_shape_alone(session) -> None:
    before = session.shape.control_positions()
    for _ in range(50):
        session.tick()
    np.testing.assert_array_equal(session.shape.control_positions(), before)
    assert session.rotation == 0.0
    assert session.frame == 50


def test_tick_with_animation_moves_control_points(session) -> None:
    before = session.shape.control_positions()
    session.apply(Action.TOGGLE_ANIMATION)
    for _ in range(50):
        session.tick()
    assert not np.allclose(session.shape.control_positions(), before)
    assert session.shape.is_consistent()


def test_rotation_advances_by_step() -> None:
    s = BlobSession.create(BlobConfig(rotation_reverse_probability=0.0, seed=1))
    s.apply(Action.TOGGLE_ROTATION)
    for _ in range(10):
        s.tick()
    assert s.rotation == pytest.approx(10 * s.config.rotation_step)
    assert s.rotation_direction == 1


def test_rotation_reverses_with_certain_probability() -> None:
    s = BlobSession.create(BlobConfig(rotation_reverse_probability=1.0, seed=1))
    s.apply(Action.TOGGLE_ROTATION)
    s.tick()
    assert s.rotation == pytest.approx(s.config.rotation_step)
    assert s.rotation_direction == -1
    s.tick()
    assert s.rotation == pytest.approx(0.0)
    assert s.rotation_direction == 1


def test_drag_round_trip(session) -> None:
    target = session.shape.control_point(2)
    assert session.pointer_down(target.x + 3.0, target.y - 4.0) == 2
    assert session.captured == 2

    assert session.pointer_move(123.5, -7.25)
    assert (target.x, target.y) == (123.5, -7.25)

    session.pointer_up()
    assert session.captured is None
    assert not session.pointer_move(0.0, 0.0)
    assert (target.x, target.y) == (123.5, -7.25)


def test_pointer_down_on_empty_space_captures_nothing(session) -> None:
    assert session.pointer_down(0.0, 0.0) is None
    assert session.captured is None
    assert not session.pointer_move(10.0, 10.0)


def test_only_one_point_captured_at_a_time(session) -> None:
    a = session.shape.control_point(0)
    b = session.shape.control_point(5)
    session.pointer_down(a.x, a.y)
    session.pointer_down(b.x, b.y)
    assert session.captured == 5
    session.pointer_move(1.0, 2.0)
    assert (b.x, b.y) == (1.0, 2.0)
    assert not a.detached


def test_surface_to_shape_centres_the_origin(session) -> None:
    assert session.surface_to_shape(400.0, 300.0, 800.0, 600.0) == pytest.approx((0.0, 0.0))
    assert session.surface_to_shape(410.0, 295.0, 800.0, 600.0) == pytest.approx((10.0, -5.0))


def test_surface_to_shape_undoes_rotation(session) -> None:
    session.rotation = math.pi / 2
    # A shape point at (10, 0) is drawn at (0, 10) from the centre
    assert session.surface_to_shape(400.0, 310.0, 800.0, 600.0) == pytest.approx((10.0, 0.0), abs=1e-9)


def test_reset_restores_undeformed_shape(session) -> None:
    original = session.shape.control_positions()
    session.apply(Action.TOGGLE_ANIMATION)
    session.apply(Action.TOGGLE_FILL)
    for _ in range(30):
        session.tick()
    session.pointer_down(*session.shape.control_positions()[0])
    session.reset()
    assert session.captured is None
    assert not session.animating and not session.fill
    np.testing.assert_allclose(session.shape.control_positions(), original)

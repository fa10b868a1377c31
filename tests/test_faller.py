import pytest

from falling.entities.faller import Faller
from falling.geometry import Position


def make_faller(y: float, velocity: float = 100.0) -> Faller:
    return Faller(position=Position(50.0, y), velocity=velocity, size=20.0, playfield_height=700.0)


def test_falls_straight_down():
    f = make_faller(-20.0)
    f.advance(0.5)
    assert f.position.x == 50.0
    assert f.position.y == pytest.approx(30.0)
    assert f.is_dead is False


def test_reaching_bottom_exactly_is_still_alive():
    f = make_faller(650.0)
    f.advance(0.5)
    assert f.position.y == pytest.approx(700.0)
    assert f.is_dead is False


def test_dies_once_top_edge_passes_bottom():
    f = make_faller(690.0)
    f.advance(0.2)
    assert f.position.y > 700.0
    assert f.is_dead is True


def test_non_positive_dt_is_a_no_op():
    f = make_faller(10.0)
    f.advance(0.0)
    f.advance(-1.0)
    assert f.position.y == 10.0


def test_negative_velocity_rejected():
    with pytest.raises(ValueError):
        make_faller(0.0, velocity=-1.0)

from falling.collision import collides, squares_collide
from falling.geometry import Position, Square


def test_square_corners_order():
    sq = Square(1.0, 2.0, 3.0)
    assert sq.corners() == ((1.0, 2.0), (4.0, 2.0), (1.0, 5.0), (4.0, 5.0))


def test_square_contains_is_closed_box():
    sq = Square(0.0, 0.0, 10.0)
    assert sq.contains(0.0, 0.0)
    assert sq.contains(10.0, 10.0)
    assert sq.contains(5.0, 10.0)
    assert not sq.contains(10.01, 5.0)
    assert not sq.contains(5.0, -0.01)


def test_identical_squares_collide():
    assert collides(Position(5, 5), 10, Position(5, 5), 10) is True


def test_small_inside_large_both_orderings():
    small, large = Position(3, 3), Position(0, 0)
    # a smaller -> a's corners tested
    assert collides(small, 2, large, 10) is True
    # b smaller -> b's corners tested
    assert collides(large, 10, small, 2) is True


def test_large_corners_alone_would_miss_contained_square():
    # None of the large square's corners lie inside the small one
    large = Square(0, 0, 10)
    small = Square(4, 4, 2)
    assert not any(small.contains(x, y) for x, y in large.corners())
    assert squares_collide(large, small) is True


def test_edge_contact_counts_as_hit():
    assert collides(Position(0, 0), 10, Position(10, 0), 10) is True
    assert collides(Position(0, 0), 10, Position(10, 10), 5) is True


def test_separated_squares_do_not_collide():
    assert collides(Position(0, 0), 10, Position(10.5, 0), 10) is False
    assert collides(Position(0, 0), 10, Position(0, 20), 30) is False
    assert collides(Position(0, 0), 30, Position(31, 31), 5) is False


def test_symmetry_over_mixed_cases():
    cases = [
        (Position(0, 0), 10, Position(5, 5), 3),
        (Position(0, 0), 3, Position(2, 2), 10),
        (Position(100, 50), 30, Position(120, 70), 30),
        (Position(100, 50), 30, Position(131, 50), 12),
        (Position(-5, -5), 8, Position(0, 0), 40),
        (Position(335, 660), 30, Position(340, 640), 25),
    ]
    for a_pos, a_size, b_pos, b_size in cases:
        assert collides(a_pos, a_size, b_pos, b_size) == collides(b_pos, b_size, a_pos, a_size)

"""Tests for domain models to verify they work correctly."""

import pytest

from outliner.domain import Point, Shape


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(1.5, -2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.0, 2.0).to_tuple() == (1.0, 2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    def test_point_is_plain_data(self) -> None:
        """Test points carry no distance or dict helpers of their own."""
        for name in ("distance_to", "to_dict", "from_dict"):
            assert not hasattr(Point, name)
            assert not hasattr(Shape, name)


class TestShape:
    """Tests for Shape class."""

    def test_from_points_accepts_tuples(self) -> None:
        """Tuples are converted to Points in order."""
        shape = Shape.from_points([(0, 0), (1, 0), (1, 1)])
        assert shape.points == (Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0))
        assert isinstance(shape.points[0].x, float)

    def test_from_points_accepts_points(self) -> None:
        """Existing Points are kept as they are."""
        p = Point(2.0, 3.0)
        shape = Shape.from_points([p])
        assert shape.points[0] is p

    def test_empty_shape(self) -> None:
        """Default shape is empty."""
        shape = Shape()
        assert shape.is_empty()
        assert len(shape) == 0
        assert list(shape) == []

    def test_len_and_iter(self) -> None:
        """Shape behaves as a sized iterable of points."""
        shape = Shape.from_points([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert len(shape) == 4
        assert [p.x for p in shape] == [0.0, 1.0, 1.0, 0.0]

    def test_closing_point_not_stored(self) -> None:
        """A square has four stored points; the closing edge is implicit."""
        shape = Shape.from_points([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert shape.points[-1] != shape.points[0]

    def test_shape_immutable(self) -> None:
        """Test that shape is immutable."""
        shape = Shape.from_points([(0, 0), (1, 0)])
        with pytest.raises(AttributeError):
            shape.points = ()  # type: ignore

    def test_shape_equality(self) -> None:
        """Shapes with the same points compare equal."""
        assert Shape.from_points([(0, 0), (1, 1)]) == Shape.from_points([(0.0, 0.0), (1.0, 1.0)])

    def test_to_tuples(self) -> None:
        """Points convert to plain tuples."""
        shape = Shape.from_points([(0, 0), (2, 1)])
        assert shape.to_tuples() == [(0.0, 0.0), (2.0, 1.0)]

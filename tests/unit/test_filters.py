"""Unit tests for duplicate and collinear point filters."""

from outliner.core.filters import (
    find_corner_index,
    remove_collinear_points,
    remove_duplicate_points,
)
from outliner.domain import Point


def pts(*coords: tuple[float, float]) -> list[Point]:
    """Build a point list from coordinate pairs."""
    return [Point(float(x), float(y)) for x, y in coords]


class TestRemoveDuplicatePoints:
    """Tests for remove_duplicate_points."""

    def test_empty(self):
        """Test empty input returns an empty list."""
        assert remove_duplicate_points([]) == []

    def test_single_point(self):
        """Test a single point is kept."""
        assert remove_duplicate_points(pts((1, 1))) == pts((1, 1))

    def test_near_duplicate_removed(self):
        """Test a point within tolerance is removed."""
        points = pts((0, 0), (0, 0.00005), (1, 0))
        assert remove_duplicate_points(points) == pts((0, 0), (1, 0))

    def test_exact_duplicates_removed(self):
        """Test exact repeats are removed."""
        points = pts((0, 0), (0, 0), (1, 0), (1, 0), (1, 1))
        assert remove_duplicate_points(points) == pts((0, 0), (1, 0), (1, 1))

    def test_compares_against_last_kept_point(self):
        """A slow drift is kept once it moves beyond tolerance of the kept point."""
        points = pts((0, 0), (0.00006, 0), (0.00012, 0))
        assert remove_duplicate_points(points) == pts((0, 0), (0.00012, 0))

    def test_distance_equal_to_tolerance_is_duplicate(self):
        """Only distances strictly greater than tolerance are kept."""
        points = pts((0, 0), (0, 1), (0, 2))
        assert remove_duplicate_points(points, tolerance=1.0) == pts((0, 0), (0, 2))

    def test_first_point_always_kept(self):
        """Test the first point survives a run of duplicates."""
        points = pts((5, 5), (5, 5), (5, 5))
        assert remove_duplicate_points(points) == pts((5, 5))

    def test_does_not_modify_input(self):
        """Test the input list is left untouched."""
        points = pts((0, 0), (0, 0), (1, 0))
        original = list(points)
        remove_duplicate_points(points)
        assert points == original

    def test_closing_duplicate_not_removed(self):
        """Only consecutive points are compared, never last against first."""
        points = pts((0, 0), (1, 0), (1, 1), (0, 0))
        assert remove_duplicate_points(points) == points


class TestRemoveCollinearPoints:
    """Tests for remove_collinear_points."""

    def test_two_points_pass_through(self):
        """Test two points pass through."""
        points = pts((0, 0), (1, 0))
        assert remove_collinear_points(points) == points

    def test_empty(self):
        """Test empty input returns an empty list."""
        assert remove_collinear_points([]) == []

    def test_interior_collinear_point_removed(self):
        """Test a point on a straight run is removed."""
        points = pts((0, 0), (1, 0), (2, 0), (2, 1))
        assert remove_collinear_points(points) == pts((0, 0), (2, 0), (2, 1))

    def test_uses_original_neighbours(self):
        """Every interior point of a straight run is tested and dropped."""
        points = pts((0, 0), (1, 0), (2, 0), (3, 0))
        assert remove_collinear_points(points) == pts((0, 0), (3, 0))

    def test_endpoints_always_kept(self):
        """Test first and last points are always kept."""
        points = pts((0, 0), (1, 0), (2, 0))
        result = remove_collinear_points(points)
        assert result[0] == points[0]
        assert result[-1] == points[-1]

    def test_small_bend_within_tolerance_removed(self):
        """Cross product 0.0008 is within the default 0.001 tolerance."""
        points = pts((0, 0), (1, 0.0004), (2, 0))
        assert remove_collinear_points(points) == pts((0, 0), (2, 0))

    def test_bend_beyond_tolerance_kept(self):
        """Test a bend above tolerance is kept."""
        points = pts((0, 0), (1, 0.01), (2, 0))
        assert remove_collinear_points(points) == points

    def test_wrap_edge_not_evaluated(self):
        """A vertex in the middle of the closing edge survives."""
        points = pts((0, -1), (1, -1), (1, 1), (-1, 1), (-1, -1))
        assert remove_collinear_points(points) == points

    def test_never_increases_count(self):
        """Test the filter never adds points."""
        points = pts((0, 0), (1, 0), (2, 1), (3, 1), (4, 1), (4, 5))
        assert len(remove_collinear_points(points)) <= len(points)


class TestFindCornerIndex:
    """Tests for find_corner_index."""

    def test_first_point_is_corner(self):
        """Test index 0 when the loop starts at a corner."""
        points = pts((0, 0), (1, 0), (1, 1), (0, 1))
        assert find_corner_index(points) == 0

    def test_skips_mid_edge_start(self):
        """Loop starting mid-edge finds the next real corner."""
        points = pts((0, -1), (1, -1), (1, 1), (-1, 1), (-1, -1))
        assert find_corner_index(points) == 1

    def test_flat_loop_has_no_corner(self):
        """Test a flat loop has no corner."""
        assert find_corner_index(pts((0, 0), (1, 0), (2, 0))) is None

    def test_too_few_points(self):
        """Test fewer than three points have no corner."""
        assert find_corner_index(pts((0, 0), (1, 1))) is None

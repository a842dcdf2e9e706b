# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Tests for segment against triangle intersection."""

import numpy as np
import pytest

from segment_geometry import (
    DegenerateGeometryError,
    EIntersections,
    LineSegment,
    Triangle,
)


@pytest.fixture
def triangle():
    """Right triangle in the xy plane."""
    return Triangle([0, 0, 0], [4, 0, 0], [0, 4, 0])


class TestCrossing:
    """Segments that are not coplanar with the triangle."""

    def test_reference_scenario(self):
        triangle = Triangle([1, 1, 1], [4, 2, 3], [5, 2, 0])
        segment = LineSegment([3, 3, 1], [6, 0, 1])

        assert segment.intersects(triangle)

        kind, point = segment.intersection_point(triangle)
        assert kind is EIntersections.ONE
        assert triangle.contains_point(point)

    def test_through_interior(self, triangle):
        kind, point = LineSegment([1, 1, -1], [1, 1, 1]).intersection_point(triangle)

        assert kind is EIntersections.ONE
        np.testing.assert_allclose(point, [1, 1, 0], atol=1e-12)

    def test_through_edge_counts(self, triangle):
        kind, point = LineSegment([2, 0, -1], [2, 0, 1]).intersection_point(triangle)

        assert kind is EIntersections.ONE
        np.testing.assert_allclose(point, [2, 0, 0], atol=1e-12)

    def test_plane_hit_outside_triangle(self, triangle):
        segment = LineSegment([5, 5, -1], [5, 5, 1])

        assert not segment.intersects(triangle)
        result = segment.intersection_points(triangle)
        assert result.kind is EIntersections.NONE
        np.testing.assert_array_equal(result.first, [0, 0, 0])
        np.testing.assert_array_equal(result.second, [0, 0, 0])

    def test_does_not_reach_plane(self, triangle):
        assert not LineSegment([1, 1, 1], [1, 1, 2]).intersects(triangle)


class TestCoplanar:
    """Segments lying in the triangle plane."""

    def test_endpoints_on_two_vertices(self, triangle):
        result = LineSegment([0, 0, 0], [4, 0, 0]).intersection_points(triangle)

        assert result.kind is EIntersections.TWO
        np.testing.assert_allclose(result.first, [0, 0, 0])
        np.testing.assert_allclose(result.second, [4, 0, 0])

    def test_crossing_through(self, triangle):
        result = LineSegment([-1, 1, 0], [5, 1, 0]).intersection_points(triangle)

        assert result.kind is EIntersections.TWO
        np.testing.assert_allclose(result.first, [0, 1, 0], atol=1e-9)
        np.testing.assert_allclose(result.second, [3, 1, 0], atol=1e-9)

    def test_points_ordered_from_start(self, triangle):
        result = LineSegment([5, 1, 0], [-1, 1, 0]).intersection_points(triangle)

        assert result.kind is EIntersections.TWO
        np.testing.assert_allclose(result.first, [3, 1, 0], atol=1e-9)
        np.testing.assert_allclose(result.second, [0, 1, 0], atol=1e-9)

    def test_one_end_inside(self, triangle):
        result = LineSegment([-1, 1, 0], [1, 1, 0]).intersection_points(triangle)

        assert result.kind is EIntersections.ONE
        np.testing.assert_allclose(result.first, [0, 1, 0], atol=1e-9)

    def test_strictly_inside(self, triangle):
        segment = LineSegment([1, 1, 0], [2, 1, 0])

        assert segment.intersects(triangle)
        assert segment.intersection_points(triangle).kind is EIntersections.INFINITE

    def test_touching_a_vertex(self, triangle):
        result = LineSegment([-1, -1, 0], [0, 0, 0]).intersection_points(triangle)

        assert result.kind is EIntersections.ONE
        np.testing.assert_allclose(result.first, [0, 0, 0])

    def test_missing(self, triangle):
        segment = LineSegment([-2, -1, 0], [-1, -2, 0])

        assert not segment.intersects(triangle)
        assert segment.intersection_points(triangle).kind is EIntersections.NONE


class TestCoplanarThroughInterior:
    """Segments entering at the boundary and leaving through another edge."""

    @pytest.mark.parametrize("start, end", [
        ([0, 0, 0], [2, 2, 0]),
        ([2, 0, 0], [1, 3, 0]),
    ])
    def test_boundary_to_boundary(self, triangle, start, end):
        result = LineSegment(start, end).intersection_points(triangle)

        assert result.kind is EIntersections.TWO
        np.testing.assert_allclose(result.first, start, atol=1e-9)
        np.testing.assert_allclose(result.second, end, atol=1e-9)


class TestProperties:
    """Swap invariance and agreement between the query variants."""

    @pytest.mark.parametrize("start, end", [
        ([1, 1, -1], [1, 1, 1]),
        ([2, 0, -1], [2, 0, 1]),
        ([5, 5, -1], [5, 5, 1]),
        ([-1, 1, 0], [5, 1, 0]),
        ([-1, 1, 0], [1, 1, 0]),
        ([1, 1, 0], [2, 1, 0]),
        ([0, 0, 0], [4, 0, 0]),
    ])
    def test_swap_and_agreement(self, triangle, start, end):
        segment = LineSegment(start, end)
        result = segment.intersection_points(triangle)
        swapped = segment.reversed().intersection_points(triangle)

        assert result.kind is swapped.kind
        if result.kind is EIntersections.ONE:
            np.testing.assert_allclose(result.first, swapped.first, atol=1e-9)

        kind, first = segment.intersection_point(triangle)
        assert kind is result.kind
        np.testing.assert_array_equal(first, result.first)
        assert segment.intersects(triangle) == (kind is not EIntersections.NONE)


class TestPreconditions:
    """Degenerate triangles and segments."""

    def test_collinear_triangle_strict_raises(self):
        triangle = Triangle([0, 0, 0], [1, 1, 1], [2, 2, 2])
        with pytest.raises(DegenerateGeometryError):
            LineSegment([0, 0, 1], [0, 0, -1]).intersects(triangle)

    def test_collinear_triangle_relaxed_is_empty(self, relaxed):
        triangle = Triangle([0, 0, 0], [1, 1, 1], [2, 2, 2])
        segment = LineSegment([0, 0, 1], [0, 0, -1])

        assert segment.intersects(triangle, relaxed) is False
        assert segment.intersection_points(triangle, relaxed).kind is EIntersections.NONE

    def test_degenerate_segment_relaxed_is_point_containment(self, triangle, relaxed):
        inside = LineSegment([1, 1, 0], [1, 1, 0])
        outside = LineSegment([5, 5, 0], [5, 5, 0])
        above = LineSegment([1, 1, 1], [1, 1, 1])

        kind, point = inside.intersection_point(triangle, relaxed)
        assert kind is EIntersections.ONE
        np.testing.assert_array_equal(point, [1, 1, 0])

        assert not outside.intersects(triangle, relaxed)
        assert not above.intersects(triangle, relaxed)

    def test_degenerate_segment_strict_raises(self, triangle):
        with pytest.raises(DegenerateGeometryError):
            LineSegment([1, 1, 0], [1, 1, 0]).intersects(triangle)


class TestTriangle:
    """Triangle value type."""

    def test_plane_is_normalized(self, triangle):
        plane = triangle.plane()
        assert plane.length() == pytest.approx(1.0)
        assert plane.contains([1, 2, 0])

    def test_contains_point_is_boundary_inclusive(self, triangle):
        assert triangle.contains_point([0, 0, 0])
        assert triangle.contains_point([2, 2, 0])
        assert not triangle.contains_point([3, 3, 0])

    def test_degenerate(self):
        assert Triangle([0, 0, 0], [0, 0, 0], [1, 0, 0]).is_degenerate()
        assert not Triangle([0, 0, 0], [1, 0, 0], [0, 1, 0]).is_degenerate()

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


"""
Segment against triangle, and against any convex planar polygon.

The segment is first intersected with the supporting plane. A single
crossing point is kept if it lies inside the closed polygon. When the
segment lies in the plane it is clipped against the polygon edges and the
overlap is classified by how many of its ends touch the polygon boundary.
"""

import numpy as np

from . import config as _config
from .plane_classifier import check_segment, crossing_point, endpoint_values
from .preconditions import check
from .relations import EIntersections, IntersectionResult
from .tolerance import is_zero, points_equal, xyz, zero_like


def _edge_half_planes(polygon, normal):
    """
    Inward unit normals of the polygon edges within its plane.

    Returns a list of (edge start, inward normal, edge end) tuples. Winding
    is taken from the polygon centroid so either vertex order works.
    """
    centroid = np.mean(polygon, axis=0)
    half_planes = []
    count = len(polygon)
    for i in range(count):
        p = polygon[i]
        q = polygon[(i + 1) % count]
        inward = np.cross(normal, q - p)
        length = np.linalg.norm(inward)
        if length == 0.0:
            continue
        inward = inward / length
        if np.dot(inward, centroid - p) < 0.0:
            inward = -inward
        half_planes.append((p, inward, q))
    return half_planes


def _inside(point, half_planes, epsilon):
    p = xyz(point)
    return all(np.dot(inward, p - start) >= -epsilon for start, inward, _ in half_planes)


def _on_boundary(point, half_planes, epsilon):
    p = xyz(point)
    return any(is_zero(np.dot(inward, p - start), epsilon) for start, inward, _ in half_planes)


def _snap(point, segment, epsilon):
    """Replace points within tolerance of an endpoint by the endpoint itself."""
    if points_equal(point, segment.start, epsilon):
        return segment.start.copy()
    if points_equal(point, segment.end, epsilon):
        return segment.end.copy()
    return point


def _coplanar_overlap(segment, half_planes, epsilon):
    """
    Clip a segment lying in the polygon plane against the polygon edges.

    Parametric clipping of t in [0, 1] against every edge half-plane.
    """
    zero = zero_like(segment.start)
    start = xyz(segment.start)
    direction = xyz(segment.end) - start
    segment_length = np.linalg.norm(direction)
    t_epsilon = epsilon / segment_length

    t0, t1 = 0.0, 1.0
    for edge_start, inward, _ in half_planes:
        value = np.dot(inward, start - edge_start)
        rate = np.dot(inward, direction)

        if abs(rate) <= epsilon:
            # Parallel to the edge line
            if value < -epsilon:
                return IntersectionResult(EIntersections.NONE, zero, zero.copy())
            continue

        t_hit = -value / rate
        if rate > 0.0:
            t0 = max(t0, t_hit)
        else:
            t1 = min(t1, t_hit)

    if t0 > t1 + t_epsilon:
        return IntersectionResult(EIntersections.NONE, zero, zero.copy())

    def point_at(t):
        return _snap(segment.start + t * (segment.end - segment.start), segment, epsilon)

    if t1 - t0 <= t_epsilon:
        return IntersectionResult(EIntersections.ONE, point_at(0.5 * (t0 + t1)), zero)

    first = point_at(t0)
    second = point_at(t1)
    first_on_boundary = _on_boundary(first, half_planes, epsilon)
    second_on_boundary = _on_boundary(second, half_planes, epsilon)

    if first_on_boundary and second_on_boundary:
        return IntersectionResult(EIntersections.TWO, first, second)
    if first_on_boundary:
        return IntersectionResult(EIntersections.ONE, first, zero)
    if second_on_boundary:
        return IntersectionResult(EIntersections.ONE, second, zero)
    return IntersectionResult(EIntersections.INFINITE, zero, zero.copy())


def convex_polygon_intersection(segment, polygon, plane, epsilon):
    """
    Intersect a non-degenerate segment with a convex planar polygon.

    Args:
        segment : LineSegment
            Segment to test
        polygon : list
            Polygon vertices in cyclic order
        plane : Plane
            Normalized supporting plane of the polygon
        epsilon : float
            Tolerance for every comparison

    Returns
    -------
    IntersectionResult
        Points ordered by increasing distance from the segment start

    """
    vertices = [xyz(np.asarray(vertex, dtype=float)) for vertex in polygon]
    half_planes = _edge_half_planes(vertices, plane.normal)

    dist_a, dist_b = endpoint_values(segment, plane)
    kind, point = crossing_point(segment, dist_a, dist_b, epsilon)

    if kind is EIntersections.NONE:
        return IntersectionResult(EIntersections.NONE, point, zero_like(point))

    if kind is EIntersections.ONE:
        if _inside(point, half_planes, epsilon):
            return IntersectionResult(EIntersections.ONE, point, zero_like(point))
        zero = zero_like(point)
        return IntersectionResult(EIntersections.NONE, zero, zero.copy())

    return _coplanar_overlap(segment, half_planes, epsilon)


def degenerate_polygon_intersection(segment, polygon, plane, epsilon):
    """Point fallback for a zero length segment: its start either touches the polygon or not."""
    point = segment.start
    zero = zero_like(point)
    vertices = [xyz(np.asarray(vertex, dtype=float)) for vertex in polygon]
    half_planes = _edge_half_planes(vertices, plane.normal)

    if is_zero(plane.evaluate(point), epsilon) and _inside(point, half_planes, epsilon):
        return IntersectionResult(EIntersections.ONE, point.copy(), zero)
    return IntersectionResult(EIntersections.NONE, zero, zero.copy())


def intersection_points(segment, triangle, config=None):
    """
    Compute up to two intersection points between a segment and a triangle.

    Returns
    -------
    IntersectionResult
        - ONE: the segment crosses or touches the triangle in one point
        - TWO: the segment lies in the triangle plane and enters and leaves
          through the boundary (ordered from the segment start)
        - INFINITE: the segment lies inside the triangle without touching
          the boundary
        - NONE: no contact

    """
    cfg = _config.resolve(config)
    epsilon = cfg.epsilon
    zero = zero_like(segment.start)

    if not check(not triangle.is_degenerate(epsilon),
                 "Vertices of the triangle must not coincide or be collinear", cfg):
        return IntersectionResult(EIntersections.NONE, zero, zero.copy())

    plane = triangle.plane(cfg)

    if not check_segment(segment, cfg):
        return degenerate_polygon_intersection(segment, triangle.vertices(), plane, epsilon)

    return convex_polygon_intersection(segment, triangle.vertices(), plane, epsilon)


def intersection_point(segment, triangle, config=None):
    """Intersection with a triangle reporting only the point closest to the segment start."""
    kind, first, _ = intersection_points(segment, triangle, config)
    return kind, first


def intersects(segment, triangle, config=None):
    """Check whether a segment touches a triangle (edges and vertices included)."""
    return intersection_points(segment, triangle, config).kind is not EIntersections.NONE

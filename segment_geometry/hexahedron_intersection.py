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


"""Segment against hexahedron, tested face by face."""

import logging

import numpy as np

from . import config as _config
from .hexahedron import face_plane
from .plane_classifier import check_segment
from .preconditions import check
from .relations import EIntersections, IntersectionResult
from .tolerance import points_equal, squared_distance, xyz, zero_like
from .triangle_intersection import convex_polygon_intersection

logger = logging.getLogger(__name__)


def _parameter(segment, point):
    """Position of a point of the segment as a fraction of its length from the start."""
    direction = xyz(segment.end) - xyz(segment.start)
    return float(np.dot(xyz(point) - xyz(segment.start), direction) / squared_distance(segment.end, segment.start))


def _face_contacts(segment, hexahedron, epsilon):
    """
    Collect distinct contact points between the segment and the faces.

    Returns
    -------
    list or None
        Contact points, or None when the segment lies in a face and
        overlaps it in more than a boundary crossing.

    """
    points = []
    for quad in hexahedron.faces():
        vertices = [xyz(vertex) for vertex in quad]
        plane = face_plane(vertices, epsilon)
        if plane is None:
            continue

        result = convex_polygon_intersection(segment, vertices, plane, epsilon)
        if result.kind is EIntersections.INFINITE:
            return None

        if result.kind is EIntersections.ONE:
            candidates = (result.first,)
        elif result.kind is EIntersections.TWO:
            candidates = (result.first, result.second)
        else:
            candidates = ()

        for candidate in candidates:
            if not any(points_equal(candidate, point, epsilon) for point in points):
                points.append(candidate)
    return points


def intersection_points(segment, hexahedron, config=None):
    """
    Compute where a segment enters and leaves a hexahedron.

    Args:
        segment : LineSegment
            Segment to test
        hexahedron : Hexahedron
            Convex solid
        config : GeometryConfig, optional
            Tolerance and precondition policy

    Returns
    -------
    IntersectionResult
        - ONE: a single surface contact
        - TWO: two distinct surface contacts, ordered from the segment start
        - INFINITE: the segment overlaps a face, or lies wholly inside the
          solid without touching its surface
        - NONE: no contact

    """
    cfg = _config.resolve(config)
    epsilon = cfg.epsilon
    zero = zero_like(segment.start)

    if not check(not hexahedron.is_degenerate(epsilon),
                 "The vertices of the hexahedron must not coincide", cfg):
        return IntersectionResult(EIntersections.NONE, zero, zero.copy())

    if not check_segment(segment, cfg):
        if hexahedron.contains(segment.start, epsilon):
            return IntersectionResult(EIntersections.ONE, segment.start.copy(), zero)
        return IntersectionResult(EIntersections.NONE, zero, zero.copy())

    points = _face_contacts(segment, hexahedron, epsilon)
    if points is None:
        return IntersectionResult(EIntersections.INFINITE, zero, zero.copy())

    points.sort(key=lambda point: _parameter(segment, point))
    if len(points) > 2:
        logger.debug("%d contact points found, keeping the outermost pair", len(points))
        points = [points[0], points[-1]]

    if len(points) == 2:
        return IntersectionResult(EIntersections.TWO, points[0], points[1])
    if len(points) == 1:
        return IntersectionResult(EIntersections.ONE, points[0], zero)

    if hexahedron.contains(segment.start, epsilon) and hexahedron.contains(segment.end, epsilon):
        return IntersectionResult(EIntersections.INFINITE, zero, zero.copy())
    return IntersectionResult(EIntersections.NONE, zero, zero.copy())


def intersection_point(segment, hexahedron, config=None):
    """Intersection with a hexahedron reporting only the contact closest to the segment start."""
    kind, first, _ = intersection_points(segment, hexahedron, config)
    return kind, first


def intersects(segment, hexahedron, config=None):
    """Check whether a segment touches or lies inside a hexahedron."""
    return intersection_points(segment, hexahedron, config).kind is not EIntersections.NONE

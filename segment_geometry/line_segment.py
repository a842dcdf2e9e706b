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


"""LineSegment - finite 3D segment and its queries against planes, triangles and hexahedra."""

import numpy as np

from . import config as _config
from . import hexahedron_intersection, plane_classifier, transforms, triangle_intersection
from .hexahedron import Hexahedron
from .plane import Plane
from .relations import IntersectionResult
from .tolerance import as_point, points_equal, xyz, zero_like
from .triangle import Triangle


class LineSegment:
    """
    Represent a 3D line segment defined by start and end points.

    Pure geometry class with no application-specific logic. Endpoints are
    [x, y, z] or homogeneous [x, y, z, w] points; the w component is carried
    through every query unchanged. A segment whose endpoints coincide is
    degenerate and violates the preconditions of the intersection queries.
    """

    def __init__(self, start, end):
        """
        Initialize line segment from start and end points.

        Args:
            start: Start point [x, y, z] or [x, y, z, w]
            end: End point of the same dimension

        Raises
        ------
        ValueError
            If points are not 3D or 4D, or their dimensions differ

        """
        self.start = as_point(start)
        self.end = as_point(end)

        if self.start.shape != self.end.shape:
            raise ValueError("Start and end must have the same number of components")

    @classmethod
    def unit_line(cls):
        """Segment from the origin to [1, 0, 0]."""
        return cls([0.0, 0.0, 0.0], [1.0, 0.0, 0.0])

    @classmethod
    def zero(cls):
        return cls([0.0, 0.0, 0.0], [0.0, 0.0, 0.0])

    def copy(self):
        return LineSegment(self.start.copy(), self.end.copy())

    def reversed(self):
        """Return the segment running from end to start."""
        return LineSegment(self.end.copy(), self.start.copy())

    def length(self):
        """Calculate segment length."""
        return float(np.linalg.norm(xyz(self.end) - xyz(self.start)))

    def is_degenerate(self, epsilon=None):
        """Check whether both endpoints coincide within tolerance."""
        if epsilon is None:
            epsilon = _config.get_default_config().epsilon
        return points_equal(self.start, self.end, epsilon)

    def tangent(self):
        """
        Calculate normalized tangent vector along the segment.

        Returns
        -------
        np.ndarray
            Normalized 3D direction vector from start to end

        Raises
        ------
        ValueError
            If segment is degenerate (zero length)

        """
        length = self.length()
        if length < 1e-9:
            raise ValueError("Segment is degenerate (zero length)")
        return (xyz(self.end) - xyz(self.start)) / length

    def midpoint(self):
        """Calculate midpoint of the segment."""
        return (self.start + self.end) / 2.0

    def point_at(self, t):
        """
        Get point along segment at parameter t.

        Args:
            t: Parameter value (0 = start, 1 = end)

        Returns
        -------
        np.ndarray
            Point at parameter t

        """
        return self.start + t * (self.end - self.start)

    lerp = point_at

    def min_distance_to_point(self, point):
        """Distance from a point to the closest point of the segment."""
        p = xyz(as_point(point))
        a = xyz(self.start)
        direction = xyz(self.end) - a

        squared_length = np.dot(direction, direction)
        if squared_length == 0.0:
            return float(np.linalg.norm(p - a))

        t = np.clip(np.dot(p - a, direction) / squared_length, 0.0, 1.0)
        return float(np.linalg.norm(p - (a + t * direction)))

    def lengthen(self, factor):
        """
        Scale the segment about its midpoint, in place.

        A factor of 0 collapses both endpoints onto the midpoint; 1 leaves
        the segment untouched.
        """
        center = self.midpoint()
        self.start = center + factor * (self.start - center)
        self.end = center + factor * (self.end - center)

    def lengthen_from_start(self, factor):
        """Move the end point along the segment so that the length scales by factor."""
        self.end = self.start + factor * (self.end - self.start)

    def lengthen_from_end(self, factor):
        """Move the start point along the segment so that the length scales by factor."""
        self.start = self.end + factor * (self.start - self.end)

    # Intersection queries

    def intersects(self, shape, config=None):
        """
        Check whether the segment touches a plane, triangle or hexahedron.

        Args:
            shape : Plane, Triangle or Hexahedron
                Shape to test against
            config : GeometryConfig, optional
                Tolerance and precondition policy; the module default if None

        Returns
        -------
        bool
            True if the segment and the shape share at least one point

        """
        return _engine(shape).intersects(self, shape, config)

    def intersection_point(self, shape, config=None):
        """
        Compute the intersection closest to the segment start.

        Returns
        -------
        tuple
            (EIntersections, point); the point is the zero point unless the
            kind is ONE or TWO

        """
        return _engine(shape).intersection_point(self, shape, config)

    def intersection_points(self, shape, config=None):
        """
        Compute up to two intersection points.

        Returns
        -------
        IntersectionResult
            (kind, first, second) with the points ordered from the segment
            start and unused points set to the zero point

        """
        if isinstance(shape, Plane):
            kind, point = plane_classifier.intersection_point(self, shape, config)
            return IntersectionResult(kind, point, zero_like(self.start))
        return _engine(shape).intersection_points(self, shape, config)

    # Plane relations

    def max_distance(self, plane, config=None):
        return plane_classifier.max_distance(self, plane, config)

    def min_distance(self, plane, config=None):
        return plane_classifier.min_distance(self, plane, config)

    def project_to_plane(self, plane, config=None):
        return plane_classifier.project_to_plane(self, plane, config)

    def space_relation(self, plane, config=None):
        return plane_classifier.space_relation(self, plane, config)

    # Transforms

    def translate(self, x, y=None, z=None):
        """Return the segment moved by a vector, or by its x, y and z components."""
        vector = _components(x, y, z)
        return LineSegment(transforms.translate_point(self.start, vector),
                           transforms.translate_point(self.end, vector))

    def scale(self, x, y=None, z=None):
        """Return the segment scaled about the origin."""
        vector = _components(x, y, z)
        return LineSegment(transforms.scale_point(self.start, vector),
                           transforms.scale_point(self.end, vector))

    def rotate(self, rotation):
        """Return the segment rotated about the origin by a quaternion, 3x3 matrix or Rotation."""
        return LineSegment(transforms.rotate_point(self.start, rotation),
                           transforms.rotate_point(self.end, rotation))

    def transform(self, matrix):
        """Return the segment with a 4x4 or 4x3 affine matrix applied to both endpoints."""
        return LineSegment(transforms.transform_point(self.start, matrix),
                           transforms.transform_point(self.end, matrix))

    def scale_with_pivot(self, vector, pivot):
        return LineSegment(transforms.scale_point_with_pivot(self.start, vector, pivot),
                           transforms.scale_point_with_pivot(self.end, vector, pivot))

    def rotate_with_pivot(self, rotation, pivot):
        return LineSegment(transforms.rotate_point_with_pivot(self.start, rotation, pivot),
                           transforms.rotate_point_with_pivot(self.end, rotation, pivot))

    def transform_with_pivot(self, matrix, pivot):
        return LineSegment(transforms.transform_point_with_pivot(self.start, matrix, pivot),
                           transforms.transform_point_with_pivot(self.end, matrix, pivot))

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        epsilon = _config.get_default_config().epsilon
        return points_equal(self.start, other.start, epsilon) and points_equal(self.end, other.end, epsilon)

    def __repr__(self):
        """Return string representation of line segment."""
        return f"LineSegment(start={self.start.tolist()}, end={self.end.tolist()})"


def _components(x, y, z):
    if y is None and z is None:
        return x
    if y is None or z is None:
        raise ValueError("Either a vector or all three components must be given")
    return [x, y, z]


def _engine(shape):
    if isinstance(shape, Plane):
        return plane_classifier
    if isinstance(shape, Triangle):
        return triangle_intersection
    if isinstance(shape, Hexahedron):
        return hexahedron_intersection
    raise TypeError(f"Unsupported shape type: {type(shape).__name__}")

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


"""Triangle - three vertices in 3D space."""

import numpy as np

from . import config as _config
from .plane import Plane
from .tolerance import as_point, points_equal, xyz


class Triangle:
    """
    Represent a triangle by its vertices a, b and c.

    A triangle with coincident or collinear vertices is degenerate and
    violates the preconditions of the intersection queries.
    """

    def __init__(self, a, b, c):
        """
        Initialize triangle from three vertices.

        Args:
            a, b, c: Vertices [x, y, z] (or homogeneous [x, y, z, w])

        """
        self.a = as_point(a)
        self.b = as_point(b)
        self.c = as_point(c)

    def vertices(self):
        return (self.a, self.b, self.c)

    def edges(self):
        """Edges as (start, end) pairs in the order ab, bc, ca."""
        return ((self.a, self.b), (self.b, self.c), (self.c, self.a))

    def normal(self):
        """Unnormalized normal (b - a) x (c - a)."""
        return np.cross(xyz(self.b) - xyz(self.a), xyz(self.c) - xyz(self.a))

    def is_degenerate(self, epsilon=None):
        """Check for coincident or collinear vertices."""
        if epsilon is None:
            epsilon = _config.get_default_config().epsilon
        if (points_equal(self.a, self.b, epsilon) or points_equal(self.b, self.c, epsilon)
                or points_equal(self.c, self.a, epsilon)):
            return True
        return bool(np.allclose(self.normal(), 0.0, rtol=0.0, atol=epsilon))

    def plane(self, config=None):
        """Normalized supporting plane of the triangle."""
        return Plane.from_points(self.a, self.b, self.c, config)

    def contains_point(self, point, epsilon=None):
        """
        Check whether a point of the triangle's plane lies inside the triangle.

        Uses barycentric coordinates; edges and vertices count as inside.
        The point is assumed to be coplanar with the triangle.
        """
        if epsilon is None:
            epsilon = _config.get_default_config().epsilon
        return barycentric_inside(xyz(self.a), xyz(self.b), xyz(self.c), xyz(point), epsilon)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        epsilon = _config.get_default_config().epsilon
        return all(points_equal(p, q, epsilon) for p, q in zip(self.vertices(), other.vertices()))

    def __repr__(self):
        """Return string representation of triangle."""
        return f"Triangle(a={self.a.tolist()}, b={self.b.tolist()}, c={self.c.tolist()})"


def barycentric_inside(a, b, c, point, epsilon):
    """Closed barycentric containment test of a coplanar point in triangle abc."""
    v0 = c - a
    v1 = b - a
    v2 = point - a

    dot00 = np.dot(v0, v0)
    dot01 = np.dot(v0, v1)
    dot02 = np.dot(v0, v2)
    dot11 = np.dot(v1, v1)
    dot12 = np.dot(v1, v2)

    denom = dot00 * dot11 - dot01 * dot01
    if denom == 0.0:
        return False

    inv_denom = 1.0 / denom
    u = (dot11 * dot02 - dot01 * dot12) * inv_denom
    v = (dot00 * dot12 - dot01 * dot02) * inv_denom

    return bool(u >= -epsilon and v >= -epsilon and u + v <= 1.0 + epsilon)

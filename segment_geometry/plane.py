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


"""Plane - implicit plane ax + by + cz + d = 0."""

import numpy as np

from . import config as _config
from .preconditions import check
from .tolerance import as_point, is_zero, points_equal, xyz


class Plane:
    """
    Represent a plane by the coefficients of its equation ax + by + cz + d = 0.

    The normal (a, b, c) does not need to be unit length; sign tests are
    scale invariant and metric queries divide by the normal length. A plane
    whose normal is zero is null and violates the preconditions of every
    query that receives it.
    """

    def __init__(self, a, b, c, d):
        """
        Initialize plane from its equation coefficients.

        Args:
            a, b, c: Components of the normal vector
            d: Independent term

        """
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)
        self.d = float(d)

    @classmethod
    def from_points(cls, point1, point2, point3, config=None):
        """
        Build the normalized plane through three points.

        The normal follows (p1 - p2) x (p1 - p3). Coincident or collinear
        points violate the preconditions; in relaxed mode the null plane is
        returned.
        """
        p1 = xyz(as_point(point1))
        p2 = xyz(as_point(point2))
        p3 = xyz(as_point(point3))
        epsilon = _config.resolve(config).epsilon

        normal = np.cross(p1 - p2, p1 - p3)
        distinct = not (points_equal(p1, p2, epsilon) or points_equal(p2, p3, epsilon)
                        or points_equal(p3, p1, epsilon))
        if not check(distinct and not np.allclose(normal, 0.0, rtol=0.0, atol=epsilon),
                     "Plane points must not coincide or be collinear", config):
            return cls.null()

        return cls(normal[0], normal[1], normal[2], -np.dot(normal, p1)).normalize(config)

    @classmethod
    def from_point_and_normal(cls, point, normal):
        """Build the plane with the given normal passing through point."""
        p = xyz(as_point(point))
        n = np.array(normal, dtype=float)
        return cls(n[0], n[1], n[2], -np.dot(n, p))

    @classmethod
    def null(cls):
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def xy(cls):
        return cls(0.0, 0.0, 1.0, 0.0)

    @classmethod
    def yz(cls):
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def zx(cls):
        return cls(0.0, 1.0, 0.0, 0.0)

    @property
    def normal(self):
        """Normal vector (a, b, c), not necessarily unit length."""
        return np.array([self.a, self.b, self.c])

    def coefficients(self):
        return (self.a, self.b, self.c, self.d)

    def length(self):
        """Length of the normal vector."""
        return float(np.linalg.norm(self.normal))

    def squared_length(self):
        return self.a * self.a + self.b * self.b + self.c * self.c

    def is_null(self, epsilon=None):
        """Check whether the normal vector is zero within tolerance."""
        if epsilon is None:
            epsilon = _config.get_default_config().epsilon
        return is_zero(self.a, epsilon) and is_zero(self.b, epsilon) and is_zero(self.c, epsilon)

    def check_not_null(self, config=None):
        """Apply the null-plane precondition; False means relaxed fallback."""
        epsilon = _config.resolve(config).epsilon
        return check(not self.is_null(epsilon), "The plane must not be null", config)

    def normalize(self, config=None):
        """
        Return the equivalent plane with a unit normal.

        A null plane cannot be normalized; in relaxed mode it is returned
        unchanged.
        """
        if not self.check_not_null(config):
            return Plane(self.a, self.b, self.c, self.d)

        inv_length = 1.0 / self.length()
        return Plane(self.a * inv_length, self.b * inv_length,
                     self.c * inv_length, self.d * inv_length)

    def evaluate(self, point):
        """Value of the plane equation at point (signed, unnormalized)."""
        p = xyz(point)
        return self.a * p[0] + self.b * p[1] + self.c * p[2] + self.d

    def contains(self, point, config=None):
        """Check whether point satisfies the plane equation within tolerance."""
        self.check_not_null(config)
        return is_zero(self.evaluate(point), _config.resolve(config).epsilon)

    def point_distance(self, point, config=None):
        """
        Unsigned euclidean distance from point to the plane.

        Against a null plane (relaxed mode) the raw absolute equation value is
        returned.
        """
        value = abs(self.evaluate(point))
        if not self.check_not_null(config):
            return value
        return value / self.length()

    def point_projection(self, point, config=None):
        """
        Orthogonal projection of point onto the plane.

        Extra homogeneous components are kept. Projection onto a null plane
        (relaxed mode) returns the point unchanged.
        """
        projected = as_point(point)
        if not self.check_not_null(config):
            return projected

        factor = self.evaluate(projected) / self.squared_length()
        projected[:3] = projected[:3] - factor * self.normal
        return projected

    def __neg__(self):
        return Plane(-self.a, -self.b, -self.c, -self.d)

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        epsilon = _config.get_default_config().epsilon
        return bool(np.all(np.abs(np.array(self.coefficients()) - np.array(other.coefficients())) <= epsilon))

    def __repr__(self):
        """Return string representation of plane."""
        return f"Plane(a={self.a:.4f}, b={self.b:.4f}, c={self.c:.4f}, d={self.d:.4f})"

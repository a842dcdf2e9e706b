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


"""Hexahedron - convex solid with eight vertices and six quadrilateral faces."""

import numpy as np

from . import config as _config
from .plane import Plane
from .tolerance import as_point, points_equal, xyz

# Each face lists its four vertices followed by a vertex of the opposite face,
# which fixes the interior side of the face plane.
FACE_LAYOUT = (
    ('a', 'b', 'c', 'd', 'e'),
    ('e', 'f', 'g', 'h', 'a'),
    ('a', 'b', 'h', 'e', 'c'),
    ('b', 'c', 'g', 'h', 'a'),
    ('a', 'd', 'f', 'e', 'c'),
    ('c', 'd', 'f', 'g', 'a'),
)

EDGE_LAYOUT = (
    ('a', 'b'), ('b', 'c'), ('c', 'd'), ('d', 'a'),
    ('e', 'f'), ('f', 'g'), ('g', 'h'), ('h', 'e'),
    ('a', 'e'), ('b', 'h'), ('c', 'g'), ('d', 'f'),
)

_VERTEX_NAMES = ('a', 'b', 'c', 'd', 'e', 'f', 'g', 'h')


class Hexahedron:
    """
    Represent a convex hexahedron by its eight vertices.

    Top face is abcd and bottom face is efgh; a shares edges with b, d and e
    whereas g shares edges with c, f and h:

            a --- d
           /|    /|
          b --- c |
          | e --| f
          |/    |/
          h --- g

    The solid does not need to be axis aligned. It is degenerate when all
    eight vertices coincide.
    """

    def __init__(self, a, b, c, d, e, f, g, h):
        """Initialize hexahedron from its eight vertices."""
        self.a = as_point(a)
        self.b = as_point(b)
        self.c = as_point(c)
        self.d = as_point(d)
        self.e = as_point(e)
        self.f = as_point(f)
        self.g = as_point(g)
        self.h = as_point(h)

    @classmethod
    def from_diagonal(cls, a, g):
        """
        Build an axis aligned box from the two ends of an inner diagonal.

        Args:
            a: Vertex a (top face)
            g: Opposite vertex g (bottom face)

        """
        va = as_point(a)
        vg = as_point(g)

        b = va.copy()
        c = va.copy()
        d = va.copy()
        e = vg.copy()
        f = vg.copy()
        h = vg.copy()

        b[2] = c[2] = vg[2]
        c[0] = d[0] = vg[0]
        e[0] = h[0] = va[0]
        e[2] = f[2] = va[2]

        return cls(va, b, c, d, e, f, vg, h)

    @classmethod
    def from_center(cls, center, length_x, length_y, length_z):
        """Build an axis aligned box from its center and edge lengths."""
        a = as_point(center)
        a[0] -= length_x * 0.5
        a[1] += length_y * 0.5
        a[2] += length_z * 0.5

        b = a.copy()
        b[2] -= length_z
        c = b.copy()
        c[0] += length_x
        d = c.copy()
        d[2] = a[2]
        e = a.copy()
        e[1] -= length_y
        f = d.copy()
        f[1] = e[1]
        g = c.copy()
        g[1] = e[1]
        h = b.copy()
        h[1] = e[1]

        return cls(a, b, c, d, e, f, g, h)

    @classmethod
    def unit_cube(cls):
        """Axis aligned cube of edge 1 centered at the origin."""
        return cls.from_center([0.0, 0.0, 0.0], 1.0, 1.0, 1.0)

    def vertices(self):
        return tuple(getattr(self, name) for name in _VERTEX_NAMES)

    def faces(self):
        """Faces as 4-tuples of vertices in the order abcd, efgh, abhe, bcgh, adfe, cdfg."""
        return [tuple(getattr(self, name) for name in layout[:4]) for layout in FACE_LAYOUT]

    def edges(self):
        return [(getattr(self, p), getattr(self, q)) for p, q in EDGE_LAYOUT]

    def is_degenerate(self, epsilon=None):
        """Check whether all eight vertices coincide."""
        if epsilon is None:
            epsilon = _config.get_default_config().epsilon
        return all(points_equal(self.a, vertex, epsilon) for vertex in self.vertices()[1:])

    def planes(self, epsilon=None):
        """
        Face planes oriented so that the interior lies on the positive side.

        Faces whose vertices are all collinear have no plane and are skipped.
        """
        if epsilon is None:
            epsilon = _config.get_default_config().epsilon

        planes = []
        for layout in FACE_LAYOUT:
            quad = [xyz(getattr(self, name)) for name in layout[:4]]
            plane = face_plane(quad, epsilon)
            if plane is None:
                continue
            if plane.evaluate(getattr(self, layout[4])) < 0.0:
                plane = -plane
            planes.append(plane)
        return planes

    def contains(self, point, epsilon=None):
        """Check whether point lies inside or on the boundary of the solid."""
        if epsilon is None:
            epsilon = _config.get_default_config().epsilon
        return all(plane.evaluate(point) >= -epsilon for plane in self.planes(epsilon))

    def __eq__(self, other):
        if not isinstance(other, Hexahedron):
            return NotImplemented
        epsilon = _config.get_default_config().epsilon
        return all(points_equal(p, q, epsilon) for p, q in zip(self.vertices(), other.vertices()))

    def __repr__(self):
        """Return string representation of hexahedron."""
        return f"Hexahedron(a={self.a.tolist()}, g={self.g.tolist()})"


def face_plane(quad, epsilon):
    """
    Normalized plane through a planar polygon, or None if it has no area.

    The first vertex triple with a non-zero normal is used.
    """
    count = len(quad)
    for i in range(count):
        p0 = quad[i]
        p1 = quad[(i + 1) % count]
        p2 = quad[(i + 2) % count]
        normal = np.cross(p1 - p0, p2 - p0)
        length = np.linalg.norm(normal)
        if length > epsilon:
            normal = normal / length
            return Plane.from_point_and_normal(p0, normal)
    return None

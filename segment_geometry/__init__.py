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


"""Line segment intersection against planes, triangles and hexahedra."""

from .config import GeometryConfig, get_default_config, load_config, set_default_config
from .hexahedron import Hexahedron
from .line_segment import LineSegment
from .logging_config import setup_logging
from .plane import Plane
from .plane_classifier import (
    intersection_point as plane_intersection_point,
    intersects as plane_intersects,
    max_distance,
    min_distance,
    project_to_plane,
    space_relation,
)
from .preconditions import DegenerateGeometryError
from .relations import EIntersections, ESpaceRelation, IntersectionResult
from .triangle import Triangle


def intersects(segment, shape, config=None):
    """Check whether a segment touches a plane, triangle or hexahedron."""
    return segment.intersects(shape, config)


def intersection_point(segment, shape, config=None):
    """Intersection kind and the point closest to the segment start."""
    return segment.intersection_point(shape, config)


def intersection_points(segment, shape, config=None):
    """Intersection kind and up to two points ordered from the segment start."""
    return segment.intersection_points(shape, config)


__all__ = [
    'DegenerateGeometryError',
    'EIntersections',
    'ESpaceRelation',
    'GeometryConfig',
    'Hexahedron',
    'IntersectionResult',
    'LineSegment',
    'Plane',
    'Triangle',
    'get_default_config',
    'intersection_point',
    'intersection_points',
    'intersects',
    'load_config',
    'max_distance',
    'min_distance',
    'plane_intersection_point',
    'plane_intersects',
    'project_to_plane',
    'set_default_config',
    'setup_logging',
    'space_relation',
]

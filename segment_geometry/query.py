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


"""Query - one segment tested against one shape, with its evaluated result."""

from .hexahedron import Hexahedron
from .line_segment import LineSegment
from .plane import Plane
from .triangle import Triangle

SUPPORTED_TARGET_TYPES = ['plane', 'triangle', 'hexahedron']

# Transform steps are applied in this order
TRANSFORM_KEYS = ['scale', 'rotate', 'matrix', 'translate']


def build_target(target_dict, config=None):
    """
    Build the shape described by a YAML target mapping.

    Args:
        target_dict : dict
            Mapping with a 'type' key and the geometry of that type:
            - plane: 'coefficients' [a, b, c, d], optional 'normalize'
            - triangle: 'vertices' (3 points)
            - hexahedron: 'vertices' (8 points) or 'diagonal' (2 points)
        config : GeometryConfig, optional
            Policy used to normalize planes (module default if None)

    Returns
    -------
    Plane, Triangle or Hexahedron
        The described shape

    Raises
    ------
    ValueError
        If the type is unknown or its geometry is missing or malformed

    """
    target_type = str(target_dict.get('type', '')).lower()
    if target_type not in SUPPORTED_TARGET_TYPES:
        raise ValueError(f"Unsupported target type: '{target_dict.get('type')}'")

    if target_type == 'plane':
        coefficients = target_dict.get('coefficients')
        if coefficients is None or len(coefficients) != 4:
            raise ValueError("Plane target needs 'coefficients' [a, b, c, d]")
        plane = Plane(*coefficients)
        if target_dict.get('normalize', False):
            plane = plane.normalize(config)
        return plane

    if target_type == 'triangle':
        vertices = target_dict.get('vertices')
        if vertices is None or len(vertices) != 3:
            raise ValueError("Triangle target needs 3 'vertices'")
        return Triangle(*vertices)

    if 'diagonal' in target_dict:
        diagonal = target_dict['diagonal']
        if len(diagonal) != 2:
            raise ValueError("Hexahedron 'diagonal' needs 2 points")
        return Hexahedron.from_diagonal(*diagonal)

    vertices = target_dict.get('vertices')
    if vertices is None or len(vertices) != 8:
        raise ValueError("Hexahedron target needs 8 'vertices' or a 'diagonal'")
    return Hexahedron(*vertices)


def apply_transform(segment, transform_dict):
    """
    Apply the steps of a YAML transform mapping to a segment.

    Steps run in the order scale, rotate, matrix, translate. An optional
    'pivot' point is used by the scale, rotate and matrix steps.
    """
    unknown = set(transform_dict) - set(TRANSFORM_KEYS) - {'pivot'}
    if unknown:
        raise ValueError(f"Unknown transform keys: {sorted(unknown)}")

    pivot = transform_dict.get('pivot')

    if 'scale' in transform_dict:
        if pivot is None:
            segment = segment.scale(transform_dict['scale'])
        else:
            segment = segment.scale_with_pivot(transform_dict['scale'], pivot)
    if 'rotate' in transform_dict:
        if pivot is None:
            segment = segment.rotate(transform_dict['rotate'])
        else:
            segment = segment.rotate_with_pivot(transform_dict['rotate'], pivot)
    if 'matrix' in transform_dict:
        if pivot is None:
            segment = segment.transform(transform_dict['matrix'])
        else:
            segment = segment.transform_with_pivot(transform_dict['matrix'], pivot)
    if 'translate' in transform_dict:
        segment = segment.translate(transform_dict['translate'])

    return segment


class Query:
    """
    Represent a segment query.

    Wraps a LineSegment and its target shape and holds the evaluation state.
    """

    def __init__(self, query_dict, name=None, config=None):
        """
        Initialize query from YAML dictionary.

        Args:
            query_dict : dict
                Dictionary with 'segment' ('start', 'end') and 'target' keys
                and optional 'name' and 'transform' keys
            name : str, optional
                Fallback name when the dictionary has none
            config : GeometryConfig, optional
                Settings used while building the target

        """
        segment_dict = query_dict['segment']
        self.name = str(query_dict.get('name', name or 'query'))
        self.target_type = str(query_dict['target'].get('type', '')).lower()
        self.target = build_target(query_dict['target'], config)
        self.line_segment = LineSegment(segment_dict['start'], segment_dict['end'])

        if query_dict.get('transform'):
            self.line_segment = apply_transform(self.line_segment, query_dict['transform'])

        self.result = None
        self.is_evaluated = False

    def to_dict(self):
        """
        Convert query to dictionary for JSON export.

        Returns
        -------
        dict
            Dictionary with query geometry and evaluated result

        Raises
        ------
        RuntimeError
            If the query has not been evaluated yet

        """
        if not self.is_evaluated:
            raise RuntimeError(f"Cannot export query '{self.name}' - not evaluated yet")

        return {
            'start': self.line_segment.start.tolist(),
            'end': self.line_segment.end.tolist(),
            'length': self.line_segment.length(),
            'target_type': self.target_type,
            'result': self.result,
        }

    def __repr__(self):
        """Return string representation of query."""
        status = "evaluated" if self.is_evaluated else "not evaluated"
        return f"Query({self.name!r}, {self.target_type}, {status})"

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
Segment against plane - crossing test, crossing point, distances, projection, relation.

Each endpoint is classified by the sign of the plane equation
a*x + b*y + c*z + d; values within epsilon of zero count as on-plane.
"""

from . import config as _config
from .preconditions import check
from .relations import EIntersections, ESpaceRelation
from .tolerance import is_zero, zero_like

SEGMENT_LENGTH_MESSAGE = "The length of the segment must be greater than zero"


def check_segment(segment, config):
    """Apply the non-degenerate segment precondition; False means relaxed fallback."""
    cfg = _config.resolve(config)
    return check(not segment.is_degenerate(cfg.epsilon), SEGMENT_LENGTH_MESSAGE, cfg)


def endpoint_values(segment, plane):
    """Plane equation evaluated at both endpoints."""
    return plane.evaluate(segment.start), plane.evaluate(segment.end)


def crosses(dist_a, dist_b, epsilon):
    """True when an endpoint is on-plane or the endpoints lie on opposite sides."""
    if is_zero(dist_a, epsilon) or is_zero(dist_b, epsilon):
        return True
    return bool((dist_a < 0.0) != (dist_b < 0.0))


def crossing_point(segment, dist_a, dist_b, epsilon):
    """
    Locate where the segment meets a plane given the endpoint equation values.

    Returns
    -------
    tuple
        (EIntersections, point). Endpoints lying on the plane are returned
        verbatim; the point is the zero point unless the kind is ONE.

    """
    zero_a = is_zero(dist_a, epsilon)
    zero_b = is_zero(dist_b, epsilon)

    if zero_a and zero_b:
        return EIntersections.INFINITE, zero_like(segment.start)
    if zero_a:
        return EIntersections.ONE, segment.start.copy()
    if zero_b:
        return EIntersections.ONE, segment.end.copy()

    if (dist_a < 0.0) != (dist_b < 0.0):
        # v = dA / (dA - dB) solves dA + v * (dB - dA) = 0
        t = dist_a / (dist_a - dist_b)
        return EIntersections.ONE, segment.start + t * (segment.end - segment.start)

    return EIntersections.NONE, zero_like(segment.start)


def intersects(segment, plane, config=None):
    """
    Check whether a segment and a plane intersect.

    True when the endpoints lie on different sides of the plane, when one
    endpoint lies on it, or when the segment is contained in it. A degenerate
    segment (relaxed mode) reduces to a point membership test.
    """
    cfg = _config.resolve(config)
    check_segment(segment, cfg)
    plane.check_not_null(cfg)

    dist_a, dist_b = endpoint_values(segment, plane)
    return crosses(dist_a, dist_b, cfg.epsilon)


def intersection_point(segment, plane, config=None):
    """
    Compute the intersection between a segment and a plane.

    Returns
    -------
    tuple
        (EIntersections, point):
        - ONE with the crossing point (an endpoint on the plane is returned
          as is)
        - INFINITE if the plane contains the segment
        - NONE otherwise
        The point is the zero point unless the kind is ONE.

    """
    cfg = _config.resolve(config)
    segment_ok = check_segment(segment, cfg)
    plane.check_not_null(cfg)

    dist_a, dist_b = endpoint_values(segment, plane)

    if not segment_ok:
        if is_zero(dist_a, cfg.epsilon):
            return EIntersections.ONE, segment.start.copy()
        return EIntersections.NONE, zero_like(segment.start)

    return crossing_point(segment, dist_a, dist_b, cfg.epsilon)


def _endpoint_distances(segment, plane, config):
    dist_a, dist_b = endpoint_values(segment, plane)
    if not plane.check_not_null(config):
        return abs(dist_a), abs(dist_b), dist_a, dist_b

    length = plane.length()
    return abs(dist_a) / length, abs(dist_b) / length, dist_a, dist_b


def max_distance(segment, plane, config=None):
    """Largest euclidean distance from an endpoint to the plane."""
    cfg = _config.resolve(config)
    distance_a, distance_b, _, _ = _endpoint_distances(segment, plane, cfg)
    return max(distance_a, distance_b)


def min_distance(segment, plane, config=None):
    """
    Smallest euclidean distance from the segment to the plane.

    Zero whenever the segment intersects the plane, since the crossing point
    need not be an endpoint.
    """
    cfg = _config.resolve(config)
    distance_a, distance_b, dist_a, dist_b = _endpoint_distances(segment, plane, cfg)

    if crosses(dist_a, dist_b, cfg.epsilon):
        return 0.0
    return min(distance_a, distance_b)


def project_to_plane(segment, plane, config=None):
    """
    Project both endpoints orthogonally onto the plane.

    Returns a new segment of the same type. Projection onto a null plane
    (relaxed mode) returns an unchanged copy.
    """
    cfg = _config.resolve(config)
    if not plane.check_not_null(cfg):
        return segment.copy()

    return type(segment)(plane.point_projection(segment.start, cfg),
                         plane.point_projection(segment.end, cfg))


def space_relation(segment, plane, config=None):
    """
    Classify the segment position relative to the plane.

    Returns
    -------
    ESpaceRelation
        - CONTAINED if both endpoints are on the plane
        - POSITIVE_SIDE / NEGATIVE_SIDE if no endpoint is strictly on the
          other side (an on-plane endpoint does not count)
        - BOTH_SIDES if the endpoints are strictly on opposite sides

    """
    cfg = _config.resolve(config)
    plane.check_not_null(cfg)

    epsilon = cfg.epsilon
    dist_a, dist_b = endpoint_values(segment, plane)

    if is_zero(dist_a, epsilon) and is_zero(dist_b, epsilon):
        return ESpaceRelation.CONTAINED
    if dist_a >= -epsilon and dist_b >= -epsilon:
        return ESpaceRelation.POSITIVE_SIDE
    if dist_a <= epsilon and dist_b <= epsilon:
        return ESpaceRelation.NEGATIVE_SIDE
    return ESpaceRelation.BOTH_SIDES

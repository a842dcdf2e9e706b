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


"""Tolerance-based float and point comparisons shared by the whole package."""

import numpy as np


def is_zero(value, epsilon):
    """Check whether value is within epsilon of zero."""
    return bool(abs(value) <= epsilon)


def are_equal(value_a, value_b, epsilon):
    """Check whether two floats differ by at most epsilon."""
    return bool(abs(value_a - value_b) <= epsilon)


def as_point(values):
    """
    Convert a sequence to a float point array.

    Args:
        values: Point [x, y, z] or homogeneous point [x, y, z, w]

    Returns
    -------
    np.ndarray
        Copy of the point as a float array

    Raises
    ------
    ValueError
        If the point does not have 3 or 4 components

    """
    point = np.array(values, dtype=float)
    if point.shape not in ((3,), (4,)):
        raise ValueError(f"Points must have 3 or 4 components, got shape {point.shape}")
    return point


def xyz(point):
    """Return the cartesian part of a point."""
    return point[:3]


def zero_like(point):
    """Return the null point matching the arity of point."""
    return np.zeros_like(point, dtype=float)


def points_equal(point_a, point_b, epsilon):
    """Compare the cartesian components of two points within epsilon."""
    return bool(np.all(np.abs(xyz(point_a) - xyz(point_b)) <= epsilon))


def squared_distance(point_a, point_b):
    """Squared euclidean distance between the cartesian parts of two points."""
    delta = xyz(point_a) - xyz(point_b)
    return float(np.dot(delta, delta))

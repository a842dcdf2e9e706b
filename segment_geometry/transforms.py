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
Affine transforms of points - translation, scaling, rotation and matrices.

Matrices follow the row-vector convention: a point is multiplied on the left
(p' = p M) and the translation lives in the last row. Quaternions are given
as [x, y, z, w], the order used by scipy's Rotation.
"""

import numpy as np
from scipy.spatial.transform import Rotation

from .tolerance import as_point


def _vector(values) -> np.ndarray:
    vector = np.array(values, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"Expected a 3D vector [x, y, z], got shape {vector.shape}")
    return vector


def as_rotation(rotation) -> Rotation:
    """
    Interpret a rotation given in any of the supported forms.

    Args:
        rotation : Rotation, array-like
            - scipy Rotation
            - quaternion [x, y, z, w]
            - 3x3 rotation matrix in row-vector convention

    Returns
    -------
    Rotation
        Equivalent scipy rotation

    Raises
    ------
    ValueError
        If the value is neither a quaternion nor a 3x3 matrix

    """
    if isinstance(rotation, Rotation):
        return rotation

    values = np.array(rotation, dtype=float)
    if values.shape == (4,):
        if np.linalg.norm(values) == 0.0:
            raise ValueError("Quaternion must not be zero")
        return Rotation.from_quat(values)
    if values.shape == (3, 3):
        # Row-vector matrices are the transpose of scipy's column convention
        return Rotation.from_matrix(values.T)
    raise ValueError(f"Rotation must be a quaternion or a 3x3 matrix, got shape {values.shape}")


def translation_matrix(vector) -> np.ndarray:
    """4x4 matrix translating by vector."""
    matrix = np.eye(4)
    matrix[3, :3] = _vector(vector)
    return matrix


def scaling_matrix(vector) -> np.ndarray:
    """4x4 matrix scaling each axis by the matching component of vector."""
    matrix = np.eye(4)
    matrix[:3, :3] = np.diag(_vector(vector))
    return matrix


def rotation_matrix(rotation) -> np.ndarray:
    """4x4 matrix applying a rotation (quaternion, 3x3 matrix or Rotation)."""
    matrix = np.eye(4)
    matrix[:3, :3] = as_rotation(rotation).as_matrix().T
    return matrix


def translate_point(point, vector) -> np.ndarray:
    """Translate a point; the homogeneous component is kept."""
    result = as_point(point)
    result[:3] += _vector(vector)
    return result


def scale_point(point, vector) -> np.ndarray:
    """Scale a point component-wise about the origin."""
    result = as_point(point)
    result[:3] *= _vector(vector)
    return result


def rotate_point(point, rotation) -> np.ndarray:
    """Rotate a point about the origin."""
    result = as_point(point)
    result[:3] = as_rotation(rotation).apply(result[:3])
    return result


def transform_point(point, matrix) -> np.ndarray:
    """
    Apply a 4x4 or 4x3 affine matrix to a point.

    A 3D point is treated as homogeneous with w = 1. A 4D point uses its own
    w, which a 4x4 matrix may change and a 4x3 matrix keeps.

    Raises
    ------
    ValueError
        If the matrix is neither 4x4 nor 4x3

    """
    m = np.array(matrix, dtype=float)
    if m.shape not in ((4, 4), (4, 3)):
        raise ValueError(f"Transformation matrix must be 4x4 or 4x3, got shape {m.shape}")

    result = as_point(point)
    homogeneous = result if result.shape == (4,) else np.append(result, 1.0)
    transformed = homogeneous @ m

    result[:3] = transformed[:3]
    if result.shape == (4,) and m.shape == (4, 4):
        result[3] = transformed[3]
    return result


def _about_pivot(point, pivot, operation) -> np.ndarray:
    p = as_point(point)
    origin = _vector(as_point(pivot)[:3])
    p[:3] -= origin
    result = operation(p)
    result[:3] += origin
    return result


def scale_point_with_pivot(point, vector, pivot) -> np.ndarray:
    """Scale a point about pivot instead of the origin."""
    return _about_pivot(point, pivot, lambda p: scale_point(p, vector))


def rotate_point_with_pivot(point, rotation, pivot) -> np.ndarray:
    """Rotate a point about pivot instead of the origin."""
    return _about_pivot(point, pivot, lambda p: rotate_point(p, rotation))


def transform_point_with_pivot(point, matrix, pivot) -> np.ndarray:
    """Apply an affine matrix with pivot as the origin of its linear part."""
    return _about_pivot(point, pivot, lambda p: transform_point(p, matrix))

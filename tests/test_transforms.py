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


"""Tests for segment transforms."""

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from segment_geometry import LineSegment
from segment_geometry import transforms

# 90 degrees about z as [x, y, z, w]
QUARTER_TURN_Z = [0.0, 0.0, np.sin(np.pi / 4), np.cos(np.pi / 4)]

# Same rotation as a row-vector matrix: p' = p M
QUARTER_TURN_Z_MATRIX = [
    [0.0, 1.0, 0.0],
    [-1.0, 0.0, 0.0],
    [0.0, 0.0, 1.0],
]


class TestTranslateAndScale:
    """Translation and scaling."""

    def test_translate_by_vector_and_components(self):
        by_vector = LineSegment.unit_line().translate([1, 2, 3])
        by_components = LineSegment.unit_line().translate(1, 2, 3)

        np.testing.assert_allclose(by_vector.start, [1, 2, 3])
        np.testing.assert_allclose(by_vector.end, [2, 2, 3])
        assert by_vector == by_components

    def test_partial_components_rejected(self):
        with pytest.raises(ValueError):
            LineSegment.unit_line().translate(1, 2)

    def test_translate_returns_new_segment(self):
        segment = LineSegment.unit_line()
        segment.translate(1, 1, 1)
        np.testing.assert_array_equal(segment.start, [0, 0, 0])

    def test_scale(self):
        scaled = LineSegment([1, 1, 1], [2, 2, 2]).scale(2, 3, 4)

        np.testing.assert_allclose(scaled.start, [2, 3, 4])
        np.testing.assert_allclose(scaled.end, [4, 6, 8])

    def test_homogeneous_component_kept(self):
        moved = LineSegment([0, 0, 0, 1], [1, 0, 0, 1]).translate([1, 1, 1])

        np.testing.assert_allclose(moved.start, [1, 1, 1, 1])
        np.testing.assert_allclose(moved.end, [2, 1, 1, 1])


class TestRotate:
    """Rotation by quaternion, matrix and scipy Rotation."""

    @pytest.mark.parametrize("rotation", [
        QUARTER_TURN_Z,
        QUARTER_TURN_Z_MATRIX,
        Rotation.from_euler('z', 90, degrees=True),
    ])
    def test_quarter_turn(self, rotation):
        rotated = LineSegment.unit_line().rotate(rotation)

        np.testing.assert_allclose(rotated.start, [0, 0, 0], atol=1e-12)
        np.testing.assert_allclose(rotated.end, [0, 1, 0], atol=1e-12)

    def test_rotation_keeps_length(self):
        segment = LineSegment([1, 2, 3], [-4, 5, 0.5])
        rotated = segment.rotate(Rotation.from_rotvec([0.3, -0.2, 0.9]))

        assert rotated.length() == pytest.approx(segment.length())

    def test_rotate_with_pivot(self):
        rotated = LineSegment.unit_line().rotate_with_pivot(QUARTER_TURN_Z, [1, 0, 0])

        np.testing.assert_allclose(rotated.start, [1, -1, 0], atol=1e-12)
        np.testing.assert_allclose(rotated.end, [1, 0, 0], atol=1e-12)

    @pytest.mark.parametrize("rotation", [[0, 0, 0, 0], [1, 0, 0], np.eye(4)])
    def test_invalid_rotation(self, rotation):
        with pytest.raises(ValueError):
            transforms.as_rotation(rotation)


class TestMatrices:
    """Affine matrices in row-vector convention."""

    def test_translation_matrix_matches_translate(self):
        segment = LineSegment([1, 2, 3], [4, 5, 6])
        matrix = transforms.translation_matrix([1, -1, 2])

        assert segment.transform(matrix) == segment.translate(1, -1, 2)

    def test_rotation_then_translation(self):
        matrix = transforms.rotation_matrix(QUARTER_TURN_Z) @ transforms.translation_matrix([1, 2, 3])
        moved = LineSegment.unit_line().transform(matrix)

        np.testing.assert_allclose(moved.start, [1, 2, 3], atol=1e-12)
        np.testing.assert_allclose(moved.end, [1, 3, 3], atol=1e-12)

    def test_four_by_three_matrix(self):
        matrix = transforms.rotation_matrix(QUARTER_TURN_Z) @ transforms.translation_matrix([1, 2, 3])
        moved = LineSegment.unit_line().transform(matrix[:, :3])

        np.testing.assert_allclose(moved.end, [1, 3, 3], atol=1e-12)

    def test_scaling_matrix_with_pivot(self):
        segment = LineSegment.unit_line()
        by_matrix = segment.transform_with_pivot(transforms.scaling_matrix([2, 2, 2]), [1, 0, 0])
        by_scale = segment.scale_with_pivot([2, 2, 2], [1, 0, 0])

        np.testing.assert_allclose(by_scale.start, [-1, 0, 0])
        np.testing.assert_allclose(by_scale.end, [1, 0, 0])
        assert by_matrix == by_scale

    def test_homogeneous_point_with_four_by_four(self):
        moved = transforms.transform_point([1, 0, 0, 1], transforms.translation_matrix([0, 0, 5]))
        np.testing.assert_allclose(moved, [1, 0, 5, 1])

    def test_invalid_matrix_shape(self):
        with pytest.raises(ValueError):
            LineSegment.unit_line().transform(np.eye(3))

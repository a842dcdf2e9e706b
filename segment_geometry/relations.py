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


"""Result types of the intersection and classification queries."""

from collections import namedtuple
from enum import Enum


class EIntersections(Enum):
    """Number of intersection points found between two shapes."""

    NONE = 'none'
    ONE = 'one'
    TWO = 'two'
    INFINITE = 'infinite'


class ESpaceRelation(Enum):
    """Position of a segment relative to a plane."""

    NEGATIVE_SIDE = 'negative_side'
    POSITIVE_SIDE = 'positive_side'
    BOTH_SIDES = 'both_sides'
    CONTAINED = 'contained'


# Fixed arity: unused points hold the zero point.
IntersectionResult = namedtuple('IntersectionResult', ['kind', 'first', 'second'])

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


"""Query evaluator - runs the intersection engine for batch queries."""

import logging

from . import config as _config
from .plane import Plane
from .relations import EIntersections

logger = logging.getLogger(__name__)


class QueryEvaluator:
    """
    Evaluate segment queries against their target shapes.

    Modifies query objects in-place by filling query.result.
    """

    def __init__(self, config=None):
        """
        Initialize evaluator with geometry settings.

        Args:
            config : GeometryConfig, optional
                Tolerance and precondition policy (module default if None)

        """
        self.config = _config.resolve(config)

    def evaluate(self, query):
        """
        Evaluate a query.

        Modifies query object in-place by setting query.result and
        query.is_evaluated.

        Args:
            query : Query
                Query object to process

        Returns
        -------
        bool
            True if successful, False otherwise

        """
        try:
            query.result = self._build_result(query.line_segment, query.target)
            query.is_evaluated = True

            logger.debug("Query '%s': %s", query.name, query.result['kind'])
            return True

        except Exception as e:
            logger.error("Error evaluating query '%s': %s", query.name, e)
            query.result = None
            query.is_evaluated = False
            return False

    def evaluate_all(self, queries):
        """
        Evaluate every query.

        Returns
        -------
        int
            Number of queries evaluated successfully

        """
        succeeded = sum(1 for query in queries if self.evaluate(query))
        logger.info("Evaluated %d of %d queries", succeeded, len(queries))
        return succeeded

    def _build_result(self, segment, target):
        """Collect the intersection result and, for planes, the relation and distances."""
        result = segment.intersection_points(target, self.config)

        if result.kind is EIntersections.ONE:
            points = [result.first.tolist()]
        elif result.kind is EIntersections.TWO:
            points = [result.first.tolist(), result.second.tolist()]
        else:
            points = []

        data = {
            'intersects': result.kind is not EIntersections.NONE,
            'kind': result.kind.value,
            'points': points,
        }

        if isinstance(target, Plane):
            data['space_relation'] = segment.space_relation(target, self.config).value
            data['min_distance'] = float(segment.min_distance(target, self.config))
            data['max_distance'] = float(segment.max_distance(target, self.config))

        return data

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


"""Precondition policy - strict configurations raise, relaxed ones warn and fall back."""

import logging

from . import config as _config

logger = logging.getLogger(__name__)


class DegenerateGeometryError(ValueError):
    """Raised when an input shape is degenerate and the config is strict."""


def check(condition, message, config=None):
    """
    Validate a precondition under the given policy.

    Args:
        condition : bool
            True when the precondition holds
        message : str
            Description of the violated precondition
        config : GeometryConfig, optional
            Policy to apply (module default when omitted)

    Returns
    -------
    bool
        True if the precondition holds, False if it was violated and the
        config is relaxed (the caller must use its fallback)

    Raises
    ------
    DegenerateGeometryError
        If the precondition is violated and the config is strict

    """
    if condition:
        return True

    if _config.resolve(config).strict:
        raise DegenerateGeometryError(message)

    logger.warning("%s - using degenerate fallback", message)
    return False

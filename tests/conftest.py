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


"""Shared fixtures for the segment_geometry test suite."""

import logging

import pytest

from segment_geometry import config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against a fresh strict default config."""
    previous = config.set_default_config(config.GeometryConfig())
    yield config.get_default_config()
    config.set_default_config(previous)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging so tests stay independent."""
    yield
    logger = logging.getLogger("segment_geometry")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def relaxed():
    return config.GeometryConfig(strict=False)

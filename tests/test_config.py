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


"""Tests for settings, precondition policy and logging setup."""

import logging

import pytest
import yaml

from segment_geometry import config, preconditions
from segment_geometry.config import GeometryConfig
from segment_geometry.logging_config import setup_logging
from segment_geometry.preconditions import DegenerateGeometryError


class TestGeometryConfig:
    """GeometryConfig construction and loading."""

    def test_defaults(self):
        cfg = GeometryConfig()
        assert cfg.epsilon == 1e-6
        assert cfg.strict is True

    @pytest.mark.parametrize("kwargs", [
        {'epsilon': 0},
        {'epsilon': -1e-6},
        {'epsilon': 'small'},
        {'strict': 'yes'},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GeometryConfig(**kwargs)

    def test_from_dict(self):
        cfg = GeometryConfig.from_dict({'epsilon': 1e-4, 'strict': False})

        assert cfg.epsilon == 1e-4
        assert cfg.strict is False
        assert GeometryConfig.from_dict(None) == GeometryConfig()

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="tolerance"):
            GeometryConfig.from_dict({'tolerance': 1e-3})

    def test_load_config(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({'epsilon': 1e-5, 'strict': False, 'log_level': 'DEBUG'}))

        cfg = config.load_config(path)

        assert cfg.epsilon == pytest.approx(1e-5)
        assert cfg.strict is False
        assert cfg.log_level == 'DEBUG'

    def test_load_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            config.load_config(tmp_path / "missing.yaml")

    def test_set_default_config(self):
        relaxed = GeometryConfig(strict=False)

        previous = config.set_default_config(relaxed)

        assert previous == GeometryConfig()
        assert config.get_default_config() is relaxed
        assert config.resolve(None) is relaxed

    def test_set_default_config_type(self):
        with pytest.raises(TypeError):
            config.set_default_config({'strict': False})


class TestPreconditions:
    """Strict raises, relaxed warns."""

    def test_passing_condition(self):
        assert preconditions.check(True, "never shown") is True

    def test_strict_raises_value_error(self):
        with pytest.raises(ValueError, match="broken"):
            preconditions.check(False, "broken", GeometryConfig())
        assert issubclass(DegenerateGeometryError, ValueError)

    def test_relaxed_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="segment_geometry"):
            result = preconditions.check(False, "broken", GeometryConfig(strict=False))

        assert result is False
        assert "broken - using degenerate fallback" in caplog.text

    def test_relaxed_default_config(self):
        config.set_default_config(GeometryConfig(strict=False))
        assert preconditions.check(False, "broken") is False


class TestLogging:
    """Package logger setup."""

    def test_console_handler(self):
        logger = setup_logging(logging.DEBUG)

        assert logger.name == "segment_geometry"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_reconfigure_does_not_duplicate(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging("info", str(log_file))

        logging.getLogger("segment_geometry.test").info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "hello" in log_file.read_text()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("chatty")

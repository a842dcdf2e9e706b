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


"""Geometry settings - tolerance and precondition policy, loadable from YAML."""

from pathlib import Path

import yaml

DEFAULT_EPSILON = 1e-6

_KNOWN_KEYS = ('epsilon', 'strict', 'log_level')


class GeometryConfig:
    """
    Settings shared by every intersection and classification routine.

    Holds the single tolerance used for all "on-plane" and "coincident"
    comparisons and the precondition policy: strict configurations raise
    DegenerateGeometryError on degenerate input, relaxed ones log a warning
    and compute a fallback result.
    """

    def __init__(self, epsilon=DEFAULT_EPSILON, strict=True, log_level=None):
        """
        Initialize settings.

        Args:
            epsilon : float
                Absolute tolerance for float comparisons (must be positive)
            strict : bool
                Raise on precondition violations when True
            log_level : str, optional
                Logging level name used by the command line runner

        Raises
        ------
        ValueError
            If epsilon is not a positive number or strict is not a bool

        """
        if isinstance(epsilon, bool) or not isinstance(epsilon, (int, float)):
            raise ValueError(f"epsilon must be a number, got {epsilon!r}")
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        if not isinstance(strict, bool):
            raise ValueError(f"strict must be true or false, got {strict!r}")

        self.epsilon = float(epsilon)
        self.strict = strict
        self.log_level = log_level

    @classmethod
    def from_dict(cls, settings):
        """
        Build a config from a mapping, as found under a YAML 'settings' key.

        Raises
        ------
        ValueError
            If the mapping contains unknown keys

        """
        if settings is None:
            return cls()
        if not isinstance(settings, dict):
            raise ValueError("Settings must be a mapping")

        for key in settings:
            if key not in _KNOWN_KEYS:
                raise ValueError(f"Unknown setting: '{key}'")

        return cls(
            epsilon=settings.get('epsilon', DEFAULT_EPSILON),
            strict=settings.get('strict', True),
            log_level=settings.get('log_level'),
        )

    def to_dict(self):
        """Convert settings to a dictionary for JSON export."""
        return {
            'epsilon': self.epsilon,
            'strict': self.strict,
        }

    def __eq__(self, other):
        if not isinstance(other, GeometryConfig):
            return NotImplemented
        return self.epsilon == other.epsilon and self.strict == other.strict

    def __repr__(self):
        """Return string representation of the settings."""
        mode = "strict" if self.strict else "relaxed"
        return f"GeometryConfig(epsilon={self.epsilon:g}, {mode})"


_default_config = GeometryConfig()


def get_default_config():
    """Return the config used when a routine is called without one."""
    return _default_config


def set_default_config(config):
    """Replace the module default config, returning the previous one."""
    global _default_config

    if not isinstance(config, GeometryConfig):
        raise TypeError(f"Expected GeometryConfig, got {type(config).__name__}")

    previous = _default_config
    _default_config = config
    return previous


def resolve(config):
    """Return config, or the module default when config is None."""
    return _default_config if config is None else config


def load_config(yaml_path):
    """
    Load geometry settings from a YAML file.

    Parameters
    ----------
    yaml_path : str
        Path to a YAML file holding a mapping with optional 'epsilon',
        'strict' and 'log_level' keys.

    Returns
    -------
    GeometryConfig
        The parsed settings.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        settings = yaml.safe_load(f)

    return GeometryConfig.from_dict(settings)

"""
Library-wide defaults.

Configuration is a small dataclass that can be loaded from a YAML file,
for example::

    # fnt.yaml
    division: dif
    log_level: DEBUG

Only the allocating helpers (fft, ifft, fht, ifht) read it; the descriptors'
execute() methods always take their options explicitly.
"""

import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .kinds import Division

logger = logging.getLogger(__name__)


@dataclass
class TransformConfig:
    """Defaults used by the allocating transform helpers."""
    division: Division = Division.DIT
    log_level: str = 'WARNING'

    def __post_init__(self):
        self.division = Division(self.division)
        level = logging.getLevelName(str(self.log_level).upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        self.log_level = str(self.log_level).upper()

    def to_dict(self) -> dict:
        d = asdict(self)
        d['division'] = self.division.value
        return d


_config = TransformConfig()


def load_config(config_path: Union[str, Path]) -> TransformConfig:
    """
    Load a TransformConfig from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed configuration (not installed; pass it to set_config())

    Raises:
        ValueError: On unknown keys or invalid values
    """
    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    known = {f.name for f in fields(TransformConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    config = TransformConfig(**raw)
    logger.debug("loaded config from %s: %s", config_path, config.to_dict())
    return config


def get_config() -> TransformConfig:
    return _config


def set_config(config: Optional[TransformConfig] = None, **overrides) -> TransformConfig:
    """
    Install a new configuration.

    Args:
        config: Base configuration (defaults to the current one)
        **overrides: Individual fields to replace

    Returns:
        The installed configuration
    """
    global _config
    base = config if config is not None else _config
    values = base.to_dict()
    values.update(overrides)
    _config = TransformConfig(**values)
    return _config

"""
Configuration for the text generator command line.

"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GeneratorConfig:
    """Settings not covered by the positional arguments"""
    # Seed used when the mode is not random
    seed: int = 20
    # Mode value that selects unseeded generation
    random_mode: str = "random"

    # Corpus
    encoding: str = "utf-8"

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        validate_config(self.to_dict())
        self.log_level = self.log_level.upper()

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


SCHEMA = {
    'seed': (int, lambda x: not isinstance(x, bool)),
    'random_mode': (str, lambda x: len(x) > 0),
    'encoding': (str, lambda x: len(x) > 0),
    'log_level': (str, lambda x: x.upper() in LOG_LEVELS),
}


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check every key against the schema; raise ValueError on the first problem."""
    for key, value in config.items():
        if key not in SCHEMA:
            raise ValueError(f"Unknown configuration key: {key}")
        type_, check = SCHEMA[key]
        if not isinstance(value, type_):
            raise ValueError(f"Wrong type for {key}: expected {type_.__name__}, got {type(value).__name__}")
        if not check(value):
            raise ValueError(f"Invalid value for {key}: {value}")
    return config


def load_config(path: Union[str, Path], base: Optional[GeneratorConfig] = None) -> GeneratorConfig:
    """Read a YAML file and apply its keys on top of base (or the defaults)."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")

    validate_config(data)
    return replace(base or GeneratorConfig(), **data)

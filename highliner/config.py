"""
Configuration defaults, YAML config loading and logging setup.
"""

import copy
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger

DEFAULT_CONFIG: Dict[str, Any] = {
    "analysis": {
        "sample_size": 100,
        "seed": None,
        "master_strategy": "most_abundant",
    },
    "plot": {
        "dpi": 300,
        "figure_width": 10,
    },
}


def _merge(base: Dict, override: Dict) -> Dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_file: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration, overlaying a YAML file on the defaults.

    Args:
        config_file: Optional path to a YAML configuration file

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_file is None:
        return config

    if not Path(config_file).exists():
        logger.warning(f"Config file not found: {config_file}, using defaults")
        return config

    with open(config_file, 'r') as f:
        file_config = yaml.safe_load(f) or {}
    if not isinstance(file_config, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping")

    logger.debug(f"Loaded config from {config_file}")
    return _merge(config, file_config)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure loguru sinks: DEBUG on stderr when verbose, DEBUG to an optional file."""
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")

    if log_file:
        logger.add(log_file, level="DEBUG")

"""
rps_contract._config — Contract Configuration
==============================================

Loads configuration from an optional JSON file, a .env file and the
process environment, then validates it.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger("rps_contract")

DEFAULT_CONFIG: Dict[str, Any] = {
    "db_path": "rps_contract.db",
    "log_file": "rps_contract.log",
    "log_level": "INFO",
}

# Environment variable -> config key
ENV_MAPPINGS = {
    "RPS_DB_PATH": "db_path",
    "RPS_LOG_FILE": "log_file",
    "RPS_LOG_LEVEL": "log_level",
}

REQUIRED_CONFIG_KEYS = [
    "db_path",
    "log_file",
    "log_level",
]

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from defaults, file and environment.

    Later sources override earlier ones: defaults, then the JSON file,
    then environment variables (a .env file in the working directory is
    loaded first and never overrides variables already set).

    Raises:
        ValueError: If the config file does not exist or is not a JSON object
        OSError: If the config file exists but cannot be read
    """
    load_dotenv(Path.cwd() / ".env")
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ValueError(f"Config file not found: {config_path}")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {config_path}")
        config.update(data)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    config["log_level"] = str(config.get("log_level", "")).upper()
    return config


def validate_config(config: dict) -> None:
    """
    Validate required configuration keys.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If required keys are missing or the log level is unknown
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if not config.get(k)]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")
    if config["log_level"] not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log_level {config['log_level']!r}; expected one of {sorted(LOG_LEVELS)}"
        )

# utils/config.py
import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger("laundry.config")

# environment variable -> AppConfig field
ENV_KEYS = {
    "LAUNDRY_STORAGE_DIR": "storage_dir",
    "LAUNDRY_LOG_DIR": "log_dir",
    "LAUNDRY_LOG_LEVEL": "log_level",
    "LAUNDRY_BACKUP_DIR": "backup_dir",
    "LAUNDRY_FALLBACK_PRICE": "fallback_price",
    "LAUNDRY_LOG_KEEP_DAYS": "log_keep_days",
}


@dataclass
class AppConfig:
    """Where the shop keeps its files, and a few knobs."""
    storage_dir: str = "data/storage"
    log_dir: str = "data/logs"
    log_level: str = "INFO"
    log_keep_days: int = 7
    backup_dir: str = "data/backups"
    fallback_price: float = 5


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Config file not found at {path}, using defaults")
        return {}
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file: {e}")
        logger.warning("Using default configuration")
        return {}
    if not isinstance(data, dict):
        logger.error(f"Config file {path} must hold a JSON object, using defaults")
        return {}
    return data


def load_config(config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> AppConfig:
    """Defaults, then the JSON config file, then environment variables."""
    if environ is None:
        environ = dict(os.environ)

    values: Dict[str, Any] = {}
    path = config_path or environ.get("LAUNDRY_CONFIG_PATH")
    if path:
        known = {f.name for f in fields(AppConfig)}
        for key, value in _read_config_file(Path(path)).items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Unknown config key ignored: {key}")

    for env_key, name in ENV_KEYS.items():
        env_value = environ.get(env_key)
        if env_value:
            values[name] = env_value

    if "fallback_price" in values:
        values["fallback_price"] = float(values["fallback_price"])
    if "log_keep_days" in values:
        values["log_keep_days"] = int(values["log_keep_days"])

    return AppConfig(**values)

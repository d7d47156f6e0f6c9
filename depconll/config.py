# depconll/config.py
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

# Определение базовых путей относительно корня проекта
BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
CONFIG_PATH = BASE_DIR / "config" / "default.yaml"

SCHEMAS = ("input", "output")
VALIDATION_LEVELS = ("strict", "lenient")

DEFAULT_CONFIG = {
    "encoding": "utf-8",
    "schema": "output",  # input = 6 колонок, output = 10 колонок
    "validation_level": "strict",  # lenient: невалидные предложения пропускаются
    "log_level": "INFO",
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Загружает YAML-конфиг поверх значений по умолчанию.
    Без явного пути берется config/default.yaml, если он существует.
    """
    config = dict(DEFAULT_CONFIG)
    path = Path(path) if path else CONFIG_PATH

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config {path} must be a mapping, got {type(loaded).__name__}")
        config.update(loaded)
    else:
        logger.debug(f"Config {path} not found, using defaults")

    if config["schema"] not in SCHEMAS:
        raise ValueError(f"Unknown schema {config['schema']!r}, expected one of {SCHEMAS}")
    if config["validation_level"] not in VALIDATION_LEVELS:
        raise ValueError(
            f"Unknown validation_level {config['validation_level']!r}, expected one of {VALIDATION_LEVELS}"
        )
    return config

"""Config storage as plain JSON in the user's home directory."""

import json
import logging

from pydantic import ValidationError

from exceltotext.models.config import CONFIG_DIR, CONFIG_FILE, AppConfig

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load config from disk, falling back to defaults on any problem."""
    if not CONFIG_FILE.exists():
        return AppConfig()

    try:
        raw = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read config file: %s", e)
        return AppConfig()

    if not isinstance(raw, dict):
        logger.warning("Config file does not contain an object, using defaults")
        return AppConfig()

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        logger.warning("Invalid config values, using defaults: %s", e)
        return AppConfig()


def save_config(config: AppConfig) -> None:
    """Save config to disk."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = config.model_dump()
    CONFIG_FILE.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Config saved to %s", CONFIG_FILE)

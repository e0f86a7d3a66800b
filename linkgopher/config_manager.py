"""
Handles saving/loading config from a JSON file in ~/.config/linkgopher/config.json,
and environment variable overrides on top of it.

The config location itself can be moved with LINKGOPHER_CONFIG.
"""

import os
import json
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "app_title": "LinkGopher",
    # write a clipboard-sourced conversion back to the clipboard
    "copy_to_clipboard": True,
    "log_level": "WARNING",
}

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value) -> Optional[bool]:
    """
    Accepts a JSON boolean or one of the true/false words, else None.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value = value.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
    return None


def get_config_path() -> str:
    """
    Returns the full path to the config file e.g. ~/.config/linkgopher/config.json
    """
    override = os.environ.get("LINKGOPHER_CONFIG", "")
    if override:
        config_file = os.path.expanduser(override)
        config_dir = os.path.dirname(config_file)
    else:
        home = os.path.expanduser("~")
        config_dir = os.path.join(home, ".config", "linkgopher")
        config_file = os.path.join(config_dir, "config.json")
    if config_dir and not os.path.exists(config_dir):
        try:
            os.makedirs(config_dir, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create config directory %s: %s", config_dir, e)
    return config_file


def load_config() -> Optional[dict]:
    """
    Loads the config from config.json, filling in defaults for missing keys.
    Returns None if no config found.
    """
    path = get_config_path()
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        # if there's a parse error, treat as no config
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return None

    cfg = dict(DEFAULT_CONFIG)
    for key, value in data.items():
        default = DEFAULT_CONFIG.get(key)
        if isinstance(default, bool):
            value = _parse_bool(value)
        elif isinstance(default, str) and not isinstance(value, str):
            value = None
        if value is None:
            logger.warning("Ignoring invalid %s=%r in config %s", key, data[key], path)
            continue
        cfg[key] = value
    return cfg


def save_config(cfg: dict) -> None:
    """
    Writes the config to config.json
    """
    path = get_config_path()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)
    except OSError as e:
        print(f"[!] Failed to write config: {e}")


def apply_env_overrides(cfg: dict) -> dict:
    """
    Returns a copy of cfg with LINKGOPHER_* environment variables applied.
    """
    cfg = dict(cfg)

    title = os.environ.get("LINKGOPHER_TITLE", "").strip()
    if title:
        cfg["app_title"] = title

    copy_val = os.environ.get("LINKGOPHER_COPY_TO_CLIPBOARD", "").strip().lower()
    copy_to_clipboard = _parse_bool(copy_val)
    if copy_to_clipboard is not None:
        cfg["copy_to_clipboard"] = copy_to_clipboard
    elif copy_val:
        logger.warning("Ignoring LINKGOPHER_COPY_TO_CLIPBOARD=%r", copy_val)

    level = os.environ.get("LINKGOPHER_LOG_LEVEL", "").strip()
    if level:
        cfg["log_level"] = level.upper()

    return cfg

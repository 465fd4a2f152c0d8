import json
import os

from logger.logger import console_message

DEFAULT_CONFIG = {
    "states": 2,
    "symbols": 2,
    "max_steps": 100,
    "tape_size": None,
    "log_enabled": False,
    "output_directory": "logs/",
    "log_file_prefix": "busybeaver_",
    "show_progress": True,
    "render_winners": True
}

# Expected types for validation
CONFIG_SCHEMA = {
    "states": int,
    "symbols": int,
    "max_steps": int,
    "tape_size": (int, type(None)),
    "log_enabled": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "show_progress": bool,
    "render_winners": bool
}

INT_KEYS = ("states", "symbols", "max_steps", "tape_size")


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is an int subclass; reject it for numeric keys
        if key in INT_KEYS and isinstance(value, bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")
        if not isinstance(value, expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    if config["states"] < 1:
        raise ValueError("Config key 'states' must be at least 1.")
    if config["symbols"] < 1:
        raise ValueError("Config key 'symbols' must be at least 1.")
    if config["max_steps"] < 0:
        raise ValueError("Config key 'max_steps' must not be negative.")
    if config["tape_size"] is not None and config["tape_size"] < 3:
        raise ValueError("Config key 'tape_size' must be null or at least 3.")


def load_config(path=None, verbose=False):
    """Defaults merged with the JSON file at `path`, validated."""
    config = DEFAULT_CONFIG.copy()

    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")
        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        # Merge defaults with overrides
        config.update(user_config)

    validate_config(config)

    if verbose:
        console_message(f"Loaded config{f' from {path}' if path else ''}:")
        for key, value in config.items():
            console_message(f"  {key}: {value}")

    return config

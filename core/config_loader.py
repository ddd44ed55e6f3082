# core/config_loader.py

import functools
import json
import os
import warnings
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from casual.errors import ConfigError
from core.config_schema import CasualConfig
from core.paths import DEFAULT_CONFIG_PATH, DEFAULT_ENV_PATH

# Environment variable -> (section, key); section None means top level
ENV_OVERRIDES = {
    "CASUAL_ERROR_PREFIX": (None, "error_prefix"),
    "CASUAL_INVALID_INPUT_MESSAGE": (None, "invalid_input_message"),
    "CASUAL_CONFIRM_SUFFIX": ("confirm", "suffix"),
    "CASUAL_STRUCTURED_LOG": ("logging", "enabled"),
    "CASUAL_LOG_FILE": ("logging", "log_file"),
    "CASUAL_LOG_INPUT": ("logging", "log_input"),
}


def load_raw_config(path: Path | None = None) -> dict:
    """
    Reads the JSON config file. An explicitly requested file must exist, the
    default location is optional.
    """
    explicit = path is not None or bool(os.getenv("CASUAL_CONFIG"))
    path = Path(path or os.getenv("CASUAL_CONFIG") or DEFAULT_CONFIG_PATH)
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found at {path.resolve()}")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return raw


def apply_env_overrides(raw: dict) -> dict:
    """
    Values are left as strings, the schema coerces them ("1", "true", "on" for flags).
    """
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is None:
            continue
        if section is None:
            raw[key] = value
        else:
            raw.setdefault(section, {})[key] = value
    return raw


def load_env(path: Path = DEFAULT_ENV_PATH) -> bool:
    """
    Copies a .env file into os.environ. Left to applications (see main.py),
    the input helpers never call it.
    """
    if Path(path).exists():
        return load_dotenv(dotenv_path=path)
    return load_dotenv()


def load_config(path: Path | None = None) -> CasualConfig:
    """
    Loads the optional JSON config and CASUAL_* environment overrides,
    validates against schema, and returns a typed CasualConfig instance.
    """
    raw = apply_env_overrides(load_raw_config(path))

    try:
        return CasualConfig(**raw)
    except ValidationError as e:
        # Fail fast with clear message
        raise ConfigError(f"Configuration validation failed: {e}") from e


@functools.lru_cache(maxsize=None)
def get_config() -> CasualConfig:
    """
    Process-wide config used when a caller does not pass one. Loaded once.
    A broken config must not stop input acquisition, so it falls back to
    the defaults with a warning.
    """
    try:
        return load_config()
    except ConfigError as e:
        warnings.warn(f"{e}; using default settings", RuntimeWarning, stacklevel=2)
        return CasualConfig()

# binsync Configuration Loader
# Load, save, and manage YAML configuration files

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from binsync.config.defaults import generate_default_config, get_default_config
from binsync.config.schema import BinsyncConfig

# Environment variables that override the install section
ENV_SOURCE_DIR = "BIN_SOURCE_DIR"
ENV_TARGET_DIRS = "BIN_TARGET_DIRS"
ENV_UPDATE_BINARIES = "UPDATE_BINARIES"
ENV_SKIP_BINARIES = "SKIP_BINARIES"
ENV_BINARIES_PREFIX = "BINARIES_PREFIX"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_config_dir() -> Path:
    """Get the binsync configuration directory."""
    return Path.home() / ".config" / "binsync"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("BINSYNC_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> BinsyncConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        BinsyncConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config file is invalid.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\nRun 'binsync config init' to create one."
        )

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    return BinsyncConfig.model_validate(_merge_with_defaults(data))


def load_config_or_defaults(config_path: Optional[Path] = None) -> tuple[BinsyncConfig, bool]:
    """
    Load config if it exists, otherwise fall back to built-in defaults.

    Returns:
        Tuple of (config, loaded_from_file).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return BinsyncConfig.model_validate(get_default_config()), False

    return load_config(config_path), True


def ensure_config_exists(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Ensure configuration file exists, creating default if needed.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file without loading it into the system.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    if not isinstance(data, dict):
        return False, ["Configuration root must be a mapping"]

    errors: list[str] = []

    try:
        BinsyncConfig.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        return False, errors

    if "install" not in data:
        errors.append("Missing 'install' section")

    return len(errors) == 0, errors


def apply_env_overrides(config: BinsyncConfig, environ: Optional[Mapping[str, str]] = None) -> BinsyncConfig:
    """
    Apply environment variable overrides to the install section.

    Args:
        config: Loaded configuration.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        New BinsyncConfig with overrides applied.

    Raises:
        ValueError: If UPDATE_BINARIES is not a recognised boolean.
    """
    if environ is None:
        environ = os.environ

    updates: dict = {}

    if ENV_SOURCE_DIR in environ:
        updates["source_dir"] = environ[ENV_SOURCE_DIR]
    if ENV_TARGET_DIRS in environ:
        updates["target_dirs"] = _split_list(environ[ENV_TARGET_DIRS])
    if ENV_UPDATE_BINARIES in environ:
        updates["update_binaries"] = parse_bool(environ[ENV_UPDATE_BINARIES], ENV_UPDATE_BINARIES)
    if ENV_SKIP_BINARIES in environ:
        updates["skip_binaries"] = _split_list(environ[ENV_SKIP_BINARIES])
    if ENV_BINARIES_PREFIX in environ:
        updates["binaries_prefix"] = environ[ENV_BINARIES_PREFIX]

    if not updates:
        return config

    install_data = {**config.install.model_dump(), **updates}
    return BinsyncConfig.model_validate({"install": install_data, "output": config.output.model_dump()})


def parse_bool(value: str, name: str = "value") -> bool:
    """Parse a boolean flag from an environment-style string."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _split_list(value: str) -> list[str]:
    """Split a comma separated list, dropping empty entries."""
    return [part.strip() for part in value.split(",") if part.strip()]


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = get_default_config()

    if "install" in data:
        result["install"] = {**result["install"], **(data["install"] or {})}

    if "output" in data:
        result["output"] = {**result["output"], **(data["output"] or {})}

    return result

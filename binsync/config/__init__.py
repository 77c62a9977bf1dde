# binsync Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from binsync.config.defaults import DEFAULT_CONFIG, generate_default_config, get_default_config
from binsync.config.loader import (
    apply_env_overrides,
    ensure_config_exists,
    get_config_path,
    load_config,
    load_config_or_defaults,
    parse_bool,
    validate_config_file,
)
from binsync.config.schema import BinsyncConfig, InstallConfig, OutputConfig

__all__ = [
    # Schema
    "BinsyncConfig",
    "InstallConfig",
    "OutputConfig",
    # Loader
    "load_config",
    "load_config_or_defaults",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    "apply_env_overrides",
    "parse_bool",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    "generate_default_config",
]

# binsync Default Configuration
# Full default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "install": {
        "source_dir": "/opt/cni/bin",
        "target_dirs": [
            "/host/opt/cni/bin",
            "/host/secondary-bin-dir",
        ],
        "update_binaries": True,
        "skip_binaries": [],
        "binaries_prefix": "",
    },
    "output": {
        "verbose": False,
        "colored": True,
    },
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# binsync - agent binary installer configuration
#
# Binaries found directly in source_dir are copied into every writable
# directory listed in target_dirs. Read-only target directories are skipped.
#
# install:
#   update_binaries: overwrite binaries that are already installed
#   skip_binaries:   names that are never installed
#   binaries_prefix: prepended to every installed filename
#
# Environment overrides:
#   BIN_SOURCE_DIR, BIN_TARGET_DIRS, UPDATE_BINARIES, SKIP_BINARIES, BINARIES_PREFIX

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)

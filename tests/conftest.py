# binsync Test Fixtures
# Pytest fixtures for binsync tests

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml


class RecordingLogger:
    """Log sink that keeps every message for assertions."""

    def __init__(self):
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def messages(self) -> list[str]:
        return self.infos + self.warnings


def write_files(directory: Path, files: dict[str, str] | None) -> None:
    """Write {filename: contents} into directory."""
    for filename, contents in (files or {}).items():
        path = directory / filename
        path.write_text(contents, encoding="utf-8")
        path.chmod(0o755)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("BINSYNC_CONFIG", raising=False)
    for name in ("BIN_SOURCE_DIR", "BIN_TARGET_DIRS", "UPDATE_BINARIES", "SKIP_BINARIES", "BINARIES_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def src_dir(temp_dir: Path) -> Path:
    """Source directory with two agent binaries."""
    src = temp_dir / "src"
    src.mkdir()
    write_files(src, {"istio-cni": "cni111", "istio-iptables": "iptables111"})
    return src


@pytest.fixture
def target_dir(temp_dir: Path) -> Path:
    """Empty target directory."""
    target = temp_dir / "target"
    target.mkdir()
    return target


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Logger capturing synchronizer output."""
    return RecordingLogger()


@pytest.fixture
def sample_config(src_dir: Path, target_dir: Path) -> dict:
    """Create sample configuration dict."""
    return {
        "install": {
            "source_dir": str(src_dir),
            "target_dirs": [str(target_dir)],
            "update_binaries": False,
            "skip_binaries": [],
            "binaries_prefix": "",
        },
        "output": {"verbose": False, "colored": False},
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file."""
    config_dir = temp_home / ".config" / "binsync"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path


@pytest.fixture
def make_files():
    """Helper writing {filename: contents} into a directory."""
    return write_files

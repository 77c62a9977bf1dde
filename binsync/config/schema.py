# binsync Configuration Schema
# Pydantic models for YAML configuration validation

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from binsync.utils.paths import expand_path


class InstallConfig(BaseModel):
    """Binary install settings."""

    source_dir: str = Field(default="/opt/cni/bin", description="Directory holding the binaries to install")
    target_dirs: list[str] = Field(
        default_factory=lambda: ["/host/opt/cni/bin", "/host/secondary-bin-dir"],
        description="Directories the binaries are installed into, processed in order",
    )
    update_binaries: bool = Field(default=True, description="Overwrite binaries that are already installed")
    skip_binaries: list[str] = Field(default_factory=list, description="Binary names that are never installed")
    binaries_prefix: str = Field(default="", description="Prefix prepended to every installed filename")

    @field_validator("source_dir")
    @classmethod
    def expand_source_dir(cls, v: str) -> str:
        """Expand ~ and environment variables in path."""
        return str(expand_path(v))

    @field_validator("target_dirs")
    @classmethod
    def expand_target_dirs(cls, v: list[str]) -> list[str]:
        """Expand ~ and environment variables in paths."""
        return [str(expand_path(p)) for p in v]

    @field_validator("skip_binaries")
    @classmethod
    def clean_skip_binaries(cls, v: list[str]) -> list[str]:
        """Strip whitespace and drop empty names."""
        return [name.strip() for name in v if name.strip()]

    @field_validator("binaries_prefix")
    @classmethod
    def check_prefix(cls, v: str) -> str:
        """A prefix must stay inside the target directory."""
        if "/" in v or "\\" in v:
            raise ValueError("binaries_prefix must not contain a path separator")
        return v


class OutputConfig(BaseModel):
    """Output and logging configuration."""

    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")


class BinsyncConfig(BaseModel):
    """Root configuration model for binsync."""

    install: InstallConfig = Field(default_factory=InstallConfig, description="Install settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")

    def get_source_dir(self) -> Path:
        """Return the source directory as a Path."""
        return Path(self.install.source_dir)

    def get_target_dirs(self) -> list[Path]:
        """Return the target directories as Paths, in configured order."""
        return [Path(p) for p in self.install.target_dirs]

# binsync Sync Engine
# Installs binaries from a source directory into one or more target directories

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

from binsync.config.schema import BinsyncConfig
from binsync.utils.paths import (
    atomic_copy,
    file_exists,
    find_temp_files,
    is_dir_writable,
    list_source_files,
    safe_delete,
)


class BinarySyncError(Exception):
    """Exception raised when an install run has to stop."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)


class SyncLog(Protocol):
    """Minimal logging capability the synchronizer writes to."""

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


@dataclass
class SyncRequest:
    """Parameters of a single install run."""

    source_dir: Path
    target_dirs: list[Path]
    update_binaries: bool = False
    skip_binaries: set[str] = field(default_factory=set)
    binaries_prefix: str = ""

    @classmethod
    def from_config(cls, config: BinsyncConfig) -> "SyncRequest":
        """Build a request from the install section of the configuration."""
        install = config.install
        return cls(
            source_dir=config.get_source_dir(),
            target_dirs=config.get_target_dirs(),
            update_binaries=install.update_binaries,
            skip_binaries=set(install.skip_binaries),
            binaries_prefix=install.binaries_prefix,
        )

    def target_name(self, filename: str) -> str:
        """Installed filename for a source binary."""
        return self.binaries_prefix + filename


class BinarySynchronizer:
    """
    Copies every binary of a source directory into each writable target directory.

    Targets are handled in the order given, source files in name order.
    Unwritable targets, skipped names and leftover temp files that cannot be
    removed are logged and passed over. Failing to list the source directory
    or to copy a file stops the run with BinarySyncError.
    """

    def __init__(self, logger: Optional[SyncLog] = None):
        """
        Initialize synchronizer.

        Args:
            logger: Log sink. Defaults to a rich console logger.
        """
        if logger is None:
            from binsync.logger import InstallLogger

            logger = InstallLogger()
        self.logger = logger

    def sync(self, request: SyncRequest) -> None:
        """
        Run the install.

        Args:
            request: What to install and where.

        Raises:
            BinarySyncError: If the source directory cannot be listed or a copy fails.
        """
        for target_dir in request.target_dirs:
            if not is_dir_writable(target_dir):
                self.logger.info(f"Directory {target_dir} is not writable, skipping.")
                continue

            self._sync_target(request, target_dir)

    def _sync_target(self, request: SyncRequest, target_dir: Path) -> None:
        """Install all source binaries into one writable target directory."""
        try:
            source_files = list_source_files(request.source_dir)
        except OSError as e:
            raise BinarySyncError(
                f"Failed to list source directory {request.source_dir}: {e}",
                path=request.source_dir,
            ) from e

        for source_file in source_files:
            filename = source_file.name
            if filename in request.skip_binaries:
                self.logger.info(f"{filename} is in the skip list, skipping.")
                continue

            target_name = request.target_name(filename)
            target_path = target_dir / target_name
            if file_exists(target_path) and not request.update_binaries:
                self.logger.info(f"{target_path} is already here and updating binaries is disabled, skipping.")
                continue

            self._remove_stale_temps(target_dir, target_name)

            try:
                atomic_copy(source_file, target_dir, target_name)
            except OSError as e:
                raise BinarySyncError(f"Failed to copy {source_file} to {target_path}: {e}", path=target_path) from e

            self.logger.info(f"Copied {filename} to {target_path}.")

    def _remove_stale_temps(self, target_dir: Path, target_name: str) -> None:
        """Delete temp files left behind by an interrupted copy of target_name."""
        try:
            matches = find_temp_files(target_dir, target_name)
        except OSError as e:
            # A fresh temp file is created by the copy either way
            self.logger.warning(f"Failed to look for temporary {target_name} files in {target_dir}: {e}")
            return

        if not matches:
            return

        self.logger.info(
            f"Target folder {target_dir} contains one or more temporary files with a {target_name} name. "
            "The temp files will be deleted."
        )
        for temp_file in matches:
            try:
                safe_delete(temp_file, missing_ok=True)
            except OSError as e:
                self.logger.warning(f"Failed to delete tmp file {temp_file} from previous run: {e}")


def copy_binaries(
    source_dir: Path,
    target_dirs: Iterable[Path],
    update_binaries: bool = False,
    skip_binaries: Optional[Iterable[str]] = None,
    binaries_prefix: str = "",
    *,
    logger: Optional[SyncLog] = None,
) -> None:
    """
    Install binaries from source_dir into every writable target directory.

    Args:
        source_dir: Directory holding the binaries.
        target_dirs: Target directories, processed in order.
        update_binaries: Overwrite binaries that are already installed.
        skip_binaries: Filenames that are never installed.
        binaries_prefix: Prepended to every installed filename.
        logger: Optional log sink.

    Raises:
        BinarySyncError: If the source directory cannot be listed or a copy fails.
    """
    request = SyncRequest(
        source_dir=Path(source_dir),
        target_dirs=[Path(p) for p in target_dirs],
        update_binaries=update_binaries,
        skip_binaries=set(skip_binaries or ()),
        binaries_prefix=binaries_prefix,
    )
    BinarySynchronizer(logger).sync(request)

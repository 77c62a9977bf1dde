# binsync Target Status
# Read-only inspection of what is installed in each target directory

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from binsync.sync.engine import BinarySyncError
from binsync.utils.paths import file_exists, find_temp_files, list_source_files


@dataclass
class TargetStatus:
    """Install state of one target directory."""

    path: Path
    exists: bool = True
    writable: bool = False
    installed: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    stale_temps: list[Path] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """Check if every non-skipped binary is installed."""
        return self.exists and not self.missing

    @property
    def has_stale_temps(self) -> bool:
        """Check if leftovers of an interrupted copy are present."""
        return len(self.stale_temps) > 0


def inspect_targets(
    source_dir: Path,
    target_dirs: Iterable[Path],
    *,
    skip_binaries: Optional[Iterable[str]] = None,
    binaries_prefix: str = "",
) -> list[TargetStatus]:
    """
    Report installed, missing and stale files for each target directory.

    Target directories are never modified. Writability is checked with
    os.access instead of the probe file the install uses.

    Args:
        source_dir: Directory holding the binaries.
        target_dirs: Target directories, reported in order.
        skip_binaries: Filenames that are never installed.
        binaries_prefix: Prepended to every installed filename.

    Returns:
        One TargetStatus per target directory.

    Raises:
        BinarySyncError: If the source directory cannot be listed.
    """
    try:
        names = [p.name for p in list_source_files(Path(source_dir))]
    except OSError as e:
        raise BinarySyncError(f"Failed to list source directory {source_dir}: {e}", path=Path(source_dir)) from e

    skip = set(skip_binaries or ())
    statuses: list[TargetStatus] = []

    for target_dir in target_dirs:
        target_dir = Path(target_dir)
        status = TargetStatus(path=target_dir)
        statuses.append(status)

        if not target_dir.is_dir():
            status.exists = False
            status.error = "Directory does not exist"
            continue

        status.writable = os.access(target_dir, os.W_OK)

        for name in names:
            if name in skip:
                status.skipped.append(name)
                continue

            target_name = binaries_prefix + name
            if file_exists(target_dir / target_name):
                status.installed.append(target_name)
            else:
                status.missing.append(target_name)

            try:
                status.stale_temps.extend(find_temp_files(target_dir, target_name))
            except OSError as e:
                status.error = f"Failed to scan for temporary files: {e}"

    return statuses

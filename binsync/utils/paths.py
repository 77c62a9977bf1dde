# binsync Path Utilities
# Filesystem primitives: listing, writability probe, atomic copy, temp cleanup

import os
import shutil
import stat
import tempfile
from pathlib import Path

# Marker inserted between the destination name and the random suffix
TEMP_MARKER = ".tmp."

# Probe file written and removed by is_dir_writable
_TOUCH_FILE = ".touch"

_COPY_CHUNK = 1024 * 1024


def expand_path(path: str | Path) -> Path:
    """
    Expand ~ and environment variables in path.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded Path object.
    """
    path_str = os.path.expandvars(os.path.expanduser(str(path)))
    return Path(path_str)


def file_exists(path: Path) -> bool:
    """Check whether path exists (symlinks are followed)."""
    return path.exists()


def is_dir_writable(directory: Path) -> bool:
    """
    Probe whether a directory accepts new files.

    Writes an empty probe file and removes it again. Mounts that are
    read-only by design report False rather than raising.

    Args:
        directory: Directory to probe.

    Returns:
        True if the probe file could be created and removed.
    """
    probe = directory / _TOUCH_FILE
    try:
        fd = os.open(probe, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        os.close(fd)
        os.remove(probe)
    except OSError:
        return False
    return True


def list_source_files(directory: Path) -> list[Path]:
    """
    List the files directly inside a directory.

    Subdirectories are skipped, nothing is recursed into. Entries are
    returned sorted by name so every run walks them in the same order.

    Args:
        directory: Directory to list.

    Returns:
        Sorted list of file paths.

    Raises:
        OSError: If the directory cannot be listed.
    """
    results: list[Path] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir():
                continue
            results.append(Path(entry.path))
    return sorted(results, key=lambda p: p.name)


def find_temp_files(directory: Path, target_name: str) -> list[Path]:
    """
    Find leftover temporary files of an interrupted atomic copy.

    Matches every entry whose name is ``<target_name>.tmp.<anything>``.
    Temp files of other destination names are never returned.

    Args:
        directory: Directory to scan.
        target_name: Destination filename the temp files belong to.

    Returns:
        Sorted list of matching paths.

    Raises:
        OSError: If the directory cannot be scanned.
    """
    prefix = target_name + TEMP_MARKER
    with os.scandir(directory) as entries:
        matches = [Path(entry.path) for entry in entries if entry.name.startswith(prefix)]
    return sorted(matches)


def atomic_copy(source: Path, target_dir: Path, target_name: str) -> Path:
    """
    Atomically copy a file into a directory under a new name.

    The contents are written to a temporary sibling
    ``<target_name>.tmp.<random>`` in the target directory, flushed to disk,
    and renamed over the final name. Readers see either the old file or
    the new one, never a partial write. The source permission bits are
    applied to the copy.

    Args:
        source: Source file path.
        target_dir: Directory receiving the copy.
        target_name: Final filename inside target_dir.

    Returns:
        Path of the installed file.

    Raises:
        FileNotFoundError: If source doesn't exist.
        OSError: If any step of the copy fails.
    """
    dest = target_dir / target_name
    mode = stat.S_IMODE(os.stat(source).st_mode)

    # Create temp file in same directory for atomic rename
    fd, temp_path = tempfile.mkstemp(dir=target_dir, prefix=target_name + TEMP_MARKER)
    try:
        with os.fdopen(fd, "wb") as dst, open(source, "rb") as src:
            os.fchmod(dst.fileno(), mode)
            shutil.copyfileobj(src, dst, _COPY_CHUNK)
            dst.flush()
            os.fsync(dst.fileno())
        os.replace(temp_path, dest)
    except Exception:
        # Cleanup on failure
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise

    return dest


def safe_delete(path: Path, *, missing_ok: bool = False) -> bool:
    """
    Delete a file or symlink. Directories are never removed.

    Args:
        path: Path to delete.
        missing_ok: If True, don't raise error if path doesn't exist.

    Returns:
        True if something was deleted, False if path didn't exist.

    Raises:
        FileNotFoundError: If path doesn't exist and missing_ok is False.
        IsADirectoryError: If path is a directory.
    """
    if path.is_dir() and not path.is_symlink():
        raise IsADirectoryError(f"Not removing directory: {path}")

    try:
        path.unlink()
    except FileNotFoundError:
        if missing_ok:
            return False
        raise
    return True

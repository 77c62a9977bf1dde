# binsync Utilities Module
# Filesystem primitives used by the binary synchronizer

from binsync.utils.paths import (
    TEMP_MARKER,
    atomic_copy,
    expand_path,
    file_exists,
    find_temp_files,
    is_dir_writable,
    list_source_files,
    safe_delete,
)

__all__ = [
    "TEMP_MARKER",
    "expand_path",
    "file_exists",
    "is_dir_writable",
    "list_source_files",
    "find_temp_files",
    "atomic_copy",
    "safe_delete",
]

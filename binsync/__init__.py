"""binsync - agent binary installer.

Synchronizes executable binaries from a source directory into one or more
target directories on a node, replacing installed files atomically and
cleaning up temp files left behind by interrupted runs.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BinarySyncError",
    "BinarySynchronizer",
    "SyncRequest",
    "copy_binaries",
    "TargetStatus",
    "inspect_targets",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("BinarySyncError", "BinarySynchronizer", "SyncRequest", "copy_binaries"):
        from binsync.sync import engine

        return getattr(engine, name)
    if name in ("TargetStatus", "inspect_targets"):
        from binsync.sync import status

        return getattr(status, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

# binsync Sync Module
# Binary synchronizer and target inspection

from binsync.sync.engine import (
    BinarySyncError,
    BinarySynchronizer,
    SyncLog,
    SyncRequest,
    copy_binaries,
)
from binsync.sync.status import TargetStatus, inspect_targets

__all__ = [
    # Engine
    "BinarySyncError",
    "BinarySynchronizer",
    "SyncLog",
    "SyncRequest",
    "copy_binaries",
    # Status
    "TargetStatus",
    "inspect_targets",
]

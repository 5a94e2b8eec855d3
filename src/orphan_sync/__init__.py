"""Bootstrap build-generated orphan files for a local development server."""

from orphan_sync.errors import ConfigurationError, OrphanSyncError
from orphan_sync.sync.models import EntryResult, MappingEntry, Outcome, RunResult
from orphan_sync.sync.synchronizer import OrphanSynchronizer, bootstrap_orphans, synchronize

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EntryResult",
    "MappingEntry",
    "OrphanSyncError",
    "OrphanSynchronizer",
    "Outcome",
    "RunResult",
    "bootstrap_orphans",
    "synchronize",
]

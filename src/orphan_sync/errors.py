class OrphanSyncError(Exception):
    """Base class for orphan-sync errors."""


class ConfigurationError(OrphanSyncError, ValueError):
    """Raised when mappings or settings are invalid; nothing has been written yet."""

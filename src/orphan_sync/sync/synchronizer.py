"""
Copy orphan files into place for the development server.

Orphan files are normally generated by the production build. Fallback copies
are checked into an orphans directory so a fresh checkout can start the dev
server without running the build. An existing destination is never touched.
"""

import shutil
from pathlib import Path
from typing import Iterable, List

from loguru import logger

from orphan_sync.config import SyncConfig
from orphan_sync.errors import ConfigurationError
from orphan_sync.log import COMPLETE_LEVEL
from orphan_sync.sync.models import EntryResult, MappingEntry, Outcome, RunResult


def validate_mappings(mappings) -> List[MappingEntry]:
    """Materialize ``mappings`` and reject anything that is not a MappingEntry."""
    if mappings is None or isinstance(mappings, (str, bytes, MappingEntry)):
        raise ConfigurationError("mappings must be a sequence of MappingEntry objects")
    try:
        entries = list(mappings)
    except TypeError as e:
        raise ConfigurationError(f"mappings must be a sequence of MappingEntry objects: {e}") from e

    for index, entry in enumerate(entries):
        if not isinstance(entry, MappingEntry):
            raise ConfigurationError(f"mapping #{index} is a {type(entry).__name__}, expected MappingEntry")
    return entries


def copy_new_file(source: Path, destination: Path):
    """
    Copy ``source`` byte for byte into a destination that must not exist yet.

    The destination is opened exclusively, so a file that appeared in the
    meantime is never overwritten. A partially written destination is removed
    again so the next run retries it instead of skipping it.
    """
    with source.open("rb") as fsrc:
        fdst = destination.open("xb")
        try:
            with fdst:
                shutil.copyfileobj(fsrc, fdst)
        except OSError:
            destination.unlink(missing_ok=True)
            raise


class OrphanSynchronizer:
    def __init__(self, instance_logger=None):
        self.logger = instance_logger if instance_logger is not None else logger

        # Plain loggers (stdlib logging, minimal adapters) only need debug/info/warning-or-warn/error.
        self._warning = getattr(self.logger, "warning", None) or self.logger.warn
        self._success = getattr(self.logger, "success", None) or self.logger.info
        if hasattr(self.logger, "success") and hasattr(self.logger, "log"):
            self._complete = lambda message: self.logger.log(COMPLETE_LEVEL, message)
        else:
            self._complete = self._success

    def plan(self, mappings: Iterable[MappingEntry]) -> List[EntryResult]:
        """Classify every entry without writing. COPIED here means "would be copied"."""
        planned = []
        for entry in validate_mappings(mappings):
            if not entry.source_path.exists():
                planned.append(EntryResult(entry, Outcome.SKIPPED_MISSING_SOURCE))
            elif entry.destination_path.exists():
                planned.append(EntryResult(entry, Outcome.SKIPPED_EXISTS))
            else:
                planned.append(EntryResult(entry, Outcome.COPIED))
        return planned

    def synchronize(self, mappings: Iterable[MappingEntry]) -> RunResult:
        entries = validate_mappings(mappings)
        result = RunResult()

        self.logger.info("Bootstrapping orphan files for development environment...")

        for entry in entries:
            if not entry.source_path.exists():
                self._warning(f"Orphan file not found: {entry.source_path.name}")
                result.record(entry, Outcome.SKIPPED_MISSING_SOURCE)
                continue

            if entry.destination_path.exists():
                self.logger.debug(f"Skipping {entry.label}: file already exists")
                result.record(entry, Outcome.SKIPPED_EXISTS)
                continue

            try:
                entry.destination_path.parent.mkdir(parents=True, exist_ok=True)
                copy_new_file(entry.source_path, entry.destination_path)
            except OSError as e:
                self.logger.error(f"Failed to copy {entry.label}: {e}")
                result.record(entry, Outcome.FAILED, str(e))
                continue

            self._success(f"Copied {entry.label}")
            result.record(entry, Outcome.COPIED)

        self._log_summary(result)
        return result

    def _log_summary(self, result: RunResult):
        if result.failed and result.copied == 0:
            self.logger.error(result.summary)
        elif result.failed:
            self._warning(result.summary)
        elif result.copied > 0:
            self._complete(result.summary)
        else:
            self.logger.info(result.summary)
            if result.skipped_existing:
                self.logger.info(f"Skipped {result.skipped_existing} existing file(s)")


def synchronize(mappings: Iterable[MappingEntry], instance_logger=None) -> RunResult:
    return OrphanSynchronizer(instance_logger).synchronize(mappings)


def bootstrap_orphans(instance_logger=None) -> RunResult:
    """Run the configured mappings. Meant to be called once before the dev server starts."""
    config = SyncConfig.from_env()
    return synchronize(config.mappings(), instance_logger)

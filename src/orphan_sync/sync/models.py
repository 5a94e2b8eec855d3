from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from orphan_sync.errors import ConfigurationError


class Outcome(Enum):
    COPIED = "copied"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_MISSING_SOURCE = "skipped_missing_source"
    FAILED = "failed"


@dataclass(frozen=True)
class MappingEntry:
    """One orphan file: where the fallback copy lives and where it must end up."""

    source_path: Path
    destination_path: Path
    description: str = ""

    def __post_init__(self):
        for name in ("source_path", "destination_path"):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise ConfigurationError(f"{self.description or 'mapping'} has an empty path ({name})")
            object.__setattr__(self, name, Path(value))

    @property
    def label(self) -> str:
        return self.description or self.source_path.name


@dataclass
class EntryResult:
    entry: MappingEntry
    outcome: Outcome
    reason: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "source": str(self.entry.source_path),
            "destination": str(self.entry.destination_path),
            "description": self.entry.description,
            "outcome": self.outcome.value,
            "reason": self.reason or "",
        }


@dataclass
class RunResult:
    """Per-entry outcomes of a synchronize call, in processing order."""

    entries: List[EntryResult] = field(default_factory=list)

    def record(self, entry: MappingEntry, outcome: Outcome, reason: Optional[str] = None) -> EntryResult:
        result = EntryResult(entry, outcome, reason)
        self.entries.append(result)
        return result

    def _count(self, outcome: Outcome) -> int:
        return sum(1 for result in self.entries if result.outcome is outcome)

    @property
    def copied(self) -> int:
        return self._count(Outcome.COPIED)

    @property
    def skipped_existing(self) -> int:
        return self._count(Outcome.SKIPPED_EXISTS)

    @property
    def skipped_missing(self) -> int:
        return self._count(Outcome.SKIPPED_MISSING_SOURCE)

    @property
    def skipped(self) -> int:
        return self.skipped_existing + self.skipped_missing

    @property
    def failed(self) -> int:
        return self._count(Outcome.FAILED)

    @property
    def summary(self) -> str:
        if self.failed and self.copied == 0:
            message = f"Failed to bootstrap {self.failed} orphan file(s)"
            if self.skipped:
                message += f", skipped {self.skipped}"
            return message
        if self.copied == 0:
            message = "No orphan files needed to be bootstrapped"
        elif self.skipped == 0:
            message = f"Bootstrapped {self.copied} orphan file(s)"
        else:
            message = f"Bootstrapped {self.copied} orphan file(s), skipped {self.skipped}"
        if self.failed:
            message += f", {self.failed} failed"
        return message

    def to_dict(self) -> Dict:
        return {
            "copied": self.copied,
            "skipped": self.skipped,
            "skipped_existing": self.skipped_existing,
            "skipped_missing": self.skipped_missing,
            "failed": self.failed,
            "summary": self.summary,
            "entries": [result.to_dict() for result in self.entries],
        }

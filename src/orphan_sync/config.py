"""
Where orphan files come from and where they go.

Explicit arguments win over environment variables, which win over defaults.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from orphan_sync.errors import ConfigurationError
from orphan_sync.sync.models import MappingEntry

PROJECT_ROOT_ENV = "ORPHANS_PROJECT_ROOT"
ORPHANS_DIR_ENV = "ORPHANS_DIR"
MANIFEST_ENV = "ORPHANS_MANIFEST"

ORPHANS_DIRNAME = "_orphans"

# (source relative to the orphans dir, destination relative to the project root, description)
DEFAULT_MAPPINGS = [
    ("componentSamples.json", "pages/shared/data/componentSamples.json", "Component samples mapping"),
    ("samples.json", "examples/static/samples/samples.json", "Samples metadata"),
]


def _resolve(path, base: Path) -> Path:
    path = Path(path).expanduser()
    return path if path.is_absolute() else base / path


def default_mappings(orphans_dir: Path, project_root: Path) -> List[MappingEntry]:
    return [
        MappingEntry(orphans_dir / src, project_root / dest, description)
        for src, dest, description in DEFAULT_MAPPINGS
    ]


def load_manifest(manifest: Path, orphans_dir: Path, project_root: Path) -> List[MappingEntry]:
    """
    Read mapping entries from a JSON manifest.

    The manifest is a list of objects with ``src``, ``dest`` and an optional
    ``description``. Relative ``src`` paths resolve against the orphans
    directory and relative ``dest`` paths against the project root.
    """
    try:
        data = json.loads(Path(manifest).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read manifest {manifest}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Manifest {manifest} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ConfigurationError(f"Manifest {manifest} must contain a JSON list of mappings")

    entries = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or not item.get("src") or not item.get("dest"):
            raise ConfigurationError(f"Manifest {manifest}: mapping #{index} needs non-empty 'src' and 'dest'")
        source = _resolve(item["src"], orphans_dir)
        entries.append(
            MappingEntry(
                source_path=source,
                destination_path=_resolve(item["dest"], project_root),
                description=str(item.get("description") or source.name),
            )
        )
    return entries


@dataclass
class SyncConfig:
    project_root: Path
    orphans_dir: Path
    manifest: Optional[Path] = None

    @classmethod
    def from_env(cls, project_root=None, orphans_dir=None, manifest=None) -> "SyncConfig":
        root_env = os.environ.get(PROJECT_ROOT_ENV)
        orphans_env = os.environ.get(ORPHANS_DIR_ENV)
        manifest_env = os.environ.get(MANIFEST_ENV)

        root = Path(project_root or root_env or Path.cwd()).expanduser().resolve()
        orphans = _resolve(orphans_dir or orphans_env or ORPHANS_DIRNAME, root)
        manifest_path = manifest or manifest_env
        return cls(
            project_root=root,
            orphans_dir=orphans,
            manifest=_resolve(manifest_path, root) if manifest_path else None,
        )

    def mappings(self) -> List[MappingEntry]:
        if self.manifest is not None:
            return load_manifest(self.manifest, self.orphans_dir, self.project_root)
        return default_mappings(self.orphans_dir, self.project_root)

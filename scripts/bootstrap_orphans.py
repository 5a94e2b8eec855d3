#!/usr/bin/env python3
"""
Dev-startup hook: copy fallback orphan files into place before the
development server starts.

Paths come from ORPHANS_PROJECT_ROOT / ORPHANS_DIR / ORPHANS_MANIFEST,
defaulting to the repository this script lives in.
"""

import os
import sys
from pathlib import Path

from orphan_sync import bootstrap_orphans
from orphan_sync.log import configure_logging


def main():
    os.environ.setdefault("ORPHANS_PROJECT_ROOT", str(Path(__file__).parent.parent))
    configure_logging()
    result = bootstrap_orphans()
    return 1 if result.failed else 0


if __name__ == "__main__":
    sys.exit(main())

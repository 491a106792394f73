"""Default on-disk location of the memory vector database.

The preferred location lives under the user's home directory; older releases
may have used other state directories, which are probed in order before
falling back to the preferred path.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .settings import get_settings

log = logging.getLogger(__name__)

STATE_DIR = ".openclaw"
DB_SUBPATH = ("memory", "lancedb")
# Relative state directories from earlier releases, checked in order
LEGACY_STATE_DIRS: tuple[str, ...] = ()


def _home_dir() -> Path:
    try:
        override = get_settings().home_dir
    except Exception:  # noqa: BLE001 - unreadable settings or .env, use the real home
        log.debug("could not load memory settings; ignoring home_dir override", exc_info=True)
        override = None
    if override is not None:
        return override
    try:
        return Path.home()
    except Exception:  # noqa: BLE001 - no resolvable home, fall back to "~" expansion
        return Path(os.path.expanduser("~"))


def _probe(candidate: Path, exists: Callable[[str], bool]) -> bool:
    try:
        return bool(exists(str(candidate)))
    except Exception:  # noqa: BLE001
        log.debug("existence check failed for %s; treating as missing", candidate)
        return False


def resolve_default_db_path(
    home: str | os.PathLike[str] | None = None,
    exists: Callable[[str], bool] | None = None,
) -> str:
    """Return the database path to use when the config does not name one.

    Never raises. ``home`` and ``exists`` are injectable for tests.
    """
    base = Path(home) if home is not None else _home_dir()
    check = exists or os.path.exists
    preferred = base.joinpath(STATE_DIR, *DB_SUBPATH)
    if _probe(preferred, check):
        return str(preferred)

    for legacy in LEGACY_STATE_DIRS:
        candidate = base.joinpath(legacy, *DB_SUBPATH)
        if _probe(candidate, check):
            log.debug("using legacy memory database at %s", candidate)
            return str(candidate)

    return str(preferred)

"""Local key-value persistence: one JSON document per key."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from aura_daily.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonStore:
    """Keyed JSON blobs stored as ``<directory>/<key>.json``.

    Each ``set`` rewrites the whole blob through a temporary file and an
    atomic replace, so the last complete write wins.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str):
        """Return the decoded blob for ``key``, or None if it was never written.

        Raises:
            PersistenceError: The blob exists but cannot be read or decoded.
        """
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with path.open(encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read {key}: {e}") from e

    def set(self, key: str, value) -> None:
        """Serialize ``value`` and replace the blob for ``key``.

        Raises:
            PersistenceError: The directory or file could not be written.
        """
        path = self.path_for(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(value, f, indent=2, ensure_ascii=False)
            os.replace(tmp, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp.exists():
                tmp.unlink()
            raise PersistenceError(f"Cannot write {key}: {e}") from e
        logger.debug("Saved %s", path)

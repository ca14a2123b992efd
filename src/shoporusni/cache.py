"""Single-file response cache with mtime-based freshness."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from shoporusni.errors import CacheIOError
from shoporusni.util.logging import get_logger

LOG = get_logger(__name__)

CACHE_FILE_NAME = "cache.json"


@dataclass(frozen=True)
class Fresh:
    content: str


@dataclass(frozen=True)
class Stale:
    content: str


@dataclass(frozen=True)
class Absent:
    """No cache file existed; an empty one has been created."""


@dataclass(frozen=True)
class Unclassified:
    """Placeholder until classify() has run."""


FreshnessState = Fresh | Stale | Absent | Unclassified

ABSENT = Absent()
UNCLASSIFIED = Unclassified()


class CacheStore:
    """Owns ``<cache_dir>/cache.json`` and the TTL it is judged against."""

    def __init__(
        self,
        cache_dir: Path,
        ttl: timedelta,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = Path(cache_dir) / CACHE_FILE_NAME
        self.ttl = ttl
        self.clock = clock
        self.state: FreshnessState = UNCLASSIFIED

    def classify(self) -> FreshnessState:
        """Read the cache file and label it Fresh, Stale or Absent.

        A missing file is created empty. An age equal to the TTL is still
        fresh; a modification time in the future counts as age zero.
        """
        LOG.info("Reading cache file: %s", self.path)
        try:
            with self.path.open("r", encoding="utf-8", newline="") as fh:
                content = fh.read()
                modified_at = os.fstat(fh.fileno()).st_mtime
        except FileNotFoundError:
            LOG.info("Cache file does not exist, creating %s", self.path)
            self._create_empty()
            self.state = ABSENT
            return self.state
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheIOError(f"Error opening cache file {self.path}: {exc}") from exc

        LOG.debug("Cache file content: %r", content)
        age_seconds = max(0.0, self.clock() - modified_at)
        LOG.info("Cache file age: %.3fs (ttl %s)", age_seconds, self.ttl)
        if age_seconds > self.ttl.total_seconds():
            LOG.info("Cache file is outdated")
            self.state = Stale(content)
        else:
            LOG.info("Cache file is fresh")
            self.state = Fresh(content)
        return self.state

    def persist(self, content: str) -> None:
        """Replace the whole file with ``content``."""
        try:
            self.path.write_text(content, encoding="utf-8", newline="")
        except OSError as exc:
            raise CacheIOError(f"Error writing cache file {self.path}: {exc}") from exc
        LOG.info("Cache written: %s", self.path)

    def _create_empty(self) -> None:
        try:
            self.path.touch(exist_ok=True)
        except OSError as exc:
            raise CacheIOError(f"Error creating cache file {self.path}: {exc}") from exc

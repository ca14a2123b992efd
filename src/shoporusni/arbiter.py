"""Decide between the cached copy and the network for one run."""

from __future__ import annotations

from collections.abc import Callable

from shoporusni.cache import Absent, CacheStore, FreshnessState, Fresh, Stale, Unclassified
from shoporusni.errors import FetchError, InvariantViolation, ResolutionError
from shoporusni.util.logging import get_logger

LOG = get_logger(__name__)

Fetcher = Callable[[str], str]


def fetch_or_fallback(fetch: Fetcher, url: str, fallback: str) -> tuple[str, bool]:
    """Fetch ``url``; on a transport failure return ``fallback`` instead.

    The flag is True when the text came from the network.
    """
    try:
        return fetch(url), True
    except FetchError as exc:
        LOG.warning("Refresh failed, using outdated cache: %s", exc)
        return fallback, False


class Arbiter:
    def __init__(self, store: CacheStore, fetch: Fetcher) -> None:
        self.store = store
        self.fetch = fetch

    def resolve(self, url: str) -> str:
        LOG.info("Deciding between API and cache")
        return self.arbitrate(self.store.classify(), url)

    def arbitrate(self, state: FreshnessState, url: str) -> str:
        if isinstance(state, Fresh):
            LOG.info("Cache is fresh, skipping API")
            return state.content

        if isinstance(state, Stale):
            LOG.info("Cache is outdated, refreshing from %s", url)
            text, fetched = fetch_or_fallback(self.fetch, url, state.content)
            if fetched:
                self.store.persist(text)
            return text

        if isinstance(state, Absent):
            LOG.info("Cache is empty, fetching from %s", url)
            try:
                text = self.fetch(url)
            except FetchError as exc:
                raise ResolutionError(f"No cached data and fetch failed: {exc}") from exc
            LOG.debug("Got data from API: %r", text)
            self.store.persist(text)
            return text

        if isinstance(state, Unclassified):
            raise InvariantViolation("Cache was never classified")
        raise InvariantViolation(f"Unknown cache state: {state!r}")

from __future__ import annotations

import requests

from shoporusni.errors import FetchError
from shoporusni.util.logging import get_logger

LOG = get_logger(__name__)

DEFAULT_URL = "https://russianwarship.rip/api/v1/statistics/latest"


class StatsClient:
    def __init__(self, user_agent: str, timeout_seconds: float = 30) -> None:
        self.timeout_seconds = timeout_seconds
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    def fetch_text(self, url: str) -> str:
        """Single GET; any transport or HTTP status failure becomes FetchError."""
        LOG.info("Fetching: %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout_seconds)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc
        return resp.text

    def close(self) -> None:
        self.session.close()

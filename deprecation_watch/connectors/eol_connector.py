# deprecation_watch/connectors/eol_connector.py
import logging
from typing import List

import requests

from deprecation_watch.connectors.retry import read_retrying
from deprecation_watch.errors import FeedUnavailable
from deprecation_watch.models import VersionRecord

logger = logging.getLogger(__name__)


class EolConnector:
    """Reads release cycles from an endoflife.date product endpoint."""

    HEADERS = {"User-Agent": "deprecation-watch/1.0", "Accept": "application/json"}

    def __init__(self, timeout: float = 15.0, attempts: int = 3):
        self.timeout = timeout
        self.attempts = attempts

    def _get_json(self, endpoint: str):
        r = requests.get(endpoint, timeout=self.timeout, headers=self.HEADERS)
        r.raise_for_status()
        return r.json()

    def fetch_eol_feed(self, endpoint: str) -> List[VersionRecord]:
        # The feed's own ordering is kept as-is; callers decide what it means.
        try:
            for attempt in read_retrying(self.attempts):
                with attempt:
                    payload = self._get_json(endpoint)
        except requests.RequestException as e:
            raise FeedUnavailable(f"Could not fetch EOL feed {endpoint}: {e}") from e

        if not isinstance(payload, list):
            raise FeedUnavailable(f"Unexpected schema from {endpoint}; expected a JSON array")

        try:
            records = [VersionRecord.from_api(item) for item in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise FeedUnavailable(f"Malformed release cycle in {endpoint}: {e}") from e

        logger.debug("endpoint=%s records=%d", endpoint, len(records))
        return records

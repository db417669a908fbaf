# deprecation_watch/connectors/slack_connector.py
import logging
from datetime import date
from enum import Enum
from typing import Callable, Optional

import requests

from deprecation_watch.errors import NotificationDeliveryFailed

logger = logging.getLogger(__name__)


class DeliveryStatus(Enum):
    SENT = "sent"
    SKIPPED = "skipped"


class SlackNotifier:
    def __init__(self, webhook_url: Optional[str], timeout: float = 15.0,
                 today: Callable[[], date] = date.today):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.today = today

    def create_greeting(self) -> str:
        d = self.today()
        return f":warning: *New deprecation alert for {d:%A}, {d.day} {d:%B %Y}.*"

    def build_message(self, text: str) -> dict:
        formatted = text.replace("Hello :wave:", "").strip()
        return {
            "text": formatted,
            "blocks": [
                {"type": "section", "text": {"type": "mrkdwn", "text": self.create_greeting()}},
                {"type": "section", "text": {"type": "mrkdwn", "text": formatted}},
                {"type": "divider"},
            ],
        }

    def send(self, text: str) -> DeliveryStatus:
        if not self.webhook_url:
            logger.info("SLACK_WEBHOOK_URL is not set, skipping Slack notification")
            return DeliveryStatus.SKIPPED
        try:
            r = requests.post(self.webhook_url, json=self.build_message(text), timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise NotificationDeliveryFailed(f"Slack notification failed: {e}") from e
        return DeliveryStatus.SENT

# rocketshoes/notifier.py
from typing import Optional, Protocol

import httpx

from .config import NOTIFICATIONS_URL, NOTIFY_TO
from .logging import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    def notify_error(self, message: str) -> None: ...


class LogNotifier:
    def notify_error(self, message: str) -> None:
        logger.warning("cart error: %s", message)


class HttpNotifier:
    """
    Sends user-facing errors to the notifications service
    (POST /api/notifications/send). Best-effort: delivery failures are logged
    and never reach the cart.
    """

    def __init__(
        self,
        base_url: str = NOTIFICATIONS_URL,
        to: str = NOTIFY_TO,
        channel: str = "push",
        client: Optional[httpx.Client] = None,
    ):
        self.to = to
        self.channel = channel
        self._client = client or httpx.Client(base_url=base_url, timeout=3.0)

    def close(self) -> None:
        self._client.close()

    def notify_error(self, message: str) -> None:
        payload = {
            "to": self.to,
            "channel": self.channel,
            "template": "cart_error",
            "ctx": {"message": message},
        }
        try:
            resp = self._client.post("/api/notifications/send", json=payload)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("notification not delivered (%s): %s", message, e)

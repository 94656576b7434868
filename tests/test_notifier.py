import json
import logging

import httpx

from rocketshoes.notifier import HttpNotifier, LogNotifier


def test_http_notifier_posts_message():
    sent = []

    def handler(request):
        sent.append((request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"sent_at": "now"})

    notifier = HttpNotifier(to="shopper@example.com", client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://notify"))

    notifier.notify_error("Error adding product")

    assert sent == [
        (
            "/api/notifications/send",
            {
                "to": "shopper@example.com",
                "channel": "push",
                "template": "cart_error",
                "ctx": {"message": "Error adding product"},
            },
        )
    ]


def test_http_notifier_failure_is_logged(caplog):
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    notifier = HttpNotifier(client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://notify"))

    with caplog.at_level(logging.WARNING, logger="rocketshoes.notifier"):
        notifier.notify_error("Error removing product")

    assert "notification not delivered" in caplog.text


def test_http_notifier_error_status_is_logged(caplog):
    notifier = HttpNotifier(client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(500)), base_url="http://notify"))

    with caplog.at_level(logging.WARNING, logger="rocketshoes.notifier"):
        notifier.notify_error("Error removing product")

    assert "Error removing product" in caplog.text


def test_log_notifier(caplog):
    with caplog.at_level(logging.WARNING, logger="rocketshoes.notifier"):
        LogNotifier().notify_error("Requested quantity out of stock")

    assert "Requested quantity out of stock" in caplog.text

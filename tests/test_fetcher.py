import unittest
from unittest.mock import Mock

import requests

from totaliser.config import TotaliserConfig
from totaliser.fetcher import fetch_campaign_page
from totaliser.models import FetchError


def _response(status_code: int, text: str = "") -> Mock:
    return Mock(ok=200 <= status_code < 400, status_code=status_code, text=text)


class FetchCampaignPageTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = TotaliserConfig(source_url="https://example.org/c", timeout=4.0)

    def test_returns_body_and_sends_headers(self) -> None:
        session = Mock()
        session.get.return_value = _response(200, "<html></html>")

        html = fetch_campaign_page(self.config, session)

        self.assertEqual(html, "<html></html>")
        session.get.assert_called_once_with(
            "https://example.org/c",
            headers=self.config.request_headers(),
            timeout=4.0,
        )

    def test_non_success_status_raises(self) -> None:
        session = Mock()
        session.get.return_value = _response(503)

        with self.assertRaises(FetchError) as ctx:
            fetch_campaign_page(self.config, session)
        self.assertEqual(ctx.exception.status_code, 503)

    def test_network_errors_are_wrapped(self) -> None:
        session = Mock()
        session.get.side_effect = requests.Timeout("read timed out")

        with self.assertRaises(FetchError) as ctx:
            fetch_campaign_page(self.config, session)
        self.assertIsInstance(ctx.exception.__cause__, requests.Timeout)
        self.assertEqual(session.get.call_count, 1)


if __name__ == "__main__":
    unittest.main()

import unittest

from totaliser.config import (
    CAMPAIGN_URL,
    FETCH_TIMEOUT,
    GOAL,
    TotaliserConfig,
    _parse_float,
    create_config_from_env,
)


class ParseFloatTests(unittest.TestCase):
    def test_parse_float_accepts_plain_numbers(self) -> None:
        for raw, expected in [("3.5", 3.5), (" 15 ", 15.0)]:
            with self.subTest(raw=raw):
                self.assertEqual(_parse_float(raw), expected)

    def test_parse_float_rejects_garbage(self) -> None:
        self.assertIsNone(_parse_float("lots"))
        self.assertIsNone(_parse_float(None))


class CreateConfigFromEnvTests(unittest.TestCase):
    def test_defaults_without_environment(self) -> None:
        config = create_config_from_env({})

        self.assertEqual(config.source_url, CAMPAIGN_URL)
        self.assertEqual(config.goal, GOAL)
        self.assertEqual(config.currency, "CAD")
        self.assertEqual(config.locale, "en-CA")
        self.assertEqual(config.timeout, FETCH_TIMEOUT)

    def test_environment_overrides(self) -> None:
        config = create_config_from_env(
            {
                "TOTALISER_CURRENCY": "usd",
                "TOTALISER_LOCALE": "en-US",
                "TOTALISER_TIMEOUT": "3.5",
            }
        )

        self.assertEqual(config.currency, "USD")
        self.assertEqual(config.locale, "en-US")
        self.assertEqual(config.timeout, 3.5)

    def test_source_url_and_goal_are_fixed(self) -> None:
        config = create_config_from_env(
            {"TOTALISER_SOURCE_URL": "https://example.org/c", "TOTALISER_GOAL": "100000"}
        )

        self.assertEqual(config.source_url, CAMPAIGN_URL)
        self.assertEqual(config.goal, GOAL)

    def test_unparsable_timeout_keeps_default(self) -> None:
        for raw in ("soon", "-1", "0"):
            with self.subTest(raw=raw):
                self.assertEqual(create_config_from_env({"TOTALISER_TIMEOUT": raw}).timeout, FETCH_TIMEOUT)


class RequestHeadersTests(unittest.TestCase):
    def test_request_headers(self) -> None:
        headers = TotaliserConfig().request_headers()

        self.assertEqual(
            headers,
            {"User-Agent": "Mozilla/5.0", "Accept-Language": "en-CA,en;q=0.9"},
        )
        self.assertNotIn("Cache-Control", headers)


if __name__ == "__main__":
    unittest.main()

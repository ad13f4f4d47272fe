"""Configuration helpers for the campaign totaliser."""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Dict, Mapping, Optional

CAMPAIGN_URL = "https://fundraisemyway.cancer.ca/campaigns/scoreforcancer"
GOAL = 250000
CURRENCY = "CAD"
LOCALE = "en-CA"
FETCH_TIMEOUT = 10.0
USER_AGENT = "Mozilla/5.0"
ACCEPT_LANGUAGE = "en-CA,en;q=0.9"


@dataclass
class TotaliserConfig:
    """Canonical configuration used by the request handler."""

    source_url: str = CAMPAIGN_URL
    goal: Optional[float] = GOAL
    currency: str = CURRENCY
    locale: str = LOCALE
    timeout: float = FETCH_TIMEOUT
    user_agent: str = USER_AGENT
    accept_language: str = ACCEPT_LANGUAGE

    def request_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept-Language": self.accept_language,
        }


def _parse_float(value: str | None) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


def create_config_from_env(environ: Mapping[str, str] | None = None) -> TotaliserConfig:
    """Create a configuration from ``TOTALISER_*`` variables.

    The source URL and goal are fixed; only display and fetch settings can
    be overridden.
    """

    env = os.environ if environ is None else environ
    timeout = _parse_float(env.get("TOTALISER_TIMEOUT"))
    return TotaliserConfig(
        currency=(env.get("TOTALISER_CURRENCY") or CURRENCY).upper(),
        locale=env.get("TOTALISER_LOCALE") or LOCALE,
        timeout=timeout if timeout and timeout > 0 else FETCH_TIMEOUT,
    )

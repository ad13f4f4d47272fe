"""HTTP retrieval of the campaign page."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import TotaliserConfig
from .models import FetchError

LOGGER = logging.getLogger(__name__)


def fetch_campaign_page(config: TotaliserConfig, session: Optional[requests.Session] = None) -> str:
    """Fetch the campaign page once and return its HTML.

    Network errors, timeouts and non-2xx responses all surface as :class:`FetchError`.
    """

    client = session or requests
    try:
        response = client.get(config.source_url, headers=config.request_headers(), timeout=config.timeout)
    except requests.RequestException as exc:
        LOGGER.warning("Fetching %s failed: %s", config.source_url, exc)
        raise FetchError(f"Request to {config.source_url} failed: {exc}") from exc

    if not response.ok:
        LOGGER.warning("Fetching %s returned HTTP %s", config.source_url, response.status_code)
        raise FetchError(
            f"{config.source_url} responded with HTTP {response.status_code}",
            status_code=response.status_code,
        )
    return response.text

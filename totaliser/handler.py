"""Request orchestration: fetch, extract, build, cache and respond."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
from typing import Any, Callable, Dict, Optional

import requests

from .builder import build_payload
from .cache import FreshnessCache
from .config import TotaliserConfig
from .extractor import extract, parse_document
from .fetcher import fetch_campaign_page
from .models import CampaignPayload, ExtractionMiss, FetchError

LOGGER = logging.getLogger(__name__)

FRESH_CACHE_CONTROL = "s-maxage=120, stale-while-revalidate=600"

FETCH_FAILED_NOTE = "source fetch failed; returning last known value"
PARSE_FAILED_NOTE = "parse failed; returning last known value"
EXCEPTION_NOTE = "exception occurred; returning last known value"


@dataclass
class HandlerResponse:
    """Status, JSON body and extra headers for one endpoint invocation."""

    status: int
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScoreTotalHandler:
    """Serves the campaign total, falling back to the last good value on failure."""

    def __init__(
        self,
        config: Optional[TotaliserConfig] = None,
        cache: Optional[FreshnessCache] = None,
        session: Optional[requests.Session] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.config = config or TotaliserConfig()
        self.cache = cache if cache is not None else FreshnessCache()
        self.session = session
        self.clock = clock

    def compute(self) -> CampaignPayload:
        """Run one fetch and extraction, raising on any failure."""

        html = fetch_campaign_page(self.config, self.session)
        extraction = extract(parse_document(html))
        if extraction is None:
            raise ExtractionMiss(f"No total found on {self.config.source_url}")
        return build_payload(
            extraction,
            goal=self.config.goal,
            source_url=self.config.source_url,
            now=self.clock(),
            currency=self.config.currency,
            locale=self.config.locale,
        )

    def handle(self) -> HandlerResponse:
        try:
            payload = self.compute()
            self.cache.put(payload)
            body = payload.to_dict()
        except FetchError as exc:
            return self._degrade(FETCH_FAILED_NOTE, 502, {"error": "Failed to fetch campaign page"}, exc)
        except ExtractionMiss as exc:
            return self._degrade(PARSE_FAILED_NOTE, 500, {"error": "Could not parse total raised"}, exc)
        except Exception as exc:
            LOGGER.exception("Unexpected failure while computing campaign total")
            return self._degrade(EXCEPTION_NOTE, 500, {"error": "Server error", "details": str(exc)}, exc)

        LOGGER.info("Campaign total %s via %s", payload.total_raised, payload.method.value)
        return HandlerResponse(200, body, {"Cache-Control": FRESH_CACHE_CONTROL})

    def _degrade(self, note: str, status: int, error_body: Dict[str, Any], exc: Exception) -> HandlerResponse:
        stale = self.cache.substitute(note)
        if stale is not None:
            LOGGER.warning("Returning stale campaign total: %s", exc)
            return HandlerResponse(200, stale.to_dict())
        LOGGER.error("No cached campaign total available: %s", exc)
        return HandlerResponse(status, error_body)

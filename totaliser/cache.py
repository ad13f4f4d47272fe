"""Single-slot store for the last successfully built payload."""
from __future__ import annotations

from dataclasses import replace
import logging
from typing import Optional

from .models import CampaignPayload

LOGGER = logging.getLogger(__name__)


class FreshnessCache:
    """Holds the most recent fresh payload and hands out stale copies of it.

    Only fresh payloads are stored; staleness is applied on the way out, so
    repeated failures keep serving the same last-good figures.
    """

    def __init__(self) -> None:
        self._payload: Optional[CampaignPayload] = None

    def get(self) -> Optional[CampaignPayload]:
        return self._payload

    def put(self, payload: CampaignPayload) -> None:
        if payload.stale:
            raise ValueError("Refusing to cache a stale payload")
        self._payload = payload

    def substitute(self, note: str) -> Optional[CampaignPayload]:
        """Return a stale copy of the cached payload, or ``None`` when empty."""

        if self._payload is None:
            return None
        LOGGER.info("Serving last known value from %s", self._payload.updated_at)
        return replace(self._payload, stale=True, note=note)

"""Shared data structures used across extraction, building and caching."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

RawAmount = Union[int, float]


class ExtractionMethod(str, Enum):
    """Provenance of an extracted total."""

    DOM_CANDIDATE = "dom-candidate"
    BODY_CURRENCY_MAX = "body-currency-max"


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of the first heuristic stage that found a plausible total."""

    value: RawAmount
    method: ExtractionMethod


@dataclass
class CampaignPayload:
    """Response body for the totaliser endpoint, also the cached state."""

    total_raised: RawAmount
    total_raised_display: str
    goal: Optional[RawAmount]
    goal_display: Optional[str]
    progress_pct: Optional[float]
    updated_at: str
    source: str
    method: ExtractionMethod
    stale: bool = False
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serialisable wire representation."""

        data: Dict[str, Any] = {
            "totalRaised": self.total_raised,
            "totalRaisedDisplay": self.total_raised_display,
            "goal": self.goal,
            "goalDisplay": self.goal_display,
            "progressPct": self.progress_pct,
            "updatedAt": self.updated_at,
            "source": self.source,
            "method": self.method.value,
            "stale": self.stale,
        }
        if self.note is not None:
            data["note"] = self.note
        return data


class TotaliserError(Exception):
    """Base class for failures the request handler knows how to recover from."""


class FetchError(TotaliserError):
    """The campaign page could not be retrieved or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExtractionMiss(TotaliserError):
    """No heuristic stage found a total on the fetched page."""

"""Turn an extraction into the response payload."""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .config import CURRENCY, LOCALE
from .models import CampaignPayload, ExtractionResult, RawAmount
from .money import format_money


def _isoformat(now: datetime) -> str:
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def progress_percentage(total: RawAmount, goal: Optional[RawAmount]) -> Optional[float]:
    if not goal:
        return None
    ratio = Decimal(repr(total / goal * 100))
    return float(ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def build_payload(
    extraction: ExtractionResult,
    goal: Optional[RawAmount],
    source_url: str,
    now: datetime,
    currency: str = CURRENCY,
    locale: str = LOCALE,
) -> CampaignPayload:
    """Derive display strings and progress for a freshly extracted total."""

    total = extraction.value
    return CampaignPayload(
        total_raised=total,
        total_raised_display=format_money(total, currency, locale),
        goal=goal,
        goal_display=format_money(goal, currency, locale) if goal else None,
        progress_pct=progress_percentage(total, goal),
        updated_at=_isoformat(now),
        source=source_url,
        method=extraction.method,
        stale=False,
    )

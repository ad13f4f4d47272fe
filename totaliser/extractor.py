"""Heuristic extraction of the amount raised from a campaign page."""
from __future__ import annotations

import logging
import math
import re
from typing import Callable, List, Optional, Sequence

from bs4 import BeautifulSoup

from .models import ExtractionMethod, ExtractionResult
from .money import parse_money

LOGGER = logging.getLogger(__name__)

# Most specific widget first.
DOM_CANDIDATE_SELECTORS: Sequence[str] = (
    '[data-testid*="raised"]',
    '[class*="raised"]',
    '[class*="donation"]',
    '[class*="amount"]',
)

CURRENCY_TOKEN_PATTERN = re.compile(r"\$[\d,]+(?:\.\d{2})?")

Stage = Callable[[BeautifulSoup], Optional[ExtractionResult]]


def parse_document(html: str) -> BeautifulSoup:
    """Parse raw HTML into a queryable document."""

    return BeautifulSoup(html, "html.parser")


def _dom_candidates(document: BeautifulSoup) -> List[str]:
    candidates: List[str] = []
    for selector in DOM_CANDIDATE_SELECTORS:
        element = document.select_one(selector)
        if element is None:
            continue
        text = element.get_text()
        if text:
            candidates.append(text)
    return candidates


def extract_dom_candidate(document: BeautifulSoup) -> Optional[ExtractionResult]:
    """Look at the first element of each "amount raised" selector, in priority order."""

    for candidate in _dom_candidates(document):
        value = parse_money(candidate)
        if value is not None and value > 0:
            return ExtractionResult(value=value, method=ExtractionMethod.DOM_CANDIDATE)
    return None


def extract_body_currency_max(document: BeautifulSoup) -> Optional[ExtractionResult]:
    """Pick the largest ``$`` amount mentioned anywhere in the page body.

    Campaign pages usually show both the raised amount and the goal, so this
    is a best guess rather than a reliable reading.
    """

    root = document.body if document.body is not None else document
    body_text = root.get_text() or ""
    values = [parse_money(token) for token in CURRENCY_TOKEN_PATTERN.findall(body_text)]
    values = [value for value in values if value is not None and math.isfinite(value) and value > 0]
    if not values:
        return None
    return ExtractionResult(value=max(values), method=ExtractionMethod.BODY_CURRENCY_MAX)


EXTRACTION_STAGES: Sequence[Stage] = (
    extract_dom_candidate,
    extract_body_currency_max,
)


def extract(document: BeautifulSoup, stages: Sequence[Stage] = EXTRACTION_STAGES) -> Optional[ExtractionResult]:
    """Run the heuristic stages in order and return the first hit, if any."""

    for stage in stages:
        result = stage(document)
        if result is not None:
            LOGGER.debug("Stage %s matched %s", stage.__name__, result.value)
            return result
    LOGGER.debug("No extraction stage matched")
    return None

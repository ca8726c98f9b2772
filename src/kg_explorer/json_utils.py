from __future__ import annotations

"""Helpers to recover structured insights from noisy model output."""

import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from .models import StructuredInsight

logger = logging.getLogger(__name__)


def extract_json_block(text: str) -> Optional[str]:
    """Return the span from the first ``[`` to the last ``]``, inclusive.

    This is a plain character search, not a JSON-aware scan: brackets inside
    string values or several arrays in one answer will produce a span that
    fails to parse.
    """

    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def parse_insights(text: str) -> Optional[List[StructuredInsight]]:
    """Parse the embedded JSON array of insight records.

    Returns ``None`` when no array can be recovered. Array elements that are
    not objects are skipped.
    """

    block = extract_json_block(text)
    if block is None:
        return None

    try:
        payload = json.loads(block)
    except (ValueError, RecursionError) as exc:
        # Also covers oversized integers and runaway nesting.
        logger.warning("Insight array does not parse as JSON: %s", type(exc).__name__)
        return None
    if not isinstance(payload, list):
        return None

    insights: List[StructuredInsight] = []
    for item in payload:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object insight record: %r", item)
            continue
        try:
            insights.append(StructuredInsight.model_validate(item))
        except ValidationError as exc:
            logger.warning("Skipping invalid insight record %r: %s", item, exc)
    return insights


__all__ = ["extract_json_block", "parse_insights"]

"""Confidence scoring for detected page segments."""

from __future__ import annotations

from src.core.models.recording import PageIntent
from src.pagedetection.segmenter import PageSegment

BASE_CONFIDENCE = 0.5
URL_BONUS = 0.2
INTENT_BONUS = 0.2
ACTION_COUNT_BONUS = 0.1
MIN_ACTIONS_FOR_BONUS = 3


def score_confidence(segment: PageSegment, intent: PageIntent) -> float:
    """Additive confidence in [0.5, 1.0] for a segment and its intent.

    Components:
    - +0.2 when the segment has a resolved URL
    - +0.2 when the intent is not GENERIC
    - +0.1 when the segment holds at least 3 actions
    """
    confidence = BASE_CONFIDENCE
    if segment.url:
        confidence += URL_BONUS
    if intent != PageIntent.GENERIC:
        confidence += INTENT_BONUS
    if len(segment.actions) >= MIN_ACTIONS_FOR_BONUS:
        confidence += ACTION_COUNT_BONUS
    return round(min(confidence, 1.0), 2)

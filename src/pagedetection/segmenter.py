"""Page segmentation: splits an action trace into contiguous page segments.

Boundaries are sorted by index and the trace is cut at each one. Zero-length
slices (coincident or leading boundaries) are dropped, so duplicate
boundaries from the detector are harmless.

Each segment records the action that led *into* it: the trigger of the most
recent boundary processed before the segment starts. The first emitted
segment never has a trigger, even when a leading boundary was skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from src.core.models.recording import ActionType, PageIntent
from src.pagedetection.actions import Action
from src.pagedetection.boundaries import Boundary, extract_url_pattern

logger = logging.getLogger(__name__)

# Confidence assigned before scoring
_SINGLE_PAGE_CONFIDENCE = 0.5
_SEGMENT_CONFIDENCE = 0.7


@dataclass
class PageSegment:
    """A contiguous run of actions believed to occur on one logical page."""

    segment_id: str
    start_index: int
    end_index: int  # exclusive
    actions: tuple[Action, ...]
    page_name: str = "Page"
    intent: PageIntent = PageIntent.GENERIC
    confidence: float = _SEGMENT_CONFIDENCE
    url: str | None = None
    url_pattern: str | None = None
    trigger_index: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return self.end_index - self.start_index

    def trigger_action(self, trace: Sequence[Action]) -> Action | None:
        """Look up the action that led into this segment."""
        if self.trigger_index is None:
            return None
        return trace[self.trigger_index]

    def as_payload(self) -> dict[str, Any]:
        """JSON-ready dict; metadata keys never shadow the core fields."""
        return {
            **self.metadata,
            "id": self.segment_id,
            "page_name": self.page_name,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "action_count": len(self.actions),
            "intent": str(self.intent),
            "confidence": self.confidence,
            "url": self.url,
            "url_pattern": self.url_pattern,
            "trigger_index": self.trigger_index,
        }


def first_navigation_url(actions: Sequence[Action]) -> str | None:
    """URL argument of the first navigation action, if any."""
    for action in actions:
        if action.type == ActionType.NAVIGATION:
            return action.first_arg_url
    return None


def segment_actions(actions: Sequence[Action], boundaries: Sequence[Boundary]) -> list[PageSegment]:
    """Partition ``actions`` at the given boundaries."""
    if not boundaries:
        url = first_navigation_url(actions)
        return [
            PageSegment(
                segment_id="segment_0",
                start_index=0,
                end_index=len(actions),
                actions=tuple(actions),
                confidence=_SINGLE_PAGE_CONFIDENCE,
                url=url,
                url_pattern=extract_url_pattern(url) if url is not None else None,
            )
        ]

    ordered = sorted(boundaries, key=lambda b: b.boundary_index)
    segments: list[PageSegment] = []
    cursor = 0
    previous: Boundary | None = None

    for position, boundary in enumerate(ordered):
        end = boundary.boundary_index
        if end > cursor:
            sliced = tuple(actions[cursor:end])
            url = first_navigation_url(sliced) or boundary.url
            segments.append(
                PageSegment(
                    segment_id=f"segment_{position}",
                    start_index=cursor,
                    end_index=end,
                    actions=sliced,
                    url=url,
                    url_pattern=extract_url_pattern(url) if url is not None else boundary.url_pattern,
                    trigger_index=previous.trigger_index if previous and segments else None,
                )
            )
        else:
            logger.debug("Skipping empty slice at index %d", end)
        previous = boundary
        cursor = max(cursor, end)

    if cursor < len(actions):
        sliced = tuple(actions[cursor:])
        url = first_navigation_url(sliced)
        segments.append(
            PageSegment(
                segment_id=f"segment_{len(ordered)}",
                start_index=cursor,
                end_index=len(actions),
                actions=sliced,
                url=url,
                url_pattern=extract_url_pattern(url) if url is not None else None,
                trigger_index=previous.trigger_index if previous and segments else None,
            )
        )

    return segments

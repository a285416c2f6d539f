"""Page detection pipeline: action trace in, named page segments out.

Runs boundary detection, segmentation, and then intent classification,
naming and confidence scoring per segment. The pipeline is a pure function of
its inputs; every call builds fresh segments.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence
from dataclasses import replace

from src.pagedetection.actions import Action
from src.pagedetection.boundaries import detect_boundaries
from src.pagedetection.confidence import score_confidence
from src.pagedetection.heuristics import HeuristicsConfig, get_heuristics
from src.pagedetection.intent import IntentClassifier, IntentHint
from src.pagedetection.naming import NameGenerator
from src.pagedetection.segmenter import PageSegment, segment_actions

logger = logging.getLogger(__name__)


class PageBoundaryDetector:
    """Detects page boundaries in a recorded trace and names each page."""

    def __init__(self, config: HeuristicsConfig | None = None) -> None:
        self.config = config or HeuristicsConfig()
        self._classifier = IntentClassifier(self.config)
        self._namer = NameGenerator(self.config)

    def detect_pages(
        self,
        actions: Sequence[Action],
        intent_hint: IntentHint | None = None,
    ) -> list[PageSegment]:
        """Segment ``actions`` into named pages.

        Args:
            actions: The recorded trace, in order.
            intent_hint: Optional test-level intent from upstream analysis.

        Returns:
            Segments ordered by start index, partitioning the trace. Empty
            for an empty trace.
        """
        if not actions:
            return []

        boundaries = detect_boundaries(actions, self.config)
        raw_segments = segment_actions(actions, boundaries)

        pages: list[PageSegment] = []
        for index, segment in enumerate(raw_segments):
            intent = self._classifier.classify(segment, intent_hint)
            page_name, strategy = self._namer.generate_with_strategy(segment, intent, index, actions)
            pages.append(
                replace(
                    segment,
                    page_name=page_name,
                    intent=intent,
                    confidence=score_confidence(segment, intent),
                    metadata={**segment.metadata, "name_strategy": strategy},
                )
            )

        logger.debug(
            "Detected %d pages from %d actions (%d boundaries)",
            len(pages),
            len(actions),
            len(boundaries),
        )
        return pages


@functools.lru_cache
def _default_detector() -> PageBoundaryDetector:
    return PageBoundaryDetector(get_heuristics())


def detect_pages(
    actions: Sequence[Action],
    intent_hint: IntentHint | None = None,
    config: HeuristicsConfig | None = None,
) -> list[PageSegment]:
    """Detect and name the pages in a recorded action trace.

    Uses heuristics from application settings unless ``config`` is given.
    """
    detector = PageBoundaryDetector(config) if config is not None else _default_detector()
    return detector.detect_pages(actions, intent_hint)

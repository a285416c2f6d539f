"""Page detection for recorded browser traces.

Detects page transitions in a recorded action trace, partitions the trace
into page segments, classifies each segment's intent, and generates a page
name with a confidence score for downstream page-object generation.
"""

from src.pagedetection.actions import Action, LocatorTarget, parse_actions, resolve_element_name
from src.pagedetection.boundaries import Boundary, detect_boundaries
from src.pagedetection.confidence import score_confidence
from src.pagedetection.detector import PageBoundaryDetector, detect_pages
from src.pagedetection.heuristics import HeuristicsConfig, HeuristicsConfigError, load_heuristics
from src.pagedetection.intent import IntentClassifier, IntentHint
from src.pagedetection.naming import NameGenerator, to_pascal_case
from src.pagedetection.segmenter import PageSegment, segment_actions

__all__ = [
    "Action",
    "Boundary",
    "HeuristicsConfig",
    "HeuristicsConfigError",
    "IntentClassifier",
    "IntentHint",
    "LocatorTarget",
    "NameGenerator",
    "PageBoundaryDetector",
    "PageSegment",
    "detect_boundaries",
    "detect_pages",
    "load_heuristics",
    "parse_actions",
    "resolve_element_name",
    "score_confidence",
    "segment_actions",
    "to_pascal_case",
]

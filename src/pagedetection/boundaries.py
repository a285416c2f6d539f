"""Page boundary detection: finds page transitions in a recorded action trace.

Two kinds of transition are recognised:
- explicit: a direct ``goto`` navigation, boundary at the navigation itself
- implicit: a navigational click, boundary placed right after the click

A click is navigational when the next action is an explicit navigation, or
when it targets an accessibility role listed in ``navigation_roles`` (only
``link`` by default; buttons and menu items never qualify).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import urlsplit

from src.core.models.recording import ActionType, BoundaryType
from src.pagedetection.actions import Action
from src.pagedetection.heuristics import HeuristicsConfig

logger = logging.getLogger(__name__)

_ROLE_LOCATOR = "getByRole"


@dataclass(frozen=True)
class Boundary:
    """A detected transition point between two logical pages."""

    boundary_index: int
    boundary_type: BoundaryType
    trigger_index: int  # index of the triggering action in the trace
    url: str | None = None
    url_pattern: str | None = None


def extract_url_pattern(url: str) -> str:
    """Return the path component of an absolute URL.

    Query string and fragment are dropped, so ``file:///tmp/a.html`` gives
    ``/tmp/a.html`` and ``about:blank`` gives ``blank``. Relative or
    unparsable URLs are returned unchanged.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        logger.debug("Unparsable URL %r, using it verbatim", url)
        return url
    if not parts.scheme:
        return url
    if parts.netloc:
        return parts.path or "/"
    return parts.path


def find_next_navigation(actions: Sequence[Action], from_index: int) -> Action | None:
    """First navigation action at or after ``from_index``."""
    for action in actions[from_index:]:
        if action.type == ActionType.NAVIGATION:
            return action
    return None


def is_navigation_click(actions: Sequence[Action], index: int, config: HeuristicsConfig) -> bool:
    """Whether the click at ``index`` leads to another page."""
    action = actions[index]
    if not action.is_click:
        return False

    if index + 1 < len(actions) and actions[index + 1].is_goto:
        return True

    target = action.target
    return target is not None and target.type == _ROLE_LOCATOR and target.selector in config.navigation_roles


def detect_boundaries(actions: Sequence[Action], config: HeuristicsConfig | None = None) -> list[Boundary]:
    """Scan a trace for explicit and implicit page boundaries.

    The result is in scan order, not sorted, and may hold several boundaries
    at the same index (a navigational click followed by its goto).
    """
    config = config or HeuristicsConfig()
    boundaries: list[Boundary] = []

    for i, action in enumerate(actions):
        if action.is_goto:
            url = action.first_arg_url
            boundaries.append(
                Boundary(
                    boundary_index=i,
                    boundary_type=BoundaryType.EXPLICIT,
                    trigger_index=i,
                    url=url,
                    url_pattern=extract_url_pattern(url) if url is not None else None,
                )
            )
            continue

        if is_navigation_click(actions, i, config):
            next_nav = find_next_navigation(actions, i + 1)
            url = next_nav.first_arg_url if next_nav else None
            boundaries.append(
                Boundary(
                    boundary_index=i + 1,
                    boundary_type=BoundaryType.IMPLICIT,
                    trigger_index=i,
                    url=url,
                    url_pattern=extract_url_pattern(url) if url is not None else None,
                )
            )

    logger.debug("Detected %d page boundaries in %d actions", len(boundaries), len(actions))
    return boundaries

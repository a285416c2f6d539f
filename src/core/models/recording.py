"""Recording models: action kinds, boundary kinds, and page intents.

Enumerations shared by the page detection pipeline for browser traces captured
by an upstream recorder.
"""

from __future__ import annotations

import enum

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ActionType(enum.StrEnum):
    """Kinds of recorded browser actions."""

    NAVIGATION = "navigation"
    CLICK = "click"
    FILL = "fill"
    TYPE = "type"
    SELECT = "select"
    ASSERTION = "assertion"
    HOVER = "hover"
    CHECK = "check"
    PRESS = "press"
    WAIT = "wait"
    OTHER = "other"


class BoundaryType(enum.StrEnum):
    """How a page transition was detected."""

    EXPLICIT = "explicit"
    IMPLICIT = "implicit"


class PageIntent(enum.StrEnum):
    """Dominant intent of a page segment."""

    AUTHENTICATION = "authentication"
    FORM = "form"
    DASHBOARD = "dashboard"
    NAVIGATION = "navigation"
    VERIFICATION = "verification"
    GENERIC = "generic"

"""Domain enums for the page detection platform.

This package re-exports the enums from domain-specific modules so that code
can use ``from src.core.models import X``.
"""

from src.core.models.recording import ActionType, BoundaryType, PageIntent

__all__ = [
    "ActionType",
    "BoundaryType",
    "PageIntent",
]

"""Recorded action records and element-name resolution.

Actions arrive from an external recorder as loosely-typed dicts. They are
validated once at the edge into frozen pydantic models and never mutated
afterwards.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.core.models.recording import ActionType

logger = logging.getLogger(__name__)

_NAME_OPTION_RE = re.compile(r"""name:\s*['"]([^'"]+)['"]""")
_GET_BY_TEXT_RE = re.compile(r"""getByText\(['"]([^'"]+)['"]""")

_FILL_TYPES = {ActionType.FILL, ActionType.TYPE}


class LocatorTarget(BaseModel):
    """How the recorded action located its element."""

    model_config = ConfigDict(frozen=True)

    type: str = ""  # locator strategy: getByRole, getByText, locator, ...
    selector: str = ""  # raw locator string, or the role for getByRole
    options: dict[str, Any] = Field(default_factory=dict)


class Action(BaseModel):
    """A single recorded browser interaction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    method: str | None = None
    args: list[Any] = Field(default_factory=list)
    target: LocatorTarget | None = None
    expression: str = ""
    id: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)
    line_number: int | None = Field(default=None, alias="lineNumber")

    @property
    def is_goto(self) -> bool:
        return self.type == ActionType.NAVIGATION and self.method == "goto"

    @property
    def is_click(self) -> bool:
        return self.type == ActionType.CLICK

    @property
    def is_fill(self) -> bool:
        return self.type in _FILL_TYPES

    @property
    def first_arg_url(self) -> str | None:
        """The first call argument when it is a string, else None."""
        if self.args and isinstance(self.args[0], str):
            return self.args[0]
        return None


def parse_actions(raw: list[dict[str, Any]]) -> list[Action]:
    """Validate raw recorder dicts into Action models.

    Raises:
        pydantic.ValidationError: If any record is malformed.
    """
    actions = [Action.model_validate(item) for item in raw]
    logger.debug("Parsed %d recorded actions", len(actions))
    return actions


def resolve_element_name(action: Action) -> str:
    """Best human-readable name for the element an action touched.

    Preference: explicit ``name`` locator option, a ``name: '...'`` token in
    the expression, a ``getByText('...')`` token, the raw locator selector.
    Returns an empty string when nothing is available.
    """
    target = action.target
    if target is not None:
        name = target.options.get("name")
        if name:
            return str(name)

    match = _NAME_OPTION_RE.search(action.expression)
    if match:
        return match.group(1)

    match = _GET_BY_TEXT_RE.search(action.expression)
    if match:
        return match.group(1)

    if target is not None and target.selector:
        return target.selector
    return ""

"""Segment intent classification.

Rule-based classifier that assigns one PageIntent to each page segment. Rules
are evaluated in order and the first matching rule wins; GENERIC is the
default when nothing matches.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from src.core.models.recording import ActionType, PageIntent
from src.pagedetection.actions import resolve_element_name
from src.pagedetection.heuristics import HeuristicsConfig
from src.pagedetection.segmenter import PageSegment

logger = logging.getLogger(__name__)

# Upstream test-intent types that map onto a page intent
_HINT_INTENTS = {
    "authentication": PageIntent.AUTHENTICATION,
    "form-interaction": PageIntent.FORM,
    "navigation": PageIntent.NAVIGATION,
    "verification": PageIntent.VERIFICATION,
}


@dataclass(frozen=True)
class IntentHint:
    """Test-level intent produced by upstream intent analysis."""

    primary: str
    confidence: float = 0.0

    def as_page_intent(self) -> PageIntent | None:
        return _HINT_INTENTS.get(self.primary.lower())


@dataclass(frozen=True)
class ActionProfile:
    """Action counts for a segment."""

    fill_count: int = 0
    click_count: int = 0
    select_count: int = 0
    assertion_count: int = 0
    navigation_count: int = 0

    @classmethod
    def from_segment(cls, segment: PageSegment) -> ActionProfile:
        fills = clicks = selects = assertions = navigations = 0
        for action in segment.actions:
            if action.is_fill:
                fills += 1
            elif action.type == ActionType.CLICK:
                clicks += 1
            elif action.type == ActionType.SELECT:
                selects += 1
            elif action.type == ActionType.ASSERTION:
                assertions += 1
            elif action.type == ActionType.NAVIGATION:
                navigations += 1
        return cls(fills, clicks, selects, assertions, navigations)


RulePredicate = Callable[[PageSegment, ActionProfile, HeuristicsConfig], bool]


@dataclass(frozen=True)
class IntentRule:
    """A named predicate that assigns an intent when it matches."""

    name: str
    intent: PageIntent
    predicate: RulePredicate

    def matches(self, segment: PageSegment, profile: ActionProfile, config: HeuristicsConfig) -> bool:
        return self.predicate(segment, profile, config)


def has_authentication_pattern(segment: PageSegment, _profile: ActionProfile, config: HeuristicsConfig) -> bool:
    """Credential keywords in the expressions plus a login/sign-in click."""
    expressions = " ".join(a.expression.lower() for a in segment.actions)
    if not any(kw in expressions for kw in config.auth_keywords):
        return False

    for action in segment.actions:
        if not action.is_click:
            continue
        element_name = resolve_element_name(action).lower()
        if any(kw in element_name for kw in config.login_button_keywords):
            return True
    return False


def _is_form(_segment: PageSegment, profile: ActionProfile, _config: HeuristicsConfig) -> bool:
    return profile.fill_count > 0 and profile.click_count > 0


def _is_dashboard(segment: PageSegment, _profile: ActionProfile, config: HeuristicsConfig) -> bool:
    if not segment.url:
        return False
    url = segment.url.lower()
    return any(token in url for token in config.dashboard_url_tokens)


def _is_navigation(_segment: PageSegment, profile: ActionProfile, _config: HeuristicsConfig) -> bool:
    return profile.click_count > 0 and profile.fill_count == 0


def _is_verification(_segment: PageSegment, profile: ActionProfile, _config: HeuristicsConfig) -> bool:
    return profile.assertion_count > 0 and profile.fill_count == 0 and profile.click_count == 0


# Order matters: the first matching rule wins
DEFAULT_RULES: tuple[IntentRule, ...] = (
    IntentRule("authentication", PageIntent.AUTHENTICATION, has_authentication_pattern),
    IntentRule("form", PageIntent.FORM, _is_form),
    IntentRule("dashboard", PageIntent.DASHBOARD, _is_dashboard),
    IntentRule("navigation", PageIntent.NAVIGATION, _is_navigation),
    IntentRule("verification", PageIntent.VERIFICATION, _is_verification),
)


class IntentClassifier:
    """Rule-based intent classifier for page segments."""

    def __init__(
        self,
        config: HeuristicsConfig | None = None,
        rules: tuple[IntentRule, ...] | None = None,
    ) -> None:
        self._config = config or HeuristicsConfig()
        self._rules = rules if rules is not None else DEFAULT_RULES

    def classify(self, segment: PageSegment, intent_hint: IntentHint | None = None) -> PageIntent:
        """Classify a single segment.

        The intent hint is only consulted when enabled in the heuristics and
        the rules fell through to GENERIC.
        """
        profile = ActionProfile.from_segment(segment)
        for rule in self._rules:
            if rule.matches(segment, profile, self._config):
                return rule.intent

        if intent_hint is not None and self._config.use_intent_hint:
            hinted = intent_hint.as_page_intent()
            if hinted is not None:
                logger.debug("Segment %s: generic intent overridden by hint %s", segment.segment_id, hinted)
                return hinted

        return PageIntent.GENERIC

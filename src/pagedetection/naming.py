"""Page name generation for detected segments.

Names come from an ordered cascade of strategies; the first one that yields
a name wins:

1. trigger: the name of the link clicked to reach the page
2. url: the most meaningful component of the URL path
3. intent: a fixed name per classified intent
4. actions: the first distinctive word among the touched elements
5. fallback: ``Page<n>`` by position
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from src.core.models.recording import PageIntent
from src.pagedetection.actions import Action, resolve_element_name
from src.pagedetection.heuristics import HeuristicsConfig
from src.pagedetection.segmenter import PageSegment

logger = logging.getLogger(__name__)

PAGE_SUFFIX = "Page"

_WORD_SPLIT_RE = re.compile(r"[\s_-]+")
_CAPITALIZED_WORD_RE = re.compile(r"[A-Z][a-z]+")
_NUMERIC_RE = re.compile(r"\d+")
_EDGE_SLASH_RE = re.compile(r"^/|/$")
_NON_ALNUM_RE = re.compile(r"[^0-9A-Za-z]")


def to_pascal_case(value: str) -> str:
    """Capitalize each whitespace/underscore/hyphen separated word and join them.

    Other punctuation is kept as-is: ``"summary.php"`` becomes ``"Summary.php"``.
    """
    return "".join(word[:1].upper() + word[1:].lower() for word in _WORD_SPLIT_RE.split(value))


@dataclass(frozen=True)
class NamingContext:
    """Everything a naming strategy may look at."""

    segment: PageSegment
    intent: PageIntent
    index: int
    trace: Sequence[Action]
    config: HeuristicsConfig


NamingStrategy = Callable[[NamingContext], str | None]


def _as_page_name(raw: str, config: HeuristicsConfig) -> str | None:
    name = to_pascal_case(raw)
    if config.sanitize_names:
        name = _NON_ALNUM_RE.sub("", name)
    if not name:
        return None
    if name.endswith(PAGE_SUFFIX):
        return name
    return f"{name}{PAGE_SUFFIX}"


def name_from_trigger(ctx: NamingContext) -> str | None:
    trigger = ctx.segment.trigger_action(ctx.trace)
    if trigger is None:
        return None
    trigger_name = resolve_element_name(trigger)
    if not trigger_name:
        return None
    return _as_page_name(trigger_name, ctx.config)


def select_url_component(url_pattern: str, config: HeuristicsConfig) -> str | None:
    """Pick the path component that best names the page.

    Numeric components are treated as resource IDs and ignored. Components
    holding a meaningful keyword win (searching from the end), then the first
    component that is neither generic nor a file-extension token, then the
    last component.
    """
    clean_path = _EDGE_SLASH_RE.sub("", url_pattern)
    if not clean_path:
        return None

    parts = [p for p in clean_path.split("/") if p and not _NUMERIC_RE.fullmatch(p)]
    if not parts:
        return None

    for part in reversed(parts):
        lower_part = part.lower()
        if any(kw in lower_part for kw in config.meaningful_url_keywords):
            return part

    extension_re = re.compile(config.file_extension_pattern)
    for part in parts:
        lower_part = part.lower()
        if lower_part not in config.generic_url_keywords and not extension_re.search(lower_part):
            return part

    return parts[-1]


def name_from_url(ctx: NamingContext) -> str | None:
    if not ctx.segment.url_pattern:
        return None
    selected = select_url_component(ctx.segment.url_pattern, ctx.config)
    if selected is None:
        return None
    return _as_page_name(selected, ctx.config)


def name_from_intent(ctx: NamingContext) -> str | None:
    return ctx.config.intent_page_names.get(ctx.intent)


def name_from_actions(ctx: NamingContext) -> str | None:
    stoplist = {word.lower() for word in ctx.config.naming_stoplist}
    entities: dict[str, None] = {}  # ordered set

    for action in ctx.segment.actions:
        element_name = resolve_element_name(action)
        if not element_name:
            continue
        words = _CAPITALIZED_WORD_RE.findall(element_name) or _WORD_SPLIT_RE.split(element_name)
        for word in words:
            if len(word) >= ctx.config.min_token_length and word.lower() not in stoplist:
                entities.setdefault(word, None)

    for entity in entities:
        name = _as_page_name(entity, ctx.config)
        if name:
            return name
    return None


def name_from_position(ctx: NamingContext) -> str:
    return f"{PAGE_SUFFIX}{ctx.index + 1}"


DEFAULT_STRATEGIES: tuple[tuple[str, NamingStrategy], ...] = (
    ("trigger", name_from_trigger),
    ("url", name_from_url),
    ("intent", name_from_intent),
    ("actions", name_from_actions),
)


class NameGenerator:
    """Runs the naming cascade for a segment."""

    def __init__(
        self,
        config: HeuristicsConfig | None = None,
        strategies: tuple[tuple[str, NamingStrategy], ...] | None = None,
    ) -> None:
        self._config = config or HeuristicsConfig()
        self._strategies = strategies if strategies is not None else DEFAULT_STRATEGIES

    def generate(
        self,
        segment: PageSegment,
        intent: PageIntent,
        index: int,
        trace: Sequence[Action] | None = None,
    ) -> str:
        """Return the page name for ``segment``; never empty."""
        name, _strategy = self.generate_with_strategy(segment, intent, index, trace)
        return name

    def generate_with_strategy(
        self,
        segment: PageSegment,
        intent: PageIntent,
        index: int,
        trace: Sequence[Action] | None = None,
    ) -> tuple[str, str]:
        """Return ``(page_name, strategy_name)``.

        ``trace`` is the full action list the segment was cut from; trigger
        lookups need it. Without it the trigger strategy is skipped.
        """
        ctx = NamingContext(
            segment=segment,
            intent=intent,
            index=index,
            trace=trace if trace is not None else (),
            config=self._config,
        )
        for strategy_name, strategy in self._strategies:
            if strategy_name == "trigger" and trace is None:
                continue
            name = strategy(ctx)
            if name:
                logger.debug("Segment %s named %s by %s strategy", segment.segment_id, name, strategy_name)
                return name, strategy_name
        return name_from_position(ctx), "fallback"

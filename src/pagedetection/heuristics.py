"""Keyword lists and tunables for page detection heuristics.

Defaults mirror the built-in rules. Any subset can be overridden from a YAML
document, e.g.::

    meaningful_url_keywords: [dashboard, admin, billing]
    naming_stoplist: [button, link, input]
    sanitize_names: true
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.core.config import Settings, get_settings
from src.core.models.recording import PageIntent

logger = logging.getLogger(__name__)


class HeuristicsConfigError(ValueError):
    """Raised when a heuristics YAML document cannot be used."""


class HeuristicsConfig(BaseModel):
    """Keyword lists consumed by the detector, classifier and name generator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Boundary detection: getByRole roles whose clicks count as navigation
    navigation_roles: tuple[str, ...] = ("link",)

    # Intent classification
    auth_keywords: tuple[str, ...] = ("username", "password", "login", "sign in", "email", "credentials")
    login_button_keywords: tuple[str, ...] = ("login", "sign in")
    dashboard_url_tokens: tuple[str, ...] = ("dashboard", "/home", "/main")
    use_intent_hint: bool = False

    # Naming
    meaningful_url_keywords: tuple[str, ...] = (
        "dashboard",
        "admin",
        "auth",
        "login",
        "profile",
        "settings",
        "user",
        "employee",
        "time",
        "leave",
        "pim",
    )
    generic_url_keywords: tuple[str, ...] = ("index", "main", "home", "page")
    file_extension_pattern: str = r"php|jsp|html|aspx"
    naming_stoplist: tuple[str, ...] = ("button", "link", "input", "field", "text", "form", "page", "name", "label")
    min_token_length: int = Field(default=4, ge=1)
    intent_page_names: Mapping[PageIntent, str] = Field(
        default_factory=lambda: MappingProxyType(
            {
                PageIntent.AUTHENTICATION: "LoginPage",
                PageIntent.DASHBOARD: "DashboardPage",
                PageIntent.FORM: "FormPage",
                PageIntent.NAVIGATION: "NavigationPage",
                PageIntent.VERIFICATION: "VerificationPage",
            }
        )
    )
    sanitize_names: bool = False

    @field_validator("intent_page_names", mode="after")
    @classmethod
    def freeze_intent_page_names(cls, v: Mapping[PageIntent, str]) -> Mapping[PageIntent, str]:
        return MappingProxyType(dict(v))

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> HeuristicsConfig:
        """Load heuristics from a YAML file; omitted keys keep their defaults."""
        path = Path(config_path)
        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise HeuristicsConfigError(f"Heuristics config {path} must be a mapping, got {type(data).__name__}")

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise HeuristicsConfigError(f"Invalid heuristics config {path}: {exc}") from exc


def load_heuristics(config_path: str | Path | None = None) -> HeuristicsConfig:
    """Return heuristics from ``config_path``, or the defaults when None."""
    if config_path is None:
        return HeuristicsConfig()
    config = HeuristicsConfig.from_yaml(config_path)
    logger.debug("Loaded heuristics overrides from %s", config_path)
    return config


def get_heuristics(settings: Settings | None = None) -> HeuristicsConfig:
    """Build the effective heuristics for the given (or cached) settings."""
    settings = settings or get_settings()
    config = load_heuristics(settings.heuristics_config_path)
    if settings.use_intent_hint and not config.use_intent_hint:
        config = config.model_copy(update={"use_intent_hint": True})
    return config

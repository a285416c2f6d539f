"""Tests for the segment intent classifier."""

from __future__ import annotations

from src.core.models.recording import PageIntent
from src.pagedetection.actions import Action, LocatorTarget
from src.pagedetection.heuristics import HeuristicsConfig
from src.pagedetection.intent import ActionProfile, IntentClassifier, IntentHint, IntentRule
from src.pagedetection.segmenter import PageSegment

DASHBOARD_URL = "https://hr.example.com/web/index.php/dashboard/index"


def _segment(actions: list[Action], url: str | None = None) -> PageSegment:
    return PageSegment(
        segment_id="segment_0",
        start_index=0,
        end_index=len(actions),
        actions=tuple(actions),
        url=url,
    )


def _click(role: str, name: str) -> Action:
    return Action(
        type="click",
        target=LocatorTarget(type="getByRole", selector=role, options={"name": name}),
        expression=f"await page.getByRole('{role}', {{ name: '{name}' }}).click()",
    )


def _fill(label: str, value: str) -> Action:
    return Action(
        type="fill",
        args=[value],
        target=LocatorTarget(type="getByLabel", selector=label),
        expression=f"await page.getByLabel('{label}').fill('{value}')",
    )


def _type(label: str, value: str) -> Action:
    return Action(
        type="type",
        args=[value],
        target=LocatorTarget(type="getByPlaceholder", selector=label),
        expression=f"await page.getByPlaceholder('{label}').type('{value}')",
    )


def _assertion(text: str) -> Action:
    return Action(type="assertion", expression=f"await expect(page.getByText('{text}')).toBeVisible()")


class TestAuthentication:
    def test_credentials_and_login_click(self):
        classifier = IntentClassifier()
        segment = _segment([_fill("Username", "Admin"), _fill("Password", "admin123"), _click("button", "Login")])
        assert classifier.classify(segment) == PageIntent.AUTHENTICATION

    def test_sign_in_click_with_email_field(self):
        classifier = IntentClassifier()
        segment = _segment([_type("Email", "a@b.test"), _click("button", "Sign in")])
        assert classifier.classify(segment) == PageIntent.AUTHENTICATION

    def test_credentials_without_login_click_is_form(self):
        classifier = IntentClassifier()
        segment = _segment([_fill("Username", "Admin"), _fill("Password", "x"), _click("button", "Submit")])
        assert classifier.classify(segment) == PageIntent.FORM

    def test_login_click_alone_matches_its_own_expression(self):
        # The click expression itself carries the "login" keyword
        classifier = IntentClassifier()
        assert classifier.classify(_segment([_click("button", "Login")])) == PageIntent.AUTHENTICATION

    def test_login_keyword_on_non_click_is_ignored(self):
        classifier = IntentClassifier()
        segment = _segment([_fill("Login hint", "x"), _assertion("Welcome")])
        assert classifier.classify(segment) == PageIntent.GENERIC


class TestRulePrecedence:
    def test_form_beats_dashboard(self):
        classifier = IntentClassifier()
        segment = _segment([_fill("Search", "Linda"), _click("button", "Search")], url=DASHBOARD_URL)
        assert classifier.classify(segment) == PageIntent.FORM

    def test_dashboard_beats_navigation(self):
        classifier = IntentClassifier()
        segment = _segment([_click("link", "My Info")], url=DASHBOARD_URL)
        assert classifier.classify(segment) == PageIntent.DASHBOARD

    def test_dashboard_beats_verification(self):
        classifier = IntentClassifier()
        segment = _segment([_assertion("Time at Work")], url="https://crm.example.com/home")
        assert classifier.classify(segment) == PageIntent.DASHBOARD

    def test_dashboard_url_tokens(self):
        classifier = IntentClassifier()
        for url in ("https://a.test/Dashboard", "https://a.test/home", "https://a.test/main/overview"):
            assert classifier.classify(_segment([_assertion("x")], url=url)) == PageIntent.DASHBOARD


class TestActionShapes:
    def test_clicks_only_is_navigation(self):
        classifier = IntentClassifier()
        segment = _segment([_click("link", "Admin"), _click("tab", "Users")])
        assert classifier.classify(segment) == PageIntent.NAVIGATION

    def test_assertions_only_is_verification(self):
        classifier = IntentClassifier()
        segment = _segment([_assertion("Saved"), _assertion("Employee List")])
        assert classifier.classify(segment) == PageIntent.VERIFICATION

    def test_fills_only_is_generic(self):
        classifier = IntentClassifier()
        segment = _segment([_fill("First Name", "Linda"), _fill("Last Name", "Anderson")])
        assert classifier.classify(segment) == PageIntent.GENERIC

    def test_profile_counts(self):
        segment = _segment(
            [
                _fill("A", "1"),
                _type("B", "2"),
                _click("button", "Go"),
                Action(type="select"),
                _assertion("Done"),
                Action(type="navigation", method="goto", args=["https://a.test/"]),
            ]
        )
        profile = ActionProfile.from_segment(segment)
        assert profile == ActionProfile(
            fill_count=2, click_count=1, select_count=1, assertion_count=1, navigation_count=1
        )


class TestIntentHint:
    def test_hint_ignored_by_default(self):
        classifier = IntentClassifier()
        segment = _segment([_fill("First Name", "Linda")])
        assert classifier.classify(segment, IntentHint(primary="form-interaction")) == PageIntent.GENERIC

    def test_hint_resolves_generic_when_enabled(self):
        classifier = IntentClassifier(HeuristicsConfig(use_intent_hint=True))
        segment = _segment([_fill("First Name", "Linda")])
        assert classifier.classify(segment, IntentHint(primary="form-interaction")) == PageIntent.FORM

    def test_hint_never_overrides_matched_rule(self):
        classifier = IntentClassifier(HeuristicsConfig(use_intent_hint=True))
        segment = _segment([_assertion("Saved")])
        assert classifier.classify(segment, IntentHint(primary="authentication")) == PageIntent.VERIFICATION

    def test_unmapped_hint_leaves_generic(self):
        classifier = IntentClassifier(HeuristicsConfig(use_intent_hint=True))
        segment = _segment([_fill("First Name", "Linda")])
        assert classifier.classify(segment, IntentHint(primary="crud")) == PageIntent.GENERIC


class TestCustomRules:
    def test_rules_can_be_replaced(self):
        always_form = IntentRule("always_form", PageIntent.FORM, lambda _s, _p, _c: True)
        classifier = IntentClassifier(rules=(always_form,))
        assert classifier.classify(_segment([_assertion("x")])) == PageIntent.FORM

    def test_auth_keywords_configurable(self):
        config = HeuristicsConfig(auth_keywords=("passcode",), login_button_keywords=("unlock",))
        classifier = IntentClassifier(config)
        segment = _segment([_fill("Passcode", "1234"), _click("button", "Unlock")])
        assert classifier.classify(segment) == PageIntent.AUTHENTICATION

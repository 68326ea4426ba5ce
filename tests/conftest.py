"""Shared fixtures for axe HTML fixer tests."""

import json

import pytest


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "smoke: mark test as smoke test (fast, critical path - included in CI)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Clear AXE_FIXER_* overrides so settings fall back to their defaults."""
    for var in (
        "AXE_FIXER_LOG_LEVEL",
        "AXE_FIXER_LOG_JSON",
        "AXE_FIXER_ACCESSIBLE_LABEL_ATTRIBUTE",
        "AXE_FIXER_CONTRAST_TARGET_RATIO",
        "AXE_FIXER_JSONRPC_ID",
        "AXE_FIXER_DEFAULT_HTML_PATH",
        "AXE_FIXER_DEFAULT_REPORT_PATH",
        "AXE_FIXER_FIXED_FILE_SUFFIX",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_html():
    """Page mixing component tags and plain HTML."""
    return (
        "<html><head>"
        '<meta name="viewport" content="width=device-width, user-scalable=no">'
        "</head><body>"
        '<wm-button name="submitBtn" class="btn btn-primary" caption="Save"></wm-button>'
        '<a name="helpLink" href="/help" style="color:#777777">Help</a>'
        '<wm-number name="quantity"></wm-number>'
        '<input name="email" placeholder="  Email address  ">'
        '<img name="logo" src="/logo.png">'
        '<select name="country"><option>NZ</option></select>'
        '<wm-label name="caption" class="muted small">Caption</wm-label>'
        "</body></html>"
    )


@pytest.fixture
def sample_report():
    """Axe DevTools export covering every remediated rule."""
    return {
        "url": "https://example.com/#/Dashboard",
        "extensionVersion": "4.113.4",
        "axeVersion": "4.10.3",
        "allIssues": [
            {
                "ruleId": "button-name",
                "description": "Buttons must have discernible text",
                "source": '<button name="submitBtn" class="btn btn-primary">',
                "summary": "Fix any of the following: Element does not have inner text",
                "impact": "critical",
            },
            {
                "ruleId": "link-in-text-block",
                "description": "Links must be distinguishable without relying on color",
                "source": '<a name="helpLink" href="/help">',
                "summary": "The link has insufficient color contrast",
                "impact": "serious",
            },
            {
                "ruleId": "meta-viewport",
                "description": "Zooming and scaling must not be disabled",
                "source": '<meta name="viewport" content="width=device-width, user-scalable=no">',
                "summary": "user-scalable=no on <meta> tag disables zooming",
                "impact": "critical",
            },
            {
                "ruleId": "label",
                "description": "Form elements must have labels",
                "source": '<input name="quantity" type="number">',
                "summary": "Form element does not have an implicit label",
                "impact": "critical",
            },
            {
                "ruleId": "color-contrast",
                "description": "Elements must meet minimum color contrast ratio thresholds",
                "source": '<label name="caption" class="muted small">',
                "summary": (
                    "Fix any of the following:\n  Element has insufficient color contrast of 2.51 "
                    "(foreground color: #aaaaaa, background color: #ffffff, font size: 9.0pt (12px), "
                    "font weight: normal). Expected contrast ratio of 4.5:1"
                ),
                "impact": "serious",
            },
            {
                "ruleId": "role-img-alt",
                "description": "Images must have alternate text",
                "source": '<img name="logo" src="/logo.png">',
                "summary": "Element does not have an alt attribute",
                "impact": "minor",
            },
            {
                "ruleId": "select-name",
                "description": "Select element must have an accessible name",
                "source": '<select name="country">',
                "summary": "Form element does not have an implicit label",
                "impact": "moderate",
            },
            {
                "ruleId": "button-name",
                "description": "Buttons must have discernible text",
                "source": '<button name="missingBtn">',
                "summary": "",
                "impact": "critical",
            },
            {
                "ruleId": "region",
                "description": "All page content should be contained by landmarks",
                "source": '<div class="content">',
                "summary": "Some page content is not contained by landmarks",
                "impact": "moderate",
            },
        ],
    }


@pytest.fixture
def sample_report_json(sample_report):
    return json.dumps(sample_report)

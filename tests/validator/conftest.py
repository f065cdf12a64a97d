"""Shared fixtures for validator tests: a trimmed PSI v5 response."""

from __future__ import annotations

from typing import Any

import pytest


def make_psi_response(
    pwa: float | None = 1.0,
    performance: float | None = 0.95,
) -> dict[str, Any]:
    """Build a PSI response with the given category scores."""
    return {
        "captchaResult": "CAPTCHA_NOT_NEEDED",
        "kind": "pagespeedonline#result",
        "id": "https://example.com/",
        "loadingExperience": {"initial_url": "https://example.com/"},
        "lighthouseResult": {
            "requestedUrl": "https://example.com",
            "finalUrl": "https://example.com/",
            "lighthouseVersion": "6.0.0",
            "userAgent": "Mozilla/5.0 (X11; Linux x86_64) HeadlessChrome/84.0",
            "fetchTime": "2020-07-01T10:00:00.000Z",
            "environment": {
                "networkUserAgent": "Mozilla/5.0 (Linux; Android 7.0; Moto G (4))",
                "hostUserAgent": "Mozilla/5.0 (X11; Linux x86_64)",
                "benchmarkIndex": 1450,
            },
            "configSettings": {
                "emulatedFormFactor": "mobile",
                "locale": "en-US",
                "onlyCategories": ["pwa", "performance"],
                "channel": "lr",
            },
            "categories": {
                "pwa": {
                    "id": "pwa",
                    "title": "Progressive Web App",
                    "description": "These checks validate the aspects of a PWA.",
                    "manualDescription": "These checks are required by the baseline.",
                    "score": pwa,
                },
                "performance": {
                    "id": "performance",
                    "title": "Performance",
                    "score": performance,
                },
            },
            "timing": {"total": 12345.6},
            "audits": {"first-contentful-paint": {"score": 0.9}},
        },
        "analysisUTCTimestamp": "2020-07-01T10:00:12.345Z",
        "version": {"major": 1, "minor": 19},
    }


@pytest.fixture
def psi_response() -> dict[str, Any]:
    """A passing PSI response."""
    return make_psi_response()


@pytest.fixture
def psi_response_factory() -> Any:
    """The ``make_psi_response`` builder."""
    return make_psi_response

"""Tests for the PSI response dataclasses."""

from __future__ import annotations

from typing import Any

import pytest

from bubblewrap.validator.psi import LighthouseCategory, PsiLighthouseResult, PsiResult


class TestPsiResultFromDict:
    """Decoding a full response."""

    def test_top_level_fields(self, psi_response: dict[str, Any]) -> None:
        result = PsiResult.from_dict(psi_response)
        assert result.captcha_result == "CAPTCHA_NOT_NEEDED"
        assert result.kind == "pagespeedonline#result"
        assert result.id == "https://example.com/"
        assert result.loading_experience.initial_url == "https://example.com/"
        assert result.analysis_utc_timestamp == "2020-07-01T10:00:12.345Z"
        assert (result.version.major, result.version.minor) == (1, 19)

    def test_lighthouse_fields(self, psi_response: dict[str, Any]) -> None:
        lighthouse = PsiResult.from_dict(psi_response).lighthouse_result
        assert lighthouse.requested_url == "https://example.com"
        assert lighthouse.final_url == "https://example.com/"
        assert lighthouse.lighthouse_version == "6.0.0"
        assert lighthouse.timing.total == pytest.approx(12345.6)
        assert lighthouse.environment.benchmark_index == 1450
        assert lighthouse.environment.network_user_agent.startswith("Mozilla/5.0 (Linux")
        assert lighthouse.config_settings.emulated_form_factor == "mobile"
        assert lighthouse.config_settings.only_categories == ["pwa", "performance"]

    def test_categories(self, psi_response: dict[str, Any]) -> None:
        lighthouse = PsiResult.from_dict(psi_response).lighthouse_result
        assert set(lighthouse.categories) == {"pwa", "performance"}
        pwa = lighthouse.categories["pwa"]
        assert isinstance(pwa, LighthouseCategory)
        assert pwa.title == "Progressive Web App"
        assert pwa.manual_description.startswith("These checks are required")
        assert lighthouse.categories["performance"].manual_description == ""

    def test_missing_lighthouse_result(self) -> None:
        with pytest.raises(KeyError):
            PsiResult.from_dict({"kind": "pagespeedonline#result"})


class TestPsiLighthouseResult:
    """Defaults and the category_score helper."""

    def test_category_score(self, psi_response: dict[str, Any]) -> None:
        lighthouse = PsiLighthouseResult.from_dict(psi_response["lighthouseResult"])
        assert lighthouse.category_score("pwa") == 1.0
        assert lighthouse.category_score("seo") is None

    def test_null_score(self, psi_response_factory: Any) -> None:
        data = psi_response_factory(pwa=None)["lighthouseResult"]
        assert PsiLighthouseResult.from_dict(data).category_score("pwa") is None

    def test_minimal_payload(self) -> None:
        lighthouse = PsiLighthouseResult.from_dict({"finalUrl": "https://a.dev/"})
        assert lighthouse.final_url == "https://a.dev/"
        assert lighthouse.categories == {}
        assert lighthouse.timing.total == 0.0
        assert lighthouse.config_settings.only_categories == []

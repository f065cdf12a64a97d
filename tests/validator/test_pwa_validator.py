"""Tests for PwaValidator with a mocked PageSpeedInsights."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from bubblewrap.exceptions import PsiError
from bubblewrap.validator import PwaValidator, ValidationStatus
from bubblewrap.validator.psi import PageSpeedInsights, PsiResult


def _validator_for(response: dict[str, Any]) -> tuple[PwaValidator, MagicMock]:
    psi = MagicMock(spec=PageSpeedInsights)
    psi.run = AsyncMock(return_value=PsiResult.from_dict(response))
    return PwaValidator(psi=psi, api_key="k"), psi


class TestPwaValidator:
    """Pass/fail thresholds."""

    def test_pass(self, psi_response: dict[str, Any]) -> None:
        validator, _ = _validator_for(psi_response)
        result = asyncio.run(validator.validate("https://example.com"))
        assert result.status is ValidationStatus.PASS
        assert result.passed
        assert result.scores == {"pwa": 1.0, "performance": 0.95}
        assert result.psi_result is not None

    @pytest.mark.parametrize(
        "pwa, performance, expected",
        [
            (1.0, 0.8, ValidationStatus.PASS),
            (1.0, 0.79, ValidationStatus.FAIL),
            (0.9, 1.0, ValidationStatus.FAIL),
            (None, 1.0, ValidationStatus.FAIL),
            (1.0, None, ValidationStatus.FAIL),
        ],
    )
    def test_thresholds(
        self,
        psi_response_factory: Any,
        pwa: float | None,
        performance: float | None,
        expected: ValidationStatus,
    ) -> None:
        validator, _ = _validator_for(psi_response_factory(pwa, performance))
        result = asyncio.run(validator.validate("https://example.com"))
        assert result.status is expected

    def test_request_shape(self, psi_response: dict[str, Any]) -> None:
        """PWA and performance on mobile, with the API key."""
        validator, psi = _validator_for(psi_response)
        asyncio.run(validator.validate("https://example.com"))
        request = psi.run.await_args.args[0]
        assert request.url == "https://example.com"
        assert request.categories == ("pwa", "performance")
        assert request.strategy == "mobile"
        assert request.api_key == "k"

    def test_psi_error_propagates(self) -> None:
        psi = MagicMock(spec=PageSpeedInsights)
        psi.run = AsyncMock(side_effect=PsiError("down"))
        with pytest.raises(PsiError):
            asyncio.run(PwaValidator(psi=psi).validate("https://example.com"))

"""PWA quality check for the site a Trusted Web Activity wraps.

A site passes when Lighthouse, run through PageSpeed Insights with the mobile
strategy, gives it a perfect PWA score and a performance score of at least
``MIN_PERFORMANCE_SCORE``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from bubblewrap.validator.psi.client import PageSpeedInsights, PsiRequestBuilder
from bubblewrap.validator.psi.models import PsiResult

logger = logging.getLogger(__name__)

MIN_PWA_SCORE: float = 1.0
MIN_PERFORMANCE_SCORE: float = 0.8


class ValidationStatus(Enum):
    PASS = "PASS"
    FAIL = "FAIL"


@dataclass
class PwaValidationResult:
    """Outcome of a PWA validation.

    Attributes:
        status: PASS or FAIL.
        scores: Category name to score; None where Lighthouse gave no score.
        psi_result: The full PSI response the verdict was derived from.
    """

    status: ValidationStatus
    scores: dict[str, float | None] = field(default_factory=dict)
    psi_result: PsiResult | None = None

    @property
    def passed(self) -> bool:
        return self.status is ValidationStatus.PASS


class PwaValidator:
    """Validates a URL against the PWA and performance thresholds."""

    def __init__(self, psi: PageSpeedInsights | None = None, api_key: str | None = None) -> None:
        self.psi = psi or PageSpeedInsights()
        self.api_key = api_key

    async def validate(self, url: str) -> PwaValidationResult:
        """Audit ``url`` and return the verdict.

        Raises:
            PsiError: If the audit cannot be run.
        """
        request = (
            PsiRequestBuilder(url)
            .add_category("pwa")
            .add_category("performance")
            .set_strategy("mobile")
            .set_api_key(self.api_key)
            .build()
        )
        psi_result = await self.psi.run(request)
        lighthouse = psi_result.lighthouse_result
        pwa = lighthouse.category_score("pwa")
        performance = lighthouse.category_score("performance")

        passed = (
            pwa is not None
            and performance is not None
            and pwa >= MIN_PWA_SCORE
            and performance >= MIN_PERFORMANCE_SCORE
        )
        status = ValidationStatus.PASS if passed else ValidationStatus.FAIL
        logger.debug("%s: pwa=%s performance=%s -> %s", url, pwa, performance, status.value)
        return PwaValidationResult(
            status=status,
            scores={"pwa": pwa, "performance": performance},
            psi_result=psi_result,
        )

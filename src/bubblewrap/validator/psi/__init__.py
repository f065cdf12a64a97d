"""PageSpeed Insights response types and API client.

Public API::

    from bubblewrap.validator.psi import PageSpeedInsights, PsiRequestBuilder, PsiResult
"""

from __future__ import annotations

from bubblewrap.validator.psi.client import PageSpeedInsights, PsiRequest, PsiRequestBuilder
from bubblewrap.validator.psi.models import (
    LighthouseCategory,
    LighthouseConfigSettings,
    LighthouseEnvironment,
    PsiLighthouseResult,
    PsiResult,
)

__all__ = [
    "LighthouseCategory",
    "LighthouseConfigSettings",
    "LighthouseEnvironment",
    "PageSpeedInsights",
    "PsiLighthouseResult",
    "PsiRequest",
    "PsiRequestBuilder",
    "PsiResult",
]

"""Web app validation through PageSpeed Insights."""

from __future__ import annotations

from bubblewrap.validator.pwa_validator import (
    PwaValidationResult,
    PwaValidator,
    ValidationStatus,
)

__all__ = [
    "PwaValidationResult",
    "PwaValidator",
    "ValidationStatus",
]

"""PageSpeed Insights response types.

Dataclass mirrors of the subset of the PSI v5 ``runPagespeed`` response that
Bubblewrap reads. These are pure data holders: ``from_dict`` copies the
expected members out of the decoded JSON, fills defaults for members the API
left out, and ignores everything else. No further validation is applied.

References
----------
.. [PSI] Google. "PageSpeed Insights API v5 reference."
   https://developers.google.com/speed/docs/insights/v5/reference/pagespeedapi/runpagespeed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

LighthouseCategoryName = Literal[
    "accessibility", "best-practices", "performance", "pwa", "seo"
]
LighthouseEmulatedFormFactor = Literal["desktop", "mobile"]

LIGHTHOUSE_CATEGORY_NAMES: tuple[str, ...] = (
    "accessibility",
    "best-practices",
    "performance",
    "pwa",
    "seo",
)


# ---------------------------------------------------------------------------
# Lighthouse result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LighthouseCategory:
    """Score for one Lighthouse category.

    Attributes:
        id: Category name, e.g. "pwa".
        title: Human-readable title.
        description: Category description.
        manual_description: Description of checks to perform manually.
        score: Score in [0, 1], or None when Lighthouse could not score it.
    """

    id: str
    title: str = ""
    description: str = ""
    manual_description: str = ""
    score: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LighthouseCategory:
        return cls(
            id=data.get("id", ""),
            title=data.get("title", ""),
            description=data.get("description", ""),
            manual_description=data.get("manualDescription", ""),
            score=data.get("score"),
        )


@dataclass(frozen=True)
class LighthouseEnvironment:
    """Where the audit ran."""

    network_user_agent: str = ""
    host_user_agent: str = ""
    benchmark_index: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LighthouseEnvironment:
        return cls(
            network_user_agent=data.get("networkUserAgent", ""),
            host_user_agent=data.get("hostUserAgent", ""),
            benchmark_index=data.get("benchmarkIndex", 0.0),
        )


@dataclass(frozen=True)
class LighthouseConfigSettings:
    """Settings the audit ran with."""

    emulated_form_factor: str = "mobile"
    locale: str = ""
    only_categories: list[str] = field(default_factory=list)
    channel: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LighthouseConfigSettings:
        return cls(
            emulated_form_factor=data.get("emulatedFormFactor", "mobile"),
            locale=data.get("locale", ""),
            only_categories=list(data.get("onlyCategories") or []),
            channel=data.get("channel", ""),
        )


@dataclass(frozen=True)
class LighthouseTiming:
    """Audit timing. ``total`` is in milliseconds."""

    total: float = 0.0


@dataclass(frozen=True)
class PsiLighthouseResult:
    """The ``lighthouseResult`` member of a PSI response.

    Attributes:
        requested_url: URL the audit was asked for.
        final_url: URL after redirects.
        lighthouse_version: Lighthouse release that ran the audit.
        user_agent: User agent of the audit browser.
        fetch_time: ISO-8601 time the page was fetched.
        environment: Host and network environment.
        config_settings: Audit configuration.
        categories: Scores keyed by category name. Only the requested
            categories are present.
        timing: Audit duration.
    """

    requested_url: str
    final_url: str
    lighthouse_version: str = ""
    user_agent: str = ""
    fetch_time: str = ""
    environment: LighthouseEnvironment = field(default_factory=LighthouseEnvironment)
    config_settings: LighthouseConfigSettings = field(
        default_factory=LighthouseConfigSettings
    )
    categories: dict[str, LighthouseCategory] = field(default_factory=dict)
    timing: LighthouseTiming = field(default_factory=LighthouseTiming)

    def category_score(self, name: str) -> float | None:
        """Return the score for category ``name``, or None if absent."""
        category = self.categories.get(name)
        return category.score if category is not None else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PsiLighthouseResult:
        categories = {
            name: LighthouseCategory.from_dict(value)
            for name, value in (data.get("categories") or {}).items()
        }
        return cls(
            requested_url=data.get("requestedUrl", ""),
            final_url=data.get("finalUrl", ""),
            lighthouse_version=data.get("lighthouseVersion", ""),
            user_agent=data.get("userAgent", ""),
            fetch_time=data.get("fetchTime", ""),
            environment=LighthouseEnvironment.from_dict(data.get("environment") or {}),
            config_settings=LighthouseConfigSettings.from_dict(
                data.get("configSettings") or {}
            ),
            categories=categories,
            timing=LighthouseTiming(total=(data.get("timing") or {}).get("total", 0.0)),
        )


# ---------------------------------------------------------------------------
# Top-level response
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PsiVersion:
    major: int = 0
    minor: int = 0


@dataclass(frozen=True)
class PsiLoadingExperience:
    initial_url: str = ""


@dataclass(frozen=True)
class PsiResult:
    """A PSI ``runPagespeed`` response.

    Attributes:
        captcha_result: Captcha verdict, usually "CAPTCHA_NOT_NEEDED".
        kind: Resource kind, "pagespeedonline#result".
        id: Final URL of the audited page.
        loading_experience: Field data summary for the URL.
        lighthouse_result: The Lighthouse audit.
        analysis_utc_timestamp: When the analysis ran.
        version: API version.
    """

    captcha_result: str
    kind: str
    id: str
    lighthouse_result: PsiLighthouseResult
    loading_experience: PsiLoadingExperience = field(
        default_factory=PsiLoadingExperience
    )
    analysis_utc_timestamp: str = ""
    version: PsiVersion = field(default_factory=PsiVersion)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PsiResult:
        """Build a PsiResult from a decoded PSI response.

        Raises:
            KeyError: If ``lighthouseResult`` is missing.
        """
        loading = data.get("loadingExperience") or {}
        version = data.get("version") or {}
        return cls(
            captcha_result=data.get("captchaResult", ""),
            kind=data.get("kind", ""),
            id=data.get("id", ""),
            lighthouse_result=PsiLighthouseResult.from_dict(data["lighthouseResult"]),
            loading_experience=PsiLoadingExperience(
                initial_url=loading.get("initial_url", "")
            ),
            analysis_utc_timestamp=data.get("analysisUTCTimestamp", ""),
            version=PsiVersion(
                major=version.get("major", 0), minor=version.get("minor", 0)
            ),
        )

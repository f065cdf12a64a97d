"""PageSpeed Insights API client.

Usage::

    request = (
        PsiRequestBuilder("https://example.com")
        .add_category("pwa")
        .add_category("performance")
        .set_strategy("mobile")
        .build()
    )
    result = await PageSpeedInsights().run(request)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

import httpx

from bubblewrap.core.http_client import LONG_TIMEOUT, fetch_json
from bubblewrap.exceptions import PsiError
from bubblewrap.validator.psi.models import LIGHTHOUSE_CATEGORY_NAMES, PsiResult

logger = logging.getLogger(__name__)

PSI_ENDPOINT: str = (
    "https://pagespeedonline.googleapis.com/pagespeedonline/v5/runPagespeed"
)

PsiStrategy = Literal["desktop", "mobile"]


@dataclass(frozen=True)
class PsiRequest:
    """A fully specified ``runPagespeed`` call."""

    url: str
    categories: tuple[str, ...] = ()
    strategy: str = "mobile"
    api_key: str | None = None

    def query_params(self) -> list[tuple[str, str]]:
        """Return the query string as ``(name, value)`` pairs.

        The API takes one ``category`` parameter per category, upper-cased
        with underscores (``best-practices`` -> ``BEST_PRACTICES``).
        """
        params = [("url", self.url), ("strategy", self.strategy)]
        params.extend(
            ("category", name.upper().replace("-", "_")) for name in self.categories
        )
        if self.api_key:
            params.append(("key", self.api_key))
        return params


@dataclass
class PsiRequestBuilder:
    """Fluent builder for ``PsiRequest``."""

    url: str
    _categories: list[str] = field(default_factory=list)
    _strategy: str = "mobile"
    _api_key: str | None = None

    def add_category(self, name: str) -> PsiRequestBuilder:
        if name not in LIGHTHOUSE_CATEGORY_NAMES:
            raise ValueError(f"Unknown Lighthouse category: {name}")
        if name not in self._categories:
            self._categories.append(name)
        return self

    def set_strategy(self, strategy: PsiStrategy) -> PsiRequestBuilder:
        if strategy not in ("desktop", "mobile"):
            raise ValueError(f"Unknown PSI strategy: {strategy}")
        self._strategy = strategy
        return self

    def set_api_key(self, api_key: str | None) -> PsiRequestBuilder:
        self._api_key = api_key
        return self

    def build(self) -> PsiRequest:
        return PsiRequest(
            url=self.url,
            categories=tuple(self._categories),
            strategy=self._strategy,
            api_key=self._api_key,
        )


class PageSpeedInsights:
    """Calls the PSI API and decodes its response."""

    def __init__(self, endpoint: str = PSI_ENDPOINT, timeout: float = LONG_TIMEOUT) -> None:
        self.endpoint = endpoint
        self.timeout = timeout

    async def run(self, request: PsiRequest) -> PsiResult:
        """Run an audit.

        Args:
            request: What to audit.

        Returns:
            The decoded ``PsiResult``.

        Raises:
            PsiError: On HTTP failure, a non-JSON body, or a response
                without a lighthouse result.
        """
        logger.info("Running PageSpeed Insights for %s", request.url)
        try:
            data = await fetch_json(
                self.endpoint, params=request.query_params(), timeout=self.timeout
            )
        except httpx.HTTPStatusError as exc:
            raise PsiError(
                f"PageSpeed Insights returned HTTP {exc.response.status_code} "
                f"for {request.url}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise PsiError(f"PageSpeed Insights request failed: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("lighthouseResult"), dict):
            raise PsiError("PageSpeed Insights response has no lighthouseResult")
        return PsiResult.from_dict(data)

"""``bubblewrap validate <url>`` --- Check a web app's PWA quality.

Runs Lighthouse through PageSpeed Insights and compares the PWA and
performance scores against the thresholds a Trusted Web Activity needs.

Exit Codes:
    0 --- The URL passed validation.
    1 --- The URL failed validation.
    2 --- PageSpeed Insights could not be queried.
"""

from __future__ import annotations

import asyncio
import json
import sys

import click

from bubblewrap.exceptions import PsiError
from bubblewrap.validator import PwaValidationResult, PwaValidator


def _result_to_json(url: str, result: PwaValidationResult) -> dict:
    """Convert a validation result to a JSON-serializable dict."""
    data: dict = {
        "url": url,
        "status": result.status.value,
        "scores": result.scores,
    }
    if result.psi_result is not None:
        lighthouse = result.psi_result.lighthouse_result
        data["final_url"] = lighthouse.final_url
        data["lighthouse_version"] = lighthouse.lighthouse_version
    return data


@click.command("validate")
@click.argument("url")
@click.option(
    "--api-key",
    envvar="PSI_API_KEY",
    default=None,
    help="PageSpeed Insights API key (env: PSI_API_KEY).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def validate_command(url: str, api_key: str | None, output_format: str) -> None:
    """Validate that URL meets the PWA quality bar.

    Passes when the Lighthouse PWA score is 100 and the performance score
    is at least 80 on mobile.

    Exit code 0 on pass, 1 on fail, 2 if PageSpeed Insights is unreachable.
    """
    validator = PwaValidator(api_key=api_key)
    try:
        result = asyncio.run(validator.validate(url))
    except PsiError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(_result_to_json(url, result), indent=2))
    else:
        from bubblewrap.cli.output import print_validation_result
        print_validation_result(url, result)

    sys.exit(0 if result.passed else 1)

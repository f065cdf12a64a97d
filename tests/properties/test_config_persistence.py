"""Property-based tests for config persistence and the first-run flow.

Verifies that:
- Saving then loading a Config returns an equal value for any paths.
- A first run persists exactly what it returns.
"""
from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from bubblewrap.cli.config import ConfigLocations, load_or_create_config
from bubblewrap.cli.prompt import Prompt, Validator
from bubblewrap.core import Config

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

paths = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    min_size=0,
    max_size=60,
)


class _AnswerPrompt(Prompt):
    """Answers "no" to the install question and returns inputs unvalidated."""

    def __init__(self, inputs: list[str]) -> None:
        self._inputs = list(inputs)

    async def prompt_confirm(self, message: str, default: bool) -> bool:
        return False

    async def prompt_input(
        self, message: str, default: str | None, validate: Validator
    ) -> str:
        return self._inputs.pop(0)


@given(jdk=paths, sdk=paths)
@settings(max_examples=50)
def test_save_load_round_trip(jdk: str, sdk: str) -> None:
    config = Config(jdk_path=jdk, android_sdk_path=sdk)
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        config.save_config(path)
        assert Config.load_config(path) == config


@given(jdk=paths, sdk=paths)
@settings(max_examples=25)
def test_first_run_persists_returned_config(jdk: str, sdk: str) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        locations = ConfigLocations.from_home(Path(tmp))
        returned = asyncio.run(
            load_or_create_config(
                prompt=_AnswerPrompt([jdk, sdk]), locations=locations
            )
        )
        assert returned == Config(jdk, sdk)
        assert Config.load_config(locations.config_file) == returned

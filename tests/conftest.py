"""Shared fixtures for bubblewrap tests."""

from __future__ import annotations

import pathlib

import pytest

from bubblewrap.cli.config import ConfigLocations
from bubblewrap.cli.prompt import Prompt, Validator


class ScriptedPrompt(Prompt):
    """Prompt that answers from fixed scripts and records every question.

    Input answers are passed through the validator, like a real prompt
    would, so an invalid scripted answer raises ``ValidatePathError``.
    """

    def __init__(
        self,
        confirms: list[bool] | None = None,
        inputs: list[str] | None = None,
    ) -> None:
        self._confirms = list(confirms or [])
        self._inputs = list(inputs or [])
        self.questions: list[str] = []

    async def prompt_confirm(self, message: str, default: bool) -> bool:
        self.questions.append(message)
        return self._confirms.pop(0)

    async def prompt_input(
        self, message: str, default: str | None, validate: Validator
    ) -> str:
        self.questions.append(message)
        return validate(self._inputs.pop(0))


@pytest.fixture
def home(tmp_path: pathlib.Path) -> pathlib.Path:
    """An empty directory standing in for the user's home."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def locations(home: pathlib.Path) -> ConfigLocations:
    """Config locations rooted at the temporary home."""
    return ConfigLocations.from_home(home)


@pytest.fixture
def jdk_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """A directory laid out like a JDK 8 home."""
    jdk = tmp_path / "jdk1.8.0_265"
    jdk.mkdir()
    (jdk / "release").write_text(
        'JAVA_VERSION="1.8.0_265"\nOS_NAME="Linux"\n', encoding="utf-8"
    )
    return jdk


@pytest.fixture
def sdk_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """A directory laid out like an Android SDK root."""
    sdk = tmp_path / "android-sdk"
    (sdk / "tools").mkdir(parents=True)
    (sdk / "platform-tools").mkdir()
    return sdk


@pytest.fixture
def make_prompt() -> type[ScriptedPrompt]:
    """The scripted ``Prompt`` class, for tests to instantiate."""
    return ScriptedPrompt

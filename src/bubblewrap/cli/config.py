"""Config bootstrap: locate, migrate, or interactively create ``config.json``.

``load_or_create_config`` is the single entry point. It runs three steps in
order, each awaiting the previous one:

1. Migrate a config left behind by the tool's previous name (``llama-pack``)
   if no current config exists yet.
2. Load the config from its canonical path and return it if present.
3. Otherwise prompt for a JDK (downloaded, or an existing install) and an
   Android SDK, save the resulting ``Config``, and return it.

Validation and filesystem failures are not handled here; they propagate.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from bubblewrap.cli.prompt import ClickPrompt, Prompt
from bubblewrap.core import AndroidSdkTools, Config, JdkHelper, JdkInstaller

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FOLDER_NAME: str = ".bubblewrap"
DEFAULT_CONFIG_NAME: str = "config.json"
LEGACY_CONFIG_FOLDER_NAME: str = ".llama-pack"
LEGACY_CONFIG_NAME: str = "llama-pack-config.json"
DEFAULT_JDK_FOLDER_NAME: str = "jdk"


@dataclass(frozen=True)
class ConfigLocations:
    """Well-known config paths under one home directory.

    Attributes:
        config_folder: ``~/.bubblewrap``.
        config_file: ``~/.bubblewrap/config.json``.
        legacy_folder: ``~/.llama-pack``.
        legacy_file: ``~/.llama-pack/llama-pack-config.json``.
        jdk_folder: ``~/.bubblewrap/jdk``, where a downloaded JDK is unpacked.
    """

    config_folder: Path
    config_file: Path
    legacy_folder: Path
    legacy_file: Path
    jdk_folder: Path

    @classmethod
    def from_home(cls, home: Path | None = None) -> ConfigLocations:
        home = Path.home() if home is None else home
        config_folder = home / DEFAULT_CONFIG_FOLDER_NAME
        legacy_folder = home / LEGACY_CONFIG_FOLDER_NAME
        return cls(
            config_folder=config_folder,
            config_file=config_folder / DEFAULT_CONFIG_NAME,
            legacy_folder=legacy_folder,
            legacy_file=legacy_folder / LEGACY_CONFIG_NAME,
            jdk_folder=config_folder / DEFAULT_JDK_FOLDER_NAME,
        )


def default_config_file_path() -> Path:
    """Return ``~/.bubblewrap/config.json`` for the current user."""
    return ConfigLocations.from_home().config_file


async def create_config(
    prompt: Prompt,
    locations: ConfigLocations,
    log: logging.Logger = logger,
) -> Config:
    """Ask the user for a JDK and an Android SDK and build a Config.

    Args:
        prompt: Where questions are asked.
        locations: Supplies the folder a downloaded JDK is unpacked into.
        log: Receives the download notice.

    Returns:
        A new, unsaved ``Config``.
    """
    jdk_install_request = await prompt.prompt_confirm(
        "Do you want Bubblewrap to install JDK? "
        '(Enter "No" to use your JDK installation)',
        True,
    )

    if not jdk_install_request:
        jdk_path = await prompt.prompt_input(
            "Path to your existing JDK:",
            os.environ.get("JAVA_HOME"),
            JdkHelper.validate_path,
        )
    else:
        installer = JdkInstaller()
        locations.jdk_folder.mkdir(parents=True, exist_ok=True)
        log.info("Downloading JDK 8 to %s", locations.jdk_folder)
        jdk_path = await installer.install(locations.jdk_folder)

    android_sdk_path = await prompt.prompt_input(
        "Path to the Android SDK:",
        AndroidSdkTools.guess_sdk_path(),
        AndroidSdkTools.validate_path,
    )

    return Config(jdk_path=jdk_path, android_sdk_path=android_sdk_path)


async def rename_config_if_needed(
    log: logging.Logger,
    locations: ConfigLocations,
) -> None:
    """Move a config saved under the old product name to the current path.

    The whole legacy folder is moved only when the config file is its sole
    entry and the current folder does not exist yet. Otherwise only the
    config file is moved and everything else in the legacy folder stays put.
    """
    if locations.config_file.exists():
        return
    # No current config file found.
    if not locations.legacy_file.exists():
        return

    log.info("An old named config file was found, changing it now")
    entries = os.listdir(locations.legacy_folder)
    if entries == [LEGACY_CONFIG_NAME] and not locations.config_folder.exists():
        locations.legacy_folder.rename(locations.config_folder)
        (locations.config_folder / LEGACY_CONFIG_NAME).rename(locations.config_file)
        log.debug("Moved %s to %s", locations.legacy_folder, locations.config_folder)
    else:
        locations.config_folder.mkdir(parents=True, exist_ok=True)
        locations.legacy_file.rename(locations.config_file)
        log.debug("Moved %s to %s", locations.legacy_file, locations.config_file)


async def load_or_create_config(
    log: logging.Logger | None = None,
    prompt: Prompt | None = None,
    path: Path | None = None,
    locations: ConfigLocations | None = None,
) -> Config:
    """Return the user's Config, creating and saving one if needed.

    Args:
        log: Logger for user-facing notices. Defaults to this module's.
        prompt: Where questions are asked. Defaults to ``ClickPrompt``.
        path: Config file to load and save. Defaults to
            ``locations.config_file``.
        locations: Well-known paths. Defaults to the current user's home.

    Returns:
        The loaded or newly created ``Config``.

    Raises:
        ConfigError: If an existing config file cannot be decoded.
        JdkInstallError: If the requested JDK download fails.
        OSError: On filesystem failures while migrating or saving.
    """
    log = log or logger
    prompt = prompt or ClickPrompt()
    locations = locations or ConfigLocations.from_home()
    path = path or locations.config_file

    await rename_config_if_needed(log, locations)
    existing_config = Config.load_config(path)
    if existing_config is not None:
        return existing_config

    config = await create_config(prompt, locations, log)
    config.save_config(path)
    log.info("Config saved to %s", path)
    return config

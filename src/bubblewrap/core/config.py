"""Config record --- the JDK and Android SDK locations Bubblewrap builds with.

The ``Config`` value is created once, either by prompting the user or by
loading ``config.json``, and then persisted. It has no further lifecycle:
nothing updates or invalidates it afterwards.

On-disk format::

    {
      "jdkPath": "/home/user/.bubblewrap/jdk/jdk8u265-b01",
      "androidSdkPath": "/home/user/Android/Sdk"
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bubblewrap.exceptions import ConfigError

logger = logging.getLogger(__name__)

_JDK_PATH_KEY = "jdkPath"
_ANDROID_SDK_PATH_KEY = "androidSdkPath"


@dataclass(frozen=True)
class Config:
    """Toolchain locations used to build an Android project.

    Attributes:
        jdk_path: Home directory of a JDK 8 installation.
        android_sdk_path: Root directory of the Android SDK.
    """

    jdk_path: str
    android_sdk_path: str

    # -- Serialization ------------------------------------------------------

    def to_dict(self) -> dict[str, str]:
        """Serialize to the on-disk key layout."""
        return {
            _JDK_PATH_KEY: self.jdk_path,
            _ANDROID_SDK_PATH_KEY: self.android_sdk_path,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a Config from a parsed JSON object.

        Args:
            data: The decoded JSON document.

        Returns:
            A new ``Config``.

        Raises:
            ConfigError: If ``data`` is not an object, or either path is
                missing or not a string.
        """
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config must be a JSON object, got {type(data).__name__}"
            )
        values: list[str] = []
        for key in (_JDK_PATH_KEY, _ANDROID_SDK_PATH_KEY):
            value = data.get(key)
            if not isinstance(value, str):
                raise ConfigError(f"Config is missing a string '{key}' entry")
            values.append(value)
        return cls(jdk_path=values[0], android_sdk_path=values[1])

    @classmethod
    def from_json(cls, text: str) -> Config:
        """Decode a Config from JSON text.

        Raises:
            ConfigError: If the text is not valid JSON or has the wrong shape.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Config is not valid JSON: {exc}") from exc
        return cls.from_dict(data)

    # -- Persistence --------------------------------------------------------

    def save_config(self, path: Path) -> None:
        """Write the config to ``path``, creating parent directories.

        Filesystem errors propagate to the caller.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.debug("Saved config to %s", path)

    @classmethod
    def load_config(cls, path: Path) -> Config | None:
        """Load a config from ``path``.

        Args:
            path: Location of the config file.

        Returns:
            The decoded ``Config``, or None if no file exists at ``path``.

        Raises:
            ConfigError: If the file exists but cannot be decoded.
        """
        if not path.exists():
            return None
        logger.debug("Loading config from %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Config is not valid UTF-8: {exc}") from exc
        return cls.from_json(text)

"""Android SDK path validation."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from bubblewrap.exceptions import PathErrorCode, ValidatePathError

logger = logging.getLogger(__name__)

# Either directory marks an SDK root: "tools" on older SDKs, "cmdline-tools"
# on SDKs installed since the standalone command-line tools package.
SDK_TOOLS_DIRS: tuple[str, ...] = ("tools", "cmdline-tools")

SDK_ENV_VARS: tuple[str, ...] = ("ANDROID_HOME", "ANDROID_SDK_ROOT")


class AndroidSdkTools:
    """Helpers for locating and checking an Android SDK installation."""

    @staticmethod
    def validate_path(sdk_path: str | Path) -> str:
        """Check that ``sdk_path`` is the root of an Android SDK.

        Args:
            sdk_path: Candidate SDK root, as typed by the user.

        Returns:
            The normalized path, with ``~`` expanded.

        Raises:
            ValidatePathError: With ``PATH_IS_NOT_CORRECT`` if the path is not
                an existing directory or holds no SDK tools folder.
        """
        root = Path(str(sdk_path).strip()).expanduser()
        if not root.is_dir():
            raise ValidatePathError(
                f"{root} does not exist.", PathErrorCode.PATH_IS_NOT_CORRECT
            )
        if not any((root / name).is_dir() for name in SDK_TOOLS_DIRS):
            raise ValidatePathError(
                f"{root} does not look like an Android SDK "
                f"(expected a 'tools' or 'cmdline-tools' folder).",
                PathErrorCode.PATH_IS_NOT_CORRECT,
            )
        return str(root)

    @staticmethod
    def guess_sdk_path(environ: Mapping[str, str] | None = None) -> str | None:
        """Return the SDK root advertised by the environment, if any."""
        env = os.environ if environ is None else environ
        for name in SDK_ENV_VARS:
            value = env.get(name)
            if value:
                logger.debug("Android SDK suggested by %s: %s", name, value)
                return value
        return None

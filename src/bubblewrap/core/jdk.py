"""JDK path validation and installation.

Bubblewrap builds with JDK 8. Users either point it at an existing JDK, which
``JdkHelper.validate_path`` checks through the ``release`` file every JDK
ships, or let ``JdkInstaller`` download an AdoptOpenJDK 8 build into the
Bubblewrap config folder.

Usage::

    installer = JdkInstaller()
    jdk_home = await installer.install(Path.home() / ".bubblewrap" / "jdk")
    JdkHelper.validate_path(jdk_home)
"""

from __future__ import annotations

import logging
import sys
import tarfile
import zipfile
from pathlib import Path

import httpx

from bubblewrap.core.http_client import download_file
from bubblewrap.exceptions import JdkInstallError, PathErrorCode, ValidatePathError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

JDK_VERSION: str = "8u265-b01"
JDK_DIR: str = f"jdk{JDK_VERSION}"
JDK_BIN_VERSION: str = JDK_VERSION.replace("-", "")
DOWNLOAD_JDK_BIN_ROOT: str = (
    f"https://github.com/AdoptOpenJDK/openjdk8-binaries/releases/download/{JDK_DIR}/"
)

# platform -> archive file name
JDK_FILE_NAMES: dict[str, str] = {
    "win32": f"OpenJDK8U-jdk_x86-32_windows_hotspot_{JDK_BIN_VERSION}.zip",
    "darwin": f"OpenJDK8U-jdk_x64_mac_hotspot_{JDK_BIN_VERSION}.tar.gz",
    "linux": f"OpenJDK8U-jdk_x64_linux_hotspot_{JDK_BIN_VERSION}.tar.gz",
}

_REQUIRED_VERSION_MARKER: str = 'JAVA_VERSION="1.8'


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class JdkHelper:
    """Helpers for working with a JDK installation on disk."""

    @staticmethod
    def validate_path(jdk_path: str | Path) -> str:
        """Check that ``jdk_path`` is the home directory of a JDK 8.

        Args:
            jdk_path: Candidate JDK home, as typed by the user.

        Returns:
            The normalized path, with ``~`` expanded.

        Raises:
            ValidatePathError: ``PATH_IS_NOT_CORRECT`` if no ``release`` file
                can be read under the path, ``PATH_IS_NOT_SUPPORTED`` if the
                JDK is not version 1.8.
        """
        home = Path(str(jdk_path).strip()).expanduser()
        try:
            release = (home / "release").read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Cannot read JDK release file under %s: %s", home, exc)
            raise ValidatePathError(
                f"The path is not correct: {home} does not contain a JDK.",
                PathErrorCode.PATH_IS_NOT_CORRECT,
            ) from exc

        if _REQUIRED_VERSION_MARKER not in release:
            raise ValidatePathError(
                "JDK version not supported. JDK version 1.8 is required.",
                PathErrorCode.PATH_IS_NOT_SUPPORTED,
            )
        return str(home)


# ---------------------------------------------------------------------------
# Installation
# ---------------------------------------------------------------------------


def _check_member_path(dst: Path, name: str) -> None:
    target = (dst / name).resolve()
    if target != dst and dst not in target.parents:
        raise JdkInstallError(f"Archive member escapes install folder: {name}")


def _untar(archive: Path, dst: Path) -> None:
    with tarfile.open(archive, "r:gz") as tar:
        for member in tar.getmembers():
            _check_member_path(dst, member.name)
        tar.extractall(dst, filter="data")


def _unzip(archive: Path, dst: Path) -> None:
    with zipfile.ZipFile(archive) as zf:
        for name in zf.namelist():
            _check_member_path(dst, name)
        zf.extractall(dst)


class JdkInstaller:
    """Downloads and unpacks an AdoptOpenJDK 8 build.

    Args:
        platform: A ``sys.platform`` value. Defaults to the running platform.

    Raises:
        JdkInstallError: If no JDK build is published for ``platform``.
    """

    def __init__(self, platform: str | None = None) -> None:
        self.platform = platform or sys.platform
        if self.platform.startswith("linux"):
            self.platform = "linux"
        file_name = JDK_FILE_NAMES.get(self.platform)
        if file_name is None:
            raise JdkInstallError(
                f"Platform not found or unsupported: {self.platform}."
            )
        self.download_file_name = file_name

    @property
    def download_url(self) -> str:
        return DOWNLOAD_JDK_BIN_ROOT + self.download_file_name

    def jdk_home(self, dst: Path) -> Path:
        """Return the JDK home the archive unpacks to under ``dst``."""
        if self.platform == "darwin":
            return dst / JDK_DIR / "Contents" / "Home"
        return dst / JDK_DIR

    async def install(self, dst: str | Path) -> str:
        """Download the JDK archive into ``dst`` and unpack it there.

        The archive is deleted once unpacked.

        Args:
            dst: Existing folder to install into.

        Returns:
            Path to the installed JDK home.

        Raises:
            JdkInstallError: On download failure or a corrupt archive.
        """
        dst_path = Path(dst).resolve()
        archive = dst_path / self.download_file_name

        logger.info("Downloading %s", self.download_url)
        try:
            await download_file(self.download_url, archive)
        except httpx.HTTPError as exc:
            raise JdkInstallError(
                f"Failed to download JDK from {self.download_url}: {exc}"
            ) from exc

        logger.info("Unpacking %s", archive.name)
        try:
            if archive.suffix == ".zip":
                _unzip(archive, dst_path)
            else:
                _untar(archive, dst_path)
        except (tarfile.TarError, zipfile.BadZipFile) as exc:
            raise JdkInstallError(f"Corrupt JDK archive {archive}: {exc}") from exc
        finally:
            archive.unlink(missing_ok=True)

        return str(self.jdk_home(dst_path))

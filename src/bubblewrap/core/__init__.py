"""Core building blocks: the config record and toolchain helpers.

Public API::

    from bubblewrap.core import Config, JdkHelper, JdkInstaller, AndroidSdkTools
"""

from __future__ import annotations

from bubblewrap.core.android_sdk import AndroidSdkTools
from bubblewrap.core.config import Config
from bubblewrap.core.jdk import JdkHelper, JdkInstaller

__all__ = [
    "AndroidSdkTools",
    "Config",
    "JdkHelper",
    "JdkInstaller",
]

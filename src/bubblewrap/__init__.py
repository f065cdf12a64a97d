"""Bubblewrap: configuration bootstrap and PWA validation for TWA projects."""

from __future__ import annotations

__version__ = "0.3.0"
__license__ = "Apache-2.0"

"""Shared helpers for yarn-helper."""

from yh_common.api import configure_logging

__all__ = ["configure_logging"]

"""Shared helpers for the ichoose tools."""

from ic_common.api import ICError, configure_logging

__all__ = ["ICError", "configure_logging"]

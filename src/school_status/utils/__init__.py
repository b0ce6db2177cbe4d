"""Shared utilities."""

from .time import local_today, utc_now

__all__ = ["local_today", "utc_now"]

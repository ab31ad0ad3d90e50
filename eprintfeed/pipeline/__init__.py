"""Refresh pipeline."""

from .scheduler import DEFAULT_INTERVAL, RefreshResult, RefreshScheduler, build_scheduler

__all__ = ["DEFAULT_INTERVAL", "RefreshResult", "RefreshScheduler", "build_scheduler"]

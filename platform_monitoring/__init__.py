"""Top-level platform monitoring helpers.

Usage: from platform_monitoring import log_event
"""
from .exporters import log_event, sanitize

__all__ = ["log_event", "sanitize"]

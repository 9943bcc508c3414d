"""Structured logging utilities."""

from .audit import JsonlAuditLogger, RunEvent, sanitize_options, utc_timestamp

__all__ = ["JsonlAuditLogger", "RunEvent", "sanitize_options", "utc_timestamp"]

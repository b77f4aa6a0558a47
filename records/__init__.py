"""
Records Package
===============

Durable trails written by the depot service.

Classes:
    - EventLog: in-memory event lines, flushed once to a file (overwrite)
    - ReportWriter: append-only, timestamped report file
"""

from .event_log import EventLog
from .report_writer import ReportWriter

__all__ = [
    "EventLog",
    "ReportWriter",
]

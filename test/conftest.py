# test/conftest.py
from __future__ import annotations
from datetime import datetime

import pytest

from records import EventLog, ReportWriter
from services import DepotService

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def report_path(tmp_path):
    return tmp_path / "report.txt"


@pytest.fixture
def event_log():
    return EventLog()


@pytest.fixture
def service(event_log, report_path):
    return DepotService(event_log, ReportWriter(report_path, clock=lambda: FIXED_NOW))


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, text: str, encoding: str = "utf-8"):
        p = tmp_path / name
        p.write_text(text, encoding=encoding)
        return p
    return _write

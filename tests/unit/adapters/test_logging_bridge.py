import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

import pytest

from eventreport.adapters.logging_bridge import SubjectLogHandler
from eventreport.core.clock import FixedClock
from eventreport.core.subjects import LogLine, Subject


@dataclass
class StubReporter:
    reported: List[Subject] = field(default_factory=list)

    def report(self, subject: Subject) -> None:
        self.reported.append(subject)


class FailingReporter:
    def report(self, subject: Subject) -> None:
        raise RuntimeError("sink closed")


@pytest.fixture
def bridged_logger():
    logger = logging.getLogger("tests.eventreport.bridge")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    logger.handlers = []


def test_records_become_log_lines(bridged_logger):
    reporter = StubReporter()
    clock = FixedClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
    bridged_logger.addHandler(SubjectLogHandler(reporter, clock=clock))

    bridged_logger.error("disk %s", "full")
    bridged_logger.warning("low battery")

    first, second = reporter.reported
    assert isinstance(first, LogLine)
    assert first.render_text() == "disk full"
    assert first.render_machine()["level"] == "error"
    assert first.render_machine()["timestamp"] == 1704067200
    assert second.level_label == "unknown"


def test_handler_level_filters(bridged_logger):
    reporter = StubReporter()
    bridged_logger.addHandler(SubjectLogHandler(reporter, logging.INFO))

    bridged_logger.debug("hidden")
    bridged_logger.info("shown")

    assert [line.render_text() for line in reporter.reported] == ["shown"]


def test_reporter_failure_is_handled(bridged_logger, monkeypatch):
    handler = SubjectLogHandler(FailingReporter())
    handled = []
    monkeypatch.setattr(handler, "handleError", lambda record: handled.append(record.getMessage()))
    bridged_logger.addHandler(handler)

    bridged_logger.info("lost")

    assert handled == ["lost"]

"""
Bridge from the standard logging module into the subject model.

SubjectLogHandler turns each LogRecord into a LogLine and hands it to a reporter,
so that library logs show up in the same stream (and format) as reported events.
"""

from __future__ import annotations

import logging

from eventreport.core.clock import SYSTEM_CLOCK
from eventreport.core.severity import LOGGING_SEVERITY, SeverityTable
from eventreport.core.subjects import LogLine
from eventreport.ports.clock import Clock
from eventreport.ports.reporter import Reporter


class SubjectLogHandler(logging.Handler):
    def __init__(
        self,
        reporter: Reporter,
        level: int = logging.NOTSET,
        *,
        severity: SeverityTable = LOGGING_SEVERITY,
        clock: Clock = SYSTEM_CLOCK,
    ) -> None:
        super().__init__(level)
        self._reporter = reporter
        self._severity = severity
        self._clock = clock

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = LogLine(self.format(record), record.levelno, severity=self._severity, clock=self._clock)
            self._reporter.report(line)
        except Exception:
            self.handleError(record)

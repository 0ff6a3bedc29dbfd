"""Stream reporters.

Concrete implementations of the Reporter port. A reporter takes a finished subject and
writes one of its two renderings to a text stream, one record per line:

- JsonLinesReporter: the machine rendering, orjson-encoded (JSON Lines)
- TextReporter: the text rendering, for an interactive terminal
"""

from __future__ import annotations

import logging
import sys
import threading
from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO

from eventreport.config.configs import ReporterConfig
from eventreport.core.clock import SYSTEM_CLOCK
from eventreport.core.encoding import DEFAULT_ENCODER, OrjsonEncoder
from eventreport.core.severity import ASL_SEVERITY, SeverityTable
from eventreport.core.subjects import (
    ControlValue,
    LogLine,
    NamedEvent,
    PrimitiveString,
    Subject,
    TargetDescriptor,
    TargetEvent,
    as_subject,
)
from eventreport.core.target_format import DEFAULT_TARGET_FORMAT, TargetFormat
from eventreport.ports.clock import Clock
from eventreport.types.aliases import SeverityLevel
from eventreport.types.types import EventName, EventType

logger = logging.getLogger(__name__)


class BaseReporter(ABC):
    def __init__(
        self,
        stream: TextIO,
        *,
        encoder: OrjsonEncoder = DEFAULT_ENCODER,
        severity: SeverityTable = ASL_SEVERITY,
        target_format: TargetFormat = DEFAULT_TARGET_FORMAT,
        clock: Clock = SYSTEM_CLOCK,
    ) -> None:
        self._stream = stream
        self._encoder = encoder
        self._severity = severity
        self._target_format = target_format
        self._clock = clock
        self._lock = threading.Lock()

    @abstractmethod
    def render(self, subject: Subject) -> Optional[str]:
        """Return the line to write for `subject`, or None to write nothing."""

    def report(self, subject: Subject) -> None:
        line = self.render(subject)
        if line is None:
            return
        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()

    def report_simple(self, name: EventName, kind: EventType, subject: Any) -> None:
        """Report `subject` (a Subject or a raw str/bool/list of str) as a named event."""
        self.report(NamedEvent(name, kind, as_subject(subject), clock=self._clock))

    def report_value(self, name: EventName, kind: EventType, value: Any) -> None:
        self.report(NamedEvent(name, kind, ControlValue(value, encoder=self._encoder), clock=self._clock))

    def report_target(self, target: Any, name: EventName, kind: EventType, subject: Any) -> None:
        """Report `subject` as an event on `target`, described with the configured target format."""
        descriptor = TargetDescriptor(target, self._target_format, encoder=self._encoder)
        self.report(TargetEvent(descriptor, name, kind, as_subject(subject), clock=self._clock))

    def report_error(self, message: str) -> None:
        self.report_simple(EventName.FAILURE, EventType.DISCRETE, PrimitiveString(message))

    def log(self, text: str, level: SeverityLevel) -> None:
        self.report(LogLine(text, level, severity=self._severity, clock=self._clock))


class JsonLinesReporter(BaseReporter):
    def render(self, subject: Subject) -> str:
        return self._encoder.dumps(subject.render_machine()).decode("utf-8")


class TextReporter(BaseReporter):
    def render(self, subject: Subject) -> Optional[str]:
        text = subject.render_text()
        # e.g. started/ended target events have no text form
        if not text:
            return None
        return text


def build_reporter(
    config: ReporterConfig,
    stream: Optional[TextIO] = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> BaseReporter:
    """Pick and wire a reporter according to `config`; defaults to stdout."""
    stream = stream if stream is not None else sys.stdout
    reporter_cls = JsonLinesReporter if config.output_format == "json" else TextReporter
    logger.debug(
        "reporter_built",
        extra={
            "event": "reporter_built",
            "reporter": reporter_cls.__name__,
            "severity_preset": config.severity_preset,
            "target_fields": ",".join(config.target_fields),
        },
    )
    return reporter_cls(
        stream,
        encoder=config.encoder(),
        severity=config.severity(),
        target_format=config.target_format(),
        clock=clock,
    )

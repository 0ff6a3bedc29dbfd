"""
Event reporting.

This package models "something that happened" in an operational tool as an immutable
subject that renders both as a JSON-shaped value (for programmatic consumers) and as a
line of text (for interactive terminal use).

Components:
- Subjects: NamedEvent, TargetEvent, LogLine, ControlValue, TargetDescriptor,
  Composite, StringList, PrimitiveString, PrimitiveBool
- append / compose: flat composition of subjects
- Reporters: JsonLinesReporter, TextReporter (stream output), SubjectLogHandler
- ReporterConfig / ConfigLoader: TOML + environment configuration

Usage:
    from eventreport import EventName, EventType, NamedEvent, PrimitiveString, TextReporter

    reporter = TextReporter(sys.stdout)
    reporter.report(NamedEvent(EventName.BOOT, EventType.STARTED, PrimitiveString("iPhone 15")))
"""

from eventreport.adapters.logging_bridge import SubjectLogHandler
from eventreport.adapters.reporters import (
    BaseReporter,
    JsonLinesReporter,
    TextReporter,
    build_reporter,
)
from eventreport.config.config_loader import ConfigLoader
from eventreport.config.configs import ReporterConfig
from eventreport.core.clock import FixedClock, SystemClock
from eventreport.core.encoding import OrjsonEncoder
from eventreport.core.severity import ASL_SEVERITY, LOGGING_SEVERITY, SeverityTable
from eventreport.core.subjects import (
    Composite,
    ControlValue,
    LogLine,
    NamedEvent,
    PrimitiveBool,
    PrimitiveString,
    StringList,
    Subject,
    TargetDescriptor,
    TargetEvent,
    append,
    as_subject,
    compose,
)
from eventreport.core.target_format import AttributeTargetFormatter, TargetFormat
from eventreport.errors.errors import (
    ConfigurationError,
    EncodingError,
    ReportError,
    SubjectContractError,
    TargetFormatError,
)
from eventreport.types.types import EventName, EventType

__all__ = [
    # Subjects
    "Subject",
    "NamedEvent",
    "ControlValue",
    "TargetDescriptor",
    "TargetEvent",
    "LogLine",
    "Composite",
    "StringList",
    "PrimitiveString",
    "PrimitiveBool",
    "append",
    "compose",
    "as_subject",
    # Vocabularies
    "EventName",
    "EventType",
    # Collaborators
    "OrjsonEncoder",
    "TargetFormat",
    "AttributeTargetFormatter",
    "SeverityTable",
    "ASL_SEVERITY",
    "LOGGING_SEVERITY",
    "SystemClock",
    "FixedClock",
    # Reporting
    "BaseReporter",
    "JsonLinesReporter",
    "TextReporter",
    "build_reporter",
    "SubjectLogHandler",
    "ReporterConfig",
    "ConfigLoader",
    # Errors
    "ReportError",
    "EncodingError",
    "TargetFormatError",
    "ConfigurationError",
    "SubjectContractError",
]

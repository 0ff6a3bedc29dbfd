"""
Event subjects: "something that happened", renderable two ways.

Every subject renders itself as a JSON-shaped value (`render_machine`) for programmatic
consumers and as a line of text (`render_text`) for a terminal. Subjects are immutable
and combine through `append`, which keeps composites one level deep:

    append(a, b) == Composite(a.flatten() + b.flatten())   # collapsed for 0 or 1 items

Leaves flatten to themselves; only Composite exposes its children. A Composite placed
inside another subject (e.g. as the subject of a NamedEvent) is left as it is.

Timestamps: NamedEvent and LogLine read their clock whenever they are rendered,
TargetEvent reads it once when constructed.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from functools import reduce
from typing import Any, ClassVar, Sequence

from eventreport.core.clock import SYSTEM_CLOCK, to_unix_seconds
from eventreport.core.encoding import DEFAULT_ENCODER
from eventreport.core.severity import ASL_SEVERITY, SeverityTable
from eventreport.core.target_format import DEFAULT_TARGET_FORMATTER, TargetFormat
from eventreport.errors.errors import EncodingError, SubjectContractError
from eventreport.ports.clock import Clock
from eventreport.ports.encoder import ControlCoreValue, Encoder
from eventreport.ports.target_format import TargetFormatter
from eventreport.types.aliases import JSONArray, JSONObject, JSONValue, SeverityLevel
from eventreport.types.types import EventName, EventType

logger = logging.getLogger(__name__)


# -------- Contract ----------------------------------------------------------------


class Subject(ABC):
    """
    Base of all subjects.

    `flatten()` defaults to `(self,)`. Only classes declaring `_exposes_children`
    may override it; anything else is rejected when the class is created.
    """

    _exposes_children: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "flatten" in cls.__dict__ and not cls._exposes_children:
            raise SubjectContractError(
                f"{cls.__name__} may not override flatten()",
                component="subjects",
                subject_class=cls.__name__,
            )

    @abstractmethod
    def render_machine(self) -> JSONValue:
        """JSON-shaped rendering for programmatic consumers."""

    @abstractmethod
    def render_text(self) -> str:
        """Human-readable rendering for interactive use."""

    def flatten(self) -> tuple[Subject, ...]:
        return (self,)

    def append(self, other: Subject) -> Subject:
        return append(self, other)

    def __str__(self) -> str:
        return self.render_text()


def append(first: Subject, second: Subject) -> Subject:
    """
    Join two subjects into a flat sequence.

    Returns an empty Composite for no elements, the element itself for one,
    otherwise a Composite of all flattened elements in order.
    """
    joined = first.flatten() + second.flatten()
    if not joined:
        return Composite(())
    if len(joined) == 1:
        return joined[0]
    return Composite(joined)


def compose(*subjects: Subject) -> Subject:
    """Left fold of `append` over `subjects`; `compose()` is an empty Composite."""
    return reduce(append, subjects, Composite(()))


# -------- Leaves ------------------------------------------------------------------


@dataclass(frozen=True)
class NamedEvent(Subject):
    """An event name and kind attached to exactly one inner subject."""

    name: EventName
    kind: EventType
    subject: Subject
    clock: Clock = field(default=SYSTEM_CLOCK, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", EventName(self.name))
        object.__setattr__(self, "kind", EventType(self.kind))

    def render_machine(self) -> JSONObject:
        return {
            "event_name": self.name.value,
            "event_type": self.kind.value,
            "subject": self.subject.render_machine(),
            "timestamp": to_unix_seconds(self.clock.now()),
        }

    def render_text(self) -> str:
        # name/kind are noise for one-shot events
        if self.kind is EventType.DISCRETE:
            return self.subject.render_text()
        return f"{self.name.value} {self.kind.value}: {self.subject.render_text()}"


@dataclass(frozen=True)
class ControlValue(Subject):
    """
    Wraps an opaque value whose machine form comes from the encoder.

    If the encoder rejects the value, the machine rendering is None (JSON null)
    so that one bad node does not break the tree it lives in.
    """

    value: Any
    encoder: Encoder = field(default=DEFAULT_ENCODER, compare=False, repr=False)

    def render_machine(self) -> JSONValue:
        try:
            return self.encoder.encode(self.value)
        except EncodingError as exc:
            logger.warning(f"[control_value] Encoding failed, rendering null: {exc}")
            return None

    def render_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TargetDescriptor(Subject):
    """A managed target together with the format used to describe it."""

    target: Any
    fmt: TargetFormat
    formatter: TargetFormatter = field(default=DEFAULT_TARGET_FORMATTER, compare=False, repr=False)
    encoder: Encoder = field(default=DEFAULT_ENCODER, compare=False, repr=False)

    def render_machine(self) -> JSONValue:
        record = self.formatter.extract(self.target, self.fmt)
        return self.encoder.encode(dict(record))

    def render_text(self) -> str:
        return self.formatter.format(self.target, self.fmt)


@dataclass(frozen=True)
class TargetEvent(Subject):
    """
    An event that happened to a specific target.

    The timestamp is taken when the event is created, not when it is rendered.
    Only discrete events have a text form; started/ended events render as "".
    The empty text for started/ended events is kept as-is on purpose: reporters
    skip it, and giving it a text form changes terminal output for every caller.
    """

    target: TargetDescriptor
    name: EventName
    kind: EventType
    subject: Subject
    clock: Clock = field(default=SYSTEM_CLOCK, compare=False, repr=False)
    timestamp: datetime = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", EventName(self.name))
        object.__setattr__(self, "kind", EventType(self.kind))
        object.__setattr__(self, "timestamp", self.clock.now())

    def render_machine(self) -> JSONObject:
        return {
            "event_name": self.name.value,
            "event_type": self.kind.value,
            "target": self.target.render_machine(),
            "subject": self.subject.render_machine(),
            "timestamp": to_unix_seconds(self.timestamp),
        }

    def render_text(self) -> str:
        if self.kind is EventType.DISCRETE:
            return f"{self.target.render_text()}: {self.name.value}: {self.subject.render_text()}"
        return ""


@dataclass(frozen=True)
class LogLine(Subject):
    text: str
    level: SeverityLevel
    severity: SeverityTable = field(default=ASL_SEVERITY, repr=False)
    clock: Clock = field(default=SYSTEM_CLOCK, compare=False, repr=False)

    @property
    def level_label(self) -> str:
        return self.severity.label(self.level)

    def render_machine(self) -> JSONObject:
        return {
            "event_name": EventName.LOG.value,
            "event_type": EventType.DISCRETE.value,
            "level": self.level_label,
            "subject": self.text,
            "timestamp": to_unix_seconds(self.clock.now()),
        }

    def render_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class StringList(Subject):
    strings: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "strings", tuple(self.strings))

    def render_machine(self) -> JSONArray:
        return list(self.strings)

    def render_text(self) -> str:
        return "[" + ", ".join(self.strings) + "]"


@dataclass(frozen=True)
class PrimitiveString(Subject):
    value: str

    def render_machine(self) -> str:
        return self.value

    def render_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class PrimitiveBool(Subject):
    value: bool

    def render_machine(self) -> bool:
        return self.value

    def render_text(self) -> str:
        return "true" if self.value else "false"


# -------- Composite ---------------------------------------------------------------


@dataclass(frozen=True)
class Composite(Subject):
    """Ordered group of subjects. Flattens to its children, not to itself."""

    _exposes_children: ClassVar[bool] = True

    subjects: tuple[Subject, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "subjects", tuple(self.subjects))

    def flatten(self) -> tuple[Subject, ...]:
        return self.subjects

    def render_machine(self) -> JSONArray:
        return [subject.render_machine() for subject in self.subjects]

    def render_text(self) -> str:
        return "[" + ", ".join(subject.render_text() for subject in self.subjects) + "]"


# -------- Adapters ----------------------------------------------------------------


def as_subject(value: Any) -> Subject:
    """
    Wrap a raw value so it satisfies the Subject contract.

    Subjects pass through; str, bool and sequences of str get their primitive
    adapters; values implementing `json_serializable()` become ControlValues.
    """
    if isinstance(value, Subject):
        return value
    # bool before anything numeric-looking; str and bytes before Sequence
    if isinstance(value, bool):
        return PrimitiveBool(value)
    if isinstance(value, str):
        return PrimitiveString(value)
    if isinstance(value, ControlCoreValue):
        return ControlValue(value)
    if isinstance(value, (bytes, bytearray)):
        raise TypeError(f"as_subject(): cannot adapt {type(value).__name__}, decode it to str first")
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return StringList(tuple(value))
    raise TypeError(f"as_subject(): cannot adapt {type(value).__name__} to a subject")

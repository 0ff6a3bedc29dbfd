"""
Default target formatter.

A TargetFormat names the fields of a managed target (device, simulator, process, ...)
to show, in order. AttributeTargetFormatter reads those fields from the target,
either as mapping keys or as attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Iterable, Mapping

from eventreport.errors.errors import ConfigurationError, TargetFormatError
from eventreport.types.aliases import FieldName, TargetRecord


@dataclass(frozen=True)
class TargetFormat:
    """Ordered field selection plus the separator used for the one-line form."""

    fields: tuple[FieldName, ...]
    separator: str = " | "

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        if not self.fields:
            raise ConfigurationError("target format needs at least one field", field="fields")
        if len(set(self.fields)) != len(self.fields):
            raise ConfigurationError(
                "target format fields must be unique",
                field="fields",
                value=",".join(self.fields),
            )

    @classmethod
    def of(cls, fields: Iterable[FieldName], separator: str = " | ") -> TargetFormat:
        return cls(tuple(fields), separator)


DEFAULT_TARGET_FORMAT: Final[TargetFormat] = TargetFormat(("udid", "name", "state", "os_version"))


class AttributeTargetFormatter:
    def extract(self, target: Any, fmt: TargetFormat) -> TargetRecord:
        return {name: self._field_value(target, name) for name in fmt.fields}

    def format(self, target: Any, fmt: TargetFormat) -> str:
        record = self.extract(target, fmt)
        return fmt.separator.join(_as_text(value) for value in record.values())

    @staticmethod
    def _field_value(target: Any, name: FieldName) -> Any:
        if isinstance(target, Mapping):
            if name in target:
                return target[name]
        elif hasattr(target, name):
            return getattr(target, name)
        raise TargetFormatError(
            f"target has no field '{name}'",
            field=name,
            target_type=type(target).__name__,
            component="target_format",
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


DEFAULT_TARGET_FORMATTER: Final[AttributeTargetFormatter] = AttributeTargetFormatter()

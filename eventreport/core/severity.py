"""
Severity lookup for log lines.

A severity table maps four host-supplied integer sentinels onto the labels used in
machine renderings. Anything not in the table renders as "unknown".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Literal, Mapping

from eventreport.errors.errors import ConfigurationError
from eventreport.types.aliases import SeverityLevel

SeverityLabel = Literal["debug", "error", "info", "unknown"]

UNKNOWN: Final[str] = "unknown"

# Apple System Log levels (asl.h)
ASL_LEVEL_CRIT: Final[int] = 2
ASL_LEVEL_ERR: Final[int] = 3
ASL_LEVEL_INFO: Final[int] = 6
ASL_LEVEL_DEBUG: Final[int] = 7


@dataclass(frozen=True)
class SeverityTable:
    """Immutable mapping of integer level -> severity label."""

    name: str
    levels: Mapping[SeverityLevel, SeverityLabel] = field(hash=False)

    def __post_init__(self) -> None:
        allowed = {"debug", "error", "info"}
        for level, label in self.levels.items():
            if label not in allowed:
                raise ConfigurationError(
                    f"severity label must be one of {sorted(allowed)}",
                    field="levels",
                    value=f"{level}={label}",
                )
        object.__setattr__(self, "levels", MappingProxyType(dict(self.levels)))

    def label(self, level: SeverityLevel) -> str:
        return self.levels.get(level, UNKNOWN)


ASL_SEVERITY: Final[SeverityTable] = SeverityTable(
    name="asl",
    levels={
        ASL_LEVEL_DEBUG: "debug",
        ASL_LEVEL_ERR: "error",
        ASL_LEVEL_CRIT: "error",
        ASL_LEVEL_INFO: "info",
    },
)

LOGGING_SEVERITY: Final[SeverityTable] = SeverityTable(
    name="logging",
    levels={
        logging.DEBUG: "debug",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
        logging.INFO: "info",
    },
)

SEVERITY_PRESETS: Final[dict[str, SeverityTable]] = {
    ASL_SEVERITY.name: ASL_SEVERITY,
    LOGGING_SEVERITY.name: LOGGING_SEVERITY,
}


def severity_preset(name: str) -> SeverityTable:
    try:
        return SEVERITY_PRESETS[name]
    except KeyError as exc:
        raise ConfigurationError(
            f"unknown severity preset, expected one of {sorted(SEVERITY_PRESETS)}",
            field="severity_preset",
            value=name,
        ) from exc

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from eventreport.core.encoding import OrjsonEncoder
from eventreport.core.severity import SeverityTable, severity_preset
from eventreport.core.target_format import DEFAULT_TARGET_FORMAT, TargetFormat

"""
Reporter configuration
"""


class ReporterConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    output_format: Literal["json", "text"] = Field(
        default="text", description="json: one machine rendering per line; text: terminal output"
    )
    sort_keys: bool = Field(default=False, description="Sort object keys in json output")
    severity_preset: Literal["asl", "logging"] = Field(
        default="asl", description="Which integer levels log lines are stamped with"
    )
    target_fields: tuple[str, ...] = Field(
        default=DEFAULT_TARGET_FORMAT.fields,
        min_length=1,
        description="Fields shown for a target, in order",
    )
    target_separator: str = Field(default=DEFAULT_TARGET_FORMAT.separator)

    def severity(self) -> SeverityTable:
        return severity_preset(self.severity_preset)

    def target_format(self) -> TargetFormat:
        return TargetFormat(self.target_fields, self.target_separator)

    def encoder(self) -> OrjsonEncoder:
        return OrjsonEncoder(sort_keys=self.sort_keys)

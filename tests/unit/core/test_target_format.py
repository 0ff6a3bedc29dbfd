from dataclasses import dataclass
from enum import Enum

import pytest

from eventreport.core.target_format import (
    DEFAULT_TARGET_FORMAT,
    AttributeTargetFormatter,
    TargetFormat,
)
from eventreport.errors.errors import ConfigurationError, TargetFormatError


class State(Enum):
    BOOTED = "Booted"


@dataclass
class Device:
    udid: str
    name: str
    state: State
    os_version: str | None = None


@pytest.fixture
def formatter() -> AttributeTargetFormatter:
    return AttributeTargetFormatter()


def test_extract_from_attributes(formatter):
    device = Device("ABC", "iPhone 15", State.BOOTED, "iOS 17.2")
    assert formatter.extract(device, DEFAULT_TARGET_FORMAT) == {
        "udid": "ABC",
        "name": "iPhone 15",
        "state": State.BOOTED,
        "os_version": "iOS 17.2",
    }


def test_extract_keeps_format_order(formatter):
    record = formatter.extract({"udid": "ABC", "name": "iPad"}, TargetFormat(("name", "udid")))
    assert list(record) == ["name", "udid"]


def test_format_line(formatter):
    device = Device("ABC", "iPhone 15", State.BOOTED)
    assert formatter.format(device, DEFAULT_TARGET_FORMAT) == "ABC | iPhone 15 | Booted | "
    assert formatter.format(device, TargetFormat.of(["name", "udid"], separator=" ")) == "iPhone 15 ABC"


def test_missing_field(formatter):
    with pytest.raises(TargetFormatError) as exc:
        formatter.extract({"udid": "ABC"}, TargetFormat(("udid", "model")))
    assert exc.value.field == "model"
    assert exc.value.target_type == "dict"


def test_invalid_formats():
    with pytest.raises(ConfigurationError):
        TargetFormat(())
    with pytest.raises(ConfigurationError):
        TargetFormat(("udid", "udid"))

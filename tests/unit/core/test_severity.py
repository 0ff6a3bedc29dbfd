import logging

import pytest

from eventreport.core.severity import (
    ASL_LEVEL_CRIT,
    ASL_SEVERITY,
    LOGGING_SEVERITY,
    SeverityTable,
    severity_preset,
)
from eventreport.errors.errors import ConfigurationError


def test_presets_have_four_levels():
    assert len(ASL_SEVERITY.levels) == 4
    assert len(LOGGING_SEVERITY.levels) == 4


def test_asl_critical_is_error():
    assert ASL_SEVERITY.label(ASL_LEVEL_CRIT) == "error"


@pytest.mark.parametrize(
    "level,label",
    [
        (logging.DEBUG, "debug"),
        (logging.INFO, "info"),
        (logging.WARNING, "unknown"),
        (logging.ERROR, "error"),
        (logging.CRITICAL, "error"),
    ],
)
def test_logging_labels(level, label):
    assert LOGGING_SEVERITY.label(level) == label


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ASL_SEVERITY.levels[1] = "info"  # type: ignore[index]


def test_invalid_label_rejected():
    with pytest.raises(ConfigurationError) as exc:
        SeverityTable(name="bad", levels={1: "warning"})  # type: ignore[dict-item]
    assert exc.value.field == "levels"


def test_severity_preset_lookup():
    assert severity_preset("asl") is ASL_SEVERITY
    assert severity_preset("logging") is LOGGING_SEVERITY
    with pytest.raises(ConfigurationError):
        severity_preset("syslog")

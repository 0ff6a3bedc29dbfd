"""
Purpose:
    - Load the [reporter] table of a TOML config file
    - Overlay EVENTREPORT_* environment variables
    - Validate the result into a ReporterConfig

Precedence (lowest to highest): model defaults, file, environment.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from eventreport.config.configs import ReporterConfig
from eventreport.errors.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "EVENTREPORT_"
SECTION = "reporter"

_BOOL_TRUE = frozenset({"1", "true", "yes", "on"})
_BOOL_FALSE = frozenset({"0", "false", "no", "off"})


class ConfigLoader:
    """
    Config-loader; loading toml file and environment overrides.
    """

    def __init__(self, base_dir: str = ".", env_prefix: str = ENV_PREFIX) -> None:
        if not env_prefix:
            raise ValueError("Environment prefix must be a non-empty string")
        self._base_dir = base_dir
        self._env_prefix = env_prefix

    def load(self, file_name: str) -> dict[str, Any]:
        path = Path(file_name)
        if not path.is_absolute():
            path = Path(self._base_dir) / file_name

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigurationError(
                    f"invalid TOML in {path}: {exc}", component="config_loader"
                ) from exc

    def env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
        """
        Collect EVENTREPORT_<FIELD> variables, e.g. EVENTREPORT_OUTPUT_FORMAT=json.
        target_fields is comma separated; booleans accept 1/0, true/false, yes/no, on/off.
        """
        environ = os.environ if environ is None else environ
        known = ReporterConfig.model_fields
        overrides: dict[str, Any] = {}
        for key, raw in environ.items():
            if not key.startswith(self._env_prefix):
                continue
            name = key[len(self._env_prefix) :].lower()
            if name not in known:
                logger.debug(
                    "config_env_ignored",
                    extra={"event": "config_env_ignored", "env_var": key},
                )
                continue
            overrides[name] = self._parse_env_value(name, raw)
        return overrides

    def load_reporter_config(
        self,
        file_name: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> ReporterConfig:
        merged: dict[str, Any] = {}
        if file_name is not None:
            data = self.load(file_name)
            section = data.get(SECTION, {})
            if not isinstance(section, dict):
                raise ConfigurationError(
                    f"[{SECTION}] must be a table", field=SECTION, component="config_loader"
                )
            merged.update(section)
        merged.update(self.env_overrides(environ))

        try:
            config = ReporterConfig.model_validate(merged)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(
                f"invalid reporter config: {first['msg']}",
                field=field,
                value=first.get("input"),
                component="config_loader",
            ) from exc

        logger.debug(
            "config_resolved",
            extra={"event": "config_resolved", "keys_total": len(merged)},
        )
        return config

    @staticmethod
    def _parse_env_value(name: str, raw: str) -> Any:
        if name == "target_fields":
            return tuple(part.strip() for part in raw.split(",") if part.strip())
        if name == "sort_keys":
            lowered = raw.strip().lower()
            if lowered in _BOOL_TRUE:
                return True
            if lowered in _BOOL_FALSE:
                return False
            raise ConfigurationError(
                "sort_keys must be a boolean", field=name, value=raw, component="config_loader"
            )
        return raw

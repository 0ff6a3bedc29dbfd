"""
orjson-backed implementation of the Encoder port.

Turns an arbitrary host value into a JSON-shaped tree by serializing it with orjson
and parsing the bytes back. Anything orjson cannot represent raises EncodingError.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from decimal import Decimal
from typing import Any, Final

import orjson

from eventreport.errors.errors import EncodingError
from eventreport.ports.encoder import ControlCoreValue
from eventreport.types.aliases import JSONValue


class OrjsonEncoder:
    """
    Supported beyond plain JSON types: dataclasses, enums, datetimes, UUIDs,
    numpy arrays/scalars, Decimals (as strings), sets (as lists) and any value
    implementing `json_serializable()`.
    """

    def __init__(self, *, sort_keys: bool = False) -> None:
        self._sort_keys = sort_keys
        # dataclasses go through _default so json_serializable() wins over field dumping
        option = orjson.OPT_NON_STR_KEYS | orjson.OPT_SERIALIZE_NUMPY | orjson.OPT_PASSTHROUGH_DATACLASS
        if sort_keys:
            option |= orjson.OPT_SORT_KEYS
        self._option = option

    @property
    def sort_keys(self) -> bool:
        return self._sort_keys

    def encode(self, value: Any) -> JSONValue:
        return orjson.loads(self.dumps(value))

    def dumps(self, value: Any) -> bytes:
        """Serialize `value` to compact JSON bytes (no trailing newline)."""
        try:
            return orjson.dumps(value, default=self._default, option=self._option)
        except orjson.JSONEncodeError as exc:
            raise EncodingError(
                f"cannot encode value: {exc}",
                value_type=type(value).__name__,
                component="encoder",
            ) from exc

    @staticmethod
    def _default(obj: Any) -> Any:
        if isinstance(obj, ControlCoreValue):
            return obj.json_serializable()
        if is_dataclass(obj) and not isinstance(obj, type):
            return {f.name: getattr(obj, f.name) for f in fields(obj)}
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


DEFAULT_ENCODER: Final[OrjsonEncoder] = OrjsonEncoder()

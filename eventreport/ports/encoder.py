"""Encoder Port Interface.

Contract: Turn an arbitrary host value into a JSON-shaped tree
(dict / list / str / int / float / bool / None).
Raises EncodingError for values it cannot represent.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from eventreport.types.aliases import JSONValue


class Encoder(Protocol):
    def encode(self, value: Any) -> JSONValue: ...


@runtime_checkable
class ControlCoreValue(Protocol):
    """
    Opaque value that knows its own JSON-serializable representation.
    `str()` of the value is used as its human-readable form.
    """

    def json_serializable(self) -> Any: ...

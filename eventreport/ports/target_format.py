"""TargetFormatter Port Interface.

Contract: Describe a managed target (device, process, ...) according to a
format spec, either as a dictionary (`extract`) or as a single line (`format`).
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class TargetFormatter(Protocol):
    def extract(self, target: Any, fmt: Any) -> Mapping[str, Any]:
        """Return the fields named by `fmt` as a mapping, in format order."""
        ...

    def format(self, target: Any, fmt: Any) -> str:
        """Return the fields named by `fmt` as human-readable text."""
        ...

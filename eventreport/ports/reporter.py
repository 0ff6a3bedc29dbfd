"""Reporter Port Interface.

Contract: Accept a subject and write one of its renderings somewhere.
The subject decides what happened; the reporter only decides how it is shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from eventreport.core.subjects import Subject


class Reporter(Protocol):
    def report(self, subject: Subject) -> None: ...

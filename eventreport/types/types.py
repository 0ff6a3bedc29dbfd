from __future__ import annotations

from enum import Enum

# -------- Enums --------


class EventName(str, Enum):
    """
    Canonical event names emitted by the operational tool.
    Values end up verbatim in the `event_name` key of machine renderings.
    """

    APPROVE = "approve"
    BOOT = "boot"
    CLEAR_KEYCHAIN = "clear_keychain"
    CREATE = "create"
    DELETE = "delete"
    DIAGNOSE = "diagnose"
    DIAGNOSTIC = "diagnostic"
    ERASE = "erase"
    FAILURE = "failure"
    HELP = "help"
    INSTALL = "install"
    LAUNCH = "launch"
    LIST = "list"
    LISTEN = "listen"
    LOG = "log"
    OPEN = "open"
    QUERY = "query"
    RECORD = "record"
    RELAUNCH = "relaunch"
    SEARCH = "search"
    SHUTDOWN = "shutdown"
    SIGNALLED = "signalled"
    STATE_CHANGE = "state"
    TERMINATE = "terminate"
    UPLOAD = "upload"
    WATCH = "watch"


class EventType(str, Enum):
    STARTED = "started"
    ENDED = "ended"
    DISCRETE = "discrete"  # one-shot, no started/ended pair

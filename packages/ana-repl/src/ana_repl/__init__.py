from ana_repl.config import ReplConfig
from ana_repl.errors import AnaError, ConfigurationError, IllegalTokenError
from ana_repl.events import EventEmitter, EventKind, ReplEvent
from ana_repl.repl import Session, start, start_file

__all__ = [
    "AnaError",
    "ConfigurationError",
    "EventEmitter",
    "EventKind",
    "IllegalTokenError",
    "ReplConfig",
    "ReplEvent",
    "Session",
    "start",
    "start_file",
]

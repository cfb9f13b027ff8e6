"""Typed events published while a shell session runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

from ana.token import Token
from ana_repl.errors import AnaError


class EventKind(Enum):
    SESSION_START = "session_start"
    SESSION_END = "session_end"
    LINE_READ = "line_read"
    TOKEN = "token"
    ILLEGAL_TOKEN = "illegal_token"
    ERROR = "error"


@dataclass(frozen=True)
class ReplEvent:
    """One step of a session. Only the fields relevant to `kind` are set.

    SESSION_START carries `mode`, SESSION_END carries `lines_read`,
    LINE_READ carries `line_number` and `line`, TOKEN and ILLEGAL_TOKEN
    add `token`, and ERROR carries `error`.
    """

    kind: EventKind
    session_id: str
    mode: str | None = None
    line_number: int | None = None
    line: str | None = None
    token: Token | None = None
    lines_read: int | None = None
    error: AnaError | None = None
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), compare=False
    )


Subscriber = Callable[[ReplEvent], None]


class EventEmitter:
    def __init__(self):
        self._subscribers: list[tuple[Subscriber, frozenset[EventKind]]] = []

    def subscribe(self, callback: Subscriber, *kinds: EventKind) -> None:
        """Deliver events to `callback`; restricted to `kinds` when any are given."""
        self._subscribers.append((callback, frozenset(kinds)))

    def emit(self, event: ReplEvent) -> ReplEvent:
        for callback, kinds in list(self._subscribers):
            if not kinds or event.kind in kinds:
                callback(event)
        return event

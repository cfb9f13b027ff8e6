"""Interactive token shell and its batch (file) mode."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TextIO

from ana.lexer import Lexer
from ana.token import EOF, Token, TokenKind
from ana_repl.config import ReplConfig
from ana_repl.errors import IllegalTokenError
from ana_repl.events import EventEmitter, EventKind, ReplEvent

LINE_PREFIX = "LINE ==> "


@dataclass
class Session:
    config: ReplConfig = field(default_factory=ReplConfig)
    events: EventEmitter = field(default_factory=EventEmitter)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    lines_read: int = 0


def tokenize_line(line: str) -> list[Token]:
    return list(Lexer(line))


def format_token(token: Token) -> str:
    return token.describe()


def start(reader: TextIO, writer: TextIO, session: Session | None = None) -> int:
    """Prompt, read a line, echo its tokens; repeat until the reader is exhausted.

    Returns the number of lines processed.
    """
    session = session or Session()
    _emit(session, EventKind.SESSION_START, mode="interactive")

    writer.write(session.config.banner_text() + "\n")
    try:
        while True:
            writer.write(session.config.prompt)
            writer.flush()
            line = reader.readline()
            if not line:
                break
            _echo_line(session, line.rstrip("\r\n"), session.lines_read + 1, writer)
            writer.flush()
    finally:
        _emit(session, EventKind.SESSION_END, lines_read=session.lines_read)

    return session.lines_read


def start_file(reader: TextIO, writer: TextIO, session: Session | None = None) -> int:
    """Echo each non-blank line as `LINE ==> ...` followed by its tokens.

    Blank lines are skipped but still count towards line numbers.
    """
    session = session or Session()
    _emit(session, EventKind.SESSION_START, mode="file")

    try:
        for line_number, raw in enumerate(reader, 1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            writer.write(f"{LINE_PREFIX}{line}\n")
            _echo_line(session, line, line_number, writer)
            writer.flush()
    finally:
        _emit(session, EventKind.SESSION_END, lines_read=session.lines_read)

    return session.lines_read


def _emit(session: Session, kind: EventKind, **fields) -> ReplEvent:
    return session.events.emit(ReplEvent(kind=kind, session_id=session.id, **fields))


def _echo_line(session: Session, line: str, line_number: int, writer: TextIO) -> None:
    session.lines_read += 1
    _emit(session, EventKind.LINE_READ, line_number=line_number, line=line)

    for token in tokenize_line(line):
        if token.kind is TokenKind.ILLEGAL:
            _emit(
                session,
                EventKind.ILLEGAL_TOKEN,
                line_number=line_number,
                line=line,
                token=token,
            )
            if session.config.strict:
                error = IllegalTokenError(token, line_number=line_number, line=line)
                _emit(session, EventKind.ERROR, line_number=line_number, error=error)
                raise error
        else:
            _emit(session, EventKind.TOKEN, line_number=line_number, line=line, token=token)
        writer.write(format_token(token) + "\n")

    if session.config.show_eof:
        writer.write(format_token(EOF) + "\n")

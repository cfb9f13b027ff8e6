import io

import pytest

from ana.token import LET, SEMICOLON, Token
from ana_repl.config import ReplConfig
from ana_repl.errors import IllegalTokenError
from ana_repl.events import EventKind
from ana_repl.repl import Session, format_token, start, start_file, tokenize_line


def capture(session: Session) -> list:
    events = []
    session.events.subscribe(events.append)
    return events


def test_tokenize_line_excludes_eof():
    assert tokenize_line("let x;\n") == [LET, Token.ident("x"), SEMICOLON]
    assert tokenize_line("   ") == []


def test_format_token():
    assert format_token(Token.integer("5")) == '{type: "int", literal: "5"}'


def test_interactive_session_echoes_tokens():
    reader = io.StringIO("let five = 5;\n")
    writer = io.StringIO()

    lines = start(reader, writer)

    assert lines == 1
    assert writer.getvalue() == (
        "Welcome to Ana v0.1.0\n"
        ">> "
        '{type: "let", literal: "let"}\n'
        '{type: "ident", literal: "five"}\n'
        '{type: "assign", literal: "="}\n'
        '{type: "int", literal: "5"}\n'
        '{type: "semicolon", literal: ";"}\n'
        ">> "
    )


def test_interactive_session_reports_illegal_and_continues():
    reader = io.StringIO("@\n1\n")
    writer = io.StringIO()

    assert start(reader, writer) == 2

    output = writer.getvalue()
    assert '{type: "illegal", literal: "@"}\n' in output
    assert output.endswith('{type: "int", literal: "1"}\n>> ')


def test_blank_interactive_line_prints_nothing():
    writer = io.StringIO()
    session = Session(config=ReplConfig(prompt="$ ", banner="hi"))

    start(io.StringIO("\n"), writer, session)

    assert writer.getvalue() == "hi\n$ $ "


def test_show_eof_prints_terminator():
    writer = io.StringIO()
    session = Session(config=ReplConfig(show_eof=True))

    start(io.StringIO("x\n"), writer, session)

    assert '{type: "ident", literal: "x"}\n{type: "eof", literal: ""}\n' in writer.getvalue()


def test_file_mode_prefixes_lines_and_skips_blanks():
    reader = io.StringIO("let a = 1;\n\n   \nif (a != 2) { return a; }\n")
    writer = io.StringIO()

    assert start_file(reader, writer) == 2

    lines = writer.getvalue().splitlines()
    assert lines[0] == "LINE ==> let a = 1;"
    assert lines[1] == '{type: "let", literal: "let"}'
    assert lines[6] == "LINE ==> if (a != 2) { return a; }"
    assert '{type: "noteq", literal: "!="}' in lines
    assert '{type: "return", literal: "return"}' in lines
    assert not any(line.startswith(">>") for line in lines)


def test_events_cover_session_lifecycle():
    session = Session()
    events = capture(session)

    start_file(io.StringIO("a @\n"), io.StringIO(), session)

    kinds = [event.kind for event in events]
    assert kinds == [
        EventKind.SESSION_START,
        EventKind.LINE_READ,
        EventKind.TOKEN,
        EventKind.ILLEGAL_TOKEN,
        EventKind.SESSION_END,
    ]
    assert all(event.session_id == session.id for event in events)
    assert events[0].mode == "file"
    assert events[1].line_number == 1
    assert events[1].line == "a @"
    assert events[2].token == Token.ident("a")
    assert events[3].token == Token.illegal("@")
    assert events[-1].lines_read == 1


def test_strict_mode_raises_on_illegal_token():
    session = Session(config=ReplConfig(strict=True))
    events = capture(session)
    writer = io.StringIO()

    with pytest.raises(IllegalTokenError, match="illegal character '#' on line 2") as info:
        start(io.StringIO("ok\nx # y\nnever\n"), writer, session)

    assert info.value.token == Token.illegal("#")
    assert info.value.line_number == 2
    assert info.value.line == "x # y"
    assert '{type: "ident", literal: "x"}' in writer.getvalue()
    assert "never" not in writer.getvalue()
    assert [event.kind for event in events][-2:] == [EventKind.ERROR, EventKind.SESSION_END]


def test_file_mode_line_numbers_count_blank_lines():
    session = Session(config=ReplConfig(strict=True))
    line_reads = []
    session.events.subscribe(line_reads.append, EventKind.LINE_READ)

    with pytest.raises(IllegalTokenError, match="on line 5") as info:
        start_file(io.StringIO("let a = 1;\n\n\n\nx # y\n"), io.StringIO(), session)

    assert info.value.line_number == 5
    assert [event.line_number for event in line_reads] == [1, 5]
    assert session.lines_read == 2


def test_interactive_line_numbers_include_blank_lines():
    session = Session()
    illegal = []
    session.events.subscribe(illegal.append, EventKind.ILLEGAL_TOKEN)

    start(io.StringIO("\n\n$\n"), io.StringIO(), session)

    assert [event.line_number for event in illegal] == [3]


def test_illegal_quote_is_escaped_in_output():
    writer = io.StringIO()

    start_file(io.StringIO('say "hi\\"\n'), writer)

    lines = writer.getvalue().splitlines()
    assert '{type: "illegal", literal: "\\""}' in lines
    assert '{type: "illegal", literal: "\\\\"}' in lines

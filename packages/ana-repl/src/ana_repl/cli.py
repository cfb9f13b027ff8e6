"""Command-line entry point for the `ana` token shell."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from ana import __version__
from ana_repl.config import ReplConfig
from ana_repl.errors import ConfigurationError, IllegalTokenError
from ana_repl.repl import Session, start, start_file

EXIT_OK = 0
EXIT_ILLEGAL = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ana", description="Echo the Ana token stream for each input line"
    )
    ap.add_argument(
        "file",
        nargs="?",
        default="-",
        help="source file to tokenize line by line; '-' or omitted starts the shell",
    )
    ap.add_argument(
        "--strict", action="store_true", default=None, help="stop at the first illegal character"
    )
    ap.add_argument(
        "--show-eof", action="store_true", default=None, help="also print the EOF token"
    )
    ap.add_argument("--prompt", default=None, help="shell prompt (default: '>> ')")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def resolve_config(
    args: argparse.Namespace, environ: Mapping[str, str] | None = None
) -> ReplConfig:
    config = ReplConfig.from_env(environ=environ)
    if args.prompt is not None:
        config.prompt = args.prompt
    if args.strict is not None:
        config.strict = args.strict
    if args.show_eof is not None:
        config.show_eof = args.show_eof
    return config


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)

    try:
        session = Session(config=resolve_config(args))
    except ConfigurationError as exc:
        print(f"ana: {exc}", file=stderr)
        return EXIT_USAGE

    try:
        if args.file == "-":
            start(stdin, stdout, session)
        else:
            try:
                with open(args.file, "r", encoding="utf-8") as handle:
                    start_file(handle, stdout, session)
            except OSError as exc:
                print(f"ana: cannot read {args.file}: {exc.strerror or exc}", file=stderr)
                return EXIT_USAGE
            except UnicodeDecodeError:
                print(f"ana: {args.file} is not valid UTF-8", file=stderr)
                return EXIT_USAGE
    except IllegalTokenError as exc:
        stdout.flush()
        print(f"ana: {exc}", file=stderr)
        return EXIT_ILLEGAL
    except KeyboardInterrupt:
        stdout.write("\n")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entry point: scan, parse and print a Blossom file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from blossom.config import ConfigError, load_config, setup_logging
from blossom.core.interner import Interner
from blossom.core.tracing import LoggingTracer, Tracer
from blossom.diagnostics.collector import DiagnosticCollector
from blossom.diagnostics.severity import DiagnosticSeverity
from blossom.parser.lexer import scan
from blossom.parser.parser import Parser
from blossom.parser.tokens import Token
from blossom.printer.pretty import render, to_sexpr

log = logging.getLogger("blossom.cli")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blossom",
        description="Scan and parse Blossom source, then print the resulting tree.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="Blossom source file")
    source.add_argument("-e", "--expr", metavar="SOURCE", help="parse SOURCE instead of a file")
    parser.add_argument("-c", "--config", metavar="PATH", help="blossom.yaml configuration file")
    parser.add_argument("--tokens", action="store_true", help="also print the token stream")
    parser.add_argument("--trace", action="store_true", help="log every token and node at DEBUG")
    parser.add_argument("--tree", action="store_true", help="print nested tuples instead of source text")
    return parser


def format_token(token: Token, interner: Interner) -> str:
    """One listing line: kind, span and, for literals, the interned text."""
    line = f"{token.kind.name:<14} {token.start}..{token.end}"
    if token.symbol is not None:
        line += f" {interner.resolve(token.symbol)!r}"
    return line


def main(argv: Sequence[str] | None = None, stdout: TextIO | None = None) -> int:
    out = stdout or sys.stdout
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    setup_logging(config.logging)

    if args.expr is not None:
        source, filename = args.expr, "<expr>"
    else:
        try:
            source = Path(args.file).read_text(encoding="utf-8")
        except OSError as e:
            print(f"ERROR: Cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 1
        filename = args.file

    tracer: Tracer | None = LoggingTracer() if args.trace or config.trace else None
    diag = DiagnosticCollector()

    log.info("Scanning %s (%d chars)", filename, len(source))
    tokens, interner = scan(source, filename, diag, tracer)
    log.info("Parsing %d tokens", len(tokens))
    module = Parser(tokens, diag, tracer, filename).parse_program()
    log.info("Built %d nodes, %d definitions", len(module), len(module.definitions))

    if args.tokens or config.output.tokens:
        for token in tokens:
            print(format_token(token, interner), file=out)
        print(file=out)

    if args.tree:
        for definition in to_sexpr(module, interner):
            print(definition, file=out)
    else:
        out.write(render(module, interner, config.output.indent))

    for d in diag.get_all():
        print(d.render(source), file=sys.stderr)
    worst = diag.worst()
    if worst is not None:
        log.log(
            worst.logging_level,
            "%s: %d error(s), %d warning(s)",
            filename,
            diag.count(DiagnosticSeverity.ERROR),
            diag.count(DiagnosticSeverity.WARNING),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Tests for the ``blossom`` command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from blossom.cli import build_arg_parser, format_token, main
from blossom.parser import scan


@pytest.fixture(autouse=True)
def reset_blossom_logger():
    yield
    logger = logging.getLogger("blossom")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestArgs:
    def test_requires_a_source(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])

    def test_file_and_expr_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args(["x.bl", "-e", "1"])


class TestMain:
    def test_inline_expression(self, capsys) -> None:
        assert main(["-e", "1+2"]) == 0
        out, err = capsys.readouterr()
        assert out == "1 + 2\n"
        assert err == ""

    def test_file(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "prog.bl"
        src.write_text("; comment\nif x > 1 { return x } else { return 0 }\n", encoding="utf-8")
        assert main([str(src)]) == 0
        out, _ = capsys.readouterr()
        assert out == "if x > 1 {\n  return x\n} else {\n  return 0\n}\n"

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "absent.bl")]) == 1
        _, err = capsys.readouterr()
        assert "Cannot read" in err

    def test_diagnostics_go_to_stderr(self, capsys) -> None:
        assert main(["-e", "@"]) == 0
        out, err = capsys.readouterr()
        assert out == "<Error>\n"
        assert "<expr>:0-1: warning: Unrecognized input '@'" in err
        assert "error: Expected expression, got UNKNOWN" in err
        assert "<expr>: 1 error(s), 1 warning(s)" in err

    def test_tokens_listing(self, capsys) -> None:
        assert main(["--tokens", "-e", "x := 1"]) == 0
        out, _ = capsys.readouterr()
        lines = out.splitlines()
        assert lines[0].split() == ["IDENT", "0..1", "'x'"]
        assert lines[1].split() == ["COLON_EQUAL", "2..4"]
        assert lines[2].split() == ["NUMBER", "5..6", "'1'"]
        assert lines[3] == ""
        assert lines[4] == "x := 1"

    def test_tree_output(self, capsys) -> None:
        assert main(["--tree", "-e", "1+2"]) == 0
        out, _ = capsys.readouterr()
        assert out == "('BinaryOp', '+', ('Number', '1'), ('Number', '2'))\n"

    def test_config_indent(self, tmp_path: Path, capsys) -> None:
        cfg = tmp_path / "blossom.yaml"
        cfg.write_text("output:\n  indent: 4\n", encoding="utf-8")
        assert main(["-c", str(cfg), "-e", "{ x }"]) == 0
        out, _ = capsys.readouterr()
        assert out == "{\n    x\n}\n"

    def test_bad_config(self, tmp_path: Path, capsys) -> None:
        cfg = tmp_path / "blossom.yaml"
        cfg.write_text("trace: maybe\n", encoding="utf-8")
        assert main(["-c", str(cfg), "-e", "1"]) == 2
        _, err = capsys.readouterr()
        assert "ERROR:" in err

    def test_trace_writes_log_file(self, tmp_path: Path, capsys) -> None:
        log_file = tmp_path / "logs" / "blossom.log"
        cfg = tmp_path / "blossom.yaml"
        cfg.write_text(f"logging:\n  level: DEBUG\n  file: {log_file.as_posix()}\n", encoding="utf-8")
        assert main(["-c", str(cfg), "--trace", "-e", "a + 1"]) == 0
        for handler in logging.getLogger("blossom").handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Saving AST node #2: BinaryOp" in text
        assert "Parsing 3 tokens" in text


class TestFormatToken:
    def test_structural_token(self) -> None:
        tokens, interner = scan("{")
        assert format_token(tokens[0], interner).split() == ["LBRACE", "0..1"]

    def test_text_token(self) -> None:
        tokens, interner = scan('"hi there"')
        assert format_token(tokens[0], interner).endswith("'hi there'")

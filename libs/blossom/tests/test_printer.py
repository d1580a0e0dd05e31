"""Tests for rendering modules back to text."""

from __future__ import annotations

import pytest

from blossom.core.interner import Interner, Symbol
from blossom.parser import parse_source
from blossom.parser.ast_nodes import (
    Arena,
    AstNode,
    BinaryOp,
    Block,
    Call,
    Error,
    Function,
    Identifier,
    Import,
    Loop,
    Module,
    Number,
    Return,
    UnaryOp,
)
from blossom.parser.tokens import TokenKind
from blossom.printer import render, to_sexpr

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def roundtrip(source: str) -> str:
    module, interner, diag = parse_source(source, "<test>")
    assert not diag.has_errors(), diag.format_all()
    return render(module, interner)


class ModuleBuilder:
    """Builds a module by hand for node kinds the parser never produces."""

    def __init__(self) -> None:
        self.interner = Interner()
        self.arena = Arena()

    def add(self, kind) -> int:
        return self.arena.push(AstNode(kind, (0, 0)))

    def ident(self, name: str) -> int:
        return self.add(Identifier(self.interner.intern(name)))

    def num(self, text: str) -> int:
        return self.add(Number(self.interner.intern(text)))

    def module(self, *definitions: int) -> Module:
        return Module(definitions=definitions, arena=self.arena)


# ---------------------------------------------------------------------------
# Rendering parsed source
# ---------------------------------------------------------------------------


class TestRenderParsed:
    def test_binary(self) -> None:
        assert roundtrip("1+2") == "1 + 2\n"

    def test_one_line_per_definition(self) -> None:
        assert roundtrip("a b") == "a\nb\n"

    def test_empty_module(self) -> None:
        assert roundtrip("") == ""

    def test_empty_block(self) -> None:
        assert roundtrip("{}") == "{}\n"

    def test_block(self) -> None:
        assert roundtrip("{ return x }") == "{\n  return x\n}\n"

    def test_nested_block_indentation(self) -> None:
        assert roundtrip("{ a { b } }") == "{\n  a\n  {\n    b\n  }\n}\n"

    def test_if_else(self) -> None:
        assert roundtrip("if x > 1 { return x } else { return 0 }") == (
            "if x > 1 {\n  return x\n} else {\n  return 0\n}\n"
        )

    def test_error_node(self) -> None:
        module, interner, _ = parse_source("@")
        assert render(module, interner) == "<Error>\n"

    def test_custom_indent(self) -> None:
        module, interner, _ = parse_source("{ x }")
        assert render(module, interner, indent=4) == "{\n    x\n}\n"


# ---------------------------------------------------------------------------
# Hand-built nodes
# ---------------------------------------------------------------------------


class TestRenderBuilt:
    def test_call(self) -> None:
        b = ModuleBuilder()
        f, x, y = b.ident("f"), b.ident("x"), b.num("2")
        call = b.add(Call(callee=f, args=(x, y)))
        assert render(b.module(call), b.interner) == "f(x, 2)\n"

    def test_call_without_args(self) -> None:
        b = ModuleBuilder()
        call = b.add(Call(callee=b.ident("f")))
        assert render(b.module(call), b.interner) == "f()\n"

    def test_function(self) -> None:
        b = ModuleBuilder()
        a, c = b.ident("a"), b.ident("c")
        result = b.ident("int")
        body = b.add(Block(statements=(b.add(Return(expr=b.ident("a"))),)))
        fn = b.add(Function(params=(a, c), result=result, body=body))
        assert render(b.module(fn), b.interner) == "(a, c) -> int {\n  return a\n}\n"

    def test_loop(self) -> None:
        b = ModuleBuilder()
        body = b.add(Block())
        assert render(b.module(b.add(Loop(body=body))), b.interner) == "loop {}\n"

    def test_unary_symbol_operator(self) -> None:
        b = ModuleBuilder()
        neg = b.add(UnaryOp(expr=b.num("1"), op=TokenKind.MINUS))
        assert render(b.module(neg), b.interner) == "-1\n"

    def test_unary_word_operator(self) -> None:
        b = ModuleBuilder()
        neg = b.add(UnaryOp(expr=b.ident("ok"), op=TokenKind.NOT))
        assert render(b.module(neg), b.interner) == "not ok\n"

    def test_word_binary_operator(self) -> None:
        b = ModuleBuilder()
        node = b.add(BinaryOp(lhs=b.ident("p"), rhs=b.ident("q"), op=TokenKind.OR))
        assert render(b.module(node), b.interner) == "p or q\n"

    def test_import_and_error(self) -> None:
        b = ModuleBuilder()
        assert render(b.module(b.add(Import()), b.add(Error())), b.interner) == "import\n<Error>\n"

    def test_missing_symbols(self) -> None:
        b = ModuleBuilder()
        n = b.add(Number(Symbol(40)))
        i = b.add(Identifier(Symbol(41)))
        assert render(b.module(n, i), b.interner) == "<Unknown number>\n<Unknown identifier>\n"

    def test_non_operator_kind_rejected(self) -> None:
        b = ModuleBuilder()
        node = b.add(BinaryOp(lhs=b.ident("p"), rhs=b.ident("q"), op=TokenKind.LBRACE))
        with pytest.raises(ValueError):
            render(b.module(node), b.interner)


# ---------------------------------------------------------------------------
# Print, re-scan, re-parse
# ---------------------------------------------------------------------------

ROUNDTRIP_SOURCES = [
    "1+2",
    "if x > 1 { return x } else { return 0 }",
    "res := 3*if x >10 { return x} else { return 0 } + 2",
    "a.b::c -> d == e != f <= 1.5 >= g / h",
    "{ { } { return { x } } y := 2 }",
    "if a if b c else d",
    "return return 1",
    "x\ny\nz",
]


class TestRoundTrip:
    @pytest.mark.parametrize("source", ROUNDTRIP_SOURCES)
    def test_structure_survives_printing(self, source: str) -> None:
        module, interner, diag = parse_source(source)
        assert not diag.has_errors()
        text = render(module, interner)
        again, again_interner, again_diag = parse_source(text)
        assert not again_diag.has_errors(), text
        assert to_sexpr(again, again_interner) == to_sexpr(module, interner)

    @pytest.mark.parametrize("source", ROUNDTRIP_SOURCES)
    def test_printing_is_stable(self, source: str) -> None:
        once = roundtrip(source)
        assert roundtrip(once) == once


class TestSexpr:
    def test_single_node(self) -> None:
        module, interner, _ = parse_source("a + 1")
        assert to_sexpr(module, interner, 0) == ("Identifier", "a")

    def test_hand_built_kinds(self) -> None:
        b = ModuleBuilder()
        fn = b.add(Function(params=(b.ident("p"),), result=b.ident("r"), body=b.add(Block())))
        call = b.add(Call(callee=fn, args=(b.num("1"),)))
        loop = b.add(Loop(body=b.add(Import())))
        assert to_sexpr(b.module(call, loop), b.interner) == (
            (
                "Call",
                ("Function", (("Identifier", "p"),), ("Identifier", "r"), ("Block",)),
                ("Number", "1"),
            ),
            ("Loop", ("Import",)),
        )

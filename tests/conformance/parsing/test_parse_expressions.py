"""
Conformance: Expressions - precedence climbing with single-atom right operands
"""
import pytest

from tests.conformance.runner import check


# Each test case is a tuple: (description, blossom_source, expected_outcome)
# expected_outcome is the compact tree of every definition joined by " | ",
# or "error: <description>"

CASES = [
    ("sum", "1+2", "(+ 1 2)"),
    ("left_assoc", "a - b - c", "(- (- a b) c)"),
    ("mul_then_add", "a * b + c", "(+ (* a b) c)"),
    ("add_then_mul", "a + b * c", "(* (+ a b) c)"),
    ("assignment", "x := y + 1", "(+ (:= x y) 1)"),
    ("equality", "a == b != c", "(!= (== a b) c)"),
    ("member_and_path", "std::io.out -> f", "(-> (. (:: std io) out) f)"),
    ("definitions", "a b 1.5", "a | b | 1.5"),
    ("word_operator_not_binary", "a or b", "error: expected expression, got OR"),
    ("dangling_operator", "a *", "error: unexpected end of input"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_parse_expressions(runner, description, source, expected):
    """Binary operator folding."""
    result = runner.run(source)
    check(result, " | ".join(result.tree), expected)

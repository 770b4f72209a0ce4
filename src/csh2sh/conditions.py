"""
Condition rewriting for test expressions.

Converts C-shell relational/equality expressions into POSIX `[ ]` syntax.

Mapping:
    ==  ->  =
    !=  ->  !=
    <   ->  -lt
    >   ->  -gt
    <=  ->  -le
    >=  ->  -ge

Operands are always double-quoted. An identifier on the left-hand side is
dereferenced, with or without its `$` prefix. A $(cmd) substitution is
kept whole as one operand:

    $i < 10           ->  "$i" -lt "10"
    name == "bob"     ->  "$name" = "bob"
    $n < $(cat max)   ->  "$n" -lt "$(cat max)"

LIMITATION:
    This is a textual rewrite, not a parser. Nested parentheses and
    compound `&&` / `||` expressions are not understood: each comparison is
    rewritten on its own and everything else is passed through.
    Use has_compound_operator() to detect such conditions.
"""

import re
from typing import Dict


TEST_OPERATORS: Dict[str, str] = {
    "==": "=",
    "!=": "!=",
    "<": "-lt",
    ">": "-gt",
    "<=": "-le",
    ">=": "-ge",
}

_OPERAND = r"""(?:"[^"]*"|'[^']*'|\$\([^)]*\)|[^\s<>=!()&|"']+)"""
_COMPARISON_RE = re.compile(
    rf"(?P<left>{_OPERAND})\s*(?P<op>==|!=|<=|>=|<|>)\s*(?P<right>{_OPERAND})"
)
_FILE_TEST_RE = re.compile(r"""(?<!\S)(-[a-zA-Z])\s+([^\s"']\S*)""")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_COMPOUND_RE = re.compile(r"&&|\|\|")


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"'":
        return token[1:-1]
    return token


def _left_operand(token: str) -> str:
    value = _unquote(token)
    if _IDENTIFIER_RE.match(value):
        value = "$" + value
    return f'"{value}"'


def _right_operand(token: str) -> str:
    return f'"{_unquote(token)}"'


def _rewrite_comparison(match: re.Match) -> str:
    left = _left_operand(match.group("left"))
    right = _right_operand(match.group("right"))
    return f"{left} {TEST_OPERATORS[match.group('op')]} {right}"


def bashify_condition(condition: str) -> str:
    """
    Rewrite every comparison in a condition into POSIX test syntax.

    Args:
        condition: Condition text without the surrounding parentheses

    Returns:
        Condition suitable for placing inside `[ ]`
    """
    return _COMPARISON_RE.sub(_rewrite_comparison, condition.strip())


def quote_file_tests(condition: str) -> str:
    """Quote the operand of single-letter file tests: -e path -> -e "path"."""
    return _FILE_TEST_RE.sub(r'\1 "\2"', condition)


def has_compound_operator(condition: str) -> bool:
    """True if the condition combines comparisons with && or ||."""
    return bool(_COMPOUND_RE.search(condition))


__all__ = [
    "TEST_OPERATORS",
    "bashify_condition",
    "quote_file_tests",
    "has_compound_operator",
]

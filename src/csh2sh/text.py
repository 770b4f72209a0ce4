"""
Line-level text helpers: indentation and command substitution.

    split_indent("    setenv A b")  -> ("    ", "setenv A b")
    apply_indent("  ", "fi\\nelse")  -> ["  fi", "  else"]
    migrate_backticks("set d = `date`") -> "set d = $(date)"
"""

import re
from typing import List, Tuple


_INDENT_RE = re.compile(r"^(\s*)")
_BACKTICK_RE = re.compile(r"`([^`]+)`")


def split_indent(line: str) -> Tuple[str, str]:
    """Separate the leading whitespace run from the rest of the line."""
    indent = _INDENT_RE.match(line).group(1)
    return indent, line[len(indent):]


def apply_indent(indent: str, text: str) -> List[str]:
    """
    Reapply indentation to every sub-line of a (possibly multi-line) result.

    Structural lines inserted by a rule get the same indentation as the
    line they were derived from.
    """
    return [indent + part for part in text.split("\n")]


def migrate_backticks(text: str) -> str:
    """Rewrite legacy `cmd` substitutions to $(cmd). Empty `` pairs are left alone."""
    return _BACKTICK_RE.sub(r"$(\1)", text)


def find_backticks(text: str) -> List[str]:
    """Commands of all `cmd` substitutions in the text."""
    return _BACKTICK_RE.findall(text)


def split_lines(text: str) -> List[str]:
    """
    Split script text into physical lines.

    Accepts \\n, \\r\\n and bare \\r terminators. A trailing terminator does
    not produce an extra empty line.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


__all__ = ["split_indent", "apply_indent", "migrate_backticks", "find_backticks", "split_lines"]

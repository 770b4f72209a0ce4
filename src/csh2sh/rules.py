"""
Rule Engine — the translation core (C shell line → Bash line(s)).

An ordered table of rules over a DEDENTED line. Each rule is a regex
predicate plus a transform. Rules are evaluated top to bottom and the first
match wins: no combination, no backtracking.

ARCHITECTURAL RULE:
    Declaration order is semantically load-bearing.
        - `else if` must be tried before bare `else`
        - `default:` must be tried before the generic `LABEL:` rule
        - `passthrough` must stay last
    Do NOT reorder RULES.

Rule table:
    header          #!...                       -> (suppressed)
    block_comment   : <<'END' / END             -> unchanged
    setenv          setenv NAME VALUE           -> export NAME=VALUE
    set             set NAME = VALUE            -> NAME=VALUE
    cd              cd PATH                     -> cd "PATH"
    if_not          if !( COND ) then           -> if [ ! COND ]; then
    if              if ( VAR == VALUE ) then    -> if [ "$VAR" = "VALUE" ]; then
    else_if         else if ( ... ) then        -> elif [ ... ]; then
    else            else                        -> else
    endif           endif                       -> fi
    while           while ( COND )              -> while [ COND ]; do
    foreach         foreach VAR ( LIST )        -> for VAR in LIST; do
    switch          switch ( $VAR )             -> case "$VAR" in
    case            case VALUE:                 -> VALUE)
    breaksw         breaksw                     -> ;;
    default         default:                    -> *)
    endsw           endsw                       -> esac
    end             end                         -> done
    alias           alias NAME VALUE            -> alias NAME='VALUE'
    unalias         unalias NAME                -> unchanged
    goto            goto LABEL / goto $VAR      -> LABEL / eval "$VAR", then return
    label           LABEL:                      -> LABEL() {
    source          source PATH                 -> . PATH
    passthrough     anything else               -> unchanged
"""

import re
import warnings
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from csh2sh.blocks import FunctionBlockTracker
from csh2sh.conditions import bashify_condition, has_compound_operator, quote_file_tests
from csh2sh.errors import UnsupportedConstructWarning
from csh2sh.model import TranslationResult


Transform = Callable[[re.Match, FunctionBlockTracker], str]


@dataclass(frozen=True)
class Rule:
    """
    One predicate+transform pair.

    Properties:
        name: Stable rule identifier (used in traces and reports)
        pattern: Regex matched against the start of the dedented line
        transform: Builds the output text from the match; "" suppresses the line
    """

    name: str
    pattern: re.Pattern
    transform: Transform

    def match(self, text: str) -> Optional[re.Match]:
        return self.pattern.match(text)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _is_quoted(value: str) -> bool:
    return value[:1] in ("'", '"')


def _warn_compound(condition: str) -> None:
    if has_compound_operator(condition):
        warnings.warn(
            f"Compound condition is not supported and was rewritten textually: {condition}",
            UnsupportedConstructWarning,
            stacklevel=4,
        )


# =========================================================================
# TRANSFORMS
# =========================================================================

def _suppress(match, tracker):
    return ""


def _keep(match, tracker):
    return match.string


def _setenv(match, tracker):
    return f"export {match.group(1)}={match.group(2)}"


def _set(match, tracker):
    return f"{match.group(1)}={match.group(2)}"


def _cd(match, tracker):
    return f'cd "{match.group(1)}"'


def _if_not(match, tracker):
    condition = match.group(1)
    _warn_compound(condition)
    condition = bashify_condition(quote_file_tests(condition))
    return f"if [ ! {condition} ]; then"


def _test_operator(symbol: str) -> str:
    return "=" if symbol == "==" else "!="


def _if(match, tracker):
    return f'if [ "${match.group(1)}" {_test_operator(match.group(2))} "{_unquote(match.group(3))}" ]; then'


def _else_if(match, tracker):
    return f'elif [ "${match.group(1)}" {_test_operator(match.group(2))} "{_unquote(match.group(3))}" ]; then'


def _constant(text: str) -> Transform:
    return lambda match, tracker: text


def _while(match, tracker):
    condition = match.group(1)
    _warn_compound(condition)
    return f"while [ {bashify_condition(condition)} ]; do"


def _foreach(match, tracker):
    return f"for {match.group(1)} in {match.group(2)}; do"


def _switch(match, tracker):
    return f'case "${match.group(1)}" in'


def _case(match, tracker):
    return f"{_unquote(match.group(1))})"


def _alias(match, tracker):
    name, value = match.group(1), match.group(2).strip()
    if not _is_quoted(value) and re.search(r"\s", value):
        value = f"'{value}'"
    return f"alias {name}={value}"


def _goto(match, tracker):
    target = match.group(1).strip()
    if target.startswith("$"):
        return f'eval "{target}"\nreturn'
    return f"{target}\nreturn"


def _label(match, tracker):
    return tracker.open_label(match.group(1))


def _source(match, tracker):
    return f". {match.group(1)}"


_COMPARE = r'\$?([^\s=!()"]+)\s*(==|!=)\s*("[^"]*"|\$\([^)]*\)|[^\s()]+)'


RULES: Sequence[Rule] = (
    Rule("header", re.compile(r"#!"), _suppress),
    Rule("block_comment", re.compile(r": <<'END'|END$"), _keep),
    Rule("setenv", re.compile(r"setenv\s+(\S+)\s+(\S+)"), _setenv),
    Rule("set", re.compile(r"set\s+([^\s=]+)\s*=\s*(.+)"), _set),
    Rule("cd", re.compile(r"""cd\s+([^"'\s].*?)\s*$"""), _cd),
    Rule("if_not", re.compile(r"if\s*!\s*\(\s*(.+?)\s*\)\s*then\b"), _if_not),
    Rule("if", re.compile(rf"if\s*\(\s*{_COMPARE}\s*\)\s*then\b"), _if),
    Rule("else_if", re.compile(rf"else\s+if\s*\(\s*{_COMPARE}\s*\)\s*then\b"), _else_if),
    Rule("else", re.compile(r"else\s*$"), _constant("else")),
    Rule("endif", re.compile(r"endif\s*$"), _constant("fi")),
    Rule("while", re.compile(r"while\s*\(\s*(.+?)\s*\)\s*$"), _while),
    Rule("foreach", re.compile(r"foreach\s+([^\s(]+)\s*\(\s*(.*\S)\s*\)"), _foreach),
    Rule("switch", re.compile(r'switch\s*\(\s*"?\$?([^\s()"]+)"?\s*\)'), _switch),
    Rule("case", re.compile(r"case\s+(.+?)\s*:\s*$"), _case),
    Rule("breaksw", re.compile(r"breaksw\s*$"), _constant(";;")),
    Rule("default", re.compile(r"default\s*:"), _constant("*)")),
    Rule("endsw", re.compile(r"endsw\s*$"), _constant("esac")),
    Rule("end", re.compile(r"end\s*$"), _constant("done")),
    Rule("alias", re.compile(r"alias\s+(\S+)\s+(\S.*)"), _alias),
    Rule("unalias", re.compile(r"unalias\s"), _keep),
    Rule("goto", re.compile(r"goto\s+(\S.*)"), _goto),
    Rule("label", re.compile(r"([A-Za-z_][A-Za-z0-9_]*):\s*$"), _label),
    Rule("source", re.compile(r"source\s+(.*)"), _source),
    Rule("passthrough", re.compile(r""), _keep),
)


class RuleEngine:
    """
    Applies the ordered rule table to dedented lines.

    The engine itself is stateless; cross-line state lives in the
    FunctionBlockTracker passed to apply().
    """

    def __init__(self, rules: Sequence[Rule] = RULES):
        self.rules = tuple(rules)

    def apply(self, text: str, tracker: FunctionBlockTracker) -> TranslationResult:
        """
        Translate one dedented line.

        Args:
            text: Line content without indentation (backticks already migrated)
            tracker: Function block state of the current invocation

        Returns:
            TranslationResult naming the first matching rule
        """
        for rule in self.rules:
            match = rule.match(text)
            if match:
                return TranslationResult(rule=rule.name, text=rule.transform(match, tracker))
        return TranslationResult(rule="passthrough", text=text)

    @property
    def rule_names(self):
        return [rule.name for rule in self.rules]


__all__ = ["Rule", "RULES", "RuleEngine"]

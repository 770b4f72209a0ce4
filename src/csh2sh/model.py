"""
Core Conversion Model Objects

Defines the data structures shared by the transpiler layers.

These are plain data classes representing:
    - Source lines (raw text + position)
    - Conversion state (one per transpile invocation)
    - Translation results (output of one rule)
    - Line translations (per-line trace records)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about file I/O
        - Carry no rewrite logic
        - Are serializable through plain dicts
"""

from dataclasses import dataclass, field
from typing import List


# Line categories that are not produced by a rule
HEADER = "source_header"
BLANK = "blank"


@dataclass(frozen=True)
class SourceLine:
    """
    A single physical line of the source script.

    Properties:
        number: 1-based line number in the source file
        text: Raw line text, without the trailing newline
    """

    number: int
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass
class ConversionState:
    """
    Mutable state of a single transpile invocation.

    IMPORTANT:
        Created fresh at the start of every invocation and discarded at the end.
        Never shared between conversions, never persisted.

    Properties:
        function_block_open:
            True while a synthesized label function (LABEL() {) has not been closed
    """

    function_block_open: bool = False


@dataclass(frozen=True)
class TranslationResult:
    """
    Output of the rule engine for one dedented line.

    Properties:
        rule: Name of the rule that matched
        text: Rewritten text, possibly with embedded line breaks.
              An empty string means the line is suppressed.
    """

    rule: str
    text: str

    @property
    def suppressed(self) -> bool:
        return self.text == ""

    def lines(self) -> List[str]:
        """Logical output lines, before indentation is reapplied."""
        if self.suppressed:
            return []
        return self.text.split("\n")


@dataclass
class LineTranslation:
    """
    Trace record: what happened to one physical input line.

    Properties:
        source: The input line
        category: HEADER, BLANK or the name of the matching rule
        output: Output lines written for this input line (indentation included)
    """

    source: SourceLine
    category: str
    output: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.output != [self.source.text]


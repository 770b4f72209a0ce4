"""
Script Transpiler (C shell file → Bash file).

Orchestrates the line pipeline:

    raw line
      -> split indentation
      -> migrate `cmd` to $(cmd)
      -> RuleEngine (mutates the FunctionBlockTracker)
      -> reapply indentation to every output line

Around the pipeline:
    - The Bash interpreter header is always written first
    - A C shell header (#!...) on the first physical line is dropped
    - Blank lines are copied 1:1 and never reach the rule engine
    - A function block still open at end of stream is closed with `}`

ARCHITECTURAL RULE:
    A ScriptTranspiler holds configuration only. All conversion state is
    created inside each call, so one instance can be shared freely.
"""

import warnings
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from csh2sh.blocks import FunctionBlockTracker
from csh2sh.config import TranspilerConfig, DEFAULT_CONFIG
from csh2sh.converter import Converter, PathLike
from csh2sh.errors import (
    ConversionIOError,
    InvalidInputError,
    SourceNotFoundError,
    UnsupportedConstructWarning,
)
from csh2sh.model import BLANK, HEADER, LineTranslation, SourceLine
from csh2sh.rules import RuleEngine
from csh2sh.text import apply_indent, migrate_backticks, split_indent, split_lines


class ScriptTranspiler(Converter):
    """Converts C shell scripts into Bash scripts."""

    def __init__(self, config: Optional[TranspilerConfig] = None, engine: Optional[RuleEngine] = None):
        self.config = config or DEFAULT_CONFIG
        self.engine = engine or RuleEngine()

    # =========================================================================
    # LINE PIPELINE
    # =========================================================================

    def translate_line(self, source: SourceLine, tracker: FunctionBlockTracker) -> LineTranslation:
        """Run one non-blank line through the conversion pipeline."""
        indent, body = split_indent(source.text)
        result = self.engine.apply(migrate_backticks(body), tracker)

        if result.rule == "label" and indent:
            warnings.warn(
                f"Line {source.number}: label {body.rstrip()!r} is nested inside another block; "
                f"jumps into nested blocks are not supported",
                UnsupportedConstructWarning,
                stacklevel=2,
            )

        output: List[str] = [] if result.suppressed else apply_indent(indent, result.text)
        return LineTranslation(source=source, category=result.rule, output=output)

    def translate(self, lines: Iterable[str], tracker: FunctionBlockTracker) -> Iterator[LineTranslation]:
        """
        Translate physical lines, yielding one trace record per input line.

        Finalization is left to the caller: check tracker.finalize() once
        the iterator is exhausted.

        Args:
            lines: Source lines, with or without trailing newlines
            tracker: Function block state of this invocation
        """
        for number, raw in enumerate(lines, start=1):
            source = SourceLine(number=number, text=raw.rstrip("\n").replace("\r", ""))

            if number == 1 and source.text.strip().startswith("#!"):
                yield LineTranslation(source=source, category=HEADER, output=[])
            elif source.is_blank:
                yield LineTranslation(source=source, category=BLANK, output=[""])
            else:
                yield self.translate_line(source, tracker)

    def transpile_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Full output of a conversion, line by line (header and closing brace included)."""
        tracker = FunctionBlockTracker()
        yield self.config.interpreter_header
        for translation in self.translate(lines, tracker):
            yield from translation.output
        yield from tracker.finalize()

    def transpile_text(self, text: str) -> str:
        """Convert script text in memory."""
        return "\n".join(self.transpile_lines(split_lines(text))) + "\n"

    # =========================================================================
    # FILES
    # =========================================================================

    def output_path(self, input_path: PathLike) -> Path:
        """Sibling path with the same base name and the target extension."""
        path = Path(input_path)
        base = path.name[: -len(self.config.source_extension)]
        return path.with_name(base + self.config.target_extension)

    def convert(self, input_path: PathLike) -> Path:
        """
        Convert a C shell file into a Bash file next to it.

        Args:
            input_path: Path to the source script (must end with the source extension)

        Returns:
            Path of the written file (overwritten if it already existed)

        Raises:
            InvalidInputError: If the file name has the wrong extension
            SourceNotFoundError: If the file doesn't exist
            ConversionIOError: If reading or writing fails
        """
        path = Path(input_path)
        if not path.name.lower().endswith(self.config.source_extension.lower()):
            raise InvalidInputError(f"Expected a {self.config.source_extension} file: {input_path}")
        if not path.exists():
            raise SourceNotFoundError(f"Input file does not exist: {input_path}")

        output = self.output_path(path)
        encoding = self.config.encoding
        try:
            with open(path, "r", encoding=encoding) as reader, \
                    open(output, "w", encoding=encoding, newline="\n") as writer:
                for line in self.transpile_lines(reader):
                    writer.write(line)
                    writer.write("\n")
        except (OSError, UnicodeError) as e:
            raise ConversionIOError(f"Failed to convert {input_path}: {e}") from e

        return output


def convert(input_path: PathLike, config: Optional[TranspilerConfig] = None) -> Path:
    """Convert one file with a fresh ScriptTranspiler."""
    return ScriptTranspiler(config).convert(input_path)


def transpile_text(text: str, config: Optional[TranspilerConfig] = None) -> str:
    """Convert script text with a fresh ScriptTranspiler."""
    return ScriptTranspiler(config).transpile_text(text)


__all__ = ["ScriptTranspiler", "convert", "transpile_text"]

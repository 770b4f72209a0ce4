"""
Script Analyzer — inventory of a C shell script before conversion.

This module provides lightweight analysis of source scripts:
    - Line inventory (blank, converted, unchanged, suppressed)
    - Rule usage counts
    - Label / goto cross-references
    - Constructs the line-oriented rewrite cannot represent
    - Warning flags for manual review

IMPORTANT: This is a read-only layer. It runs the same translation trace as
the transpiler but writes nothing. It only produces reports.
"""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Set

from csh2sh.blocks import FunctionBlockTracker
from csh2sh.conditions import has_compound_operator
from csh2sh.errors import SourceNotFoundError, UnsupportedConstructWarning
from csh2sh.model import BLANK, HEADER
from csh2sh.text import find_backticks, split_indent, split_lines
from csh2sh.transpiler import ScriptTranspiler


_GOTO_RE = re.compile(r"goto\s+(\S+)")
_CONDITIONAL_RE = re.compile(r"(?:else\s+)?if\b|while\b")
_CONTROL_FLOW_RE = re.compile(r"(if|else\s+if|while|foreach|switch)\b")


@dataclass
class ScriptReport:
    """Analysis report for one script."""

    script_name: str
    total_lines: int = 0
    blank_lines: int = 0
    header_suppressed: bool = False
    converted_lines: int = 0
    unchanged_lines: int = 0
    suppressed_lines: int = 0

    # Rule usage (rule name -> number of lines)
    rule_usage: Dict[str, int] = field(default_factory=dict)

    # Labels and jumps
    labels: List[str] = field(default_factory=list)
    goto_targets: List[str] = field(default_factory=list)
    dynamic_gotos: int = 0
    undefined_goto_targets: Set[str] = field(default_factory=set)
    nested_labels: List[str] = field(default_factory=list)
    unclosed_block_at_end: bool = False

    # Conditions and substitutions
    compound_condition_lines: List[int] = field(default_factory=list)
    unconverted_control_flow_lines: List[int] = field(default_factory=list)
    backtick_substitutions: int = 0

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _line_numbers(numbers: List[int]) -> str:
    return ", ".join(str(n) for n in numbers)


def analyze_script(text: str, script_name: str = "script") -> ScriptReport:
    """
    Analyze C shell source text.

    Checks for:
    - Which rule handles each line
    - goto targets without a matching label
    - Labels nested inside other blocks
    - Compound conditions and control flow the rules leave unconverted

    Returns a ScriptReport with metrics and warnings.
    """
    report = ScriptReport(script_name=script_name)
    transpiler = ScriptTranspiler()
    tracker = FunctionBlockTracker()
    usage: Dict[str, int] = {}

    # =========================================================================
    # 1. LINE INVENTORY
    # =========================================================================

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UnsupportedConstructWarning)
        translations = list(transpiler.translate(split_lines(text), tracker))

    report.total_lines = len(translations)

    for translation in translations:
        category = translation.category
        source = translation.source
        indent, body = split_indent(source.text)

        if category == HEADER:
            report.header_suppressed = True
            continue
        if category == BLANK:
            report.blank_lines += 1
            continue

        usage[category] = usage.get(category, 0) + 1
        report.backtick_substitutions += len(find_backticks(body))

        if not translation.output:
            report.suppressed_lines += 1
        elif translation.changed:
            report.converted_lines += 1
        else:
            report.unchanged_lines += 1

        # =====================================================================
        # 2. LABELS AND JUMPS
        # =====================================================================

        if category == "label":
            label = body.rstrip().rstrip(":")
            report.labels.append(label)
            if indent:
                report.nested_labels.append(label)

        elif category == "goto":
            target = _GOTO_RE.match(body).group(1)
            if target.startswith("$"):
                report.dynamic_gotos += 1
            elif target not in report.goto_targets:
                report.goto_targets.append(target)

        # =====================================================================
        # 3. CONDITIONS
        # =====================================================================

        if _CONDITIONAL_RE.match(body) and has_compound_operator(body):
            report.compound_condition_lines.append(source.number)

        if category == "passthrough" and _CONTROL_FLOW_RE.match(body):
            report.unconverted_control_flow_lines.append(source.number)

    report.rule_usage = usage
    report.undefined_goto_targets = set(report.goto_targets) - set(report.labels)
    report.unclosed_block_at_end = tracker.is_open

    # =========================================================================
    # 4. WARNING FLAGS
    # =========================================================================

    if report.undefined_goto_targets:
        report.add_warning(
            f"goto targets without a label: {', '.join(sorted(report.undefined_goto_targets))}"
        )

    if report.nested_labels:
        report.add_warning(
            f"Labels nested inside other blocks (jumps into them are not supported): "
            f"{', '.join(report.nested_labels)}"
        )

    if report.dynamic_gotos:
        report.add_warning(
            f"Dynamic goto used {report.dynamic_gotos} time(s); targets cannot be checked"
        )

    if report.compound_condition_lines:
        report.add_warning(
            f"Compound conditions need manual review on lines: "
            f"{_line_numbers(report.compound_condition_lines)}"
        )

    if report.unconverted_control_flow_lines:
        report.add_warning(
            f"Control flow left unconverted on lines: "
            f"{_line_numbers(report.unconverted_control_flow_lines)}"
        )

    return report


def analyze_file(filepath: str) -> ScriptReport:
    """
    Analyze a script file.

    Raises:
        SourceNotFoundError: If the file doesn't exist
    """
    path = Path(filepath)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SourceNotFoundError(f"Script not found: {filepath}")
    return analyze_script(content, script_name=path.stem)


__all__ = ["ScriptReport", "analyze_script", "analyze_file"]

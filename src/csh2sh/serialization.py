"""
Serialization helpers for analysis reports and translation traces.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

import yaml

from csh2sh.analyzer import ScriptReport
from csh2sh.model import LineTranslation, SourceLine


def report_to_dict(r: ScriptReport) -> Dict[str, Any]:
    return {
        "script_name": r.script_name,
        "total_lines": r.total_lines,
        "blank_lines": r.blank_lines,
        "header_suppressed": r.header_suppressed,
        "converted_lines": r.converted_lines,
        "unchanged_lines": r.unchanged_lines,
        "suppressed_lines": r.suppressed_lines,
        "rule_usage": dict(r.rule_usage),
        "labels": list(r.labels),
        "goto_targets": list(r.goto_targets),
        "dynamic_gotos": r.dynamic_gotos,
        "undefined_goto_targets": sorted(r.undefined_goto_targets),
        "nested_labels": list(r.nested_labels),
        "unclosed_block_at_end": r.unclosed_block_at_end,
        "compound_condition_lines": list(r.compound_condition_lines),
        "unconverted_control_flow_lines": list(r.unconverted_control_flow_lines),
        "backtick_substitutions": r.backtick_substitutions,
        "warnings": list(r.warnings),
    }


def report_from_dict(d: Dict[str, Any]) -> ScriptReport:
    return ScriptReport(
        script_name=d.get("script_name", ""),
        total_lines=d.get("total_lines", 0),
        blank_lines=d.get("blank_lines", 0),
        header_suppressed=d.get("header_suppressed", False),
        converted_lines=d.get("converted_lines", 0),
        unchanged_lines=d.get("unchanged_lines", 0),
        suppressed_lines=d.get("suppressed_lines", 0),
        rule_usage=dict(d.get("rule_usage", {})),
        labels=list(d.get("labels", [])),
        goto_targets=list(d.get("goto_targets", [])),
        dynamic_gotos=d.get("dynamic_gotos", 0),
        undefined_goto_targets=set(d.get("undefined_goto_targets", [])),
        nested_labels=list(d.get("nested_labels", [])),
        unclosed_block_at_end=d.get("unclosed_block_at_end", False),
        compound_condition_lines=list(d.get("compound_condition_lines", [])),
        unconverted_control_flow_lines=list(d.get("unconverted_control_flow_lines", [])),
        backtick_substitutions=d.get("backtick_substitutions", 0),
        warnings=list(d.get("warnings", [])),
    )


def translation_to_dict(t: LineTranslation) -> Dict[str, Any]:
    return {
        "line": t.source.number,
        "source": t.source.text,
        "category": t.category,
        "output": list(t.output),
    }


def translation_from_dict(d: Dict[str, Any]) -> LineTranslation:
    return LineTranslation(
        source=SourceLine(number=d["line"], text=d["source"]),
        category=d["category"],
        output=list(d.get("output", [])),
    )


def translations_to_dict(translations: Iterable[LineTranslation]) -> List[Dict[str, Any]]:
    return [translation_to_dict(t) for t in translations]


def report_to_json(r: ScriptReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_from_json(s: str) -> ScriptReport:
    d = json.loads(s)
    return report_from_dict(d)


def report_to_yaml(r: ScriptReport) -> str:
    return yaml.safe_dump(report_to_dict(r))


def report_from_yaml(s: str) -> ScriptReport:
    d = yaml.safe_load(s)
    return report_from_dict(d)


def translations_to_yaml(translations: Iterable[LineTranslation]) -> str:
    return yaml.safe_dump(translations_to_dict(translations), sort_keys=False)

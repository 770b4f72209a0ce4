"""
Demo: Run analyzer on the example script and output the report.
"""

from csh2sh.examples import EXAMPLE_SCRIPT
from csh2sh.analyzer import analyze_script
from csh2sh.serialization import report_to_yaml


def print_report(report):
    """Pretty-print a ScriptReport."""
    print()
    print("=" * 70)
    print(f"SCRIPT ANALYSIS REPORT: {report.script_name}")
    print("=" * 70)
    print()

    print("📊 LINE INVENTORY")
    print(f"  Total Lines:           {report.total_lines}")
    print(f"  Blank Lines:           {report.blank_lines}")
    print(f"  Header Dropped:        {'YES' if report.header_suppressed else 'NO'}")
    print(f"  Converted Lines:       {report.converted_lines}")
    print(f"  Unchanged Lines:       {report.unchanged_lines}")
    print(f"  Suppressed Lines:      {report.suppressed_lines}")
    print()

    if report.rule_usage:
        print("  Rule Usage:")
        for rule, count in sorted(report.rule_usage.items()):
            print(f"    {rule}: {count} line(s)")
        print()

    print("🔗 LABELS AND JUMPS")
    print(f"  Labels:                {report.labels}")
    print(f"  goto Targets:          {report.goto_targets}")
    print(f"  Dynamic gotos:         {report.dynamic_gotos}")
    print(f"  Undefined Targets:     {report.undefined_goto_targets if report.undefined_goto_targets else 'None'}")
    print(f"  Nested Labels:         {report.nested_labels if report.nested_labels else 'None'}")
    print(f"  Open Block at End:     {'YES' if report.unclosed_block_at_end else 'NO'}")
    print()

    print("📐 CONDITIONS")
    print(f"  Compound Conditions:   {report.compound_condition_lines or 'None'}")
    print(f"  Unconverted Flow:      {report.unconverted_control_flow_lines or 'None'}")
    print(f"  Backtick Substitutions:{report.backtick_substitutions}")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Script looks clean!")
    print()


if __name__ == "__main__":
    report = analyze_script(EXAMPLE_SCRIPT, "nightly")

    print_report(report)

    # Also save to YAML for inspection
    with open("example_report_output.yaml", "w") as f:
        f.write(report_to_yaml(report))
    print(f"✅ Report exported to example_report_output.yaml")

#!/usr/bin/env python3
"""
Complete Pipeline Demo: C shell script → Analysis → Registry → Bash script

Shows the full workflow:
1. Write the example C shell script
2. Analyze it before conversion
3. Look up the converter in the registry
4. Convert and show the result
"""

import tempfile
from pathlib import Path

from csh2sh.analyzer import analyze_script
from csh2sh.examples import EXAMPLE_SCRIPT, write_example_script
from csh2sh.registry import get_converter


def main():
    workdir = Path(tempfile.mkdtemp(prefix="csh2sh-demo-"))

    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: csh → Analysis → Registry → sh")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Write script
    # =========================================================================
    print("\n1. WRITING EXAMPLE SCRIPT...")
    source = write_example_script(workdir)
    print(f"   ✓ {source}")

    # =========================================================================
    # STEP 2: Analyze
    # =========================================================================
    print("\n2. ANALYZING SCRIPT...")
    report = analyze_script(EXAMPLE_SCRIPT, source.stem)
    print(f"   ✓ Lines: {report.total_lines} ({report.blank_lines} blank)")
    print(f"   ✓ Labels: {report.labels}")
    print(f"   ✓ goto targets: {report.goto_targets}")
    print(f"   ✓ Block left open at end: {report.unclosed_block_at_end}")

    if report.warnings:
        print(f"\n   Warnings ({len(report.warnings)}):")
        for warning in report.warnings:
            print(f"      - {warning}")

    # =========================================================================
    # STEP 3: Registry lookup
    # =========================================================================
    print("\n3. LOOKING UP CONVERTER...")
    converter = get_converter(source, "sh")
    print(f"   ✓ {source.suffix} -> sh: {type(converter).__name__}")

    # =========================================================================
    # STEP 4: Convert
    # =========================================================================
    print("\n4. CONVERTING...")
    output = converter.convert(source)
    print(f"   ✓ Wrote {output}")
    print("-" * 80)
    lines = output.read_text(encoding="utf-8").split("\n")
    for line in lines[:30]:
        print(f"   {line}")
    if len(lines) > 30:
        print(f"   ... ({len(lines) - 30} more lines)")

    print("\n" + "=" * 80)
    print("PIPELINE COMPLETE!")
    print("=" * 80)


if __name__ == "__main__":
    main()

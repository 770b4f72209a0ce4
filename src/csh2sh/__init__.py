"""
csh2sh: C-shell to Bash script transpiler

Rewrites C-shell (.csh) scripts into POSIX/Bash (.sh) scripts, line by line.

ARCHITECTURAL GUARANTEE:
------------------------
The transpiler core is heuristic and line-oriented:
    - No grammar-level parsing of the source dialect
    - No semantic equivalence guarantee for arbitrary input
    - No compound boolean conditions
    - No jumps into the interior of nested blocks

Formatting is preserved (indentation, blank lines).
Labels become functions, goto becomes call-then-return.

Everything around the core (encoding conversion, registry, analysis,
CLI) consumes the transpiler unchanged.
"""

__version__ = "0.1.0"

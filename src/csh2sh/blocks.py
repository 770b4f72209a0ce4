"""
Function block tracking for label definitions.

C shell has labels and goto; Bash has neither. Each label is rewritten as a
function definition, and the body runs until the next label or the end of
the script:

    start:              start() {
        echo hi             echo hi
    done_label:         }
        exit 0
                        done_label() {
                            exit 0
                        }

State machine:
    CLOSED --label--> OPEN          emits  LABEL() {
    OPEN   --label--> OPEN          emits  }, blank line, LABEL() {
    OPEN   --end of stream--> CLOSED    emits  }

There is no other closing trigger: the source dialect has no syntax that
ends a label body.
"""

from enum import Enum
from typing import List, Optional

from csh2sh.model import ConversionState


class BlockState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class FunctionBlockTracker:
    """
    Tracks the synthesized function block of one transpile invocation.

    A tracker wraps a ConversionState. Create one per invocation; it must
    never be shared across conversions.
    """

    def __init__(self, state: Optional[ConversionState] = None):
        self.state = state if state is not None else ConversionState()

    @property
    def current(self) -> BlockState:
        return BlockState.OPEN if self.state.function_block_open else BlockState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state.function_block_open

    def open_label(self, label: str) -> str:
        """
        Open a function block for a label, closing the previous one first.

        Returns:
            Text to emit; multi-line when a previous block is closed
        """
        parts = []
        if self.state.function_block_open:
            parts.append("}")
            parts.append("")
        parts.append(f"{label}() {{")
        self.state.function_block_open = True
        return "\n".join(parts)

    def finalize(self) -> List[str]:
        """Close the open block at end of stream. Returns the lines to emit."""
        if not self.state.function_block_open:
            return []
        self.state.function_block_open = False
        return ["}"]


__all__ = ["BlockState", "FunctionBlockTracker"]

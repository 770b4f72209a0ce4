"""
Tests for the function block state machine.

    CLOSED --label--> OPEN --label--> OPEN --end of stream--> CLOSED
"""

from csh2sh.blocks import BlockState, FunctionBlockTracker
from csh2sh.model import ConversionState


class TestFunctionBlockTracker:

    def test_initially_closed(self):
        tracker = FunctionBlockTracker()
        assert tracker.current == BlockState.CLOSED
        assert not tracker.is_open

    def test_first_label_opens_block(self):
        tracker = FunctionBlockTracker()
        assert tracker.open_label("start") == "start() {"
        assert tracker.current == BlockState.OPEN

    def test_second_label_closes_previous_block(self):
        """A closing brace and a blank line precede the new definition."""
        tracker = FunctionBlockTracker()
        tracker.open_label("first")
        assert tracker.open_label("second") == "}\n\nsecond() {"
        assert tracker.is_open

    def test_finalize_closes_open_block_once(self):
        tracker = FunctionBlockTracker()
        tracker.open_label("only")
        assert tracker.finalize() == ["}"]
        assert tracker.current == BlockState.CLOSED
        assert tracker.finalize() == []

    def test_finalize_without_block_emits_nothing(self):
        assert FunctionBlockTracker().finalize() == []

    def test_block_stays_open_across_labels(self):
        tracker = FunctionBlockTracker()
        for label in ("a", "b", "c"):
            tracker.open_label(label)
            assert tracker.is_open
        assert tracker.finalize() == ["}"]

    def test_explicit_state_is_used(self):
        """The tracker mutates the ConversionState it is given."""
        state = ConversionState()
        tracker = FunctionBlockTracker(state)
        tracker.open_label("x")
        assert state.function_block_open is True

    def test_trackers_do_not_share_state(self):
        first = FunctionBlockTracker()
        second = FunctionBlockTracker()
        first.open_label("x")
        assert not second.is_open

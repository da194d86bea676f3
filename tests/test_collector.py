"""Tests for the input collector (core/collector.py).

Input is supplied through a real :class:`StreamTokenSource` over
``io.StringIO`` and output is captured by an in-memory sink.  These
tests exercise:

* Re-prompting on non-numeric and non-positive sizes
* Re-prompting on non-numeric and non-finite elements
* Discarding the rest of a line after a bad token
* Truncating sizes above the cap
* Values spread across lines or packed on one line
"""

from __future__ import annotations

from typing import Any

import pytest

from arraymerge.core.collector import SequenceCollector
from arraymerge.exceptions import InputClosedError

_SIZE_RETRY = "Invalid input. Please enter a positive whole number: "
_NUMBER_RETRY = "Invalid input. Please enter a valid number: "


# ---------------------------------------------------------------------------
# collect_size
# ---------------------------------------------------------------------------

class TestCollectSize:
    def test_valid_first_try(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("4\n"), sink)
        assert collector.collect_size() == 4
        assert sink.text == ""

    @pytest.mark.parametrize("bad", ["abc", "0", "-5", "2.5"])
    def test_reprompts_until_valid(
        self, make_source: Any, sink: Any, bad: str,
    ) -> None:
        collector = SequenceCollector(make_source(f"{bad}\n3\n"), sink)
        assert collector.collect_size() == 3
        assert sink.text == _SIZE_RETRY

    def test_many_bad_lines(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("x\ny\n0\n-1\n2\n"), sink)
        assert collector.collect_size() == 2
        assert sink.text == _SIZE_RETRY * 4

    def test_bad_token_discards_rest_of_line(
        self, make_source: Any, sink: Any,
    ) -> None:
        collector = SequenceCollector(make_source("abc 4\n2\n"), sink)
        assert collector.collect_size() == 2

    def test_blank_lines_skipped(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("\n   \n5\n"), sink)
        assert collector.collect_size() == 5
        assert sink.text == ""

    def test_does_not_clamp(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("15\n"), sink)
        assert collector.collect_size() == 15

    def test_end_of_input_raises(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("abc\n"), sink)
        with pytest.raises(InputClosedError):
            collector.collect_size()


# ---------------------------------------------------------------------------
# collect_number
# ---------------------------------------------------------------------------

class TestCollectNumber:
    def test_valid(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("-2.5\n"), sink)
        assert collector.collect_number() == -2.5

    @pytest.mark.parametrize("bad", ["abc", "nan", "inf", "1,5"])
    def test_reprompts_until_valid(
        self, make_source: Any, sink: Any, bad: str,
    ) -> None:
        collector = SequenceCollector(make_source(f"{bad}\n8\n"), sink)
        assert collector.collect_number() == 8.0
        assert sink.text == _NUMBER_RETRY


# ---------------------------------------------------------------------------
# collect_sequence
# ---------------------------------------------------------------------------

class TestCollectSequence:
    def test_prompts_and_values(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("3\n1 5 3\n"), sink)
        seq = collector.collect_sequence("first")
        assert seq.values == (1.0, 5.0, 3.0)
        assert sink.text == (
            "How many would you want to place in the first array? (max 10): "
            "Enter 3 elements: "
        )

    def test_values_across_lines(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("2\n4\n\n6\n"), sink)
        assert collector.collect_sequence("second").values == (4.0, 6.0)

    def test_size_and_values_on_one_line(
        self, make_source: Any, sink: Any,
    ) -> None:
        collector = SequenceCollector(make_source("2 9 8\n"), sink)
        assert collector.collect_sequence("first").values == (9.0, 8.0)

    def test_oversized_request_truncated(
        self, make_source: Any, sink: Any,
    ) -> None:
        numbers = " ".join(str(i) for i in range(12))
        collector = SequenceCollector(make_source(f"15\n{numbers}\n"), sink)
        seq = collector.collect_sequence("first")
        assert len(seq) == 10
        assert seq.values == tuple(float(i) for i in range(10))
        assert "Enter 10 elements: " in sink.text

    def test_oversized_matches_exact_cap(
        self, make_source: Any, sink: Any,
    ) -> None:
        numbers = " ".join(str(i) for i in range(10))
        oversized = SequenceCollector(make_source(f"15\n{numbers}\n"), sink)
        exact = SequenceCollector(make_source(f"10\n{numbers}\n"), sink)
        assert oversized.collect_sequence("first") == exact.collect_sequence("first")

    def test_bad_element_discards_rest_of_line(
        self, make_source: Any, sink: Any,
    ) -> None:
        collector = SequenceCollector(make_source("3\n1 x 2\n7 8\n"), sink)
        assert collector.collect_sequence("first").values == (1.0, 7.0, 8.0)
        assert sink.text.endswith("Enter 3 elements: " + _NUMBER_RETRY)

    def test_short_input_raises(self, make_source: Any, sink: Any) -> None:
        collector = SequenceCollector(make_source("3\n1 2\n"), sink)
        with pytest.raises(InputClosedError):
            collector.collect_sequence("first")

"""Tests for input parsing, statistics and display helpers."""

import pytest

import config
from engine import simulate_fifo, simulate_lru
from utils import (
    InputError,
    build_event_log,
    cumulative_faults,
    describe_step,
    format_state,
    frame_role,
    get_color,
    get_stats,
    hit_ratio_percent,
    history_rows,
    parse_frame_count,
    parse_sequence,
)

CLASSIC = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]


# -- Parsing ------------------------------------------------------------------


class TestParseSequence:
    """Page sequences come in as free text from the sidebar."""

    def test_spaces(self) -> None:
        assert parse_sequence("7 0 1 2") == [7, 0, 1, 2]

    def test_commas_and_mixed_whitespace(self) -> None:
        assert parse_sequence(" 1,2,  3\n4\t5 ") == [1, 2, 3, 4, 5]

    def test_default_sequence(self) -> None:
        assert parse_sequence(config.DEFAULT_SEQUENCE) == CLASSIC

    @pytest.mark.parametrize("text", ["", "   ", ",,", None])
    def test_empty_rejected(self, text) -> None:
        with pytest.raises(InputError, match="valid page sequence"):
            parse_sequence(text)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(InputError, match="a, 3x"):
            parse_sequence("1 a 2 3x")

    def test_negative_rejected(self) -> None:
        with pytest.raises(InputError, match="non-negative"):
            parse_sequence("1 -2 3")


class TestParseFrameCount:
    """Frame size must lie within the configured limits."""

    @pytest.mark.parametrize("value, expected", [(1, 1), ("3", 3), (" 10 ", 10)])
    def test_accepts_range(self, value, expected) -> None:
        assert parse_frame_count(value) == expected

    @pytest.mark.parametrize("value", [0, 11, "-1"])
    def test_out_of_range(self, value) -> None:
        with pytest.raises(InputError, match="between 1 and 10"):
            parse_frame_count(value)

    @pytest.mark.parametrize("value", ["", "three", "2.5"])
    def test_not_a_number(self, value) -> None:
        with pytest.raises(InputError):
            parse_frame_count(value)


# -- Statistics ---------------------------------------------------------------


class TestStats:
    """Hit ratio is derived from the fault total by the caller."""

    @pytest.mark.parametrize(
        "refs, faults, expected",
        [(20, 15, 25.0), (20, 12, 40.0), (3, 1, 66.67), (4, 4, 0.0), (0, 0, 0.0)],
    )
    def test_hit_ratio_percent(self, refs, faults, expected) -> None:
        assert hit_ratio_percent(refs, faults) == expected

    def test_get_stats(self) -> None:
        stats = get_stats(simulate_lru(CLASSIC, 3))
        assert stats == {
            "hits": 8,
            "faults": 12,
            "hit_ratio": 40.0,
            "fault_rate": 0.6,
            "total_refs": 20,
        }

    def test_cumulative_faults(self) -> None:
        result = simulate_fifo([1, 2, 1, 3, 1], 2)
        assert cumulative_faults(result) == [1, 2, 2, 3, 4]


# -- Display ------------------------------------------------------------------


class TestFrameRole:
    """Each frame slot is coloured by what happened to it this step."""

    def test_roles(self) -> None:
        steps = simulate_fifo([1, 2, 1, 3], 2).steps
        assert [frame_role(steps[0], slot) for slot in range(2)] == ["new", "empty"]
        assert [frame_role(steps[2], slot) for slot in range(2)] == ["hit", "resident"]
        assert [frame_role(steps[3], slot) for slot in range(2)] == ["replaced", "resident"]

    def test_colors(self) -> None:
        assert get_color("new") == config.FRAME_COLORS["new"]
        assert get_color("unknown") == config.FRAME_COLORS["empty"]


class TestFormatState:
    def test_fifo_queue(self) -> None:
        step = simulate_fifo([4, 2], 2).steps[-1]
        assert format_state(step) == "Queue Order (oldest to newest): [4, 2]"

    def test_lru_times(self) -> None:
        step = simulate_lru([4, 2, 4], 2).steps[-1]
        assert format_state(step) == "Last Used Times: Page 4: time 3, Page 2: time 2"


class TestHistoryRows:
    def test_pads_empty_frames(self) -> None:
        rows = history_rows(simulate_fifo([1, 2, 1], 3), upto=1)
        assert rows == [
            {"step": 1, "page": 1, "frames": "1 | - | -", "result": "PAGE FAULT", "replaced": ""},
            {"step": 2, "page": 2, "frames": "1 | 2 | -", "result": "PAGE FAULT", "replaced": ""},
        ]

    def test_shows_replaced_page(self) -> None:
        rows = history_rows(simulate_fifo([1, 2], 1), upto=1)
        assert rows[-1]["replaced"] == "1"
        assert rows[-1]["frames"] == "2"


class TestEventLog:
    """Event messages describe each step in load/evict terms."""

    def test_load_into_free_frame(self) -> None:
        step = simulate_fifo(CLASSIC, 3).steps[0]
        assert describe_step(step) == [
            "Fault: Page 7 not in memory",
            "Loaded: Page 7 -> Frame 0",
        ]

    def test_replacement(self) -> None:
        step = simulate_fifo(CLASSIC, 3).steps[3]
        assert describe_step(step) == [
            "Fault: Page 2 not in memory",
            "Evicting: Page 7 from Frame 0",
            "Loaded: Page 2 -> Frame 0 (replaced)",
        ]

    def test_hit(self) -> None:
        step = simulate_fifo(CLASSIC, 3).steps[4]
        assert describe_step(step) == ["Hit: Page 0 in Frame 1"]

    def test_build_event_log_stops_at_cursor(self) -> None:
        result = simulate_lru([1, 1, 2], 2)
        assert build_event_log(result, upto=1) == [
            "Fault: Page 1 not in memory",
            "Loaded: Page 1 -> Frame 0",
            "Hit: Page 1 in Frame 0",
        ]

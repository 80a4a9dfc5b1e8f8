# utils.py

import re
from typing import Dict, List, Optional

import config
from engine import ReplacementPolicy, SimulationResult, StepRecord


class InputError(ValueError):
    """User input that must be corrected before a simulation can run."""


# -----------------------------
# Input parsing
# -----------------------------
def parse_sequence(text: str) -> List[int]:
    """Parse page numbers separated by spaces and/or commas."""
    tokens = [t for t in re.split(r"[\s,]+", text or "") if t]
    if not tokens:
        raise InputError("Please enter a valid page sequence!")

    bad = [t for t in tokens if not re.fullmatch(r"-?\d+", t)]
    if bad:
        raise InputError(f"Page sequence contains non-numeric values: {', '.join(bad)}")

    pages = [int(t) for t in tokens]
    if any(p < 0 for p in pages):
        raise InputError("Page numbers must be non-negative!")
    return pages


def parse_frame_count(value) -> int:
    try:
        frames = int(str(value).strip())
    except ValueError:
        raise InputError("Frame size must be a whole number!") from None

    if frames < config.MIN_FRAMES or frames > config.MAX_FRAMES:
        raise InputError(
            f"Frame size must be between {config.MIN_FRAMES} and {config.MAX_FRAMES}!"
        )
    return frames


# -----------------------------
# Statistics
# -----------------------------
def hit_ratio_percent(total_refs: int, total_faults: int) -> float:
    if total_refs == 0:
        return 0.0
    return round((total_refs - total_faults) / total_refs * 100, 2)


def get_stats(result: SimulationResult) -> Dict[str, float]:
    """Hits, faults and ratios for a finished run."""
    total_refs = result.total_refs
    fault_rate = (result.total_faults / total_refs) if total_refs > 0 else 0.0

    return {
        "hits": result.total_hits,
        "faults": result.total_faults,
        "hit_ratio": hit_ratio_percent(total_refs, result.total_faults),
        "fault_rate": round(fault_rate, 4),
        "total_refs": total_refs,
    }


def cumulative_faults(result: SimulationResult) -> List[int]:
    running = 0
    totals = []
    for step in result.steps:
        running += step.fault
        totals.append(running)
    return totals


# -----------------------------
# Frame display
# -----------------------------
def frame_role(step: StepRecord, slot: int) -> str:
    """Role of a frame slot in the given step: new, replaced, hit, resident or empty."""
    if slot >= len(step.frames):
        return "empty"
    if step.frames[slot] != step.page:
        return "resident"
    if not step.fault:
        return "hit"
    return "replaced" if step.evicted_page is not None else "new"


def get_color(role: str) -> str:
    """Return a color for a frame role."""
    return config.FRAME_COLORS.get(role, config.FRAME_COLORS["empty"])


def format_state(step: StepRecord) -> Optional[str]:
    """Queue order for FIFO or last-used times for LRU, or None when empty."""
    if step.algorithm == ReplacementPolicy.FIFO:
        if not step.state.queue:
            return None
        return f"Queue Order (oldest to newest): [{', '.join(map(str, step.state.queue))}]"

    if not step.state.last_used:
        return None
    times = ", ".join(f"Page {page}: time {stamp}" for page, stamp in step.state.last_used)
    return f"Last Used Times: {times}"


def history_rows(result: SimulationResult, upto: int) -> List[Dict[str, object]]:
    """Table rows for steps 0..upto (inclusive)."""
    rows = []
    for step in result.steps[:upto + 1]:
        frames = list(step.frames) + ["-"] * (result.frame_count - len(step.frames))
        rows.append({
            "step": step.step,
            "page": step.page,
            "frames": " | ".join(map(str, frames)),
            "result": "PAGE FAULT" if step.fault else "HIT",
            "replaced": "" if step.evicted_page is None else str(step.evicted_page),
        })
    return rows


# -----------------------------
# Event log
# -----------------------------
def describe_step(step: StepRecord) -> List[str]:
    """Event log lines for a single step, in the order they happened."""
    slot = step.frames.index(step.page)
    if not step.fault:
        return [f"Hit: Page {step.page} in Frame {slot}"]

    events = [f"Fault: Page {step.page} not in memory"]
    if step.evicted_page is None:
        events.append(f"Loaded: Page {step.page} -> Frame {slot}")
    else:
        events.append(f"Evicting: Page {step.evicted_page} from Frame {slot}")
        events.append(f"Loaded: Page {step.page} -> Frame {slot} (replaced)")
    return events


def build_event_log(result: SimulationResult, upto: int) -> List[str]:
    events = []
    for step in result.steps[:upto + 1]:
        events.extend(describe_step(step))
    return events

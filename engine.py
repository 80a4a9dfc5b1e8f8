# engine.py

"""
Page replacement simulation engine.

Pure functions that replay a page-reference sequence against a fixed number
of physical frames and return the full step-by-step trace:
    - FIFO: replace the page that entered memory earliest
    - LRU:  replace the page that has not been used for the longest time

Nothing here touches the UI. Each call builds its own state, so running the
same inputs twice always yields equal results.
"""

from collections import deque
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Iterable, List, Optional, Tuple, Union


class ConfigurationError(ValueError):
    """Raised when a simulation is requested with an invalid configuration."""


class ReplacementPolicy:
    """
    Enumeration of available page replacement algorithms.

    FIFO: First-In-First-Out - replaces the oldest page in memory
    LRU:  Least Recently Used - replaces the page not used for longest time
    """
    FIFO = "FIFO"
    LRU = "LRU"

    ALL = (FIFO, LRU)


ALGORITHM_NAMES = {
    ReplacementPolicy.FIFO: "First In First Out (FIFO) Algorithm",
    ReplacementPolicy.LRU: "Least Recently Used (LRU) Algorithm",
}


# =============================================================================
# STEP RECORDS
# =============================================================================

@dataclass(frozen=True)
class FifoState:
    """
    FIFO bookkeeping after a step.

    Attributes:
        queue (Tuple[int, ...]): Resident pages in load order, oldest first
    """
    algorithm: ClassVar[str] = ReplacementPolicy.FIFO

    queue: Tuple[int, ...]


@dataclass(frozen=True)
class LruState:
    """
    LRU bookkeeping after a step.

    Attributes:
        last_used (Tuple[Tuple[int, int], ...]): (page, timestamp) pairs in
            frame order
    """
    algorithm: ClassVar[str] = ReplacementPolicy.LRU

    last_used: Tuple[Tuple[int, int], ...]

    def timestamp(self, page: int) -> int:
        for resident, stamp in self.last_used:
            if resident == page:
                return stamp
        return 0


AlgorithmState = Union[FifoState, LruState]


@dataclass(frozen=True)
class StepRecord:
    """
    Snapshot of memory after one page reference has been processed.

    Attributes:
        step (int): 1-based position of the reference in the sequence
        page (int): The page that was referenced
        frames (Tuple[int, ...]): Resident pages by frame slot
        fault (bool): True if the reference caused a page fault
        evicted_page (Optional[int]): Page removed to make room, if any
        state (AlgorithmState): Algorithm bookkeeping after this step
    """
    step: int
    page: int
    frames: Tuple[int, ...]
    fault: bool
    evicted_page: Optional[int]
    state: AlgorithmState

    @property
    def algorithm(self) -> str:
        return self.state.algorithm

    @property
    def hit(self) -> bool:
        return not self.fault


@dataclass(frozen=True)
class SimulationResult:
    """
    Complete trace of one simulation run.

    Attributes:
        algorithm (str): Replacement policy that produced the trace
        frame_count (int): Number of physical frames simulated
        sequence (Tuple[int, ...]): The page-reference sequence
        steps (Tuple[StepRecord, ...]): One record per reference, in order
        total_faults (int): Number of references that faulted
    """
    algorithm: str
    frame_count: int
    sequence: Tuple[int, ...]
    steps: Tuple[StepRecord, ...]
    total_faults: int

    @property
    def total_refs(self) -> int:
        return len(self.sequence)

    @property
    def total_hits(self) -> int:
        return self.total_refs - self.total_faults


# =============================================================================
# VALIDATION
# =============================================================================

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(sequence: Iterable[int], frame_count: int) -> Tuple[int, ...]:
    """
    Check simulation inputs and freeze the sequence.

    Args:
        sequence (Iterable[int]): Page identifiers to reference
        frame_count (int): Number of physical frames

    Returns:
        Tuple[int, ...]: The sequence as an immutable tuple

    Raises:
        ConfigurationError: If frame_count is not a positive integer or a
            page identifier is not a non-negative integer
    """
    if not _is_int(frame_count) or frame_count < 1:
        raise ConfigurationError(
            f"Frame count must be a positive integer, got {frame_count!r}"
        )

    pages = tuple(sequence)
    for page in pages:
        if not _is_int(page) or page < 0:
            raise ConfigurationError(
                f"Page identifiers must be non-negative integers, got {page!r}"
            )
    return pages


# =============================================================================
# ALGORITHMS
# =============================================================================

def simulate_fifo(sequence: Iterable[int], frame_count: int) -> SimulationResult:
    """
    Replay a reference sequence using FIFO replacement.

    On a fault with all frames occupied, the page at the head of the load
    queue is evicted and the new page takes over its frame slot. Hits do not
    touch the queue.

    Args:
        sequence (Iterable[int]): Page identifiers to reference
        frame_count (int): Number of physical frames

    Returns:
        SimulationResult: Trace of every step plus the fault total
    """
    pages = validate_config(sequence, frame_count)

    frames: List[int] = []
    queue: deque = deque()  # oldest load at the left
    steps: List[StepRecord] = []
    faults = 0

    for index, page in enumerate(pages, start=1):
        evicted = None
        fault = page not in frames

        if fault:
            faults += 1
            if len(frames) < frame_count:
                frames.append(page)
            else:
                evicted = queue.popleft()
                frames[frames.index(evicted)] = page
            queue.append(page)

        steps.append(StepRecord(
            step=index,
            page=page,
            frames=tuple(frames),
            fault=fault,
            evicted_page=evicted,
            state=FifoState(queue=tuple(queue)),
        ))

    return SimulationResult(
        algorithm=ReplacementPolicy.FIFO,
        frame_count=frame_count,
        sequence=pages,
        steps=tuple(steps),
        total_faults=faults,
    )


def _lru_victim(frames: List[int], last_used: Dict[int, int]) -> int:
    # first minimum in slot order wins ties
    victim = frames[0]
    oldest = last_used.get(victim, 0)
    for resident in frames:
        stamp = last_used.get(resident, 0)
        if stamp < oldest:
            oldest = stamp
            victim = resident
    return victim


def simulate_lru(sequence: Iterable[int], frame_count: int) -> SimulationResult:
    """
    Replay a reference sequence using LRU replacement.

    A logical clock ticks once per reference, hit or fault. Every access
    stamps the page with the current clock; on a fault with all frames
    occupied the page with the smallest stamp is evicted.

    Args:
        sequence (Iterable[int]): Page identifiers to reference
        frame_count (int): Number of physical frames

    Returns:
        SimulationResult: Trace of every step plus the fault total
    """
    pages = validate_config(sequence, frame_count)

    frames: List[int] = []
    last_used: Dict[int, int] = {}
    steps: List[StepRecord] = []
    faults = 0
    clock = 0

    for index, page in enumerate(pages, start=1):
        clock += 1
        evicted = None
        fault = page not in frames

        if fault:
            faults += 1
            if len(frames) < frame_count:
                frames.append(page)
            else:
                evicted = _lru_victim(frames, last_used)
                frames[frames.index(evicted)] = page
                del last_used[evicted]
        last_used[page] = clock

        snapshot = tuple((resident, last_used.get(resident, 0)) for resident in frames)
        steps.append(StepRecord(
            step=index,
            page=page,
            frames=tuple(frames),
            fault=fault,
            evicted_page=evicted,
            state=LruState(last_used=snapshot),
        ))

    return SimulationResult(
        algorithm=ReplacementPolicy.LRU,
        frame_count=frame_count,
        sequence=pages,
        steps=tuple(steps),
        total_faults=faults,
    )


# =============================================================================
# DISPATCHER
# =============================================================================

SIMULATORS: Dict[str, Callable[[Iterable[int], int], SimulationResult]] = {
    ReplacementPolicy.FIFO: simulate_fifo,
    ReplacementPolicy.LRU: simulate_lru,
}


def simulate(sequence: Iterable[int], frame_count: int, algorithm: str) -> SimulationResult:
    """
    Run the simulator registered for the given replacement policy.

    Args:
        sequence (Iterable[int]): Page identifiers to reference
        frame_count (int): Number of physical frames
        algorithm (str): One of ReplacementPolicy.ALL

    Returns:
        SimulationResult: Trace of every step plus the fault total

    Raises:
        ConfigurationError: If the algorithm is unknown or the inputs are invalid
    """
    simulator = SIMULATORS.get(algorithm)
    if simulator is None:
        raise ConfigurationError(f"Unknown replacement policy: {algorithm!r}")
    return simulator(sequence, frame_count)

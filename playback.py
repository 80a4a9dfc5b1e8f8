# playback.py

"""
Step navigation and auto-play for a finished simulation trace.

The player only holds a cursor into an immutable list of steps; it never
touches the steps themselves. The UI calls tick() once per auto-play
interval and the player stops itself at the last step.
"""


class StepPlayer:
    """
    Cursor over a loaded trace.

    Attributes:
        total_steps (int): Number of steps in the loaded trace
        current (int): 0-based index of the displayed step
        playing (bool): True while auto-play is running
    """

    def __init__(self, total_steps: int = 0):
        self.load(total_steps)

    def load(self, total_steps: int):
        """Start over on a new trace: cursor to the first step, auto-play off."""
        self.total_steps = total_steps
        self.current = 0
        self.playing = False

    def reset(self):
        self.load(0)

    # -----------------------------
    # Navigation
    # -----------------------------
    def go_to(self, index: int) -> bool:
        """Jump to a step. Out-of-range indexes are ignored."""
        if index < 0 or index >= self.total_steps:
            return False
        self.current = index
        return True

    def step(self, direction: int) -> bool:
        return self.go_to(self.current + direction)

    @property
    def can_prev(self) -> bool:
        return self.total_steps > 0 and self.current > 0

    @property
    def can_next(self) -> bool:
        return self.current < self.total_steps - 1

    @property
    def at_end(self) -> bool:
        return not self.can_next

    # -----------------------------
    # Auto-play
    # -----------------------------
    def start(self):
        if self.total_steps > 0:
            self.playing = True

    def stop(self):
        self.playing = False

    def toggle(self):
        if self.playing:
            self.stop()
        else:
            self.start()

    def tick(self) -> bool:
        """
        Advance one step if auto-play is running.

        Returns:
            bool: True if the cursor moved. Auto-play is cancelled once the
                last step is reached.
        """
        if not self.playing:
            return False
        if self.at_end:
            self.stop()
            return False

        self.step(1)
        if self.at_end:
            self.stop()
        return True

    def label(self) -> str:
        if self.total_steps == 0:
            return "No steps"
        return f"Step {self.current + 1} of {self.total_steps}"

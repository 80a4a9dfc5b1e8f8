"""
Configuration parameters for the page replacement visualizer.

Adjust these to change input limits, defaults and how the trace is drawn.
"""

# INPUT LIMITS #
MIN_FRAMES = 1
MAX_FRAMES = 10

# DEFAULTS (restored by Reset) #
DEFAULT_SEQUENCE = "7 0 1 2 0 3 0 4 2 3 0 3 2 1 2 0 1 7 0 1"
DEFAULT_FRAME_COUNT = 3

# PLAYBACK #
AUTOPLAY_INTERVAL_S = 1.5        # Seconds between auto-play steps

# DISPLAY #
EVENT_LOG_LIMIT = 20             # Most recent events shown in the log
FRAME_CHART_HEIGHT = 150
STATS_CHART_HEIGHT = 300

# Frame colours by role in the current step
FRAME_COLORS = {
    "new": "lightgreen",         # Loaded into a free frame
    "replaced": "salmon",        # Loaded over an evicted page
    "hit": "lightskyblue",       # Referenced page already resident
    "resident": "khaki",         # Untouched resident page
    "empty": "lightgray",        # Free frame
}

"""
Page Replacement Visualizer — FIFO & LRU

This application runs a page-reference sequence through a page replacement
algorithm and lets the user scrub through the resulting trace:
    - First In First Out (FIFO)
    - Least Recently Used (LRU)

The simulation itself lives in engine.py and runs once per click; this script
only reads the finished trace while navigating.

Built with Streamlit for the web interface and Plotly for visualizations.
"""

# =============================================================================
# IMPORTS
# =============================================================================

import time                                  # For pacing auto-play

import plotly.graph_objects as go            # Interactive plotting library
import streamlit as st                       # Web application framework

import config
from engine import ALGORITHM_NAMES, ConfigurationError, ReplacementPolicy, SimulationResult, simulate
from playback import StepPlayer
from utils import (
    InputError,
    build_event_log,
    cumulative_faults,
    format_state,
    frame_role,
    get_color,
    get_stats,
    history_rows,
    parse_frame_count,
    parse_sequence,
)


# =============================================================================
# SESSION STATE
# =============================================================================

st.set_page_config(page_title="Page Replacement Visualizer", layout="wide")

if "player" not in st.session_state:
    st.session_state.player = StepPlayer()
    st.session_state.result = None
    st.session_state.flash = None

# Widget keys are dropped while the Concepts view hides them
if "sequence_text" not in st.session_state:
    st.session_state.sequence_text = config.DEFAULT_SEQUENCE
if "frame_size" not in st.session_state:
    st.session_state.frame_size = config.DEFAULT_FRAME_COUNT

player: StepPlayer = st.session_state.player


def _sync_slider():
    # only safe inside callbacks or before the slider is drawn
    st.session_state.step_slider = player.current + 1


# -----------------------------------------------------------------------------
# CALLBACKS - run before the script reruns
# -----------------------------------------------------------------------------

def run_algorithm(algorithm: str):
    """Validate the sidebar input and replace the current trace with a new run."""
    player.stop()
    try:
        sequence = parse_sequence(st.session_state.sequence_text)
        frames = parse_frame_count(st.session_state.frame_size)
    except InputError as e:
        st.session_state.flash = ("warning", str(e))
        return

    try:
        result = simulate(sequence, frames, algorithm)
    except ConfigurationError as e:
        st.session_state.flash = ("error", str(e))
        return

    st.session_state.result = result
    st.session_state.flash = ("success", f"{algorithm} finished: {result.total_faults} page faults")
    player.load(len(result.steps))
    _sync_slider()


def reset():
    player.reset()
    st.session_state.result = None
    st.session_state.flash = None
    st.session_state.sequence_text = config.DEFAULT_SEQUENCE
    st.session_state.frame_size = config.DEFAULT_FRAME_COUNT


def navigate(direction: int):
    player.stop()
    player.step(direction)
    _sync_slider()


def jump_to_slider():
    player.stop()
    player.go_to(st.session_state.step_slider - 1)


def toggle_autoplay():
    player.toggle()


# Auto-play advances here, before any widget is drawn
if st.session_state.pop("autoplay_due", False):
    player.tick()
    _sync_slider()


# =============================================================================
# SIDEBAR
# =============================================================================

page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Page Replacement Visualizer — FIFO & LRU")

if page == "Concepts":
    player.stop()
    st.header("Operating System Concepts Used in This Project")
    st.markdown(
        """
        ### **1. Frames**
        - Physical memory is split into a fixed number of *frames*.
        - Each frame holds exactly one page.

        ### **2. Page Fault**
        - Occurs when a referenced page is not in any frame.
        - The page is loaded into a free frame, or a resident page is evicted.

        ### **3. Page Replacement Algorithms**
        When every frame is occupied, the OS must choose a victim:

        #### **FIFO (First In First Out)**
        - Replace the page that entered memory earliest.
        - Hits do not change the order.
        - Suffers from *Belady's anomaly*: more frames can mean more faults
          (try `1 2 3 4 1 2 5 1 2 3 4 5` with 3 and then 4 frames).

        #### **LRU (Least Recently Used)**
        - Replace the page that hasn't been used for the longest time.
        - Every access, hit or fault, refreshes the page's timestamp.
        - Ties go to the lowest frame.

        ### **4. Hit Ratio**
        - (references − faults) / references.
        """
    )
    st.stop()

st.sidebar.header("Simulation Settings")

st.sidebar.text_area(
    "Page sequence (space or comma separated)",
    key="sequence_text",
)

st.sidebar.number_input(
    "Frame size",
    min_value=config.MIN_FRAMES,
    max_value=config.MAX_FRAMES,
    step=1,
    key="frame_size",
)

run_col1, run_col2 = st.sidebar.columns(2)
run_col1.button("Run FIFO", key="run_fifo", on_click=run_algorithm, args=(ReplacementPolicy.FIFO,))
run_col2.button("Run LRU", key="run_lru", on_click=run_algorithm, args=(ReplacementPolicy.LRU,))
st.sidebar.button("Reset", key="reset", on_click=reset)

flash = st.session_state.flash
if flash is not None:
    kind, message = flash
    getattr(st.sidebar, kind)(message)

result: SimulationResult = st.session_state.result

if result is None:
    st.info("Enter a page sequence and frame size, then run FIFO or LRU.")
    st.stop()


# =============================================================================
# STATISTICS
# =============================================================================

st.subheader(ALGORITHM_NAMES[result.algorithm])
stats = get_stats(result)

m1, m2, m3 = st.columns(3)
m1.metric("Total Page Faults", stats["faults"])
m2.metric("Total Pages", stats["total_refs"])
m3.metric("Hit Ratio", f"{stats['hit_ratio']:.2f}%")


# =============================================================================
# STEP CONTROLS
# =============================================================================

c1, c2, c3, c4 = st.columns([1, 1, 1, 3])
c1.button("Previous", key="prev", on_click=navigate, args=(-1,), disabled=not player.can_prev)
c2.button("Next", key="next", on_click=navigate, args=(1,), disabled=not player.can_next)
c3.button("Pause" if player.playing else "Auto Play", key="autoplay", on_click=toggle_autoplay)
c4.write(player.label())

if player.total_steps > 1:
    if "step_slider" not in st.session_state:
        _sync_slider()
    st.slider(
        "Jump to step",
        min_value=1,
        max_value=player.total_steps,
        key="step_slider",
        on_change=jump_to_slider,
    )

current = result.steps[player.current]

col1, col2 = st.columns([2, 1])

# -----------------------------------------------------------------------------
# LEFT COLUMN - Current Step
# -----------------------------------------------------------------------------

with col1:
    badge = ":red[**PAGE FAULT**]" if current.fault else ":green[**HIT**]"
    st.markdown(f"**Step {current.step}** — Accessing Page: **{current.page}** {badge}")

    fig = go.Figure()

    x = []      # Frame slots
    y = []      # Bar heights (all 1 for uniform display)
    text = []   # Labels for each frame
    colors = [] # Colour by role in this step

    for slot in range(result.frame_count):
        role = frame_role(current, slot)
        resident = current.frames[slot] if slot < len(current.frames) else None
        label = f"F{slot}: " + (f"P{resident}" if resident is not None else "-")
        text.append(label)
        colors.append(get_color(role))
        x.append(slot)
        y.append(1)

    fig.add_trace(go.Bar(
        x=x,
        y=y,
        text=text,
        marker_color=colors,
        hovertext=text,
        hoverinfo="text"
    ))
    fig.update_layout(
        height=config.FRAME_CHART_HEIGHT,
        showlegend=False,
        yaxis=dict(showticklabels=False)
    )
    st.plotly_chart(fig, width="stretch")

    state_text = format_state(current)
    if state_text:
        st.info(state_text)

    if current.evicted_page is not None:
        st.error(f"Replaced: Page {current.evicted_page}")

    st.subheader("History")
    st.table(history_rows(result, player.current))

# -----------------------------------------------------------------------------
# RIGHT COLUMN - Charts and Event Log
# -----------------------------------------------------------------------------

with col2:
    fig2 = go.Figure()
    fig2.add_trace(go.Bar(
        x=["Hits", "Faults"],
        y=[stats["hits"], stats["faults"]]
    ))
    fig2.update_layout(height=config.STATS_CHART_HEIGHT, title="Hits vs Faults")
    st.plotly_chart(fig2, width="stretch")

    fig3 = go.Figure()
    fig3.add_trace(go.Scatter(
        x=[step.step for step in result.steps],
        y=cumulative_faults(result),
        mode="lines+markers",
    ))
    fig3.add_vline(x=current.step, line_dash="dot")
    fig3.update_layout(height=config.STATS_CHART_HEIGHT, title="Cumulative Faults")
    st.plotly_chart(fig3, width="stretch")

    st.subheader("Event Log")
    events = build_event_log(result, player.current)
    for ev in events[-config.EVENT_LOG_LIMIT:][::-1]:
        st.write(ev)


# =============================================================================
# AUTO-PLAY
# =============================================================================

if player.playing:
    time.sleep(config.AUTOPLAY_INTERVAL_S)
    st.session_state.autoplay_due = True
    st.rerun()

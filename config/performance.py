"""
Performance Configuration
Frame pacing and render diagnostics.
"""

# --- Frame rate control ---
# One tick = drain input, update keys, render, sleep the rest of the interval.
FPS_TARGET = 60

# Sample window for the measured FPS average
FPS_SAMPLE_FRAMES = 30

# Frame trace: log every tick that overruns its interval (very verbose)
FRAME_TRACE = False

# Log a warning once per this many overrun ticks
OVERRUN_WARN_EVERY = 120

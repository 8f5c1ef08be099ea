"""
Production Profile - Default Settings
Steady 60 FPS with every sample decoded up front.
"""

FPS_TARGET = 60

# Production logging (warnings and errors)
LOG_LEVEL = 1
DEBUG = False
VERBOSE_LOG = False
DEBUG_LOG = False

# Predictable latency: no decode spike on a note's first press
PRELOAD_SAMPLES = True

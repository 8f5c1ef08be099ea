"""
Development Profile - Debug-Friendly Settings
Verbose logging and lazy sample loading for quicker startup while iterating.
"""

# Development performance
FPS_TARGET = 60

# Verbose logging for development
LOG_LEVEL = 2           # INFO level
DEBUG = True
VERBOSE_LOG = True
DEBUG_LOG = True
LOG_TO_CONSOLE = True

# Trace ticks that overrun their interval
FRAME_TRACE = True

# Decode samples on first press
PRELOAD_SAMPLES = False

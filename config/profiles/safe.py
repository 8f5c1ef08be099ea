"""
Safe Mode Profile - Minimal Features
For troubleshooting or low-resource machines.
"""

# Safe mode performance (half rate, like the original 30 FPS build)
FPS_TARGET = 30

# Minimal logging (errors only)
LOG_LEVEL = 0           # ERROR only
DEBUG = False
VERBOSE_LOG = False
DEBUG_LOG = False
LOG_TO_FILE = False

# Decode on demand to keep startup light
PRELOAD_SAMPLES = False

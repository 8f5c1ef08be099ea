"""
Logging Configuration
All logging-related settings for the piano.
"""

# -------------------------------------------------------
# Logging configuration
# -------------------------------------------------------

# Verbosity levels:
#   0 = ERROR  → only critical errors
#   1 = WARN   → warnings and errors
#   2 = INFO   → normal info (default)
LOG_OFF = False

LOG_LEVEL = 2
VERBOSE_LOG = False
DEBUG_LOG = False

# Master debug flag: must be True to show [DEBUG …] messages at all
DEBUG = False

# Log sinks
LOG_TO_FILE = True        # background writer → piano_log.txt
LOG_TO_CONSOLE = False    # mirror accepted lines to stderr
LOG_FILE_NAME = "piano_log.txt"
LOG_QUEUE_SIZE = 512      # pending lines before the oldest is dropped

# False = prefix file lines with a one-letter level marker (I/W/E/D/V)
SHOW_LOG_TYPE_AS_TEXT = True

"""
Path Configuration
Directory paths for samples, fonts and log files.
"""

import os

# Base path for the project
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Sample and font resources
RESOURCES_DIR = os.path.join(BASE_DIR, "resources")
SAMPLE_DIR = RESOURCES_DIR
SAMPLE_EXT = ".ogg"
FONT_PATH = os.path.join(RESOURCES_DIR, "arial.ttf")

# Log files
LOG_DIR = BASE_DIR

"""Piano test suite.

Runs headless: SDL dummy drivers and the ``safe`` profile (no log file) are
selected before anything imports pygame or config.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("PIANO_ENV", "safe")

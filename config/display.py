"""
Display Configuration
Window settings for the piano keyboard.
"""

WINDOW_TITLE = "Piano"

# 0 = derive from key geometry (WHITE_KEY_WIDTH * WHITE_KEY_NUM x WHITE_KEY_HEIGHT)
WINDOW_WIDTH = 0
WINDOW_HEIGHT = 0

FULLSCREEN = False
SHOW_CURSOR = True

# Escape closes the window like the window manager's close button
QUIT_ON_ESCAPE = True

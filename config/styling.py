"""
Visual Styling Configuration
Colors and fonts for the keyboard.
"""

# ================== KEY COLORS ==================

BACKGROUND_COLOR = "#000000"

WHITE_KEY_COLOR = "#FFFFFF"        # released white key
BLACK_KEY_COLOR = "#000000"        # released black key
PRESSED_KEY_COLOR = "#39C5BB"      # any pressed key
KEY_OUTLINE_COLOR = "#000000"      # 1px border around every key
SEPARATOR_COLOR = "#000000"        # lines between white keys

WHITE_KEY_TEXT_COLOR = "#000000"
BLACK_KEY_TEXT_COLOR = "#FFFFFF"

# ================== TYPOGRAPHY ==================

FONT_SIZE = 15
FONT_ANTIALIAS = False             # solid glyphs, like the classic build

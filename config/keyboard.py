"""
Keyboard Geometry Configuration
Key sizes and counts for the three-octave (C3 → B5) keyboard.
"""

# ================== KEY SIZES ==================

BLACK_KEY_WIDTH = 40
BLACK_KEY_HEIGHT = 254
WHITE_KEY_WIDTH = 56
WHITE_KEY_HEIGHT = 390

# ================== KEY COUNTS ==================

BLACK_KEY_NUM = 15
WHITE_KEY_NUM = 21

# ================== LABEL PLACEMENT ==================

KEY_NAME_DISTANCE = 22    # key label top, measured up from the key's bottom edge
NOTE_NAME_DISTANCE = 42   # note name top, measured up from the key's bottom edge

SEPARATOR_WIDTH = 1
OUTLINE_WIDTH = 1

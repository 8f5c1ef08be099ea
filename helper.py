# helper.py
import pygame


def hex_to_rgb(value):
    """Convert '#RRGGBB' hex string or RGB tuple to (r, g, b)."""
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return tuple(int(c) for c in value)
    if isinstance(value, str):
        value = value.strip().lstrip('#')
        if len(value) == 3:
            value = "".join(ch * 2 for ch in value)
        if len(value) != 6:
            raise ValueError(f"Expected #RRGGBB, got {value!r}")
        return tuple(int(value[i:i+2], 16) for i in (0, 2, 4))
    raise TypeError(f"Unsupported color format: {value!r}")


def center_x(rect: pygame.Rect, width: int) -> int:
    """Left edge that centers something ``width`` wide inside ``rect``."""
    return rect.x + (rect.width - width) // 2

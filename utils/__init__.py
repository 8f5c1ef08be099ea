"""Helper utilities (font resolution)."""

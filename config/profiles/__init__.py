"""Environment profiles selected by PIANO_ENV (dev, prod, safe)."""

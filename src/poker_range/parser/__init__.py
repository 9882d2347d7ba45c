"""Range expression parsing."""

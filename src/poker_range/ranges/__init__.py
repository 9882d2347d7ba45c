"""Range construction: combination expansion and the range container."""

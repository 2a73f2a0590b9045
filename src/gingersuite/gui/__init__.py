"""DearPyGui inspector for channel group files."""

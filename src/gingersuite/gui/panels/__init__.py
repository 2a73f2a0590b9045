"""GUI panels."""

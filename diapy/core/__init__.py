"""Core components of diapy."""

"""Domain types for path list editing and analysis."""

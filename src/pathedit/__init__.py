"""Edit, filter, and analyze colon-delimited PATH-like strings."""

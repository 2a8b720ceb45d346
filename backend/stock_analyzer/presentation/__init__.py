"""Text rendering of indicator series."""

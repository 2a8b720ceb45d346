"""Stock snapshot analytics."""

"""Stock analyzer: technical indicators and snapshot analytics over daily prices."""

"""Symbol sources and external data access."""

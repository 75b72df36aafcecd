"""User interface adapters for wcx."""

"""Platform adapters for wcx."""

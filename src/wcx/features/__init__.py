"""Feature packages for wcx."""

"""Report domain types."""

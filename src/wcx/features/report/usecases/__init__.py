"""Report aggregation use cases."""

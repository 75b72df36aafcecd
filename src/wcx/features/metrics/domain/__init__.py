"""Metric domain types."""

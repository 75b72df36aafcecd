"""Metric counting use cases."""

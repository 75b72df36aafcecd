"""Configuration package for wcx."""

from wcx.config.config import TABLE_BOX_CHOICES, Config

__all__ = ["Config", "TABLE_BOX_CHOICES"]

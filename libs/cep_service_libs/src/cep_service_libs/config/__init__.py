"""Configuration utilities for the CEP temperature services."""

from .base_settings import BaseServiceSettings

__all__ = ["BaseServiceSettings"]

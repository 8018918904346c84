"""
common_core.config_enums - Deployment environment of a running service.
"""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Selects log rendering: console output in development, JSON in production."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"

"""Deployment environments.

DEVELOPMENT renders colored console logs and exposes /config; every other
environment logs JSON.
"""

from enum import Enum


class Environment(str, Enum):
    """Value of the ENVIRONMENT variable."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

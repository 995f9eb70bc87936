"""Application environment types.

Defines the different runtime environments for the order-taking service.
Used by Settings to pick the logging renderer and collaborator adapters.

Environments:
- DEVELOPMENT: Local development, human-readable console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration environment, JSON logs
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

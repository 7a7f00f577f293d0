"""
Shared utilities for the decision tree rule domain.

This package aggregates common building blocks consumed by the domain
packages:

- config: Process configuration via pydantic-settings
- logging: Structured logging via structlog
- errors: Canonical error types and responses

Do not import from decisiontree into shared/.
"""

"""Core: configuration, errors, pagination, domain models and services."""

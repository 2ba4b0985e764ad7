"""Core domain: models, rules and services."""

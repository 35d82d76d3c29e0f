"""Core: domain models, configuration, errors and pure services."""

"""Command line interface for brdoc-validator."""

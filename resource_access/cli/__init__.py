"""Command-line interface for resource access."""

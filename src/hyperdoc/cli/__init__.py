"""Command-line interface for hyperdoc."""

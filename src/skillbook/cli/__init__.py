"""Command-line interface for Skillbook."""

"""Command-line interface for norytools."""

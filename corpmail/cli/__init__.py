"""Command-line interface for corpmail."""

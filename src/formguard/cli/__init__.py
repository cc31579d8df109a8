"""Command-line interface for formguard."""

"""Command-line interface for OpenIBAN."""

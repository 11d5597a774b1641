"""Shared utilities: structured logging and settings."""

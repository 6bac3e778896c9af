"""Configuration — mode flag, CLI settings, and logging setup."""

"""Core build-description model and queries."""

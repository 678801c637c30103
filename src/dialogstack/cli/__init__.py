"""Command line interface for dialogstack."""

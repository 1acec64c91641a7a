"""Command line interface for schemagen."""

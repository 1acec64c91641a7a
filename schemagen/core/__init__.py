"""Core models shared across schemagen."""

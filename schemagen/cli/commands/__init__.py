"""CLI commands for schemagen."""

from . import generate, generators, config_cmd

__all__ = ["generate", "generators", "config_cmd"]

"""Command-line interface for ilo-config."""

from ilo_config.cli.app import app

__all__ = ["app"]

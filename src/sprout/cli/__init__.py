"""Command-line interface for sprout."""

from sprout.cli.app import app

__all__ = ["app"]

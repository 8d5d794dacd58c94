"""Sprout: scaffold new projects from directory templates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sprout")
except PackageNotFoundError:
    __version__ = "0.0.0"

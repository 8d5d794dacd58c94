"""Exceptions raised while scaffolding a project."""


class SproutError(Exception):
    """Base class for all scaffolding errors."""


class TargetExistsError(SproutError):
    """The project directory already exists."""


class ConfigParseError(SproutError):
    """A template's `.template.json` could not be parsed."""


class ValidationError(SproutError, ValueError):
    """A project name does not satisfy the naming rule."""


class UnknownTemplateError(SproutError, LookupError):
    """No template with the requested name exists in the store."""

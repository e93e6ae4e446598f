class TintError(Exception):
    """Base class for errors raised by workspace_tint."""


class InvalidColorError(TintError, ValueError):
    """A hex color string could not be parsed."""

    def __init__(self, value):
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


class MissingConfigurationError(TintError):
    """Neither a base hue nor a workspace identifier was supplied."""


class ConfigError(TintError):
    """A settings file could not be read or has the wrong shape."""

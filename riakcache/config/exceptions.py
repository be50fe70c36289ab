"""Configuration exceptions."""


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigValidationError(ConfigError):
    """Exception raised when configuration or driver options fail validation."""

    pass


class ConfigFileNotFoundError(ConfigError):
    """Exception raised when a configuration file cannot be read."""

    pass

class SlugShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:slugshortener_error'


class SlugGenerationError(SlugShortenerError):
    """Raised when every slug candidate collides with an existing record."""

    error_code = 'app:slug_generation_error'


class ConfigurationError(SlugShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError, KeyError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'

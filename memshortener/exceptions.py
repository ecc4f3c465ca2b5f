class MemShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:memshortener_error'


class InvalidShortcodeError(MemShortenerError, ValueError):
    """Raised when a shortcode is empty, contains non-base62 characters or overflows 64 bits."""

    error_code = 'input:invalid_shortcode_error'


class InvalidURLError(MemShortenerError, ValueError):
    """Raised when a long URL is rejected by the URL validator."""

    error_code = 'input:invalid_url_error'


class ConfigurationError(MemShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError, KeyError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError, ValueError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'

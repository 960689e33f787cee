class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""

from string_search.config.config import Config, ConfigError, ConfigFileError, ConfigValidationError

__all__ = ["Config", "ConfigError", "ConfigFileError", "ConfigValidationError"]

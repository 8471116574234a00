import os
import sys
import configparser
from typing import Any, Optional
import logging
from logging.handlers import RotatingFileHandler

from string_search.search.dispatcher import ALGORITHM_ALIASES, is_known_algorithm

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "search.conf")
LOGGER_NAME = "string_search"


class ConfigError(Exception):
    """Base exception for configuration-related errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


class ConfigFileError(ConfigError):
    """Raised when there are issues with the configuration file."""
    pass


class Config:
    """Manages search settings and logging setup.

    Reads settings from an INI file, validates them, and initializes the
    ``string_search`` logger with a console handler and an optional rotating
    file handler.

    Attributes:
        search_algorithm (str): Default algorithm identifier.
        strict_algorithm (bool): Reject unknown algorithm identifiers instead of
            falling back to the naive matcher.
        max_text_length (int): Longest text accepted by request handling.
        max_pattern_length (int): Longest pattern accepted by request handling.
        debug (bool): Debug mode flag.
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        log_file (Optional[str]): Path to log file (if specified).
        logger (Optional[logging.Logger]): Configured logger instance.
    """

    VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    VALID_ALGORITHMS = set(ALGORITHM_ALIASES)

    def __init__(self, config_file: Optional[str] = None) -> None:
        """Initializes the configuration from a file.

        Args:
            config_file: Path to the configuration INI file. The packaged
                ``search.conf`` is used when omitted.

        Raises:
            ConfigFileError: If the config file does not exist or cannot be read.
            ConfigValidationError: If required settings are missing or invalid.
        """
        self.config_file = config_file or DEFAULT_CONFIG_FILE
        self.config = configparser.ConfigParser()
        self.logger: Optional[logging.Logger] = None

        try:
            self._load_config_file()
            self._parse_configuration()
            self._validate_config()
            self._initiate_logger()
        except ConfigError:
            raise
        except Exception as e:
            raise ConfigError(f"Unexpected error during configuration initialization: {e}") from e

    def _load_config_file(self) -> None:
        """Loads and parses the configuration file.

        Raises:
            ConfigFileError: If file doesn't exist, can't be read, or has parsing errors.
        """
        if not os.path.exists(self.config_file):
            raise ConfigFileError(f"Configuration file '{self.config_file}' not found")

        if not os.access(self.config_file, os.R_OK):
            raise ConfigFileError(f"Configuration file '{self.config_file}' is not readable")

        try:
            self.config.read(self.config_file, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigFileError(f"Failed to parse configuration file '{self.config_file}': {e}") from e

        required_sections = ['SEARCH', 'LOGGING']
        missing_sections = [section for section in required_sections if section not in self.config]
        if missing_sections:
            raise ConfigFileError(f"Missing required sections in config file: {missing_sections}")

    def _get_required_value(self, section: str, key: str) -> str:
        if key not in self.config[section]:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' not found")

        value = self.config[section].get(key)
        if not value or not value.strip():
            raise ConfigValidationError(f"Required configuration '{section}.{key}' is empty")
        return value.strip()

    def _get_required_int(self, section: str, key: str) -> int:
        """Retrieves a required integer value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to int.
        """
        value = self._get_required_value(section, key)
        try:
            return int(value)
        except ValueError as e:
            raise ConfigValidationError(f"Invalid integer value for '{section}.{key}': '{value}'") from e

    def _get_required_bool(self, section: str, key: str) -> bool:
        """Retrieves a required boolean value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to bool.
        """
        value = self._get_required_value(section, key)
        try:
            return self.config[section].getboolean(key)
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid boolean value for '{section}.{key}': '{value}'. Use true/false, yes/no, or 1/0"
            ) from e

    def _get_required_str(self, section: str, key: str) -> str:
        return self._get_required_value(section, key)

    def _get_optional_str(self, section: str, key: str) -> Optional[str]:
        """Retrieves an optional string value, or None if absent or empty."""
        if key not in self.config[section]:
            return None

        value = self.config[section].get(key)
        if not value or not value.strip():
            return None
        return value.strip()

    def _parse_configuration(self) -> None:
        """Parses all configuration values with strict validation."""
        self.search_algorithm = self._get_required_str("SEARCH", "ALGORITHM")
        self.strict_algorithm = self._get_required_bool("SEARCH", "STRICT_ALGORITHM")
        self.max_text_length = self._get_required_int("SEARCH", "MAX_TEXT_LENGTH")
        self.max_pattern_length = self._get_required_int("SEARCH", "MAX_PATTERN_LENGTH")
        self.debug = self._get_required_bool("SEARCH", "DEBUG")

        self.log_level = self._get_required_str("LOGGING", "LEVEL")
        self.log_file = self._get_optional_str("LOGGING", "FILE")

    def _create_log_file(self, log_path: str) -> None:
        """Creates a log file and its directory structure if needed.

        Raises:
            ConfigError: If log file or directory cannot be created.
        """
        try:
            directory = os.path.dirname(log_path)
            if directory:
                if not os.path.exists(directory):
                    os.makedirs(directory, mode=0o755)
                elif not os.access(directory, os.W_OK):
                    raise ConfigError(f"Log directory '{directory}' is not writable")

            if os.path.exists(log_path):
                if not os.access(log_path, os.W_OK):
                    raise ConfigError(f"Log file '{log_path}' is not writable")
            else:
                try:
                    with open(log_path, "x", encoding="utf-8"):
                        pass
                except FileExistsError:
                    pass
                except PermissionError:
                    raise ConfigError(f"Permission denied when creating log file '{log_path}'")
        except OSError as e:
            raise ConfigError(f"Failed to create log file or directory for '{log_path}': {e}") from e

    def _validate_config(self) -> None:
        """Validates all configuration settings strictly.

        Raises:
            ConfigValidationError: If any settings are invalid.
        """
        if not is_known_algorithm(self.search_algorithm):
            raise ConfigValidationError(
                f"Invalid search algorithm '{self.search_algorithm}'. "
                f"Valid options: {', '.join(sorted(self.VALID_ALGORITHMS))}"
            )

        if self.max_text_length < 1:
            raise ConfigValidationError(f"MAX_TEXT_LENGTH must be at least 1, got: {self.max_text_length}")
        if self.max_pattern_length < 1:
            raise ConfigValidationError(f"MAX_PATTERN_LENGTH must be at least 1, got: {self.max_pattern_length}")
        if self.max_pattern_length > self.max_text_length:
            raise ConfigValidationError(
                f"MAX_PATTERN_LENGTH ({self.max_pattern_length}) must not exceed "
                f"MAX_TEXT_LENGTH ({self.max_text_length})"
            )

        if self.log_level.upper() not in self.VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level '{self.log_level}'. "
                f"Valid options: {', '.join(sorted(self.VALID_LOG_LEVELS))}"
            )

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                parent_dir = os.path.dirname(log_dir)
                if parent_dir and not os.path.exists(parent_dir):
                    raise ConfigValidationError(f"Log file parent directory does not exist: '{parent_dir}'")

    def _initiate_logger(self) -> None:
        """Initializes the logger with console and file handlers.

        Sets up:
            - Logging format.
            - Console handler (stderr).
            - File handler (if `log_file` is specified).
            - Log rotation (10MB per file, max 3 backups).

        Raises:
            ConfigError: If logger setup fails.
        """
        log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        formatter = logging.Formatter(log_format)
        log_level = getattr(logging, self.log_level.upper())

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(log_level)

        # Clear existing handlers to avoid duplicates
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        self.logger.addHandler(console_handler)

        if self.log_file:
            try:
                self._create_log_file(self.log_file)
                file_handler = RotatingFileHandler(
                    self.log_file,
                    maxBytes=10 * 1024 * 1024,  # 10MB
                    backupCount=3,
                    encoding="utf-8",
                )
                file_handler.setFormatter(formatter)
                file_handler.setLevel(log_level)
                self.logger.addHandler(file_handler)
            except Exception as e:
                raise ConfigError(f"Failed to initialize file logging for '{self.log_file}': {e}") from e

    def get(self, section: str, key: str) -> Any:
        """Retrieves a raw value from the configuration.

        Returns:
            The value as a string (or None if not found).

        Raises:
            ConfigError: If section doesn't exist.
        """
        if section not in self.config:
            raise ConfigError(f"Configuration section '{section}' not found")
        return self.config[section].get(key)

    def __str__(self) -> str:
        return (
            f"Config(algorithm='{self.search_algorithm}', "
            f"strict_algorithm={self.strict_algorithm}, "
            f"max_text_length={self.max_text_length}, "
            f"max_pattern_length={self.max_pattern_length}, "
            f"debug={self.debug}, log_level='{self.log_level}')"
        )

    def reload(self) -> None:
        """Reloads configuration from the original file.

        The previous settings are kept if the file no longer loads.

        Raises:
            ConfigFileError: If file cannot be reloaded.
            ConfigValidationError: If reloaded config is invalid.
        """
        snapshot = dict(self.__dict__)
        try:
            self.__init__(self.config_file)
        except ConfigError:
            self.__dict__.clear()
            self.__dict__.update(snapshot)
            raise
        self.logger.info("Configuration reloaded successfully")

"""Application-wide constants."""

APP_NAME = "bookstore"

CONFIG_DIR_NAME = APP_NAME
CONFIG_FILE_NAME = "config.toml"

DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FILE = "logs/bookstore.log"

# Exit codes used by the top-level error handler
EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 3
EXIT_CLI = 9
EXIT_APPLICATION = 10

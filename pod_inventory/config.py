"""
Centralized Configuration Module

All application constants, logging configuration, and settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logging.getLogger(__name__).info(f"Loaded environment from: {env_file}")
        else:
            logging.getLogger(__name__).warning(f"Environment file not found: {env_file}")
    else:
        # Reload default .env
        load_dotenv(override=True)

    # Settings classes are defined below; they read os.environ at import time
    SerializationConfig.reload()
    FeatureFlags.reload()


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "Pod Inventory Snapshot"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Read, validate and print network service and FRU inventory snapshots"


class SerializationConfig:
    """Snapshot input/output settings"""

    OUTPUT_FORMATS = ("list", "table", "json")

    SNAPSHOT_FILE = os.getenv("SNAPSHOT_FILE")
    JSON_INDENT = int(os.getenv("JSON_INDENT", "2"))
    DEFAULT_OUTPUT_FORMAT = os.getenv("OUTPUT_FORMAT", "list").lower()
    FILE_ENCODING = os.getenv("SNAPSHOT_FILE_ENCODING", "utf-8")

    @classmethod
    def reload(cls):
        """Re-read settings from the current environment"""
        cls.SNAPSHOT_FILE = os.getenv("SNAPSHOT_FILE")
        cls.JSON_INDENT = int(os.getenv("JSON_INDENT", "2"))
        cls.DEFAULT_OUTPUT_FORMAT = os.getenv("OUTPUT_FORMAT", "list").lower()
        cls.FILE_ENCODING = os.getenv("SNAPSHOT_FILE_ENCODING", "utf-8")


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )
    logging.getLogger().setLevel(log_level)

    if log_file or LogConfig.LOG_FILE:
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.LOG_FILE
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Feature Flags
# ============================================================================

class FeatureFlags:
    """Feature flags for optional functionality"""

    # Reject payloads with unknown keys instead of ignoring them
    STRICT_PAYLOADS = os.getenv("STRICT_PAYLOADS", "false").lower() == "true"
    # Warn when HostName and FQDN disagree
    CHECK_HOST_IDENTITY = os.getenv("CHECK_HOST_IDENTITY", "true").lower() == "true"

    @classmethod
    def reload(cls):
        """Re-read flags from the current environment"""
        cls.STRICT_PAYLOADS = os.getenv("STRICT_PAYLOADS", "false").lower() == "true"
        cls.CHECK_HOST_IDENTITY = os.getenv("CHECK_HOST_IDENTITY", "true").lower() == "true"


# ============================================================================
# Validation
# ============================================================================

def validate_config():
    """
    Validate configuration on startup.
    Raises ValueError if any setting is invalid.
    """
    errors = []

    if SerializationConfig.DEFAULT_OUTPUT_FORMAT not in SerializationConfig.OUTPUT_FORMATS:
        errors.append(
            f"OUTPUT_FORMAT must be one of {', '.join(SerializationConfig.OUTPUT_FORMATS)}, "
            f"got '{SerializationConfig.DEFAULT_OUTPUT_FORMAT}'"
        )

    if SerializationConfig.JSON_INDENT < 0:
        errors.append(f"JSON_INDENT cannot be negative, got {SerializationConfig.JSON_INDENT}")

    if SerializationConfig.SNAPSHOT_FILE and not Path(SerializationConfig.SNAPSHOT_FILE).exists():
        logger.warning(f"SNAPSHOT_FILE does not exist: {SerializationConfig.SNAPSHOT_FILE}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.info("Configuration validated")


# ============================================================================
# Export commonly used configs
# ============================================================================

__all__ = [
    'AppConfig',
    'SerializationConfig',
    'LogConfig',
    'FeatureFlags',
    'load_environment',
    'setup_logging',
    'validate_config',
]

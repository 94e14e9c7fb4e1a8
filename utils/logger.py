"""
Logging utility for the render-to-video encoder.
Provides consistent logging format across all modules with modular file outputs.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from config import LOG_LEVEL, LOG_DIR

# Module-to-logfile mapping for organized debugging
MODULE_LOG_MAPPING = {
    "__main__": "main.log",
    "main": "main.log",
    "pipeline.selector": "encoder.log",
    "pipeline.encoder": "encoder.log",
    "utils.helpers": "encoder.log",
}

# Loggers that have already been configured (avoid duplicate handlers)
_configured_loggers = set()

def _ensure_log_directory():
    """Create log directory if it doesn't exist."""
    Path(LOG_DIR).mkdir(parents=True, exist_ok=True)

def _get_log_file_for_module(module_name: str) -> str:
    """
    Determine which log file a module should write to.

    Args:
        module_name: The module's __name__ value

    Returns:
        Log filename (not full path)
    """
    # Check for exact match first
    if module_name in MODULE_LOG_MAPPING:
        return MODULE_LOG_MAPPING[module_name]

    # Check for prefix match (e.g., pipeline.encoder.x -> encoder.log)
    for prefix, log_file in MODULE_LOG_MAPPING.items():
        if module_name.startswith(prefix):
            return log_file

    # Default to main.log for unmapped modules
    return "main.log"

def _console_level() -> int:
    """Resolve LOG_LEVEL to a logging level, falling back to INFO."""
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO

def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with modular file outputs and consistent formatting.

    Each module logs to:
    1. Its specific log file (e.g., encoder.log)
    2. The combined all.log file
    3. Console (LOG_LEVEL, INFO by default)

    File logs use DEBUG level for detailed troubleshooting.
    Log rotation: keeps last 5 runs, max 10MB per file.

    Args:
        name: Name of the logger, typically __name__ of the module

    Returns:
        logging.Logger: Configured logger instance with modular handlers
    """
    logger = logging.getLogger(name)

    # Avoid adding duplicate handlers if logger is already configured
    if name in _configured_loggers:
        return logger

    _configured_loggers.add(name)
    logger.setLevel(logging.DEBUG)  # Capture all levels, handlers will filter
    logger.propagate = False  # Don't propagate to root logger to avoid duplicates

    _ensure_log_directory()

    formatter = logging.Formatter(
        '%(asctime)s [%(name)s] %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Module-specific file handler - DEBUG level for detailed troubleshooting
    module_file_path = os.path.join(LOG_DIR, _get_log_file_for_module(name))
    module_file_handler = RotatingFileHandler(
        module_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    module_file_handler.setLevel(logging.DEBUG)
    module_file_handler.setFormatter(formatter)
    logger.addHandler(module_file_handler)

    # Combined all.log handler
    all_file_handler = RotatingFileHandler(
        os.path.join(LOG_DIR, "all.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    all_file_handler.setLevel(logging.DEBUG)
    all_file_handler.setFormatter(formatter)
    logger.addHandler(all_file_handler)

    return logger

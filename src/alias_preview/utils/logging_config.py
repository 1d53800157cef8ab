"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Centralized logging configuration for Alias Preview.
Ensures all logging goes to files and never to stdout/stderr, since the
preview is drawn around the line the user is editing.
"""
import logging
import os
from pathlib import Path

LOG_DIR_ENV_VAR = "ALIAS_PREVIEW_LOG_DIR"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logs_dir() -> Path:
    """Return the log directory, creating it if needed.

    Defaults to ~/.alias_preview/logs, overridable with ALIAS_PREVIEW_LOG_DIR.
    """
    override = os.environ.get(LOG_DIR_ENV_VAR)
    logs_dir = Path(override) if override else Path.home() / ".alias_preview" / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def _create_file_handler() -> logging.FileHandler:
    file_handler = logging.FileHandler(get_logs_dir() / "alias_preview.log")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return file_handler


def setup_logging(verbose: bool = False):
    """Setup centralized logging for the entire application.
    
    Args:
        verbose: Enable debug level logging if True
    """
    # Clear any existing handlers to avoid stdout/stderr leakage
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    level = logging.DEBUG if verbose else logging.INFO

    file_handler = _create_file_handler()
    file_handler.setLevel(level)

    logging.root.setLevel(level)
    logging.root.handlers = [file_handler]

    # prompt_toolkit and asyncio must not print into the terminal either
    for logger_name in ['alias_preview', 'prompt_toolkit', 'asyncio']:
        logger = logging.getLogger(logger_name)
        logger.handlers = [file_handler]
        logger.setLevel(level)
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance that's guaranteed to only log to files.
    
    Args:
        name: Logger name (usually __name__)
        
    Returns:
        Logger instance configured for file-only output
    """
    logger = logging.getLogger(name)

    # Package loggers propagate up to the 'alias_preview' logger, which
    # writes to the log file and never reaches the root logger
    package_logger = logging.getLogger('alias_preview')
    if not package_logger.handlers:
        package_logger.addHandler(_create_file_handler())
        package_logger.propagate = False

    if name != 'alias_preview' and not name.startswith('alias_preview.'):
        logger.propagate = False
        if not logger.handlers:
            logger.addHandler(_create_file_handler())

    return logger

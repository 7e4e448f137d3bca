"""Logging configuration for cssbuild."""

import logging
from datetime import datetime
from pathlib import Path

from cssbuild.utils.files import get_logs_path, init_cssbuild, is_initialized


def resolve_level(level: str) -> int:
    """Map a level name to a numeric logging level.

    'ALL' maps to NOTSET; unknown names fall back to DEBUG.
    """
    if level.upper() == 'ALL':
        return logging.NOTSET
    numeric_level = getattr(logging, level.upper(), logging.DEBUG)
    return numeric_level if isinstance(numeric_level, int) else logging.DEBUG


def setup_local_logging(level: str = 'DEBUG') -> Path:
    """Set up local file-based logging.

    Creates a log file in .cssbuild/logs/ and configures the root logger
    to write to it. Console output is left to the CLI, which uses rich.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO'). Defaults to 'DEBUG'.

    Returns:
        Path: The path to the created log file.

    """
    if not is_initialized():
        init_cssbuild()

    logs_dir = get_logs_path()
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = logs_dir / f'run_{timestamp}.log'

    numeric_level = resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(file_handler)

    return log_file

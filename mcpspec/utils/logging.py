# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging utilities for mcpspec.

This module provides consistent logging functionality throughout the engine.
"""

import logging
import sys
from typing import Optional

# Configure logging format
DEFAULT_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Global flag for debug mode
_debug_mode = False


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure the logging system.
    
    Args:
        debug: Whether to enable debug logging
        log_file: Optional path to a log file
    """
    global _debug_mode
    _debug_mode = debug
    
    log_level = logging.DEBUG if debug else logging.INFO
    
    # Only the mcpspec hierarchy is configured; host applications keep their root logger
    package_logger = logging.getLogger("mcpspec")
    package_logger.setLevel(log_level)
    
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    
    formatter = logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT)
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)
    
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
    
    logger = get_logger("config")
    logger.debug(f"Logging configured: debug={debug}, log_file={log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger inside the mcpspec hierarchy.
    
    Args:
        name: The name for the logger
        
    Returns:
        A Logger instance named ``mcpspec.<name>``
    """
    return logging.getLogger(f"mcpspec.{name}")


def debug_enabled() -> bool:
    """
    Check if debug logging is enabled.
    
    Returns:
        True if debug logging is enabled, False otherwise
    """
    return _debug_mode

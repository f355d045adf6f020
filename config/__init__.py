"""
Configuration module for GymAI Plan Export.
"""
from .constants import *
from .logging_config import setup_logger, add_file_handler, get_logger, logger

__all__ = [
    # Logging
    'setup_logger',
    'add_file_handler',
    'get_logger',
    'logger',
    # Constants (all exported via *)
]

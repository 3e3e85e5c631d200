"""
Utility modules for the parser and the command line tool.
"""

# Import key utilities for easy access
from html_filter.utils.config import Config
from html_filter.utils.loader import ContentLoader, LoaderError
from html_filter.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'ContentLoader',
    'LoaderError',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]

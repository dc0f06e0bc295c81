"""
Utility functions and helper classes.
"""

from .logger import Logger, LogLevel, logger, set_log_level, get_logger
from .error_handler import (
    ErrorHandler, ErrorContext, ErrorType, ErrorSeverity,
    AssetDiscoveryError, InvalidFormatError, AcquisitionError,
    OuiDatabaseError, ConfigurationError
)
from .report_writer import ReportWriter

__all__ = [
    'Logger',
    'LogLevel',
    'logger',
    'set_log_level',
    'get_logger',
    'ReportWriter',
    'ErrorHandler',
    'ErrorContext',
    'ErrorType',
    'ErrorSeverity',
    'AssetDiscoveryError',
    'InvalidFormatError',
    'AcquisitionError',
    'OuiDatabaseError',
    'ConfigurationError'
]

"""
Error types and centralized error reporting for the asset discovery package.

Parsing of individual neighbor-table lines and OUI database lines never
raises; only malformed caller input, a neighbor-table command that cannot be
run, or an unreadable database file surface as exceptions. Nothing here
retries: a failed attempt is terminal for that pipeline run.
"""

from typing import Optional, Any, Dict
from enum import Enum
from dataclasses import dataclass

from .logger import Logger, get_logger


class ErrorType(Enum):
    """Enumeration for different types of errors."""
    INVALID_FORMAT = "invalid_format"
    ACQUISITION_ERROR = "acquisition_error"
    FILE_ERROR = "file_error"
    CONFIGURATION_ERROR = "configuration_error"


class ErrorSeverity(Enum):
    """Enumeration for error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """
    Context information for error handling.

    Attributes:
        error_type: Type of error that occurred
        severity: Severity level of the error
        operation: Operation that was being performed when error occurred
        component: Component/module where error occurred
        additional_info: Additional context information
    """
    error_type: ErrorType
    severity: ErrorSeverity
    operation: str
    component: str
    additional_info: Dict[str, Any] = None

    def __post_init__(self):
        if self.additional_info is None:
            self.additional_info = {}


class AssetDiscoveryError(Exception):
    """Base exception class for the asset discovery package."""

    def __init__(self, message: str, error_context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.error_context = error_context


class InvalidFormatError(AssetDiscoveryError, ValueError):
    """Malformed address, CIDR block or hardware address text."""
    pass


class AcquisitionError(AssetDiscoveryError):
    """The neighbor-table command could not be started or read."""
    pass


class OuiDatabaseError(AssetDiscoveryError):
    """The OUI database file could not be opened."""
    pass


class ConfigurationError(AssetDiscoveryError):
    """Exception for configuration-related errors."""
    pass


class ErrorHandler:
    """
    Centralized error reporting.

    Logs each failure at a level derived from its severity, keeps per-type
    counters and prints troubleshooting suggestions. The caller decides
    whether to continue after ``handle_error`` returns.
    """

    def __init__(self, logger: Optional[Logger] = None):
        """
        Initialize the ErrorHandler.

        Args:
            logger: Logger instance for error reporting
        """
        self.logger = logger or get_logger(__name__)
        self.error_statistics: Dict[ErrorType, int] = {
            error_type: 0 for error_type in ErrorType
        }

    def handle_error(self, error: Exception, context: ErrorContext) -> None:
        """
        Report an error based on its type and context.

        Args:
            error: The exception that occurred
            context: Error context information
        """
        self.error_statistics[context.error_type] += 1
        self._log_error(error, context)

        if context.error_type == ErrorType.INVALID_FORMAT:
            self._suggest_format_fixes(error, context)
        elif context.error_type == ErrorType.ACQUISITION_ERROR:
            self._suggest_acquisition_fixes(error, context)
        elif context.error_type == ErrorType.FILE_ERROR:
            self._suggest_file_solutions(error, context)
        elif context.error_type == ErrorType.CONFIGURATION_ERROR:
            self._suggest_configuration_fixes(error, context)

    def total_errors(self) -> int:
        return sum(self.error_statistics.values())

    def _log_error(self, error: Exception, context: ErrorContext) -> None:
        """
        Log error information with appropriate detail level.

        Args:
            error: The exception that occurred
            context: Error context information
        """
        error_msg = f"Error in {context.component}.{context.operation}: {str(error)}"

        if context.severity == ErrorSeverity.CRITICAL:
            self.logger.error(error_msg, exception=error)
        elif context.severity == ErrorSeverity.HIGH:
            self.logger.error(error_msg)
        elif context.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(error_msg)
        else:
            self.logger.debug(error_msg)

    def _suggest_format_fixes(self, error: Exception, context: ErrorContext) -> None:
        """Provide input format suggestions."""
        self.logger.info("Input format suggestions:")
        self.logger.info("  • CIDR blocks are written A.B.C.D/P, e.g. 192.168.1.0/24")
        self.logger.info("  • Each octet must be a decimal number between 0 and 255")
        self.logger.info("  • The prefix length must be between 0 and 32")

    def _suggest_acquisition_fixes(self, error: Exception, context: ErrorContext) -> None:
        """Provide neighbor-table command suggestions."""
        command = context.additional_info.get("command")
        self.logger.info("Neighbor table suggestions:")
        if command:
            self.logger.info(f"  • Check that '{command}' runs from a shell")
        self.logger.info("  • Linux: install iproute2 (ip) or net-tools (arp)")
        self.logger.info("  • Override the command under discovery.commands in the config file")
        self.logger.info("  • Populate the cache first, e.g. with a ping sweep of the expanded list")

    def _suggest_file_solutions(self, error: Exception, context: ErrorContext) -> None:
        """Provide file system error solutions."""
        file_path = context.additional_info.get("file_path", "unknown")
        self.logger.info(f"File access suggestions for {file_path}:")
        self.logger.info("  • Check that the file exists and is readable")
        self.logger.info("  • The IEEE database is published at https://standards-oui.ieee.org/oui/oui.txt")
        self.logger.info("  • Pass a different path with --oui-db")

    def _suggest_configuration_fixes(self, error: Exception, context: ErrorContext) -> None:
        """Provide configuration error solutions."""
        self.logger.info("Configuration error solutions:")
        self.logger.info("  • Check YAML syntax and indentation")
        self.logger.info("  • Use --config-dir to point at a directory with discovery_config.yml")

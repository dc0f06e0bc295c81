"""
Neighbor-table acquisition.

Runs the platform's neighbor/ARP cache dump command and returns its standard
output line by line. An empty cache is a normal result; a command that
cannot be started is an AcquisitionError.
"""

import platform
import subprocess
from typing import Dict, Iterable, List, Optional

from .base_parser import LineParser
from ..core.data_models import ArpEntry
from ..utils.error_handler import AcquisitionError, ErrorContext, ErrorSeverity, ErrorType
from ..utils.logger import Logger, get_logger

# Commands are tried in order until one can be started.
DEFAULT_COMMANDS: Dict[str, List[List[str]]] = {
    "linux": [["ip", "-4", "neigh", "show"], ["arp", "-n"]],
    "darwin": [["arp", "-a"]],
    "windows": [["arp", "-a"]],
}


class NeighborTableAcquirer:
    """
    Reads the operating system neighbor cache through an external command.

    No retries are attempted. With no timeout configured a hung command
    blocks the caller.
    """

    def __init__(
        self,
        system: Optional[str] = None,
        commands: Optional[List[List[str]]] = None,
        timeout: Optional[int] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the acquirer.

        Args:
            system: Platform name, defaults to ``platform.system()``
            commands: Fallback chain of argument lists, overriding the
                built-in commands for the platform
            timeout: Seconds to wait for the command, None to wait forever
            logger: Logger instance for progress and warnings
        """
        self.system = (system or platform.system()).lower()
        self.commands = commands if commands else DEFAULT_COMMANDS.get(self.system, [])
        self.timeout = timeout
        self.logger = logger or get_logger(__name__)
        self.last_command: Optional[List[str]] = None

    def acquire(self) -> List[str]:
        """
        Dump the neighbor cache.

        Returns:
            List of raw output lines; empty when the cache is empty

        Raises:
            AcquisitionError: If no command can be started or the command
                times out
        """
        if not self.commands:
            raise AcquisitionError(
                f"No neighbor-table command known for platform {self.system!r}",
                ErrorContext(
                    error_type=ErrorType.ACQUISITION_ERROR,
                    severity=ErrorSeverity.HIGH,
                    operation="acquire",
                    component="NeighborTableAcquirer",
                    additional_info={"platform": self.system},
                ),
            )

        last_error: Optional[OSError] = None
        for command in self.commands:
            command_text = " ".join(command)
            self.logger.debug(f"Reading neighbor table with: {command_text}")

            try:
                result = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    errors="replace",
                    timeout=self.timeout,
                )
            except subprocess.TimeoutExpired as e:
                raise AcquisitionError(
                    f"'{command_text}' did not finish within {self.timeout} seconds",
                    self._context(command_text),
                ) from e
            except OSError as e:
                # Not installed or not executable; try the next command
                self.logger.debug(f"Could not start '{command_text}': {e}")
                last_error = e
                continue

            self.last_command = command
            if result.returncode != 0:
                self.logger.warning(
                    f"'{command_text}' exited with code {result.returncode}",
                    stderr=result.stderr.strip() or "-",
                )

            lines = result.stdout.splitlines()
            self.logger.debug(f"'{command_text}' returned {len(lines)} lines")
            return lines

        tried = ", ".join(f"'{' '.join(command)}'" for command in self.commands)
        raise AcquisitionError(
            f"Could not start neighbor-table command (tried {tried}): {last_error}",
            self._context(" ".join(self.commands[-1])),
        ) from last_error

    def _context(self, command_text: str) -> ErrorContext:
        return ErrorContext(
            error_type=ErrorType.ACQUISITION_ERROR,
            severity=ErrorSeverity.HIGH,
            operation="acquire",
            component="NeighborTableAcquirer",
            additional_info={"command": command_text, "platform": self.system},
        )


def discover_entries(lines: Iterable[str], parser: LineParser) -> List[ArpEntry]:
    """
    Turn raw neighbor-table output into entries.

    Args:
        lines: Raw output lines from ``NeighborTableAcquirer.acquire``
        parser: Parser for the platform that produced the lines

    Returns:
        Accepted entries in output order, duplicates included
    """
    return parser.parse_lines(lines)

"""
Base line parser interface for neighbor-table output.

Every supported platform prints its neighbor cache in a different text
layout. Each layout gets one LineParser subclass; exactly one of them is
used per discovery run.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..core.data_models import ArpEntry


class LineParser(ABC):
    """
    Abstract base class for neighbor-table line parsers.

    ``parse_line`` must never raise for malformed input: headers, banners,
    incomplete cache entries and blank lines are expected and simply
    rejected by returning None.
    """

    #: Platform name as returned by ``platform.system().lower()``
    platform_name: str = ""

    @abstractmethod
    def parse_line(self, raw_line: str) -> Optional[ArpEntry]:
        """
        Extract an ArpEntry from one line of neighbor-table output.

        Args:
            raw_line: One line of command output, with or without newline

        Returns:
            ArpEntry if the line describes a resolved neighbor, None otherwise
        """
        pass

    def parse_lines(self, lines: Iterable[str]) -> List[ArpEntry]:
        """
        Parse every line and keep the accepted entries in input order.

        Duplicates are kept as reported.

        Args:
            lines: Raw command output lines

        Returns:
            List of ArpEntry objects
        """
        entries = []
        for line in lines:
            entry = self.parse_line(line)
            if entry is not None:
                entries.append(entry)
        return entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

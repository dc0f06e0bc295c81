"""
Neighbor-table line parsers for Linux, macOS and Windows.

Sample lines each parser accepts::

    Linux   (ip neigh)  192.168.1.10 dev wlan0 lladdr 00:11:22:33:44:55 REACHABLE
    Linux   (arp -n)    192.168.1.10  ether  00:11:22:33:44:55  C  eth0
    macOS   (arp -a)    ? (192.168.1.10) at 0:11:22:33:44:55 on en0 ifscope [ethernet]
    Windows (arp -a)      192.168.1.1           00-11-22-33-44-55     dynamic
"""

import platform
from typing import Optional

from .base_parser import LineParser
from ..core.data_models import ArpEntry
from ..utils.error_handler import AcquisitionError


class IpNeighParser(LineParser):
    """
    Parser for Linux ``ip neigh`` and ``arp -n`` output.

    The address is the first token. The hardware address follows an
    ``lladdr`` token, or an ``ether`` token when ``lladdr`` is absent.
    """

    platform_name = "linux"
    MARKERS = ("lladdr", "ether")

    def parse_line(self, raw_line: str) -> Optional[ArpEntry]:
        tokens = raw_line.split()
        if not tokens:
            return None

        for marker in self.MARKERS:
            if marker in tokens:
                index = tokens.index(marker)
                # A marker with nothing after it is an unresolved entry
                if index + 1 >= len(tokens):
                    return None
                return ArpEntry(ip_address=tokens[0], mac_address=tokens[index + 1])

        return None


class BsdArpParser(LineParser):
    """
    Parser for macOS / BSD ``arp -a`` output.

    The address is the text inside the first pair of parentheses and the
    hardware address is the token after `` at ``. Entries whose hardware
    address reads ``(incomplete)`` are skipped.
    """

    platform_name = "darwin"

    def parse_line(self, raw_line: str) -> Optional[ArpEntry]:
        open_index = raw_line.find("(")
        if open_index < 0:
            return None
        close_index = raw_line.find(")", open_index + 1)
        if close_index < 0:
            return None
        ip_address = raw_line[open_index + 1:close_index]
        if not ip_address:
            return None

        at_index = raw_line.find(" at ")
        if at_index < 0:
            return None
        rest = raw_line[at_index + 4:].split()
        if not rest:
            return None

        mac_address = rest[0]
        if "incomplete" in mac_address:
            return None

        return ArpEntry(ip_address=ip_address, mac_address=mac_address)


class WindowsArpParser(LineParser):
    """
    Parser for Windows ``arp -a`` output.

    Only lines whose first non-blank character is a digit are entries; the
    ``Interface:`` banners and column headers are skipped. Hyphens in the
    hardware address are rewritten as colons.
    """

    platform_name = "windows"

    def parse_line(self, raw_line: str) -> Optional[ArpEntry]:
        stripped = raw_line.lstrip(" \t")
        if not stripped or not "0" <= stripped[0] <= "9":
            return None

        tokens = stripped.split()
        if len(tokens) < 2:
            return None

        return ArpEntry(ip_address=tokens[0], mac_address=tokens[1].replace("-", ":"))


PARSERS = {
    parser_class.platform_name: parser_class
    for parser_class in (IpNeighParser, BsdArpParser, WindowsArpParser)
}


def select_line_parser(system: Optional[str] = None) -> LineParser:
    """
    Pick the line parser for a platform.

    Args:
        system: Platform name as reported by ``platform.system()``;
            defaults to the running platform

    Returns:
        LineParser instance for that platform

    Raises:
        AcquisitionError: If the platform has no known neighbor-table format
    """
    system = (system or platform.system()).lower()
    parser_class = PARSERS.get(system)
    if parser_class is None:
        raise AcquisitionError(f"Reading the neighbor table is not supported on {system!r}")
    return parser_class()

"""
Neighbor-table acquisition and per-platform line parsers.
"""

from .base_parser import LineParser
from .line_parsers import IpNeighParser, BsdArpParser, WindowsArpParser, select_line_parser
from .neighbor_table import NeighborTableAcquirer, DEFAULT_COMMANDS, discover_entries

__all__ = [
    'LineParser',
    'IpNeighParser',
    'BsdArpParser',
    'WindowsArpParser',
    'select_line_parser',
    'NeighborTableAcquirer',
    'DEFAULT_COMMANDS',
    'discover_entries'
]

"""
OUI vendor database loading and lookup.
"""

from .oui_database import load_oui_database, parse_oui_line, extract_vendor
from .oui_lookup import normalize_to_prefix, lookup_vendor

__all__ = [
    'load_oui_database',
    'parse_oui_line',
    'extract_vendor',
    'normalize_to_prefix',
    'lookup_vendor'
]

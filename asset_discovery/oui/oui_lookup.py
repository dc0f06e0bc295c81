"""
Vendor lookup for hardware addresses.

Hardware addresses arrive in whatever form the OS printed them
(``0:aa:bb:11:22:33``, ``00-AA-BB-11-22-33``...). They are reduced to the
six uppercase hex digits of their OUI before being matched against the table.
"""

import re
from typing import Optional

from ..core.data_models import OuiTable
from ..utils.error_handler import InvalidFormatError
from ..utils.logger import get_logger

logger = get_logger(__name__)

_SEPARATORS = re.compile(r"[:\-.\s]+")
_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


def normalize_to_prefix(mac_address: str) -> str:
    """
    Reduce a hardware address to its OUI prefix.

    Args:
        mac_address: Hardware address with ``:``, ``-``, ``.`` or whitespace
            separators; octets may be one or two hex digits

    Returns:
        str: Six uppercase hex digits, e.g. "00AABB"

    Raises:
        InvalidFormatError: If fewer than three octets are present or one of
            the first three is not a hex byte
    """
    if not isinstance(mac_address, str):
        raise InvalidFormatError(f"Hardware address must be text, got {type(mac_address).__name__}")

    tokens = _SEPARATORS.split(mac_address)[:3]
    if len(tokens) < 3:
        raise InvalidFormatError(f"Hardware address has fewer than three octets: {mac_address!r}")

    prefix = ""
    for token in tokens:
        if not _HEX_TOKEN.fullmatch(token):
            raise InvalidFormatError(f"Invalid octet {token!r} in hardware address {mac_address!r}")
        value = int(token, 16)
        if value > 0xFF:
            raise InvalidFormatError(f"Octet {token!r} out of range in hardware address {mac_address!r}")
        prefix += f"{value:02X}"
    return prefix


def lookup_vendor(mac_address: str, table: OuiTable) -> Optional[str]:
    """
    Resolve the vendor of a hardware address.

    Args:
        mac_address: Hardware address as reported by the OS
        table: Loaded OUI table

    Returns:
        Vendor name of the first matching record, or None when not found.
        An address that cannot be normalized is also reported as not found.
    """
    try:
        prefix = normalize_to_prefix(mac_address)
    except InvalidFormatError as e:
        logger.debug(f"Skipping vendor lookup: {e}")
        return None

    return table.find(prefix)

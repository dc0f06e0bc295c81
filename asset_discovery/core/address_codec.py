"""
Conversion between dotted-decimal IPv4 text and 32-bit integers.

``ipaddress.IPv4Address`` rejects octets with leading zeros, which the
neighbor-table tools and hand-written CIDR input sometimes carry, so parsing
is done with a strict regular expression and formatting goes through
``ipaddress``.
"""

import ipaddress
import re

from ..utils.error_handler import InvalidFormatError

MAX_ADDRESS = 0xFFFFFFFF

_ADDRESS_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)\.([0-9]+)")


def parse_address(text: str) -> int:
    """
    Parse a dotted-decimal IPv4 address into a 32-bit unsigned integer.

    Args:
        text: Address such as "192.168.1.10"

    Returns:
        int: Address in host byte order

    Raises:
        InvalidFormatError: On a wrong octet count, non-numeric characters,
            an octet above 255 or trailing characters
    """
    if not isinstance(text, str):
        raise InvalidFormatError(f"Address must be text, got {type(text).__name__}")

    match = _ADDRESS_PATTERN.fullmatch(text)
    if not match:
        raise InvalidFormatError(f"Invalid IPv4 address: {text!r}")

    value = 0
    for group in match.groups():
        digits = group.lstrip("0") or "0"
        # More than three significant digits cannot be a byte
        if len(digits) > 3 or int(digits) > 255:
            raise InvalidFormatError(f"Octet out of range in {text!r}: {group}")
        value = (value << 8) | int(digits)
    return value


def format_address(value: int) -> str:
    """
    Format a 32-bit unsigned integer as dotted-decimal text.

    Args:
        value: Address in host byte order

    Returns:
        str: Four decimal octets without leading zeros

    Raises:
        InvalidFormatError: If value is outside 0..2**32-1
    """
    if not 0 <= value <= MAX_ADDRESS:
        raise InvalidFormatError(f"Address value out of range: {value}")
    return str(ipaddress.IPv4Address(value))


def is_valid_address(text: str) -> bool:
    """Check if a string is an address ``parse_address`` accepts."""
    try:
        parse_address(text)
        return True
    except InvalidFormatError:
        return False

"""
CIDR block expansion.

Produces every address in ``A.B.C.D/P`` in ascending order, starting at the
literal base address. The base is not masked to the network boundary.
"""

import re
from typing import Iterator, List

from .address_codec import MAX_ADDRESS, format_address, parse_address
from .data_models import CidrBlock
from ..utils.error_handler import InvalidFormatError

_PREFIX_PATTERN = re.compile(r"[0-9]+")


def parse_cidr(text: str) -> CidrBlock:
    """
    Parse CIDR notation into a CidrBlock.

    Args:
        text: CIDR block such as "192.168.1.0/24"

    Returns:
        CidrBlock with the parsed base and prefix length

    Raises:
        InvalidFormatError: If the ``/`` separator is missing, the base
            address is invalid, the prefix is not a number in 0..32, or the
            block runs past 255.255.255.255
    """
    if not isinstance(text, str) or "/" not in text:
        raise InvalidFormatError(f"Invalid CIDR block (expected A.B.C.D/P): {text!r}")

    base_text, prefix_text = text.split("/", 1)
    base = parse_address(base_text)

    if not _PREFIX_PATTERN.fullmatch(prefix_text):
        raise InvalidFormatError(f"Invalid prefix length in {text!r}: {prefix_text!r}")
    digits = prefix_text.lstrip("0") or "0"
    if len(digits) > 2 or int(digits) > 32:
        raise InvalidFormatError(f"Prefix length must be between 0 and 32, got {prefix_text}")
    prefix_length = int(digits)

    block = CidrBlock(base=base, prefix_length=prefix_length)
    if block.last > MAX_ADDRESS:
        raise InvalidFormatError(
            f"CIDR block {text} extends past 255.255.255.255 "
            f"({block.num_addresses} addresses from {base_text})"
        )
    return block


def iter_expand(text: str) -> Iterator[str]:
    """
    Lazily yield every address of a CIDR block.

    The block is validated before the generator is returned, so a bad
    block raises at call time rather than on first iteration.

    Args:
        text: CIDR block such as "10.0.0.0/8"

    Returns:
        Iterator over dotted-decimal addresses in ascending order
    """
    return iter_block(parse_cidr(text))


def iter_block(block: CidrBlock) -> Iterator[str]:
    """Yield every address of an already parsed block, ascending."""
    for offset in range(block.num_addresses):
        yield format_address(block.base + offset)


def expand(text: str) -> List[str]:
    """
    Expand a CIDR block into the full list of its addresses.

    Args:
        text: CIDR block such as "192.168.1.0/30"

    Returns:
        List[str]: ``2 ** (32 - P)`` addresses, ascending

    Raises:
        InvalidFormatError: If the block cannot be parsed
    """
    return list(iter_expand(text))


def address_count(text: str) -> int:
    """Return the number of addresses ``expand`` would produce."""
    return parse_cidr(text).num_addresses

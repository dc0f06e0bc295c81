"""
Core components: data model, address codec, CIDR expansion and orchestration.
"""

from .data_models import (
    UNKNOWN_VENDOR,
    DiscoveryStatus,
    ArpEntry,
    OuiRecord,
    OuiTable,
    CidrBlock,
    DeviceInfo,
    DiscoveryResult
)
from .address_codec import parse_address, format_address, is_valid_address
from .cidr_expander import parse_cidr, expand, iter_expand, iter_block, address_count

__all__ = [
    'UNKNOWN_VENDOR',
    'DiscoveryStatus',
    'ArpEntry',
    'OuiRecord',
    'OuiTable',
    'CidrBlock',
    'DeviceInfo',
    'DiscoveryResult',
    'parse_address',
    'format_address',
    'is_valid_address',
    'parse_cidr',
    'expand',
    'iter_expand',
    'iter_block',
    'address_count'
]

"""
Core data models and enums for the asset discovery package.

This module defines the records produced by neighbor-table discovery, the
OUI vendor table, and the CIDR block description used by address expansion.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple


UNKNOWN_VENDOR = "Unknown"


class DiscoveryStatus(Enum):
    """Outcome of one neighbor-table discovery run."""
    NOT_STARTED = "not_started"
    COMPLETED = "completed"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class ArpEntry:
    """
    One row of the operating system neighbor cache.

    Attributes:
        ip_address: IPv4 address as dotted-decimal text
        mac_address: Hardware address as reported by the OS
    """
    ip_address: str
    mac_address: str


@dataclass(frozen=True)
class OuiRecord:
    """
    One vendor assignment from the OUI database.

    Attributes:
        prefix: Six uppercase hex digits, no separators (e.g. "286FB9")
        vendor: Vendor display name, trimmed
    """
    prefix: str
    vendor: str


@dataclass(frozen=True)
class OuiTable:
    """
    Read-only OUI lookup table.

    Records keep the order in which they were loaded; when two records share
    a prefix the first one wins.
    """
    records: Tuple[OuiRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[OuiRecord]:
        return iter(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    def find(self, prefix: str) -> Optional[str]:
        """Return the vendor of the first record matching ``prefix``."""
        for record in self.records:
            if record.prefix == prefix:
                return record.vendor
        return None


@dataclass(frozen=True)
class CidrBlock:
    """
    A base address plus prefix length.

    The base is used as written: ``192.168.1.5/24`` covers 256 addresses
    starting at ``192.168.1.5``.

    Attributes:
        base: Base address as a 32-bit unsigned integer
        prefix_length: Network prefix length, 0 to 32
    """
    base: int
    prefix_length: int

    @property
    def host_bits(self) -> int:
        return 32 - self.prefix_length

    @property
    def num_addresses(self) -> int:
        return 1 << self.host_bits

    @property
    def last(self) -> int:
        return self.base + self.num_addresses - 1


@dataclass
class DeviceInfo:
    """
    A discovered neighbor enriched with its vendor.

    Attributes:
        ip_address: IPv4 address of the device
        mac_address: Hardware address of the device
        vendor: Vendor resolved from the OUI table, None when not found
    """
    ip_address: str
    mac_address: str
    vendor: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: ArpEntry, vendor: Optional[str] = None) -> "DeviceInfo":
        return cls(ip_address=entry.ip_address, mac_address=entry.mac_address, vendor=vendor)

    @property
    def vendor_display(self) -> str:
        return self.vendor if self.vendor else UNKNOWN_VENDOR


@dataclass
class DiscoveryResult:
    """
    Result of a neighbor-table discovery run.

    Attributes:
        status: Outcome of the run
        devices: Devices in the order the OS reported them
        lines_read: Number of raw lines returned by the neighbor-table command
        scan_duration: Time taken in seconds
        errors: Errors encountered during the run
        failure: The exception that made the run fail, if any
        metadata: Extra details (platform, command, OUI table size)
    """
    status: DiscoveryStatus = DiscoveryStatus.NOT_STARTED
    devices: List[DeviceInfo] = field(default_factory=list)
    lines_read: int = 0
    scan_duration: float = 0.0
    errors: List[str] = field(default_factory=list)
    failure: Optional[Exception] = None
    metadata: dict = field(default_factory=dict)

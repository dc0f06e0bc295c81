"""
Discovery orchestrator for the asset discovery package.

This module provides the AssetDiscovery class that runs the neighbor-table
pipeline (acquire → parse → vendor lookup) and the independent CIDR
expansion pipeline. A failure in one pipeline never stops the other.
"""

import time
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .cidr_expander import iter_block, parse_cidr
from .data_models import ArpEntry, DeviceInfo, DiscoveryResult, DiscoveryStatus, OuiTable
from ..config.config_loader import DiscoveryConfig
from ..oui.oui_database import load_oui_database
from ..oui.oui_lookup import lookup_vendor
from ..scanners.base_parser import LineParser
from ..scanners.line_parsers import select_line_parser
from ..scanners.neighbor_table import NeighborTableAcquirer, discover_entries
from ..utils.error_handler import AcquisitionError, OuiDatabaseError
from ..utils.logger import Logger, get_logger


def resolve_vendors(entries: List[ArpEntry], table: OuiTable) -> List[DeviceInfo]:
    """
    Attach a vendor to every entry.

    Args:
        entries: Entries in discovery order
        table: Loaded OUI table

    Returns:
        DeviceInfo list in the same order as ``entries``
    """
    return [DeviceInfo.from_entry(entry, lookup_vendor(entry.mac_address, table)) for entry in entries]


class AssetDiscovery:
    """
    Runs neighbor-table discovery with vendor enrichment.

    The OUI table is loaded once per instance and reused for every lookup.
    Instances hold no other state between runs.
    """

    def __init__(
        self,
        config: Optional[DiscoveryConfig] = None,
        system: Optional[str] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Discovery configuration, defaults to DiscoveryConfig()
            system: Platform name override, defaults to the running platform
            logger: Logger instance for progress output
        """
        self.config = config or DiscoveryConfig()
        self.logger = logger or get_logger(__name__)
        self.system = system
        self._oui_table: Optional[OuiTable] = None

    def load_oui_table(self, path: Optional[Union[str, Path]] = None) -> OuiTable:
        """
        Load the OUI table once and cache it.

        Args:
            path: Database path, defaults to ``config.oui_database``

        Returns:
            The loaded table

        Raises:
            OuiDatabaseError: If the database file cannot be opened
        """
        if self._oui_table is None:
            db_path = path or self.config.oui_database
            self._oui_table = load_oui_database(db_path)
            self.logger.info(f"Loaded {len(self._oui_table)} OUI records from {db_path}")
        return self._oui_table

    def _build_acquirer(self) -> NeighborTableAcquirer:
        acquirer = NeighborTableAcquirer(system=self.system, timeout=self.config.command_timeout, logger=self.logger)
        override = self.config.commands.get(acquirer.system)
        if override:
            acquirer.commands = override
        return acquirer

    def discover(
        self, parser: Optional[LineParser] = None, table: Optional[OuiTable] = None
    ) -> DiscoveryResult:
        """
        Read the neighbor table and resolve vendors.

        Args:
            parser: Line parser to use, defaults to the one for the platform
            table: OUI table to use, defaults to loading ``config.oui_database``

        Returns:
            DiscoveryResult with status COMPLETED, EMPTY or FAILED. An
            unreadable OUI database only degrades vendors to "Unknown".
        """
        start_time = time.time()
        result = DiscoveryResult()

        try:
            acquirer = self._build_acquirer()
            parser = parser or select_line_parser(acquirer.system)
            result.metadata["platform"] = acquirer.system
            result.metadata["parser"] = type(parser).__name__

            lines = acquirer.acquire()
            result.lines_read = len(lines)
            if acquirer.last_command:
                result.metadata["command"] = " ".join(acquirer.last_command)
        except AcquisitionError as e:
            result.status = DiscoveryStatus.FAILED
            result.errors.append(str(e))
            result.failure = e
            result.scan_duration = time.time() - start_time
            self.logger.debug(f"Neighbor table discovery failed: {e}")
            return result

        entries = discover_entries(lines, parser)
        self.logger.debug(f"Parsed {len(entries)} entries from {len(lines)} lines")

        if not entries:
            result.status = DiscoveryStatus.EMPTY
            result.scan_duration = time.time() - start_time
            self.logger.info("Neighbor table is empty")
            return result

        if table is None:
            try:
                table = self.load_oui_table()
            except OuiDatabaseError as e:
                self.logger.warning(f"Vendor lookup disabled: {e}")
                result.errors.append(str(e))
                table = OuiTable()
        result.metadata["oui_records"] = len(table)

        result.devices = resolve_vendors(entries, table)
        result.status = DiscoveryStatus.COMPLETED
        result.scan_duration = time.time() - start_time
        self.logger.info(
            f"Discovered {len(result.devices)} devices in {result.scan_duration:.2f} seconds"
        )
        return result

    def expand(self, cidr: str) -> Iterator[str]:
        """
        Validate a CIDR block and return a lazy iterator over its addresses.

        Args:
            cidr: CIDR block such as "192.168.1.0/24"

        Returns:
            Iterator of dotted-decimal addresses in ascending order

        Raises:
            InvalidFormatError: If the block is malformed
        """
        block = parse_cidr(cidr)
        self.logger.info(f"Expanding {cidr} into {block.num_addresses} addresses")
        return iter_block(block)

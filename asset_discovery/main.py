"""
Main entry point for the asset discovery tool.

Reads the OS neighbor cache, prints the discovered devices with their
vendors, then expands a CIDR block into an address list file. The two steps
are independent: a failure in one is reported and the other still runs.
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config.config_loader import ConfigLoader, OutputConfig
from .core.data_models import DiscoveryResult, DiscoveryStatus
from .core.discovery import AssetDiscovery
from .utils.error_handler import (
    ErrorContext, ErrorHandler, ErrorSeverity, ErrorType,
    AssetDiscoveryError, ConfigurationError, InvalidFormatError,
)
from .utils.logger import LogLevel, get_logger, set_log_level
from .utils.report_writer import ReportWriter

TABLE_HEADERS = ["No.", "MAC Address", "IP Address", "Vendor"]
TABLE_WIDTHS = [4, 20, 16, 30]


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


class AssetDiscoveryApp:
    """
    Main application class for the asset discovery tool.

    Handles configuration, runs both pipelines and reports their outcome.
    """

    def __init__(self):
        """Initialize the application."""
        self.logger = get_logger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.report_writer = ReportWriter()

    def _load_configuration(self, args: argparse.Namespace):
        """
        Load the YAML configuration and apply command line overrides.

        Args:
            args: Parsed command line arguments

        Returns:
            tuple: (DiscoveryConfig, OutputConfig)
        """
        loader = ConfigLoader(args.config_dir, logger=self.logger)
        discovery_config = loader.load_discovery_config()
        output_config = loader.load_output_config()

        if args.oui_db:
            discovery_config.oui_database = args.oui_db
        if args.timeout is not None:
            discovery_config.command_timeout = args.timeout
        if args.output:
            output_config.address_file = args.output
        if args.json_report:
            output_config.device_report = args.json_report

        return discovery_config, output_config

    def _print_devices(self, result: DiscoveryResult) -> None:
        self.logger.table_header(TABLE_HEADERS, TABLE_WIDTHS)
        for number, device in enumerate(result.devices, start=1):
            self.logger.table_row(
                [str(number), device.mac_address, device.ip_address, device.vendor_display],
                TABLE_WIDTHS,
            )

    def run_discovery(self, discovery: AssetDiscovery, output_config: OutputConfig) -> bool:
        """
        Run the neighbor-table pipeline and print the device table.

        Args:
            discovery: Configured orchestrator
            output_config: Output configuration (for the optional JSON report)

        Returns:
            bool: True unless the neighbor table could not be read
        """
        self.logger.section("ARP cache scan (reading OS ARP table)")

        result = discovery.discover()

        if result.status == DiscoveryStatus.FAILED:
            error = result.failure or AssetDiscoveryError("; ".join(result.errors))
            context = getattr(error, "error_context", None) or ErrorContext(
                error_type=ErrorType.ACQUISITION_ERROR,
                severity=ErrorSeverity.HIGH,
                operation="discover",
                component="AssetDiscoveryApp",
            )
            self.error_handler.handle_error(error, context)
            return False

        if result.status == DiscoveryStatus.EMPTY:
            self.logger.info(
                "No ARP entries found (ARP cache empty). "
                "Try running a ping sweep to populate it."
            )
        else:
            self._print_devices(result)

        if output_config.device_report:
            try:
                self.report_writer.write_device_report(output_config.device_report, result)
            except OSError as e:
                self._report_write_error(e, output_config.device_report)
                return False

        return True

    def run_expansion(self, discovery: AssetDiscovery, cidr: str, output_config: OutputConfig) -> bool:
        """
        Expand a CIDR block and write the address list file.

        Args:
            discovery: Configured orchestrator
            cidr: CIDR block from the command line
            output_config: Output configuration

        Returns:
            bool: True if the address list was written
        """
        self.logger.section(f"CIDR expansion: {cidr}")

        try:
            addresses = discovery.expand(cidr)
        except InvalidFormatError as e:
            self.error_handler.handle_error(e, ErrorContext(
                error_type=ErrorType.INVALID_FORMAT,
                severity=ErrorSeverity.HIGH,
                operation="expand",
                component="cidr_expander",
                additional_info={"cidr": cidr},
            ))
            return False

        try:
            self.report_writer.write_address_list(output_config.address_file, addresses)
        except OSError as e:
            self._report_write_error(e, output_config.address_file)
            return False

        return True

    def _report_write_error(self, error: OSError, path: str) -> None:
        self.error_handler.handle_error(error, ErrorContext(
            error_type=ErrorType.FILE_ERROR,
            severity=ErrorSeverity.HIGH,
            operation="write",
            component="ReportWriter",
            additional_info={"file_path": path},
        ))

    def run(self, args: argparse.Namespace) -> int:
        """
        Run the asset discovery application.

        Args:
            args: Parsed command line arguments

        Returns:
            int: Exit code (0 for success, non-zero for failure)
        """
        try:
            discovery_config, output_config = self._load_configuration(args)
        except ConfigurationError as e:
            self.error_handler.handle_error(e, e.error_context)
            return 1

        try:
            discovery = AssetDiscovery(config=discovery_config, logger=self.logger)

            succeeded = True
            if not args.skip_discovery:
                succeeded = self.run_discovery(discovery, output_config) and succeeded
            if not args.skip_expansion:
                succeeded = self.run_expansion(discovery, args.cidr, output_config) and succeeded

            if succeeded:
                self.logger.success("Asset discovery completed")
                return 0
            self.logger.error(
                f"Asset discovery completed with {self.error_handler.total_errors()} error(s)"
            )
            return 1

        except KeyboardInterrupt:
            self.logger.warning("Interrupted by user")
            return 130


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="asset_discovery",
        description="Asset discovery - read the OS ARP cache with vendor lookup and expand a CIDR block",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m asset_discovery 192.168.1.0/24                      # Scan ARP cache, write all_ips.txt
  python -m asset_discovery 10.0.0.0/28 --oui-db /data/oui.txt  # Use another OUI database
  python -m asset_discovery 10.0.0.0/28 --output hosts.txt      # Write the address list elsewhere
  python -m asset_discovery --skip-expansion                    # Only read the ARP cache
        """
    )

    parser.add_argument(
        "cidr",
        nargs="?",
        help="CIDR block to expand, e.g. 192.168.1.0/24"
    )

    parser.add_argument(
        "--config-dir",
        type=str,
        help="Directory containing discovery_config.yml. Defaults to asset_discovery/config/"
    )

    parser.add_argument(
        "--oui-db",
        type=str,
        help="Path to the IEEE OUI database (default: ./oui.txt)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help="File for the expanded address list (default: ./all_ips.txt)"
    )

    parser.add_argument(
        "--json-report",
        type=str,
        help="Also write discovered devices to this JSON file"
    )

    parser.add_argument(
        "--timeout",
        type=positive_int,
        help="Seconds to wait for the neighbor-table command (default: no limit)"
    )

    parser.add_argument(
        "--skip-discovery",
        action="store_true",
        help="Do not read the ARP cache"
    )

    parser.add_argument(
        "--skip-expansion",
        action="store_true",
        help="Do not expand a CIDR block"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging output"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"asset_discovery {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the asset discovery tool.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.skip_expansion and not args.cidr:
        parser.error("a CIDR block is required unless --skip-expansion is given")

    if args.verbose:
        set_log_level(LogLevel.DEBUG)

    app = AssetDiscoveryApp()
    return app.run(args)


if __name__ == "__main__":
    sys.exit(main())

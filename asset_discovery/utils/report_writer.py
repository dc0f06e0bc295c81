"""
Result file writers for the asset discovery package.

Writes the expanded address list as plain text (one address per line, no
header) and, optionally, the discovered devices as a JSON report.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, Union

from ..core.data_models import DiscoveryResult
from .logger import get_logger


class ReportWriter:
    """
    Writes discovery and expansion results to disk.

    Existing files are overwritten. Parent directories are created on demand.
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def write_address_list(self, path: Union[str, Path], addresses: Iterable[str]) -> int:
        """
        Stream addresses to a text file, one per line.

        Args:
            path: Destination file
            addresses: Addresses in the order they should be written

        Returns:
            int: Number of lines written

        Raises:
            OSError: If the file cannot be written
        """
        filepath = Path(path)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        count = 0
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for address in addresses:
                    f.write(f"{address}\n")
                    count += 1
        except OSError as e:
            self.logger.error(f"Failed to write address list to {filepath}: {e}")
            raise

        self.logger.info(f"Wrote {count} addresses to {filepath}")
        return count

    def write_device_report(self, path: Union[str, Path], result: DiscoveryResult) -> str:
        """
        Write discovered devices as a JSON report.

        Args:
            path: Destination file
            result: Discovery result to serialize

        Returns:
            str: Path to the generated JSON file

        Raises:
            OSError: If the file cannot be written
        """
        filepath = Path(path)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        json_data = self._convert_to_json_format(result)

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(json_data, f, indent=2, ensure_ascii=False, default=str)
        except OSError as e:
            self.logger.error(f"Failed to write device report to {filepath}: {e}")
            raise

        self.logger.info(f"Device report written to {filepath}")
        return str(filepath)

    def _convert_to_json_format(self, result: DiscoveryResult) -> Dict[str, Any]:
        """
        Convert a DiscoveryResult to a JSON-serializable dictionary.

        Args:
            result: Discovery result

        Returns:
            Dict with ``scan_metadata`` and ``devices`` keys
        """
        return {
            "scan_metadata": {
                "timestamp": datetime.now().isoformat(timespec="seconds"),
                "status": result.status.value,
                "scan_duration": round(result.scan_duration, 3),
                "lines_read": result.lines_read,
                "errors": list(result.errors),
                **result.metadata,
            },
            "devices": [
                {
                    "mac_address": device.mac_address,
                    "ip_address": device.ip_address,
                    "vendor": device.vendor_display,
                }
                for device in result.devices
            ],
        }

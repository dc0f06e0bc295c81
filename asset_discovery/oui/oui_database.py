"""
Loader for the IEEE OUI vendor database.

The IEEE ``oui.txt`` file carries each assignment twice::

    28-6F-B9   (hex)        Nokia Shanghai Bell Co., Ltd.
    286FB9     (base 16)    Nokia Shanghai Bell Co., Ltd.

Only lines that start with a hyphenated ``HH-HH-HH`` token are records.
"""

import re
from pathlib import Path
from typing import Optional, Union

from ..core.data_models import OuiRecord, OuiTable
from ..utils.error_handler import ErrorContext, ErrorSeverity, ErrorType, OuiDatabaseError
from ..utils.logger import get_logger

logger = get_logger(__name__)

_PREFIX_PATTERN = re.compile(r"\s*([0-9A-Fa-f]{2})-([0-9A-Fa-f]{2})-([0-9A-Fa-f]{2})")
_VENDOR_MARKERS = ("(hex)", "(base 16)")
# Text after the third whitespace-delimited token
_THIRD_TOKEN_REST = re.compile(r"\s*\S+\s+\S+\s+\S+(.*)", re.DOTALL)


def extract_vendor(line: str) -> str:
    """
    Pull the vendor name out of a database line.

    The text after a ``(hex)`` or ``(base 16)`` marker is preferred. Without
    a marker, the text after the third whitespace-delimited token is used.

    Args:
        line: A candidate record line

    Returns:
        str: Trimmed vendor name, empty when none was found
    """
    for marker in _VENDOR_MARKERS:
        index = line.find(marker)
        if index >= 0:
            return line[index + len(marker):].strip()

    match = _THIRD_TOKEN_REST.match(line)
    if not match:
        return ""
    return match.group(1).strip()


def parse_oui_line(line: str) -> Optional[OuiRecord]:
    """
    Parse one line of the OUI database.

    Args:
        line: Raw line, with or without newline

    Returns:
        OuiRecord, or None for lines that are not records or have no vendor
    """
    match = _PREFIX_PATTERN.match(line)
    if not match:
        return None

    vendor = extract_vendor(line)
    if not vendor:
        return None

    return OuiRecord(prefix="".join(match.groups()).upper(), vendor=vendor)


def load_oui_database(path: Union[str, Path]) -> OuiTable:
    """
    Load an OUI database file into a lookup table.

    Args:
        path: Path to an ``oui.txt`` style file

    Returns:
        OuiTable with records in file order; empty when the file has none

    Raises:
        OuiDatabaseError: If the file cannot be opened or read
    """
    records = []
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                record = parse_oui_line(line)
                if record is not None:
                    records.append(record)
    except OSError as e:
        raise OuiDatabaseError(
            f"Could not read OUI database {path}: {e}",
            ErrorContext(
                error_type=ErrorType.FILE_ERROR,
                severity=ErrorSeverity.MEDIUM,
                operation="load_oui_database",
                component="oui_database",
                additional_info={"file_path": str(path)},
            ),
        ) from e

    logger.debug(f"Loaded {len(records)} OUI records from {path}")
    return OuiTable(records=tuple(records))

"""
Configuration loader for the asset discovery package.
Handles loading and validation of the YAML configuration file with fallback to defaults.
"""

import shlex
import yaml
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from pathlib import Path

from ..utils.error_handler import ConfigurationError, ErrorContext, ErrorSeverity, ErrorType
from ..utils.logger import Logger, get_logger

CONFIG_FILE = "discovery_config.yml"


@dataclass
class DiscoveryConfig:
    """Configuration for neighbor-table discovery and vendor lookup."""
    oui_database: str = "oui.txt"
    command_timeout: Optional[int] = None  # None waits for the command to exit
    commands: Dict[str, List[List[str]]] = field(default_factory=dict)


@dataclass
class OutputConfig:
    """Configuration for result files."""
    address_file: str = "all_ips.txt"
    device_report: Optional[str] = None


class ConfigLoader:
    """
    Loads and validates the YAML configuration file.
    Provides fallback to default configurations when the file is missing or invalid.
    """

    def __init__(self, config_dir: Optional[str] = None, logger: Optional[Logger] = None):
        """
        Initialize ConfigLoader.

        Args:
            config_dir: Directory containing the configuration file.
                       Defaults to the config directory relative to this file.
            logger: Logger used for validation warnings

        Raises:
            ConfigurationError: If an explicit config_dir is not a directory
        """
        if config_dir is None:
            self.config_dir = Path(__file__).parent
        else:
            self.config_dir = Path(config_dir)
            if not self.config_dir.is_dir():
                raise ConfigurationError(
                    f"Configuration directory does not exist: {config_dir}",
                    ErrorContext(
                        error_type=ErrorType.CONFIGURATION_ERROR,
                        severity=ErrorSeverity.HIGH,
                        operation="load_configuration",
                        component="ConfigLoader",
                        additional_info={"config_file": str(self.config_dir / CONFIG_FILE)},
                    ),
                )

        self.logger = logger or get_logger(__name__)

    def _read_section(self, config_file: str, section: str) -> Optional[Dict[str, Any]]:
        """
        Read one top-level section of the YAML file.

        Args:
            config_file: Name of the configuration file
            section: Top-level key to return

        Returns:
            The section mapping, or None when the defaults should be used
        """
        config_path = self.config_dir / config_file

        if not config_path.exists():
            self.logger.debug(f"Config file not found at {config_path}. Using default {section} configuration.")
            return None

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing config file {config_path}: {e}")
            self.logger.warning(f"Using default {section} configuration.")
            return None
        except OSError as e:
            self.logger.error(f"Could not read config file {config_path}: {e}")
            self.logger.warning(f"Using default {section} configuration.")
            return None

        if not isinstance(config_data, dict) or not isinstance(config_data.get(section), dict):
            self.logger.warning(f"No '{section}' section in {config_path}. Using default {section} configuration.")
            return None

        return config_data[section]

    def load_discovery_config(self, config_file: str = CONFIG_FILE) -> DiscoveryConfig:
        """
        Load discovery configuration from YAML file.

        Args:
            config_file: Name of the configuration file

        Returns:
            DiscoveryConfig object with loaded or default configuration
        """
        data = self._read_section(config_file, 'discovery')
        if data is None:
            return DiscoveryConfig()

        return DiscoveryConfig(
            oui_database=self._validate_path(data.get('oui_database', 'oui.txt'), 'oui_database', 'oui.txt'),
            command_timeout=self._validate_optional_positive_int(data.get('command_timeout'), 'command_timeout'),
            commands=self._validate_commands(data.get('commands', {}))
        )

    def load_output_config(self, config_file: str = CONFIG_FILE) -> OutputConfig:
        """
        Load output configuration from YAML file.

        Args:
            config_file: Name of the configuration file

        Returns:
            OutputConfig object with loaded or default configuration
        """
        data = self._read_section(config_file, 'output')
        if data is None:
            return OutputConfig()

        device_report = data.get('device_report')
        return OutputConfig(
            address_file=self._validate_path(data.get('address_file', 'all_ips.txt'), 'address_file', 'all_ips.txt'),
            device_report=str(device_report) if device_report else None
        )

    def _validate_path(self, value: Any, field_name: str, default: str) -> str:
        """
        Validate that a value is a non-empty path string.

        Args:
            value: Value to validate
            field_name: Name of the field for error messages
            default: Default value to use if validation fails

        Returns:
            Validated path or default
        """
        if isinstance(value, (str, Path)) and str(value).strip():
            return str(value)
        self.logger.warning(f"Invalid {field_name}: {value!r}. Must be a path. Using default: {default}")
        return default

    def _validate_optional_positive_int(self, value: Any, field_name: str) -> Optional[int]:
        """
        Validate an optional positive integer.

        Args:
            value: Value to validate, None disables the setting
            field_name: Name of the field for error messages

        Returns:
            Validated integer value or None
        """
        if value is None:
            return None
        try:
            int_value = int(value)
        except (ValueError, TypeError):
            self.logger.warning(f"Invalid {field_name}: {value}. Must be an integer. Ignoring.")
            return None
        if int_value <= 0:
            self.logger.warning(f"Invalid {field_name}: {value}. Must be positive. Ignoring.")
            return None
        return int_value

    def _validate_commands(self, commands: Any) -> Dict[str, List[List[str]]]:
        """
        Validate per-platform neighbor-table command overrides.

        Each platform maps to a single shell-style command string, or to a
        list of fallback commands tried in order, where every item is either
        a shell-style string or a list of arguments.

        Args:
            commands: Raw ``commands`` mapping from the YAML file

        Returns:
            Mapping of lower-case platform name to a list of argument lists
        """
        if not commands:
            return {}
        if not isinstance(commands, dict):
            self.logger.warning(f"Invalid commands: {commands!r}. Must be a mapping. Using built-in commands.")
            return {}

        validated = {}
        for system, value in commands.items():
            if isinstance(value, str):
                candidates = [value]
            elif isinstance(value, list):
                candidates = value
            else:
                self.logger.warning(f"Invalid command for {system}: {value!r}. Skipping.")
                continue

            parsed = []
            for candidate in candidates:
                if isinstance(candidate, str) and candidate.strip():
                    try:
                        parsed.append(shlex.split(candidate))
                    except ValueError as e:
                        self.logger.warning(f"Invalid command for {system}: {candidate!r} ({e}). Skipping.")
                elif isinstance(candidate, list) and candidate and all(isinstance(arg, str) for arg in candidate):
                    parsed.append(list(candidate))
                else:
                    self.logger.warning(f"Invalid command for {system}: {candidate!r}. Skipping.")

            if parsed:
                validated[str(system).lower()] = parsed

        return validated

    def create_default_configs(self) -> Path:
        """
        Create the default configuration file if it doesn't exist.

        Returns:
            Path of the configuration file
        """
        config_path = self.config_dir / CONFIG_FILE
        if config_path.exists():
            return config_path

        default_config = {
            'discovery': {
                'oui_database': 'oui.txt',
                'command_timeout': None,
                'commands': {},
            },
            'output': {
                'address_file': 'all_ips.txt',
                'device_report': None,
            }
        }

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.dump(default_config, f, default_flow_style=False, indent=2)
            self.logger.info(f"Created default config at {config_path}")
        except OSError as e:
            self.logger.error(f"Failed to create default config: {e}")
        return config_path

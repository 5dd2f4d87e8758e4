"""
Configuration management for ENI limits
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from enilimits.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TRUE_VALUES = ("1", "true", "yes")

def parse_mapping_string(value: str) -> Dict[str, str]:
    """
    Parse user-defined limit mappings from a single string

    Entries are separated by semicolons, each of the form
    "<instance type>=<adapters>,<ipv4>,<ipv6>", e.g.
    "m5.large=4,15,15; c5.xlarge=4,15,15". Limit strings are kept as-is;
    they are validated when applied to the registry.

    Args:
        value: Mapping string

    Returns:
        Dictionary of instance type to limit string

    Raises:
        ConfigurationError: If an entry is not of the form type=limits
    """
    mappings = {}
    for entry in value.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        instance_type, sep, limit_string = entry.partition("=")
        if not sep or not instance_type.strip() or not limit_string.strip():
            raise ConfigurationError(f"Invalid instance limit mapping entry: {entry!r}")
        mappings[instance_type.strip()] = limit_string.strip()
    return mappings

class Config:
    """Configuration management for ENI limits"""

    def __init__(self, config_file: Optional[Path] = None, debug: bool = False):
        """
        Initialize configuration with optional config file

        Args:
            config_file: Path to configuration file (YAML)
            debug: Enable debug mode
        """
        self.debug = debug

        # Default settings
        self._initialize_defaults()

        # Load configuration file if provided
        if config_file:
            self._load_config_file(config_file)

        # Load environment variables
        self._load_environment()

        # Validate configuration
        self._validate_configuration()

    def _initialize_defaults(self):
        """Initialize default configuration values"""
        # Output settings
        self.monochrome = False
        self.json_output = False
        self.json_pretty = False

        # Limit sources
        self.aws_instance_limit_mapping: Dict[str, str] = {}
        self.update_ec2_adapter_limit_via_api = False

        # EC2 API settings
        self.aws_region = None
        self.ec2_api_endpoint = None
        self.ec2_max_retries = 3
        self.ec2_timeout = 30

        # Paths and directories
        self.config_dir = Path.home() / ".enilimits"
        self.log_file = self.config_dir / "enilimits_debug.log"

    def _load_config_file(self, config_file: Path):
        """
        Load configuration from YAML file

        Args:
            config_file: Path to configuration file

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError("Configuration file must contain a YAML dictionary")

        # Update configuration with file values
        self._update_from_dict(config_data)

    def _load_environment(self):
        """Load configuration from environment variables"""
        self.aws_region = os.environ.get(
            "ENILIMITS_AWS_REGION", os.environ.get("AWS_REGION", self.aws_region)
        )
        self.ec2_api_endpoint = os.environ.get("ENILIMITS_EC2_API_ENDPOINT", self.ec2_api_endpoint)

        mapping = os.environ.get("ENILIMITS_AWS_INSTANCE_LIMIT_MAPPING")
        if mapping:
            # Environment entries take precedence over file entries for the same type
            self.aws_instance_limit_mapping = {
                **self.aws_instance_limit_mapping,
                **parse_mapping_string(mapping),
            }

        # Boolean settings
        if os.environ.get("ENILIMITS_DEBUG") in TRUE_VALUES:
            self.debug = True
        if os.environ.get("ENILIMITS_MONOCHROME") in TRUE_VALUES:
            self.monochrome = True
        if os.environ.get("ENILIMITS_JSON") in TRUE_VALUES:
            self.json_output = True
        if os.environ.get("ENILIMITS_JSON_PRETTY") in TRUE_VALUES:
            self.json_pretty = True
        if os.environ.get("ENILIMITS_UPDATE_EC2_ADAPTER_LIMIT_VIA_API") in TRUE_VALUES:
            self.update_ec2_adapter_limit_via_api = True

    def _validate_configuration(self):
        """
        Validate configuration values

        Raises:
            ConfigurationError: If configuration is invalid
        """
        mapping = self.aws_instance_limit_mapping
        if mapping is None:
            self.aws_instance_limit_mapping = mapping = {}
        if not isinstance(mapping, dict):
            raise ConfigurationError("aws_instance_limit_mapping must be a dictionary")
        for instance_type, limit_string in mapping.items():
            if not isinstance(instance_type, str) or not isinstance(limit_string, str):
                raise ConfigurationError(
                    f"aws_instance_limit_mapping entries must map strings to strings: {instance_type!r}"
                )

        # Ensure ec2_max_retries is a non-negative integer
        if isinstance(self.ec2_max_retries, bool) or not isinstance(self.ec2_max_retries, int) or self.ec2_max_retries < 0:
            raise ConfigurationError("ec2_max_retries must be a non-negative integer")

        # Ensure ec2_timeout is a positive number
        if isinstance(self.ec2_timeout, bool) or not isinstance(self.ec2_timeout, (int, float)) or self.ec2_timeout <= 0:
            raise ConfigurationError("ec2_timeout must be a positive number")

    def _update_from_dict(self, config_data: Dict[str, Any]):
        """
        Update configuration from dictionary

        Args:
            config_data: Dictionary containing configuration values
        """
        for key, value in config_data.items():
            if hasattr(self, key) and not key.startswith('_'):
                if key in ("config_dir", "log_file") and value is not None:
                    value = Path(value)
                setattr(self, key, value)
            else:
                logger.debug(f"Ignoring unknown configuration key: {key}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary

        Returns:
            Dictionary representation of configuration
        """
        result = {}
        for key, value in self.__dict__.items():
            if not key.startswith('_'):
                result[key] = str(value) if isinstance(value, Path) else value
        return result

    def save(self, config_file: Optional[Path] = None):
        """
        Save configuration to file

        Args:
            config_file: Path to save configuration to (default: ~/.enilimits/config.yaml)

        Raises:
            ConfigurationError: If the file cannot be written
        """
        if config_file is None:
            config_file = self.config_dir / "config.yaml"

        try:
            config_file.parent.mkdir(exist_ok=True, parents=True)

            with open(config_file, 'w') as f:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False)

        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error saving configuration: {e}")

"""
Command-line interface for ENI limits
"""

import argparse
import json
import logging
from typing import Dict, List, Optional

from colorama import Fore, Style, init as colorama_init

from enilimits.core.config import Config, parse_mapping_string
from enilimits.core.exceptions import ENILimitsError, ConfigurationError
from enilimits.core.models import Limits
from enilimits.services.limits import LimitsRegistry
from enilimits.utils.ec2_client import EC2Client, EC2ClientConfig

# Initialize colorama for cross-platform color support
colorama_init(autoreset=True)

# Console color definitions
class Colors:
    GREEN = Fore.GREEN
    RED = Fore.RED
    DIM = Style.DIM
    RESET = Style.RESET_ALL

class CLI:
    """Command-line interface for ENI limits"""

    def __init__(self, config: Config, registry: Optional[LimitsRegistry] = None, ec2_client: Optional[EC2Client] = None):
        """
        Initialize CLI

        Args:
            config: Configuration object
            registry: Limits registry (default: a new registry seeded from the static table)
            ec2_client: Client used for --refresh (default: built from config on demand)
        """
        self.config = config
        self.registry = registry if registry is not None else LimitsRegistry()
        self.ec2_client = ec2_client

    def run(self, args: List[str]) -> int:
        """
        Run CLI with arguments

        Args:
            args: Command-line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parser = self._create_parser()
        parsed_args = parser.parse_args(args)

        if not parsed_args.command:
            parser.print_help()
            return 1

        try:
            self._update_config_from_args(parsed_args)
            self._apply_limit_sources()

            if parsed_args.command == "lookup":
                return self._run_lookup(parsed_args.instance_types)
            return self._run_dump()

        except ConfigurationError as e:
            print(f"Configuration error: {e}")
            return 1
        except ENILimitsError as e:
            print(f"Error: {e}")
            return 1

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            prog="enilimits",
            description="Network interface and IP address limits per EC2 instance type"
        )

        parser.add_argument("--mapping", action="append", default=[], metavar="TYPE=A,B,C",
                            help="Override limits for an instance type (adapters,ipv4,ipv6); repeatable")
        parser.add_argument("--refresh", action="store_true", help="Update limits from the EC2 DescribeInstanceTypes API")
        parser.add_argument("-m", "--monochrome", action="store_true", help="Disable colored output")
        parser.add_argument("-j", "--json", action="store_true", help="Set output to compact JSON mode")
        parser.add_argument("-J", "--json-pretty", action="store_true", help="Set output to pretty-printed JSON mode")

        subparsers = parser.add_subparsers(dest="command")
        lookup_parser = subparsers.add_parser("lookup", help="Show limits for instance types")
        lookup_parser.add_argument("instance_types", nargs="+", metavar="TYPE", help="Instance type, e.g. m5.large")
        subparsers.add_parser("dump", help="Show limits for all known instance types")

        return parser

    def _update_config_from_args(self, args: argparse.Namespace):
        """
        Update configuration from command-line arguments

        Args:
            args: Parsed command-line arguments
        """
        if args.monochrome:
            self.config.monochrome = True
        if args.json or args.json_pretty:
            self.config.json_output = True
        if args.json_pretty:
            self.config.json_pretty = True
        if args.refresh:
            self.config.update_ec2_adapter_limit_via_api = True
        if args.mapping:
            self.config.aws_instance_limit_mapping = {
                **self.config.aws_instance_limit_mapping,
                **parse_mapping_string(";".join(args.mapping)),
            }

    def _apply_limit_sources(self):
        """Apply the EC2 API refresh and user-defined mappings to the registry"""
        if self.config.update_ec2_adapter_limit_via_api:
            if self.ec2_client is not None:
                self.registry.update_from_ec2_api(self.ec2_client, timeout=self.config.ec2_timeout)
            else:
                with EC2Client(EC2ClientConfig.from_config(self.config)) as client:
                    self.registry.update_from_ec2_api(client, timeout=self.config.ec2_timeout)
            logging.info("Updated instance limits from the EC2 API")

        # User-defined mappings win over API values
        if self.config.aws_instance_limit_mapping:
            self.registry.update_from_user_defined_mappings(self.config.aws_instance_limit_mapping)
            logging.info(f"Applied {len(self.config.aws_instance_limit_mapping)} user-defined instance limit mappings")

    def _run_lookup(self, instance_types: List[str]) -> int:
        """
        Show limits for the given instance types

        Returns:
            Exit code (1 if any instance type is unknown)
        """
        results: Dict[str, Optional[Limits]] = {}
        for instance_type in instance_types:
            limit, found = self.registry.get(instance_type)
            results[instance_type] = limit if found else None

        if self.config.json_output:
            self._print_json({k: (v.to_dict() if v is not None else None) for k, v in results.items()})
        else:
            for instance_type, limit in results.items():
                if limit is None:
                    print(self._color(Colors.RED, f"{instance_type}: not found"))
                else:
                    print(self._format_limit(instance_type, limit))

        return 0 if all(limit is not None for limit in results.values()) else 1

    def _run_dump(self) -> int:
        """
        Show limits for all instance types

        Returns:
            Exit code (0 for success)
        """
        limits = self.registry.snapshot()

        if self.config.json_output:
            self._print_json({k: limits[k].to_dict() for k in sorted(limits)})
        else:
            for instance_type in sorted(limits):
                print(self._format_limit(instance_type, limits[instance_type]))
        return 0

    def _format_limit(self, instance_type: str, limit: Limits) -> str:
        hypervisor = limit.hypervisor_type or "-"
        return (
            f"{self._color(Colors.GREEN, instance_type)}: "
            f"adapters={limit.adapters} ipv4={limit.ipv4} ipv6={limit.ipv6} "
            f"{self._color(Colors.DIM, 'hypervisor=' + hypervisor)}"
        )

    def _color(self, color: str, text: str) -> str:
        if self.config.monochrome:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _print_json(self, data):
        if self.config.json_pretty:
            print(json.dumps(data, indent=2))
        else:
            print(json.dumps(data))

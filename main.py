#!/usr/bin/env python3
"""
ENI limits - network interface and IP address limits per EC2 instance type

Looks up how many network interfaces an instance type can attach and how many
IPv4/IPv6 addresses each interface can hold, optionally refreshed from the
EC2 API and overridden by user-defined mappings.
"""

import argparse
import logging
import sys
from pathlib import Path

from enilimits.core.config import Config
from enilimits.core.exceptions import ConfigurationError
from enilimits.interfaces.cli import CLI

def main():
    """Main entry point for ENI limits"""
    # Parse initial arguments to determine mode
    parser = argparse.ArgumentParser(description="ENI limits", add_help=False)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=str, help="Path to configuration file")
    parser.add_argument("--version", action="store_true", help="Show version information")

    # Parse just the known args for initial setup
    args, remaining = parser.parse_known_args()

    # Show version info if requested
    if args.version:
        from enilimits import __version__
        print(f"enilimits version {__version__}")
        return 0

    # Setup configuration
    config_path = Path(args.config) if args.config else None
    try:
        config = Config(config_path, debug=args.debug)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    # Setup logging
    if config.debug:
        config.log_file.parent.mkdir(exist_ok=True, parents=True)
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(config.log_file),
                logging.StreamHandler()
            ],
            force=True
        )
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(levelname)s - %(message)s",
            force=True
        )

    cli = CLI(config)
    return cli.run(remaining)

if __name__ == "__main__":
    sys.exit(main())

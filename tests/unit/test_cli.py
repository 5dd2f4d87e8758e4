"""
Unit tests for the command-line interface
"""

import io
import json
import os
import unittest
from unittest.mock import patch

from enilimits.core.config import Config
from enilimits.core.exceptions import APIError
from enilimits.core.models import InstanceTypeInfo, Limits
from enilimits.interfaces.cli import CLI
from enilimits.services import InstanceTypeSource
from enilimits.services.limits import LimitsRegistry

class StaticSource(InstanceTypeSource):
    """Instance type source returning a fixed catalog"""

    def __init__(self, instance_types, error=None):
        self.instance_types = instance_types
        self.error = error

    def get_instance_types(self, timeout=None):
        if self.error:
            raise self.error
        return self.instance_types

@patch.dict(os.environ, {}, clear=True)
class TestCLI(unittest.TestCase):
    """Test CLI class"""

    def setUp(self):
        """Set up for tests"""
        self.registry = LimitsRegistry(seed={
            "m5.large": Limits(3, 10, 10, "nitro"),
            "t2.micro": Limits(2, 2, 2, "xen"),
        })

    def run_cli(self, args, config=None, ec2_client=None):
        config = config or Config()
        cli = CLI(config, registry=self.registry, ec2_client=ec2_client)
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            exit_code = cli.run(args)
        return exit_code, stdout.getvalue()

    def test_lookup(self):
        """Test looking up a known instance type"""
        exit_code, output = self.run_cli(["--monochrome", "lookup", "m5.large"])

        self.assertEqual(exit_code, 0)
        self.assertIn("m5.large: adapters=3 ipv4=10 ipv6=10 hypervisor=nitro", output)

    def test_lookup_unknown(self):
        """Test looking up an unknown instance type"""
        exit_code, output = self.run_cli(["--monochrome", "lookup", "m5.large", "nonexistent-type"])

        self.assertEqual(exit_code, 1)
        self.assertIn("nonexistent-type: not found", output)

    def test_lookup_json(self):
        """Test JSON output for lookups"""
        exit_code, output = self.run_cli(["--json", "lookup", "t2.micro", "nonexistent-type"])

        self.assertEqual(exit_code, 1)
        self.assertEqual(json.loads(output), {
            "t2.micro": {"adapters": 2, "ipv4": 2, "ipv6": 2, "hypervisor_type": "xen"},
            "nonexistent-type": None,
        })

    def test_mapping_override(self):
        """Test --mapping overrides limits before the lookup"""
        exit_code, output = self.run_cli(["--json", "--mapping", "m5.large=1,2,3", "lookup", "m5.large"])

        self.assertEqual(exit_code, 0)
        self.assertEqual(json.loads(output)["m5.large"], {
            "adapters": 1, "ipv4": 2, "ipv6": 3, "hypervisor_type": "",
        })

    def test_invalid_mapping(self):
        """Test an invalid limit string is reported as an error"""
        exit_code, output = self.run_cli(["--mapping", "m5.large=1,2", "lookup", "m5.large"])

        self.assertEqual(exit_code, 1)
        self.assertIn("Error:", output)

    def test_refresh(self):
        """Test --refresh updates limits from the EC2 API"""
        source = StaticSource([InstanceTypeInfo("m5.large", 4, 20, 20, "nitro")])
        exit_code, output = self.run_cli(["--json", "--refresh", "dump"], ec2_client=source)

        self.assertEqual(exit_code, 0)
        data = json.loads(output)
        self.assertEqual(data["m5.large"]["adapters"], 4)
        self.assertEqual(data["t2.micro"]["adapters"], 2)

    def test_mapping_wins_over_refresh(self):
        """Test user-defined mappings are applied after the EC2 API refresh"""
        source = StaticSource([InstanceTypeInfo("m5.large", 4, 20, 20, "nitro")])
        exit_code, _ = self.run_cli(["--refresh", "--mapping", "m5.large=1,1,1", "dump"], ec2_client=source)

        self.assertEqual(exit_code, 0)
        self.assertEqual(self.registry.get("m5.large"), (Limits(1, 1, 1), True))

    def test_refresh_error(self):
        """Test EC2 API errors are reported and leave limits unchanged"""
        source = StaticSource([], error=APIError("EC2", "denied", 403, "UnauthorizedOperation"))
        exit_code, output = self.run_cli(["--refresh", "dump"], ec2_client=source)

        self.assertEqual(exit_code, 1)
        self.assertIn("EC2 API error", output)
        self.assertEqual(self.registry.get("m5.large"), (Limits(3, 10, 10, "nitro"), True))

    def test_dump_sorted(self):
        """Test dump lists all instance types in order"""
        exit_code, output = self.run_cli(["-m", "dump"])

        self.assertEqual(exit_code, 0)
        lines = output.strip().splitlines()
        self.assertEqual([line.split(":")[0] for line in lines], ["m5.large", "t2.micro"])

    def test_no_command(self):
        """Test usage is shown without a command"""
        exit_code, _ = self.run_cli([])
        self.assertEqual(exit_code, 1)

if __name__ == "__main__":
    unittest.main()

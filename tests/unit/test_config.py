"""
Unit tests for Config class
"""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from enilimits.core.config import Config, parse_mapping_string
from enilimits.core.exceptions import ConfigurationError

class TestConfig(unittest.TestCase):
    """Test Config class"""

    def setUp(self):
        """Set up for tests"""
        # Create temp directory for tests
        self.temp_dir = Path(tempfile.mkdtemp())

        # Create test config file
        self.config_file = self.temp_dir / "config.yaml"
        with open(self.config_file, 'w') as f:
            f.write("""
debug: true
monochrome: true
ec2_timeout: 10
aws_region: eu-west-1
update_ec2_adapter_limit_via_api: true
aws_instance_limit_mapping:
  m5.large: "4,15,15"
  c5.xlarge: " 4 , 15 , 15 "
""")

    def tearDown(self):
        """Clean up after tests"""
        shutil.rmtree(self.temp_dir)

    @patch.dict(os.environ, {}, clear=True)
    def test_default_config(self):
        """Test default configuration"""
        config = Config()

        self.assertFalse(config.debug)
        self.assertFalse(config.monochrome)
        self.assertFalse(config.update_ec2_adapter_limit_via_api)
        self.assertEqual(config.aws_instance_limit_mapping, {})
        self.assertEqual(config.ec2_timeout, 30)
        self.assertEqual(config.ec2_max_retries, 3)
        self.assertIsNone(config.aws_region)
        self.assertIsNone(config.ec2_api_endpoint)

    @patch.dict(os.environ, {}, clear=True)
    def test_load_config_file(self):
        """Test loading config from file"""
        config = Config(self.config_file)

        self.assertTrue(config.debug)
        self.assertTrue(config.monochrome)
        self.assertTrue(config.update_ec2_adapter_limit_via_api)
        self.assertEqual(config.ec2_timeout, 10)
        self.assertEqual(config.aws_region, "eu-west-1")
        self.assertEqual(config.aws_instance_limit_mapping, {
            "m5.large": "4,15,15",
            "c5.xlarge": " 4 , 15 , 15 ",
        })

    def test_load_nonexistent_config_file(self):
        """Test loading nonexistent config file raises exception"""
        nonexistent_file = self.temp_dir / "nonexistent.yaml"

        with self.assertRaises(ConfigurationError):
            Config(nonexistent_file)

    def test_load_non_mapping_config_file(self):
        """Test a YAML file that is not a dictionary is rejected"""
        list_file = self.temp_dir / "list.yaml"
        with open(list_file, 'w') as f:
            f.write("- m5.large\n- c5.large\n")

        with self.assertRaises(ConfigurationError):
            Config(list_file)

    @patch.dict(os.environ, {
        "ENILIMITS_DEBUG": "1",
        "ENILIMITS_MONOCHROME": "true",
        "ENILIMITS_AWS_REGION": "us-west-2",
        "ENILIMITS_UPDATE_EC2_ADAPTER_LIMIT_VIA_API": "yes",
        "ENILIMITS_AWS_INSTANCE_LIMIT_MAPPING": "m5.large=2,4,4; x1.custom=1,2,3",
    }, clear=True)
    def test_load_environment_vars(self):
        """Test loading config from environment variables"""
        config = Config(self.config_file)

        self.assertTrue(config.debug)
        self.assertTrue(config.monochrome)
        self.assertTrue(config.update_ec2_adapter_limit_via_api)
        self.assertEqual(config.aws_region, "us-west-2")
        # Environment entries override file entries for the same type
        self.assertEqual(config.aws_instance_limit_mapping, {
            "m5.large": "2,4,4",
            "c5.xlarge": " 4 , 15 , 15 ",
            "x1.custom": "1,2,3",
        })

    @patch.dict(os.environ, {"AWS_REGION": "ap-south-1"}, clear=True)
    def test_aws_region_fallback(self):
        """Test the standard AWS_REGION variable is used as a fallback"""
        config = Config()
        self.assertEqual(config.aws_region, "ap-south-1")

    @patch.dict(os.environ, {"ENILIMITS_AWS_INSTANCE_LIMIT_MAPPING": "m5.large"}, clear=True)
    def test_invalid_environment_mapping(self):
        """Test a malformed mapping in the environment raises exception"""
        with self.assertRaises(ConfigurationError):
            Config()

    def test_validate_configuration(self):
        """Test configuration validation"""
        invalid_values = [
            "ec2_timeout: -5\n",
            "ec2_max_retries: -1\n",
            "ec2_max_retries: many\n",
            "aws_instance_limit_mapping: [m5.large]\n",
            "aws_instance_limit_mapping:\n  m5.large: 4\n",
        ]
        for index, content in enumerate(invalid_values):
            invalid_config_file = self.temp_dir / f"invalid_config_{index}.yaml"
            with open(invalid_config_file, 'w') as f:
                f.write(content)

            with self.assertRaises(ConfigurationError, msg=content):
                Config(invalid_config_file)

    @patch.dict(os.environ, {}, clear=True)
    def test_save_config(self):
        """Test saving configuration to file"""
        config = Config()
        config.debug = True
        config.aws_instance_limit_mapping = {"m5.large": "1,2,3"}

        save_file = self.temp_dir / "saved_config.yaml"
        config.save(save_file)

        loaded_config = Config(save_file)

        self.assertTrue(loaded_config.debug)
        self.assertEqual(loaded_config.aws_instance_limit_mapping, {"m5.large": "1,2,3"})
        self.assertEqual(loaded_config.config_dir, config.config_dir)

class TestParseMappingString(unittest.TestCase):
    """Test parse_mapping_string function"""

    def test_parse(self):
        """Test parsing semicolon-separated mappings"""
        self.assertEqual(
            parse_mapping_string("m5.large=4,15,15;c5.large = 3,10,10 ;"),
            {"m5.large": "4,15,15", "c5.large": "3,10,10"},
        )

    def test_empty(self):
        """Test an empty string yields no mappings"""
        self.assertEqual(parse_mapping_string(""), {})

    def test_invalid_entries(self):
        """Test malformed entries raise exception"""
        for value in ("m5.large", "=4,15,15", "m5.large="):
            with self.assertRaises(ConfigurationError):
                parse_mapping_string(value)

if __name__ == "__main__":
    unittest.main()

#!/usr/bin/env python3

"""
Unit tests for configuration management.

Tests the configuration loading, validation, and environment
variable handling functionality.
"""

import unittest
import tempfile
import os
import json
import sys

import yaml

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from genome_ranges.core.config import RangeConfig, load_config
from genome_ranges.core.exceptions import ConfigurationError

ENV_VARS = ('RANGES_STRING_METHOD', 'RANGES_INTEGER_WIDTH',
            'RANGES_NORMALIZE_STRANDS', 'RANGES_LOG_LEVEL')


class EnvironmentTestCase(unittest.TestCase):
    """Base class that saves and restores RANGES_* environment variables."""

    def setUp(self):
        self.original_env = {key: os.environ.get(key) for key in ENV_VARS}
        for key in ENV_VARS:
            os.environ.pop(key, None)

    def tearDown(self):
        for key, value in self.original_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value


class TestRangeConfig(EnvironmentTestCase):
    """Test RangeConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = RangeConfig()

        self.assertEqual(config.string_method, 'lus')
        self.assertEqual(config.integer_width, 6)
        self.assertFalse(config.normalize_strands)
        self.assertEqual(config.log_level, 'INFO')

    def test_config_validation(self):
        """Test configuration validation."""
        config = RangeConfig()
        config.validate()  # Should not raise

        with self.assertRaises(ConfigurationError):
            RangeConfig(string_method='bed')

        with self.assertRaises(ConfigurationError):
            RangeConfig(integer_width=-1)

        with self.assertRaises(ConfigurationError):
            RangeConfig(integer_width='6')

        with self.assertRaises(ConfigurationError):
            RangeConfig(normalize_strands='yes')

        with self.assertRaises(ConfigurationError):
            RangeConfig(log_level='TRACE')

    def test_config_from_dict(self):
        """Test creating config from dictionary."""
        config_dict = {
            "string_method": "53",
            "integer_width": 10,
            "unknown_key": "ignored"  # Should be filtered out
        }

        config = RangeConfig.from_dict(config_dict)

        self.assertEqual(config.string_method, '53')
        self.assertEqual(config.integer_width, 10)
        # Default values for unspecified parameters
        self.assertFalse(config.normalize_strands)

    def test_config_to_dict(self):
        """Test converting config to dictionary."""
        config_dict = RangeConfig(integer_width=4, normalize_strands=True).to_dict()

        self.assertIsInstance(config_dict, dict)
        self.assertEqual(config_dict["integer_width"], 4)
        self.assertTrue(config_dict["normalize_strands"])
        self.assertIn("log_level", config_dict)

    def test_config_from_json_file(self):
        """Test loading config from JSON file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            json.dump({"integer_width": 8, "normalize_strands": True}, f)
            config_path = f.name

        try:
            config = RangeConfig.from_file(config_path)

            self.assertEqual(config.integer_width, 8)
            self.assertTrue(config.normalize_strands)
            # Default for unspecified
            self.assertEqual(config.string_method, 'lus')
        finally:
            os.unlink(config_path)

    def test_config_from_yaml_file(self):
        """Test loading config from YAML file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            yaml.safe_dump({"string_method": "53", "log_level": "DEBUG"}, f)
            config_path = f.name

        try:
            config = RangeConfig.from_file(config_path)
            self.assertEqual(config.string_method, '53')
            self.assertEqual(config.log_level, 'DEBUG')
        finally:
            os.unlink(config_path)

    def test_config_from_nonexistent_file(self):
        """Test error handling for nonexistent config file."""
        with self.assertRaises(ConfigurationError):
            RangeConfig.from_file("/nonexistent/config.json")

    def test_config_from_invalid_json(self):
        """Test error handling for invalid JSON."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            f.write("{ invalid json }")
            config_path = f.name

        try:
            with self.assertRaises(ConfigurationError):
                RangeConfig.from_file(config_path)
        finally:
            os.unlink(config_path)

    def test_config_from_non_mapping_yaml(self):
        """Test error handling for YAML that is not a mapping."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yml', delete=False) as f:
            f.write("- just\n- a list\n")
            config_path = f.name

        try:
            with self.assertRaises(ConfigurationError):
                RangeConfig.from_file(config_path)
        finally:
            os.unlink(config_path)

    def test_config_save_to_file(self):
        """Test saving config to JSON and YAML files."""
        config = RangeConfig(integer_width=2, string_method='53')

        for suffix in ('.json', '.yaml'):
            with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
                config_path = f.name

            try:
                config.save_to_file(config_path)

                loaded_config = RangeConfig.from_file(config_path)
                self.assertEqual(loaded_config.integer_width, 2)
                self.assertEqual(loaded_config.string_method, '53')
            finally:
                if os.path.exists(config_path):
                    os.unlink(config_path)

    def test_config_from_env(self):
        """Test loading config from environment variables."""
        os.environ['RANGES_STRING_METHOD'] = '53'
        os.environ['RANGES_INTEGER_WIDTH'] = '9'
        os.environ['RANGES_NORMALIZE_STRANDS'] = 'true'
        os.environ['RANGES_LOG_LEVEL'] = 'warning'

        config = RangeConfig.from_env()

        self.assertEqual(config.string_method, '53')
        self.assertEqual(config.integer_width, 9)
        self.assertTrue(config.normalize_strands)
        self.assertEqual(config.log_level, 'WARNING')

    def test_config_from_env_invalid_values(self):
        """Test error handling for invalid environment values."""
        os.environ['RANGES_INTEGER_WIDTH'] = 'invalid'
        with self.assertRaises(ConfigurationError):
            RangeConfig.from_env()

        os.environ['RANGES_INTEGER_WIDTH'] = '4'
        os.environ['RANGES_STRING_METHOD'] = 'bed'
        with self.assertRaises(ConfigurationError):
            RangeConfig.from_env()


class TestLoadConfig(EnvironmentTestCase):
    """Test the load_config function."""

    def test_load_default_config(self):
        """Test loading default configuration."""
        config = load_config()

        self.assertEqual(config.integer_width, 6)
        self.assertEqual(config.string_method, 'lus')

    def test_load_config_priority(self):
        """Test configuration loading priority: file > env > defaults."""
        os.environ['RANGES_INTEGER_WIDTH'] = '12'

        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            json.dump({"integer_width": 3}, f)
            config_path = f.name

        try:
            # File should override environment
            self.assertEqual(load_config(config_path=config_path).integer_width, 3)
            # Environment overrides defaults
            self.assertEqual(load_config().integer_width, 12)
        finally:
            os.unlink(config_path)

    def test_load_config_no_env(self):
        """Test loading config without environment variables."""
        os.environ['RANGES_INTEGER_WIDTH'] = '12'

        config = load_config(use_env=False)

        # Should use default, not environment
        self.assertEqual(config.integer_width, 6)


if __name__ == '__main__':
    unittest.main()

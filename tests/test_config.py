"""
Unit tests for config module.

Tests FunctionConfig validation and configuration loading precedence.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from geohash_udf.api.config import (
    ENV_MISSING_SENTINELS,
    ENV_OUTPUT_LENGTH,
    ENV_STRICT_RANGE,
    FunctionConfig,
    clear_config,
    load_config,
    parse_sentinels,
    save_config,
)
from geohash_udf.api.core.enums import ArgumentType
from geohash_udf.api.core.exceptions import InvalidConfigurationError
from geohash_udf.api.function import GeohashFunction


class TestFunctionConfig(unittest.TestCase):
    """Test suite for FunctionConfig dataclass"""

    def test_defaults(self):
        """Test default values"""
        config = FunctionConfig()
        self.assertEqual(config.output_length, 4)
        self.assertEqual(config.missing_sentinels, ("", "NA"))
        self.assertEqual(config.name, "geohash")
        self.assertTrue(config.strict_range)

    def test_invalid_output_length(self):
        """Test that output length must be a positive integer"""
        for value in (0, -3, True, "4"):
            with self.assertRaises(InvalidConfigurationError):
                FunctionConfig(output_length=value)

    def test_empty_name(self):
        """Test that the function name must not be empty"""
        with self.assertRaises(InvalidConfigurationError):
            FunctionConfig(name="")

    def test_sentinels_become_tuple(self):
        """Test that list sentinels are stored as a tuple"""
        config = FunctionConfig(missing_sentinels=["", "NULL"])
        self.assertEqual(config.missing_sentinels, ("", "NULL"))
        hash(config)

    def test_sentinels_are_stripped(self):
        """Test that whitespace around sentinels is dropped"""
        config = FunctionConfig(missing_sentinels=["NA", " -999 "])
        self.assertEqual(config.missing_sentinels, ("NA", "-999"))

    def test_invalid_sentinels(self):
        """Test that sentinels must be a list of strings"""
        for value in ("NA", ["NA", -999]):
            with self.assertRaises(InvalidConfigurationError):
                FunctionConfig(missing_sentinels=value)

    def test_parse_sentinels(self):
        """Test splitting a comma-separated sentinel list"""
        self.assertEqual(parse_sentinels("NA, -999"), ("NA", "-999"))
        self.assertEqual(parse_sentinels(",NA"), ("", "NA"))

    def test_dict_roundtrip(self):
        """Test conversion to and from dict"""
        config = FunctionConfig(output_length=6, missing_sentinels=("NULL",), strict_range=False)
        data = config.to_dict()
        self.assertEqual(data["missing_sentinels"], ["NULL"])
        self.assertEqual(FunctionConfig.from_dict(data), config)

    def test_from_dict_ignores_unknown_keys(self):
        """Test that unknown keys in stored files are ignored"""
        config = FunctionConfig.from_dict({"output_length": 5, "color": "blue"})
        self.assertEqual(config.output_length, 5)


class TestLoadConfig(unittest.TestCase):
    """Test suite for loading and saving configuration"""

    def setUp(self):
        """Isolate the config file and environment"""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.temp_dir.name) / "config.json"

        path_patcher = patch("geohash_udf.api.config.get_config_path", return_value=self.config_path)
        path_patcher.start()
        self.addCleanup(path_patcher.stop)

        env_patcher = patch.dict(os.environ)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)
        for name in (ENV_OUTPUT_LENGTH, ENV_MISSING_SENTINELS, ENV_STRICT_RANGE):
            os.environ.pop(name, None)

        self.addCleanup(self.temp_dir.cleanup)

    def test_defaults_without_file(self):
        """Test defaults when nothing is configured"""
        self.assertEqual(load_config(), FunctionConfig())

    def test_file_values(self):
        """Test values from the config file"""
        self.config_path.write_text(json.dumps({"output_length": 6, "strict_range": False}))
        config = load_config()
        self.assertEqual(config.output_length, 6)
        self.assertFalse(config.strict_range)

    def test_env_overrides_file(self):
        """Test that environment variables win over the file"""
        self.config_path.write_text(json.dumps({"output_length": 6}))
        os.environ[ENV_OUTPUT_LENGTH] = "8"
        os.environ[ENV_MISSING_SENTINELS] = ",NA,NULL"
        os.environ[ENV_STRICT_RANGE] = "false"

        config = load_config()
        self.assertEqual(config.output_length, 8)
        self.assertEqual(config.missing_sentinels, ("", "NA", "NULL"))
        self.assertFalse(config.strict_range)

    def test_env_sentinels_with_spaces(self):
        """Test that spaced env sentinels still mark cells as missing"""
        os.environ[ENV_MISSING_SENTINELS] = "NA, -999"
        config = load_config()
        self.assertEqual(config.missing_sentinels, ("NA", "-999"))

        function = GeohashFunction(config)
        function.initialize([ArgumentType.STRING, ArgumentType.STRING])
        self.assertIsNone(function.evaluate("-999", "0"))
        self.assertIsNone(function.evaluate(" -999 ", "0"))

    def test_env_ignored_when_disabled(self):
        """Test loading the saved settings without environment overrides"""
        self.config_path.write_text(json.dumps({"output_length": 6}))
        os.environ[ENV_OUTPUT_LENGTH] = "9"
        os.environ[ENV_STRICT_RANGE] = "false"

        config = load_config(use_env=False)
        self.assertEqual(config.output_length, 6)
        self.assertTrue(config.strict_range)
        self.assertEqual(load_config(use_env=False, output_length=2).output_length, 2)

    def test_explicit_overrides_env(self):
        """Test that explicit values win over the environment"""
        os.environ[ENV_OUTPUT_LENGTH] = "8"
        self.assertEqual(load_config(output_length=3).output_length, 3)
        # None means "not given"
        self.assertEqual(load_config(output_length=None).output_length, 8)

    def test_invalid_env_values(self):
        """Test that bad environment values are reported"""
        os.environ[ENV_OUTPUT_LENGTH] = "four"
        with self.assertRaises(InvalidConfigurationError):
            load_config()

        os.environ[ENV_OUTPUT_LENGTH] = "0"
        with self.assertRaises(InvalidConfigurationError):
            load_config()

        del os.environ[ENV_OUTPUT_LENGTH]
        os.environ[ENV_STRICT_RANGE] = "maybe"
        with self.assertRaises(InvalidConfigurationError):
            load_config()

    def test_invalid_file(self):
        """Test that a corrupt config file is reported"""
        self.config_path.write_text("{not json")
        with self.assertRaises(InvalidConfigurationError):
            load_config()

        self.config_path.write_text("[1, 2]")
        with self.assertRaises(InvalidConfigurationError):
            load_config()

    def test_save_and_clear(self):
        """Test saving, reloading and clearing"""
        config = FunctionConfig(output_length=9, missing_sentinels=("", "NULL"))
        with self.assertLogs("geohash_udf.api.config", level="INFO"):
            save_config(config)
        self.assertTrue(self.config_path.exists())
        self.assertEqual(load_config(), config)

        self.assertTrue(clear_config())
        self.assertFalse(self.config_path.exists())
        self.assertFalse(clear_config())


if __name__ == "__main__":
    unittest.main()

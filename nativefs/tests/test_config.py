#!/usr/bin/env python3
"""
nativefs Configuration Tests

Run with: python -m pytest nativefs/tests/test_config.py -v

Version: 1.0.0
"""

import json
import os
import tempfile
import unittest

from nativefs.core.config_loader import ConfigLoader, Config, get_config
from nativefs.exceptions import ConfigurationError, ConfigValidationError
from nativefs.filesystem.path import Path, PosixPath, WindowsPath, native_path_type


class TestConfigLoader(unittest.TestCase):
    """Loading, validating and updating configuration."""

    def setUp(self):
        self.loader = ConfigLoader()
        self.loader.reset()
        self._tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.loader.reset()
        self._tmp.cleanup()

    def _write(self, data):
        path = os.path.join(self._tmp.name, 'nativefs.json')
        with open(path, 'w', encoding='utf-8') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return path

    def test_singleton(self):
        """Test every ConfigLoader() is the same instance."""
        self.assertIs(ConfigLoader(), ConfigLoader())

    def test_defaults(self):
        """Test the built-in defaults."""
        config = get_config()

        self.assertIsInstance(config, Config)
        self.assertEqual(config.logging.level, "WARNING")
        self.assertEqual(config.path.flavour, "auto")
        self.assertEqual(config.temp.env_vars, ["TMPDIR", "TMP", "TEMP", "TEMPDIR"])
        self.assertEqual(config.temp.posix_default, "/tmp")
        self.assertEqual(config.symlink.max_depth, 40)

    def test_load_file(self):
        """Test sections present in the file override the defaults."""
        path = self._write({
            'logging': {'level': 'DEBUG'},
            'symlink': {'max_depth': 8},
        })

        config = self.loader.load(path)

        self.assertEqual(config.logging.level, 'DEBUG')
        self.assertEqual(config.symlink.max_depth, 8)
        self.assertEqual(config.path.flavour, 'auto')
        self.assertIs(get_config(), config)

    def test_missing_file(self):
        """Test a missing file raises ConfigurationError."""
        with self.assertRaises(ConfigurationError) as ctx:
            self.loader.load(os.path.join(self._tmp.name, 'absent.json'))
        self.assertIn('not found', ctx.exception.message)

    def test_invalid_json(self):
        """Test malformed JSON raises ConfigurationError."""
        with self.assertRaises(ConfigurationError):
            self.loader.load(self._write('{not json'))

        with self.assertRaises(ConfigurationError):
            self.loader.load(self._write('[1, 2]'))

    def test_validation(self):
        """Test invalid values are rejected and the old config kept."""
        with self.assertRaises(ConfigValidationError) as ctx:
            self.loader.load(self._write({'path': {'flavour': 'vms'}}))
        self.assertEqual(ctx.exception.key, 'path.flavour')

        with self.assertRaises(ConfigValidationError):
            self.loader.load(self._write({'symlink': {'max_depth': 0}}))

        with self.assertRaises(ConfigValidationError):
            self.loader.load(self._write({'logging': {'level': 'LOUD'}}))

        self.assertEqual(get_config().symlink.max_depth, 40)

    def test_load_env(self):
        """Test NATIVEFS_* variables override the current config."""
        config = self.loader.load_env({
            'NATIVEFS_LOG_LEVEL': 'info',
            'NATIVEFS_PATH_FLAVOUR': 'windows',
            'NATIVEFS_SYMLINK_MAX_DEPTH': '12',
        })

        self.assertEqual(config.logging.level, 'info')
        self.assertEqual(config.path.flavour, 'windows')
        self.assertEqual(config.symlink.max_depth, 12)

    def test_load_env_bad_depth(self):
        """Test a non-numeric depth is a validation error."""
        with self.assertRaises(ConfigValidationError):
            self.loader.load_env({'NATIVEFS_SYMLINK_MAX_DEPTH': 'deep'})

    def test_get_and_set(self):
        """Test dot-notation access and validated updates."""
        self.loader.set('symlink.max_depth', 3)

        self.assertEqual(self.loader.get('symlink.max_depth'), 3)
        self.assertEqual(self.loader.get('no.such.key', 'fallback'), 'fallback')

        with self.assertRaises(ConfigValidationError):
            self.loader.set('symlink.max_depth', -1)
        with self.assertRaises(ConfigValidationError):
            self.loader.set('symlink.unknown', 1)

        self.assertEqual(self.loader.get('symlink.max_depth'), 3)

    def test_to_dict(self):
        """Test the dictionary form round-trips through set."""
        data = self.loader.to_dict()

        self.assertEqual(data['path'], {'flavour': 'auto'})
        self.assertEqual(data['symlink'], {'max_depth': 40})


class TestFlavourSelection(unittest.TestCase):
    """The configured flavour decides what Path() builds."""

    def tearDown(self):
        ConfigLoader().reset()

    def test_forced_flavours(self):
        """Test posix and windows can be forced."""
        ConfigLoader().set('path.flavour', 'windows')
        self.assertIsInstance(Path('a'), WindowsPath)

        ConfigLoader().set('path.flavour', 'posix')
        self.assertIsInstance(Path('a'), PosixPath)

    def test_native_path_type_argument(self):
        """Test an explicit flavour name wins over the config."""
        self.assertIs(native_path_type('windows'), WindowsPath)
        self.assertIs(native_path_type('posix'), PosixPath)

        with self.assertRaises(ValueError):
            native_path_type('vms')


if __name__ == '__main__':
    unittest.main(verbosity=2)

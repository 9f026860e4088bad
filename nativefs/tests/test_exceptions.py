#!/usr/bin/env python3
"""
nativefs Exception Tests

Run with: python -m pytest nativefs/tests/test_exceptions.py -v

Version: 1.0.0
"""

import errno
import unittest

from nativefs.exceptions import (
    AccessDeniedError,
    ConfigurationError,
    ConfigValidationError,
    FilesystemError,
    FilesystemIOError,
    InvalidArgumentError,
    NotSupportedError,
    PathNotFoundError,
)
from nativefs.filesystem.errors import ErrorCode


class TestFilesystemError(unittest.TestCase):
    """The filesystem exception hierarchy."""

    def test_defaults(self):
        """Test an error without a platform code."""
        exc = FilesystemError("something failed")

        self.assertEqual(exc.message, "something failed")
        self.assertEqual(exc.error_code, 5000)
        self.assertIsNone(exc.error)
        self.assertEqual(str(exc), "[Error 5000] something failed")

    def test_paths_in_message_and_context(self):
        """Test both paths are rendered and kept in the context."""
        exc = FilesystemError(
            "move -- No such file or directory",
            path1='/a', path2='/b',
            error=ErrorCode.from_errno(errno.ENOENT)
        )

        self.assertEqual(exc.error_code, errno.ENOENT)
        self.assertIn("(path1=/a, path2=/b)", str(exc))
        self.assertEqual(exc.context, {'path1': '/a', 'path2': '/b'})

    def test_from_error_picks_subclass(self):
        """Test the error kind selects the exception class."""
        cases = [
            (errno.ENOENT, PathNotFoundError),
            (errno.EACCES, AccessDeniedError),
            (errno.EINVAL, InvalidArgumentError),
            (errno.EOPNOTSUPP, NotSupportedError),
            (errno.EIO, FilesystemIOError),
        ]
        for value, expected in cases:
            exc = FilesystemError.from_error("op -- failed", ErrorCode.from_errno(value), '/p')
            with self.subTest(errno=value):
                self.assertIs(type(exc), expected)
                self.assertIsInstance(exc, FilesystemError)
                self.assertEqual(exc.path1, '/p')


class TestConfigurationErrors(unittest.TestCase):
    """Configuration exceptions."""

    def test_validation_error(self):
        """Test the offending key is kept."""
        exc = ConfigValidationError("bad depth", key="symlink.max_depth", source="env")

        self.assertIsInstance(exc, ConfigurationError)
        self.assertEqual(exc.key, "symlink.max_depth")
        self.assertEqual(exc.source, "env")


if __name__ == '__main__':
    unittest.main(verbosity=2)

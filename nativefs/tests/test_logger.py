#!/usr/bin/env python3
"""
nativefs Logger Tests

Run with: python -m pytest nativefs/tests/test_logger.py -v

Version: 1.0.0
"""

import logging
import os
import tempfile
import unittest

from nativefs.core.config_loader import Config, setup_logging
from nativefs.filesystem import operations as fs
from nativefs.filesystem.path import Path
from nativefs.logger import LogBufferHandler, LogFormatter, Logger, LogLevel, get_logger


class TestLogger(unittest.TestCase):
    """Component loggers and their handlers."""

    def tearDown(self):
        Logger.shutdown()

    def test_logger_singleton(self):
        """Test one instance per component."""
        self.assertIs(Logger('test1'), Logger('test1'))
        self.assertIsNot(Logger('test1'), Logger('test2'))
        self.assertIs(get_logger('test1'), Logger('test1'))

    def test_level_from_name(self):
        """Test case-insensitive level lookup."""
        self.assertIs(LogLevel.from_name('debug'), LogLevel.DEBUG)

        with self.assertRaises(ValueError):
            LogLevel.from_name('loud')

    def test_nothing_buffered_before_initialize(self):
        """Test the buffer is empty until initialize() runs."""
        self.assertEqual(Logger.get_buffered_logs(), [])

    def test_buffered_logs(self):
        """Test messages and context reach the buffer."""
        Logger.initialize(level=LogLevel.DEBUG, console=False)

        log = get_logger('buffer-test')
        log.info("Hello", context={'key': 'value'})
        log.debug("Detail")

        logs = Logger.get_buffered_logs(component='buffer-test')
        self.assertEqual([entry['message'] for entry in logs], ["Hello", "Detail"])
        self.assertEqual(logs[0]['context'], {'key': 'value'})
        self.assertEqual(len(Logger.get_buffered_logs(level='INFO', component='buffer-test')), 1)

    def test_operations_log_mutations(self):
        """Test directory creation is logged by the ops component."""
        Logger.initialize(level=LogLevel.DEBUG, console=False)

        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / 'created'
            fs.mkdir(target)

        logs = Logger.get_buffered_logs(component='ops')
        self.assertTrue(any(
            entry['message'] == "Created directory" and entry['context']['path'] == target.native
            for entry in logs
        ))

    def test_log_file(self):
        """Test records are written to the configured file."""
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, 'logs', 'nativefs.log')
            config = Config()
            config.logging.level = 'INFO'
            config.logging.log_file = log_file

            setup_logging(config)
            get_logger('file-test').info("Written")
            Logger.shutdown()

            with open(log_file, encoding='utf-8') as f:
                content = f.read()

        self.assertIn("[file-test] Written", content)


class TestLogFormatter(unittest.TestCase):
    """Rendering of single records."""

    def _record(self, message, **extra):
        record = logging.LogRecord('nativefs.ops', logging.WARNING, __file__, 1, message, None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_format_with_context(self):
        """Test component and context are rendered around the message."""
        text = LogFormatter(use_colors=False).format(
            self._record("Refusing", component='ops', context={'path': '/'})
        )

        self.assertIn("WARNING", text)
        self.assertIn("[ops] Refusing {path=/}", text)

    def test_format_plain(self):
        """Test a record without extras is still formatted."""
        text = LogFormatter(use_colors=False).format(self._record("plain"))

        self.assertTrue(text.endswith("plain"))


class TestLogBufferHandler(unittest.TestCase):
    """The in-memory ring buffer."""

    def test_max_entries(self):
        """Test the buffer keeps only the newest records."""
        handler = LogBufferHandler(max_entries=2)
        for i in range(3):
            handler.emit(logging.LogRecord('x', logging.INFO, __file__, 1, f"m{i}", None, None))

        self.assertEqual([entry['message'] for entry in handler.get_logs()], ["m1", "m2"])

        handler.clear()
        self.assertEqual(handler.get_logs(), [])


if __name__ == '__main__':
    unittest.main(verbosity=2)

#!/usr/bin/env python3
"""
nativefs Path Tests

Decomposition, joining and string forms of path values, in both the
POSIX and the drive-letter/UNC grammar. Nothing here touches the disk.

Run with: python -m pytest nativefs/tests/test_path.py -v

Version: 1.0.0
"""

import os
import unittest

from nativefs.filesystem.path import Path, PosixPath, WindowsPath, as_path


POSIX_SAMPLES = [
    '', '/', '//', '///a', 'a', 'a/', 'a//', '/usr', '/usr/', '/usr/local/bin',
    'usr//bin', 'a/b//', './a/../b', '//host', '//host/', '//host/share/x',
    '//host//', '.bashrc', 'archive.tar.gz',
]

WINDOWS_SAMPLES = [
    '', '\\', 'C:', 'C:a', 'C:\\', 'C:\\a\\b', 'C:/a//b/', 'a\\\\b\\',
    '\\\\host\\share\\x', '//host/share/', 'D:..\\x', '\\a',
]


class TestPathDecomposition(unittest.TestCase):
    """Root name, root directory, relative path and filename."""

    def test_root_path_plus_relative_path_is_native(self):
        """Test root_path + relative_path rebuilds every native string exactly."""
        for cls, samples in ((PosixPath, POSIX_SAMPLES), (WindowsPath, WINDOWS_SAMPLES)):
            for text in samples:
                p = cls(text)
                with self.subTest(flavour=cls.__name__, path=text):
                    self.assertEqual(p.root_path().native + p.relative_path().native, text)

    def test_posix_absolute_path(self):
        """Test decomposition of an absolute POSIX path."""
        p = PosixPath('/usr/local/bin')

        self.assertEqual(p.root_name().native, '')
        self.assertEqual(p.root_directory().native, '/')
        self.assertEqual(p.root_path().native, '/')
        self.assertEqual(p.relative_path().native, 'usr/local/bin')
        self.assertEqual(p.parent_path().native, '/usr/local')
        self.assertEqual(p.filename().native, 'bin')
        self.assertTrue(p.is_absolute())
        self.assertFalse(p.is_relative())

    def test_posix_network_root_name(self):
        """Test exactly two leading slashes introduce a host name."""
        p = PosixPath('//host/share')

        self.assertEqual(p.root_name().native, '//host')
        self.assertEqual(p.root_directory().native, '/')
        self.assertEqual(p.relative_path().native, 'share')

        # three slashes are an ordinary root directory
        self.assertFalse(PosixPath('///share').has_root_name())

    def test_trailing_separator_has_no_filename(self):
        """Test a path ending in a separator has an empty filename."""
        p = PosixPath('/usr/')

        self.assertEqual(p.filename().native, '')
        self.assertFalse(p.has_filename())
        self.assertEqual(p.parent_path().native, '/usr')

    def test_root_only_paths(self):
        """Test the root path is its own parent and has no filename."""
        p = PosixPath('/')

        self.assertEqual(p.parent_path().native, '/')
        self.assertEqual(p.filename().native, '')
        self.assertFalse(p.has_relative_path())

    def test_relative_parent(self):
        """Test parent_path of a single relative component is empty."""
        self.assertTrue(PosixPath('file.txt').parent_path().empty())
        self.assertEqual(PosixPath('a/b//').parent_path().native, 'a/b')

    def test_extension(self):
        """Test extension and stem of ordinary names, dotfiles and dot names."""
        self.assertEqual(PosixPath('archive.tar.gz').extension().native, '.gz')
        self.assertEqual(PosixPath('archive.tar.gz').stem().native, 'archive.tar')
        self.assertEqual(PosixPath('.bashrc').extension().native, '')
        self.assertEqual(PosixPath('.bashrc').stem().native, '.bashrc')
        self.assertEqual(PosixPath('/etc/').extension().native, '')
        self.assertEqual(PosixPath('..').extension().native, '.')
        self.assertEqual(PosixPath('a/..').extension().native, '.')
        self.assertEqual(PosixPath('..').stem().native, '.')
        self.assertEqual(PosixPath('.').extension().native, '')
        self.assertTrue(PosixPath('dir.d/file.txt').has_extension())
        self.assertFalse(PosixPath('dir.d/file').has_extension())

    def test_windows_drive_paths(self):
        """Test drive-letter decomposition."""
        p = WindowsPath('C:\\Windows\\System32')

        self.assertEqual(p.root_name().native, 'C:')
        self.assertEqual(p.root_directory().native, '\\')
        self.assertEqual(p.relative_path().native, 'Windows\\System32')
        self.assertEqual(p.filename().native, 'System32')
        self.assertTrue(p.is_absolute())

    def test_windows_drive_relative(self):
        """Test a drive without a root directory is not absolute."""
        p = WindowsPath('C:a')

        self.assertEqual(p.root_name().native, 'C:')
        self.assertFalse(p.has_root_directory())
        self.assertFalse(p.is_absolute())
        self.assertEqual(p.filename().native, 'a')

        self.assertFalse(WindowsPath('\\a').is_absolute())

    def test_windows_unc(self):
        """Test UNC host names with either slash."""
        for text in ('\\\\server\\share', '//server/share'):
            p = WindowsPath(text)
            with self.subTest(path=text):
                self.assertEqual(p.root_name().native, text[:8])
                self.assertTrue(p.is_absolute())
                self.assertEqual(p.filename().native, 'share')

    def test_posix_backslash_is_ordinary(self):
        """Test a backslash is not a separator in the POSIX grammar."""
        p = PosixPath('a\\b')

        self.assertEqual(p.filename().native, 'a\\b')
        self.assertEqual(len(list(p)), 1)


class TestPathAppend(unittest.TestCase):
    """Joining paths with append and the / operator."""

    def test_append_components(self):
        """Test appending relative names inserts one separator each."""
        p = PosixPath('/usr')
        p.append('local').append('bin')

        self.assertEqual(p.native, '/usr/local/bin')

    def test_append_absolute_replaces(self):
        """Test an absolute right-hand side replaces the path."""
        self.assertEqual(PosixPath('/a/b').append('/c').native, '/c')

    def test_append_empty_adds_separator(self):
        """Test appending an empty path adds a trailing separator once."""
        self.assertEqual(PosixPath('/a').append('').native, '/a/')
        self.assertEqual(PosixPath('/a/').append('').native, '/a/')
        self.assertEqual(PosixPath('').append('').native, '')

    def test_append_after_trailing_separator(self):
        """Test no separator is doubled after an existing one."""
        self.assertEqual(PosixPath('/a/').append('b').native, '/a/b')
        self.assertEqual(PosixPath('').append('a').native, 'a')

    def test_append_keeps_trailing_separator_of_other(self):
        """Test a trailing separator on the right-hand side survives."""
        self.assertEqual(PosixPath('a').append('b/').native, 'a/b/')

    def test_truediv_returns_new_path(self):
        """Test / leaves both operands untouched."""
        base = PosixPath('/usr')
        joined = base / 'lib' / 'python3'

        self.assertEqual(joined.native, '/usr/lib/python3')
        self.assertEqual(base.native, '/usr')
        self.assertIsInstance(joined, PosixPath)

    def test_rtruediv(self):
        """Test a string on the left of / builds a path of the right flavour."""
        joined = '/opt' / PosixPath('tool')

        self.assertIsInstance(joined, PosixPath)
        self.assertEqual(joined.native, '/opt/tool')

    def test_itruediv_in_place(self):
        """Test /= mutates the path."""
        p = PosixPath('a')
        same = p
        p /= 'b'

        self.assertIs(p, same)
        self.assertEqual(same.native, 'a/b')

    def test_windows_drive_joins(self):
        """Test joining against drive letters and root directories."""
        self.assertEqual(WindowsPath('C:').append('a').native, 'C:a')
        self.assertEqual(WindowsPath('C:').append('').native, 'C:')
        self.assertEqual(WindowsPath('C:\\a').append('\\b').native, 'C:\\b')
        self.assertEqual(WindowsPath('C:\\a').append('D:\\b').native, 'D:\\b')
        self.assertEqual(WindowsPath('C:\\a').append('b').native, 'C:\\a\\b')


class TestPathValue(unittest.TestCase):
    """Construction, mutation, comparison and string forms."""

    def test_native_construction(self):
        """Test Path() builds the native flavour."""
        expected = WindowsPath if os.name == 'nt' else PosixPath

        self.assertIsInstance(Path('x'), expected)
        self.assertTrue(Path().empty())

    def test_construction_sources(self):
        """Test str, bytes, PathLike and Path sources."""
        self.assertEqual(PosixPath(b'/tmp/x').native, '/tmp/x')
        self.assertEqual(PosixPath(PosixPath('/a')).native, '/a')
        self.assertEqual(PosixPath(None).native, '')

        with self.assertRaises(TypeError):
            PosixPath(42)

    def test_copies_do_not_alias(self):
        """Test a copy is unaffected by changes to the original."""
        original = PosixPath('/a')
        duplicate = original.copy()
        original.append('b')

        self.assertEqual(duplicate.native, '/a')
        self.assertEqual(original.native, '/a/b')

    def test_assign_and_clear(self):
        """Test assign and clear replace the whole string."""
        p = PosixPath('/a')
        p.assign('b/c')
        self.assertEqual(p.native, 'b/c')

        p.clear()
        self.assertTrue(p.empty())

    def test_comparison(self):
        """Test equality and ordering by native string."""
        self.assertEqual(PosixPath('/a'), PosixPath('/a'))
        self.assertEqual(PosixPath('/a'), '/a')
        self.assertNotEqual(PosixPath('/a'), PosixPath('/a/'))
        self.assertLess(PosixPath('/a'), PosixPath('/b'))
        self.assertGreaterEqual(PosixPath('b'), 'a')

    def test_unhashable(self):
        """Test mutable paths cannot be dict keys."""
        with self.assertRaises(TypeError):
            hash(PosixPath('/a'))

    def test_string_forms(self):
        """Test native, generic and bytes forms."""
        p = WindowsPath('C:\\Users\\me')

        self.assertEqual(str(p), 'C:\\Users\\me')
        self.assertEqual(p.to_string(), 'C:\\Users\\me')
        self.assertEqual(p.to_generic_string(), '/C:/Users/me')
        self.assertEqual(os.fspath(p), 'C:\\Users\\me')

        self.assertEqual(PosixPath('/usr/bin').to_generic_string(), '/usr/bin')
        self.assertEqual(PosixPath('a\\b').to_generic_string(), 'a\\b')
        self.assertEqual(bytes(PosixPath('/tmp')), b'/tmp')

    def test_repr(self):
        """Test repr names the flavour."""
        self.assertEqual(repr(PosixPath('/a')), "PosixPath('/a')")

    def test_as_path(self):
        """Test as_path passes paths through and wraps everything else."""
        p = PosixPath('/a')

        self.assertIs(as_path(p), p)
        self.assertEqual(as_path('/b'), '/b')


if __name__ == '__main__':
    unittest.main(verbosity=2)

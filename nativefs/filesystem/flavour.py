"""
Path Flavours

The two native path grammars supported by nativefs.

A flavour answers the handful of questions where POSIX and Windows
paths disagree: which characters separate components, what a root name
looks like, and what makes a path absolute. The parsing, joining and
iteration algorithms in ``path.py`` are written once against this
interface.

Version: 1.0.0
"""

import os
from abc import ABC, abstractmethod


class PathFlavour(ABC):
    """Grammar of one family of native paths."""

    #: Separator inserted when joining components
    sep: str = '/'

    #: Short name used in configuration and reprs
    name: str = ''

    @abstractmethod
    def is_sep(self, ch: str) -> bool:
        """Whether a single character separates components."""

    @abstractmethod
    def drive_length(self, text: str) -> int:
        """Length of a leading drive designator (``C:``), 0 if none."""

    @abstractmethod
    def is_absolute(self, has_root_name: bool, has_root_directory: bool) -> bool:
        """Whether a path with the given root parts is absolute."""

    def ends_with_root_terminator(self, text: str) -> bool:
        """Whether ``text`` ends in the character closing a root name."""
        return False

    def to_generic(self, text: str) -> str:
        """Rewrite separators to forward slashes."""
        return text

    def root_name_length(self, text: str) -> int:
        """
        Length of the root name at the start of ``text``.

        Recognizes the flavour's drive designator and, on every flavour,
        a network name: exactly two separators followed by a printable
        non-separator character, running up to the next separator.
        """
        drive = self.drive_length(text)
        if drive:
            return drive
        if (len(text) > 2 and self.is_sep(text[0]) and self.is_sep(text[1])
                and not self.is_sep(text[2]) and text[2].isprintable()):
            return self.find_sep(text, 3)
        return 0

    def find_sep(self, text: str, start: int) -> int:
        """Index of the first separator at or after ``start``, else ``len(text)``."""
        for i in range(start, len(text)):
            if self.is_sep(text[i]):
                return i
        return len(text)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class PosixFlavour(PathFlavour):
    """Single-root byte-string paths separated by ``/``."""

    sep = '/'
    name = 'posix'

    def is_sep(self, ch: str) -> bool:
        return ch == '/'

    def drive_length(self, text: str) -> int:
        return 0

    def is_absolute(self, has_root_name: bool, has_root_directory: bool) -> bool:
        return has_root_directory


class WindowsFlavour(PathFlavour):
    """Drive-letter and UNC paths; both slashes separate, ``\\`` is preferred."""

    sep = '\\'
    name = 'windows'

    def is_sep(self, ch: str) -> bool:
        return ch == '\\' or ch == '/'

    def drive_length(self, text: str) -> int:
        if len(text) >= 2 and text[0].isascii() and text[0].isalpha() and text[1] == ':':
            return 2
        return 0

    def is_absolute(self, has_root_name: bool, has_root_directory: bool) -> bool:
        return has_root_name and has_root_directory

    def ends_with_root_terminator(self, text: str) -> bool:
        return text.endswith(':')

    def to_generic(self, text: str) -> str:
        return text.replace('\\', '/')


posix_flavour = PosixFlavour()
windows_flavour = WindowsFlavour()


def flavour_by_name(name: str) -> PathFlavour:
    """
    Resolve a configured flavour name.

    Args:
        name: ``posix``, ``windows`` or ``auto`` (follows ``os.name``)
    """
    if name == 'auto':
        return windows_flavour if os.name == 'nt' else posix_flavour
    if name == 'posix':
        return posix_flavour
    if name == 'windows':
        return windows_flavour
    raise ValueError(f"Unknown path flavour: {name}")

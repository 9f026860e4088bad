"""
Path Module

The path value type and its component iterator.

A ``Path`` owns one native path string. Everything here is pure string
work: decomposition into root name, root directory and relative path,
joining, and bidirectional iteration over components. No system calls
are made; see ``operations.py`` for those.

Version: 1.0.0
"""

import os
from functools import total_ordering
from typing import Iterator, Optional, Union

from .flavour import PathFlavour, flavour_by_name, posix_flavour, windows_flavour
from nativefs.core.config_loader import get_config


PathSource = Union['Path', str, bytes, os.PathLike, None]


def _coerce_text(source: PathSource) -> str:
    """Convert any accepted source to a native (str) path string."""
    if source is None:
        return ''
    if isinstance(source, Path):
        return source._text
    if isinstance(source, str):
        return source
    if isinstance(source, bytes):
        return os.fsdecode(source)
    if isinstance(source, os.PathLike):
        return os.fsdecode(os.fspath(source))
    raise TypeError(
        f"expected str, bytes, os.PathLike or Path, not {type(source).__name__}"
    )


class PathIterator:
    """
    Cursor over the components of a path.

    Positions are offsets into the owning path's string. Components are
    the root name (if any), the root directory (if any), every
    separator-delimited name, and a final empty component when the
    string ends with a separator. Runs of separators collapse.

    The iterator is invalidated when its owner is modified; any use
    after that raises ``RuntimeError``.

    Besides ``increment``/``decrement``, it supports the Python iterator
    protocol: ``next()`` returns the current component and advances.
    """

    __slots__ = ('_owner', '_version', '_text', '_flavour',
                 '_last', '_rn_end', '_root', '_pos')

    def __init__(self, owner: 'Path', pos: int):
        self._owner = owner
        self._version = owner._version
        self._text = owner._text
        self._flavour = owner._flavour
        self._last = len(self._text)
        self._rn_end = self._flavour.root_name_length(self._text)
        self._root = self._find_root()
        self._pos = pos

    def _find_root(self) -> int:
        """Offset of the root directory separator, or ``len(text)`` if none."""
        text = self._text
        is_sep = self._flavour.is_sep
        if self._rn_end:
            if self._rn_end < self._last and is_sep(text[self._rn_end]):
                return self._rn_end
            return self._last
        if text and is_sep(text[0]):
            return 0
        return self._last

    def _check(self) -> None:
        if self._owner._version != self._version:
            raise RuntimeError("path was modified during iteration")

    def _next_boundary(self, pos: int) -> int:
        """End offset of the component starting at ``pos``."""
        text = self._text
        is_sep = self._flavour.is_sep
        if pos == self._last:
            return pos
        if pos == 0 and self._rn_end:
            return self._rn_end
        i = pos + 1
        if is_sep(text[pos]):
            while i != self._last and is_sep(text[i]):
                i += 1
            return i
        return self._flavour.find_sep(text, i)

    def _prev_boundary(self, pos: int) -> int:
        """Start offset of the component before the one at ``pos``."""
        text = self._text
        is_sep = self._flavour.is_sep
        if pos == 0 or pos <= self._rn_end:
            return 0

        k = pos
        while k > 0 and is_sep(text[k - 1]):
            k -= 1
        if k < pos:
            if k == self._root:
                return self._root
            if pos == self._last:
                # trailing separator yields an empty component of its own
                return self._last - 1

        m = k
        while m > self._rn_end and not is_sep(text[m - 1]):
            m -= 1
        return m

    @property
    def position(self) -> int:
        """Offset of the current component in the owner's string."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos == self._last

    @property
    def current(self) -> 'Path':
        """The component at the current position, as a path."""
        self._check()
        text = self._text
        pos = self._pos
        is_sep = self._flavour.is_sep
        if (pos != 0 and pos != self._last and is_sep(text[pos])
                and pos != self._root and pos + 1 == self._last):
            return type(self._owner)()
        part = text[pos:self._next_boundary(pos)]
        if len(part) > 1 and is_sep(part[0]) and is_sep(part[-1]):
            part = self._flavour.sep
        return type(self._owner)(part)

    def increment(self) -> 'PathIterator':
        """Advance to the next component."""
        self._check()
        is_sep = self._flavour.is_sep
        pos = self._next_boundary(self._pos)
        while (pos != self._last and pos != self._root
               and is_sep(self._text[pos]) and pos + 1 != self._last):
            pos += 1
        self._pos = pos
        return self

    def decrement(self) -> 'PathIterator':
        """Step back to the previous component."""
        self._check()
        self._pos = self._prev_boundary(self._pos)
        return self

    def copy(self) -> 'PathIterator':
        other = PathIterator(self._owner, self._pos)
        other._version = self._version
        return other

    def __iter__(self) -> 'PathIterator':
        return self

    def __next__(self) -> 'Path':
        if self._pos == self._last:
            raise StopIteration
        component = self.current
        self.increment()
        return component

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathIterator):
            return NotImplemented
        return self._text == other._text and self._pos == other._pos

    def __repr__(self) -> str:
        return f"<PathIterator {self._text!r} at {self._pos}>"


@total_ordering
class Path:
    """
    A native filesystem path.

    ``Path(...)`` builds a path in the configured native grammar
    (``PosixPath`` or ``WindowsPath``); the two concrete classes can also
    be used directly to manipulate foreign paths.

    Paths compare and order by their native string. They are mutable,
    and therefore unhashable: ``assign``, ``clear`` and ``append``
    (also ``/=``) replace the owned string, and ``/`` returns a new path.

    Example:
        >>> p = PosixPath('/usr')
        >>> str(p / 'local' / 'bin')
        '/usr/local/bin'
        >>> PosixPath('archive.tar.gz').extension().native
        '.gz'
    """

    __slots__ = ('_text', '_version')

    _flavour: PathFlavour = posix_flavour

    def __new__(cls, *args, **kwargs):
        if cls is Path:
            cls = native_path_type()
        return object.__new__(cls)

    def __init__(self, source: PathSource = None):
        self._text = _coerce_text(source)
        self._version = 0

    def _replace(self, text: str) -> None:
        self._text = text
        self._version += 1

    def _coerce(self, other: PathSource) -> 'Path':
        if isinstance(other, type(self)):
            return other
        return type(self)(other)

    # Modifiers

    def assign(self, source: PathSource) -> 'Path':
        """Replace the whole path string."""
        self._replace(_coerce_text(source))
        return self

    def clear(self) -> None:
        self._replace('')

    def append(self, other: PathSource) -> 'Path':
        """
        Join ``other`` onto this path in place.

        - An empty ``other`` adds a trailing separator (unless one, or a
          drive terminator, is already there).
        - An absolute ``other`` naming a different location replaces
          this path.
        - An ``other`` with a root directory restarts from this path's
          root name.
        - Otherwise the components of ``other`` are added, one separator
          between each.
        """
        other = self._coerce(other)
        sep = self._flavour.sep
        is_sep = self._flavour.is_sep
        text = self._text

        if other.empty():
            if text and not is_sep(text[-1]) and not self._flavour.ends_with_root_terminator(text):
                self._replace(text + sep)
            return self

        root_name = self.root_name()
        if other.is_absolute() and (
                text != root_name._text
                or other._text != sep
                or (other.has_root_name() and other.root_name() != root_name)):
            self._replace(other._text)
            return self

        if other.has_root_directory():
            text = root_name._text
        elif (not self.has_root_directory() and self.is_absolute()) or self.has_filename():
            text += sep

        parts = iter(other)
        if other.has_root_name():
            next(parts)
        first = True
        for part in parts:
            if not first and not (text and is_sep(text[-1])):
                text += sep
            first = False
            text += part._text

        self._replace(text)
        return self

    def __itruediv__(self, other: PathSource) -> 'Path':
        return self.append(other)

    def __truediv__(self, other: PathSource) -> 'Path':
        return self.copy().append(other)

    def __rtruediv__(self, other: PathSource) -> 'Path':
        return type(self)(other).append(self)

    def copy(self) -> 'Path':
        return type(self)(self._text)

    __copy__ = copy

    # Decomposition

    def root_name(self) -> 'Path':
        """Drive (``C:``) or network name (``//host``) prefix."""
        return type(self)(self._text[:self._flavour.root_name_length(self._text)])

    def root_directory(self) -> 'Path':
        """The separator directly after the root name, if present."""
        length = self._flavour.root_name_length(self._text)
        if len(self._text) > length and self._flavour.is_sep(self._text[length]):
            return type(self)(self._text[length])
        return type(self)()

    def root_path(self) -> 'Path':
        return type(self)(self.root_name()._text + self.root_directory()._text)

    def relative_path(self) -> 'Path':
        root = self.root_path()._text
        return type(self)(self._text[min(len(root), len(self._text)):])

    def parent_path(self) -> 'Path':
        """The path without its last component (and the separators before it)."""
        if not self.has_relative_path():
            return self.copy()
        cut = self.end().decrement().position
        root_len = len(self.root_path()._text)
        end = cut
        while end > root_len and self._flavour.is_sep(self._text[end - 1]):
            end -= 1
        return type(self)(self._text[:end])

    def filename(self) -> 'Path':
        """Last component; empty for a trailing separator or a bare root."""
        if not self.has_relative_path():
            return type(self)()
        last = self.end().decrement().current
        if last._text and all(self._flavour.is_sep(ch) for ch in last._text):
            return type(self)()
        return last

    def extension(self) -> 'Path':
        """
        Suffix of the filename from its last dot.

        A dot that starts the name does not count: dotfiles (``.bashrc``)
        and ``.`` have no extension, while ``..`` has ``.``.
        """
        name = self.filename()._text
        pos = name.rfind('.')
        if pos <= 0:
            return type(self)()
        return type(self)(name[pos:])

    def stem(self) -> 'Path':
        """Filename without its extension."""
        name = self.filename()._text
        ext = self.extension()._text
        return type(self)(name[:len(name) - len(ext)])

    # Queries

    def empty(self) -> bool:
        return not self._text

    def has_root_name(self) -> bool:
        return not self.root_name().empty()

    def has_root_directory(self) -> bool:
        return not self.root_directory().empty()

    def has_root_path(self) -> bool:
        return not self.root_path().empty()

    def has_relative_path(self) -> bool:
        return not self.relative_path().empty()

    def has_filename(self) -> bool:
        return not self.filename().empty()

    def has_extension(self) -> bool:
        return not self.extension().empty()

    def is_absolute(self) -> bool:
        return self._flavour.is_absolute(self.has_root_name(), self.has_root_directory())

    def is_relative(self) -> bool:
        return not self.is_absolute()

    # Iteration

    def begin(self) -> PathIterator:
        return PathIterator(self, 0)

    def end(self) -> PathIterator:
        return PathIterator(self, len(self._text))

    def __iter__(self) -> Iterator['Path']:
        return self.begin()

    def __reversed__(self) -> Iterator['Path']:
        it = self.end()
        while it.position != 0:
            it.decrement()
            yield it.current

    # String forms

    @property
    def native(self) -> str:
        return self._text

    def to_string(self) -> str:
        return self._text

    def to_generic_string(self) -> str:
        """Forward-slash form; absolute paths always start with ``/``."""
        text = self._text
        prefix = ''
        if self.is_absolute() and not (text and self._flavour.is_sep(text[0])):
            prefix = '/'
        return prefix + self._flavour.to_generic(text)

    def to_bytes(self) -> bytes:
        """Encode with the filesystem encoding."""
        return os.fsencode(self._text)

    def __str__(self) -> str:
        return self._text

    def __fspath__(self) -> str:
        return self._text

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    # Comparison

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._text == other._text
        if isinstance(other, (str, bytes, os.PathLike)):
            return self._text == _coerce_text(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._text < other._text
        if isinstance(other, (str, bytes, os.PathLike)):
            return self._text < _coerce_text(other)
        return NotImplemented

    __hash__ = None


class PosixPath(Path):
    """Path using the POSIX grammar."""
    __slots__ = ()
    _flavour = posix_flavour


class WindowsPath(Path):
    """Path using the drive-letter/UNC grammar."""
    __slots__ = ()
    _flavour = windows_flavour


def native_path_type(flavour_name: Optional[str] = None) -> type:
    """
    Concrete path class for the configured (or given) flavour.

    Args:
        flavour_name: ``auto``, ``posix`` or ``windows``; defaults to the
            ``path.flavour`` configuration value
    """
    flavour = flavour_by_name(flavour_name or get_config().path.flavour)
    return WindowsPath if flavour is windows_flavour else PosixPath


def as_path(source: PathSource) -> Path:
    """Return ``source`` itself if it already is a path, else build one."""
    if isinstance(source, Path):
        return source
    return Path(source)

"""uriforge.path
The path part of a URI, held as a list of segments.
"""

import logging

from typing import Any, Iterable, Iterator, Self

from ._grammar import PATH_PAT, captures
from .errors import ArgumentError, BoundsError, FormatError

logger = logging.getLogger(__name__)


class Path:
    """An ordered, mutable list of path segments.

    No segment contains the separator. An absolute path starts with an empty segment,
    so "/a/b" is ["", "a", "b"] and joining the segments gives the leading "/" back.
    A trailing empty segment is a trailing "/". No other segment is ever empty, so the
    built string always parses back.
    Instances are not synchronized. Mutating one from several threads needs an outside lock.
    """

    SEPARATOR: str = "/"

    def __init__(self: Self, segments: Iterable[str] | None = None) -> None:
        self._segments: list[str] = []
        if segments is not None:
            self.add(segments)

    @classmethod
    def forge(cls, path: str | Iterable[str] = "") -> Self:
        """Builds a Path from a path string (parsed) or from a sequence of segments."""
        if isinstance(path, str):
            return cls.parse(path)
        if not isinstance(path, Iterable):
            raise ArgumentError(f"path must be a string or a sequence of strings, not {type(path).__name__}")
        return cls(path)

    @staticmethod
    def match(path: str) -> dict[str, str] | None:
        if not isinstance(path, str):
            raise ArgumentError(f"path must be a string, not {type(path).__name__}")
        return captures(PATH_PAT.match(path))

    @classmethod
    def validate(cls, path: str) -> bool:
        return cls.match(path) is not None

    @classmethod
    def parse(cls, path: str) -> Self:
        groups: dict[str, str] | None = cls.match(path)
        if groups is None:
            logger.debug("path grammar rejected %r", path)
            raise FormatError("path", path)
        result: Self = cls()
        if len(groups["path"]) > 0:
            result._segments = groups["path"].split(cls.SEPARATOR)
        return result

    @property
    def segments(self: Self) -> list[str]:
        return list(self._segments)

    @property
    def is_absolute(self: Self) -> bool:
        return len(self._segments) > 1 and self._segments[0] == ""

    def _split(self: Self, segment: str) -> list[str]:
        # Empty pieces survive only where the path grammar allows them: a leading "" on an
        # empty path (absolute) and a trailing "" (directory).
        pieces: list[str] = segment.split(self.SEPARATOR)
        result: list[str] = [p for p in pieces if len(p) > 0]
        if pieces[0] == "" and len(self._segments) == 0:
            result.insert(0, "")
        if len(pieces) > 1 and pieces[-1] == "":
            result.append("")
        return result

    def add(self: Self, segment: str | Iterable[str]) -> None:
        """Appends one segment, every segment of a sub-path like "a/b", or every string of a sequence.
        Adding to a directory path ("/dir/") replaces its trailing empty segment, and empty
        pieces such as the middle of "a//b" are dropped.
        """
        if isinstance(segment, str):
            pieces: list[str] = self._split(segment)
            if len(pieces) == 0:
                return
            if len(self._segments) > 1 and self._segments[-1] == "":
                self._segments.pop()
            self._segments.extend(pieces)
            return
        if not isinstance(segment, Iterable):
            raise ArgumentError(f"segment must be a string or a sequence of strings, not {type(segment).__name__}")
        pending: list[str] = list(segment)
        if not all(isinstance(s, str) for s in pending):
            raise ArgumentError("all path segments must be strings")
        for s in pending:
            self.add(s)

    def get(self: Self, index: int) -> str:
        return self._segments[self._check_index(index)]

    def set(self: Self, index: int, segment: str) -> None:
        index = self._check_index(index)
        if not isinstance(segment, str):
            raise ArgumentError(f"segment must be a string, not {type(segment).__name__}")
        if self.SEPARATOR in segment:
            raise ArgumentError(f"segment must not contain {self.SEPARATOR!r}: {segment!r}")
        if segment == "" and 0 < index % len(self._segments) < len(self._segments) - 1:
            raise ArgumentError(f"only the first or last segment may be empty, not index {index}")
        self._segments[index] = segment

    def remove(self: Self, index: int) -> None:
        del self._segments[self._check_index(index)]

    def _check_index(self: Self, index: Any) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise ArgumentError(f"index must be an integer, not {type(index).__name__}")
        if not -len(self._segments) <= index < len(self._segments):
            raise BoundsError(f"index {index} does not exist")
        return index

    def build(self: Self) -> str:
        return self.SEPARATOR.join(self._segments)

    def __len__(self: Self) -> int:
        return len(self._segments)

    def __iter__(self: Self) -> Iterator[str]:
        return iter(list(self._segments))

    def __getitem__(self: Self, index: int) -> str:
        return self.get(index)

    def __setitem__(self: Self, index: int, segment: str) -> None:
        self.set(index, segment)

    def __delitem__(self: Self, index: int) -> None:
        self.remove(index)

    def __str__(self: Self) -> str:
        return self.build()

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self._segments!r})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments

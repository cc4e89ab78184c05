"""uriforge.query
The query part of a URI, held as an ordered key/value mapping.

Keys and values are stored decoded. Percent-encoding happens only at the string boundary:
parse() decodes and build() encodes, unless told otherwise. The codec is urllib.parse's
quote_plus/unquote_plus: unreserved characters pass through, a space becomes "+" and every
other octet becomes %XX.
"""

import logging

from typing import Any, Iterable, Iterator, Mapping, Self
from urllib.parse import quote_plus, unquote_plus

from ._grammar import QUERY_PAT, captures
from .errors import ArgumentError, BoundsError, FormatError

logger = logging.getLogger(__name__)


def _urlencode(s: str) -> str:
    return quote_plus(s, safe="")


def _urldecode(s: str) -> str:
    return unquote_plus(s)


class Query:
    """Ordered query pairs. Keys are unique and the last assignment wins.

    Instances are not synchronized. Mutating one from several threads needs an outside lock.
    """

    PREFIX: str = "?"
    PAIR_SEPARATOR: str = "&"
    VALUE_SEPARATOR: str = "="

    def __init__(self: Self, pairs: Mapping[str, str | None] | Iterable[tuple[str, str | None]] | None = None) -> None:
        self._pairs: dict[str, str] = {}
        if pairs is not None:
            self.load(pairs)

    @classmethod
    def forge(cls, query: str | Mapping[str, str | None] = "") -> Self:
        """Builds a Query from a query string (parsed and decoded) or from a mapping of pairs (taken as-is)."""
        if isinstance(query, str):
            return cls.parse(query)
        if isinstance(query, Mapping):
            result: Self = cls()
            result.load(query, urldecode=False)
            return result
        raise ArgumentError(f"query must be a string or a mapping of strings, not {type(query).__name__}")

    @staticmethod
    def match(query: str) -> dict[str, str] | None:
        if not isinstance(query, str):
            raise ArgumentError(f"query must be a string, not {type(query).__name__}")
        return captures(QUERY_PAT.match(query))

    @classmethod
    def validate(cls, query: str) -> bool:
        return cls.match(query) is not None

    @classmethod
    def parse_as_dict(cls, query: str, urldecode: bool = True) -> dict[str, str]:
        """Parses "[?]k1=v1&k2=v2" into a dict. A pair without "=" gets the value ""."""
        groups: dict[str, str] | None = cls.match(query)
        if groups is None:
            logger.debug("query grammar rejected %r", query)
            raise FormatError("query", query)
        result: dict[str, str] = {}
        if len(groups["query"]) == 0:
            return result
        for pair in groups["query"].split(cls.PAIR_SEPARATOR):
            if len(pair) == 0:
                continue
            key, _, value = pair.partition(cls.VALUE_SEPARATOR)
            if len(key) == 0:
                logger.debug("query pair %r has no key", pair)
                raise FormatError("query", query, f"invalid query: pair {pair!r} has no key")
            if urldecode:
                key = _urldecode(key)
                value = _urldecode(value)
            result[key] = value
        return result

    @classmethod
    def parse(cls, query: str, urldecode: bool = True) -> Self:
        result: Self = cls()
        result._pairs = cls.parse_as_dict(query, urldecode=urldecode)
        return result

    def load(
        self: Self, pairs: Mapping[str, str | None] | Iterable[tuple[str, str | None]], urldecode: bool = False
    ) -> None:
        """Replaces every pair with the given ones."""
        if not isinstance(pairs, Iterable) or isinstance(pairs, str):
            raise ArgumentError(f"pairs must be a mapping or a sequence of pairs, not {type(pairs).__name__}")
        items: list[Any] = list(pairs.items() if isinstance(pairs, Mapping) else pairs)
        for item in items:
            if not isinstance(item, tuple) or len(item) != 2:
                raise ArgumentError(f"query pairs must be (key, value) tuples, got {item!r}")
        self._pairs = {}
        for key, value in items:
            self.set(key, value, urldecode=urldecode)

    def set(self: Self, key: str, value: str | None, urldecode: bool = True) -> None:
        """Sets key to value. A None value is stored as ""."""
        if not isinstance(key, str) or len(key) == 0:
            raise ArgumentError(f"key must be a non-empty string, got {key!r}")
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ArgumentError(f"value must be a string, not {type(value).__name__}")
        if urldecode:
            key = _urldecode(key)
            value = _urldecode(value)
        self._pairs[key] = value

    def get(self: Self, key: str | None = None, urlencode: bool = True) -> dict[str, str] | str:
        """With no key, a copy of every (decoded) pair. With a key, its value.
        When urlencode is true the key is given, and the value returned, in encoded form.
        """
        if key is None:
            return dict(self._pairs)
        if urlencode:
            key = _urldecode(key)
        if not self.has(key):
            raise BoundsError(f"key {key!r} does not exist")
        value: str = self._pairs[key]
        return _urlencode(value) if urlencode else value

    def has(self: Self, key: str) -> bool:
        return key in self._pairs

    def remove(self: Self, key: str) -> None:
        if not self.has(key):
            raise BoundsError(f"key {key!r} does not exist")
        del self._pairs[key]

    def build(self: Self, urlencode: bool = True) -> str:
        """Returns "?k1=v1&k2=v2", or "" when there are no pairs. "=" is always written."""
        pairs: list[str] = []
        for key, value in self._pairs.items():
            if urlencode:
                key = _urlencode(key)
                value = _urlencode(value)
            pairs.append(f"{key}{self.VALUE_SEPARATOR}{value}")
        if len(pairs) == 0:
            return ""
        return self.PREFIX + self.PAIR_SEPARATOR.join(pairs)

    def __len__(self: Self) -> int:
        return len(self._pairs)

    def __iter__(self: Self) -> Iterator[str]:
        return iter(list(self._pairs))

    def __contains__(self: Self, key: Any) -> bool:
        return key in self._pairs

    def __getitem__(self: Self, key: str) -> str:
        if not self.has(key):
            raise BoundsError(f"key {key!r} does not exist")
        return self._pairs[key]

    def __setitem__(self: Self, key: str, value: str | None) -> None:
        self.set(key, value, urldecode=False)

    def __delitem__(self: Self, key: str) -> None:
        self.remove(key)

    def __str__(self: Self) -> str:
        return self.build()

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self._pairs!r})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return list(self._pairs.items()) == list(other._pairs.items())

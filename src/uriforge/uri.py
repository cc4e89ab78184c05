"""uriforge.uri
A whole URI: scheme, Authority, Path, Query and fragment.
"""

import copy
import logging

from typing import Any, Mapping, Self

from ._grammar import URI_PAT, captures
from .authority import Authority
from .errors import ArgumentError, FormatError
from .path import Path
from .query import Query

logger = logging.getLogger(__name__)

_COMPONENTS: tuple[str, ...] = ("scheme", "authority", "path", "query", "fragment")


def _check_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ArgumentError(f"{name} must be a string, not {type(value).__name__}")
    return value


def _to_authority(value: Any) -> Authority:
    if isinstance(value, Authority):
        return value
    if isinstance(value, str):
        return Authority.parse(value)
    if isinstance(value, Mapping):
        return Authority.forge(value)
    raise ArgumentError(f"authority must be a string, a mapping or an Authority, not {type(value).__name__}")


def _to_path(value: Any) -> Path:
    if isinstance(value, Path):
        return value
    if isinstance(value, (str, list, tuple)):
        return Path.forge(value)
    raise ArgumentError(f"path must be a string, a sequence of strings or a Path, not {type(value).__name__}")


def _to_query(value: Any) -> Query:
    if isinstance(value, Query):
        return value
    if isinstance(value, (str, Mapping)):
        return Query.forge(value)
    raise ArgumentError(f"query must be a string, a mapping or a Query, not {type(value).__name__}")


class Uri:
    """A URI made of a scheme, an Authority, a Path, a Query and a fragment.

    The Uri owns its Authority, Path and Query. Anything assigned to it is copied first,
    so the only way to reach them is through the Uri. Instances are not synchronized.
    Mutating one (or one of its parts) from several threads needs an outside lock.
    """

    SCHEME_SEPARATOR: str = ":"
    FRAGMENT_SEPARATOR: str = "#"

    def __init__(
        self: Self,
        scheme: str = "",
        authority: Authority | None = None,
        path: Path | None = None,
        query: Query | None = None,
        fragment: str = "",
    ) -> None:
        self.scheme = scheme
        self.authority = authority if authority is not None else Authority()
        self.path = path if path is not None else Path()
        self.query = query if query is not None else Query()
        self.fragment = fragment

    @classmethod
    def forge(cls, components: str | Mapping[str, Any] = "") -> Self:
        """Builds a Uri from a URI string, or from a mapping of components.

        Missing components are left empty. Authority, path and query may be given as their
        objects or in raw form (a string, a mapping, or a list of segments for the path).
        """
        if isinstance(components, str):
            return cls.parse(components)
        if not isinstance(components, Mapping):
            raise ArgumentError(f"components must be a string or a mapping, not {type(components).__name__}")

        scheme: Any = components.get("scheme")
        authority: Any = components.get("authority")
        path: Any = components.get("path")
        query: Any = components.get("query")
        fragment: Any = components.get("fragment")
        return cls(
            scheme=_check_str(scheme, "scheme") if scheme is not None else "",
            authority=_to_authority(authority) if authority is not None else None,
            path=_to_path(path) if path is not None else None,
            query=_to_query(query) if query is not None else None,
            fragment=_check_str(fragment, "fragment") if fragment is not None else "",
        )

    @staticmethod
    def match(uri: str) -> dict[str, str] | None:
        """Every group the URI grammar captured, including userinfo, host and port, or None if it didn't match."""
        if not isinstance(uri, str):
            raise ArgumentError(f"uri must be a string, not {type(uri).__name__}")
        return captures(URI_PAT.match(uri))

    @classmethod
    def validate(cls, uri: str) -> bool:
        return cls.match(uri) is not None

    @classmethod
    def decompose(cls, uri: str) -> dict[str, str]:
        """Splits a URI into its raw component strings without building any objects.
        The authority comes without its "//" and the query without its "?".
        """
        groups: dict[str, str] | None = cls.match(uri)
        if groups is None:
            logger.debug("uri grammar rejected %r", uri)
            raise FormatError("uri", uri)
        return {name: groups[name] for name in _COMPONENTS}

    @classmethod
    def parse(cls, uri: str) -> Self:
        return cls.forge(cls.decompose(uri))

    @property
    def scheme(self: Self) -> str:
        return self._scheme

    @scheme.setter
    def scheme(self: Self, scheme: str) -> None:
        self._scheme: str = _check_str(scheme, "scheme")

    @property
    def authority(self: Self) -> Authority:
        return self._authority

    @authority.setter
    def authority(self: Self, authority: Authority) -> None:
        if not isinstance(authority, Authority):
            raise ArgumentError(f"authority must be an Authority, not {type(authority).__name__}")
        self._authority: Authority = copy.deepcopy(authority)

    @property
    def path(self: Self) -> Path:
        return self._path

    @path.setter
    def path(self: Self, path: Path) -> None:
        if not isinstance(path, Path):
            raise ArgumentError(f"path must be a Path, not {type(path).__name__}")
        self._path: Path = copy.deepcopy(path)

    @property
    def query(self: Self) -> Query:
        return self._query

    @query.setter
    def query(self: Self, query: Query) -> None:
        if not isinstance(query, Query):
            raise ArgumentError(f"query must be a Query, not {type(query).__name__}")
        self._query: Query = copy.deepcopy(query)

    @property
    def fragment(self: Self) -> str:
        return self._fragment

    @fragment.setter
    def fragment(self: Self, fragment: str) -> None:
        self._fragment: str = _check_str(fragment, "fragment")

    def components(self: Self, as_strings: bool = True) -> dict[str, Any]:
        """The components as a mapping that forge() accepts back.
        With as_strings, authority, path and query are given in their built string form.
        """
        if as_strings:
            return {
                "scheme": self._scheme,
                "authority": str(self._authority),
                "path": str(self._path),
                "query": str(self._query),
                "fragment": self._fragment,
            }
        return {
            "scheme": self._scheme,
            "authority": self._authority,
            "path": self._path,
            "query": self._query,
            "fragment": self._fragment,
        }

    def build(self: Self) -> str:
        result: str = ""
        if len(self._scheme) > 0:
            result += f"{self._scheme}{self.SCHEME_SEPARATOR}"
        authority: str = str(self._authority)
        result += authority
        path: str = str(self._path)
        # A path stored as relative segments still needs a "/" after an authority.
        if len(authority) > 0 and len(path) > 0 and not path.startswith(Path.SEPARATOR):
            result += Path.SEPARATOR
        result += path
        result += str(self._query)
        if len(self._fragment) > 0:
            result += f"{self.FRAGMENT_SEPARATOR}{self._fragment}"
        return result

    def __str__(self: Self) -> str:
        return self.build()

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self.build()!r})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return self.components(as_strings=True) == other.components(as_strings=True)

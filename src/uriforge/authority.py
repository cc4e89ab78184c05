"""uriforge.authority
The userinfo@host:port part of a URI.
"""

import logging

from typing import Any, Mapping, Self

from ._grammar import AUTHORITY_PAT, captures
from .errors import ArgumentError, FormatError

logger = logging.getLogger(__name__)

# Substituted for an unset port when a caller asks for it.
DEFAULT_PORT: int = 80

MIN_PORT: int = 0
MAX_PORT: int = 65535


def _check_port(port: Any, name: str = "port") -> int:
    # bool is an int subclass, but True is not a port.
    if not isinstance(port, int) or isinstance(port, bool):
        raise ArgumentError(f"{name} must be an integer, not {type(port).__name__}")
    if not MIN_PORT <= port <= MAX_PORT:
        raise ArgumentError(f"{name} must be between {MIN_PORT} and {MAX_PORT}, got {port}")
    return port


class Authority:
    """userinfo, host and port. A port of 0 means the port is unset.

    Values are type-checked on assignment but not format-checked; use parse() for that.
    Instances are not synchronized. Mutating one from several threads needs an outside lock.
    """

    PREFIX: str = "//"
    USERINFO_SEPARATOR: str = "@"
    PORT_SEPARATOR: str = ":"

    def __init__(
        self: Self, host: str = "", port: int = 0, userinfo: str = "", *, default_port: int = DEFAULT_PORT
    ) -> None:
        self._default_port: int = _check_port(default_port, "default_port")
        self._userinfo: str = ""
        self._host: str = ""
        self._port: int = 0
        self.userinfo = userinfo
        self.host = host
        self.port = port

    @classmethod
    def forge(cls, host: str | Mapping[str, Any] = "", port: int = 0, userinfo: str = "") -> Self:
        """Builds an Authority from values, or from a mapping with any of the keys host, port and userinfo."""
        if isinstance(host, Mapping):
            return cls(**{k: v for k, v in host.items() if k in ("host", "port", "userinfo")})
        return cls(host, port, userinfo)

    @staticmethod
    def match(authority: str) -> dict[str, str] | None:
        if not isinstance(authority, str):
            raise ArgumentError(f"authority must be a string, not {type(authority).__name__}")
        return captures(AUTHORITY_PAT.match(authority))

    @classmethod
    def validate(cls, authority: str) -> bool:
        return cls.match(authority) is not None

    @classmethod
    def parse(cls, authority: str) -> Self:
        """Parses "[//][userinfo@]host[:port]". Missing parts come back empty, a missing port as 0."""
        groups: dict[str, str] | None = cls.match(authority)
        if groups is None:
            logger.debug("authority grammar rejected %r", authority)
            raise FormatError("authority", authority)
        port: int = int(groups["port"], base=10) if groups["port"] else 0
        return cls(host=groups["host"], port=port, userinfo=groups["userinfo"])

    @property
    def userinfo(self: Self) -> str:
        return self._userinfo

    @userinfo.setter
    def userinfo(self: Self, userinfo: str) -> None:
        if not isinstance(userinfo, str):
            raise ArgumentError(f"userinfo must be a string, not {type(userinfo).__name__}")
        self._userinfo = userinfo

    @property
    def host(self: Self) -> str:
        return self._host

    @host.setter
    def host(self: Self, host: str) -> None:
        if not isinstance(host, str):
            raise ArgumentError(f"host must be a string, not {type(host).__name__}")
        self._host = host

    @property
    def port(self: Self) -> int:
        return self._port

    @port.setter
    def port(self: Self, port: int) -> None:
        self._port = _check_port(port)

    @property
    def default_port(self: Self) -> int:
        return self._default_port

    def get_port(self: Self, fill_default: bool = False) -> int:
        """The port, or the default port when it is unset and fill_default is true."""
        if self._port == 0 and fill_default:
            return self._default_port
        return self._port

    @property
    def is_empty(self: Self) -> bool:
        return not (self._userinfo or self._host or self._port)

    def build(self: Self, *, userinfo: bool = True, port: bool = True, omit_default_port: bool = True) -> str:
        """Returns "//userinfo@host:port", or "" when there is nothing to write.
        An empty userinfo never produces a bare "@". An unset port is written as the default port
        only when omit_default_port is false.
        """
        result: str = ""
        if userinfo and len(self._userinfo) > 0:
            result += f"{self._userinfo}{self.USERINFO_SEPARATOR}"
        result += self._host
        if port:
            if self._port > 0:
                result += f"{self.PORT_SEPARATOR}{self._port}"
            elif not omit_default_port:
                result += f"{self.PORT_SEPARATOR}{self._default_port}"
        if len(result) == 0:
            return result
        return f"{self.PREFIX}{result}"

    def __str__(self: Self) -> str:
        return self.build()

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}(host={self._host!r}, port={self._port!r}, userinfo={self._userinfo!r})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return (self._userinfo, self._host, self._port) == (other._userinfo, other._host, other._port)

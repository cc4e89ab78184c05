"""uriforge
Parse, validate, build and edit RFC 3986 URIs and their parts.

Instances of Authority, Path, Query and Uri are plain mutable values and are not synchronized.
"""

__version__ = "0.1"

import logging

from .authority import DEFAULT_PORT, MAX_PORT, MIN_PORT, Authority
from .errors import ArgumentError, BoundsError, FormatError, UriError
from .path import Path
from .query import Query
from .uri import Uri

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgumentError",
    "Authority",
    "BoundsError",
    "DEFAULT_PORT",
    "FormatError",
    "MAX_PORT",
    "MIN_PORT",
    "Path",
    "Query",
    "Uri",
    "UriError",
]

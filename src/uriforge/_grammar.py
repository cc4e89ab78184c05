"""uriforge._grammar
The regular grammar shared by Authority, Path, Query and Uri.
Each rule is a character class or sub-pattern from RFC 3986, written so that the
component patterns and the whole-URI pattern are built from the same pieces.
"""

import re

# Character-class bodies. These are spliced into [...] so they are not groups.

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED: str = r"A-Za-z0-9\-._~"

# pct-encoded = "%" HEXDIG HEXDIG
# Only the "%" is checked here. The codec deals with the hex digits.
_PCT: str = "%"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: str = r"!$&'()*+,;="

# sub-delims minus the query pair separators "&" and "="
_QUERY_SUB_DELIMS: str = r"!$'()*+,;"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME: str = r"(?P<scheme>[A-Za-z][A-Za-z0-9+\-.]*)"

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
# "@" is not in the class, so the userinfo can't run into the host.
_USERINFO: str = rf"(?P<userinfo>[{_UNRESERVED}{_PCT}{_SUB_DELIMS}:]*)"

# reg-name and IPv4address share one class
_REG_NAME: str = rf"[{_UNRESERVED}{_PCT}]+"

# "[" IPv6address "]"
_IPV6_LITERAL: str = r"\[[A-Fa-f0-9:.]+\]"

# "[" "v" HEXDIG ( unreserved / pct-encoded / sub-delims / ":" )+ "]"
_IPVFUTURE_LITERAL: str = rf"\[v[A-Fa-f0-9][{_UNRESERVED}{_PCT}{_SUB_DELIMS}:]+\]"

# host = IP-literal / IPv4address / reg-name
_HOST: str = rf"(?P<host>{_REG_NAME}|{_IPV6_LITERAL}|{_IPVFUTURE_LITERAL})"

# port = 0 - 65535, longest alternatives first
_PORT: str = (
    r"(?P<port>6553[0-5]|655[0-2][0-9]|65[0-4][0-9]{2}|6[0-4][0-9]{3}|[1-5][0-9]{4}|[0-9]{1,4})"
)

# authority = [ userinfo "@" ] host [ ":" port ]
_AUTHORITY: str = rf"(?:{_USERINFO}@)?{_HOST}?(?::{_PORT})?"

# segment = 1*( pchar minus "/" )
_SEGMENT: str = rf"[{_UNRESERVED}{_PCT}{_SUB_DELIMS}:@]+"

# path = [ "/" ] [ segment *( "/" segment ) [ "/" ] ]
_PATH: str = rf"(?P<path>/?(?:{_SEGMENT}(?:/{_SEGMENT})*/?)?)"

# qchar = unreserved / pct-encoded / sub-delims minus "&" "=" / ":" / "@" / "/" / "?"
_QCHAR: str = rf"[{_UNRESERVED}{_PCT}{_QUERY_SUB_DELIMS}:@/?]"

# pair = *qchar [ "=" *qchar ]
_PAIR: str = rf"{_QCHAR}*(?:={_QCHAR}*)?"

# query = pair *( "&" pair )
_QUERY: str = rf"(?P<query>{_PAIR}(?:&{_PAIR})*)"

# fragment = *( pchar / "/" / "?" )
_FRAGMENT: str = rf"(?P<fragment>[{_UNRESERVED}{_PCT}{_SUB_DELIMS}:@/?]*)"

# An authority on its own, optionally introduced by "//", ending where a path, query or fragment would start.
AUTHORITY_PAT: re.Pattern[str] = re.compile(rf"\A(?://)?{_AUTHORITY}(?=[/?#]|\Z)")

# A path on its own, ending where a query or fragment would start.
PATH_PAT: re.Pattern[str] = re.compile(rf"\A{_PATH}(?=[?#]|\Z)")

# A query on its own, optionally introduced by "?", ending where a fragment would start.
QUERY_PAT: re.Pattern[str] = re.compile(rf"\A\??{_QUERY}(?=#|\Z)")

# URI = [ scheme ":" ] [ "//" authority ] path [ "?" query ] [ "#" fragment ]
URI_PAT: re.Pattern[str] = re.compile(
    rf"\A(?:{_SCHEME}:)?(?://(?P<authority>{_AUTHORITY})(?=[/?#]|\Z))?{_PATH}(?:\?{_QUERY})?(?:#{_FRAGMENT})?\Z"
)


def captures(m: re.Match[str] | None) -> dict[str, str] | None:
    """Returns every named group of m, with the ones that didn't participate as ""."""
    if m is None:
        return None
    return {name: value if value is not None else "" for name, value in m.groupdict().items()}

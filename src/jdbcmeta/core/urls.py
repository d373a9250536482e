"""JDBC URL rewriting.

Builds the URL handed to the execution layer from a configured JDBC URL:

- injects the database name after the authority when the URL has none
- merges session-level variables into the `sessionVariables` query
  parameter, for protocols that support it

The query string is handled as an ordered list of raw `key=value` pairs so
that everything not touched by the merge is emitted byte for byte.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from jdbcmeta.core.errors import (
    ConfigErrorKind,
    ConfigurationError,
    UnsupportedCapabilityError,
)
from jdbcmeta.core.models import SessionVariables

logger = logging.getLogger(__name__)

SESSION_VARIABLES_KEY = "sessionVariables"
SUPPORTED_PROTOCOLS: tuple[str, ...] = ("MYSQL",)
UNKNOWN_PROTOCOL = "UNKNOWN"

_SCHEME_RE = re.compile(r"^jdbc:(?P<scheme>[A-Za-z0-9+.\-]+)", re.IGNORECASE)
_URL_RE = re.compile(
    r"^(?P<base>jdbc:[A-Za-z0-9+.\-]+(?::[A-Za-z0-9+.\-]+)*://[^/?]*)"
    r"(?P<path>/[^?]*)?"
    r"(?:\?(?P<query>.*))?$",
    re.IGNORECASE | re.DOTALL,
)

QueryParams = list[tuple[str, str | None]]


def parse_session_variables(raw: str | None) -> SessionVariables:
    """
    Split a session context string (`k1=v1,@k2=v2`) into ordered entries.

    Entries are kept as opaque strings; surrounding whitespace and empty
    entries are dropped.
    """
    if not raw:
        return ()
    return tuple(entry.strip() for entry in raw.split(",") if entry.strip())


def protocol_of(uri: str) -> str:
    """Return the upper-cased JDBC sub-protocol (`jdbc:mysql://...` -> `MYSQL`)."""
    match = _SCHEME_RE.match(uri.strip())
    if match is None:
        return UNKNOWN_PROTOCOL
    return match.group("scheme").upper()


def check_session_variable_support(uri: str) -> None:
    """Raise if the URL's protocol cannot propagate session variables."""
    protocol = protocol_of(uri)
    if protocol not in SUPPORTED_PROTOCOLS:
        raise UnsupportedCapabilityError(protocol, SUPPORTED_PROTOCOLS)


def parse_query(query: str) -> QueryParams:
    """Split a raw query string into ordered `(key, value)` pairs.

    Values keep everything after the first `=`; a parameter without `=`
    gets a value of None so it is rendered back without one.
    """
    params: QueryParams = []
    for piece in query.split("&"):
        key, sep, value = piece.partition("=")
        params.append((key, value if sep else None))
    return params


def render_query(params: QueryParams) -> str:
    """Inverse of `parse_query`."""
    return "&".join(key if value is None else f"{key}={value}" for key, value in params)


def merge_session_variables(
    params: QueryParams, session_variables: Iterable[str]
) -> QueryParams:
    """
    Merge session variables into the `sessionVariables` parameter.

    Session entries come first, followed by the URL's own entries; nothing is
    deduplicated. The parameter keeps its position, or is appended last when
    the URL had none, after any trailing empty pieces (`a=1&`). Only the first
    `sessionVariables` parameter is merged.
    """
    entries = list(session_variables)
    if not entries:
        return list(params)

    merged: QueryParams = []
    found = False
    for key, value in params:
        if key == SESSION_VARIABLES_KEY and not found:
            existing = value.split(",") if value else []
            merged.append((key, ",".join(entries + existing)))
            found = True
        else:
            merged.append((key, value))

    if not found:
        while merged and merged[-1] == ("", None):
            merged.pop()
        merged.append((SESSION_VARIABLES_KEY, ",".join(entries)))
    return merged


def build_jdbc_url(
    uri: str,
    database: str | None = None,
    session_variables: Iterable[str] = (),
) -> str:
    """
    Return the JDBC URL to hand over to the execution layer.

    Args:
        uri: Configured JDBC URL, `jdbc:<protocol>://host:port[/db][?query]`.
        database: Database to inject when the URL has no database segment.
            An existing segment always wins. None disables injection.
        session_variables: Ordered session entries to merge into
            `sessionVariables`. May be empty.

    Raises:
        UnsupportedCapabilityError: If session variables are given and the
            protocol is not one of SUPPORTED_PROTOCOLS.
        ConfigurationError: If session variables must be merged into a URL
            that does not have the expected shape.
    """
    entries = tuple(session_variables)
    if entries:
        check_session_variable_support(uri)

    match = _URL_RE.match(uri)
    if match is None:
        if entries:
            raise ConfigurationError(
                f"Malformed JDBC URL '{uri}'.",
                kind=ConfigErrorKind.MALFORMED_URI,
            )
        logger.debug("Leaving non hierarchical JDBC URL untouched: %s", uri)
        return uri

    base = match.group("base")
    path = match.group("path")
    query = match.group("query")

    if database and (not path or path == "/"):
        path = f"/{database}"

    if entries:
        params = parse_query(query) if query else []
        query = render_query(merge_session_variables(params, entries))

    url = base + (path or "")
    if query is not None:
        url = f"{url}?{query}"

    if url != uri:
        logger.debug("Rewrote JDBC URL %s -> %s", uri, url)
    return url

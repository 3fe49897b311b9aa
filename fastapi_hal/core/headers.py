"""Append-only header multimap used by HAL responses."""

from __future__ import annotations

import logging
from typing import ClassVar, Iterator, Union

from starlette.datastructures import MutableHeaders

from .errors import InvalidHeaderName, InvalidHeaderValue

logger = logging.getLogger(__name__)

HeaderValueLike = Union[str, bytes, int]

_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~0123456789"
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _validate_name(name: str) -> str:
    if not isinstance(name, str) or not name or not set(name) <= _TOKEN_CHARS:
        logger.debug("Rejected header name %r", name)
        raise InvalidHeaderName(name)
    return name


def _is_latin1(text: str) -> bool:
    try:
        text.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return True


def _encode_value(name: str, value: HeaderValueLike) -> str:
    """Return ``value`` as header text, rejecting anything unsafe on the wire."""
    if isinstance(value, bool):
        raise InvalidHeaderValue(name, value, "booleans are not header values")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, bytes):
        codes = list(value)
        text = value.decode("latin-1")
    elif isinstance(value, str):
        codes = [ord(char) for char in value]
        text = value
    else:
        raise InvalidHeaderValue(
            name, value, f"unsupported type {type(value).__name__}"
        )
    for code in codes:
        if code > 0xFF:
            raise InvalidHeaderValue(name, value, "characters outside latin-1")
        if (code < 0x20 and code != 0x09) or code == 0x7F:
            raise InvalidHeaderValue(name, value, f"control character {code:#04x}")
    return text


class TypedHeader:
    """A header that knows its own name, for use with ``with_header``."""

    header_name: ClassVar[str]

    def header_value(self) -> HeaderValueLike:
        """Return the value to send under ``header_name``."""
        raise NotImplementedError


class Location(TypedHeader):
    """Target of a redirect or of a newly created resource."""

    header_name = "Location"

    def __init__(self, url: str) -> None:
        self.url = url

    def header_value(self) -> str:
        return self.url


class ETag(TypedHeader):
    """Entity tag, quoted and optionally marked weak."""

    header_name = "ETag"

    def __init__(self, tag: str, *, weak: bool = False) -> None:
        self.tag = tag
        self.weak = weak

    def header_value(self) -> str:
        tag = self.tag.strip('"')
        value = f'"{tag}"'
        return f"W/{value}" if self.weak else value


class CacheControl(TypedHeader):
    """Cache directives joined into one header value."""

    header_name = "Cache-Control"

    def __init__(self, *directives: str) -> None:
        self.directives = directives

    def header_value(self) -> str:
        return ", ".join(self.directives)


class Headers:
    """Ordered header multimap that only supports appending.

    Names are case-insensitive and stored lower-cased. A name may carry
    several values (repeated ``Set-Cookie`` for instance), which are kept in
    the order they were appended. Nothing can be removed or replaced once
    added.
    """

    def __init__(self, raw: list[tuple[bytes, bytes]] | None = None) -> None:
        self._headers = MutableHeaders(raw=list(raw) if raw else [])

    def with_header_value(self, name: str, value: HeaderValueLike) -> "Headers":
        """Append ``value`` under ``name``.

        Raises ``InvalidHeaderName`` or ``InvalidHeaderValue`` without
        touching the stored headers when either part is not valid HTTP.
        """
        name = _validate_name(name)
        try:
            text = _encode_value(name, value)
        except InvalidHeaderValue as exc:
            logger.debug("Rejected value for header %r: %s", name, exc.reason)
            raise
        self._headers.append(name, text)
        return self

    def with_header(self, header: TypedHeader) -> "Headers":
        """Append a typed header under its own name."""
        return self.with_header_value(header.header_name, header.header_value())

    def append(self, name: str, value: HeaderValueLike) -> None:
        """Append ``value`` under ``name`` with the same checks as ``with_header_value``."""
        self.with_header_value(name, value)

    def getlist(self, name: str) -> list[str]:
        """Return every value stored under ``name``, in insertion order."""
        if not _is_latin1(name):
            return []
        return self._headers.getlist(name)

    def items(self) -> list[tuple[str, str]]:
        """Return all ``(name, value)`` pairs, duplicates included."""
        return self._headers.items()

    @property
    def raw(self) -> list[tuple[bytes, bytes]]:
        """Return the latin-1 encoded pairs as sent on the wire."""
        return list(self._headers.raw)

    def copy(self) -> "Headers":
        """Return an independent copy of these headers."""
        return Headers(self.raw)

    def as_mutable_headers(self) -> MutableHeaders:
        """Return a Starlette copy of these headers, duplicates included."""
        return MutableHeaders(raw=self.raw)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.items())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _is_latin1(name) and name in self._headers

    def __len__(self) -> int:
        return len(self._headers.raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self.raw == other.raw

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.items()!r})"

"""Parsing and re-serialising of proxy-style HTTP GET requests."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MIN_REQUEST_LENGTH = 4
MAX_REQUEST_LENGTH = 65535

_ROOT_PATH = "/"
_CRLF = "\r\n"
_NUMERIC_PREFIX = re.compile(r"\s*[+-]?\d")

__all__ = [
    "MAX_REQUEST_LENGTH",
    "MIN_REQUEST_LENGTH",
    "ParseError",
    "ParsedHeader",
    "ParsedRequest",
    "parse_request",
]


class ParseError(ValueError):
    """Raised when a request buffer cannot be parsed."""


@dataclass(frozen=True)
class ParsedHeader:
    """A single ``key: value`` header line."""

    key: str
    value: str

    def line(self) -> str:
        """Return the header as it appears on the wire."""
        return f"{self.key}: {self.value}{_CRLF}"


def _tokenize(text: str, start: int, delimiters: str) -> tuple[str | None, int, int]:
    """Split off the next token, skipping leading delimiters.

    Returns the token (or None when only delimiters remain), the index where
    the token starts and the index where scanning should resume.
    """
    length = len(text)
    begin = start
    while begin < length and text[begin] in delimiters:
        begin += 1
    if begin >= length:
        return None, length, length
    end = begin
    while end < length and text[end] not in delimiters:
        end += 1
    resume = end + 1 if end < length else length
    return text[begin:end], begin, resume


def _as_text(data: str | bytes | bytearray) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("latin-1")
    return data


@dataclass
class ParsedRequest:
    """A parsed absolute-URI GET request with its headers."""

    method: str
    protocol: str
    host: str
    port: str | None
    path: str
    version: str
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, data: str | bytes | bytearray) -> ParsedRequest:
        """Parse a request buffer ending with a blank line."""
        raw = _as_text(data)
        if not MIN_REQUEST_LENGTH <= len(raw) <= MAX_REQUEST_LENGTH:
            raise ParseError(f"invalid request length {len(raw)}")

        text = raw.split("\0", 1)[0]
        if _CRLF * 2 not in text:
            raise ParseError("invalid request line, no end of header")

        line_end = text.index(_CRLF)
        line = text[:line_end]

        method, _, pos = _tokenize(line, 0, " ")
        if method is None:
            raise ParseError("invalid request line, no whitespace")
        if method != "GET":
            raise ParseError(f"invalid request line, method not 'GET': {method}")

        address, address_start, _ = _tokenize(line, pos, " ")
        if address is None:
            raise ParseError("invalid request line, no full address")

        address_end = address_start + len(address)
        version = line[address_end + 1:] if address_end < len(line) else ""
        if not version.startswith("HTTP/"):
            raise ParseError(f"invalid request line, unsupported version {version}")

        protocol, _, pos = _tokenize(address, 0, ":/")
        if protocol is None:
            raise ParseError("invalid request line, missing host")
        absolute_uri_length = max(len(address) - (len(protocol) + 3), 0)

        authority, _, pos = _tokenize(address, pos, "/")
        if authority is None:
            raise ParseError("invalid request line, missing host")
        if len(authority) == absolute_uri_length:
            raise ParseError("invalid request line, missing absolute path")

        rest, _, _ = _tokenize(address, pos, " ")
        if rest is None:
            path = _ROOT_PATH
        elif rest.startswith(_ROOT_PATH):
            raise ParseError(
                "invalid request line, path cannot begin with two slash characters"
            )
        else:
            path = _ROOT_PATH + rest

        host, _, pos = _tokenize(authority, 0, ":")
        if host is None:
            raise ParseError("invalid request line, missing host")
        port, _, _ = _tokenize(authority, pos, "/")
        if port is not None and not _NUMERIC_PREFIX.match(port):
            raise ParseError(f"invalid request line, bad port: {port}")

        request = cls(
            method=method,
            protocol=protocol,
            host=host,
            port=port,
            path=path,
            version=version,
        )
        request._parse_headers(text, line_end + 2)
        return request

    def _parse_headers(self, text: str, pos: int) -> None:
        while pos < len(text) and not text.startswith(_CRLF, pos):
            colon = text.find(":", pos)
            if colon < 0:
                raise ParseError("no colon found in header")
            value_start = colon + 2
            value_end = text.find(_CRLF, value_start)
            if value_end < 0:
                raise ParseError("header value is not terminated")
            self.set_header(text[pos:colon], text[value_start:value_end])

            next_line = text.find(_CRLF, pos)
            if next_line < 0:
                break
            pos = next_line + 2

    def set_header(self, key: str, value: str) -> None:
        """Set a header, replacing and moving any existing one to the end."""
        self.headers.pop(key, None)
        self.headers[key] = value

    def get_header(self, key: str) -> ParsedHeader | None:
        """Return the header with exactly this key, or None."""
        if key in self.headers:
            return ParsedHeader(key, self.headers[key])
        return None

    def remove_header(self, key: str) -> None:
        """Remove a header; raise KeyError when it is absent."""
        if key not in self.headers:
            raise KeyError(key)
        del self.headers[key]

    def request_line(self) -> str:
        """Return the request line including its trailing CRLF."""
        port = f":{self.port}" if self.port is not None else ""
        return (
            f"{self.method} {self.protocol}://{self.host}{port}{self.path} "
            f"{self.version}{_CRLF}"
        )

    def unparse_headers(self) -> str:
        """Return the headers followed by the terminating blank line."""
        lines = "".join(ParsedHeader(k, v).line() for k, v in self.headers.items())
        return lines + _CRLF

    def unparse(self) -> str:
        """Return the whole request: request line, headers and blank line."""
        return self.request_line() + self.unparse_headers()

    def headers_len(self) -> int:
        """Length of the headers and the trailing CRLF."""
        return len(self.unparse_headers())

    def total_len(self) -> int:
        """Length of the whole serialised request."""
        return len(self.request_line()) + self.headers_len()


def parse_request(data: str | bytes | bytearray) -> ParsedRequest:
    """Parse a request buffer into a ParsedRequest."""
    return ParsedRequest.parse(data)
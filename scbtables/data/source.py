from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

import json
import logging
import re

import requests

from ..errors import ParseError, TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"content-type": "application/json; charset=ISO-8859-1"}

# literal backslash-r-backslash-n / backslash-n text, not control characters
_ESCAPED_NEWLINE = re.compile(r"\\r\\n|\\n")
_BOM = "\ufeff"


class Transport(Protocol):
    """Blocking GET/POST returning the decoded response body.

    Implementations raise TransportError on connection failure, timeout,
    error status or an empty body.
    """

    def get(self, url: str, headers: Mapping[str, str]) -> str: ...

    def post(self, url: str, headers: Mapping[str, str], body: str) -> str: ...


@dataclass
class RequestsTransport:
    """Blocking HTTP transport on top of requests."""

    timeout: float = 30.0
    encoding: str = "utf-8"
    session: Optional[requests.Session] = None

    def _send(self, method: str, url: str, headers: Mapping[str, str], body=None) -> str:
        sender = self.session if self.session is not None else requests
        logger.debug("%s %s", method, url)
        try:
            response = sender.request(
                method, url, headers=dict(headers), data=body, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        raw = response.content
        if not raw:
            raise TransportError(f"{method} {url} returned an empty body")
        # charset declared by the server wins over the configured default
        encoding = response.encoding or self.encoding
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise TransportError(
                f"{method} {url} returned a body that is not {encoding}"
            ) from exc

    def get(self, url: str, headers: Mapping[str, str]) -> str:
        return self._send("GET", url, headers)

    def post(self, url: str, headers: Mapping[str, str], body: str) -> str:
        return self._send("POST", url, headers, body=body)


def sanitize_body(text: str) -> str:
    """Strip escaped-newline literals and byte-order marks from a raw body."""
    prev = None
    while prev != text:
        prev = text
        text = _ESCAPED_NEWLINE.sub("", text).replace(_BOM, "")
    return text


def parse_json_object(text: str, what: str = "response") -> Dict[str, Any]:
    try:
        obj = json.loads(sanitize_body(text))
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON in {what}: {exc}") from exc
    if not isinstance(obj, dict):
        raise ParseError(f"Expected a JSON object in {what}, got {type(obj).__name__}")
    return obj

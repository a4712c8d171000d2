"""URL and domain syntax checks.

``parse_as_uri`` accepts anything with a URI scheme (``http://x``,
``about:config``, ``localhost:8080``). ``parse_base_domain`` treats the text
as a host, optionally followed by a path, and requires a registrable domain
under a public suffix. The suffix list is the snapshot bundled with
tldextract; no network access happens at runtime.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

import tldextract

from autoselect.domain.errors import InvalidHostError, InvalidURIError

# RFC 3986 scheme followed by the ':' separator
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

# Characters ending the host part of a domain-like string
_HOST_END_RE = re.compile(r"[/?#]")

_LABEL_RE = re.compile(r"^(?!-)[A-Za-z0-9\-]{1,63}(?<!-)$")


class UrlClassifier:
    """URIClassifier implementation based on urllib and tldextract."""

    def __init__(self, extractor: tldextract.TLDExtract | None = None) -> None:
        self._extract = extractor or tldextract.TLDExtract(
            cache_dir=None,
            suffix_list_urls=(),
        )

    def parse_as_uri(self, text: str) -> str:
        if not _SCHEME_RE.match(text):
            raise InvalidURIError(f"No URI scheme in {text!r}")
        try:
            parts = urlsplit(text)
        except ValueError as e:
            raise InvalidURIError(f"Malformed URI {text!r}: {e}") from e
        if not parts.scheme:
            raise InvalidURIError(f"No URI scheme in {text!r}")
        return parts.geturl()

    def parse_base_domain(self, text: str) -> str:
        host = _HOST_END_RE.split(text, maxsplit=1)[0].rstrip(".").lower()
        if not host:
            raise InvalidHostError(f"No host in {text!r}")

        labels = host.split(".")
        if not all(_LABEL_RE.match(label) for label in labels):
            raise InvalidHostError(f"Invalid host {host!r}")

        result = self._extract(host)
        if not result.domain or not result.suffix:
            raise InvalidHostError(f"{host!r} is not under a public suffix")
        return f"{result.domain}.{result.suffix}"

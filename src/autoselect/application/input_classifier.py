"""
InputClassifier - decides whether the host's default handling already
interprets the typed text correctly (URL, domain-like string or shortcut).
"""

from __future__ import annotations

from autoselect.application.keyword_classifier import KeywordClassifier
from autoselect.domain.errors import InvalidHostError, InvalidURIError
from autoselect.domain.protocols import URIClassifier
from autoselect.logger import get_logger

logger = get_logger("input_classifier")


class InputClassifier:
    """Classifies raw typed text; the first matching rule wins."""

    def __init__(self, uri: URIClassifier, keywords: KeywordClassifier):
        self.uri = uri
        self.keywords = keywords

    def host_will_handle(self, raw_text: str) -> bool:
        """
        Return True when the selection controller must stay out of the way.

        Rules, in order:
            1. No whitespace and the text parses as an absolute URI
            2. No whitespace and the text has a registrable base domain
               (e.g. ``site.com/page``)
            3. The first word is a known shortcut (search alias or keyword)

        Args:
            raw_text: Text the user typed, already trimmed

        Returns:
            True if the host handles the text itself
        """
        words = raw_text.split()

        # Potentially a URL if there's no whitespace
        if raw_text and not any(ch.isspace() for ch in raw_text):
            try:
                self.uri.parse_as_uri(raw_text)
                logger.debug(f"{raw_text!r} is a URI")
                return True
            except InvalidURIError:
                pass

            try:
                self.uri.parse_base_domain(raw_text)
                logger.debug(f"{raw_text!r} is domain-like")
                return True
            except InvalidHostError:
                pass

        if words and self.keywords.is_known_shortcut(words[0]):
            logger.debug(f"{words[0]!r} is a known shortcut")
            return True

        return False

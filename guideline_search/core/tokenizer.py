"""Query normalization and stop-word aware tokenization."""

import re
from typing import FrozenSet, Iterable, List, Optional


# Common query words that rarely identify a guideline on their own
STOP_WORDS: FrozenSet[str] = frozenset({
    "how", "often", "do", "i", "the", "a", "an", "is", "are", "what",
    "when", "where", "should", "can", "for", "with", "about", "to", "at",
    "check", "need", "please", "me",
})


class Tokenizer:
    """Splits free-text queries into search terms."""

    def __init__(self, stop_words: Optional[Iterable[str]] = None) -> None:
        """
        Initialize the tokenizer.

        Args:
            stop_words: Custom stop-word set (defaults to STOP_WORDS)
        """
        if stop_words is None:
            self.stop_words = STOP_WORDS
        else:
            self.stop_words = frozenset(word.lower() for word in stop_words)

        self.whitespace_regex = re.compile(r"\s+")

    def normalize(self, query: str) -> str:
        """Lower-case and trim a raw query."""
        if not query:
            return ""
        return query.lower().strip()

    def split(self, query: str) -> List[str]:
        """
        Split a query into all of its whitespace-delimited tokens.

        Args:
            query: Raw query text

        Returns:
            Normalized tokens, stop-words included
        """
        normalized = self.normalize(query)
        if not normalized:
            return []

        return [token for token in self.whitespace_regex.split(normalized) if token]

    def tokenize(self, query: str) -> List[str]:
        """
        Turn a query into the terms used for matching.

        Stop-words are removed unless that would leave nothing, in which
        case every token is kept so the query still searches something.

        Args:
            query: Raw query text

        Returns:
            Ordered list of search terms, empty for a blank query
        """
        tokens = self.split(query)
        anchors = [token for token in tokens if token not in self.stop_words]

        return anchors if anchors else tokens


_default_tokenizer = Tokenizer()


def tokenize(query: str) -> List[str]:
    """Tokenize a query with the default stop-word set."""
    return _default_tokenizer.tokenize(query)

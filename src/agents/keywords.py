"""
Keyword Scorer.

Tokenizes the full input, filters stopwords and short tokens,
and ranks the remaining words by frequency.
"""

import logging
import re
from collections import Counter
from typing import Dict, List

from src.models.keyword import Keyword

logger = logging.getLogger(__name__)


STOPWORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "if", "then", "else", "for",
    "to", "of", "in", "on", "with", "by", "is", "are", "was", "were",
    "be", "been", "it", "that", "this", "these", "those", "as", "at", "from",
    "we", "you", "they", "he", "she", "i", "my", "our", "your",
])

MIN_TOKEN_LENGTH = 3

_CURLY_QUOTES = re.compile("[\u2018\u2019\u201c\u201d]")
_NON_WORD_CHARS = re.compile(r"[^a-z0-9'\s\-]")


def tokenize_words(text: str) -> List[str]:
    """Lowercase, strip punctuation, and split text into raw tokens."""
    cleaned = _CURLY_QUOTES.sub("'", text.lower())
    cleaned = _NON_WORD_CHARS.sub(" ", cleaned)
    return [token for token in cleaned.split() if token]


def is_candidate_keyword(token: str) -> bool:
    return len(token) >= MIN_TOKEN_LENGTH and token not in STOPWORDS


class KeywordScorer:
    """
    Ranks keywords by descending frequency.

    Ties are broken by first occurrence in the text, so the ranking
    is fully deterministic.
    """

    def __init__(self, top_n: int = 12):
        """
        Initialize keyword scorer.

        Args:
            top_n: Maximum number of keywords to return
        """
        self.top_n = top_n

    def score(self, text: str) -> List[Keyword]:
        """
        Score keywords in text.

        Args:
            text: Full raw input text

        Returns:
            Up to top_n keywords, highest count first
        """
        counts: Counter = Counter()
        first_seen: Dict[str, int] = {}

        for token in tokenize_words(text):
            if not is_candidate_keyword(token):
                continue
            if token not in first_seen:
                first_seen[token] = len(first_seen)
            counts[token] += 1

        ranked = sorted(counts.items(), key=lambda item: (-item[1], first_seen[item[0]]))
        keywords = [Keyword(keyword=token, count=count) for token, count in ranked[:self.top_n]]

        logger.info(
            f"Scored {len(counts)} distinct keywords, keeping top {len(keywords)}"
        )
        return keywords

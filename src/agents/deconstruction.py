"""
Deconstruction Agent.

Splits raw text into sentences and classifies each one as a
fact, claim, or question using ordered pattern rules.
"""

import logging
import re
from typing import Callable, List, Tuple

from src.models.sentence import ClassifiedSentence, Deconstruction

logger = logging.getLogger(__name__)


# Split after terminal punctuation + whitespace, or on blank lines
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.?!])\s+|\n{2,}")

# ASCII digits and word boundaries only; "٤٥" is not a number here
_DIGIT_RUN = re.compile(r"[0-9]{2,}")
_RECENT_YEAR = re.compile(r"202[0-9]")
_PERCENTAGE = re.compile(r"[0-9]+%")
_FACT_TERMS = re.compile(
    r"\b(version|error|commit|bug|issue|cron|workflow)\b",
    re.IGNORECASE | re.ASCII
)
_QUESTION_OPENER = re.compile(r"^(who|what|why|how)\s", re.IGNORECASE)

CLAIM_MARKERS = (
    "should", "must", "need to", "we should", "recommend", "suggest", "propose"
)


def split_sentences(text: str) -> List[str]:
    """
    Split text into trimmed, non-empty sentences in original order.

    Terminal punctuation stays attached to its sentence. There is no
    abbreviation handling, so "Mr. Smith" splits after "Mr.".
    """
    if not text:
        return []

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    pieces = _SENTENCE_BOUNDARY.split(normalized)
    return [piece.strip() for piece in pieces if piece.strip()]


def has_factual_signal(sentence: str) -> bool:
    """Numbers, recent years, percentages, or engineering-record terms."""
    return bool(
        _DIGIT_RUN.search(sentence)
        or _RECENT_YEAR.search(sentence)
        or _PERCENTAGE.search(sentence)
        or _FACT_TERMS.search(sentence)
    )


def has_normative_language(sentence: str) -> bool:
    low = sentence.lower()
    return any(marker in low for marker in CLAIM_MARKERS)


def is_interrogative(sentence: str) -> bool:
    stripped = sentence.strip()
    return stripped.endswith("?") or bool(_QUESTION_OPENER.match(stripped))


# First match wins; sentences matching nothing default to "fact"
CLASSIFICATION_RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (has_factual_signal, "fact"),
    (has_normative_language, "claim"),
    (is_interrogative, "question"),
)
DEFAULT_KIND = "fact"


def classify_sentence(sentence: str) -> str:
    """Return the kind of the first rule that matches the sentence."""
    for predicate, kind in CLASSIFICATION_RULES:
        if predicate(sentence):
            return kind
    return DEFAULT_KIND


class DeconstructionAgent:
    """
    First stage of the D&R pipeline.

    Produces the ordered sentence sequence (consumed by the focal
    point selector) and the fact/claim/question buckets.
    """

    def split(self, text: str) -> List[str]:
        sentences = split_sentences(text)
        logger.debug(f"Split input into {len(sentences)} sentences")
        return sentences

    def classify(self, sentences: List[str]) -> List[ClassifiedSentence]:
        return [
            ClassifiedSentence(text=sentence.strip(), kind=classify_sentence(sentence))
            for sentence in sentences
        ]

    def deconstruct(self, sentences: List[str]) -> Deconstruction:
        """
        Classify sentences and group them by kind.

        Args:
            sentences: Output of split()

        Returns:
            Deconstruction with every sentence in exactly one bucket
        """
        deconstruction = Deconstruction.from_classified(self.classify(sentences))

        logger.info(
            f"Deconstructed {len(sentences)} sentences: "
            f"{len(deconstruction.facts)} facts, "
            f"{len(deconstruction.claims)} claims, "
            f"{len(deconstruction.questions)} questions"
        )
        return deconstruction


# Design Rationale and Trade-offs:
#
# 1. Why a rule list instead of if/elif?
#    - Precedence is visible in one place (fact > claim > question)
#    - Each predicate is testable on its own
#    - Trade-off: One extra indirection when reading the classifier
#
# 2. Why substring matching for claim markers?
#    - "recommended", "suggests", "proposed" count as normative language
#    - Trade-off: "mustard" also counts as a claim
#
# 3. Why no abbreviation list in the splitter?
#    - Keeps splitting language-agnostic and deterministic
#    - Trade-off: "e.g. " and "Mr. " end sentences early

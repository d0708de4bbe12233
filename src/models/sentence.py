"""
Sentence data models.

Represents classified sentences and the deconstruction buckets
(facts, claims, questions) produced by the Deconstruction Agent.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

SENTENCE_KINDS = ("fact", "claim", "question")


@dataclass(frozen=True)
class ClassifiedSentence:
    """
    A single trimmed sentence and the category assigned to it.
    Output of the classifier, one per split sentence.
    """
    text: str  # Trimmed, non-empty sentence text
    kind: str  # "fact", "claim", or "question"

    def __post_init__(self):
        if self.kind not in SENTENCE_KINDS:
            raise ValueError(
                f"Invalid kind: {self.kind}. Must be 'fact', 'claim', or 'question'"
            )


@dataclass(frozen=True)
class Deconstruction:
    """
    Sentences grouped by kind.

    The three buckets partition the original sentence sequence;
    relative order inside each bucket matches the input.
    """
    facts: Tuple[str, ...] = ()
    claims: Tuple[str, ...] = ()
    questions: Tuple[str, ...] = ()

    @classmethod
    def from_classified(cls, classified: List[ClassifiedSentence]) -> "Deconstruction":
        """Group classified sentences into buckets, preserving order."""
        buckets: Dict[str, List[str]] = {kind: [] for kind in SENTENCE_KINDS}
        for sentence in classified:
            buckets[sentence.kind].append(sentence.text)

        return cls(
            facts=tuple(buckets["fact"]),
            claims=tuple(buckets["claim"]),
            questions=tuple(buckets["question"])
        )

    def __len__(self) -> int:
        return len(self.facts) + len(self.claims) + len(self.questions)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "facts": list(self.facts),
            "claims": list(self.claims),
            "questions": list(self.questions)
        }

"""
Focal point data models.

Represents both sentence-level focal points (F1..F5) and
keyword-level micro focal points (K1..K6).
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FocalPoint:
    """
    A sentence judged central to the input.
    Selected because it contains one or more top-ranked trigger keywords.
    """
    id: str  # "F1".."F5", in rank order
    summary: str  # The source sentence
    triggers: Tuple[str, ...]  # Trigger keywords contained in the sentence

    def __post_init__(self):
        if not self.triggers:
            raise ValueError(f"Focal point {self.id} must have at least one trigger")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "summary": self.summary,
            "triggers": list(self.triggers)
        }


@dataclass(frozen=True)
class MicroFocalPoint:
    """A top keyword emitted as a focal point in its own right."""
    id: str  # "K1".."K6"
    keyword: str

    def to_dict(self) -> dict:
        return {"id": self.id, "keyword": self.keyword}


@dataclass(frozen=True)
class FocalPoints:
    """Both focal point lists, as produced by the Focal Point Selector."""
    focal: Tuple[FocalPoint, ...] = ()
    micro: Tuple[MicroFocalPoint, ...] = ()

    def to_dict(self) -> dict:
        return {
            "focal": [fp.to_dict() for fp in self.focal],
            "micro": [mp.to_dict() for mp in self.micro]
        }


# Design Rationale and Trade-offs:
#
# 1. Why two focal point types instead of one with optional fields?
#    - Sentence points carry a summary and triggers, keyword points do not
#    - The report keeps them in separate lists ("focal" and "micro")
#    - Trade-off: Two small classes, but no None checks downstream
#
# 2. Why tuples instead of lists?
#    - Frozen dataclasses only protect attribute assignment
#    - Tuples keep the contents from being mutated after selection
#    - Trade-off: Convert back to lists in to_dict() for JSON

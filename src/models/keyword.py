"""
Keyword data model.

A ranked (token, count) pair produced by the Keyword Scorer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Keyword:
    keyword: str  # Case-folded, punctuation-stripped token
    count: int  # Occurrences in the full input text

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"Invalid count for '{self.keyword}': {self.count}. Must be >= 1")

    def to_dict(self) -> dict:
        return {"keyword": self.keyword, "count": self.count}

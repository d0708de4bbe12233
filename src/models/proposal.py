"""
Proposal data model.

Remediation actions generated for a single sentence focal point.
"""

from dataclasses import dataclass
from typing import Tuple

PRINCIPLES = ("Simple", "Efficient", "Pragmatic", "Safe")


@dataclass(frozen=True)
class Proposal:
    """
    Re-architecture output for one focal point.
    Holds at least one action and the four guiding principles.
    The upper bound on actions is enforced by ReArchitectureAgent.
    """
    id: str  # Matches the focal point id ("F1".."F5")
    problem: str  # The focal sentence
    proposals: Tuple[str, ...]  # Ordered actions
    principles: Tuple[str, ...] = PRINCIPLES

    def __post_init__(self):
        if not self.proposals:
            raise ValueError(f"Proposal {self.id} must have at least one action")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "problem": self.problem,
            "proposals": list(self.proposals),
            "principles": list(self.principles)
        }

"""
Report data model.

The terminal aggregate of a pipeline run. Serializes to the JSON
shape written to disk and printed on stdout.
"""

from dataclasses import dataclass
from typing import Tuple

from src.models.sentence import Deconstruction
from src.models.keyword import Keyword
from src.models.focal_point import FocalPoints
from src.models.proposal import Proposal


@dataclass(frozen=True)
class ReportMeta:
    timestamp: str  # ISO-8601, UTC, millisecond precision
    source_size: int  # Character length of the raw input

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp, "sourceSize": self.source_size}


@dataclass(frozen=True)
class Report:
    """
    Complete D&R result for one input.
    Created once by the Report Assembler and never mutated.
    """
    meta: ReportMeta
    deconstruction: Deconstruction
    keywords: Tuple[Keyword, ...]
    focal_points: FocalPoints
    rearchitecture: Tuple[Proposal, ...]

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict (camelCase keys)."""
        return {
            "meta": self.meta.to_dict(),
            "deconstruction": self.deconstruction.to_dict(),
            "keywords": [k.to_dict() for k in self.keywords],
            "focalPoints": self.focal_points.to_dict(),
            "rearchitecture": [p.to_dict() for p in self.rearchitecture]
        }

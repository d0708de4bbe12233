"""
Report Assembler and Keyword Table Builder.

Packages all stage outputs into a single Report, and builds the
optional tabular keyword summary.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List

import pandas as pd

from src.models.sentence import Deconstruction
from src.models.keyword import Keyword
from src.models.focal_point import FocalPoints
from src.models.proposal import Proposal
from src.models.report import Report, ReportMeta

logger = logging.getLogger(__name__)

KEYWORD_TABLE_COLUMNS = ["Rank", "Keyword", "Count", "Trigger", "Focal Sentences"]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ReportAssembler:
    """
    Final stage of the D&R pipeline. Pure structure construction.
    """

    def __init__(self, clock: Callable[[], str] = utc_timestamp):
        """
        Initialize report assembler.

        Args:
            clock: Returns the ISO-8601 timestamp stamped on each report
        """
        self.clock = clock

    def assemble(
        self,
        text: str,
        deconstruction: Deconstruction,
        keywords: List[Keyword],
        focal_points: FocalPoints,
        proposals: List[Proposal]
    ) -> Report:
        """
        Assemble the report.

        Args:
            text: Raw input text (only its length is recorded)
            deconstruction: Fact/claim/question buckets
            keywords: Ranked keywords
            focal_points: Sentence and micro focal points
            proposals: One proposal per sentence focal point

        Returns:
            Immutable Report
        """
        report = Report(
            meta=ReportMeta(timestamp=self.clock(), source_size=len(text)),
            deconstruction=deconstruction,
            keywords=tuple(keywords),
            focal_points=focal_points,
            rearchitecture=tuple(proposals)
        )

        logger.info(
            f"Assembled report: {len(deconstruction)} sentences, "
            f"{len(report.keywords)} keywords, {len(report.rearchitecture)} proposals"
        )
        return report


class KeywordTableBuilder:
    """
    Builds a keyword summary table from a finished report.
    """

    def build(self, report: Report) -> pd.DataFrame:
        """
        One row per ranked keyword.

        Columns:
            Rank, Keyword, Count, Trigger (keyword is a micro focal point),
            Focal Sentences (number of focal sentences it triggered)
        """
        triggers = {mp.keyword for mp in report.focal_points.micro}

        rows = []
        for rank, keyword in enumerate(report.keywords, start=1):
            focal_hits = sum(
                1 for fp in report.focal_points.focal if keyword.keyword in fp.triggers
            )
            rows.append({
                "Rank": rank,
                "Keyword": keyword.keyword,
                "Count": keyword.count,
                "Trigger": keyword.keyword in triggers,
                "Focal Sentences": focal_hits
            })

        df = pd.DataFrame(rows, columns=KEYWORD_TABLE_COLUMNS)

        if df.empty:
            logger.warning("No keywords found, creating empty keyword table")

        return df


# Design Rationale and Trade-offs:
#
# 1. Why inject the clock?
#    - Everything except meta.timestamp is deterministic
#    - Tests pin the clock and compare whole reports
#    - Trade-off: One extra constructor argument
#
# 2. Why pandas for the keyword table?
#    - CSV export is trivial (df.to_csv)
#    - The table loads directly into notebooks for cross-run comparison
#    - Trade-off: Heavy dependency for a small table, but only used on export

"""
Pipeline Orchestrator.

Coordinates sequential execution of all D&R stages for one input.
"""

import logging
from typing import Optional, Tuple

from src.agents.deconstruction import DeconstructionAgent
from src.agents.keywords import KeywordScorer
from src.agents.focal_points import FocalPointSelector
from src.agents.rearchitecture import ReArchitectureAgent
from src.agents.aggregation import ReportAssembler, KeywordTableBuilder
from src.utils.storage import ReportStorage
from src.models.report import Report
import config.settings as settings

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """
    Orchestrates the D&R pipeline.

    Coordinates:
    1. Sentence Splitting → 2. Classification → 3. Keyword Scoring
    → 4. Focal Point Selection → 5. Re-architecture → 6. Report Assembly

    Then optionally persists the report.
    """

    def __init__(
        self,
        storage: Optional[ReportStorage] = None,
        assembler: Optional[ReportAssembler] = None,
        write_keyword_table: bool = False
    ):
        """
        Initialize pipeline orchestrator.

        Args:
            storage: Report storage; None disables persistence
            assembler: Report assembler (override to pin the clock in tests)
            write_keyword_table: Also write a keyword CSV next to each report
        """
        self.storage = storage
        self.write_keyword_table = write_keyword_table

        self.deconstruction_agent = DeconstructionAgent()
        self.keyword_scorer = KeywordScorer(top_n=settings.TOP_KEYWORDS)
        self.focal_point_selector = FocalPointSelector(
            trigger_count=settings.TRIGGER_KEYWORDS,
            max_focal_points=settings.MAX_FOCAL_POINTS
        )
        self.rearchitecture_agent = ReArchitectureAgent(
            max_proposals=settings.MAX_PROPOSALS
        )
        self.assembler = assembler or ReportAssembler()
        self.keyword_table_builder = KeywordTableBuilder()

    def analyze(self, text: str) -> Report:
        """
        Run all stages on text. Pure apart from the report timestamp.

        Args:
            text: Validated input text

        Returns:
            Assembled report
        """
        # STAGE 1: Sentence Splitting
        sentences = self.deconstruction_agent.split(text)

        # STAGE 2: Classification
        deconstruction = self.deconstruction_agent.deconstruct(sentences)

        # STAGE 3: Keyword Scoring
        keywords = self.keyword_scorer.score(text)

        # STAGE 4: Focal Point Selection
        focal_points = self.focal_point_selector.select(sentences, keywords)

        # STAGE 5: Re-architecture
        proposals = self.rearchitecture_agent.propose(focal_points)

        # STAGE 6: Report Assembly
        return self.assembler.assemble(
            text=text,
            deconstruction=deconstruction,
            keywords=keywords,
            focal_points=focal_points,
            proposals=proposals
        )

    def run(self, text: str) -> Tuple[Report, Optional[str]]:
        """
        Analyze text and persist the report.

        Returns:
            (report, path of written report or None when storage is disabled)
        """
        report = self.analyze(text)

        if self.storage is None:
            return report, None

        table = None
        if self.write_keyword_table:
            table = self.keyword_table_builder.build(report)

        output_path = self.storage.save_report(report)

        if table is not None:
            # A run either leaves a complete set of files or none
            try:
                self.storage.save_keyword_table(table, output_path)
            except Exception:
                self.storage.discard_report(output_path)
                raise

        logger.info(f"Pipeline complete! Report: {output_path}")
        return report, output_path

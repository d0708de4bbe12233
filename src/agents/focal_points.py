"""
Focal Point Selector.

Finds the sentences that contain the most top-ranked keywords and
emits the top keywords themselves as micro focal points.
"""

import logging
from typing import List, Tuple

from src.models.keyword import Keyword
from src.models.focal_point import FocalPoint, FocalPoints, MicroFocalPoint

logger = logging.getLogger(__name__)


def matching_triggers(sentence: str, triggers: List[str]) -> Tuple[str, ...]:
    """
    Return the triggers contained in the sentence, in trigger order.

    Containment is an unanchored substring test on the lowercased
    sentence, so "cat" also matches "category".
    """
    low = sentence.lower()
    return tuple(trigger for trigger in triggers if trigger in low)


class FocalPointSelector:
    """
    Selects sentence and keyword focal points.

    Sentence ranking: number of distinct triggers matched, then
    sentence length, both descending. Ties keep input order.
    """

    def __init__(self, trigger_count: int = 6, max_focal_points: int = 5):
        """
        Initialize focal point selector.

        Args:
            trigger_count: Number of top keywords used as triggers
            max_focal_points: Maximum number of sentence focal points
        """
        self.trigger_count = trigger_count
        self.max_focal_points = max_focal_points

    def select(self, sentences: List[str], keywords: List[Keyword]) -> FocalPoints:
        """
        Select focal points.

        Args:
            sentences: Ordered sentences from the splitter
            keywords: Ranked keywords from the scorer

        Returns:
            FocalPoints with up to max_focal_points sentences and
            exactly min(trigger_count, len(keywords)) micro points
        """
        triggers = [k.keyword for k in keywords[:self.trigger_count]]

        matched = []
        for sentence in sentences:
            summary = sentence.strip()
            hits = matching_triggers(summary, triggers)
            if hits:
                matched.append((summary, hits))

        # sorted() is stable, so equal keys keep sentence order
        ranked = sorted(matched, key=lambda m: (-len(m[1]), -len(m[0])))

        focal = tuple(
            FocalPoint(id=f"F{i + 1}", summary=summary, triggers=hits)
            for i, (summary, hits) in enumerate(ranked[:self.max_focal_points])
        )
        micro = tuple(
            MicroFocalPoint(id=f"K{i + 1}", keyword=keyword)
            for i, keyword in enumerate(triggers)
        )

        logger.info(
            f"Selected {len(focal)} focal sentences "
            f"({len(matched)} matched) and {len(micro)} micro focal points"
        )
        return FocalPoints(focal=focal, micro=micro)

"""
Re-architecture Agent.

Maps each sentence focal point to a short list of pragmatic
remediation actions from a fixed rule catalog.
"""

import logging
from typing import List, Tuple

from src.models.focal_point import FocalPoint, FocalPoints
from src.models.proposal import PRINCIPLES, Proposal

logger = logging.getLogger(__name__)


# (trigger substrings, actions) evaluated in order; every matching group contributes
ACTION_CATALOG: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (
        ("issue", "bug", "label"),
        (
            "Triage: reproduce, add labels, assign owner, prioritize.",
            "Automate: create a minimal workflow to notify assignees only when label + unassigned.",
        ),
    ),
    (
        ("workflow", "cron", "gh token", "secret"),
        (
            "Security audit: list workflows that use tokens; restrict job permissions; rotate tokens.",
            "Instrument: add verbose logging and dry-run option before any push actions.",
        ),
    ),
    (
        ("email", "notify"),
        (
            "Validate: ensure email sending does not perform git operations; "
            "use read-only tokens for notifications.",
            "Fallback: add a non-invasive channel (issue comment) as backup notification.",
        ),
    ),
)

FALLBACK_ACTION = (
    "Ask clarifying question about intent and constraints; "
    "propose a minimal PoC (one-file) to test."
)


def actions_for(sentence: str) -> List[str]:
    """Collect actions from every catalog group the sentence triggers."""
    low = sentence.lower()
    actions = []
    for triggers, group_actions in ACTION_CATALOG:
        if any(trigger in low for trigger in triggers):
            actions.extend(group_actions)
    return actions or [FALLBACK_ACTION]


class ReArchitectureAgent:
    """
    Generates one Proposal per sentence focal point, in focal order.
    """

    def __init__(self, max_proposals: int = 3):
        """
        Args:
            max_proposals: Maximum actions kept per focal point (>= 1)
        """
        if max_proposals < 1:
            raise ValueError(f"max_proposals must be >= 1, got {max_proposals}")
        self.max_proposals = max_proposals

    def propose(self, focal_points: FocalPoints) -> List[Proposal]:
        proposals = [self._propose_one(fp) for fp in focal_points.focal]
        logger.info(f"Generated proposals for {len(proposals)} focal points")
        return proposals

    def _propose_one(self, focal_point: FocalPoint) -> Proposal:
        actions = actions_for(focal_point.summary)
        if len(actions) > self.max_proposals:
            logger.debug(
                f"{focal_point.id}: truncating {len(actions)} actions to {self.max_proposals}"
            )

        return Proposal(
            id=focal_point.id,
            problem=focal_point.summary,
            proposals=tuple(actions[:self.max_proposals]),
            principles=PRINCIPLES
        )

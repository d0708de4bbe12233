"""
Unit tests for the Re-architecture Agent.
"""

import pytest
from src.agents.rearchitecture import (
    ACTION_CATALOG,
    FALLBACK_ACTION,
    ReArchitectureAgent,
    actions_for,
)
from src.models.focal_point import FocalPoint, FocalPoints

TRIAGE, AUTOMATE = ACTION_CATALOG[0][1]
AUDIT, INSTRUMENT = ACTION_CATALOG[1][1]
VALIDATE, FALLBACK_CHANNEL = ACTION_CATALOG[2][1]


@pytest.fixture
def agent():
    return ReArchitectureAgent(max_proposals=3)


def focal(summary, fp_id="F1"):
    return FocalPoint(id=fp_id, summary=summary, triggers=("x",))


def test_issue_group():
    assert actions_for("Please label the bug.") == [TRIAGE, AUTOMATE]


def test_security_group_for_gh_token_and_secret(agent):
    proposals = agent.propose(FocalPoints(focal=(
        focal("The gh token and the secret leaked in the logs."),
    )))

    assert AUDIT in proposals[0].proposals
    assert INSTRUMENT in proposals[0].proposals
    assert len(proposals[0].proposals) <= 3


def test_email_group():
    assert actions_for("We notify users by Email.") == [VALIDATE, FALLBACK_CHANNEL]


def test_multiple_groups_truncate_in_catalog_order(agent):
    proposals = agent.propose(FocalPoints(focal=(
        focal("Label the issue and notify the team by email."),
    )))

    assert proposals[0].proposals == (TRIAGE, AUTOMATE, VALIDATE)


def test_fallback_when_nothing_matches(agent):
    proposals = agent.propose(FocalPoints(focal=(focal("Nothing relevant here."),)))

    assert proposals[0].proposals == (FALLBACK_ACTION,)


def test_proposals_follow_focal_order_and_carry_principles(agent):
    points = FocalPoints(focal=(
        focal("The cron workflow failed.", "F1"),
        focal("Plain sentence.", "F2"),
    ))
    proposals = agent.propose(points)

    assert [p.id for p in proposals] == ["F1", "F2"]
    assert proposals[0].problem == "The cron workflow failed."
    for p in proposals:
        assert 1 <= len(p.proposals) <= 3
        assert p.principles == ("Simple", "Efficient", "Pragmatic", "Safe")


def test_no_focal_points(agent):
    assert agent.propose(FocalPoints()) == []


def test_configured_limit_above_three():
    agent = ReArchitectureAgent(max_proposals=4)
    proposals = agent.propose(FocalPoints(focal=(
        focal("The issue says the cron secret leaks and we notify by email."),
    )))

    assert proposals[0].proposals == (TRIAGE, AUTOMATE, AUDIT, INSTRUMENT)


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        ReArchitectureAgent(max_proposals=0)

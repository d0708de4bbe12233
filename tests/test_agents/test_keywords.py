"""
Unit tests for the Keyword Scorer.
"""

import pytest
from src.agents.keywords import STOPWORDS, KeywordScorer, tokenize_words


@pytest.fixture
def scorer():
    return KeywordScorer(top_n=12)


def test_tokenize_lowercases_and_strips_punctuation():
    tokens = tokenize_words("Hello, World! (re-run) #42")
    assert tokens == ["hello", "world", "re-run", "42"]


def test_tokenize_normalizes_curly_quotes():
    tokens = tokenize_words("Don’t stop")
    assert tokens == ["don't", "stop"]


def test_stopwords_and_short_tokens_are_excluded(scorer):
    keywords = scorer.score("The the AND and it is ok go data data")
    assert [k.keyword for k in keywords] == ["data"]
    assert keywords[0].count == 2


def test_stopword_set_size():
    assert len(STOPWORDS) == 39
    assert "the" in STOPWORDS and "your" in STOPWORDS


def test_ranking_by_count_descending(scorer):
    keywords = scorer.score("deploy deploy deploy token token cache")
    assert [(k.keyword, k.count) for k in keywords] == [
        ("deploy", 3), ("token", 2), ("cache", 1)
    ]


def test_ties_keep_first_seen_order(scorer):
    keywords = scorer.score("beta alpha gamma alpha beta")
    assert [k.keyword for k in keywords] == ["beta", "alpha", "gamma"]


def test_top_n_limit(scorer):
    text = " ".join(f"word{i} " * (20 - i) for i in range(15))
    keywords = scorer.score(text)

    assert len(keywords) == 12
    assert [k.keyword for k in keywords] == [f"word{i}" for i in range(12)]
    counts = [k.count for k in keywords]
    assert counts == sorted(counts, reverse=True)


def test_keyword_properties_on_prose(scorer):
    text = (
        "The release workflow failed again. The workflow uses a token that "
        "expired. We should rotate the token and re-run the release."
    )
    keywords = scorer.score(text)

    assert len(keywords) <= 12
    for k in keywords:
        assert k.keyword not in STOPWORDS
        assert len(k.keyword) > 2
    assert [k.keyword for k in keywords[:3]] == ["release", "workflow", "token"]


def test_empty_text(scorer):
    assert scorer.score("") == []

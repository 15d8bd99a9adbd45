"""Tests for comparison report orchestration."""

import pytest

from tool_compare.comparison import compare_all, compare_tools


def test_compare_comparable_tools(gpt4, llama):
    """Test full report for a same-category pair."""
    report = compare_tools(gpt4, llama)

    assert report.comparable
    assert report.title == "GPT-4 vs Llama: Best LLM APIs"
    assert "text generation, chat applications, content creation" in report.description
    assert report.scores_a.pricing == 6
    assert report.scores_b.pricing == 10
    assert report.weighted_a == pytest.approx(8.0)
    assert report.weighted_b == pytest.approx(7.4)
    assert [adv.metric for adv in report.advantages_b] == ["pricing"]
    assert report.score_info_b["pricing"].label == "Excellent"
    assert report.verdict.winner == "Llama"
    assert report.pros_comparison.unique_to_b == ["Offers a free tier", "Open source"]


def test_compare_non_comparable_still_scores(gpt4, pinecone):
    """Test a report is built even when categories don't match."""
    report = compare_tools(gpt4, pinecone)
    assert not report.comparable
    assert report.title == "GPT-4 vs Pinecone: AI Tools Comparison"
    assert report.scores_b.pricing == 8


def test_compare_with_custom_weights(gpt4, llama):
    """Test weights flow into the weighted scores."""
    report = compare_tools(gpt4, llama, {"pricing": 1, "easeOfUse": 0, "documentation": 0,
                                         "community": 0, "reliability": 0})
    assert report.weighted_a == pytest.approx(6.0)
    assert report.weighted_b == pytest.approx(10.0)


def test_report_serializes(gpt4, llama):
    """Test the report dumps to JSON-compatible data."""
    data = compare_tools(gpt4, llama).model_dump(mode="json")
    assert data["verdict"]["confidence"] == "slight"
    assert data["advantages_b"][0] == {"metric": "pricing", "difference": 4.0, "score": 10.0}


def test_compare_all(sample_tools):
    """Test reports for every comparable pair, with limit."""
    reports = compare_all(sample_tools)
    assert len(reports) == 3
    assert all(report.comparable for report in reports)
    assert len(compare_all(sample_tools, limit=2)) == 2

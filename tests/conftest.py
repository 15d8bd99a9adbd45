"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from tool_compare.models.model_tool import RawPricing, ToolRecord


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def gpt4() -> ToolRecord:
    """Closed LLM API, pay-as-you-go. Scores: 6/7/9/9/9."""
    return ToolRecord(
        id="gpt-4",
        name="GPT-4",
        category="llm",
        description="OpenAI's flagship language model",
        pricing_text="Pay-as-you-go API pricing",
        open_source=False,
        api_access=True,
        ease_of_use="Easy",
        reliability="Very High",
        documentation="Excellent",
        community="Very Large",
        raw_pricing=RawPricing(model="pay-as-you-go", free_tier=False, starting_price="$20/month"),
        features=["chat", "function calling"],
    )


@pytest.fixture
def llama() -> ToolRecord:
    """Open-weights LLM with a free tier. Scores: 10/5/6/8/8."""
    return ToolRecord(
        id="llama",
        name="Llama",
        category="llm-apis",
        description="Meta's open model family",
        pricing_text="Free and open source",
        open_source=True,
        ease_of_use="Moderate",
        reliability="High",
        documentation="Good",
        community="Large",
        raw_pricing=RawPricing(model="free", free_tier=True, starting_price="$0"),
    )


@pytest.fixture
def copilot() -> ToolRecord:
    """Subscription coding assistant. Scores: 4/9/8/9/8."""
    return ToolRecord(
        id="copilot",
        name="GitHub Copilot",
        category="coding-assistant",
        pricing_text="Subscription, $10/month",
        ease_of_use="Very Easy",
        reliability="High",
        documentation="Very Good",
        community="Very Large",
        raw_pricing=RawPricing(model="subscription", free_tier=False, starting_price="$10"),
    )


@pytest.fixture
def pinecone() -> ToolRecord:
    """Freemium vector database."""
    return ToolRecord(
        id="pinecone",
        name="Pinecone",
        category="vector-db",
        pricing_text="Freemium",
        ease_of_use="Easy",
        reliability="High",
        documentation="Good",
        community="Medium",
    )


@pytest.fixture
def langchain() -> ToolRecord:
    """Open-source AI framework."""
    return ToolRecord(
        id="langchain",
        name="LangChain",
        category="framework",
        pricing_text="Open source",
        open_source=True,
    )


@pytest.fixture
def mystery() -> ToolRecord:
    """Tool with an unknown category and no ratings."""
    return ToolRecord(id="mystery", name="Mystery", category="blockchain")


@pytest.fixture
def sample_tools(gpt4, llama, copilot, pinecone, langchain, mystery) -> list[ToolRecord]:
    """Catalog in a fixed order. Comparable pairs: gpt-4/llama, gpt-4/copilot, llama/copilot."""
    return [gpt4, llama, copilot, pinecone, langchain, mystery]

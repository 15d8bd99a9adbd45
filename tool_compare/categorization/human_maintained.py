"""Human-maintained comparison category data.

This file contains data that should be manually curated and extended:
the comparison category registry and the legacy category mapping.
Keep ``comparable_with`` pairs symmetric when editing; the resolver
does not symmetrize them.
"""

from types import MappingProxyType
from typing import Final

from tool_compare.models.model_comparison import ComparisonCategory

COMPARISON_CATEGORIES: Final[tuple[ComparisonCategory, ...]] = (
    ComparisonCategory(
        id="llm-apis",
        name="LLM APIs",
        description="Language model APIs for text generation and processing",
        comparable_with=("llm-apis", "coding-assistants", "ai-assistants"),
        seo_keywords=("llm api", "language model", "text generation", "ai api"),
        use_cases=("text generation", "chat applications", "content creation", "code generation"),
    ),
    ComparisonCategory(
        id="coding-assistants",
        name="AI Coding Assistants",
        description="AI-powered tools that help with code completion and generation",
        comparable_with=("coding-assistants", "llm-apis", "ai-assistants"),
        seo_keywords=("ai coding", "code completion", "copilot alternative", "ai code assistant"),
        use_cases=("code completion", "code generation", "refactoring", "debugging"),
    ),
    ComparisonCategory(
        id="ai-assistants",
        name="AI Assistants",
        description="General-purpose AI assistants for various tasks",
        comparable_with=("ai-assistants", "llm-apis", "coding-assistants"),
        seo_keywords=("ai assistant", "chatbot", "ai helper", "virtual assistant"),
        use_cases=(
            "general assistance",
            "task automation",
            "information retrieval",
            "conversation",
        ),
    ),
    ComparisonCategory(
        id="vector-databases",
        name="Vector Databases",
        description="Specialized databases for storing and querying vector embeddings",
        comparable_with=("vector-databases", "data-platforms"),
        seo_keywords=("vector database", "embeddings", "similarity search", "vector search"),
        use_cases=(
            "semantic search",
            "recommendation systems",
            "RAG applications",
            "similarity matching",
        ),
    ),
    ComparisonCategory(
        id="ai-frameworks",
        name="AI Frameworks",
        description="Development frameworks for building AI applications",
        comparable_with=("ai-frameworks", "data-platforms"),
        seo_keywords=("ai framework", "llm framework", "ai development", "ai toolkit"),
        use_cases=(
            "ai application development",
            "llm integration",
            "ai workflows",
            "ai orchestration",
        ),
    ),
    ComparisonCategory(
        id="data-platforms",
        name="Data Platforms",
        description="Platforms for data processing and AI workflows",
        comparable_with=("data-platforms", "vector-databases", "ai-frameworks"),
        seo_keywords=("data platform", "ai platform", "data processing", "ai workflow"),
        use_cases=("data processing", "ai workflows", "data analysis", "ai orchestration"),
    ),
    ComparisonCategory(
        id="ide-tools",
        name="IDE Tools",
        description="Integrated development environment tools and extensions",
        comparable_with=("ide-tools",),
        seo_keywords=("ide", "code editor", "development environment", "code editor comparison"),
        use_cases=("code editing", "development workflow", "code navigation", "debugging"),
    ),
    ComparisonCategory(
        id="code-quality",
        name="Code Quality Tools",
        description="Tools for code review, testing, and quality assurance",
        comparable_with=("code-quality",),
        seo_keywords=("code review", "code quality", "static analysis", "code testing"),
        use_cases=("code review", "quality assurance", "bug detection", "code standards"),
    ),
    ComparisonCategory(
        id="design-tools",
        name="Design-to-Code Tools",
        description="Tools that convert designs to code",
        comparable_with=("design-tools",),
        seo_keywords=("design to code", "ui generation", "code generation", "design automation"),
        use_cases=(
            "ui development",
            "design implementation",
            "rapid prototyping",
            "frontend development",
        ),
    ),
)

# Legacy category keys used by older catalog entries
CATEGORY_MAPPING: Final = MappingProxyType(
    {
        "llm": "llm-apis",
        "coding-assistant": "coding-assistants",
        "ai-assistant": "ai-assistants",
        "vector-db": "vector-databases",
        "framework": "ai-frameworks",
        "ide": "ide-tools",
        "code-integrity": "code-quality",
        "code-review": "code-quality",
        "design-to-code": "design-tools",
        "data-platform": "data-platforms",
        "agent": "ai-frameworks",
        "evaluation": "ai-frameworks",
        "debugging": "code-quality",
        "automation": "ai-assistants",
    }
)

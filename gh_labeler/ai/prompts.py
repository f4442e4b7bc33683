"""
Human-editable prompt templates for AI processing.
Edit the prompts below to modify AI behavior.
"""

# ruff: noqa

from .models import CATEGORY_NAMES

MAX_CONTENT_LENGTH = 4000
TRUNCATION_MARKER = "... [truncated]"

SYSTEM_PROMPT = "You are a helpful assistant."

CLASSIFICATION_PROMPT = """
You are an intelligent assistant that classifies GitHub issues and pull requests into the following categories: {categories}.

Given the following content, return a JSON array of category names (strings) that apply, sorted by relevance. Only include categories that are strongly relevant.

Content:
{content}

Respond with JSON only. Example: ["bug", "performance"]
"""


def truncate_content(content: str, max_length: int = MAX_CONTENT_LENGTH) -> str:
    """Cut content down to ``max_length`` characters, marking the cut."""
    if len(content) > max_length:
        return content[:max_length] + TRUNCATION_MARKER
    return content


def build_classification_prompt(content: str) -> str:
    """Embed the category vocabulary and truncated content in the prompt."""
    categories = ", ".join(f'"{name}"' for name in CATEGORY_NAMES)
    return CLASSIFICATION_PROMPT.format(
        categories=categories, content=truncate_content(content)
    )

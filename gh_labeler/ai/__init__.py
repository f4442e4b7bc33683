"""AI classification module for GitHub issue labeling."""

from .classifiers import (
    CLASSIFIERS,
    Classifier,
    DeepSeekClassifier,
    GeminiClassifier,
    OpenAIClassifier,
    create_classifier,
    parse_categories,
    strip_code_fence,
)
from .models import CATEGORY_NAMES, Category
from .prompts import CLASSIFICATION_PROMPT, build_classification_prompt

__all__ = [
    # Models
    "Category",
    "CATEGORY_NAMES",
    # Classifiers
    "Classifier",
    "GeminiClassifier",
    "OpenAIClassifier",
    "DeepSeekClassifier",
    "CLASSIFIERS",
    "create_classifier",
    # Reply parsing
    "parse_categories",
    "strip_code_fence",
    # Prompts
    "CLASSIFICATION_PROMPT",
    "build_classification_prompt",
]

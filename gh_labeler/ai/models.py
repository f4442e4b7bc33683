"""Category vocabulary shared by the classifiers and the label mapping."""

from enum import Enum


class Category(str, Enum):
    """Categories an item can be classified into."""

    BUG = "bug"
    FEATURE = "feature"
    DOCUMENTATION = "documentation"
    QUESTION = "question"
    ENHANCEMENT = "enhancement"
    SECURITY = "security"
    PERFORMANCE = "performance"


CATEGORY_NAMES: tuple[str, ...] = tuple(category.value for category in Category)

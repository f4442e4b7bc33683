"""Label GitHub issues and pull requests from LLM classifications."""

__version__ = "0.1.0"

"""Command line interface for gh-labeler."""

"""Standardized CLI option definitions for consistent shorthand mappings.

Options that a CI task runner usually supplies also read an environment
variable, so the same command works locally and inside a workflow.
"""

import typer

# Target options
ORG_OPTION = typer.Option(
    None,
    "--org",
    "-o",
    help="GitHub organization or user (defaults to owner in GITHUB_REPOSITORY)",
)

REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    help="GitHub repository name (defaults to name in GITHUB_REPOSITORY)",
)

MAX_ISSUES_OPTION = typer.Option(
    10,
    "--max-issues",
    envvar="MAX_ISSUES",
    min=1,
    help="Maximum number of open issues/PRs to process",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    envvar="GITHUB_TOKEN",
    help="GitHub API token (defaults to GITHUB_TOKEN env var)",
)

# AI options
PROVIDER_OPTION = typer.Option(
    "gemini",
    "--provider",
    "-p",
    envvar="LLM_PROVIDER",
    help="LLM provider: gemini, openai or deepseek",
)

API_KEY_OPTION = typer.Option(
    None,
    "--api-key",
    "-k",
    envvar="LLM_API_KEY",
    help="LLM provider API key (falls back to the provider's own env var)",
)

MODEL_OPTION = typer.Option(
    None,
    "--model",
    "-m",
    envvar="LLM_MODEL",
    help="Override the provider's default model",
)

# Label mapping options
LABEL_MAPPING_OPTION = typer.Option(
    None,
    "--label-mapping",
    "-l",
    envvar="LABEL_MAPPING",
    help='JSON object of category to label, e.g. \'{"bug": "type:bug"}\'',
)

LABEL_MAPPING_FILE_OPTION = typer.Option(
    None,
    "--label-mapping-file",
    help="Path to a JSON file with the category to label mapping",
)

# Behavior options
DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Preview labels without applying them"
)

DELAY_OPTION = typer.Option(
    0.5, "--delay", min=0.0, help="Delay between items in seconds"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


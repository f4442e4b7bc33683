"""CLI command for labeling open issues and pull requests."""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..ai.classifiers import CLASSIFIERS, create_classifier
from ..github_client.client import GitHubClient
from ..labeler import BatchLabeler, RunSummary
from ..labels.mapping import load_label_mapping, parse_label_mapping
from .options import (
    API_KEY_OPTION,
    DELAY_OPTION,
    DRY_RUN_OPTION,
    LABEL_MAPPING_FILE_OPTION,
    LABEL_MAPPING_OPTION,
    MAX_ISSUES_OPTION,
    MODEL_OPTION,
    ORG_OPTION,
    PROVIDER_OPTION,
    REPO_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()
logger = logging.getLogger("gh_labeler")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr with the standard format."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )
    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def resolve_repository(org: str | None, repo: str | None) -> tuple[str, str]:
    """Work out owner and repository, falling back to GITHUB_REPOSITORY."""
    if org and repo:
        return org, repo

    env_repository = os.getenv("GITHUB_REPOSITORY", "")
    if "/" in env_repository:
        env_org, env_repo = env_repository.split("/", 1)
        return org or env_org, repo or env_repo

    raise ValueError(
        "Repository is required. Use --org and --repo or set GITHUB_REPOSITORY."
    )


def _print_fatal(message: str) -> None:
    console.print(f"❌ [red]Error: {message}[/red]")


def _print_summary(summary: RunSummary, dry_run: bool) -> None:
    table = Table(title="Labeling Summary")
    table.add_column("Issue", style="cyan")
    table.add_column("Outcome", style="green")
    table.add_column("Labels", style="yellow")

    for number, outcome in summary.outcomes.items():
        labels = ", ".join(sorted(summary.applied.get(number, set())))
        table.add_row(f"#{number}", outcome.value, labels)

    if summary.outcomes:
        console.print(table)

    verb = "would label" if dry_run else "labeled"
    console.print(
        f"✅ [green]Processing complete. Processed {summary.processed} items, "
        f"{verb} {summary.labeled} items.[/green]"
    )
    if summary.errored:
        console.print(
            f"⚠️  [yellow]{summary.errored} item(s) failed and were skipped[/yellow]"
        )


def label(
    org: str | None = ORG_OPTION,
    repo: str | None = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    provider: str = PROVIDER_OPTION,
    api_key: str | None = API_KEY_OPTION,
    model: str | None = MODEL_OPTION,
    label_mapping: str | None = LABEL_MAPPING_OPTION,
    label_mapping_file: Path | None = LABEL_MAPPING_FILE_OPTION,
    max_issues: int = MAX_ISSUES_OPTION,
    delay: float = DELAY_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Classify open issues and PRs with an LLM and apply mapped labels.

    Items that already carry a label are skipped. A failure on one item is
    logged and the run continues with the next one.

    Examples:
        # Label the ten newest open issues with Gemini
        github-labeler label --org myorg --repo myrepo \\
            --label-mapping '{"bug": "type:bug", "documentation": "type:docs"}'

        # Use OpenAI and a mapping file, previewing only
        github-labeler label --org myorg --repo myrepo --provider openai \\
            --label-mapping-file labels.json --dry-run
    """
    setup_logging(verbose)

    provider = provider.lower()
    if provider not in CLASSIFIERS:
        _print_fatal(
            f"Unknown LLM provider '{provider}'. "
            f"Expected one of: {', '.join(CLASSIFIERS)}"
        )
        raise typer.Exit(1)

    try:
        owner, repository = resolve_repository(org, repo)
        if label_mapping_file is not None:
            mapping = load_label_mapping(label_mapping_file)
        else:
            mapping = parse_label_mapping(label_mapping)

        classifier = create_classifier(
            provider,
            api_key or os.getenv(CLASSIFIERS[provider].api_key_env, ""),
            model=model,
            log=logger.getChild("classifier"),
        )
        github = GitHubClient(token, log=logger.getChild("github"))
    except ValueError as e:
        _print_fatal(str(e))
        raise typer.Exit(1)

    if dry_run:
        console.print("🔍 [blue]Dry run - labels will not be applied[/blue]")

    labeler = BatchLabeler(
        github,
        classifier,
        mapping,
        delay=delay,
        dry_run=dry_run,
        log=logger,
    )

    try:
        summary = labeler.run(owner, repository, max_issues)
    except Exception as e:
        console.print(f"❌ [red]Action failed: {e}[/red]")
        raise typer.Exit(1)

    _print_summary(summary, dry_run)


def categories() -> None:
    """List the categories the classifier can return."""
    from ..ai.models import Category

    table = Table(title="Classification Categories")
    table.add_column("Category", style="cyan")
    for category in Category:
        table.add_row(category.value)
    console.print(table)

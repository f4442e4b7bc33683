"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .label import categories, label

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="github-labeler",
    help="Label GitHub issues and pull requests using LLM classification",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="label", context_settings={"help_option_names": ["-h", "--help"]})(
    label
)
app.command(
    name="categories", context_settings={"help_option_names": ["-h", "--help"]}
)(categories)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_labeler import __version__

    console.print(f"GitHub Labeler v{__version__}")


if __name__ == "__main__":
    app()

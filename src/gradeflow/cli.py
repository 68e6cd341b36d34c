"""CLI entry point for gradeflow.

Generates the student score collection and runs the analysis pipeline.
Only the seed and the retry cap can be set; sizes and thresholds are fixed.
"""

from __future__ import annotations

import click
import rich_click as rclick

from gradeflow import __version__, output
from gradeflow.config import PipelineConfig, RetryConfig
from gradeflow.errors import GradeflowError
from gradeflow.observability import configure_logging, level_for_verbosity
from gradeflow.orchestrator import run_analysis

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True

EXIT_USER_ERROR = 1


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        output.error(self.format_message())


@click.command(cls=rclick.RichCommand)
@click.version_option(version=__version__, prog_name="gradeflow")
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for a reproducible run [default: clock]",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=None,
    help="Give up on a record after this many failed attempts [default: unbounded]",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Log to stderr (-v info, -vv debug).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Log format [default: console]",
)
def cli(
    seed: int | None,
    max_attempts: int | None,
    no_color: bool,
    verbose: int,
    log_format: str,
) -> None:
    """Generate student scores and run the analysis pipeline.

    Generates 30 student records with normally distributed scores, retrying
    any failed attempt, then lists excellent, failing and above-average
    students and finally prints everyone sorted by score.

    Examples:

        gradeflow

        gradeflow --seed 42

        gradeflow --seed 42 --max-attempts 100 -v
    """
    configure_logging(
        log_level=level_for_verbosity(verbose),
        json_format=log_format == "json",
    )
    output.set_no_color(no_color)

    config = PipelineConfig(seed=seed, retry=RetryConfig(max_attempts=max_attempts))

    try:
        run_analysis(config, console=output.console)
    except GradeflowError as e:
        raise CLIError(str(e)) from e


if __name__ == "__main__":
    cli()

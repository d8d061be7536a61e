"""formsemantics CLI - main entry point.

Usage:
    formsemantics <input-bundle-path> [output-directory]

Exit codes:
    0: Success
    1: Usage error
    2: Processing error (message printed to stderr)
"""

import sys
from pathlib import Path

import click

from ..base_exceptions import FormSemanticsException
from ..config import get_settings
from ..io import SemanticBundleWriter, UiDumpBundleReader
from ..logging import get_logger, mark_logging_initialized, setup_logging
from ..semantic import SemanticPipeline

# Exit codes
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_PROCESSING_ERROR = 2

PROG_NAME = "formsemantics"


def configure_logging(verbose: bool) -> None:
    """Configure logging for CLI.

    Args:
        verbose: Enable debug logging
    """
    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.effective_log_level,
        log_file=settings.log_file,
        structured=settings.structured_logs,
    )
    mark_logging_initialized()


@click.command(name=PROG_NAME)
@click.argument("input_path", type=click.Path(dir_okay=False))
@click.argument("output_dir", required=False, type=click.Path(file_okay=False))
@click.option(
    "--allow-higher-major",
    is_flag=True,
    help="Accept bundles whose schemaVersion MAJOR is newer than supported",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def semantic(input_path: str, output_dir: str | None, allow_higher_major: bool, verbose: bool) -> int:
    """Annotate a UI dump bundle and write semantic.json.

    INPUT_PATH: Path to the UI dump bundle (form.json)

    OUTPUT_DIR: Directory for semantic.json (defaults to the input's directory)
    """
    target_dir = Path(output_dir) if output_dir else Path(input_path).parent

    try:
        # Invalid settings or an unusable log file are processing errors
        configure_logging(verbose)
        logger = get_logger(__name__)
        settings = get_settings()
        document = UiDumpBundleReader().read_file(input_path)
        logger.info("bundle_read", path=input_path)

        pipeline = SemanticPipeline(
            settings=settings, allow_higher_major=allow_higher_major or None
        )
        result = pipeline.run(document)

        writer = SemanticBundleWriter(indent=settings.json_indent)
        output_path = writer.write(result.bundle, target_dir)
        logger.info("semantic_bundle_written", path=str(output_path))
    except FormSemanticsException as e:
        e.with_source(input_path)
        get_logger(__name__).debug("semantic_run_failed", error_code=e.error_code, **e.context)
        click.echo(f"[{PROG_NAME}] Error: {e}", err=True)
        return EXIT_PROCESSING_ERROR
    except Exception as e:
        click.echo(f"[{PROG_NAME}] Error: {e}", err=True)
        if verbose:
            import traceback

            traceback.print_exc()
        return EXIT_PROCESSING_ERROR

    click.echo(f"[{PROG_NAME}] Written to: {output_path}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``
    """
    try:
        result = semantic.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as e:
        e.show()
        return EXIT_USAGE_ERROR
    except click.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_USAGE_ERROR

    return int(result) if result is not None else EXIT_SUCCESS


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())

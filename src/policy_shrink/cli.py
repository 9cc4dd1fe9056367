"""Command line interface for Policy Shrink."""

import sys
from json import dumps
from logging import DEBUG, basicConfig
from sys import stdin, stdout

from catalog import ActionCatalog, CatalogError, load_catalog
from cyclopts import App
from requests import RequestException
from rich.console import Console
from rich.logging import RichHandler
from shrink import AccessLevel, ShrinkOptions, ShrinkValidationError, shrink

from policy_shrink.cli_utils import convert_iterations, parse_stdin

app = App(help="Shrink lists of IAM-style actions into equivalent wildcard patterns.")

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    err_console.print(f"[bold red]Error:[/] {message}")


def print_info(message: str) -> None:
    """Print info message to stderr."""
    err_console.print(f"[bold blue]i[/] {message}")


def open_catalog(source: str | None, checksum: str | None = None) -> ActionCatalog:
    """Load the action catalog or exit with an error."""
    if source is None:
        print_error("An action catalog is required, pass --catalog PATH_OR_URL")
        sys.exit(1)
    try:
        return load_catalog(source, checksum=checksum)
    except (CatalogError, RequestException) as e:
        print_error(f"Failed to load catalog: {e}")
        sys.exit(1)


def print_data_version(action_catalog: ActionCatalog) -> None:
    """Print version information of the loaded catalog."""
    stdout.write(f"Catalog version: {action_catalog.version or 'unknown'}\n")
    stdout.write(f"Data last updated: {action_catalog.updated_at or 'unknown'}\n")
    stdout.write(
        f"Services: {len(action_catalog.services)}, actions: {len(action_catalog)}\n",
    )


@app.default
def run(  # noqa: PLR0913
    *actions: str,
    catalog: str | None = None,
    catalog_checksum: str | None = None,
    iterations: int = 2,
    levels: list[AccessLevel] | None = None,
    remove_sids: bool = False,
    remove_whitespace: bool = False,
    show_data_version: bool = False,
    workers: int = 1,
    verbose: bool = False,
) -> None:
    """Shrink actions given as arguments, or a policy document or text on stdin.

    Parameters
    ----------
    actions
        Actions or wildcard patterns, e.g. s3:GetObject s3:Put*.
    catalog
        Path or URL of the action catalog (.json or .toml).
    catalog_checksum
        Expected "sha256:<hex>" digest of the catalog content.
    iterations
        How many shrink iterations to run; zero or less means no limit.
    levels
        Access levels to reduce, defaults to all levels.
    remove_sids
        Remove Sid fields from policy statements.
    remove_whitespace
        Print policy documents without indentation.
    show_data_version
        Print the catalog version and exit.
    workers
        Number of services shrunk in parallel.
    verbose
        Log shrink progress to stderr.

    """
    if verbose:
        basicConfig(
            level=DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    action_catalog = open_catalog(catalog, catalog_checksum)
    if show_data_version:
        print_data_version(action_catalog)
        return

    options = ShrinkOptions(
        iterations=convert_iterations(iterations),
        levels=frozenset(levels or ()),
        max_workers=workers,
    )
    action_strings = list(actions)

    try:
        if not action_strings and not stdin.isatty():
            result = parse_stdin(
                stdin.read(),
                action_catalog,
                options,
                remove_sids=remove_sids,
            )
            if result.document is not None:
                if remove_whitespace:
                    stdout.write(dumps(result.document, separators=(",", ":")))
                else:
                    stdout.write(dumps(result.document, indent=2))
                stdout.write("\n")
                return
            action_strings.extend(result.strings or [])

        if action_strings:
            for pattern in shrink(action_strings, action_catalog, options):
                stdout.write(f"{pattern}\n")
            return
    except (ShrinkValidationError, CatalogError) as e:
        print_error(str(e))
        sys.exit(1)

    print_info("No actions provided or input from stdin")
    app.help_print()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

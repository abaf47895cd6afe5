"""Command-line interface for goexphash.

Prints the exported-API fingerprint of one Go package.
"""

import importlib.metadata
import sys
from contextlib import ExitStack
from pathlib import Path

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("goexphash")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


@click.command()
@click.version_option(version=__version__, prog_name="goexphash")
@click.argument("package")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--print-descriptor",
    "-p",
    "print_descriptor",
    is_flag=True,
    help="Print each canonical entry to stderr before the fingerprint",
)
@click.option(
    "--download",
    "-d",
    is_flag=True,
    help="Run 'go get -u -v PACKAGE' before hashing",
)
@click.option(
    "--dir",
    "as_directory",
    is_flag=True,
    help="Treat PACKAGE as a directory path instead of an import path",
)
@click.option(
    "--events",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append structured JSONL audit events to this file",
)
def cli(
    package: str,
    verbose: bool,
    print_descriptor: bool,
    download: bool,
    as_directory: bool,
    events: str | None,
) -> None:
    """Print the fingerprint of the exported API of Go package PACKAGE.

    PACKAGE is an import path looked up as $GOPATH/src/PACKAGE in each
    workspace root, or a directory with --dir.

    Examples
    --------
        goexphash github.com/user/repo/pkg
        goexphash -p github.com/user/repo/pkg
        goexphash --dir ./internal/api --events events.jsonl
    """
    from goexphash.api import hash_directory, hash_package
    from goexphash.audit import AuditLogger, generate_run_id
    from goexphash.engine import HashConfig

    if as_directory and download:
        raise click.UsageError("--dir cannot be combined with --download")

    try:
        config = HashConfig(
            verbose=verbose,
            print_descriptors=print_descriptor,
            download=download,
        )

        with ExitStack() as stack:
            logger = None
            if events:
                logger = stack.enter_context(AuditLogger(generate_run_id(), Path(events)))

            if as_directory:
                if verbose:
                    click.echo(f"Hashing directory: {package}", err=True)
                result = hash_directory(Path(package), config=config, logger=logger)
            else:
                if verbose:
                    action = "Fetching" if download else "Resolving"
                    click.echo(f"{action} package: {package}", err=True)
                result = hash_package(package, config=config, logger=logger)

        if verbose:
            click.echo(f"  Directory: {result.package_path}", err=True)
            click.echo(f"  Packages: {', '.join(result.packages)}", err=True)
            click.echo(f"  Files: {len(result.files)}", err=True)
            click.echo(f"  Entries: {len(result.entries)}", err=True)
            click.echo(f"  Imports: {len(result.imports)}", err=True)

        if print_descriptor:
            for text in result.descriptors:
                click.echo(text, err=True)

        click.echo(result.fingerprint)

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()

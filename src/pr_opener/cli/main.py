"""Main CLI entry point."""

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pr_opener import __version__
from pr_opener.browser import open_url
from pr_opener.errors import BrowserLaunchError, PrOpenerError
from pr_opener.models.options import OpenerOptions
from pr_opener.models.provider import Service
from pr_opener.url_builder import build_pr_url
from pr_opener.utils.request import build_request

app = typer.Typer(
    name="pr-opener",
    help="Open pull request URLs in browser for the current git repository",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("pr_opener")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False, show_time=False))


def _version_callback(value: bool):
    if value:
        typer.echo(f"pr-opener {__version__}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
    raise typer.Exit(1)


@app.command()
def main(
    branch: str = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch to create pull request from (defaults to current branch)",
    ),
    target: str = typer.Option(
        None,
        "--target",
        "-t",
        envvar="PR_OPENER_TARGET",
        help="Target branch for the pull request (usually main or master)",
    ),
    remote: str = typer.Option(
        None,
        "--remote",
        "-r",
        envvar="PR_OPENER_REMOTE",
        help="Remote to use (defaults to upstream if it exists, otherwise origin)",
    ),
    force_remote: bool = typer.Option(
        False,
        "--force-remote",
        "-f",
        help="Force using the specified remote, ignoring upstream even if it exists",
    ),
    service: Service = typer.Option(
        None,
        "--service",
        "-s",
        envvar="PR_OPENER_SERVICE",
        case_sensitive=False,
        help="Git hosting service to use",
    ),
    print_only: bool = typer.Option(
        False, "--print-only", "-p", help="Just print the URL without opening browser"
    ),
    title: str = typer.Option(None, "--title", "-T", help="Add title to the pull request"),
    description: str = typer.Option(
        None, "--description", "-d", help="Add description to the pull request"
    ),
    draft: bool = typer.Option(False, "--draft", help="Mark the pull request as draft/WIP"),
    link: bool = typer.Option(
        False, "--link", help="Only output the link (mostly for scripting and testing)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
):
    """
    Build the "new pull request" URL for the current branch and open it.

    Example:
        pr-opener --title "Fix login" --draft
    """
    _configure_logging(verbose)

    options = OpenerOptions(
        branch=branch,
        target=target,
        remote=remote,
        force_remote=force_remote,
        service=service,
        title=title,
        description=description,
        draft=draft,
    )

    try:
        request = build_request(options, Path.cwd())
        pr_url = build_pr_url(request)
    except PrOpenerError as e:
        _fail(str(e))

    if link or print_only:
        typer.echo(pr_url)
        return

    console.print(f"[bold]Opening PR URL:[/bold] {escape(pr_url)}", soft_wrap=True)
    try:
        open_url(pr_url)
    except BrowserLaunchError as e:
        _fail(f"Failed to open browser: {e}")


if __name__ == "__main__":
    app()

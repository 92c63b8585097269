"""seafshare CLI - upload command."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from seafshare import __version__, setup_logging
from seafshare.client import ShareClient
from seafshare.core.api import APIConfig, TimeoutConfig, DEFAULT_BASE_URL
from seafshare.core.exceptions import ShareError
from seafshare.core.upload import FileValidator

app = typer.Typer(
    name="seafshare",
    help="Upload files into password-protected Seafile shared folders",
    add_completion=False,
    no_args_is_help=True
)
err_console = Console(stderr=True)


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def version_callback(value: bool):
    if value:
        typer.echo(f"seafshare {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """Upload files into password-protected Seafile shared folders."""


@app.command()
def upload(
    token: str = typer.Argument(..., help="Share token (the part after /u/d/ in the share link)"),
    file_path: Path = typer.Argument(..., help="Local file to upload"),
    password: str = typer.Option(None, "--password", "-p", help="Share password (prompted if omitted)"),
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", help="Service root URL"),
    timeout: float = typer.Option(None, "--timeout", help="Total request timeout in seconds (default: none)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every pipeline step"),
):
    """Uploads local file to cloud."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    setup_logging(level)
    
    try:
        FileValidator().validate(file_path)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    
    if password is None:
        password = typer.prompt("Password", hide_input=True, default="", show_default=False)
    
    config = APIConfig(
        base_url=base_url,
        timeout=TimeoutConfig(total=timeout)
    )
    
    async def do_upload():
        async with ShareClient(config) as client:
            return await client.upload(token, file_path, password)
    
    try:
        result = run_async(do_upload())
    except (ShareError, OSError, ValueError) as e:
        err_console.print(f"[red]Upload failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    
    typer.echo(result.as_line())


if __name__ == "__main__":
    app()

"""CLI application for blogstore using Rich and Typer."""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from blogstore.core.config import setup_logging
from blogstore.core.errors import StoreError
from blogstore.core.types import Post
from blogstore.storage import PostStore, build_store, set_store

app = typer.Typer(
    name="blogstore",
    help="blogstore CLI - manage blog posts stored as Markdown files",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _store(ctx: typer.Context) -> PostStore:
    return ctx.obj["store"]


def _fail(exc: StoreError) -> NoReturn:
    """Report a store failure and exit non-zero."""
    err_console.print(f"[red]Error ({exc.kind}): {escape(exc.message)}[/red]")
    raise typer.Exit(1)


def _read_body(content: Optional[str], file: Optional[Path]) -> Optional[str]:
    if content is not None and file is not None:
        raise typer.BadParameter("Use --content or --file, not both")
    if file is not None:
        return file.read_text(encoding="utf-8")
    return content


def print_post(post: Post) -> None:
    """Render a post as a panel."""
    console.print(
        Panel(
            Markdown(post.content) if post.content else "[dim](empty)[/dim]",
            title=f"[bold]{escape(post.title)}[/bold]",
            subtitle=f"[dim]{escape(post.slug)}[/dim]",
            border_style="blue",
        )
    )


@app.callback()
def main(
    ctx: typer.Context,
    posts_dir: Optional[Path] = typer.Option(
        None,
        "--posts-dir",
        "-p",
        help="Directory holding post files (default: $BLOGSTORE_POSTS_DIR or ./posts)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
    ),
):
    """blogstore CLI - manage blog posts stored as Markdown files."""
    setup_logging("DEBUG" if debug else None)
    ctx.obj = {"store": build_store(posts_dir)}


@app.command("list")
def list_command(ctx: typer.Context):
    """List post slugs."""
    try:
        slugs = _store(ctx).list_posts()
    except StoreError as e:
        _fail(e)

    if not slugs:
        console.print("[dim]No posts yet.[/dim]")
        return

    table = Table(title="Posts", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim")
    table.add_column("Slug", style="green")

    # Store order is filesystem order; sort for display only
    for i, slug in enumerate(sorted(slugs), 1):
        table.add_row(str(i), slug)

    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Post slug"),
    raw: bool = typer.Option(False, "--raw", help="Print the body without rendering"),
):
    """Show a single post."""
    try:
        post = _store(ctx).read_post(slug)
    except StoreError as e:
        _fail(e)

    if raw:
        console.print(f"# {post.title}\n\n{post.content}", markup=False)
    else:
        print_post(post)


@app.command()
def create(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Post slug (file name without .md)"),
    title: str = typer.Option(..., "--title", "-t", help="Post title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="Post body"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read body from file"
    ),
):
    """Create a post. An existing post with the same slug is overwritten."""
    body = _read_body(content, file) or ""
    try:
        post = _store(ctx).create_post(Post(title=title, slug=slug, content=body))
    except StoreError as e:
        _fail(e)
    console.print(f"[green]Created post: {escape(post.slug)}[/green]")


@app.command()
def update(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Post slug"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New body"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read body from file"
    ),
):
    """Update an existing post. Fields not given keep their current value."""
    body = _read_body(content, file)
    store = _store(ctx)
    try:
        current = store.read_post(slug)
        post = store.update_post(
            Post(
                title=title if title is not None else current.title,
                slug=slug,
                content=body if body is not None else current.content,
            )
        )
    except StoreError as e:
        _fail(e)
    console.print(f"[green]Updated post: {escape(post.slug)}[/green]")


@app.command()
def delete(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Post slug"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete a post."""
    if not yes:
        typer.confirm(f"Delete post '{slug}'?", abort=True)
    try:
        _store(ctx).delete_post(slug)
    except StoreError as e:
        _fail(e)
    console.print(f"[green]Deleted post: {escape(slug)}[/green]")


@app.command()
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on"),
):
    """Start the REST API server."""
    from blogstore.api.app import run_server

    # The API serves the same directory the CLI was pointed at
    set_store(_store(ctx))
    run_server(host=host, port=port)


def run_cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run_cli()

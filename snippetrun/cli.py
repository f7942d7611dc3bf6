"""
snippetrun CLI - Documentation Snippet Runner

Runs the code snippets embedded in a documentation page:
1. Removes artifacts left by a previous run
2. Extracts every <code language="dlang"> block from the document
3. Writes each block to snippet_<N>.d, compiles it with dmd against tinyredis
4. Executes the resulting binary

Running ``snippetrun`` with no command runs the ``extract-d`` task.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from snippetrun import __version__
from snippetrun.config import RunnerConfig
from snippetrun.logging_setup import configure_logging
from snippetrun.pipeline import SnippetRunner
from snippetrun.schemas import RunResult
from snippetrun.toolchain import ToolchainError

app = typer.Typer(
    name="snippetrun",
    help="Extract, compile and run code snippets embedded in documentation",
    add_completion=False,
)

console = Console()

EXIT_INTERRUPTED = 130


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """
    Extract, compile and run documentation snippets.

    Without a command, runs the default extract-d task.
    """
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        _run_extract(RunnerConfig.from_env())


@app.command("extract-d")
def extract_d(
    document: Optional[Path] = typer.Option(
        None,
        "--document",
        "-d",
        help="Documentation file to scan (default: index.html)",
    ),
    workdir: Optional[Path] = typer.Option(
        None,
        "--workdir",
        "-w",
        help="Directory for snippet sources and binaries (default: current directory)",
    ),
):
    """
    Extract D code snippets, compile them and run the binaries.

    Example:
        snippetrun extract-d --document index.html
    """
    _run_extract(RunnerConfig.from_env(document=document, workdir=workdir))


@app.command()
def clean(
    workdir: Optional[Path] = typer.Option(
        None,
        "--workdir",
        "-w",
        help="Directory holding snippet artifacts (default: current directory)",
    ),
):
    """Remove snippet sources and binaries left by previous runs."""
    runner = SnippetRunner(RunnerConfig.from_env(workdir=workdir), console=console)
    removed = runner.clean()
    console.print(f"🧹 Removed [cyan]{removed}[/cyan] artifact files")


@app.command()
def version():
    """Show the version of snippetrun."""
    console.print(f"[bold cyan]snippetrun[/bold cyan] v{__version__}")
    console.print("Documentation Snippet Runner")


def _run_extract(config: RunnerConfig) -> None:
    """Run the pipeline and translate failures into exit codes."""
    runner = SnippetRunner(config, console=console)

    try:
        result = runner.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Interrupted by user[/yellow]")
        raise typer.Exit(EXIT_INTERRUPTED)
    except ToolchainError as e:
        console.print(f"\n[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(e.returncode)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"\n[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _print_summary(result)


def _print_summary(result: RunResult) -> None:
    if not result.outcomes:
        console.print(f"\n[yellow]No snippets found in {result.document}[/yellow]")
        return

    table = Table(title=f"Snippets from {result.document.name}")
    table.add_column("Artifact", style="cyan")
    table.add_column("Exit code", justify="right")
    for outcome in result.outcomes:
        style = "green" if outcome.succeeded else "red"
        table.add_row(outcome.artifact.file_name, f"[{style}]{outcome.exit_code}[/{style}]")

    console.print()
    console.print(table)
    console.print(
        f"✨ Built and ran [cyan]{result.total_snippets}[/cyan] snippets "
        f"in {result.duration_seconds:.1f}s"
    )


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

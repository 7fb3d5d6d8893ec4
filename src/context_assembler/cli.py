"""CLI interface for context-assembler.

Requires the 'cli' extra: pip install context-assembler[cli]
"""

from __future__ import annotations

import sys
from pathlib import Path

try:
    import typer
    from rich.console import Console
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install context-assembler[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from pydantic import BaseModel, Field, ValidationError

from context_assembler import __version__
from context_assembler.assembly.builder import CandidatePool, assemble_context
from context_assembler.bootstrap.digest import DigestOptions, build_digest
from context_assembler.budget.planner import create_fixed_budget
from context_assembler.budget.profiles import get_named_budget, recommend_context_size
from context_assembler.exceptions import ContextAssemblerError
from context_assembler.formatters.text import formatter_for
from context_assembler.models.budget import Budget
from context_assembler.models.records import Memory, Message, Session
from context_assembler.protocols.tokenizer import Tokenizer
from context_assembler.tokens.estimators import CharacterEstimator, WordEstimator

app = typer.Typer(
    name="context-assembler",
    help="Budgeted prompt context assembly for LLM agents.",
    add_completion=False,
)
console = Console()


class DigestInput(BaseModel):
    """JSON document accepted by the ``digest`` command."""

    session: Session | None = None
    turns: list[Message] = Field(default_factory=list)
    memories: list[Memory] = Field(default_factory=list)


def _read_file(path: Path) -> str:
    if not path.is_file():
        console.print(f"[red]Error: {path} does not exist[/red]")
        raise typer.Exit(code=1)
    return path.read_text()


def _budget_table(title: str, budget: Budget) -> Table:
    table = Table(title=title)
    table.add_column("Slice", style="cyan")
    table.add_column("Tokens", style="green", justify="right")
    table.add_row("Total", str(budget.total))
    table.add_row("System prompt reserve", str(budget.system_prompt_reserve))
    table.add_row("Response reserve", str(budget.response_reserve))
    table.add_row("Conversation", str(budget.conversation))
    table.add_row("Memory", str(budget.memory))
    table.add_row("Lesson", str(budget.lesson))
    table.add_row("Entity", str(budget.entity))
    return table


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"context-assembler {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the context-assembler installation."""
    table = Table(title="context-assembler info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "tiktoken"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def budget(
    model: str = typer.Argument("default", help="Model identifier of a named profile"),
    total: int | None = typer.Option(
        None, "--total", "-t", help="Use a fixed-ratio budget for this many tokens instead"
    ),
) -> None:
    """Show how a context budget is split across categories."""
    try:
        if total is not None:
            plan = create_fixed_budget(total)
            title = f"Fixed budget ({total} tokens)"
        else:
            plan = get_named_budget(model)
            title = f"Budget for {model}"
    except ContextAssemblerError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from None
    console.print(_budget_table(title, plan))


@app.command()
def estimate(
    path: Path = typer.Argument(..., help="Text file to measure"),  # noqa: B008
    accurate: bool = typer.Option(False, "--accurate", "-a", help="Use the word-count estimator"),
    exact: bool = typer.Option(False, "--exact", "-e", help="Count with tiktoken"),
) -> None:
    """Estimate the token size of a text file."""
    content = _read_file(path)
    tokenizer: Tokenizer
    if exact:
        from context_assembler.tokens.counter import get_exact_counter

        tokenizer = get_exact_counter()
    elif accurate:
        tokenizer = WordEstimator()
    else:
        tokenizer = CharacterEstimator()

    tokens = tokenizer.count_tokens(content)
    size = recommend_context_size(tokens)
    console.print(f"  File: {path.name} ({tokens} tokens, fits a {size} window)")


@app.command()
def assemble(
    candidates: Path = typer.Argument(  # noqa: B008
        ..., help="JSON file with conversation, memories, lessons and entities"
    ),
    model: str | None = typer.Option(None, "--model", "-m", help="Named budget profile"),
    context_size: int | None = typer.Option(
        None, "--context-size", "-c", help="Fixed-ratio budget for this many tokens"
    ),
    layout: str = typer.Option("grouped", "--layout", "-l", help="Output layout: grouped|flat"),
    metadata: bool = typer.Option(
        False, "--metadata", help="Suffix lines with category and importance"
    ),
    chronological: bool = typer.Option(
        False, "--chronological", help="Order oldest-first instead of edge-weighted"
    ),
) -> None:
    """Build and print a context window from a candidate pool.

    The budget comes from --model, else --context-size, else it adapts to
    the number of candidates in each category.
    """
    try:
        pool = CandidatePool.model_validate_json(_read_file(candidates))
    except ValidationError as exc:
        console.print(f"[red]Invalid candidate file: {exc}[/red]")
        raise typer.Exit(code=1) from None

    try:
        result = assemble_context(
            pool,
            model=model,
            context_size=context_size,
            use_arrangement=not chronological,
            formatter=formatter_for(layout, include_metadata=metadata),
        )
    except ContextAssemblerError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from None

    console.print(result.formatted, markup=False, highlight=False)

    stats = result.stats
    table = Table(title="Window stats")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Items", str(stats.item_count))
    table.add_row("Tokens", str(stats.total_tokens))
    table.add_row("Utilization", f"{stats.utilization_ratio:.1%}")
    table.add_row("Truncated", "yes" if stats.truncated else "no")
    for category, count in stats.counts_by_category.items():
        table.add_row(f"  {category}", str(count))
    console.print(table)


@app.command()
def digest(
    source: Path = typer.Argument(..., help="JSON file with session, turns and memories"),  # noqa: B008
    max_tokens: int = typer.Option(2000, "--max-tokens", "-t", help="Digest size in tokens"),
    top: int = typer.Option(10, "--top", "-n", help="Number of memories to include"),
    last_session: bool = typer.Option(
        True, "--last-session/--no-last-session", help="Include the recent session section"
    ),
) -> None:
    """Print a session bootstrap digest."""
    try:
        doc = DigestInput.model_validate_json(_read_file(source))
        options = DigestOptions(
            max_tokens=max_tokens, top_memories=top, include_last_session=last_session
        )
    except ValidationError as exc:
        console.print(f"[red]Invalid digest input: {exc}[/red]")
        raise typer.Exit(code=1) from None

    text = build_digest(doc.session, doc.memories, options, turns=doc.turns)
    if not text:
        console.print("[dim]Nothing to bootstrap.[/dim]")
        return
    console.print(text, markup=False, highlight=False)


if __name__ == "__main__":
    app()

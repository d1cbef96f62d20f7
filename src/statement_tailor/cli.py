"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from statement_tailor.clients.llm_client import LLMClient
from statement_tailor.config import AppConfig, load_config
from statement_tailor.models.analysis import AnalysisResult
from statement_tailor.parsers.document_parser import parse_document
from statement_tailor.pipeline.orchestrator import AnalysisOrchestrator
from statement_tailor.pipeline.statement_writer import StatementWriter, StyleLevel

app = typer.Typer(
    name="statement-tailor",
    help="Compare a CV with a job posting and draft a supporting statement",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _read_inputs(profile: Path, posting: Path, extra: Path | None) -> tuple[str, str, str]:
    for label, path in (("CV", profile), ("Job posting", posting), ("Extra information", extra)):
        if path is not None and not path.exists():
            console.print(f"[red]{label} file not found: {path}[/red]")
            raise typer.Exit(1)
    try:
        profile_text = parse_document(profile)
        posting_text = parse_document(posting)
        extra_text = parse_document(extra) if extra else ""
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    return profile_text, posting_text, extra_text


def _run_analysis(config: AppConfig, profile_text: str, posting_text: str, extra_text: str) -> AnalysisResult:
    orchestrator = AnalysisOrchestrator(config)
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Analyzing...", total=100)

        def on_progress(stage: str, percent: int) -> None:
            progress.update(task, description=stage, completed=percent)

        return orchestrator.run(profile_text, posting_text, extra_text, on_progress=on_progress)


def _render(result: AnalysisResult) -> None:
    table = Table(title="Requirement comparison", show_lines=True)
    table.add_column("Requirement")
    table.add_column("Priority")
    table.add_column("Status")
    table.add_column("Evidence")
    for record in result.matched_requirements:
        req = record.requirement
        table.add_row(req.label, req.priority.value, "[green]Met[/green]", record.evidence)
    for req in result.missing_requirements:
        table.add_row(req.label, req.priority.value, "[yellow]Missing[/yellow]", "")
    console.print(table)

    experience = result.experience
    console.print(Panel(
        f"Skills: {', '.join(result.skills) or '-'}\n"
        f"Clinical: {', '.join(experience.clinical) or '-'}\n"
        f"Non-clinical: {', '.join(experience.non_clinical) or '-'}\n"
        f"Administrative: {', '.join(experience.administrative) or '-'}\n"
        f"Years of experience: {experience.years_of_experience}\n"
        f"Education: {', '.join(result.education) or '-'}\n"
        f"Values: {', '.join(result.value_tags)}",
        title="CV summary",
    ))

    console.print("\n[bold]Recommended highlights:[/bold]")
    for highlight in result.recommended_highlights:
        console.print(f"  - {highlight}")


@app.command()
def analyze(
    profile: Path = typer.Argument(help="CV file (PDF/DOCX/TXT/MD)"),
    posting: Path = typer.Argument(help="Job posting file (PDF/DOCX/TXT/MD)"),
    extra: Path = typer.Option(None, "--extra", "-e", help="File with additional experience"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Compare a CV with a job posting."""
    _setup_logging(verbose)
    config = load_config(config_path)
    profile_text, posting_text, extra_text = _read_inputs(profile, posting, extra)

    result = _run_analysis(config, profile_text, posting_text, extra_text)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return
    _render(result)


@app.command()
def draft(
    profile: Path = typer.Argument(help="CV file (PDF/DOCX/TXT/MD)"),
    posting: Path = typer.Argument(help="Job posting file (PDF/DOCX/TXT/MD)"),
    extra: Path = typer.Option(None, "--extra", "-e", help="File with additional experience"),
    style: StyleLevel = typer.Option(StyleLevel.SIMPLE, "--style", "-s", help="Writing style level"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the statement to this file"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Analyze, then draft a supporting statement with Claude."""
    _setup_logging(verbose)
    config = load_config(config_path)
    profile_text, posting_text, extra_text = _read_inputs(profile, posting, extra)

    result = _run_analysis(config, profile_text, posting_text, extra_text)

    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    writer = StatementWriter(
        llm,
        model=config.llm.model,
        max_tokens=config.llm.max_tokens,
        value_label=config.vocabulary.value_label,
    )
    with console.status("Drafting statement..."):
        drafted = asyncio.run(writer.write(result, style, extra_text))

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(drafted.statement, encoding="utf-8")
        console.print(f"[green]Statement saved: {output}[/green]")
    else:
        console.print(Panel(drafted.statement, title=f"Supporting statement ({style.value})"))

    usage = llm.get_token_summary()
    console.print(
        f"[dim]Tokens: {usage['input']} in / {usage['output']} out "
        f"({len(usage['calls'])} calls)[/dim]"
    )


if __name__ == "__main__":
    app()

"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from resume_insight.clients.gateway import GatewayClient
from resume_insight.config import AppConfig, load_config
from resume_insight.logging.usage_store import UsageStore
from resume_insight.parsers.resume_parser import parse_resume
from resume_insight.pipeline.extractor import ResumeExtractor
from resume_insight.pipeline.fallback import is_fallback_resume
from resume_insight.store.record_store import RecordStore

app = typer.Typer(
    name="resume-insight",
    help="Resume and interview-feedback extraction over a chat-completion API",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config_or_exit(config_path: Path | None) -> AppConfig:
    try:
        return load_config(config_path)
    except (ValueError, TypeError) as exc:
        console.print(f"[red]Invalid configuration: {exc}[/red]")
        raise typer.Exit(1)


def _build_extractor(config: AppConfig) -> ResumeExtractor:
    gateway = GatewayClient(
        os.environ.get(config.gateway.api_key_env, ""),
        api_url=config.gateway.api_url,
        model=config.gateway.model,
        timeout=config.gateway.timeout,
    )
    return ResumeExtractor(
        gateway,
        settings=config.extraction,
        usage_store=UsageStore(config.store.resolved_usage_db_path),
    )


@app.command()
def extract(
    resume: Path = typer.Argument(help="Resume file (PDF/DOCX/TXT/MD)"),
    save: bool = typer.Option(False, "--save", help="Store the analysis and mark it current"),
    brief: bool = typer.Option(False, "--brief", help="Also generate a recruiter brief"),
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Extract a structured profile from a resume file."""
    _setup_logging(verbose)
    if not resume.exists():
        console.print(f"[red]Resume file not found: {resume}[/red]")
        raise typer.Exit(1)

    config = _load_config_or_exit(config_path)
    try:
        text = parse_resume(resume)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    extractor = _build_extractor(config)
    with console.status("Extracting resume..."):
        record = asyncio.run(extractor.extract_resume(text))
        summary = asyncio.run(extractor.generate_candidate_brief(record)) if brief else None

    if is_fallback_resume(record):
        console.print(
            "[yellow]Extraction failed; showing the placeholder profile. "
            "Check the API key and --verbose logs.[/yellow]"
        )
    console.print_json(record.model_dump_json())
    if summary:
        console.print(Panel(summary, title="Candidate brief"))

    if save:
        store = RecordStore(config.store.resolved_db_path)
        analysis_id = store.save_analysis(record, brief=summary)
        store.set_current_analysis(analysis_id)
        console.print(f"[green]Saved analysis {analysis_id}[/green]")


@app.command()
def feedback(
    feedback_file: Path = typer.Argument(help="Text file with interview feedback"),
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Analyze interview feedback for sentiment, red flags and strengths."""
    _setup_logging(verbose)
    if not feedback_file.exists():
        console.print(f"[red]Feedback file not found: {feedback_file}[/red]")
        raise typer.Exit(1)

    config = _load_config_or_exit(config_path)
    extractor = _build_extractor(config)
    with console.status("Analyzing feedback..."):
        result = asyncio.run(extractor.extract_feedback(feedback_file.read_bytes()))
    console.print_json(json.dumps(result.to_json_dict()))


@app.command(name="brief")
def brief_cmd(
    analysis_id: str = typer.Argument(None, help="Stored analysis id (default: current)"),
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate a recruiter brief for a stored analysis."""
    _setup_logging(verbose)
    config = _load_config_or_exit(config_path)
    store = RecordStore(config.store.resolved_db_path)

    analysis_id = analysis_id or store.get_current_analysis_id()
    analysis = store.get_analysis(analysis_id) if analysis_id else None
    if analysis is None:
        console.print("[red]No stored analysis found. Run `extract --save` first.[/red]")
        raise typer.Exit(1)

    extractor = _build_extractor(config)
    summary = asyncio.run(extractor.generate_candidate_brief(analysis.record))
    console.print(Panel(summary, title=analysis.record.name or analysis.id))


@app.command()
def history(
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
) -> None:
    """List stored analyses."""
    config = _load_config_or_exit(config_path)
    store = RecordStore(config.store.resolved_db_path)
    current = store.get_current_analysis_id()

    table = Table(title="Stored analyses")
    table.add_column("ID")
    table.add_column("Created")
    table.add_column("Name")
    table.add_column("Skills")
    for analysis in store.get_analyses():
        marker = " *" if analysis.id == current else ""
        table.add_row(
            analysis.id + marker,
            analysis.created_at.strftime("%Y-%m-%d %H:%M"),
            analysis.record.name,
            ", ".join(analysis.record.skills[:5]),
        )
    console.print(table)


@app.command()
def usage(
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
) -> None:
    """Show this month's gateway usage and estimated cost."""
    config = _load_config_or_exit(config_path)
    stats = UsageStore(config.store.resolved_usage_db_path).get_monthly_stats()

    table = Table(title=f"Usage {stats['month']}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Calls", str(stats["total_runs"]))
    table.add_row("Fallbacks", str(stats["fallback_count"]))
    table.add_row("Success rate", f"{stats['success_rate']:.1f}%")
    table.add_row("Input tokens", f"{stats['total_input_tokens']:,}")
    table.add_row("Output tokens", f"{stats['total_output_tokens']:,}")
    table.add_row("Estimated cost", f"${stats['total_cost_usd']:.4f}")
    console.print(table)


if __name__ == "__main__":
    app()

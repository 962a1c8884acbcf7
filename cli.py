#!/usr/bin/env python3
"""
Hygieia CLI

Command-line interface for local symptom analysis.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

console = Console()


def setup_paths():
    """Add the project root to sys.path for imports."""
    root = Path(__file__).parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


setup_paths()


def parse_answers(answers: tuple) -> dict[str, str]:
    """Parse repeated KEY=VALUE options into a dict."""
    parsed = {}
    for answer in answers:
        key, sep, value = answer.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got {answer!r}", param_hint="--answer")
        parsed[key.strip()] = value.strip()
    return parsed


def load_analyzer(kb_path: Optional[str] = None):
    """Build the analyzer, exiting on a broken knowledge base."""
    from hygieia.engines import SymptomAnalyzer
    from hygieia.errors import KnowledgeBaseError
    from hygieia.kb import load_knowledge_base, set_knowledge_base

    try:
        if kb_path:
            set_knowledge_base(load_knowledge_base(kb_path))
        return SymptomAnalyzer()
    except KnowledgeBaseError as e:
        console.print(f"[red]Knowledge base error:[/red] {escape(str(e))}")
        sys.exit(2)


@click.group()
@click.version_option(version="0.1.0", prog_name="hygieia")
@click.option("--kb", "kb_path", type=click.Path(exists=True, dir_okay=False),
              envvar="HYGIEIA_KB_PATH", help="Condition knowledge base (YAML or JSON)")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING...)")
@click.pass_context
def cli(ctx, kb_path: Optional[str], log_level: Optional[str]):
    """
    Hygieia - Local Symptom Checker

    Match symptoms against a reference knowledge base of conditions.
    Results are lexical matches, not a diagnosis.
    """
    from hygieia.config import configure_logging

    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["kb_path"] = kb_path


@cli.command()
@click.argument("symptoms")
@click.option("--answer", "-a", "answers", multiple=True,
              help="Follow-up answer as KEY=VALUE (repeatable)")
@click.option("--format", "fmt", type=click.Choice(["table", "json", "markdown"]), default="table",
              help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Write the report to a file")
@click.option("--details", is_flag=True, help="Show summaries for each condition")
@click.pass_context
def analyze(ctx, symptoms: str, answers: tuple, fmt: str, output: Optional[str], details: bool):
    """
    Analyze a comma-separated list of symptoms.

    Examples:

        hygieia analyze "headache, nausea"

        hygieia analyze "fever; cough" --answer q0="1-3 days" --format markdown
    """
    from hygieia.errors import EmptyInputError
    from hygieia.exporters import export_json, export_markdown

    previous_answers = parse_answers(answers)
    analyzer = load_analyzer(ctx.obj.get("kb_path"))

    try:
        results = analyzer.analyze(symptoms, previous_answers or None)
    except EmptyInputError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]")
        sys.exit(1)

    questions = analyzer.generate_follow_up_questions(results)
    out_path = Path(output) if output else None

    if fmt == "json":
        report = export_json(results, out_path, query=symptoms, follow_up_questions=questions)
        if not out_path:
            click.echo(report)
        else:
            console.print(f"[green]✓ Exported to {out_path}[/green]")
        return

    if fmt == "markdown":
        report = export_markdown(results, out_path, query=symptoms, follow_up_questions=questions)
        if not out_path:
            click.echo(report)
        else:
            console.print(f"[green]✓ Exported to {out_path}[/green]")
        return

    if not results:
        console.print("[yellow]No matching conditions found. "
                      "Try describing your symptoms differently.[/yellow]")
        return

    table = Table(title="Possible Conditions")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Condition", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Matching Symptoms")

    for i, result in enumerate(results, start=1):
        color = "green" if result.confidence >= 60 else "yellow" if result.confidence >= 30 else "white"
        table.add_row(
            str(i),
            result.condition_name,
            f"[{color}]{result.confidence}%[/{color}]",
            escape(", ".join(result.matching_symptoms)) or "[dim]partial overlap[/dim]",
        )

    console.print(table)

    if details:
        for result in results:
            tree = Tree(f"[bold]{result.condition_name}[/bold]")
            for label, items in [
                ("Key causes", result.causes_summary),
                ("Risk factors", result.risk_factors_summary),
                ("Home care", result.home_remedies_summary),
                ("Exercises", result.exercises_summary),
            ]:
                if items:
                    branch = tree.add(label)
                    for item in items:
                        branch.add(item)
            console.print(tree)

    if questions:
        console.print("\n[bold]Follow-up questions:[/bold]")
        for i, q in enumerate(questions):
            opts = f" [dim]({' / '.join(q.options)})[/dim]" if q.options else " [dim](yes / no)[/dim]"
            console.print(f"  q{i}: {q.question}{opts}")

    console.print(Panel(results[0].when_to_see_doctor, title="When to See a Doctor",
                        border_style="red"))


@cli.command()
@click.argument("partial")
@click.option("--conditions", "search_conditions", is_flag=True,
              help="Suggest condition names instead of symptoms")
@click.pass_context
def suggest(ctx, partial: str, search_conditions: bool):
    """
    Autocomplete a symptom (or condition name).

    Example:

        hygieia suggest head
    """
    from hygieia.engines import suggest_conditions

    analyzer = load_analyzer(ctx.obj.get("kb_path"))
    if search_conditions:
        suggestions = suggest_conditions(partial, analyzer.knowledge_base)
    else:
        suggestions = analyzer.suggest(partial)

    if not suggestions:
        console.print("[dim]No suggestions[/dim]")
        return
    for s in suggestions:
        console.print(f"  • {s}")


@cli.command()
@click.argument("name")
@click.pass_context
def condition(ctx, name: str):
    """
    Show the reference entry for a condition.

    Example:

        hygieia condition migraine
    """
    analyzer = load_analyzer(ctx.obj.get("kb_path"))
    record = analyzer.lookup_condition(name)

    if record is None:
        console.print(f"[red]Condition not found: {escape(name)}[/red]")
        sys.exit(1)

    console.print(Panel(
        f"[bold]{record.name}[/bold]\n"
        f"Category: {record.category or 'general'}\n\n"
        f"{record.overview.strip()}",
        title="Overview",
        border_style="blue",
    ))

    for title, text in [
        ("Symptoms", record.symptoms),
        ("Causes and Risk Factors", record.causes_and_risk_factors),
        ("Diagnosis", record.diagnosis),
        ("Treatment", record.treatment),
        ("Home Remedies", record.home_remedies),
        ("Exercises", record.exercises),
    ]:
        if text.strip():
            console.print(f"\n[bold cyan]{title}[/bold cyan]")
            console.print(text.strip(), markup=False)


@cli.command()
@click.pass_context
def conditions(ctx):
    """
    List conditions in the knowledge base.
    """
    analyzer = load_analyzer(ctx.obj.get("kb_path"))

    table = Table(title=f"Conditions ({len(analyzer.knowledge_base)})")
    table.add_column("Name", style="cyan")
    table.add_column("Category")

    for record in analyzer.knowledge_base:
        table.add_row(record.name, record.category or "general")

    console.print(table)


@cli.command()
def info():
    """
    Show information about Hygieia.
    """
    console.print(Panel(
        "[bold]Hygieia[/bold]\n\n"
        "A local symptom checker that works without a remote model:\n"
        "• Ranks conditions by weighted symptom overlap\n"
        "• Autocompletes symptoms from the knowledge base\n"
        "• Summarizes causes, home care and exercises\n\n"
        "[dim]Confidence is a lexical match score capped at 95%.[/dim]\n"
        "[dim]It is not a diagnosis.[/dim]",
        title="About",
        border_style="blue",
    ))

    console.print("\n[bold]Quick Start:[/bold]")
    console.print('  hygieia analyze "headache, nausea"')
    console.print("  hygieia suggest fev")
    console.print("  hygieia condition asthma")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

# planwright/cli.py
"""
CLI interface for planwright.

Thin presentation layer over the planning pipeline. Metadata and logs go to
stderr; the rendered workflow goes to stdout so it can be piped.
"""

import asyncio
from pathlib import Path

import typer

app = typer.Typer(
    name="planwright",
    help="Turn feature descriptions and requirements documents into phased implementation workflows.",
    no_args_is_help=True,
)

EXAMPLES = [
    (
        "Generate workflow from a requirements document",
        "planwright generate docs/feature-prd.md --strategy systematic --estimate",
    ),
    (
        "Create a frontend-focused workflow",
        'planwright generate "User dashboard with real-time analytics" --viewpoint frontend --output detailed',
    ),
    (
        "MVP planning with risk assessment",
        'planwright generate "user authentication system" --strategy mvp --risks --parallel --milestones',
    ),
    (
        "Backend API workflow with dependencies",
        'planwright generate "payment processing api" --viewpoint backend --dependencies --output tasks',
    ),
    (
        "Everything, saved to a file",
        'planwright generate "social media integration" --all --save workflow.md',
    ),
]


def _risk_color(level: str) -> str:
    colors = {"low": "green", "medium": "yellow", "high": "red"}
    return colors.get(level, "white")


def _load(config_path: Path | None):
    from planwright.config.loader import load_config

    try:
        return load_config(config_path)
    except Exception as e:
        typer.echo(f"Error: invalid config: {e}", err=True)
        raise typer.Exit(1)


def _run_generate(
    input: str,
    config,
    options,
    fmt: str,
    verbosity: str,
    save: Path | None = None,
) -> None:
    """Run the pipeline and print the rendered workflow. Exits 1 on contract errors."""
    from rich.console import Console

    from planwright.errors import PlanwrightError
    from planwright.planning.documents import load_document
    from planwright.planning.pipeline import WorkflowPipeline, WorkflowRenderer

    console = Console(stderr=True)

    try:
        doc = load_document(input)
        workflow = WorkflowPipeline(config).run(
            doc.text, options, source_kind=doc.source_kind, file_name=doc.file_name
        )
        rendered = WorkflowRenderer().render(workflow, fmt)
    except (PlanwrightError, OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if verbosity != "quiet":
        meta = workflow.metadata
        console.print(f"[bold]{workflow.title}[/bold]")
        console.print(f"  Viewpoint:  {workflow.viewpoint}")
        console.print(f"  Strategy:   {workflow.strategy}")
        console.print(f"  Complexity: {meta.complexity:.2f}")
        console.print(f"  Duration:   {meta.estimated_duration}")
        console.print(f"  Risk level: [{_risk_color(meta.risk_level)}]{meta.risk_level}[/]")
        console.print(f"  Phases:     {len(workflow.phases)} ({workflow.task_count} tasks)")
        console.print()

    typer.echo(rendered)

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save.write_text(rendered, encoding="utf-8")
        console.print(f"Saved workflow to {save}")

    result = workflow.quality_gate_result
    if result is not None:
        color = "green" if result.overall.passed else "red"
        verdict = "passed" if result.overall.passed else "failed"
        console.print(f"Quality gates [{color}]{verdict}[/] (score {result.overall.score:.2f})")
        for blocker in result.blockers:
            console.print(f"  [red]Blocker:[/red] {blocker.gate}: {'; '.join(blocker.issues)}")


@app.command()
def generate(
    input: str = typer.Argument(..., help="Feature description, or path to a .md/.markdown/.txt file"),
    viewpoint: str = typer.Option(None, "--viewpoint", "-p", help="architect, frontend, backend, security, devops, qa or auto"),
    strategy: str = typer.Option(None, "--strategy", "-s", help="systematic, iterative (agile) or minimum-scope (mvp)"),
    output: str = typer.Option(None, "--output", "-o", help="Output format: roadmap, tasks, detailed, json, yaml"),
    estimate: bool = typer.Option(False, "--estimate", help="Include time estimates"),
    dependencies: bool = typer.Option(False, "--dependencies", help="Map dependencies"),
    risks: bool = typer.Option(False, "--risks", help="Include risk assessment"),
    parallel: bool = typer.Option(False, "--parallel", help="Identify parallel work streams"),
    milestones: bool = typer.Option(False, "--milestones", help="Create phase milestones"),
    validate: bool = typer.Option(False, "--validate", help="Run quality gates"),
    include_all: bool = typer.Option(False, "--all", help="Enable every enrichment pass"),
    save: Path = typer.Option(None, "--save", help="Also write the rendered workflow to this file"),
    config_path: Path = typer.Option(None, "--config", help="Config file (default: user config dir)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Warnings only"),
):
    """Generate an implementation workflow."""
    from planwright.logging_config import configure_cli_logging
    from planwright.planning.pipeline import PipelineOptions

    config = _load(config_path)
    verbosity = "verbose" if verbose else "quiet" if quiet else config.output.verbosity
    configure_cli_logging(verbosity)

    flags = {
        "include_estimates": estimate,
        "include_dependencies": dependencies,
        "include_risks": risks,
        "include_parallel_streams": parallel,
        "include_milestones": milestones,
        "run_quality_gates": validate,
    }
    if include_all:
        flags = {key: True for key in flags}
    options = PipelineOptions(
        viewpoint=viewpoint or config.defaults.viewpoint,
        strategy=strategy or config.defaults.strategy,
        **flags,
    )
    _run_generate(input, config, options, output or config.output.format, verbosity, save)


@app.command()
def interactive(
    config_path: Path = typer.Option(None, "--config", help="Config file (default: user config dir)"),
):
    """Generate a workflow by answering prompts."""
    from planwright.logging_config import configure_cli_logging
    from planwright.planning.pipeline import PipelineOptions

    config = _load(config_path)
    configure_cli_logging(config.output.verbosity)

    typer.echo("Interactive workflow generation\n")
    input = typer.prompt("PRD file path or feature description")
    viewpoint = typer.prompt(
        "Viewpoint (architect/frontend/backend/security/devops/qa/auto)",
        default=config.defaults.viewpoint,
    )
    strategy = typer.prompt(
        "Strategy (systematic/agile/mvp)", default=config.defaults.strategy
    )
    fmt = typer.prompt(
        "Output format (roadmap/tasks/detailed/json/yaml)", default=config.output.format
    )
    options = PipelineOptions(
        viewpoint=viewpoint,
        strategy=strategy,
        include_estimates=typer.confirm("Include time estimates?", default=False),
        include_dependencies=typer.confirm("Include dependency analysis?", default=False),
        include_risks=typer.confirm("Include risk assessment?", default=False),
    )
    typer.echo("")
    _run_generate(input, config, options, fmt, config.output.verbosity)


app.command("i", hidden=True, help="Alias for interactive.")(interactive)


@app.command()
def viewpoints():
    """List available expert viewpoints."""
    from planwright.planning.viewpoints import get_viewpoint, list_viewpoints

    for name in list_viewpoints():
        typer.echo(f"  {name:<14} {get_viewpoint(name).description}")
    typer.echo('\nUse --viewpoint <name> to pick one, or "auto" for automatic detection.')


@app.command()
def strategies():
    """List available workflow strategies."""
    from planwright.planning.synthesis import (
        STRATEGY_ALIASES,
        STRATEGY_DESCRIPTIONS,
        list_strategies,
    )

    for name in list_strategies():
        aliases = [alias for alias, target in STRATEGY_ALIASES.items() if target == name]
        label = f"{name} ({', '.join(aliases)})" if aliases else name
        typer.echo(f"  {label:<28} {STRATEGY_DESCRIPTIONS.get(name, '')}")
    typer.echo("\nUse --strategy <name> to pick one (default: systematic).")


@app.command()
def examples():
    """Show usage examples."""
    for number, (title, command) in enumerate(EXAMPLES, start=1):
        typer.echo(f"{number}. {title}:")
        typer.echo(f"   {command}\n")


@app.command()
def serve():
    """Start the MCP server on stdio."""
    from planwright.__main__ import main

    asyncio.run(main())


if __name__ == "__main__":
    app()

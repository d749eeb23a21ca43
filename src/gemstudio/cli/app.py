"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from ..config import AUTOMATION_TASKS, DEFAULT_AUTOMATION_TASK, SAMPLE_PROMPTS
from ..files import SUPPORTED_EXTENSIONS
from ..panels import AutomationPanel, ChatPanel, DashboardPanel
from .providers import get_config, get_gateway
from .render import render_dashboard, render_message

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="gemstudio",
    help="Gemini Studio: dashboard generator, automation lab and chat playground",
    no_args_is_help=True,
    add_completion=False,
)

# Console for rich output
console = Console()

EXIT_COMMANDS = {"/exit", "/quit"}

VerboseOption = typer.Option(False, "--verbose", "-v", help="Log gateway requests")


@app.command()
def dashboard(
    topic: str = typer.Argument(
        None,
        help="Topic to invent illustrative data for"
    ),
    file: Path = typer.Option(
        None,
        "--file",
        "-f",
        help="Dataset to analyze (" + ", ".join(sorted(SUPPORTED_EXTENSIONS)) + ")"
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the dashboard as JSON instead of tables"
    ),
    verbose: bool = VerboseOption,
):
    """Generate an analytical dashboard from a topic or a data file."""
    if not topic and not file:
        console.print("[red]Error: provide a TOPIC or --file[/red]")
        raise typer.Exit(code=1)
    if topic and file:
        console.print("[red]Error: provide either a TOPIC or --file, not both[/red]")
        raise typer.Exit(code=1)

    async def _dashboard():
        config = get_config(verbose)
        async with get_gateway(config, console) as gateway:
            panel = DashboardPanel(gateway)
            with console.status("[dim]Analyzing dataset...[/dim]" if file else "[dim]Generating dashboard...[/dim]"):
                if file:
                    await panel.generate_from_file(file)
                else:
                    await panel.generate_from_topic(topic)
            return panel

    panel = asyncio.run(_dashboard())

    if panel.error:
        console.print(f"[red]Error: {escape(panel.error)}[/red]")
        raise typer.Exit(code=1)
    if panel.dashboard is None:
        console.print("[yellow]Nothing to analyze: input is empty[/yellow]")
        raise typer.Exit(code=1)

    if json_output:
        console.print_json(panel.dashboard.model_dump_json(by_alias=True, exclude_none=True))
    else:
        console.print(render_dashboard(panel.dashboard))


@app.command()
def automate(
    text: str = typer.Argument(..., help="Input text for the agent"),
    task: str = typer.Option(
        DEFAULT_AUTOMATION_TASK,
        "--task",
        "-t",
        help="Agent skill to apply (see 'gemstudio samples')"
    ),
    verbose: bool = VerboseOption,
):
    """Run an automation task on the given text."""
    async def _automate():
        config = get_config(verbose)
        async with get_gateway(config, console) as gateway:
            panel = AutomationPanel(gateway, task=task)
            with console.status(f"[dim]Running '{escape(panel.task)}'...[/dim]"):
                await panel.run(text)
            return panel

    panel = asyncio.run(_automate())

    if panel.result is None:
        console.print("[yellow]Nothing to process: input is empty[/yellow]")
        raise typer.Exit(code=1)
    if panel.error:
        console.print(f"[red]{panel.result}[/red]")
        console.print(f"[dim]{escape(panel.error)}[/dim]")
        raise typer.Exit(code=1)
    console.print(Markdown(panel.result))


@app.command()
def chat(verbose: bool = VerboseOption):
    """Interactive chat with the model. Type /exit to quit."""
    async def _chat():
        config = get_config(verbose)
        async with get_gateway(config, console) as gateway:
            panel = ChatPanel(gateway)
            for message in panel.messages:
                console.print(render_message(message))

            while True:
                try:
                    text = console.input("[bold cyan]You:[/bold cyan] ")
                except (EOFError, KeyboardInterrupt):
                    console.print()
                    break
                if text.strip().lower() in EXIT_COMMANDS:
                    break
                with console.status("[dim]Thinking...[/dim]"):
                    reply = await panel.send(text)
                if reply is not None:
                    console.print(render_message(reply))

    asyncio.run(_chat())


@app.command()
def samples():
    """List sample dashboard topics, automation inputs and agent skills."""
    table = Table(show_header=True, box=None)
    table.add_column("Kind", style="bold cyan")
    table.add_column("Sample")

    for prompt in SAMPLE_PROMPTS["dashboard"]:
        table.add_row("dashboard", prompt)
    for prompt in SAMPLE_PROMPTS["automation"]:
        table.add_row("automation", prompt)
    for task in AUTOMATION_TASKS:
        table.add_row("task", task)

    console.print(table)


@app.command()
def health():
    """Check that the model credential and configuration are present."""
    config = get_config()

    if config.has_credentials:
        console.print("[green]+[/green] Gemini API key: SET")
    else:
        console.print("[yellow]![/yellow] Gemini API key: NOT SET")
    console.print(f"[green]+[/green] Model: {config.model}")
    timeout = f"{config.timeout:g}s" if config.timeout else "none"
    console.print(f"[green]+[/green] Request timeout: {timeout}")

    if not config.has_credentials:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

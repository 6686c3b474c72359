"""
Main CLI interface for VoxPrompt.

This module provides the Typer-based command-line interface with commands for:
- Generating a structured prompt from a transcript
- Inspecting the features extracted from a transcript
- Listing the available templates
"""

import json
import os
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import Optional

import pyperclip
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .core.config import ConfigError, load_env_file
from .core.extractor import extract_from_transcript
from .core.generate import GenerationError, PromptGenerator
from .core.progress import reporter
from .core.templates import TEMPLATES
from .core.types import ExtractedData, GeneratedPrompt, GenerateOptions

app = typer.Typer(
    name="voxprompt",
    help="VoxPrompt CLI - Turn spoken transcripts into structured prompts for AI assistants",
    no_args_is_help=True,
)

console = Console()


def _read_transcript(text: Optional[str], file: Optional[str]) -> str:
    """Resolve --text/--file into transcript text, exiting with status 1 on misuse."""
    if text and file:
        console.print("[bold red]Error:[/bold red] Cannot specify both --text and --file options")
        sys.exit(1)

    if not text and not file:
        console.print("[bold red]Error:[/bold red] Must specify either --text or --file option")
        sys.exit(1)

    if file:
        file_path = Path(file)
        if not file_path.exists():
            console.print(f"[bold red]Error:[/bold red] File not found: {file}")
            sys.exit(1)
        try:
            return file_path.read_text(encoding="utf-8")
        except Exception as e:
            console.print(f"[bold red]Error:[/bold red] Failed to read file '{file}': {e}")
            sys.exit(1)

    assert text is not None
    return text


def _print_validation_errors(error: ValidationError) -> None:
    console.print("[bold red]Invalid input:[/bold red]")
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "input"
        console.print(f"  • {field}: {item['msg']}", markup=False)


def _copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except Exception:
        # Clipboard is unavailable on headless systems
        pass


@app.command()
def generate(
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Transcript text"),
    file: Optional[str] = typer.Option(None, "--file", help="Path to file containing transcript text"),
    template: str = typer.Option("general", "--template", "-T", help="Template (general|coding|marketing|meeting|support|research)"),
    model: str = typer.Option("universal", "--model", "-m", help="Target assistant (claude|chatgpt|universal)"),
    verbosity: str = typer.Option("medium", "--verbosity", "-v", help="Level of detail (short|medium|detailed)"),
    language: str = typer.Option("auto", "--language", "-l", help="Prompt language (auto|en|pt)"),
    output_format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, markdown, json)"),
    no_ai: bool = typer.Option(False, "--no-ai", help="Use only the deterministic builder"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="OpenAI API key, overrides OPENAI_API_KEY"),
    env_file: Optional[str] = typer.Option(None, "--env-file", help="Load environment variables from this .env file"),
    debug: bool = typer.Option(False, "--debug", help="Write JSON debug logs of LLM requests to .voxprompt/debug"),
):
    """
    Generate a structured Markdown prompt from a transcript.

    Examples:
        voxprompt generate --text "Create a REST API in Python for a todo app" --template coding
        voxprompt generate --file notes.txt --template meeting --verbosity detailed
        voxprompt generate --text "Preciso de um plano de marketing" --language pt --no-ai
    """
    try:
        # Progress lines would corrupt piped markdown and json output
        status = reporter.initialize(console, "Validating input…") if output_format == "rich" else nullcontext()
        with status:
            transcript = _read_transcript(text, file)
            options = GenerateOptions(
                transcript=transcript,
                template=template,
                model_target=model,
                verbosity=verbosity,
                language=language,
            )

            load_env_file(env_file)
            if debug:
                os.environ["VP_DEBUG"] = "1"

            generator = PromptGenerator(api_key=api_key, use_ai=not no_ai)
            reporter.step("Generating prompt…" if generator.ai_available() else "Generating prompt offline…")
            result = generator.generate(options)

        _display_generation_result(result, options, output_format)

    except ValidationError as e:
        _print_validation_errors(e)
        sys.exit(1)
    except (ConfigError, GenerationError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[bold red]Unexpected Error:[/bold red] {e}")
        sys.exit(1)
    finally:
        reporter.reset()


@app.command()
def extract(
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Transcript text"),
    file: Optional[str] = typer.Option(None, "--file", help="Path to file containing transcript text"),
    output_format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, json)"),
):
    """
    Show the intent, topics, constraints and entities found in a transcript.

    Examples:
        voxprompt extract --text "Fix the login bug before Friday, must not break SSO"
        voxprompt extract --file transcript.txt --format json
    """
    transcript = _read_transcript(text, file).strip()
    extracted = extract_from_transcript(transcript)

    if output_format == "json":
        console.print(json.dumps(extracted.model_dump(), indent=2, ensure_ascii=False), markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    console.print(_extracted_table(extracted, title="Extracted Data"))


@app.command()
def templates():
    """List the available prompt templates."""
    table = Table(title="Templates")
    table.add_column("", no_wrap=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Description", style="white")

    for template in TEMPLATES.values():
        table.add_row(template.icon, template.id, template.name, template.description)

    console.print(table)


def _extracted_table(extracted: ExtractedData, title: Optional[str] = None) -> Table:
    table = Table(title=title, show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Intent", extracted.primary_intent)
    table.add_row("Output type", extracted.output_type)
    table.add_row("Topics", ", ".join(extracted.topics) or "-")
    table.add_row("Entities", ", ".join(extracted.entities) or "-")
    table.add_row("Words", str(extracted.word_count))
    table.add_row("Ambiguity", f"{extracted.ambiguity_score:.2f}")
    if extracted.constraints:
        table.add_row("Constraints", "\n".join(f"• {c}" for c in extracted.constraints))
    return table


def _display_generation_result(result: GeneratedPrompt, options: GenerateOptions, output_format: str):
    """Display a generated prompt in the specified format."""
    if output_format == "json":
        output = json.dumps(result.model_dump(), indent=2, ensure_ascii=False)
        console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)
        _copy_to_clipboard(json.dumps({"prompt": result.prompt}, indent=2, ensure_ascii=False))
        return

    if output_format == "markdown":
        console.print(result.prompt, markup=False, highlight=False, emoji=False, soft_wrap=True)
        _copy_to_clipboard(result.prompt)
        return

    # Rich format (default)
    meta = result.metadata
    source = "AI-enhanced" if meta.used_ai else "deterministic"
    console.print(f"\n[bold green]Generated Prompt ({meta.template}, {meta.model_target}, {meta.verbosity}, {source}):[/bold green]")
    syntax = Syntax(result.prompt, "markdown", theme="monokai", line_numbers=False, word_wrap=True)
    console.print(Panel(syntax, border_style="green"))
    _copy_to_clipboard(result.prompt)

    console.print("\n[bold blue]Transcript Analysis:[/bold blue]")
    console.print(_extracted_table(extract_from_transcript(options.transcript)))
    console.print("\n[dim]Prompt copied to clipboard (if available)[/dim]")


if __name__ == "__main__":
    app()

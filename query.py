#!/usr/bin/env python3
"""Ad hoc runner for Chef Gemini.

Generate a recipe from the terminal, either through the interactive form or
in one shot from command-line arguments.

Usage:
    python query.py                                  # Interactive form
    python query.py "Brownie"                        # One-shot, name only
    python query.py --details "sem gluten" "Pizza"   # One-shot, with details
    python query.py --debug "Brownie"                # Also print the decoded JSON

Features:
- Form fields, hints and validation messages come from the request schema
- Spinner driven by the pipeline state while the model is working
- Markdown rendering of the recipe
- Generic failure message per failure kind (details go to the log)
"""

import asyncio
import sys
from typing import Optional

from rich.console import Console
from rich.prompt import Confirm

from chef_gemini.models.errors import FailureKind, RequestValidationError
from chef_gemini.pipeline.controller import RecipePipeline
from chef_gemini.pipeline.state import Failed, Loaded
from chef_gemini.ui.terminal import DISCLAIMER, LoadingIndicator, TerminalForm, print_failure, print_recipe
from chef_gemini.utils.logger import logger

console = Console()


def build_pipeline() -> RecipePipeline:
    """Create a pipeline with the loading spinner subscribed to its state."""
    pipeline = RecipePipeline()
    pipeline.subscribe(LoadingIndicator(console).on_state)
    return pipeline


def show_outcome(pipeline: RecipePipeline, debug: bool = False) -> bool:
    """Print the result of the last submission. Returns True on success."""
    state = pipeline.state
    console.print()

    if isinstance(state, Loaded):
        if debug:
            console.print("[bold cyan]Debug Mode: Decoded Recipe[/bold cyan]")
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print_json(data=state.recipe.model_dump())
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print()
        print_recipe(console, state.recipe)
        console.print(f"[dim]{DISCLAIMER}[/dim]")
        return True

    if isinstance(state, Failed):
        print_failure(console, state.kind)
    return False


def run_query(name: str, details: Optional[str] = None, debug: bool = False) -> None:
    """Generate a single recipe from command-line values and exit.

    Args:
        name: Dish name.
        details: Optional constraints (e.g. "sem gluten").
        debug: If True, also print the decoded recipe as JSON.
    """
    pipeline = build_pipeline()
    values = {"name": name}
    if details is not None:
        values["details"] = details

    try:
        asyncio.run(pipeline.submit(values))
    except RequestValidationError as e:
        for field, message in e.field_errors.items():
            console.print(f"[red]✗ {field}: {message}[/red]")
        sys.exit(2)
    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Query execution failed: {e}", exc_info=True)
        sys.exit(1)

    sys.exit(0 if show_outcome(pipeline, debug) else 1)


def run_interactive(debug: bool = False) -> None:
    """Show the form until a recipe is generated or the user gives up."""
    pipeline = build_pipeline()
    form = TerminalForm(console)
    errors: dict[str, str] = {}
    previous: dict[str, str] = {}

    console.print("[bold]Chef Gemini[/bold]\n")
    try:
        while True:
            values = form.collect(errors, previous)
            previous = values
            try:
                asyncio.run(pipeline.submit(values))
            except RequestValidationError as e:
                errors = e.field_errors
                console.print()
                continue
            except Exception as e:
                logger.error(f"Recipe generation failed: {e}", exc_info=True)
                console.print()
                print_failure(console, FailureKind.UNEXPECTED)
            else:
                if show_outcome(pipeline, debug):
                    sys.exit(0)

            errors = {}
            if not Confirm.ask("Tentar novamente?", console=console, default=True):
                sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        sys.exit(0)


if __name__ == "__main__":
    debug_mode = False
    details_arg = None
    argv_start = 1

    while argv_start < len(sys.argv) and sys.argv[argv_start].startswith("--"):
        if sys.argv[argv_start] == "--debug":
            debug_mode = True
            argv_start += 1
        elif sys.argv[argv_start] == "--details":
            argv_start += 1
            if argv_start >= len(sys.argv):
                print("Error: --details flag requires a value")
                sys.exit(2)
            details_arg = sys.argv[argv_start]
            argv_start += 1
        else:
            print(f"Unknown flag: {sys.argv[argv_start]}")
            print('Usage: python query.py [--debug] [--details "<details>"] ["<dish name>"]')
            sys.exit(2)

    if argv_start >= len(sys.argv):
        if details_arg is not None:
            print("Error: --details requires a dish name")
            sys.exit(2)
        run_interactive(debug=debug_mode)
    else:
        # Join all arguments after flags as the name (handles names with spaces)
        run_query(" ".join(sys.argv[argv_start:]), details=details_arg, debug=debug_mode)

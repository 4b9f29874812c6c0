"""Terminal front end: request form, loading indicator and recipe display.

TerminalForm renders one prompt per request-schema field using the display
configuration (label, hint, single- or multi-line widget) and shows the
field-level messages produced by validation. LoadingIndicator follows the
pipeline state through a subscription.
"""

from typing import Mapping, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.prompt import Prompt

from chef_gemini.models.errors import FailureKind
from chef_gemini.pipeline.state import Loading, PipelineState
from chef_gemini.render.renderer import render_markdown, render_recipe
from chef_gemini.models.models import Recipe
from chef_gemini.schemas.request_schema import FORM_FIELDS, FieldConfig


DISCLAIMER = (
    "Todas as receitas e os dados delas são geradas por Inteligência Artificial, "
    "ou seja, podem haver erros."
)

# Generic, user-facing text per failure kind. Raw error text only goes to the logs.
FAILURE_MESSAGES = {
    FailureKind.CLIENT: "Não foi possível falar com o modelo. Tente novamente em instantes.",
    FailureKind.MALFORMED: "O modelo respondeu em um formato inesperado. Tente novamente.",
    FailureKind.SCHEMA_MISMATCH: "A receita gerada veio incompleta. Tente novamente.",
    FailureKind.UNEXPECTED: "Algo deu errado ao gerar a receita.",
}


class TerminalForm:
    """Collects raw request values from the terminal."""

    def __init__(self, console: Optional[Console] = None, fields: Mapping[str, FieldConfig] = FORM_FIELDS) -> None:
        self.console = console or Console()
        self.fields = fields

    def collect(
        self,
        errors: Optional[Mapping[str, str]] = None,
        previous: Optional[Mapping[str, str]] = None,
    ) -> dict[str, str]:
        """Ask for every field and return the raw values.

        Args:
            errors: Field messages from a failed validation, shown under each field.
            previous: Values from the last attempt, offered as defaults for single-line fields.

        Returns:
            Field name to raw string mapping (not validated).
        """
        errors = errors or {}
        previous = previous or {}
        values: dict[str, str] = {}

        for name, field in self.fields.items():
            marker = " [red]*[/red]" if field.required else ""
            self.console.print(f"[bold]{field.label}[/bold]{marker}")
            self.console.print(f"[dim]{field.description}[/dim]")
            if name in errors:
                self.console.print(f"[red]{errors[name]}[/red]")

            if field.field_type == "textarea":
                values[name] = self._read_multiline()
            else:
                values[name] = Prompt.ask(
                    ">", console=self.console, default=previous.get(name, ""), show_default=False
                )

        return values

    def _read_multiline(self) -> str:
        self.console.print("[dim](linha vazia para terminar)[/dim]")
        lines = []
        while True:
            line = self.console.input("> ")
            if not line.strip():
                break
            lines.append(line)
        return "\n".join(lines)


class LoadingIndicator:
    """Spinner shown while the pipeline is Loading. Subscribe `on_state` to the pipeline."""

    def __init__(self, console: Console, message: str = "Gerando receita...") -> None:
        self._status = console.status(message)
        self.active = False

    def on_state(self, state: PipelineState) -> None:
        if isinstance(state, Loading):
            if not self.active:
                self._status.start()
                self.active = True
        elif self.active:
            self._status.stop()
            self.active = False


def print_recipe(console: Console, recipe: Recipe) -> None:
    """Render a decoded recipe as Markdown."""
    console.print(Markdown(render_markdown(render_recipe(recipe))))


def print_failure(console: Console, kind: FailureKind) -> None:
    console.print(f"[red]✗ {FAILURE_MESSAGES[kind]}[/red]")

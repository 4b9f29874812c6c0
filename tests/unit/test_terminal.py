"""Unit tests for the terminal front end (form, loading indicator, display)."""

from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from chef_gemini.models.errors import FailureKind
from chef_gemini.models.models import Recipe
from chef_gemini.pipeline.state import Failed, Idle, Loaded, Loading
from chef_gemini.ui.terminal import (
    FAILURE_MESSAGES,
    LoadingIndicator,
    TerminalForm,
    print_failure,
    print_recipe,
)


def _console() -> Console:
    return Console(file=StringIO(), width=100, force_terminal=False, color_system=None)


def _recipe() -> Recipe:
    return Recipe.model_validate(
        {
            "title": "Brownie",
            "description": "Brownie de chocolate",
            "preparation_time": {"total": 40},
            "ingredients": ["* farinha"],
            "instructions": ["1. Misture"],
        }
    )


class TestTerminalForm:
    """Form rendering and value collection."""

    @patch("chef_gemini.ui.terminal.Prompt.ask", return_value="Pizza")
    def test_collects_single_and_multiline_fields(self, mock_ask):
        """Test name comes from a prompt and details from multi-line input."""
        console = _console()
        console.input = MagicMock(side_effect=["sem gluten", "para 4 pessoas", ""])

        values = TerminalForm(console).collect()

        assert values == {"name": "Pizza", "details": "sem gluten\npara 4 pessoas"}
        mock_ask.assert_called_once()

    @patch("chef_gemini.ui.terminal.Prompt.ask", return_value="Brownie")
    def test_empty_textarea(self, mock_ask):
        """Test an immediate blank line yields empty details."""
        console = _console()
        console.input = MagicMock(side_effect=[""])

        values = TerminalForm(console).collect()

        assert values["details"] == ""

    @patch("chef_gemini.ui.terminal.Prompt.ask", return_value="Brownie")
    def test_shows_labels_hints_and_errors(self, mock_ask):
        """Test labels, hints and field errors are printed."""
        console = _console()
        console.input = MagicMock(side_effect=[""])

        TerminalForm(console).collect(errors={"name": "O nome da receita é obrigatório."})
        output = console.file.getvalue()

        assert "Nome da receita" in output
        assert "Ex.: Brownie; Pizza" in output
        assert "Detalhes da receita" in output
        assert "O nome da receita é obrigatório." in output

    @patch("chef_gemini.ui.terminal.Prompt.ask", return_value="Brownie")
    def test_previous_value_offered_as_default(self, mock_ask):
        """Test the last attempt's name is the prompt default."""
        console = _console()
        console.input = MagicMock(side_effect=[""])

        TerminalForm(console).collect(previous={"name": "Brownei"})

        assert mock_ask.call_args.kwargs["default"] == "Brownei"


class TestLoadingIndicator:
    """Spinner follows the pipeline state."""

    def test_starts_on_loading_and_stops_after(self):
        """Test start on Loading and stop on the terminal state."""
        console = MagicMock()
        indicator = LoadingIndicator(console)
        status = console.status.return_value

        indicator.on_state(Loading())
        assert indicator.active
        status.start.assert_called_once()

        indicator.on_state(Loaded(recipe=_recipe()))
        assert not indicator.active
        status.stop.assert_called_once()

    def test_ignores_non_loading_when_idle(self):
        """Test no stop call when the spinner never started."""
        console = MagicMock()
        indicator = LoadingIndicator(console)

        indicator.on_state(Failed(kind=FailureKind.CLIENT))
        indicator.on_state(Idle())

        console.status.return_value.stop.assert_not_called()


class TestDisplay:
    """Recipe and failure output."""

    def test_print_recipe(self):
        """Test the recipe is rendered with cleaned lines."""
        console = _console()

        print_recipe(console, _recipe())
        output = console.file.getvalue()

        assert "Brownie" in output
        assert "Ingredientes" in output
        assert "farinha" in output
        assert "* farinha" not in output
        assert "Modo de preparo" in output
        assert "Misture" in output

    @pytest.mark.parametrize("kind", list(FailureKind))
    def test_print_failure_generic_message(self, kind):
        """Test each failure kind has a generic message."""
        console = _console()

        print_failure(console, kind)

        assert FAILURE_MESSAGES[kind] in console.file.getvalue()

"""Read-only presentation of a decoded Recipe.

render_recipe() maps a Recipe into a RecipeView without further decisions.
The only normalization is cosmetic: one leading bullet ("* ") or ordinal
("1. ") marker is stripped from each ingredient/instruction line. The Recipe
itself is never modified.
"""

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from chef_gemini.models.models import Recipe


# One bullet "* " or one digit + period + whitespace, at line start only
_LEADING_MARKER = re.compile(r"^(?:\* |\d\.\s)")

TIME_LABELS = (
    ("total", "Tempo total"),
    ("preparation", "Preparo"),
    ("cooking", "Forno"),
)

NUTRITION_LABELS = (
    ("calories", "Calorias", "kcal"),
    ("carbs", "Carboidratos", "g"),
    ("protein", "Proteínas", "g"),
    ("fat", "Gorduras", "g"),
)

INGREDIENTS_HEADING = "Ingredientes"
INSTRUCTIONS_HEADING = "Modo de preparo"
TIMES_HEADING = "Tempo de preparo"
NUTRITION_HEADING = "Informação nutricional"


class RecipeView(BaseModel):
    """Display-ready recipe. Line lists keep the recipe's order."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    ingredients: List[str]
    instructions: List[str]
    times: List[str]
    nutrition: List[str]


def strip_list_marker(line: str) -> str:
    """Remove a single leading "* " or "<digit>. " marker."""
    return _LEADING_MARKER.sub("", line, count=1)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _labelled(value: Optional[float], label: str, unit: str) -> Optional[str]:
    if value is None:
        return None
    return f"{label}: {_format_number(value)} {unit}"


def render_recipe(recipe: Recipe) -> RecipeView:
    """Map a Recipe to its presentation structure."""
    times = [
        _labelled(getattr(recipe.preparation_time, field), label, "min")
        for field, label in TIME_LABELS
    ]
    nutrition = [
        _labelled(getattr(recipe.nutrition, field), label, unit)
        for field, label, unit in NUTRITION_LABELS
    ]

    return RecipeView(
        title=recipe.title,
        description=recipe.description,
        ingredients=[strip_list_marker(line) for line in recipe.ingredients],
        instructions=[strip_list_marker(line) for line in recipe.instructions],
        times=[line for line in times if line],
        nutrition=[line for line in nutrition if line],
    )


def render_markdown(view: RecipeView) -> str:
    """Render a RecipeView as Markdown (bulleted ingredients, numbered steps)."""
    sections = [f"# {view.title}", view.description]

    if view.times:
        sections.append(f"## {TIMES_HEADING}\n\n" + "\n".join(f"- {line}" for line in view.times))

    sections.append(f"## {INGREDIENTS_HEADING}\n\n" + "\n".join(f"- {line}" for line in view.ingredients))
    sections.append(
        f"## {INSTRUCTIONS_HEADING}\n\n"
        + "\n".join(f"{i}. {line}" for i, line in enumerate(view.instructions, start=1))
    )

    if view.nutrition:
        sections.append(f"## {NUTRITION_HEADING}\n\n" + "\n".join(f"- {line}" for line in view.nutrition))

    return "\n\n".join(sections) + "\n"

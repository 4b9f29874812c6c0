"""Prompt templates for recipe generation.

Two fixed instruction templates (with and without details) are filled by
literal placeholder substitution, then followed by the output-shape contract
that tells the model which JSON fields, types and units to produce.

Substitution replaces only the first occurrence of each placeholder and does
not escape user text. Names or details containing "{{name}}"/"{{details}}"
are not guarded against.
"""

from chef_gemini.models.models import RecipeRequest


NAME_PLACEHOLDER = "{{name}}"
DETAILS_PLACEHOLDER = "{{details}}"

DEFAULT_TEMPLATE = (
    'Busque uma receita de "{{name}}" e me devolva em um código JSON, '
    "sem quebra de linha, sem formatação, nesse formato (em português)"
)

WITH_DETAILS_TEMPLATE = (
    'Busque uma receita de "{{name}}", considerando "{{details}}" e me devolva em um código JSON, '
    "sem quebra de linha, sem formatação, nesse formato (em português)"
)

# Field names here must match chef_gemini.models.models.Recipe
OUTPUT_SHAPE_CONTRACT = """{
  title: string;
  description: string;
  preparation_time: { // em minutos
      total: number;
      preparation?: number; // tempo antes de assar
      cooking?: number; // tempo de forno
  };
  ingredients: string[]; // os itens podem ser em markdown
  instructions: string[]; // os itens podem ser em markdown
  nutrition: {
      calories?: number; // numero em 'kcal'
      carbs?: number; // numero em 'gramas'
      protein?: number; // numero em 'gramas'
      fat?: number; // numero em 'gramas'
  }
}"""


def build_prompt(request: RecipeRequest) -> str:
    """Build the full prompt for a validated request.

    Args:
        request: Validated recipe request.

    Returns:
        Instruction text, a blank line, then the output-shape contract.
    """
    if request.details is None:
        instruction = DEFAULT_TEMPLATE.replace(NAME_PLACEHOLDER, request.name, 1)
    else:
        instruction = WITH_DETAILS_TEMPLATE.replace(NAME_PLACEHOLDER, request.name, 1).replace(
            DETAILS_PLACEHOLDER, request.details, 1
        )

    return f"{instruction}\n\n{OUTPUT_SHAPE_CONTRACT}"

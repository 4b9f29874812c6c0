"""Data models and schemas for the recipe generation pipeline.

Defines Pydantic models for the user request, the decoded recipe and the
Gemini generateContent envelope.
All models use Pydantic v2 for strict validation.
"""

from typing import List, Optional, Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator

from chef_gemini.models.errors import ModelClientError


class RecipeRequest(BaseModel):
    """Input schema for a recipe request: a dish name plus optional constraints.

    Both fields are trimmed before length checks. A blank `details` is treated as
    absent, so the prompt falls back to the name-only template.
    Instances are immutable and live for a single pipeline run.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    name: Annotated[
        str,
        Field(min_length=1, max_length=50, description="Nome da receita"),
    ]
    details: Annotated[
        Optional[str],
        Field(max_length=200, description="Detalhes da receita"),
    ] = None

    @field_validator("details")
    @classmethod
    def blank_details_to_none(cls, details: Optional[str]) -> Optional[str]:
        """Collapse an empty (already stripped) details string to None."""
        return details or None


class PreparationTime(BaseModel):
    """Preparation times in minutes. Only the total is mandatory."""

    total: Annotated[StrictFloat, Field(description="Total time in minutes")]
    preparation: Annotated[Optional[StrictFloat], Field(description="Time before baking, in minutes")] = None
    cooking: Annotated[Optional[StrictFloat], Field(description="Oven time, in minutes")] = None


class Nutrition(BaseModel):
    """Nutritional information. Calories in kcal, macronutrients in grams."""

    calories: Annotated[Optional[StrictFloat], Field(description="Calories in kcal")] = None
    carbs: Annotated[Optional[StrictFloat], Field(description="Carbohydrates in grams")] = None
    protein: Annotated[Optional[StrictFloat], Field(description="Protein in grams")] = None
    fat: Annotated[Optional[StrictFloat], Field(description="Fat in grams")] = None


class Recipe(BaseModel):
    """Domain model for a generated recipe.

    Strict scalar types reject payloads where the model swapped strings, numbers
    and sequences. No semantic checks: negative numbers and empty lists are
    accepted as-is. `ingredients` and `instructions` keep the decoded order,
    which is also the display order.
    """

    model_config = ConfigDict(frozen=True)

    title: Annotated[StrictStr, Field(description="Recipe title")]
    description: Annotated[StrictStr, Field(description="Short description of the dish")]
    preparation_time: Annotated[PreparationTime, Field(description="Preparation times in minutes")]
    ingredients: Annotated[List[StrictStr], Field(description="Ingredients with quantities, in display order")]
    instructions: Annotated[List[StrictStr], Field(description="Preparation steps, in display order")]
    nutrition: Annotated[
        Nutrition,
        Field(default_factory=Nutrition, description="Nutritional information (all values optional)"),
    ]


# ============================================================================
# Gemini generateContent envelope
# ============================================================================


class ContentPart(BaseModel):
    """A single part of a Gemini content block. Non-text parts carry no `text`."""

    text: Optional[StrictStr] = None


class Content(BaseModel):
    """A Gemini content block: an ordered list of parts."""

    parts: List[ContentPart] = []
    role: Optional[str] = None


class Candidate(BaseModel):
    """One generated candidate. Blocked candidates carry no content."""

    content: Optional[Content] = None


class GenerateContentRequest(BaseModel):
    """Request body: `{"contents": [{"parts": [{"text": ...}]}]}`."""

    contents: Annotated[List[Content], Field(min_length=1)]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        """Wrap a prompt string into a single-part, single-content request."""
        return cls(contents=[Content(parts=[ContentPart(text=prompt)])])


class GenerateContentResponse(BaseModel):
    """Response envelope: `{"candidates": [{"content": {"parts": [{"text": ...}]}}]}`.

    Only the first part of the first candidate is read. Later candidates may
    lack content and later parts may lack text.
    """

    candidates: List[Candidate] = []

    @property
    def text(self) -> str:
        """Text of the first part of the first candidate.

        Raises:
            ModelClientError: If candidates[0].content.parts[0].text is absent.
        """
        if self.candidates:
            content = self.candidates[0].content
            if content is not None and content.parts and content.parts[0].text is not None:
                return content.parts[0].text
        raise ModelClientError("Gemini response is missing candidates[0].content.parts[0].text")

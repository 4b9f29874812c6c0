"""Request schema: validation of raw form input and per-field display configuration.

validate_request() turns a raw mapping (as collected by a form) into an
immutable RecipeRequest, or raises RequestValidationError carrying one
human-readable message per offending field.
"""

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ValidationError

from chef_gemini.models.errors import RequestValidationError
from chef_gemini.models.models import RecipeRequest


# Messages per (field, pydantic error type). Missing/empty names share one message.
FIELD_MESSAGES: dict[str, dict[str, str]] = {
    "name": {
        "missing": "O nome da receita é obrigatório.",
        "string_too_short": "O nome da receita é obrigatório.",
        "string_too_long": "O nome da receita é muito longo (máximo 50 caracteres).",
    },
    "details": {
        "string_too_long": "Os detalhes da receita são muito longos (máximo 200 caracteres).",
    },
}


class FieldConfig(BaseModel):
    """Display configuration for one form field."""

    label: str
    description: str
    field_type: Literal["text", "textarea"] = "text"
    required: bool = False


def _label(field: str) -> str:
    info = RecipeRequest.model_fields[field]
    return info.description or field


FORM_FIELDS: dict[str, FieldConfig] = {
    "name": FieldConfig(
        label=_label("name"),
        description="Ex.: Brownie; Pizza; Bolo de cenoura com brigadeiro;",
        required=True,
    ),
    "details": FieldConfig(
        label=_label("details"),
        description="Ex.: Receita sem gluten; Em menos de 30 minutos; Para 10 pessoas;",
        field_type="textarea",
    ),
}


def _message_for(field: str, error_type: str, value: Any) -> str:
    messages = FIELD_MESSAGES.get(field, {})
    if error_type in messages:
        return messages[error_type]
    if error_type == "string_type":
        # null counts as missing; any other non-string is a type error
        if value is None and "missing" in messages:
            return messages["missing"]
        return f"{_label(field)} deve ser um texto."
    return f"{_label(field)} é inválido."


def validate_request(raw: Mapping[str, Any]) -> RecipeRequest:
    """Validate raw form input into a RecipeRequest.

    Unknown keys are ignored. Only the first error per field is reported.

    Args:
        raw: Field name to raw value mapping, as emitted by the form.

    Returns:
        Trimmed, immutable RecipeRequest.

    Raises:
        RequestValidationError: If any field violates the schema.
    """
    try:
        return RecipeRequest.model_validate(dict(raw))
    except ValidationError as e:
        field_errors: dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            if field not in field_errors:
                field_errors[field] = _message_for(field, error["type"], error.get("input"))
        raise RequestValidationError(field_errors) from e

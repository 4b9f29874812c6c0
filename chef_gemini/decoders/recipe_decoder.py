"""Decoding of raw model text into the Recipe model.

Two failure kinds:
- MALFORMED: the text is not JSON at all
- SCHEMA_MISMATCH: valid JSON that lacks a required field or uses the wrong
  basic type (string vs number vs sequence)
"""

import json

from pydantic import ValidationError

from chef_gemini.models.errors import DecodeError, FailureKind
from chef_gemini.models.models import Recipe
from chef_gemini.utils.logger import logger


def decode_recipe(raw: str) -> Recipe:
    """Parse and structurally validate model output.

    No lenient extraction: text wrapped in prose or markdown fences is malformed.

    Args:
        raw: Raw text returned by the model client.

    Returns:
        Validated Recipe. Optional fields left unset are None.

    Raises:
        DecodeError: With kind MALFORMED or SCHEMA_MISMATCH.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.debug(f"Model output is not JSON: {str(raw)[:200]!r}")
        raise DecodeError(FailureKind.MALFORMED, f"Model output is not valid JSON: {e}") from e

    try:
        return Recipe.model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) or "<root>" for err in e.errors()})
        raise DecodeError(
            FailureKind.SCHEMA_MISMATCH,
            f"Model output does not match the recipe schema: {', '.join(fields)}",
        ) from e

"""Pipeline state: Idle | Loading | Loaded(recipe) | Failed(kind).

Values are immutable; the controller swaps whole states instead of mutating
fields, so observers always see a consistent snapshot.
"""

from typing import Literal, Union, Annotated

from pydantic import BaseModel, ConfigDict, Field

from chef_gemini.models.errors import FailureKind
from chef_gemini.models.models import Recipe


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Loaded(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loaded"] = "loaded"
    recipe: Recipe


class Failed(BaseModel):
    """Terminal failure of one submission. Carries the kind, not the error text."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    kind: FailureKind


PipelineState = Annotated[Union[Idle, Loading, Loaded, Failed], Field(discriminator="status")]

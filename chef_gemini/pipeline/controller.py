"""Pipeline controller for recipe generation.

Runs validate → template → invoke → decode for each submission and owns the
PipelineState. State changes happen only inside submit(); observers register
through subscribe() and receive every new state.

State machine:
    Idle/Failed/Loaded --submit--> Loading --success--> Loaded(recipe)
                                           --failure--> Failed(kind)

Validation errors are raised before any transition, so an invalid form never
touches the state.
"""

import uuid
from typing import Any, Callable, List, Mapping, Optional

from chef_gemini.clients.gemini import GeminiClient
from chef_gemini.decoders.recipe_decoder import decode_recipe
from chef_gemini.models.errors import DecodeError, FailureKind, ModelClientError, SubmissionInProgressError
from chef_gemini.pipeline.state import Failed, Idle, Loaded, Loading, PipelineState
from chef_gemini.prompts.prompts import build_prompt
from chef_gemini.schemas.request_schema import validate_request
from chef_gemini.utils.logger import logger


StateListener = Callable[[PipelineState], None]


class RecipePipeline:
    """Orchestrates one recipe generation per submission.

    At most one run is in flight: a submission while Loading is rejected with
    SubmissionInProgressError. This is a plain state check; no lock is held.
    """

    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        """Initialize pipeline in the Idle state.

        Args:
            client: Model client. Defaults to a GeminiClient using process-wide config.
        """
        self._client = client or GeminiClient()
        self._state: PipelineState = Idle()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> PipelineState:
        """Current pipeline state (read-only)."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with each new state.

        Returns:
            Callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, new_state: PipelineState, submission_id: str) -> None:
        logger.debug(
            f"State {self._state.status} -> {new_state.status}",
            extra={"submission_id": submission_id},
        )
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    async def submit(self, raw_input: Mapping[str, Any]) -> None:
        """Validate raw form input and run the generation pipeline.

        The outcome is observable through `state` and subscribed listeners.

        Args:
            raw_input: Field name to raw value mapping from the form.

        Raises:
            RequestValidationError: If the input is invalid (state unchanged).
            SubmissionInProgressError: If a previous submission is still loading.
            Exception: Any unexpected error, after moving to Failed(UNEXPECTED).
        """
        request = validate_request(raw_input)

        if isinstance(self._state, Loading):
            raise SubmissionInProgressError("A recipe is already being generated")

        submission_id = uuid.uuid4().hex[:8]
        log_extra = {"submission_id": submission_id}
        logger.info(
            f"Generating recipe for '{request.name}' (details={'yes' if request.details else 'no'})",
            extra=log_extra,
        )
        self._transition(Loading(), submission_id)

        try:
            prompt = build_prompt(request)
            raw_text = await self._client.invoke(prompt)
            recipe = decode_recipe(raw_text)
        except ModelClientError as e:
            logger.error(f"Model call failed: {e}", extra=log_extra)
            self._transition(Failed(kind=e.kind), submission_id)
            return
        except DecodeError as e:
            logger.error(f"Decoding failed ({e.kind.value}): {e}", extra=log_extra)
            self._transition(Failed(kind=e.kind), submission_id)
            return
        except Exception:
            logger.exception("Unexpected pipeline error", extra=log_extra)
            self._transition(Failed(kind=FailureKind.UNEXPECTED), submission_id)
            raise

        logger.info(f"Recipe ready: '{recipe.title}'", extra=log_extra)
        self._transition(Loaded(recipe=recipe), submission_id)

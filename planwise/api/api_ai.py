import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from planwise.utilities.config import DEFAULT_OPENAI_MODEL

logger = logging.getLogger(__name__)


class CompletionError(RuntimeError):
    """The provider call failed; str(err) carries the provider's message."""


class CompletionClient:
    """Single-turn chat completion against the OpenAI API.

    One system message, one user message, first choice back. No retries and
    no timeout beyond what the OpenAI client does by default.
    """

    def __init__(self, api_key: str = "", model: str = DEFAULT_OPENAI_MODEL, client: Optional[OpenAI] = None):
        if client is None:
            client = OpenAI(api_key=api_key)
        self._client = client
        self.model = model

    # === OpenAI Call ===
    def complete(self, system_instruction: str, user_prompt: str) -> str:
        logger.debug("Requesting completion from %s (%d prompt chars)", self.model, len(user_prompt))
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except OpenAIError as e:
            logger.exception("Completion request failed")
            raise CompletionError(str(e)) from e

        if not response.choices:
            logger.error("Completion response from %s had no choices", self.model)
            raise CompletionError("completion returned no choices")

        return response.choices[0].message.content or ""

"""Remote completion client for the hosted DeepSeek models.

One non-streaming POST per submission to an OpenAI-compatible
chat-completions endpoint. The response body is parsed into a tagged
result so that malformed payloads degrade to a fixed placeholder reply
instead of failing the submission.
"""

import logging
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ValidationError

from deepseek_chat.client.config import (
    ClientSettings,
    Credentials,
    get_client_settings,
    get_credentials,
)
from deepseek_chat.errors import RemoteRequestError
from deepseek_chat.models.schemas import ChatMessage, ModelSelector

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I could not generate a reply."

_LANGUAGE_INSTRUCTION = (
    "Always respond in the same language as the user's input. "
    "If the user writes in German, respond in German. "
    "If they write in English, respond in English. "
    "If they write in Urdu, Hindi, or any other language, respond in that same language. "
    "Match the user's language exactly."
)


class ModelProfile(BaseModel):
    """What a model selector resolves to on the remote side."""

    selector: ModelSelector
    remote_model: str
    display_name: str
    system_prompt: str


MODEL_PROFILES: dict[ModelSelector, ModelProfile] = {
    ModelSelector.DEEPSEEK_V3: ModelProfile(
        selector=ModelSelector.DEEPSEEK_V3,
        remote_model="deepseek/deepseek-chat",
        display_name="DeepSeek V3",
        system_prompt=f"You are DeepSeek V3, a helpful AI assistant. {_LANGUAGE_INSTRUCTION}",
    ),
    ModelSelector.DEEPSEEK_R1: ModelProfile(
        selector=ModelSelector.DEEPSEEK_R1,
        remote_model="deepseek/deepseek-r1",
        display_name="DeepSeek R1",
        system_prompt=(
            f"You are DeepSeek R1, a reasoning-focused AI assistant. {_LANGUAGE_INSTRUCTION}"
        ),
    ),
}


# Success schema of the chat-completions response
class _ReplyMessage(BaseModel):
    content: str


class _Choice(BaseModel):
    message: _ReplyMessage


class _CompletionPayload(BaseModel):
    choices: list[_Choice]
    usage: dict[str, Any] | None = None


class CompletionReply(BaseModel):
    """The remote model's reply text."""

    kind: Literal["reply"] = "reply"
    text: str


class MalformedCompletion(BaseModel):
    """A 2xx response whose body does not carry a reply."""

    kind: Literal["malformed"] = "malformed"
    reason: str


CompletionResult = CompletionReply | MalformedCompletion


def parse_completion(payload: Any) -> CompletionResult:
    """Parse a decoded response body into a tagged result.

    Args:
        payload: JSON-decoded body of a 2xx response.

    Returns:
        CompletionReply with the text of the first choice, or
        MalformedCompletion if the body is missing it or it is empty.
    """
    try:
        completion = _CompletionPayload.model_validate(payload)
    except ValidationError as e:
        return MalformedCompletion(reason=f"unexpected response shape: {e.error_count()} errors")

    if not completion.choices:
        return MalformedCompletion(reason="response has no choices")

    text = completion.choices[0].message.content
    if not text:
        return MalformedCompletion(reason="reply content is empty")

    if completion.usage:
        logger.info(f"Remote API usage: {completion.usage}")
    return CompletionReply(text=text)


class RemoteCompletionClient:
    """Client for the hosted chat-completions endpoint.

    Resolves the model selector to a remote model, system prompt and
    generation parameters, and issues a single request per call. Errors
    are raised once and never retried.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        credentials: Credentials | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Optional client settings. Loads from environment if not provided.
            credentials: Optional credentials. Resolved from environment if not provided.
            http_client: Optional shared httpx client (used by tests).
        """
        self._settings = settings or get_client_settings()
        self._credentials = credentials if credentials is not None else get_credentials()
        self._http_client = http_client

    def build_request_body(
        self, messages: list[ChatMessage], model: ModelSelector
    ) -> dict[str, Any]:
        """Build the JSON body for a model, system prompt first."""
        profile = MODEL_PROFILES[model]
        return {
            "model": profile.remote_model,
            "messages": [
                {"role": "system", "content": profile.system_prompt},
                *(message.model_dump() for message in messages),
            ],
            "temperature": self._settings.temperature,
            "max_tokens": self._settings.max_tokens,
            "stream": False,
        }

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
            "HTTP-Referer": self._settings.referer,
            "X-Title": self._settings.app_title,
        }

    async def _post(self, body: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(
                self._settings.api_url, json=body, headers=headers
            )
        async with httpx.AsyncClient(timeout=self._settings.timeout) as client:
            return await client.post(self._settings.api_url, json=body, headers=headers)

    async def complete(self, messages: list[ChatMessage], model: ModelSelector) -> str:
        """Send the conversation to the remote model and return its reply.

        Args:
            messages: Conversation history ending with the new user message.
            model: Which supported model to use.

        Returns:
            The reply text, or a fixed placeholder if the response was malformed.

        Raises:
            MissingCredentialError: If the model has no API key (no request is made).
            RemoteRequestError: On a non-2xx response or a transport failure.
        """
        api_key = self._credentials.for_model(model)
        body = self.build_request_body(messages, model)

        logger.info(
            f"Making API call for {model.value}: "
            f"model={body['model']}, messages={len(body['messages'])}"
        )

        try:
            response = await self._post(body, self._headers(api_key))
        except httpx.RequestError as e:
            logger.error(f"Remote API request failed: {e!r}")
            raise RemoteRequestError(None, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"Remote API error: {response.status_code} {response.text}")
            raise RemoteRequestError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        result = parse_completion(payload)
        if isinstance(result, MalformedCompletion):
            logger.warning(f"Malformed remote response: {result.reason}")
            return FALLBACK_REPLY
        return result.text


# Module-level singleton instance
_completion_client: RemoteCompletionClient | None = None


def get_completion_client() -> RemoteCompletionClient:
    """Get or create the global completion client.

    Returns:
        The RemoteCompletionClient instance.
    """
    global _completion_client
    if _completion_client is None:
        _completion_client = RemoteCompletionClient()
    return _completion_client

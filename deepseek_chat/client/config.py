"""Client configuration with environment variable loading.

Pydantic-based settings for the remote completion client, plus explicit
credential resolution from an environment snapshot.
"""

import os
from collections.abc import Mapping

from dotenv import dotenv_values, load_dotenv
from pydantic import BaseModel, Field

from deepseek_chat.errors import MissingCredentialError
from deepseek_chat.models.schemas import ModelSelector

# Load environment variables from .env file
load_dotenv()

CREDENTIAL_ENV_VARS: dict[ModelSelector, str] = {
    ModelSelector.DEEPSEEK_V3: "DEEPSEEK_V3_API_KEY",
    ModelSelector.DEEPSEEK_R1: "DEEPSEEK_R1_API_KEY",
}


class ClientSettings(BaseModel):
    """Settings for the remote completion client.

    Attributes:
        api_url: Chat-completions endpoint of the hosted provider.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
        timeout: Request timeout in seconds.
        app_title: Sent as X-Title to identify the client.
        referer: Sent as HTTP-Referer to identify the client.
    """

    api_url: str = Field(
        default_factory=lambda: os.getenv(
            "CHAT_API_URL", "https://openrouter.ai/api/v1/chat/completions"
        ),
        description="Chat-completions endpoint",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=4096,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_API_TIMEOUT", "120")),
        gt=0.0,
        description="Request timeout in seconds",
    )
    app_title: str = Field(default="DeepSeek Chat", description="X-Title header value")
    referer: str = Field(
        default_factory=lambda: os.getenv("CHAT_REFERER", "http://localhost:8000"),
        description="HTTP-Referer header value",
    )


class Credentials(BaseModel):
    """API keys for the two supported models. Empty means not configured."""

    deepseek_v3: str = ""
    deepseek_r1: str = ""

    def for_model(self, model: ModelSelector) -> str:
        """Return the API key for a model.

        Raises:
            MissingCredentialError: If no key is configured for the model.
        """
        key = self.deepseek_v3 if model is ModelSelector.DEEPSEEK_V3 else self.deepseek_r1
        if not key.strip():
            raise MissingCredentialError(model.value, CREDENTIAL_ENV_VARS[model])
        return key.strip()


def _read_keys(source: Mapping[str, str | None]) -> Credentials:
    return Credentials(
        deepseek_v3=source.get(CREDENTIAL_ENV_VARS[ModelSelector.DEEPSEEK_V3]) or "",
        deepseek_r1=source.get(CREDENTIAL_ENV_VARS[ModelSelector.DEEPSEEK_R1]) or "",
    )


def resolve_credentials(
    environ: Mapping[str, str | None],
    runtime_env: Mapping[str, str | None] | None = None,
) -> Credentials:
    """Resolve model credentials from an environment snapshot.

    The process environment wins only when it holds both keys. Otherwise
    the runtime-injected source is used; missing keys stay empty and fail
    when a submission needs them.

    Args:
        environ: Snapshot of the process environment.
        runtime_env: Values injected at deploy time, if any.

    Returns:
        Resolved Credentials.
    """
    primary = _read_keys(environ)
    if primary.deepseek_v3 and primary.deepseek_r1:
        return primary
    if runtime_env is not None:
        return _read_keys(runtime_env)
    return Credentials()


def load_runtime_env(environ: Mapping[str, str | None]) -> dict[str, str | None] | None:
    """Read the runtime-injected env file named by RUNTIME_ENV_FILE, if set."""
    path = environ.get("RUNTIME_ENV_FILE")
    if not path:
        return None
    return dotenv_values(path)


def get_credentials() -> Credentials:
    """Resolve credentials from the current process environment.

    Returns:
        Credentials resolved from os.environ and the runtime env file.
    """
    environ = dict(os.environ)
    return resolve_credentials(environ, load_runtime_env(environ))


def get_client_settings() -> ClientSettings:
    """Create client settings from environment.

    Returns:
        Configured ClientSettings instance.
    """
    return ClientSettings()

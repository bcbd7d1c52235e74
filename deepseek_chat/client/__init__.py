"""Remote completion client for the hosted language-model provider.

Responsibilities:
    - Model selector resolution (remote model, system prompt, parameters)
    - Credential resolution per model from environment snapshots
    - The single outbound chat-completions request
    - Classification of remote failures and malformed responses

Maintains clean separation from the UI and HTTP layers.
"""

from deepseek_chat.client.completion import (
    FALLBACK_REPLY,
    MODEL_PROFILES,
    CompletionReply,
    MalformedCompletion,
    RemoteCompletionClient,
    get_completion_client,
    parse_completion,
)
from deepseek_chat.client.config import (
    ClientSettings,
    Credentials,
    get_client_settings,
    resolve_credentials,
)

__all__ = [
    "FALLBACK_REPLY",
    "MODEL_PROFILES",
    "ClientSettings",
    "CompletionReply",
    "Credentials",
    "MalformedCompletion",
    "RemoteCompletionClient",
    "get_client_settings",
    "get_completion_client",
    "parse_completion",
    "resolve_credentials",
]

"""Exception hierarchy for the chat pipeline.

Per-file errors (unsupported type, extraction failure) are absorbed during
ingestion. Submission-level errors (missing credential, remote failure) are
surfaced once as an assistant turn in the transcript.
"""


class ChatWidgetError(Exception):
    """Base class for all chat widget errors."""


class UnsupportedFileTypeError(ChatWidgetError):
    """Raised when a selected file is not an image, PDF, DOCX or plain text."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Unsupported file: {filename}")
        self.filename = filename


class ExtractionError(ChatWidgetError):
    """Raised when text cannot be extracted from a document."""


class CompletionError(ChatWidgetError):
    """Base class for failures of a chat completion submission."""


class MissingCredentialError(CompletionError):
    """Raised before any network call when the active model has no API key."""

    def __init__(self, model: str, env_var: str) -> None:
        super().__init__(f"API key not found for {model} (set {env_var})")
        self.model = model
        self.env_var = env_var


class RemoteRequestError(CompletionError):
    """Raised for non-2xx responses and transport failures. Never retried.

    Attributes:
        status_code: HTTP status of the response, None for transport errors.
        body: Response body text or the underlying transport error.
    """

    def __init__(self, status_code: int | None, body: str) -> None:
        if status_code is None:
            message = f"Connection to the remote API failed: {body}"
        else:
            message = f"Remote API error: {status_code} - {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body

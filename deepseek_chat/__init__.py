"""DeepSeek Chat - browser chat widget for hosted DeepSeek models.

Combines NiceGUI for the chat interface, httpx for the remote completion call,
pypdf and python-docx for attachment text extraction, FastAPI for the HTTP API,
and Pydantic for data validation.

Components:
    - api: HTTP endpoints for chat completion and attachment upload
    - chat: conversation store, message assembly and session orchestration
    - client: remote completion client and credential configuration
    - parsing: attachment classification and text extraction
    - ui: Web interface for chat interactions
    - models: Attachment, turn and request/response schemas
"""

__version__ = "0.1.0"

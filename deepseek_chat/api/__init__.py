"""FastAPI endpoints for the DeepSeek chat widget.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Chat completion against the selected model
    - POST /upload: Attachment classification and text extraction
"""

from deepseek_chat.api.app import app, create_app

__all__ = ["app", "create_app"]

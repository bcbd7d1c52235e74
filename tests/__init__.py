"""Test package for DeepSeek Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: API endpoints over ASGI

The hosted model is always replaced by httpx.MockTransport; documents are
generated in memory. Leverages pytest with pytest-check for soft assertions.
"""

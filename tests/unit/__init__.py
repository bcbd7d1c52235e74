"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Classification, PDF/DOCX extraction and ingestion
    - chat/: Message assembly, conversation store, session flow
    - client/: Settings, credentials and the completion client
    - ui/: Markdown rendering for chat bubbles
"""

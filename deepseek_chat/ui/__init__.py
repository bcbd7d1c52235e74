"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - One chat page per supported model, with tab navigation
    - Transcript display: markdown for replies, literal text for user turns
    - Multi-file upload with attachment chips and image previews
    - Loading indicator that blocks further submissions

Contains minimal business logic. Delegates to the chat session.
"""

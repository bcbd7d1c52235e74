"""Helpers shared by the test modules."""

import json

import httpx

TEST_API_URL = "https://llm.test/api/v1/chat/completions"


def reply_payload(content: str | None) -> dict:
    """Build a chat-completions success body."""
    return {
        "id": "gen-test",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
        "usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12},
    }


def request_json(request: httpx.Request) -> dict:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)

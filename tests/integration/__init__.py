"""Integration tests for the HTTP API.

Requests go through the real FastAPI app with an in-process transport.
The completion client is swapped via dependency overrides.
"""

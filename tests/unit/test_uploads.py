"""Unit tests for turning browser uploads into raw files."""

import asyncio
from dataclasses import dataclass

import pytest_check as check

from deepseek_chat.ui.uploads import read_uploads


@dataclass
class _Upload:
    name: str
    content_type: str
    data: bytes
    delay: float = 0.0

    async def read(self) -> bytes:
        await asyncio.sleep(self.delay)
        return self.data


async def test_batch_keeps_selection_order() -> None:
    """A slow first file still comes first."""
    uploads = [
        _Upload("first.pdf", "application/pdf", b"%PDF-1.4", delay=0.05),
        _Upload("second.txt", "text/plain", b"hello"),
    ]

    files = await read_uploads(uploads)

    check.equal([f.filename for f in files], ["first.pdf", "second.txt"])
    check.equal(files[0].mime_type, "application/pdf")
    check.equal(files[1].content, b"hello")


async def test_missing_content_type_becomes_empty() -> None:
    """Uploads without a MIME type are classified by name later."""
    files = await read_uploads([_Upload("notes.txt", None, b"x")])  # type: ignore[arg-type]

    assert files[0].mime_type == ""

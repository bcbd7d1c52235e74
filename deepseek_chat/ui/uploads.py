"""Conversion of browser uploads into raw files for the ingestor."""

from collections.abc import Sequence
from typing import Protocol

from deepseek_chat.models.schemas import RawFile


class UploadedFile(Protocol):
    """The parts of a NiceGUI file upload that are read here."""

    name: str
    content_type: str

    async def read(self) -> bytes: ...


async def read_uploads(files: Sequence[UploadedFile]) -> list[RawFile]:
    """Read a batch of uploads one after another, in selection order."""
    return [
        RawFile(filename=file.name, content=await file.read(), mime_type=file.content_type or "")
        for file in files
    ]

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedDocument:
    """An uploaded file as handed over by the HTTP boundary."""

    content: bytes
    mime_type: str
    file_name: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)

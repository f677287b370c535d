from dataclasses import dataclass
from typing import Optional, Protocol, BinaryIO


@dataclass(frozen=True)
class StoredFile:
    url: str
    path: str
    filename: str
    size: Optional[int] = None
    mime_type: Optional[str] = None


class MediaStorage(Protocol):
    storage_type: str

    def upload(self, stream: BinaryIO, *, original_name: str, mime_type: Optional[str], folder: str = "media") -> StoredFile:
        ...

from typing import Optional

from pydantic import Field

from .common import RequestModel


class MediaMetadata(RequestModel):
    """Form fields accompanying an upload."""

    alt_text: Optional[str] = Field(None, max_length=500)
    caption: Optional[str] = None
    title: Optional[str] = Field(None, max_length=500)

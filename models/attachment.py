"""
Attachment model for card attachments
"""
from typing import Optional
from pydantic import Field

from models.base import GloBaseModel


class Attachment(GloBaseModel):
    """File attached to a card."""

    filename: Optional[str] = Field(None, description="Original file name")
    mime_type: Optional[str] = Field(None, description="MIME type of the file")

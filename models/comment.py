"""
Comment model for card comments
"""
from typing import Optional
from datetime import datetime
from pydantic import Field

from models.base import GloBaseModel, PartialUser


class Comment(GloBaseModel):
    """Comment on a card."""

    card_id: Optional[str] = Field(None, description="Card the comment belongs to")
    board_id: Optional[str] = Field(None, description="Board the card belongs to")
    text: Optional[str] = Field(None, description="Markdown comment text")
    updated_by: Optional[PartialUser] = None
    updated_date: Optional[datetime] = None

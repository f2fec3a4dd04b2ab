"""
Card model for Glo cards
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from models.base import GloBaseModel, PartialUser


class Description(BaseModel):
    """Markdown description attached to a card."""

    model_config = {"extra": "allow"}

    text: Optional[str] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
    created_by: Optional[PartialUser] = None
    updated_by: Optional[PartialUser] = None


class PartialLabel(BaseModel):
    """Label reference on a card."""

    model_config = {"extra": "allow"}

    id: Optional[str] = None
    name: Optional[str] = None


class Card(GloBaseModel):
    """Card in a board column."""

    name: Optional[str] = Field(None, description="Card title")
    position: Optional[int] = Field(None, description="Ordering position in the column")
    description: Optional[Description] = None
    board_id: Optional[str] = Field(None, description="Owning board ID")
    column_id: Optional[str] = Field(None, description="Column the card sits in")
    updated_date: Optional[datetime] = None
    archived_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    assignees: Optional[List[PartialUser]] = None
    labels: Optional[List[PartialLabel]] = None
    completed_task_count: Optional[int] = None
    total_task_count: Optional[int] = None
    attachment_count: Optional[int] = None
    comment_count: Optional[int] = None

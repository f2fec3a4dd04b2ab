"""
Board models for Glo boards

A board owns its columns and labels; cards live in columns.
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from models.base import GloBaseModel, PartialUser


class Color(BaseModel):
    """RGBA label color."""

    r: int = Field(..., description="Red channel 0-255")
    g: int = Field(..., description="Green channel 0-255")
    b: int = Field(..., description="Blue channel 0-255")
    a: Optional[float] = Field(None, description="Alpha channel 0-1")


class Label(GloBaseModel):
    """Label defined on a board."""

    name: Optional[str] = Field(None, description="Label name")
    color: Optional[Color] = Field(None, description="Label color")


class NewLabel(BaseModel):
    """Payload for creating a label."""

    model_config = {"extra": "allow"}

    name: str = Field(..., description="Label name")
    color: Optional[Color] = Field(None, description="Label color")


class Column(GloBaseModel):
    """Column on a board."""

    name: Optional[str] = Field(None, description="Column name")
    board_id: Optional[str] = Field(None, description="Owning board ID")
    position: Optional[int] = Field(None, description="Ordering position on the board")
    archived_date: Optional[datetime] = Field(None, description="Set when the column is archived")


class NewColumn(BaseModel):
    """Payload for creating or editing a column."""

    model_config = {"extra": "allow"}

    name: str = Field(..., description="Column name")
    position: Optional[int] = Field(None, description="Ordering position on the board")


class BoardMember(BaseModel):
    """Member of a board and their role."""

    model_config = {"extra": "allow"}

    id: Optional[str] = None
    role: Optional[str] = None
    username: Optional[str] = None


class Board(GloBaseModel):
    """Glo board."""

    name: Optional[str] = Field(None, description="Board name")
    archived_date: Optional[datetime] = Field(None, description="Set when the board is archived")
    columns: Optional[List[Column]] = None
    archived_columns: Optional[List[Column]] = None
    labels: Optional[List[Label]] = None
    members: Optional[List[BoardMember]] = None
    invited_members: Optional[List[PartialUser]] = None

    @property
    def is_archived(self) -> bool:
        return self.archived_date is not None

"""
User model for Glo accounts
"""
from typing import Optional
from pydantic import Field

from models.base import GloBaseModel


class User(GloBaseModel):
    """Glo user profile."""

    name: Optional[str] = Field(None, description="Display name")
    username: Optional[str] = Field(None, description="Account username")
    email: Optional[str] = Field(None, description="Primary email address")

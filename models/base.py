"""
Base model for all Glo entities

Provides common functionality for data validation, serialization, and API interaction.
"""
from pydantic import BaseModel
from typing import Optional, Dict, Any
from datetime import datetime


class PartialUser(BaseModel):
    """Minimal user reference embedded in other entities."""

    model_config = {"extra": "allow"}

    id: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None


class GloBaseModel(BaseModel):
    """
    Base model for all Glo entities with common functionality.

    Every field is optional because callers choose which `fields` the API
    returns. Unknown keys are kept so a parsed payload loses nothing.
    """

    model_config = {
        "validate_assignment": True,
        "use_enum_values": True,
        "extra": "allow",
    }

    id: Optional[str] = None
    created_date: Optional[datetime] = None
    created_by: Optional[PartialUser] = None

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump(exclude_none=True).items())
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """Convert model to a JSON-ready dictionary, optionally excluding None values."""
        return self.model_dump(mode='json', exclude_none=exclude_none)

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]):
        """Create model instance from API response data."""
        if data is None:
            raise ValueError(f"Cannot create {cls.__name__} from empty data")
        return cls.model_validate(data)

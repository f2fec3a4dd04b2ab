"""
Label service for board labels
"""
from typing import Any, Dict, Union

from api.client import APIClient
from models.board import Label, NewLabel
from services.base_service import BaseService, resource_path, to_payload


class LabelService(BaseService[Label]):
    """Create, edit and delete the labels of a board."""

    def __init__(self, client: APIClient):
        super().__init__(Label, client)

    async def create(self, board_id: str, label: Union[NewLabel, Dict[str, Any]]) -> Label:
        """POST /boards/{board_id}/labels"""
        data = await self.client.post(resource_path('boards', board_id, 'labels'), to_payload(label))
        return self._to_model(data)

    async def edit(self, board_id: str, label_id: str, label: Union[Label, NewLabel, Dict[str, Any]]) -> Label:
        """POST /boards/{board_id}/labels/{label_id}"""
        data = await self.client.post(resource_path('boards', board_id, 'labels', label_id), to_payload(label))
        return self._to_model(data)

    async def delete(self, board_id: str, label_id: str) -> Any:
        """DELETE /boards/{board_id}/labels/{label_id}, returning the raw response."""
        return await self.client.delete(resource_path('boards', board_id, 'labels', label_id))

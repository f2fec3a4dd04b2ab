"""
Column service for board columns

Columns are created, edited and deleted through the board; the cards of a
column are listed with the same paging options as cards.get_all.
"""
from typing import Any, Dict, List, Union

from api.client import APIClient
from models.batch import BatchResult
from models.board import Column, NewColumn
from models.card import Card
from models.options import DEFAULT_GET_CARDS_OPTIONS, OptionsInput, merge_options
from services.base_service import BaseService, resource_path, to_payload

ColumnInput = Union[NewColumn, Column, Dict[str, Any]]


class ColumnService(BaseService[Column]):
    """Accessors under /boards/{board_id}/columns."""

    def __init__(self, client: APIClient):
        super().__init__(Column, client)

    async def edit(self, board_id: str, column_id: str, column: ColumnInput) -> Column:
        """POST /boards/{board_id}/columns/{column_id}"""
        data = await self.client.post(resource_path('boards', board_id, 'columns', column_id), to_payload(column))
        return self._to_model(data)

    async def delete(self, board_id: str, column_id: str) -> Any:
        """DELETE /boards/{board_id}/columns/{column_id}, returning the raw response."""
        return await self.client.delete(resource_path('boards', board_id, 'columns', column_id))

    async def get_cards(self, board_id: str, column_id: str, options: OptionsInput = None) -> List[Card]:
        """
        List the cards of a column.

        Defaults: page=1, per_page=50, archived=false, sort=asc,
        fields=name,board_id,column_id.

        Args:
            board_id: Board ID
            column_id: Column ID
            options: GetCardsOptions or dict; omitted fields keep their default

        Returns:
            Cards in API order
        """
        merged = merge_options(DEFAULT_GET_CARDS_OPTIONS, options)
        data = await self.client.get(
            resource_path('boards', board_id, 'columns', column_id, 'cards'),
            params=merged.to_params()
        )
        return self._to_models(data, Card)

    async def create(self, board_id: str, column: ColumnInput) -> Column:
        """POST /boards/{board_id}/columns"""
        data = await self.client.post(resource_path('boards', board_id, 'columns'), to_payload(column))
        return self._to_model(data)

    async def batch_create(
        self,
        board_id: str,
        columns: List[ColumnInput],
        send_notifications: bool = False
    ) -> BatchResult[Column]:
        """POST /boards/{board_id}/columns/batch"""
        return await self._batch_create(
            resource_path('boards', board_id, 'columns', 'batch'),
            'columns',
            columns,
            send_notifications
        )

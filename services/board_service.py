"""
Board service for Glo boards

Top of the resource namespace: labels, columns and cards of a board are
reached through the `labels`, `columns` and `cards` attributes.
"""
import logging
from typing import Any, List

from api.client import APIClient
from models.board import Board
from models.options import (
    DEFAULT_GET_ALL_BOARD_OPTIONS,
    DEFAULT_GET_BOARD_OPTIONS,
    OptionsInput,
    merge_options,
)
from services.base_service import BaseService, resource_path
from services.card_service import CardService
from services.column_service import ColumnService
from services.label_service import LabelService

logger = logging.getLogger(f'{__name__}.BoardService')


class BoardService(BaseService[Board]):
    """
    Service for board operations.

    Features:
    - Board listing with archive filter, paging, sort and field selection
    - Single board retrieval, creation and deletion
    - Nested label, column and card accessors sharing one API client
    """

    def __init__(self, client: APIClient):
        """Initialize board service and its nested resources."""
        super().__init__(Board, client)
        self.labels = LabelService(client)
        self.columns = ColumnService(client)
        self.cards = CardService(client)
        logger.debug("BoardService initialized")

    async def get_all(self, options: OptionsInput = None) -> List[Board]:
        """
        List boards visible to the token.

        Defaults: archived=false, page=1, per_page=50, sort=asc, fields=name.

        Args:
            options: GetAllBoardOptions or dict; omitted fields keep their default

        Returns:
            Boards in API order
        """
        merged = merge_options(DEFAULT_GET_ALL_BOARD_OPTIONS, options)
        data = await self.client.get('boards', params=merged.to_params())
        return self._to_models(data)

    async def get(self, board_id: str, options: OptionsInput = None) -> Board:
        """
        Get one board.

        Defaults: fields=name.
        """
        merged = merge_options(DEFAULT_GET_BOARD_OPTIONS, options)
        data = await self.client.get(resource_path('boards', board_id), params=merged.to_params())
        return self._to_model(data)

    async def create(self, name: str) -> Board:
        """
        Create a board.

        Args:
            name: Board name, sent as {"name": name}
        """
        data = await self.client.post('boards', {'name': name})
        logger.info(f"Created board '{name}'")
        return self._to_model(data)

    async def delete(self, board_id: str) -> Any:
        """
        Delete a board.

        Returns:
            The response payload unmodified (None when the API sends no body)
        """
        return await self.client.delete(resource_path('boards', board_id))

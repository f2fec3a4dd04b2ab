"""
Card service for board cards

Handles card retrieval, editing and batch creation, plus card attachments.
Card comments hang off this service as `comments`.
"""
from typing import Any, Dict, List, Union

from api.client import APIClient
from models.attachment import Attachment
from models.batch import BatchResult
from models.card import Card
from models.options import (
    DEFAULT_GET_ATTACHMENT_OPTIONS,
    DEFAULT_GET_CARD_OPTIONS,
    DEFAULT_GET_CARDS_OPTIONS,
    OptionsInput,
    merge_options,
)
from services.base_service import BaseService, resource_path, to_payload
from services.comment_service import CommentService

CardInput = Union[Card, Dict[str, Any]]


class CardService(BaseService[Card]):
    """
    Accessors under /boards/{board_id}/cards.

    Features:
    - Single card and card list retrieval with field selection
    - Create, edit, delete and batch create
    - Attachment listing
    - Nested comment accessors via `comments`
    """

    def __init__(self, client: APIClient):
        super().__init__(Card, client)
        self.comments = CommentService(client)

    async def get(self, board_id: str, card_id: str, options: OptionsInput = None) -> Card:
        """
        Get one card.

        Defaults: fields=name,board_id,card_id.

        Args:
            board_id: Board ID
            card_id: Card ID
            options: GetCardOptions or dict

        Returns:
            Card with the requested fields
        """
        merged = merge_options(DEFAULT_GET_CARD_OPTIONS, options)
        data = await self.client.get(
            resource_path('boards', board_id, 'cards', card_id),
            params=merged.to_params()
        )
        return self._to_model(data)

    async def edit(self, board_id: str, card_id: str, card: CardInput) -> Card:
        data = await self.client.post(resource_path('boards', board_id, 'cards', card_id), to_payload(card))
        return self._to_model(data)

    async def delete(self, board_id: str, card_id: str) -> Any:
        return await self.client.delete(resource_path('boards', board_id, 'cards', card_id))

    async def get_attachments(self, board_id: str, card_id: str, options: OptionsInput = None) -> List[Attachment]:
        """
        List the attachments of a card.

        Defaults: page=1, per_page=50, sort=asc, fields=filename,mime_type.
        """
        merged = merge_options(DEFAULT_GET_ATTACHMENT_OPTIONS, options)
        data = await self.client.get(
            resource_path('boards', board_id, 'cards', card_id, 'attachments'),
            params=merged.to_params()
        )
        return self._to_models(data, Attachment)

    async def get_all(self, board_id: str, options: OptionsInput = None) -> List[Card]:
        """
        List the cards of a board.

        Defaults: page=1, per_page=50, archived=false, sort=asc,
        fields=name,board_id,column_id.

        Args:
            board_id: Board ID
            options: GetCardsOptions or dict; omitted fields keep their default

        Returns:
            Cards in API order
        """
        merged = merge_options(DEFAULT_GET_CARDS_OPTIONS, options)
        data = await self.client.get(resource_path('boards', board_id, 'cards'), params=merged.to_params())
        return self._to_models(data)

    async def create(self, board_id: str, card: CardInput) -> Card:
        data = await self.client.post(resource_path('boards', board_id, 'cards'), to_payload(card))
        self.logger.debug("Card created", board_id=board_id)
        return self._to_model(data)

    async def batch_create(
        self,
        board_id: str,
        cards: List[CardInput],
        send_notifications: bool = False
    ) -> BatchResult[Card]:
        """
        Create several cards in one request.

        Args:
            board_id: Board ID
            cards: New cards as models or dicts
            send_notifications: Whether the API notifies board members

        Returns:
            BatchResult; partial failure is reported in `errors`, not raised
        """
        return await self._batch_create(
            resource_path('boards', board_id, 'cards', 'batch'),
            'cards',
            cards,
            send_notifications
        )

"""
Comment service for card comments
"""
from typing import Any, Dict, List, Union

from api.client import APIClient
from models.batch import BatchResult
from models.comment import Comment
from models.options import DEFAULT_GET_COMMENT_OPTIONS, OptionsInput, merge_options
from services.base_service import BaseService, resource_path, to_payload

CommentInput = Union[Comment, Dict[str, Any]]


class CommentService(BaseService[Comment]):
    """Accessors under /boards/{board_id}/cards/{card_id}/comments."""

    def __init__(self, client: APIClient):
        super().__init__(Comment, client)

    @staticmethod
    def _endpoint(board_id: str, card_id: str, *rest: str) -> str:
        return resource_path('boards', board_id, 'cards', card_id, 'comments', *rest)

    async def get(self, board_id: str, card_id: str, options: OptionsInput = None) -> List[Comment]:
        """
        List the comments of a card.

        Defaults: page=1, per_page=50, sort=asc, fields=text.

        Args:
            board_id: Board ID
            card_id: Card ID
            options: GetCommentOptions or dict; omitted fields keep their default

        Returns:
            Comments in API order
        """
        merged = merge_options(DEFAULT_GET_COMMENT_OPTIONS, options)
        data = await self.client.get(self._endpoint(board_id, card_id), params=merged.to_params())
        return self._to_models(data)

    async def create(self, board_id: str, card_id: str, comment: CommentInput) -> Comment:
        data = await self.client.post(self._endpoint(board_id, card_id), to_payload(comment))
        return self._to_model(data)

    async def edit(self, board_id: str, card_id: str, comment_id: str, comment: CommentInput) -> Comment:
        data = await self.client.post(self._endpoint(board_id, card_id, comment_id), to_payload(comment))
        return self._to_model(data)

    async def delete(self, board_id: str, card_id: str, comment_id: str) -> Any:
        return await self.client.delete(self._endpoint(board_id, card_id, comment_id))

    async def batch_create(
        self,
        board_id: str,
        card_id: str,
        comments: List[CommentInput],
        send_notifications: bool = False
    ) -> BatchResult[Comment]:
        """POST .../comments/batch; rejected comments are reported in the result."""
        return await self._batch_create(
            self._endpoint(board_id, card_id, 'batch'),
            'comments',
            comments,
            send_notifications
        )

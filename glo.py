"""
Glo Boards API client

Entry point of the library: one GloClient per token exposes the board and
user namespaces, all sharing a single configured APIClient.

Usage:
    async with create_client("my-token") as glo:
        boards = await glo.boards.get_all()
        cards = await glo.boards.cards.get_all(boards[0].id, {'per_page': 10})
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from api.client import APIClient
from config import GloConfig
from services.board_service import BoardService
from services.user_service import UserService

logger = logging.getLogger(f'{__name__}.GloClient')


class GloClient:
    """
    Handle exposing the Glo API namespaces.

    Namespaces:
    - boards (with boards.labels, boards.columns, boards.cards, boards.cards.comments)
    - users
    - get_all_boards, a shortcut for boards.get_all
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        config: Optional[GloConfig] = None,
        api_client: Optional[APIClient] = None
    ):
        """
        Initialize the client and its resource namespaces.

        Args:
            token: Authorization header value, sent verbatim (falls back to GLO_API_TOKEN)
            base_url: Override the API base URL
            config: Explicit configuration (defaults to the global config)
            api_client: Pre-built API client, mainly for tests

        Raises:
            ConfigurationException: If no token is given or configured
        """
        self.api = api_client or APIClient(token=token, base_url=base_url, config=config)
        self.boards = BoardService(self.api)
        self.users = UserService(self.api)
        self.get_all_boards = self.boards.get_all

        logger.debug(f"GloClient initialized for {self.api.base_url}")

    async def close(self) -> None:
        """Release the underlying HTTP session."""
        await self.api.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def create_client(token: str, base_url: Optional[str] = None, config: Optional[GloConfig] = None) -> GloClient:
    """
    Create a client bound to one token.

    Args:
        token: Authorization header value, sent verbatim
        base_url: Override the API base URL
        config: Explicit configuration (defaults to the global config)

    Returns:
        GloClient ready for use; call close() or use `async with` when done
    """
    return GloClient(token=token, base_url=base_url, config=config)


@asynccontextmanager
async def get_glo_client(
    token: Optional[str] = None,
    base_url: Optional[str] = None,
    config: Optional[GloConfig] = None
) -> AsyncIterator[GloClient]:
    """
    Get a Glo client as async context manager.

    Takes the same arguments as create_client; the token falls back to
    GLO_API_TOKEN when omitted.

    Usage:
        async with get_glo_client() as glo:
            user = await glo.users.get_current_user()
    """
    client = GloClient(token=token, base_url=base_url, config=config)
    try:
        yield client
    finally:
        await client.close()

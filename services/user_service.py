"""
User service for the authenticated Glo account
"""
from api.client import APIClient
from models.options import DEFAULT_GET_USER_OPTIONS, OptionsInput, merge_options
from models.user import User
from services.base_service import BaseService


class UserService(BaseService[User]):
    """Accessors under /user."""

    def __init__(self, client: APIClient):
        super().__init__(User, client)

    async def get_current_user(self, options: OptionsInput = None) -> User:
        """
        Get the user the token belongs to.

        Defaults: fields=username.
        """
        merged = merge_options(DEFAULT_GET_USER_OPTIONS, options)
        data = await self.client.get('user', params=merged.to_params())
        return self._to_model(data)

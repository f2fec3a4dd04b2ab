"""
Base service class for Glo resource accessors

Provides the shared request helpers every resource service builds on:
payload serialization, model conversion and batch result parsing.
"""
from typing import Optional, Type, TypeVar, Generic, Dict, Any, List
from urllib.parse import quote

from pydantic import BaseModel

from api.client import APIClient
from models.base import GloBaseModel
from models.batch import BatchResult
from utils.logging import get_contextual_logger

T = TypeVar('T', bound=GloBaseModel)
M = TypeVar('M', bound=GloBaseModel)


def to_payload(data: Any) -> Any:
    """
    Convert a caller-supplied body to JSON-ready data.

    Dicts and other plain values pass through verbatim; pydantic models are
    dumped without their unset (None) fields.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode='json', exclude_none=True)
    if isinstance(data, (list, tuple)):
        return [to_payload(item) for item in data]
    return data


def resource_path(*segments: Any) -> str:
    """
    Join path segments into an endpoint, escaping each one.

    IDs are quoted with no safe characters, so an ID containing '/' or '?'
    stays a single path segment.
    """
    return '/'.join(quote(str(segment), safe='') for segment in segments)


class BaseService(Generic[T]):
    """
    Base service class shared by all Glo resource services.

    Features:
    - Generic type support for any GloBaseModel subclass
    - Explicit APIClient injection (no global client)
    - Response conversion into the declared model
    - Batch create with per-item success and failure reporting
    """

    def __init__(self, model_class: Type[T], client: APIClient):
        """
        Initialize base service.

        Args:
            model_class: Pydantic model class returned by this service
            client: Configured API client shared by the whole namespace
        """
        self.model_class = model_class
        self.client = client
        self.logger = get_contextual_logger(f'{__name__}.{self.__class__.__name__}')

    def _to_model(self, data: Dict[str, Any], model_class: Optional[Type[M]] = None) -> M:
        """Convert one response object into a model."""
        return (model_class or self.model_class).from_api_data(data)

    def _to_models(self, data: List[Dict[str, Any]], model_class: Optional[Type[M]] = None) -> List[M]:
        """Convert a list response into models, keeping order."""
        return [self._to_model(item, model_class) for item in data]

    async def _batch_create(
        self,
        endpoint: str,
        key: str,
        items: List[Any],
        send_notifications: bool = False
    ) -> BatchResult[T]:
        """
        POST a batch of new entities.

        Args:
            endpoint: Batch endpoint path
            key: Body key holding the items ('cards', 'columns', 'comments')
            items: New entities as models or dicts
            send_notifications: Whether the API notifies board members

        Returns:
            BatchResult with the created entities and the rejected items
        """
        payload = {key: to_payload(list(items)), 'send_notifications': send_notifications}
        response = await self.client.post(endpoint, payload)
        result = BatchResult[self.model_class].model_validate(response)

        if result.has_errors:
            self.logger.warning(
                f"Batch create of {key} partially failed",
                endpoint=endpoint,
                successful=len(result.successful),
                failed=len(result.errors)
            )
        else:
            self.logger.debug(f"Batch created {len(result.successful)} {key}", endpoint=endpoint)

        return result

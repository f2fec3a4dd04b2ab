"""
API client for the Glo Boards API

aiohttp-based HTTP client bound to a fixed base URL and Authorization header.
Every call is one independent request/response round trip.
"""
import aiohttp
import json
import logging
from typing import Optional, List, Dict, Any, Tuple
from urllib.parse import quote

from config import GloConfig, get_config
from constants import LOG_TRUNCATE_LENGTH
from exceptions import APIException, ConfigurationException

logger = logging.getLogger(f'{__name__}.APIClient')


def _truncate(data: Any) -> str:
    """Render response data for debug logging, truncated."""
    data_str = str(data)
    if len(data_str) > LOG_TRUNCATE_LENGTH:
        return data_str[:LOG_TRUNCATE_LENGTH] + "..."
    return data_str


def _parse_body(text: str) -> Any:
    """
    Decode a successful response body.

    JSON bodies are parsed; an empty body gives None and any other text is
    returned as-is.
    """
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


class APIClient:
    """
    Async HTTP client for Glo API communication.

    Features:
    - One pooled aiohttp session, created on first use
    - Static Authorization header, sent verbatim
    - Non-2xx responses raised as APIException with status and body
    - Transport errors propagated unchanged
    - Debug logging with response truncation

    The base URL, token and headers are fixed at construction, so concurrent
    requests through one client share no mutable request state.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        config: Optional[GloConfig] = None
    ):
        """
        Initialize API client with configuration.

        Args:
            token: Authorization header value (falls back to GLO_API_TOKEN)
            base_url: Override default API URL from config
            config: Explicit configuration (defaults to the global config)

        Raises:
            ConfigurationException: If no token is given or configured
        """
        config = config or get_config()
        self._api_token = token if token is not None else config.api_token
        self._base_url = base_url or config.base_url
        self._timeout = config.request_timeout
        self._user_agent = config.user_agent
        self._session: Optional[aiohttp.ClientSession] = None

        if self._api_token is None:
            raise ConfigurationException("GLO_API_TOKEN must be configured or a token passed explicitly")

        logger.debug(f"APIClient initialized with base_url: {self._base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_token(self) -> str:
        return self._api_token

    @property
    def headers(self) -> Dict[str, str]:
        """Get headers with authentication and content type."""
        return {
            'Authorization': self._api_token,
            'Content-Type': 'application/json',
            'User-Agent': self._user_agent
        }

    def _build_url(self, endpoint: str) -> str:
        """
        Build complete API URL from an endpoint path.

        Args:
            endpoint: API endpoint path, e.g. 'boards/abc/cards'

        Returns:
            Complete URL for API request
        """
        # Handle already complete URLs
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        return f"{self._base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def _add_params(self, url: str, params: Optional[List[Tuple[str, Any]]] = None) -> str:
        """
        Add query parameters to URL, preserving their order.

        Commas are left unescaped so `fields` lists stay readable.

        Args:
            url: Base URL
            params: List of (key, value) tuples

        Returns:
            URL with query parameters appended
        """
        if not params:
            return url

        param_str = "&".join(f"{key}={quote(str(value), safe=',')}" for key, value in params)
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{param_str}"

    async def _ensure_session(self) -> None:
        """Ensure aiohttp session exists and is not closed."""
        # No await between the check and the assignment: concurrent first
        # calls end up sharing one session.
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=100,  # Total connection pool size
                limit_per_host=30,  # Connections per host
                ttl_dns_cache=300,  # DNS cache TTL
                use_dns_cache=True
            )

            session_kwargs: Dict[str, Any] = {}
            if self._timeout is not None:
                session_kwargs['timeout'] = aiohttp.ClientTimeout(total=self._timeout)

            self._session = aiohttp.ClientSession(
                headers=self.headers,
                connector=connector,
                **session_kwargs
            )

            logger.debug("Created new aiohttp session with connection pooling")

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[List[Tuple[str, Any]]] = None,
        data: Optional[Any] = None
    ) -> Any:
        """
        Send one request and return the parsed JSON body.

        Args:
            method: HTTP method
            endpoint: API endpoint
            params: Query parameters as ordered (key, value) tuples
            data: JSON request payload; omitted from the request when None

        Returns:
            Parsed JSON response, the raw text for a non-JSON body,
            or None for an empty body

        Raises:
            APIException: For any non-2xx response
            aiohttp.ClientError: For network failures, unchanged
        """
        url = self._add_params(self._build_url(endpoint), params)

        await self._ensure_session()

        kwargs: Dict[str, Any] = {}
        if data is not None:
            kwargs['json'] = data

        try:
            logger.debug(f"{method}: {endpoint} params: {params} data: {data}")

            async with self._session.request(method, url, **kwargs) as response:
                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    logger.error(f"{method} error {response.status}: {url} - {error_text}")
                    raise APIException(
                        f"{method} request failed with status {response.status}: {error_text}",
                        status=response.status,
                        body=error_text,
                        method=method,
                        url=url
                    )

                result = _parse_body(await response.text())
                logger.debug(f"{method} Response: {_truncate(result)}")
                return result

        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for {method} {url}: {e}")
            raise

    async def get(
        self,
        endpoint: str,
        params: Optional[List[Tuple[str, Any]]] = None
    ) -> Any:
        """
        Make GET request to API.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            JSON response data

        Raises:
            APIException: For HTTP errors
        """
        return await self._request('GET', endpoint, params=params)

    async def post(self, endpoint: str, data: Any) -> Any:
        """
        Make POST request to API with a JSON body.

        Args:
            endpoint: API endpoint
            data: Request payload, sent as-is

        Returns:
            JSON response data

        Raises:
            APIException: For HTTP errors
        """
        return await self._request('POST', endpoint, data=data)

    async def delete(self, endpoint: str) -> Any:
        """
        Make DELETE request to API. No request body is sent.

        Args:
            endpoint: API endpoint

        Returns:
            JSON response data as returned by the API (None for an empty body)

        Raises:
            APIException: For HTTP errors
        """
        return await self._request('DELETE', endpoint)

    async def close(self) -> None:
        """Close the HTTP session and clean up resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup."""
        await self.close()

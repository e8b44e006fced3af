"""Rate-limited HTTP client for the Crowdin REST API."""

import asyncio
import json
import time
from typing import Any, Optional

import aiohttp
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..errors import CrowdinAPIError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class RateLimitedClient:
    """HTTP client with polite rate limiting for the Crowdin API.

    Implements rate limiting, bearer authentication and automatic retries
    of connection failures and timeouts.
    """

    def __init__(
        self,
        token: str,
        requests_per_minute: int = 240,
        timeout: int = 30,
        max_retries: int = 3,
        user_agent: str = "crowdin-metadata/1.0",
    ):
        """Initialize the rate-limited client.

        Args:
            token: Crowdin personal access token
            requests_per_minute: Maximum requests per minute (default: 240)
            timeout: Request timeout in seconds (default: 30)
            max_retries: Maximum attempts for failed requests
            user_agent: User-Agent header for requests
        """
        self.token = token
        self.requests_per_minute = requests_per_minute
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_retries = max_retries
        self.user_agent = user_agent

        self.retry_wait = wait_exponential(multiplier=1, min=2, max=30)
        self._min_interval = 60.0 / requests_per_minute
        self._last_request_time: float = 0
        self._lock = asyncio.Lock()
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "RateLimitedClient":
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _ensure_session(self) -> None:
        """Ensure HTTP session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={
                    "User-Agent": self.user_agent,
                    "Authorization": f"Bearer {self.token}",
                    "Accept": "application/json",
                },
            )

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _apply_rate_limit(self) -> None:
        """Apply rate limiting by waiting if necessary."""
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_request_time
            if elapsed < self._min_interval:
                wait_time = self._min_interval - elapsed
                logger.debug(f"Rate limiting: waiting {wait_time:.2f}s")
                await asyncio.sleep(wait_time)
            self._last_request_time = time.monotonic()

    async def get_json(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Fetch a URL and decode its JSON body, retrying transient failures.

        Args:
            url: URL to fetch
            params: Query parameters; None values are dropped

        Returns:
            Decoded JSON response

        Raises:
            CrowdinAPIError: If the API answers with a non-2xx status
            aiohttp.ClientError: If the request fails after retries
            asyncio.TimeoutError: If the request times out after retries
        """
        query = _encode_params(params)
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception_type(
                (aiohttp.ClientConnectionError, asyncio.TimeoutError)
            ),
            reraise=True,
        ):
            with attempt:
                return await self._get_json_once(url, query)

    async def _get_json_once(self, url: str, query: dict[str, str]) -> Any:
        await self._ensure_session()
        await self._apply_rate_limit()

        logger.debug(f"Fetching: {url} {query}")

        async with self._session.get(url, params=query) as response:
            text = await response.text()
            body = _decode(text)
            if response.status >= 400:
                raise CrowdinAPIError.from_response(response.status, body)
            logger.debug(f"Fetched {len(text)} bytes from {url}")
            return body


def _encode_params(params: Optional[dict[str, Any]]) -> dict[str, str]:
    """Drop unset parameters and encode booleans the way Crowdin expects."""
    query: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "1" if value else "0"
        else:
            query[key] = str(value)
    return query


def _decode(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text

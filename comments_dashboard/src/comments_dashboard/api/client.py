"""
HTTP client for the remote comments/users API.

This module provides a client for the two collections the dashboard reads,
including error handling, optional retry logic and payload validation.
"""

import asyncio
from typing import Any, List, Optional

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from ..config import get_settings
from ..models import Address, CommentRecord, UserRecord


class CommentPayload(BaseModel):
    """Response model for a single comment."""
    postId: int
    id: Optional[int] = None
    name: str
    email: str
    body: str

    def to_record(self) -> CommentRecord:
        return CommentRecord(
            post_id=self.postId,
            name=self.name,
            email=self.email,
            comment=self.body,
        )


class AddressPayload(BaseModel):
    """Response model for a user's address."""
    street: str
    suite: str
    city: str
    zipcode: str


class UserPayload(BaseModel):
    """Response model for a single user."""
    id: int
    name: str
    username: str
    email: str
    phone: str
    address: AddressPayload

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=self.id,
            name=self.name,
            username=self.username,
            email=self.email,
            phone=self.phone,
            address=Address(**self.address.model_dump()),
        )


class APIError(Exception):
    """Custom exception for API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class PlaceholderAPIClient:
    """
    Async HTTP client for the comments/users API.

    Each call opens a short-lived ``httpx.AsyncClient``; the dashboard issues
    one read per view load so there is no connection to keep warm.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        retries: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            retries: Retry attempts on transport errors and 5xx responses
            transport: Optional httpx transport (used to fake the API in tests)
        """
        settings = get_settings()
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout or settings.api_timeout
        self.retries = settings.api_retries if retries is None else retries
        self.transport = transport

        # Ensure base URL ends with /
        if not self.base_url.endswith('/'):
            self.base_url += '/'

        logger.info(f"Initialized PlaceholderAPIClient with base_url: {self.base_url}")

    async def _get_json(self, endpoint: str, failure_message: str) -> Any:
        """
        GET an endpoint and decode its JSON body, retrying if configured.

        Args:
            endpoint: Path relative to the base URL
            failure_message: Human-readable message used for HTTP failures

        Returns:
            Decoded JSON body

        Raises:
            APIError: If the request fails after all retries
        """
        url = f"{self.base_url}{endpoint.lstrip('/')}"

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            for attempt in range(self.retries + 1):
                try:
                    logger.debug(f"Making GET request to {url} (attempt {attempt + 1})")
                    response = await client.get(url)
                except httpx.HTTPError as e:
                    if attempt < self.retries:
                        wait_time = 2 ** attempt
                        logger.warning(f"Request failed, retrying in {wait_time}s: {str(e)}")
                        await asyncio.sleep(wait_time)
                        continue
                    raise APIError(f"{failure_message}: {str(e) or type(e).__name__}")

                if response.is_success:
                    logger.debug(f"Request successful: GET {url}")
                    try:
                        return response.json()
                    except ValueError as e:
                        raise APIError(f"{failure_message}: invalid JSON ({str(e)})", response.status_code)

                if response.status_code >= 500 and attempt < self.retries:
                    wait_time = 2 ** attempt
                    logger.warning(f"HTTP {response.status_code} from {url}, retrying in {wait_time}s")
                    await asyncio.sleep(wait_time)
                    continue

                raise APIError(f"{failure_message} (HTTP {response.status_code})", response.status_code)

        raise APIError(f"{failure_message}: request failed after {self.retries} retries")

    async def get_comments(self) -> List[CommentRecord]:
        """
        Retrieve every comment.

        Returns:
            List[CommentRecord]: Comments in response order

        Raises:
            APIError: If the request fails or the payload is malformed
        """
        data = await self._get_json("comments", "Failed to fetch comments")
        if not isinstance(data, list):
            raise APIError("Failed to fetch comments: expected a JSON array")

        try:
            return [CommentPayload(**item).to_record() for item in data]
        except (ValidationError, TypeError) as e:
            raise APIError(f"Failed to parse comments response: {str(e)}")

    async def get_users(self) -> List[UserRecord]:
        """
        Retrieve every user.

        Returns:
            List[UserRecord]: Users in response order

        Raises:
            APIError: If the request fails or the payload is malformed
        """
        data = await self._get_json("users", "Failed to fetch users")
        if not isinstance(data, list):
            raise APIError("Failed to fetch users: expected a JSON array")

        try:
            return [UserPayload(**item).to_record() for item in data]
        except (ValidationError, TypeError) as e:
            raise APIError(f"Failed to parse users response: {str(e)}")

"""Async Jikan API client.

This module fetches top-list pages and single anime from the Jikan v4 API
with aiohttp, applying a client-side rate limit with aiolimiter. Each call
is a single attempt; transport failures surface as ``NetworkError`` and
malformed payloads as ``DecodeError``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any
from urllib.parse import urljoin

import aiohttp
from aiolimiter import AsyncLimiter

from anifeed.config.models.api_settings import JikanSettings
from anifeed.shared.constants import ErrorMessages, HTTPStatusCodes, JikanConfig
from anifeed.shared.errors import DecodeError, ErrorCode, ErrorContext, NetworkError
from anifeed.shared.logging import log_api_call
from anifeed.shared.models.jikan import (
    AnimePageRecord,
    AnimeRecord,
    parse_detail_payload,
)

logger = logging.getLogger(__name__)


class JikanClient:
    """Asynchronous Jikan API client using aiohttp.

    The HTTP session is created lazily on first use unless one is injected;
    an injected session is left open by ``close()``.
    """

    def __init__(
        self,
        settings: JikanSettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Jikan settings (defaults apply when None)
            session: Optional externally managed aiohttp session
        """
        self.settings = settings or JikanSettings()
        self._session = session
        self._owns_session = session is None
        self._rate_limiter = AsyncLimiter(
            self.settings.rate_limit_per_second,
            JikanConfig.RATE_LIMIT_WINDOW,
        )

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            headers = {**JikanConfig.HEADERS, "User-Agent": self.settings.user_agent}
            self._session = aiohttp.ClientSession(headers=headers)
            self._owns_session = True
        return self._session

    async def fetch_list_page(self, page: int, limit: int) -> AnimePageRecord:
        """Fetch one page of the top anime list.

        Args:
            page: 1-based page number
            limit: Items per page

        Returns:
            Parsed page with its records and ``has_next_page`` flag

        Raises:
            NetworkError: Host unreachable, timeout or non-2xx status
            DecodeError: Body is not JSON or lacks required fields
        """
        url = urljoin(self.settings.base_url, JikanConfig.TOP_ANIME_ENDPOINT)
        payload = await self._get_json(url, {"page": page, "limit": limit})
        return AnimePageRecord.from_dict(payload, url)

    async def fetch_detail(self, anime_id: int) -> AnimeRecord:
        """Fetch a single anime by MyAnimeList id.

        Raises:
            NetworkError: Host unreachable, timeout or non-2xx status
            DecodeError: Body is not JSON or lacks required fields
        """
        endpoint = JikanConfig.ANIME_DETAIL_ENDPOINT.format(anime_id=anime_id)
        url = urljoin(self.settings.base_url, endpoint)
        payload = await self._get_json(url)
        return parse_detail_payload(payload, url)

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Perform one rate-limited GET and return the decoded JSON body."""
        session = self._get_session()
        timeout = aiohttp.ClientTimeout(total=self.settings.timeout)
        context = ErrorContext(operation="jikan_get", additional_data={"url": url})
        start_time = time.perf_counter()

        async with self._rate_limiter:
            try:
                async with session.get(url, params=params, timeout=timeout) as response:
                    status = response.status
                    body = await response.text()
            except asyncio.TimeoutError as e:
                raise NetworkError(
                    ErrorCode.API_TIMEOUT,
                    ErrorMessages.TIMEOUT.format(url=url, timeout=self.settings.timeout),
                    context,
                    original_error=e,
                ) from e
            except aiohttp.ClientError as e:
                raise NetworkError(
                    ErrorCode.NETWORK_ERROR,
                    ErrorMessages.CONNECTION_FAILED.format(url=url, reason=e),
                    context,
                    original_error=e,
                ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_api_call(
            logger,
            endpoint=url,
            status_code=status,
            duration_ms=duration_ms,
            context={"params": params or {}},
        )

        if not HTTPStatusCodes.is_success(status):
            raise self._status_error(status, url, context)

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(
                ErrorCode.DECODE_ERROR,
                ErrorMessages.INVALID_JSON.format(url=url, reason=e),
                context,
                original_error=e,
            ) from e

    @staticmethod
    def _status_error(status: int, url: str, context: ErrorContext) -> NetworkError:
        if status == HTTPStatusCodes.TOO_MANY_REQUESTS:
            return NetworkError(
                ErrorCode.API_RATE_LIMIT,
                ErrorMessages.RATE_LIMITED.format(url=url),
                context,
            )
        if HTTPStatusCodes.is_server_error(status):
            return NetworkError(
                ErrorCode.API_SERVER_ERROR,
                ErrorMessages.SERVER_ERROR.format(status_code=status, url=url),
                context,
            )
        return NetworkError(
            ErrorCode.API_REQUEST_FAILED,
            ErrorMessages.CLIENT_ERROR.format(url=url, status_code=status),
            context,
        )

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("Closed Jikan HTTP session")
        self._session = None

    async def __aenter__(self) -> JikanClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

"""Fetch recipe search pages over HTTP."""

import asyncio
from typing import Optional

import aiohttp

from dinner_bot.utils.config import config
from dinner_bot.utils.errors import TransportError
from dinner_bot.utils.logger import logger


async def fetch_search_page(url: str, timeout: Optional[float] = None) -> str:
    """Download a search page and return its markup.

    Single GET, no retries and no custom headers.

    Args:
        url: Search URL built by build_search_url.
        timeout: Total timeout in seconds. None uses HTTP_TIMEOUT_SECONDS,
            0 waits indefinitely.

    Returns:
        Response body as text.

    Raises:
        TransportError: On connection errors, timeouts and non-2xx statuses.
    """
    if timeout is None:
        timeout = config.HTTP_TIMEOUT_SECONDS
    client_timeout = aiohttp.ClientTimeout(total=timeout or None)

    logger.info(f"Querying: {url}")
    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.warning(f"Problem with the request to {url}: {e!r}")
        raise TransportError(url, repr(e)) from e

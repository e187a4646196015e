"""HTTP session utilities for vsdown.

Creates the configured aiohttp session and translates aiohttp failures
into the vsdown error taxonomy.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from vsdown.constants import USER_AGENT
from vsdown.exceptions import HttpStatusError, NetworkError
from vsdown.types import GlobalConfig


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        global_config: Global configuration dictionary

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout_seconds = global_config["network"]["timeout_seconds"]
    timeout = aiohttp.ClientTimeout(
        total=timeout_seconds * 60,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )

    async with aiohttp.ClientSession(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    ) as session:
        yield session


@asynccontextmanager
async def checked_get(
    session: aiohttp.ClientSession, url: str
) -> AsyncIterator[aiohttp.ClientResponse]:
    """GET ``url`` and yield the response once its status is 2xx.

    Errors raised while the caller consumes the body are translated too.

    Raises:
        NetworkError: On connection failures and timeouts
        HttpStatusError: On a non-2xx status

    """
    try:
        async with session.get(url) as response:
            if not 200 <= response.status < 300:  # noqa: PLR2004
                raise HttpStatusError(response.status, url)
            yield response
    except aiohttp.ClientResponseError as e:
        raise HttpStatusError(e.status, url) from e
    except (aiohttp.ClientError, TimeoutError) as e:
        raise NetworkError(str(e) or type(e).__name__, target=url) from e

"""Piwigo web service client."""
from __future__ import annotations

import logging

import httpx

from .exceptions import FetchError

logger = logging.getLogger(__name__)

CATEGORY_LIST_PATH = '/ws.php?format=json&method=pwg.categories.getList&public=true&thumbnail_size=xlarge'
DEFAULT_TIMEOUT = 5.0


def build_endpoint(base_url: str) -> str:
    """Append the category-list call to ``base_url``.

    No slash normalization is done; a trailing slash yields ``//ws.php``.
    """
    return base_url + CATEGORY_LIST_PATH


def _error_messages(exc: httpx.HTTPError) -> list[str]:
    messages = [str(exc).strip()]
    cause = exc.__cause__ or exc.__context__
    if cause is not None and str(cause).strip() and str(cause).strip() not in messages:
        messages.append(str(cause).strip())
    return [m for m in messages if m] or [type(exc).__name__]


def fetch_categories(
    base_url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Fetch the public category list of a Piwigo gallery.

    Args:
        base_url: Gallery root, already sanitized and validated
        client: Optional client to reuse; it is not closed here
        timeout: Timeout in seconds for a client created by this call

    Returns:
        The raw response body, unparsed

    Raises:
        FetchError: On any transport failure (DNS, refused connection, TLS, timeout)
    """
    endpoint = build_endpoint(base_url)
    logger.debug("Fetching Piwigo categories from %s", endpoint)

    try:
        if client is not None:
            response = client.get(endpoint)
        else:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.get(endpoint)
    except httpx.HTTPError as exc:
        logger.warning("Piwigo request to %s failed: %s", endpoint, exc)
        raise FetchError(_error_messages(exc)) from exc

    if not response.is_success:
        logger.warning("Piwigo returned HTTP %s for %s", response.status_code, endpoint)

    return response.text

"""
HTTP reachability probe.

Single best-effort HEAD request: the answer is a boolean and every failure
(connection, timeout, bad URL or host name, 4xx/5xx) is simply False.
Redirects are not followed so a redirecting host counts as up.
"""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0


def ping(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> bool:
    """
    Return True if the URL answers a HEAD request with a status below 400.

    Blocking. No retries.
    """
    try:
        if client is not None:
            response = client.head(url, follow_redirects=False, timeout=timeout)
        else:
            response = httpx.head(url, follow_redirects=False, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        logger.debug("Ping %s failed: %s", url, e)
        return False

    if response.status_code >= 400:
        logger.debug("Ping %s returned %d", url, response.status_code)
        return False

    return True

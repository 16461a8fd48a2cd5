"""
Session utilities for the source API.

This module creates and configures the httpx client used to talk to the
release-hosting service.
"""

import importlib.util
import logging
from typing import Dict, Optional

import httpx
from httpx import HTTPTransport

from .constants import CONNECT_TIMEOUT, DEFAULT_TIMEOUT

# Connection retries are disabled: every request is a single attempt
MAX_RETRIES = 0


def create_session(
    headers: Optional[Dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = 10,
    base_url: str = "",
) -> httpx.Client:
    """
    Create an httpx client with connection pooling and timeouts.

    Args:
        headers: Default headers sent with every request
        timeout: Read/write/pool timeout in seconds
        max_connections: Maximum number of connections in the pool
        base_url: Base URL prepended to relative request URLs

    Returns:
        Configured httpx.Client that follows redirects

    Example:
        >>> client = create_session(headers={"Accept": "application/json"})
        >>> response = client.get("https://api.github.com/")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(1, max_connections // 2),
    )
    timeout_config = httpx.Timeout(timeout, connect=CONNECT_TIMEOUT)

    transport = HTTPTransport(limits=limits, retries=MAX_RETRIES)

    use_http2 = importlib.util.find_spec("h2") is not None
    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    return httpx.Client(
        base_url=base_url,
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
        headers=headers or {},
        http2=use_http2,
    )


__all__ = ["create_session"]

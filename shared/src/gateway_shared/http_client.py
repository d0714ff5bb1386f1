"""Shared async HTTP client factory."""
import httpx


def create_http_client(timeout: float = 30.0) -> httpx.AsyncClient:
    """Create an async HTTP client with a single timeout and no transport-level retries.

    One client is built per process and reused across requests, so connection
    pooling is left to httpx.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        transport=httpx.AsyncHTTPTransport(retries=0),
    )

"""HTTP client wrapper around httpx."""
from __future__ import annotations

from typing import Any

import httpx

from selector_usage.errors import HttpStatusError, NetworkError, RequestTimeoutError


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into selector_usage exceptions."""

    def __init__(
        self,
        *,
        headers: dict[str, str] | None = None,
        connect_timeout: float = 10.0,
        request_timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            headers=headers or {},
            timeout=httpx.Timeout(
                connect=connect_timeout,
                read=request_timeout,
                write=request_timeout,
                pool=connect_timeout,
            ),
            follow_redirects=True,
            transport=transport,
        )

    def get(self, url: str) -> httpx.Response:
        """Send a GET request.

        Raises RequestTimeoutError, NetworkError for any other httpx failure,
        or HttpStatusError on a status of 400 and above.
        """
        try:
            resp = self._client.get(url)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"GET {url} timed out: {exc}", cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"GET {url} failed: {exc}", cause=exc) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # Redirect loops, undecodable bodies, malformed URLs.
            raise NetworkError(f"GET {url} failed: {exc}", cause=exc) from exc

        if resp.status_code >= 400:
            raise HttpStatusError(
                f"GET {url} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        return resp

    def get_text(self, url: str) -> str:
        return self.get(url).text

    def get_json(self, url: str) -> Any:
        return self.get(url).json()

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

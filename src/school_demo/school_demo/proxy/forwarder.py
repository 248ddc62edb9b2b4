from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
from urllib.parse import urlsplit

import requests

from ..core.constants import DEFAULT_PROXY_TIMEOUT

logger = logging.getLogger(__name__)

# RFC 7230 hop-by-hop headers plus the ones requests recomputes.
HOP_BY_HOP = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailers",
        "transfer-encoding",
        "upgrade",
        "content-length",
        "content-encoding",
        "host",
    }
)


class UpstreamError(Exception):
    """Raised when the backend cannot be reached."""


@dataclass(frozen=True)
class ProxiedResponse:
    status: int
    body: bytes
    headers: Tuple[Tuple[str, str], ...]


def _end_to_end(headers: Iterable[Tuple[str, str]]) -> Tuple[Tuple[str, str], ...]:
    return tuple((k, v) for k, v in headers if k.lower() not in HOP_BY_HOP)


class BackendForwarder:
    """Forward a request to the backend base URL, keeping path, query and body."""

    def __init__(self, backend_url: str, *, timeout: float = DEFAULT_PROXY_TIMEOUT):
        self._backend_url = backend_url.rstrip("/")
        self._host = urlsplit(self._backend_url).netloc
        self._timeout = timeout

    @property
    def backend_url(self) -> str:
        return self._backend_url

    def forward(
        self,
        *,
        method: str,
        path: str,
        query: bytes = b"",
        headers: Iterable[Tuple[str, str]] = (),
        body: Optional[bytes] = None,
    ) -> ProxiedResponse:
        url = f"{self._backend_url}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{query.decode('latin-1')}"

        out_headers = dict(_end_to_end(headers))
        # changeOrigin: the backend sees its own host.
        out_headers["Host"] = self._host

        try:
            r = requests.request(
                method,
                url,
                headers=out_headers,
                data=body or None,
                timeout=self._timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            logger.error("Proxy %s %s failed: %s", method, url, e)
            raise UpstreamError(str(e)) from e

        return ProxiedResponse(status=r.status_code, body=r.content, headers=_end_to_end(r.headers.items()))


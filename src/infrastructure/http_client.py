from __future__ import annotations

import http.client
import json
import logging
import socket
import time
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

from domain.errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Blocking one-shot GET + JSON decode. No retries."""

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self.timeout_seconds = timeout_seconds

    def build_url(self, base_url: str, params: dict[str, Any] | None = None) -> str:
        if not params:
            return base_url
        separator = "&" if "?" in base_url else "?"
        return f"{base_url}{separator}{urllib.parse.urlencode(params)}"

    def get_json(self, base_url: str, params: dict[str, Any] | None = None) -> Any:
        url = self.build_url(base_url, params)

        started = time.perf_counter()
        logger.debug("JsonHttpClient GET start url=%s", url)
        try:
            req = urllib.request.Request(url=url, headers={"Accept": "application/json"}, method="GET")
            if self.timeout_seconds is None:
                resp_ctx = urllib.request.urlopen(req)
            else:
                resp_ctx = urllib.request.urlopen(req, timeout=self.timeout_seconds)
            with resp_ctx as resp:
                raw_body = resp.read()
        except (
            socket.timeout,
            urllib.error.URLError,
            http.client.HTTPException,
            TimeoutError,
            ConnectionError,
        ) as exc:
            logger.warning("JsonHttpClient GET failed after %.2fs url=%s: %s", time.perf_counter() - started, url, exc)
            raise NetworkError(f"GET {url} failed: {exc}") from exc
        except ValueError as exc:
            # urllib rejects malformed URLs (unknown scheme, bad host) with ValueError.
            raise NetworkError(f"GET {url} failed: invalid URL: {exc}") from exc

        try:
            body = json.loads(raw_body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ParseError(f"GET {url} returned a body that is not valid JSON: {exc}") from exc

        logger.debug(
            "JsonHttpClient GET complete in %.2fs url=%s bytes=%d",
            time.perf_counter() - started,
            url,
            len(raw_body),
        )
        return body

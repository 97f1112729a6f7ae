import asyncio
import logging
import sys
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import aiohttp

from . import __version__
from .errors import HTTPException, TransportError
from .utils import to_json

_log = logging.getLogger(__name__)

__all__ = ("HTTPClient",)


class HTTPClient:
    """Posts serialized webhook payloads.

    Every call opens its own session and closes it before returning, so no
    connection outlives a single request.
    """

    def __init__(
        self,
        *,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        raise_for_status: bool = False,
        user_agent: Optional[str] = None,
    ):
        self.timeout = timeout
        self.raise_for_status = raise_for_status
        self.user_agent = user_agent or "DiscordBot (https://github.com/sawshadev/gangway, {0}) Python/{1.major}.{1.minor}.{1.micro} aiohttp/{2}".format(
            __version__, sys.version_info, aiohttp.__version__
        )
        self.req_id = 0

    @property
    def headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "User-Agent": self.user_agent}

    def _new_session(self) -> aiohttp.ClientSession:
        kwargs: Dict[str, Any] = {"connector": aiohttp.TCPConnector(force_close=True)}

        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        return aiohttp.ClientSession(**kwargs)

    @staticmethod
    def _host(url: str) -> Optional[str]:
        # the path holds the webhook token, only the host is safe to log
        try:
            return urlsplit(url).hostname
        except (TypeError, ValueError):
            return None

    def _check_url(self, url: str) -> None:
        host = self._host(url)
        scheme = urlsplit(url).scheme if host else None

        if scheme not in ("http", "https"):
            error = aiohttp.InvalidURL(url)
            raise TransportError("Invalid webhook URL", error) from error

    async def execute_webhook(self, url: str, payload: Dict[str, Any]) -> None:
        self.req_id += 1
        req_id = self.req_id

        self._check_url(url)

        body = to_json(payload).encode("utf-8")
        host = self._host(url)

        _log.debug(
            "REQUEST:%d Posting %d bytes to webhook on %s", req_id, len(body), host
        )

        try:
            async with self._new_session() as session:
                async with session.post(url, data=body, headers=self.headers) as response:
                    raw = await response.read()

                    if self.raise_for_status and response.status >= 400:
                        raise HTTPException(response, raw.decode("utf-8", "replace"))

                    _log.info(
                        "REQUEST:%d Webhook on %s answered with %d",
                        req_id,
                        host,
                        response.status,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
            _log.warning(
                "REQUEST:%d Could not deliver webhook to %s: %r", req_id, host, exc
            )
            raise TransportError(f"Could not deliver webhook: {exc!r}", exc) from exc

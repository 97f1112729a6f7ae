import asyncio
from typing import Optional

import aiohttp

from .http import HTTPClient
from .impl import WebhookMessage


class Webhook:
    """A Discord webhook bound to its URL.

    The URL carries the webhook token and is used as given.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        raise_for_status: bool = False,
        user_agent: Optional[str] = None,
    ):
        self.url = url
        self.http = HTTPClient(
            timeout=timeout, raise_for_status=raise_for_status, user_agent=user_agent
        )

    def __repr__(self) -> str:
        return "<Webhook>"

    async def send(self, message: WebhookMessage) -> None:
        """Validates ``message`` and posts it.

        Raises:
            WebhookValidationError: The message has neither content nor embeds.
            TransportError: The request could not be completed.
        """
        message.validate()

        await self.http.execute_webhook(self.url, message.to_dict())

    def execute(self, message: WebhookMessage) -> None:
        """Blocking version of :meth:`send`. Must not run inside an event loop."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise RuntimeError(
                "Webhook.execute cannot be called from a running event loop, await send() instead"
            )

        asyncio.run(self.send(message))

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ...errors import WebhookValidationError
from ...utils import filter_dict
from .embed import Embed

__all__ = ("WebhookMessage",)


class WebhookMessage:
    """A single message to be posted through a webhook.

    Setters do no validation; :meth:`validate` is called right before the
    message is sent.
    """

    def __init__(
        self,
        *,
        content: Optional[str] = None,
        username: Optional[str] = None,
        avatar_url: Optional[str] = None,
        tts: bool = False,
        embeds: Optional[Iterable[Embed]] = None,
    ):
        self.content = content
        self.username = username
        self.avatar_url = avatar_url
        self.tts = tts
        self.embeds: List[Embed] = list(embeds) if embeds is not None else []

    def __repr__(self) -> str:
        return f"<WebhookMessage content={self.content!r} embeds={len(self.embeds)}>"

    def set_content(self, content: Optional[str]) -> WebhookMessage:
        self.content = content
        return self

    def set_username(self, username: Optional[str]) -> WebhookMessage:
        self.username = username
        return self

    def set_avatar_url(self, avatar_url: Optional[str]) -> WebhookMessage:
        self.avatar_url = avatar_url
        return self

    def set_tts(self, tts: bool) -> WebhookMessage:
        self.tts = tts
        return self

    def add_embed(self, embed: Embed) -> WebhookMessage:
        self.embeds.append(embed)
        return self

    def validate(self):
        if not self.content and not self.embeds:
            raise WebhookValidationError(
                "A webhook message needs content or at least one embed"
            )

    def to_dict(self) -> Dict[str, Any]:
        payload = filter_dict(
            {
                "content": self.content,
                "username": self.username,
                "avatar_url": self.avatar_url,
                "tts": self.tts,
            }
        )

        if self.embeds:
            payload["embeds"] = [embed.to_dict() for embed in self.embeds]

        return payload

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import discord_typings as dt

from ...color import Color
from ...utils import filter_dict

__all__ = (
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedImage",
    "EmbedThumbnail",
)


@dataclass(frozen=True)
class EmbedFooter:
    text: str
    icon_url: Optional[str] = None

    def to_dict(self) -> dt.EmbedFooterData:
        return filter_dict({"text": self.text, "icon_url": self.icon_url})  # type: ignore


@dataclass(frozen=True)
class EmbedImage:
    url: str

    def to_dict(self) -> dt.EmbedImageData:
        return {"url": self.url}


@dataclass(frozen=True)
class EmbedThumbnail:
    url: str

    def to_dict(self) -> dt.EmbedThumbnailData:
        return {"url": self.url}


@dataclass(frozen=True)
class EmbedAuthor:
    name: str
    url: Optional[str] = None
    icon_url: Optional[str] = None

    def to_dict(self) -> dt.EmbedAuthorData:
        return filter_dict(  # type: ignore
            {"name": self.name, "url": self.url, "icon_url": self.icon_url}
        )


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> dt.EmbedFieldData:
        return {"name": self.name, "value": self.value, "inline": self.inline}


class Embed:
    """A rich embed attached to a webhook message.

    Every setter returns the embed itself, so calls can be chained::

        embed = Embed(title="Deploy").set_color(Color(0, 255, 0)).add_field(
            name="env", value="prod", inline=True
        )
    """

    def __init__(
        self,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        url: Optional[str] = None,
        color: Optional[Color] = None,
    ):
        self.title = title
        self.description = description
        self.url = url
        self.color = color
        self.footer: Optional[EmbedFooter] = None
        self.image: Optional[EmbedImage] = None
        self.thumbnail: Optional[EmbedThumbnail] = None
        self.author: Optional[EmbedAuthor] = None
        self.fields: List[EmbedField] = []

    def __repr__(self) -> str:
        return f"<Embed title={self.title!r} fields={len(self.fields)}>"

    def to_dict(self) -> dt.EmbedData:
        return filter_dict(  # type: ignore
            {
                "title": self.title,
                "description": self.description,
                "url": self.url,
                "color": self.color.value if self.color is not None else None,
                "footer": self.footer.to_dict() if self.footer else None,
                "image": self.image.to_dict() if self.image else None,
                "thumbnail": self.thumbnail.to_dict() if self.thumbnail else None,
                "author": self.author.to_dict() if self.author else None,
                "fields": [field.to_dict() for field in self.fields],
            }
        )

    def set_title(self, title: Optional[str]) -> Embed:
        self.title = title
        return self

    def set_description(self, description: Optional[str]) -> Embed:
        self.description = description
        return self

    def set_url(self, url: Optional[str]) -> Embed:
        self.url = url
        return self

    def set_color(self, color: Optional[Color]) -> Embed:
        self.color = color
        return self

    def set_footer(self, text: str, icon_url: Optional[str] = None) -> Embed:
        self.footer = EmbedFooter(text, icon_url)
        return self

    def set_image(self, url: str) -> Embed:
        self.image = EmbedImage(url)
        return self

    def set_thumbnail(self, url: str) -> Embed:
        self.thumbnail = EmbedThumbnail(url)
        return self

    def set_author(
        self, name: str, url: Optional[str] = None, icon_url: Optional[str] = None
    ) -> Embed:
        self.author = EmbedAuthor(name, url, icon_url)
        return self

    def add_field(self, *, name: str, value: str, inline: bool = False) -> Embed:
        self.fields.append(EmbedField(name, value, inline))
        return self
